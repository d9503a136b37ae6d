import pytest
from hypothesis import given, strategies as st

from succinctkit.dyck import DyckMatchingStructure, match_naive


def _dyck_word(choices):
    word = []
    depth = 0
    for open_next in choices:
        if open_next or depth == 0:
            word.append(1)
            depth += 1
        else:
            word.append(0)
            depth -= 1
    word.extend([0] * depth)
    return word


def test_nested_pair():
    word = [1, 1, 0, 0]
    assert match_naive(word, 0) == 3
    assert match_naive(word, 1) == 2
    assert match_naive(word, 3) == 0


def test_structure_agrees_with_naive_on_sequence():
    word = [1, 0, 1, 1, 0, 0]
    structure = DyckMatchingStructure(word)
    assert [structure.match(i) for i in range(len(word))] == [
        match_naive(word, i) for i in range(len(word))
    ]
    assert len(structure) == len(word)


def test_unmatched_parenthesis_returns_itself():
    word = [1, 1, 0]
    assert match_naive(word, 0) == 0
    assert match_naive(word, 1) == 2
    assert match_naive(word, 2) == 1


def test_lone_closing_parenthesis_returns_itself():
    structure = DyckMatchingStructure([0, 1, 0])
    assert structure.match(0) == 0
    assert structure.match(2) == 1


def test_out_of_range_index():
    with pytest.raises(IndexError):
        match_naive([1, 0], 2)
    with pytest.raises(IndexError):
        DyckMatchingStructure([1, 0]).match(-1)


@given(st.lists(st.booleans(), max_size=60))
def test_matching_invariants(choices):
    word = _dyck_word(choices)
    structure = DyckMatchingStructure(word)
    for i, bit in enumerate(word):
        j = structure.match(i)
        assert structure.match(j) == i
        assert word[j] != bit
        assert (j > i) == bool(bit)
        lo, hi = min(i, j), max(i, j)
        inner = word[lo:hi + 1]
        assert inner.count(1) == inner.count(0)