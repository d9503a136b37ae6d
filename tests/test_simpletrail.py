import pytest
from hypothesis import given
from hypothesis import strategies as st

from succinctkit.simpletrail import SimpleTrail

arcs = st.tuples(st.integers(0, 20), st.integers(0, 20))


def make(arc_list):
    trail = SimpleTrail()
    for arc in arc_list:
        trail.add_arc(arc)
    return trail


def test_add_arc_and_iterate():
    trail = make([(0, 1), (1, 2)])
    assert list(trail) == [(0, 1), (1, 2)]
    assert len(trail) == 2


def test_insert_sub_trail_in_middle():
    trail = make([(0, 0), (3, 3)])
    trail.insert_sub_trail(make([(1, 1), (2, 2)]), 1)
    assert list(trail) == [(0, 0), (1, 1), (2, 2), (3, 3)]


def test_insert_sub_trail_at_front_and_end():
    trail = make([(5, 5)])
    trail.insert_sub_trail(make([(4, 4)]), 0)
    trail.insert_sub_trail(make([(6, 6)]), 2)
    assert list(trail) == [(4, 4), (5, 5), (6, 6)]


def test_insert_sub_trail_out_of_range():
    trail = make([(0, 0)])
    with pytest.raises(IndexError):
        trail.insert_sub_trail(make([(1, 1)]), 2)


def test_push_back_sub_trail():
    trail = make([(0, 1)])
    trail.push_back_sub_trail(make([(2, 3), (4, 5)]))
    assert list(trail) == [(0, 1), (2, 3), (4, 5)]


def test_first_index_of():
    trail = make([(0, 1), (2, 3), (0, 1)])
    assert trail.first_index_of((0, 1)) == 0
    assert trail.first_index_of((2, 3)) == 1
    with pytest.raises(ValueError):
        trail.first_index_of((9, 9))


def test_outgoing_from():
    trail = make([(1, 4), (2, 0), (1, 7)])
    assert trail.outgoing_from(1) == (1, 4)
    assert trail.outgoing_from(2) == (2, 0)
    assert trail.outgoing_from(3) is None


@given(st.lists(arcs), st.lists(arcs), st.data())
def test_insert_preserves_both_trails(base, sub, data):
    idx = data.draw(st.integers(0, len(base)))
    trail = make(base)
    trail.insert_sub_trail(make(sub), idx)
    result = list(trail)
    assert len(trail) == len(base) + len(sub)
    assert result[:idx] == base[:idx]
    assert result[idx:idx + len(sub)] == sub
    assert result[idx + len(sub):] == base[idx:]


@given(st.lists(arcs), st.lists(arcs))
def test_push_back_equals_insert_at_end(base, sub):
    pushed = make(base)
    pushed.push_back_sub_trail(make(sub))
    inserted = make(base)
    inserted.insert_sub_trail(make(sub), len(base))
    assert list(pushed) == list(inserted)


@given(st.lists(arcs, min_size=1))
def test_first_index_points_at_arc(arc_list):
    trail = make(arc_list)
    for arc in arc_list:
        idx = trail.first_index_of(arc)
        assert list(trail)[idx] == arc
        assert arc not in list(trail)[:idx]