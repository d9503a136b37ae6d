"""Matching of parentheses in Dyck words given as bit sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def match_naive(word: Sequence[object], idx: int) -> int:
    """Position of the parenthesis matching word[idx] in linear time.

    A set bit is an opening parenthesis, a clear bit a closing one. If the
    parenthesis has no partner (the word is not a valid Dyck word), idx
    itself is returned.
    """
    bits = [bool(bit) for bit in word]
    if not 0 <= idx < len(bits):
        raise IndexError(f"index {idx} out of range 0..{len(bits) - 1}")
    own = bits[idx]
    positions = range(idx, len(bits)) if own else range(idx, -1, -1)
    depth = 0
    for j in positions:
        depth += 1 if bits[j] == own else -1
        if depth == 0:
            return j
    return idx


class DyckMatchingStructure:
    """Finds matching parentheses in a fixed Dyck word.

    The word is not checked for validity.
    """

    def __init__(self, word: Iterable[object]) -> None:
        self._word = tuple(bool(bit) for bit in word)

    def match(self, idx: int) -> int:
        """Position of the match of the parenthesis at idx, or idx if none."""
        return match_naive(self._word, idx)

    def __len__(self) -> int:
        return len(self._word)