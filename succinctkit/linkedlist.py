"""Cyclic doubly linked list over the indices 0..n-1, stored as relative links."""

from __future__ import annotations


class CyclicIndexList:
    """Cyclic list of the integers 0..size-1 that supports removal in O(1).

    Only the distances to the previous and next live element are stored;
    the elements themselves are implied by their positions.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        # links[2*i] is the distance back to the previous element,
        # links[2*i + 1] the distance forward to the next one.
        self._links = [1] * (2 * size)
        self._current: int | None = 0 if size else None

    def get(self) -> int:
        """Remove and return the current element."""
        if self._current is None:
            raise IndexError("get from an empty list")
        value = self._current
        self.remove(value)
        return value

    def remove(self, idx: int) -> int:
        """Remove idx and return the element that follows it.

        If idx was the last element, idx itself is returned and the list
        becomes empty.
        """
        if self._current is None:
            raise IndexError("remove from an empty list")
        links = self._links
        n = len(links)
        actual = idx * 2
        prev = (actual - links[actual] * 2) % n
        if prev == actual:
            self._current = None
            return idx
        links[prev + 1] += links[actual + 1]
        nxt = (actual + links[actual + 1] * 2) % n
        links[nxt] += links[actual]
        self._current = nxt // 2
        return self._current

    def is_empty(self) -> bool:
        """True when no element is left."""
        return self._current is None