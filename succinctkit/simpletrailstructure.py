"""Per-vertex bookkeeping of the arcs used by Euler trails."""

from __future__ import annotations


class SimpleTrailStructure:
    """Trail information for one vertex with a fixed number of arcs.

    Unused arcs form a cyclic doubly linked list. Entering and then
    leaving the vertex pairs the two arcs; the pairs are read as a
    circular Dyck word whose opening parentheses are the entering arcs.
    """

    def __init__(self, degree: int) -> None:
        if degree < 0:
            raise ValueError("degree must not be negative")
        self._degree = degree
        self._prev = [(i - 1) % degree for i in range(degree)]
        self._next = [(i + 1) % degree for i in range(degree)]
        self._unused = [True] * degree
        self._cursor: int | None = 0 if degree else None
        self._last_closed: int | None = None
        self._in_and_out = [False] * degree
        self._matched = [False] * degree
        self._married: list[int | None] = [None] * 4
        self._grey = False
        self._black = degree == 0
        self._even = degree % 2 == 0
        self._starting = False

    def _unlink(self, arc: int) -> None:
        before, after = self._prev[arc], self._next[arc]
        self._next[before] = after
        self._prev[after] = before
        self._unused[arc] = False

    def _finish(self) -> None:
        self._black = True
        self._cursor = None

    def _next_unused(self) -> int | None:
        if self._black:
            return None
        self._grey = True
        arc = self._cursor
        if self._prev[arc] == arc:
            self._unused[arc] = False
            self._finish()
            return arc
        self._unlink(arc)
        self._cursor = self._next[arc]
        self._even = not self._even
        return arc

    def leave(self) -> int | None:
        """Take an unused arc to leave by; None once the vertex is black."""
        arc = self._next_unused()
        if arc is not None:
            self._starting = True
        return arc

    def enter(self, i: int) -> int | None:
        """Enter by arc i and leave by the next unused arc, pairing both.

        Returns the arc left by, or None if no unused arc remained.
        """
        if self._black:
            return None
        if not 0 <= i < self._degree:
            raise IndexError(f"arc {i} out of range 0..{self._degree - 1}")
        if not self._unused[i]:
            raise ValueError(f"arc {i} has already been used")
        self._grey = True
        self._in_and_out[i] = True
        if self._prev[i] == i:
            self._unused[i] = False
            self._finish()
            return None
        self._unlink(i)
        out = self._next[i]
        self._matched[i] = True
        self._matched[out] = True
        self._last_closed = out
        if self._prev[out] == out:
            self._unused[out] = False
            self._finish()
            return out
        self._unlink(out)
        self._cursor = self._prev[out]
        return out

    def matched(self, idx: int) -> int:
        """The arc paired with idx, or idx itself if it is unpaired."""
        married = self._married
        for a, b in ((0, 1), (1, 0), (2, 3), (3, 2)):
            if married[a] is not None and married[a] == idx:
                return married[b]
        if not self._matched[idx]:
            return idx
        degree = self._degree
        start = 0 if self._last_closed is None else (self._last_closed + 1) % degree
        while not self._matched[start]:
            start = (start + 1) % degree
        stack: list[int] = []
        for offset in range(degree):
            j = (start + offset) % degree
            if not self._matched[j]:
                continue
            if self._in_and_out[j]:
                stack.append(j)
            elif stack:
                opening = stack.pop()
                if idx == opening:
                    return j
                if idx == j:
                    return opening
        return idx

    def marry(self, i: int, o: int) -> None:
        """Pair i with o, releasing whatever they were paired with before."""
        i_match = self.matched(i)
        o_match = self.matched(o)
        for arc in (i_match, i, o_match, o):
            self._matched[arc] = not self._matched[arc]
        slot = 0 if self._married[0] is None else 2
        self._married[slot] = i
        self._married[slot + 1] = o

    def starting_arc(self) -> int | None:
        """An unpaired outgoing arc, where a trail starts, or None."""
        if not self._starting:
            return None
        return next(
            (
                arc
                for arc in range(self._degree)
                if self.matched(arc) == arc and not self._in_and_out[arc]
            ),
            None,
        )

    def has_starting_arc(self) -> bool:
        """True once the vertex has been left by leave()."""
        return self._starting

    def is_black(self) -> bool:
        """True when every arc has been used."""
        return self._black

    def is_grey(self) -> bool:
        """True once at least one arc has been used."""
        return self._grey

    def is_even(self) -> bool:
        """Parity flag of the number of unused arcs."""
        return self._even