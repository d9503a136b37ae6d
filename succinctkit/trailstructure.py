"""Per-vertex trail bookkeeping with a Dyck word index over paired arcs."""

from __future__ import annotations

from collections.abc import Iterator

from succinctkit.dyck import DyckMatchingStructure
from succinctkit.linkedlist import CyclicIndexList


class TrailStructure:
    """Trail information for one vertex with a fixed number of arcs.

    Unused arcs are kept in a cyclic index list. Entering by one arc and
    leaving by the next unused arc pairs the two. Once every arc is used,
    the paired arcs, read circularly after the last leaving arc, form a
    Dyck word (entering arcs open, leaving arcs close) that answers
    matching queries.
    """

    def __init__(self, degree: int) -> None:
        if degree < 0:
            raise ValueError("degree must not be negative")
        self._degree = degree
        self._in_and_out = [False] * degree
        self._matched = [False] * degree
        self._used = [False] * degree
        self._unused: CyclicIndexList | None = CyclicIndexList(degree)
        self._last_closed: int | None = None
        self._dyck_start: int | None = None
        self._dyck: DyckMatchingStructure | None = None
        self._married: list[int | None] | None = None
        self._grey = False
        self._black = degree == 0
        self._even = degree % 2 == 0
        self._starting = False

    @property
    def degree(self) -> int:
        """Number of arcs at this vertex."""
        return self._degree

    @property
    def last_closed(self) -> int | None:
        """The arc most recently left by, if any."""
        return self._last_closed

    @property
    def dyck_start(self) -> int | None:
        """Arc at which the circular Dyck word begins, once built."""
        return self._dyck_start

    @property
    def in_and_out(self) -> tuple[bool, ...]:
        """For every arc, whether the vertex was entered by it."""
        return tuple(self._in_and_out)

    @property
    def matched_flags(self) -> tuple[bool, ...]:
        """For every arc, whether it belongs to a pair."""
        return tuple(self._matched)

    def _circular(self, start: int) -> Iterator[int]:
        return ((start + offset) % self._degree for offset in range(self._degree))

    def _start_after_last_closed(self) -> int:
        if self._last_closed is None:
            return 0
        return (self._last_closed + 1) % self._degree

    def _next_unused(self) -> int | None:
        if self._black:
            return None
        self._grey = True
        arc = self._unused.get()
        self._used[arc] = True
        if self._unused.is_empty():
            self._black = True
            self._even = True
        else:
            self._even = not self._even
        return arc

    def _init_dyck_structure(self) -> None:
        count = sum(self._matched)
        self._dyck_start = self._start_after_last_closed()
        if count == 0:
            return
        start = self._dyck_start
        while not self._matched[start]:
            start = (start + 1) % self._degree
        self._dyck_start = start
        word = [self._in_and_out[j] for j in self._circular(start) if self._matched[j]]
        self._dyck = DyckMatchingStructure(word)

    def leave(self) -> int | None:
        """Take an unused arc to leave by; None once the vertex is black."""
        arc = self._next_unused()
        if arc is not None:
            self._last_closed = arc
            self._starting = True
        if self._black:
            self._unused = None
            self._init_dyck_structure()
        return arc

    def enter(self, i: int) -> int | None:
        """Enter by arc i and leave by the next unused arc, pairing both.

        Returns the arc left by, or None if no unused arc remained.
        """
        if self._black:
            return None
        if not 0 <= i < self._degree:
            raise IndexError(f"arc {i} out of range 0..{self._degree - 1}")
        if self._used[i]:
            raise ValueError(f"arc {i} has already been used")
        following = self._unused.remove(i)
        self._used[i] = True
        self._in_and_out[i] = True
        self._even = not self._even
        if following == i:
            self._black = True
            self._even = True
            self._unused = None
            self._init_dyck_structure()
            return None
        self._matched[i] = True
        self._matched[following] = True
        out = self._next_unused()
        self._last_closed = out
        if self._black:
            self._unused = None
            self._init_dyck_structure()
        return out

    def marry(self, i: int, o: int) -> None:
        """Pair i with o, releasing whatever they were paired with before."""
        if self._married is None:
            self._married = [None] * 4
            slot = 0
        else:
            slot = 2
        i_match = self.matched(i)
        o_match = self.matched(o)
        for arc in (i_match, i, o_match, o):
            self._matched[arc] = not self._matched[arc]
        self._married[slot] = i
        self._married[slot + 1] = o

    def _married_partner(self, idx: int) -> int | None:
        married = self._married
        if married is None:
            return None
        for a, b in ((0, 1), (1, 0), (2, 3), (3, 2)):
            if married[a] is not None and married[a] == idx:
                return married[b]
        return None

    def matched(self, idx: int) -> int:
        """The arc paired with idx, or idx itself if it is unpaired.

        Paired arcs can only be resolved once the vertex is black.
        """
        partner = self._married_partner(idx)
        if partner is not None:
            return partner
        if not self._matched[idx]:
            return idx
        if self._dyck is None:
            raise RuntimeError("pairs can only be resolved once the vertex is black")
        ordered = [j for j in self._circular(self._dyck_start) if self._matched[j]]
        dyck_idx = ordered.index(idx)
        match = self._dyck.match(dyck_idx)
        if match == dyck_idx:
            return idx
        return ordered[match]

    def matched_naive(self, idx: int) -> int:
        """Like matched, but scanning the arcs directly; works at any time."""
        partner = self._married_partner(idx)
        if partner is not None:
            return partner
        if not self._matched[idx]:
            return idx
        start = self._start_after_last_closed()
        while not self._matched[start]:
            start = (start + 1) % self._degree
        stack: list[int] = []
        for j in self._circular(start):
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

    def is_ending_arc(self, i: int) -> bool:
        """True if arc i is an unpaired entering arc, where a trail ends."""
        return self.matched(i) == i and self._in_and_out[i]

    def is_black(self) -> bool:
        """True when every arc has been used."""
        return self._black

    def is_grey(self) -> bool:
        """True once at least one arc has been used."""
        return self._grey

    def is_even(self) -> bool:
        """Parity flag of the number of unused arcs."""
        return self._even