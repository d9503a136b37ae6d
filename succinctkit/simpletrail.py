"""A trail stored as a plain list of arcs."""

from __future__ import annotations

from collections.abc import Iterator

Arc = tuple[int, int]


class SimpleTrail:
    """An ordered sequence of arcs (u, k)."""

    def __init__(self) -> None:
        self._arcs: list[Arc] = []

    def add_arc(self, arc: Arc) -> None:
        """Append an arc to the end of the trail."""
        self._arcs.append(tuple(arc))

    def insert_sub_trail(self, sub_trail: SimpleTrail, idx: int) -> None:
        """Splice all arcs of sub_trail in before position idx."""
        if idx < 0 or idx > len(self._arcs):
            raise IndexError(f"insert position {idx} out of range 0..{len(self._arcs)}")
        self._arcs[idx:idx] = list(sub_trail)

    def push_back_sub_trail(self, sub_trail: SimpleTrail) -> None:
        """Append all arcs of sub_trail."""
        self._arcs.extend(list(sub_trail))

    def first_index_of(self, arc: Arc) -> int:
        """Index of the first occurrence of arc; ValueError if absent."""
        try:
            return self._arcs.index(tuple(arc))
        except ValueError:
            raise ValueError(f"arc {arc!r} is not in the trail") from None

    def outgoing_from(self, u: int) -> Arc | None:
        """The first arc leaving vertex u, or None if there is none."""
        return next((arc for arc in self._arcs if arc[0] == u), None)

    def __len__(self) -> int:
        return len(self._arcs)

    def __iter__(self) -> Iterator[Arc]:
        return iter(self._arcs)

    def __repr__(self) -> str:
        return f"SimpleTrail({self._arcs!r})"