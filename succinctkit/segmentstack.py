"""Segmented stacks for space-efficient depth-first search."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple, Protocol


class Pair(NamedTuple):
    """A vertex together with an edge index."""

    head: int
    tail: int


class PopStatus(IntEnum):
    """Why pop could not hand out an entry."""

    NO_MORE_NODES = 11
    RESTORE = 12


class DegreeGraph(Protocol):
    """The part of a graph the extended stack needs."""

    def order(self) -> int: ...

    def degree(self, u: int) -> int: ...


class SegmentStack(ABC):
    """A stack that keeps only a low and a high segment of q entries.

    When both segments are full the low one is dropped and its last entry
    survives as a trailer. Popping past the kept segments asks the caller
    to restore the lost segment.
    """

    def __init__(self, segment_size: int) -> None:
        if segment_size < 1:
            raise ValueError("segment size must be positive")
        self._q = segment_size
        self._low: list[Pair] = []
        self._high: list[Pair] = []
        self._tp = 0

    @abstractmethod
    def push(self, pair: Pair) -> None:
        """Push an entry."""

    @abstractmethod
    def is_aligned(self) -> bool:
        """Whether a restoration has caught up with the saved trailer."""

    def pop(self) -> Pair | PopStatus:
        """Pop the top entry, or say why none is available."""
        if self._high:
            return self._high.pop()
        if self._low:
            return self._low.pop()
        return PopStatus.RESTORE if self._tp > 0 else PopStatus.NO_MORE_NODES

    def is_empty(self) -> bool:
        """True when no segments and no trailers are left."""
        return not self._low and not self._high and self._tp == 0

    def _swap_segments(self, pair: Pair) -> None:
        self._tp += 1
        self._low, self._high = self._high, [pair]


class BasicSegmentStack(SegmentStack):
    """Segment stack with a single remembered trailer, for full restoration."""

    def __init__(self, segment_size: int) -> None:
        super().__init__(segment_size)
        self._last: Pair | None = None
        self._saved_trailer: Pair | None = None
        self._align_target: int | None = None

    def push(self, pair: Pair) -> None:
        pair = Pair(*pair)
        if len(self._low) < self._q:
            self._low.append(pair)
        elif len(self._high) < self._q:
            self._high.append(pair)
        else:
            self._last = self._low[-1]
            self._swap_segments(pair)

    def drop_all(self) -> None:
        """Empty the whole stack, trailers included."""
        self._low = []
        self._high = []
        self._tp = 0

    def save_trailer(self) -> None:
        """Remember the current trailer so it survives drop_all."""
        if self._tp == 0:
            raise RuntimeError("cannot save from empty trailers")
        self._saved_trailer = self._last
        self._align_target = 1 if self._tp == 1 else 2

    def is_aligned(self) -> bool:
        if (self._align_target == 2 and len(self._high) < self._q) or len(self._low) < self._q:
            return False
        if self._align_target == 2:
            return self._high[-1] == self._saved_trailer
        if self._align_target == 1:
            return self._low[-1] == self._saved_trailer
        return False


@dataclass
class _Trailer:
    x: Pair | None = None
    bi: int | None = None
    bc: int = 0


class ExtendedSegmentStack(SegmentStack):
    """Segment stack with a trailer stack, a segment table and big vertices.

    Vertices of degree above m/q are big: their edge indices are kept
    exactly. For the others only an approximation of the edge index is
    kept.
    """

    def __init__(self, size: int, graph: DegreeGraph, color: MutableSequence[int]) -> None:
        if size < 2:
            raise ValueError("size must be at least 2")
        super().__init__(math.ceil(size / math.log2(size)))
        self._trailers = [_Trailer() for _ in range(size // self._q + 1)]
        self._l = math.ceil(math.log2(size)) + 1
        self._table = [0] * size
        self._edges = [0] * size
        self._big: list[Pair] = []
        self._graph = graph
        self._color = color
        self._m = sum(graph.degree(u) for u in range(graph.order()))

    def _is_big(self, u: int) -> bool:
        return self._graph.degree(u) > self._m // self._q

    def approximate_edge(self, u: int, k: int) -> int:
        """Approximate edge number stored for a small vertex u at edge k."""
        group = -(-self._graph.degree(u) // self._l)
        return (k - 1) // group

    def retrieve_edge(self, u: int, f: int) -> int:
        """Edge index restored from the approximation f."""
        return f * -(-self._graph.degree(u) // self._l)

    def _store_edges(self) -> None:
        trailer = self._trailers[self._tp]
        for u, k in self._low:
            if self._is_big(u):
                if trailer.bi is None:
                    trailer.bi = len(self._big)
                    trailer.bc = 0
                if len(self._big) >= self._q:
                    raise IndexError("big storage is full")
                self._big.append(Pair(u, k - 1))
            else:
                self._edges[u] = self.approximate_edge(u, k)

    def push(self, pair: Pair) -> None:
        pair = Pair(*pair)
        if len(self._low) < self._q:
            self._table[pair.head] = self._tp
            self._low.append(pair)
        elif len(self._high) < self._q:
            self._table[pair.head] = self._tp + 1
            self._high.append(pair)
        else:
            self._trailers[self._tp].x = self._low[-1]
            self._store_edges()
            self._swap_segments(pair)
            self._table[pair.head] = self._tp + 1

    def is_in_top_segment(self, u: int, restoring: bool = False) -> bool:
        """Whether u is labelled with the top segment number.

        With restoring set, the segment below the top one is meant.
        """
        if self._high:
            top = self._tp + 1
        elif self._low:
            top = self._tp
        else:
            top = self._tp - 1
        if restoring and self._low:
            top -= 1
        return self._table[u] == top

    def outgoing_edge(self, u: int) -> int:
        """Edge index to resume u from during a restoration."""
        if not self._is_big(u):
            return self.retrieve_edge(u, self._edges[u])
        if self._tp == 0:
            raise RuntimeError("can't get edge from big vertex because there are no trailers")
        trailer = self._trailers[self._tp - 1]
        if trailer.bi is None:
            raise RuntimeError("the top trailer manages no big vertices")
        x = self._big[trailer.bi + trailer.bc]
        trailer.bc += 1
        return x.tail

    def restore_trailer(self) -> Pair | None:
        """The second-last trailer, needed for a one-segment restoration."""
        return self._trailers[self._tp - 2].x if self._tp > 1 else None

    def top_trailer(self) -> Pair | None:
        """The last trailer, which a restoration aligns to."""
        return self._trailers[self._tp - 1].x if self._tp > 0 else None

    def recolor_low(self, value: int) -> None:
        """Give every vertex in the low segment the given colour."""
        for u, _ in self._low:
            self._color[u] = value

    def is_aligned(self) -> bool:
        if len(self._low) == self._q and self._tp > 0:
            trailer = self._trailers[self._tp - 1]
            if self._low[-1] == trailer.x:
                trailer.bi = None
                self._tp -= 1
                return True
        return False