"""Rank and select over static bit sequences."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import accumulate

_SEGMENT_LENGTH = 8


def _build_local_rank_table() -> tuple[tuple[int, ...], ...]:
    return tuple(
        tuple(bin(segment & ((2 << i) - 1)).count("1") for i in range(_SEGMENT_LENGTH))
        for segment in range(1 << _SEGMENT_LENGTH)
    )


def _build_local_select_table() -> tuple[tuple[int, ...], ...]:
    return tuple(
        tuple(i for i in range(_SEGMENT_LENGTH) if (segment >> i) & 1)
        for segment in range(1 << _SEGMENT_LENGTH)
    )


# _LOCAL_RANK[segment][i]: set bits in segment up to and including bit i.
_LOCAL_RANK = _build_local_rank_table()
# _LOCAL_SELECT[segment][j]: position of the (j+1)-th set bit in segment.
_LOCAL_SELECT = _build_local_select_table()


def _pack(flags: list[bool]) -> bytes:
    """Pack bits into bytes, bit i going to position i % 8 of byte i // 8."""
    return bytes(
        sum(1 << offset for offset, bit in enumerate(flags[start:start + _SEGMENT_LENGTH]) if bit)
        for start in range(0, len(flags), _SEGMENT_LENGTH)
    )


class RankStructure:
    """Constant-time rank over a bit sequence split into 8-bit segments."""

    def __init__(self, bits: Iterable[object]) -> None:
        flags = [bool(bit) for bit in bits]
        self._size = len(flags)
        self._blocks = _pack(flags)
        self._segment_count = len(self._blocks)
        self._non_empty = tuple(i for i, block in enumerate(self._blocks) if block)
        self._set_count = tuple(
            accumulate(_LOCAL_RANK[block][_SEGMENT_LENGTH - 1] for block in self._blocks[:-1])
        )

    def rank(self, k: int) -> int:
        """Number of set bits among the first k bits, for k in 1..len(self)."""
        if k < 1 or k > self._size:
            raise IndexError(f"rank index {k} out of range 1..{self._size}")
        segment_idx, local_idx = divmod(k - 1, _SEGMENT_LENGTH)
        return self.set_before(segment_idx) + _LOCAL_RANK[self._blocks[segment_idx]][local_idx]

    def set_before(self, segment: int) -> int:
        """Number of set bits in all segments before the given one."""
        if segment == 0:
            return 0
        if segment < 0 or segment > len(self._set_count):
            raise IndexError(f"segment {segment} out of range")
        return self._set_count[segment - 1]

    def block(self, index: int) -> int:
        """The 8-bit segment at the given index, lowest bit first."""
        return self._blocks[index]

    def __len__(self) -> int:
        return self._size


class RankSelect:
    """Rank and select over a bit sequence using segment lookup tables."""

    def __init__(self, bits: Iterable[object]) -> None:
        self._ranks = RankStructure(bits)
        size = len(self._ranks)
        self._ones = self._ranks.rank(size) if size else 0
        first = [False] * self._ones
        for segment in self._ranks._non_empty:
            first[self._ranks.set_before(segment)] = True
        self._first_in_segment = RankStructure(first)

    def rank(self, k: int) -> int:
        """Number of set bits among the first k bits, for k in 1..len(self)."""
        return self._ranks.rank(k)

    def select(self, k: int) -> int:
        """1-based position of the k-th set bit."""
        if k < 1 or k > self._ones:
            raise IndexError(f"select index {k} out of range 1..{self._ones}")
        first_rank = self._first_in_segment.rank(k)
        segment = self._ranks._non_empty[first_rank - 1]
        local_index = k - self._ranks.set_before(segment) - 1
        local = _LOCAL_SELECT[self._ranks.block(segment)][local_index]
        return local + _SEGMENT_LENGTH * segment + 1

    def __len__(self) -> int:
        return len(self._ranks)


class SimpleRankSelect:
    """Rank and select backed by fully precomputed answer lists."""

    def __init__(self, bits: Iterable[object]) -> None:
        self._ranks: list[int] = []
        self._selects: list[int] = []
        count = 0
        for position, bit in enumerate(bits, start=1):
            if bit:
                count += 1
                self._selects.append(position)
            self._ranks.append(count)

    def rank(self, k: int) -> int:
        """Number of set bits among the first k bits."""
        if k < 1 or k > len(self._ranks):
            raise IndexError(f"rank index {k} out of range 1..{len(self._ranks)}")
        return self._ranks[k - 1]

    def select(self, k: int) -> int:
        """1-based position of the k-th set bit."""
        if k < 1 or k > len(self._selects):
            raise IndexError(f"select index {k} out of range 1..{len(self._selects)}")
        return self._selects[k - 1]