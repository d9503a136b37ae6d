"""Variable-width integer storage laid out by a static bit pattern."""

from __future__ import annotations

from collections.abc import Iterable

from succinctkit.rankselect import RankSelect

_WORD = 64


def make_bit_vector(sizes: Iterable[int]) -> list[bool]:
    """Build the pattern for entries of the given bit sizes.

    Every entry contributes a set bit followed by as many clear bits as it
    is wide, so [2, 3] becomes 100 1000.
    """
    bits: list[bool] = []
    for size in sizes:
        if size < 0:
            raise ValueError(f"entry size {size} must not be negative")
        bits.append(True)
        bits.extend([False] * size)
    return bits


class StaticSpaceStorage:
    """Packed storage for n entries whose widths are fixed up front.

    The i-th set bit of the pattern starts entry i; the clear bits that
    follow it are the bits reserved for that entry. An entry may not be
    wider than 63 bits.
    """

    def __init__(self, bits: Iterable[object]) -> None:
        pattern = [bool(bit) for bit in bits]
        run = 0
        for bit in pattern:
            run = 0 if bit else run + 1
            if run >= _WORD:
                raise ValueError(f"an entry may hold at most {_WORD - 1} bits")
        self._count = sum(pattern)
        self._data_bits = len(pattern) - self._count
        self._select = RankSelect(pattern)
        self._words = [0] * -(-self._data_bits // _WORD)

    def _span(self, i: int) -> tuple[int, int]:
        """Bit offset and width of entry i in the data words."""
        if not 0 <= i < self._count:
            raise IndexError(f"entry {i} out of range 0..{self._count - 1}")
        begin = self._select.select(i + 1)
        if i + 1 < self._count:
            end = self._select.select(i + 2)
        else:
            end = self._count + self._data_bits + 1
        return begin - i - 1, end - begin - 1

    def get(self, i: int) -> int:
        """The value stored in entry i."""
        start, size = self._span(i)
        if size == 0:
            return 0
        stop = start + size - 1
        start_block, start_bit = divmod(start, _WORD)
        end_block, end_bit = divmod(stop, _WORD)
        gap = _WORD - end_bit - 1
        if start_block == end_block:
            return (self._words[start_block] >> gap) & ((1 << size) - 1)
        start_mask = (1 << (_WORD - start_bit)) - 1
        end_mask = (1 << (end_bit + 1)) - 1
        high = (self._words[start_block] & start_mask) << (end_bit + 1)
        low = (self._words[end_block] >> gap) & end_mask
        return high | low

    def insert(self, i: int, value: int) -> None:
        """Store value in entry i; it must fit the entry's width."""
        start, size = self._span(i)
        if not 0 <= value < (1 << size):
            raise ValueError(f"value {value} does not fit in {size} bits")
        if size == 0:
            return
        stop = start + size - 1
        start_block, start_bit = divmod(start, _WORD)
        end_block, end_bit = divmod(stop, _WORD)
        gap = _WORD - end_bit - 1
        words = self._words
        if start_block == end_block:
            mask = ((1 << size) - 1) << gap
            words[start_block] = (words[start_block] & ~mask) | (value << gap)
            return
        start_mask = (1 << (_WORD - start_bit)) - 1
        end_mask = (1 << (end_bit + 1)) - 1
        words[start_block] = (words[start_block] & ~start_mask) | (value >> (end_bit + 1))
        words[end_block] = (words[end_block] & ~(end_mask << gap)) | ((value & end_mask) << gap)