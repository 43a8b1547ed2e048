"""Integer word and bitset utilities."""
from __future__ import annotations

import sys
from collections.abc import Iterable

WORD_BITS = 64


def word_count(capacity: int) -> int:
    """Number of ``WORD_BITS``-wide words needed to hold ``capacity`` bits."""
    return (capacity + WORD_BITS - 1) // WORD_BITS


def locate(index: int) -> tuple[int, int]:
    """Return ``(word, mask)`` addressing bit ``index`` in a word array."""
    return index // WORD_BITS, 1 << (index % WORD_BITS)


def make_bitset(indexes: Iterable[int]) -> int:
    value = 0
    for idx in indexes:
        value |= 1 << idx
    return value


# Optimize bit counting based on Python version (cached at module load time)
if sys.version_info >= (3, 10):
    def count_bits(value: int) -> int:
        """Count the number of set bits using native int.bit_count() (Python 3.10+)."""
        return value.bit_count()
else:
    def count_bits(value: int) -> int:
        """Count the number of set bits using bin().count('1') (Python 3.9)."""
        return bin(value).count('1')


def iter_indexes(value: int) -> Iterable[int]:
    index = 0
    while value:
        if value & 1:
            yield index
        value >>= 1
        index += 1


def expand_word(value: int, width: int = WORD_BITS) -> list[bool]:
    """Low ``width`` bits of ``value`` as booleans, least significant first."""
    if width <= 0:
        return []
    digits = format(value & ((1 << width) - 1), f"0{width}b")
    return [digit == "1" for digit in reversed(digits)]


def xor_bits(a: int, b: int) -> int:
    return a ^ b
