"""Fixed-length packed flag vector shared between request threads."""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from .bitset import WORD_BITS, count_bits, expand_word, locate, word_count

logger = logging.getLogger(__name__)

# Words guarded by a single lock.
SEGMENT_WORDS = 1024


class BitVector:
    """A fixed number of boolean flags packed into 64-bit integer words.

    Every word belongs to a segment of ``segment_words`` consecutive words,
    and each segment has its own lock. A toggle holds the lock of its word's
    segment for the whole read-modify-write, so concurrent toggles never lose
    updates, including toggles of neighbouring bits in the same word.

    ``count_checked`` and ``snapshot`` lock one segment at a time. Each
    segment is read consistently, but the vector as a whole may mix states
    from before and after a concurrent toggle.
    """

    def __init__(self, capacity: int, *, segment_words: int = SEGMENT_WORDS) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise TypeError(f"capacity must be an int, got {type(capacity).__name__}")
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        if segment_words <= 0:
            raise ValueError("segment_words must be positive")
        self._capacity = capacity
        self._segment_words = segment_words
        self._words = [0] * word_count(capacity)
        segments = (len(self._words) + segment_words - 1) // segment_words
        self._locks = tuple(threading.Lock() for _ in range(segments))
        logger.debug(
            "Allocated bit vector: capacity=%d words=%d segments=%d",
            capacity,
            len(self._words),
            segments,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    def _address(self, index: int) -> tuple[int, int]:
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(f"index must be an int, got {type(index).__name__}")
        if index < 0 or index >= self._capacity:
            raise IndexError(f"index {index} out of range [0, {self._capacity})")
        return locate(index)

    def _lock_for(self, word: int) -> threading.Lock:
        return self._locks[word // self._segment_words]

    def _segments(self) -> Iterator[tuple[threading.Lock, int, int]]:
        total = len(self._words)
        for number, lock in enumerate(self._locks):
            start = number * self._segment_words
            yield lock, start, min(start + self._segment_words, total)

    def toggle(self, index: int) -> None:
        """Flip the flag at ``index``.

        Raises:
            IndexError: ``index`` is outside ``[0, capacity)``. Nothing changes.
            TypeError: ``index`` is not an int.
        """
        word, mask = self._address(index)
        with self._lock_for(word):
            self._words[word] ^= mask

    def is_checked(self, index: int) -> bool:
        word, mask = self._address(index)
        with self._lock_for(word):
            value = self._words[word]
        return value & mask != 0

    def count_checked(self) -> int:
        """Number of flags currently set."""
        total = 0
        for lock, start, stop in self._segments():
            with lock:
                chunk = self._words[start:stop]
            total += sum(count_bits(value) for value in chunk)
        return total

    def snapshot(self) -> list[bool]:
        """Copy of every flag in index order, ``capacity`` entries long."""
        flags: list[bool] = []
        for lock, start, stop in self._segments():
            with lock:
                chunk = self._words[start:stop]
            for value in chunk:
                flags.extend(expand_word(value, WORD_BITS))
        # The last word is only partly used.
        del flags[self._capacity:]
        return flags

    def __len__(self) -> int:
        return self._capacity

    def __getitem__(self, index: int) -> bool:
        return self.is_checked(index)

    def __iter__(self) -> Iterator[bool]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"BitVector(capacity={self._capacity}, checked={self.count_checked()})"
