"""Fixed-capacity circular buffer of raw samples."""

from __future__ import annotations

from typing import Iterator

import numpy as np

from ..exceptions import InvalidParameter, ResourceExhausted


class RingBuffer:
    """
    Circular store of the most recent ``capacity`` samples.

    Samples live in a preallocated float array. ``_head`` is the slot of the
    oldest held sample and ``_next`` the slot the next push writes to; once
    the buffer is full every push overwrites (evicts) the oldest sample.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise InvalidParameter(f"capacity must be positive, got {capacity}")
        try:
            self._buffer = np.full(int(capacity), np.nan, dtype=np.float64)
        except MemoryError as e:
            raise ResourceExhausted(
                f"could not allocate ring buffer of {capacity} samples"
            ) from e
        self._count = 0
        self._head = 0
        self._next = 0

    @property
    def capacity(self) -> int:
        return len(self._buffer)

    @property
    def is_full(self) -> bool:
        return self._count == len(self._buffer)

    def __len__(self) -> int:
        return self._count

    def push(self, value: float) -> None:
        """Append ``value``, evicting the oldest sample when full."""
        capacity = len(self._buffer)
        self._buffer[self._next] = value
        self._next = (self._next + 1) % capacity
        if self._count == capacity:
            self._head = (self._head + 1) % capacity
        else:
            self._count += 1

    def iter_oldest_to_newest(self) -> Iterator[float]:
        """Yield the held samples in arrival order without mutating the buffer."""
        capacity = len(self._buffer)
        for offset in range(self._count):
            yield float(self._buffer[(self._head + offset) % capacity])

    def __iter__(self) -> Iterator[float]:
        return self.iter_oldest_to_newest()

    def to_array(self) -> np.ndarray:
        """Copy of the held samples, oldest first."""
        end = self._head + self._count
        if end <= len(self._buffer):
            return self._buffer[self._head:end].copy()
        wrapped = end - len(self._buffer)
        return np.concatenate((self._buffer[self._head:], self._buffer[:wrapped]))

    def reset(self) -> None:
        """Drop every sample; the storage is kept for reuse."""
        self._buffer.fill(np.nan)
        self._count = 0
        self._head = 0
        self._next = 0

    def __repr__(self) -> str:
        return f"RingBuffer(capacity={self.capacity}, count={self._count})"
