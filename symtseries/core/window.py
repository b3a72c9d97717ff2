"""
Sliding SAX window over a stream of samples.

A :class:`Window` keeps the ``n`` most recent samples in a ring buffer and
re-encodes them after every accepted sample once ``n`` samples have been
seen since creation or the last reset.
"""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Iterable, Optional

import numpy as np

from ..exceptions import InvalidParameter, InvalidState
from .encoder import check_nwc, to_sax
from .ring_buffer import RingBuffer
from .word import Word

logger = logging.getLogger(__name__)


class WindowState(Enum):
    FILLING = "filling"
    FULL = "full"


class Window:
    """
    Fixed-length sliding window with a cached SAX word.

    Parameters
    ----------
    n : int
        Number of raw samples per word, ``1 < n <= 4096``
    w : int
        Number of symbols per word, ``1 < w <= 2048`` and ``n % w == 0``
    c : int
        Cardinality, ``1 < c <= 16``

    Examples
    --------
    >>> win = Window(4, 2, 4)
    >>> win.append_sequence([1, 2, 3]) is None
    True
    >>> str(win.append_value(4))
    'ad'
    """

    def __init__(self, n: int, w: int, c: int):
        check_nwc(n, w, c)
        self.n = int(n)
        self.w = int(w)
        self.c = int(c)
        self._values: Optional[RingBuffer] = RingBuffer(self.n)
        self._word: Optional[Word] = None

    def _buffer(self) -> RingBuffer:
        if self._values is None:
            raise InvalidState("window has been closed")
        return self._values

    @property
    def state(self) -> WindowState:
        self._buffer()
        return WindowState.FILLING if self._word is None else WindowState.FULL

    @property
    def is_full(self) -> bool:
        return self.state is WindowState.FULL

    @property
    def values(self) -> np.ndarray:
        """Held samples, oldest first."""
        return self._buffer().to_array()

    def __len__(self) -> int:
        return len(self._buffer())

    def append_value(self, value: float) -> Optional[Word]:
        """
        Push one sample and return a copy of the refreshed word.

        Returns ``None`` while fewer than ``n`` samples have been accepted.
        """
        buffer = self._buffer()
        if isinstance(value, (str, bytes)):
            raise InvalidParameter(f"expected a number, got {value!r}")
        try:
            value = float(value)
        except (TypeError, ValueError) as e:
            raise InvalidParameter(f"expected a number, got {value!r}") from e
        if not math.isfinite(value):
            raise InvalidParameter(f"sample must be finite, got {value}")

        buffer.push(value)
        return self._refresh(buffer)

    def append_sequence(self, values: Iterable[float]) -> Optional[Word]:
        """
        Push every element of ``values`` in order.

        Only the word after the last sample is returned; an empty input leaves
        the window untouched and returns :meth:`current_word`.
        """
        buffer = self._buffer()
        if isinstance(values, (str, bytes)):
            raise InvalidParameter(f"expected array of numbers as input, got {values!r}")
        try:
            raw = np.asarray(values if isinstance(values, np.ndarray) else list(values))
        except (TypeError, ValueError) as e:
            raise InvalidParameter(f"expected array of numbers as input: {e}") from e
        if raw.size and raw.dtype.kind not in "biuf":
            raise InvalidParameter(f"expected array of numbers as input, got dtype {raw.dtype}")
        batch = raw.astype(np.float64)
        if batch.ndim != 1:
            raise InvalidParameter(f"values must be 1D, got shape {batch.shape}")
        if not np.all(np.isfinite(batch)):
            raise InvalidParameter("values contain NaN or infinite samples")
        if batch.size == 0:
            return self.current_word()

        # Older samples would be evicted before the final encode
        for value in batch[-buffer.capacity:]:
            buffer.push(value)
        return self._refresh(buffer)

    def _refresh(self, buffer: RingBuffer) -> Optional[Word]:
        if not buffer.is_full:
            return None
        if self._word is None:
            logger.debug(f"Window(n={self.n}, w={self.w}, c={self.c}) is full")
        self._word = to_sax(buffer.to_array(), self.w, self.c)
        return self._word.copy()

    def current_word(self) -> Optional[Word]:
        """Copy of the cached word, or ``None`` while the window is filling."""
        self._buffer()
        return None if self._word is None else self._word.copy()

    def reset(self) -> None:
        """Drop all samples and the cached word."""
        self._buffer().reset()
        self._word = None
        logger.debug(f"Window(n={self.n}, w={self.w}, c={self.c}) reset")

    def close(self) -> None:
        """Release the buffer; any later operation raises InvalidState."""
        self._values = None
        self._word = None

    @property
    def closed(self) -> bool:
        return self._values is None

    def __enter__(self) -> Window:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def to_string(self) -> str:
        """Canonical string of the current word, empty while filling."""
        word = self.current_word()
        return "" if word is None else word.to_string()

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self.closed:
            return f"Window(n={self.n}, w={self.w}, c={self.c}, closed)"
        return f"Window(n={self.n}, w={self.w}, c={self.c}, state={self.state.value})"
