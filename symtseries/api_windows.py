"""
Windowed SAX API for long series.

Cuts a series into sliding windows and encodes every window into a word,
without keeping per-window copies of the raw values around.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np
from numpy.typing import NDArray

from .core.encoder import as_series, check_nwc, to_sax
from .core.word import Word
from .exceptions import InvalidParameter

logger = logging.getLogger(__name__)


def window_starts(n_points: int, width: int, by: int = 1,
                  start: int = 0, end: Optional[int] = None) -> range:
    """
    Start offsets of the sliding windows over a series of ``n_points`` values.

    Parameters
    ----------
    n_points : int
        Series length
    width : int
        Window width (number of time points per window)
    by : int
        Step size between consecutive windows
    start : int
        Starting index (0-based)
    end : int, optional
        Ending index (exclusive). If None, use ``n_points``
    """
    if end is None:
        end = n_points

    if width <= 0:
        raise InvalidParameter(f"width must be positive, got {width}")

    if by <= 0:
        raise InvalidParameter(f"by must be positive, got {by}")

    if start < 0 or start >= n_points:
        raise InvalidParameter(f"start must be in [0, {n_points - 1}], got {start}")

    if end <= start or end > n_points:
        raise InvalidParameter(f"end must be in ({start}, {n_points}], got {end}")

    if width > (end - start):
        raise InvalidParameter(f"width ({width}) cannot exceed series length ({end - start})")

    n_windows = (end - start - width) // by + 1
    return range(start, start + n_windows * by, by)


def sax_windows(
    x: NDArray[np.float64],
    window: int,
    w: int,
    c: int,
    step: int = 1,
) -> List[Word]:
    """
    Encode every sliding window of ``x`` into a SAX word.

    Each window is z-normalized on its own, which is what a streaming
    :class:`~symtseries.core.window.Window` of the same size would produce
    after each accepted sample.

    Parameters
    ----------
    x : array (n_points,)
        Input time series
    window : int
        Raw samples per word
    w : int
        Symbols per word
    c : int
        Cardinality
    step : int, default 1
        Step size between consecutive windows

    Returns
    -------
    list of Word
        One word per window, in order

    Examples
    --------
    >>> x = np.sin(np.linspace(0, 4 * np.pi, 100))
    >>> words = sax_windows(x, window=20, w=4, c=4, step=10)
    >>> len(words)
    9
    """
    x = as_series(x)
    check_nwc(window, w, c)
    starts = window_starts(len(x), width=window, by=step)

    words = [to_sax(x[i:i + window], w, c) for i in starts]
    logger.info(f"Encoded {len(words)} windows of width {window} (step={step})")
    return words
