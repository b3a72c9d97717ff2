"""
SAX encoding: z-normalization, piecewise aggregate approximation (PAA)
and symbol assignment against the Gaussian breakpoint tables.

References
----------
Lin, J., Keogh, E., Lonardi, S. & Chiu, B. (2003). A symbolic representation
of time series, with implications for streaming algorithms.
Shieh, J. & Keogh, E. (2008). iSAX: indexing and mining terabyte sized
time series.
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np
from numpy.typing import NDArray

from ..exceptions import InvalidParameter, ResourceExhausted
from .breakpoints import MAX_CARDINALITY, MIN_CARDINALITY, symbols_for
from .word import Word

# Population standard deviations below this are treated as a constant series
STAT_EPS = 1e-2

MAX_WINDOW = 4096
MAX_SYMBOLS = 2048

ArrayLike = Union[NDArray[np.float64], Iterable[float]]


def _check_integers(**params) -> None:
    for name, value in params.items():
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidParameter(f"{name} must be an integer, got {value!r}")


def _check_encoder_params(n: int, w: int, c: int) -> None:
    _check_integers(n=n, w=w, c=c)
    if n <= 1:
        raise InvalidParameter(f"series length must be > 1, got {n}")
    if w <= 1:
        raise InvalidParameter(f"w must be > 1, got {w}")
    if not MIN_CARDINALITY <= c <= MAX_CARDINALITY:
        raise InvalidParameter(
            f"cardinality must be in [{MIN_CARDINALITY}, {MAX_CARDINALITY}], got {c}"
        )
    if n % w != 0:
        raise InvalidParameter(f"n ({n}) must be evenly divisible by w ({w})")


def check_nwc(n: int, w: int, c: int) -> None:
    """
    Validate window length, word length and cardinality.

    These are the limits enforced when a Window or a Word is built by a
    caller: ``1 < n <= 4096``, ``1 < w <= 2048``, ``n % w == 0`` and
    ``1 < c <= 16``.

    Raises:
        InvalidParameter: if any of the limits is violated
    """
    _check_integers(n=n, w=w, c=c)
    if not 1 < n <= MAX_WINDOW:
        raise InvalidParameter(f"n is out of range (1, {MAX_WINDOW}], got {n}")
    if not 1 < w <= MAX_SYMBOLS:
        raise InvalidParameter(f"w is out of range (1, {MAX_SYMBOLS}], got {w}")
    _check_encoder_params(n, w, c)


def as_series(series: ArrayLike) -> NDArray[np.float64]:
    try:
        x = np.asarray(series, dtype=np.float64)
    except MemoryError as e:
        raise ResourceExhausted("could not allocate series buffer") from e
    except (TypeError, ValueError) as e:
        raise InvalidParameter(f"expected array of numbers as input: {e}") from e
    if x.ndim != 1:
        raise InvalidParameter(f"series must be 1D, got shape {x.shape}")
    if not np.all(np.isfinite(x)):
        raise InvalidParameter("series contains NaN or infinite values")
    return x


def znormalize(series: ArrayLike) -> NDArray[np.float64]:
    """
    Z-normalize ``series`` with its mean and population standard deviation.

    A series whose standard deviation is below ``STAT_EPS`` is treated as
    constant and maps to all zeros.
    """
    x = as_series(series)
    std = x.std()
    if std < STAT_EPS:
        return np.zeros_like(x)
    return (x - x.mean()) / std


def paa(series: ArrayLike, w: int) -> NDArray[np.float64]:
    """
    Piecewise aggregate approximation: the mean of each of ``w`` equal segments.

    Parameters
    ----------
    series : array (n,)
        Input values, ``n`` must be a multiple of ``w``
    w : int
        Number of segments

    Returns
    -------
    array (w,)
        Segment means
    """
    x = as_series(series)
    if w < 1 or len(x) % w != 0:
        raise InvalidParameter(f"n ({len(x)}) must be evenly divisible by w ({w})")
    return x.reshape(w, len(x) // w).mean(axis=1)


def to_sax(series: ArrayLike, w: int, c: int) -> Word:
    """
    Encode a series into a SAX word of ``w`` symbols over ``c`` letters.

    Parameters
    ----------
    series : array (n,)
        Raw values; ``n > 1`` and ``n % w == 0``
    w : int
        Number of symbols (PAA segments), ``w > 1``
    c : int
        Cardinality, ``1 < c <= 16``

    Returns
    -------
    Word
        The symbolic representation of the series

    Raises
    ------
    InvalidParameter
        On out-of-range parameters or non-finite input
    ResourceExhausted
        If the intermediate arrays cannot be allocated

    Examples
    --------
    >>> to_sax([1, 2, 3, 4, 5, 6, 7, 8], w=4, c=4).symbols.tolist()
    [0, 1, 2, 3]
    """
    x = as_series(series)
    n = len(x)
    _check_encoder_params(n, w, c)

    try:
        std = x.std()
        if std < STAT_EPS:
            symbols = np.full(w, c // 2, dtype=np.uint8)
        else:
            normalized = (x - x.mean()) / std
            symbols = symbols_for(normalized.reshape(w, n // w).mean(axis=1), c)
    except MemoryError as e:
        raise ResourceExhausted(f"could not encode series of length {n}") from e

    return Word(symbols, cardinality=c, source_length=n)
