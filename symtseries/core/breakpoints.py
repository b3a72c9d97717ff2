"""
Gaussian breakpoint tables for SAX symbol assignment.

For every cardinality ``c`` in ``[2, 16]`` the table holds the ``c - 1``
quantiles of the standard normal distribution that split it into ``c``
equal-probability regions. The values are constants so that words
produced by different processes are always comparable.

Region ``k`` of cardinality ``c`` is the half-open interval
``[beta[k - 1], beta[k])`` with ``beta[-1] = -inf`` and ``beta[c - 1] = +inf``.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, Tuple

import numpy as np

from ..exceptions import InvalidParameter

MIN_CARDINALITY = 2
MAX_CARDINALITY = 16

_BREAKPOINTS: Dict[int, Tuple[float, ...]] = {
    2: (0.0,),
    3: (-0.4307272993, 0.4307272993),
    4: (-0.6744897502, 0.0, 0.6744897502),
    5: (-0.8416212336, -0.2533471031, 0.2533471031, 0.8416212336),
    6: (-0.9674215661, -0.4307272993, 0.0, 0.4307272993, 0.9674215661),
    7: (-1.0675705239, -0.5659488219, -0.1800123698, 0.1800123698,
        0.5659488219, 1.0675705239),
    8: (-1.1503493804, -0.6744897502, -0.3186393640, 0.0, 0.3186393640,
        0.6744897502, 1.1503493804),
    9: (-1.2206403488, -0.7647096738, -0.4307272993, -0.1397102989,
        0.1397102989, 0.4307272993, 0.7647096738, 1.2206403488),
    10: (-1.2815515655, -0.8416212336, -0.5244005127, -0.2533471031, 0.0,
         0.2533471031, 0.5244005127, 0.8416212336, 1.2815515655),
    11: (-1.3351777361, -0.9084578685, -0.6045853466, -0.3487556955,
         -0.1141852943, 0.1141852943, 0.3487556955, 0.6045853466,
         0.9084578685, 1.3351777361),
    12: (-1.3829941271, -0.9674215661, -0.6744897502, -0.4307272993,
         -0.2104283942, 0.0, 0.2104283942, 0.4307272993, 0.6744897502,
         0.9674215661, 1.3829941271),
    13: (-1.4260768723, -1.0200762328, -0.7363159174, -0.5024022234,
         -0.2933812321, -0.0965586153, 0.0965586153, 0.2933812321,
         0.5024022234, 0.7363159174, 1.0200762328, 1.4260768723),
    14: (-1.4652337927, -1.0675705239, -0.7916386077, -0.5659488219,
         -0.3661063568, -0.1800123698, 0.0, 0.1800123698, 0.3661063568,
         0.5659488219, 0.7916386077, 1.0675705239, 1.4652337927),
    15: (-1.5010859460, -1.1107716166, -0.8416212336, -0.6229257232,
         -0.4307272993, -0.2533471031, -0.0836517339, 0.0836517339,
         0.2533471031, 0.4307272993, 0.6229257232, 0.8416212336,
         1.1107716166, 1.5010859460),
    16: (-1.5341205444, -1.1503493804, -0.8871465590, -0.6744897502,
         -0.4887764111, -0.3186393640, -0.1573106846, 0.0, 0.1573106846,
         0.3186393640, 0.4887764111, 0.6744897502, 0.8871465590,
         1.1503493804, 1.5341205444),
}


def check_cardinality(cardinality: int) -> int:
    """Validate a cardinality and return it as a plain ``int``."""
    if isinstance(cardinality, bool) or not isinstance(cardinality, (int, np.integer)):
        raise InvalidParameter(f"cardinality must be an integer, got {cardinality!r}")
    if not MIN_CARDINALITY <= cardinality <= MAX_CARDINALITY:
        raise InvalidParameter(
            f"cardinality must be in [{MIN_CARDINALITY}, {MAX_CARDINALITY}], "
            f"got {cardinality}"
        )
    return int(cardinality)


@lru_cache(maxsize=None)
def breakpoints_for(cardinality: int) -> np.ndarray:
    """
    Return the ascending breakpoints for ``cardinality``.

    The returned array is read-only and shared between callers.

    Raises:
        InvalidParameter: if cardinality is outside [2, 16]
    """
    c = check_cardinality(cardinality)
    beta = np.array(_BREAKPOINTS[c], dtype=np.float64)
    beta.setflags(write=False)
    return beta


def symbol_for(value: float, cardinality: int) -> int:
    """Index of the region of ``cardinality`` that contains ``value``."""
    beta = breakpoints_for(cardinality)
    return int(np.searchsorted(beta, value, side="right"))


def symbols_for(values: np.ndarray, cardinality: int) -> np.ndarray:
    """Vectorised :func:`symbol_for` over an array of normalized values."""
    beta = breakpoints_for(cardinality)
    return np.searchsorted(beta, np.asarray(values, dtype=np.float64), side="right").astype(np.uint8)


def region_bounds(symbol: int, cardinality: int) -> Tuple[float, float]:
    """Return ``(low, high)`` of the half-open region covered by ``symbol``."""
    beta = breakpoints_for(cardinality)
    if not 0 <= symbol < cardinality:
        raise InvalidParameter(
            f"symbol {symbol} is not valid for cardinality {cardinality}"
        )
    low = -np.inf if symbol == 0 else float(beta[symbol - 1])
    high = np.inf if symbol == cardinality - 1 else float(beta[symbol])
    return low, high


@lru_cache(maxsize=None)
def distance_table(cardinality: int) -> np.ndarray:
    """
    Symbol-to-symbol lookup table of :func:`region_distance` values.

    Entry ``[i, j]`` is zero for equal or adjacent symbols and otherwise the
    gap ``beta[max(i, j) - 1] - beta[min(i, j)]``.
    """
    beta = breakpoints_for(cardinality)
    c = len(beta) + 1
    table = np.zeros((c, c), dtype=np.float64)
    for i in range(c):
        for j in range(i + 2, c):
            table[i, j] = table[j, i] = beta[j - 1] - beta[i]
    table.setflags(write=False)
    return table


def region_distance(symbol_a: int, symbol_b: int, cardinality: int) -> float:
    """Minimum normalized distance between values mapped to the two symbols."""
    table = distance_table(cardinality)
    if not (0 <= symbol_a < cardinality and 0 <= symbol_b < cardinality):
        raise InvalidParameter(
            f"symbols ({symbol_a}, {symbol_b}) are not valid for cardinality {cardinality}"
        )
    return float(table[symbol_a, symbol_b])
