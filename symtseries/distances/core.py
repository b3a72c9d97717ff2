"""
Lower-bounding distances between SAX words.

MinDist never exceeds the Euclidean distance between the z-normalized raw
series the two words were encoded from, which makes it safe for pruning in
similarity search. Words of different cardinality are compared on the finer
of the two breakpoint tables.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from ..core.breakpoints import breakpoints_for, distance_table
from ..core.encoder import znormalize
from ..core.window import Window
from ..core.word import Word

WordLike = Union[Word, Window]

NAN = float("nan")


@dataclass
class MinDistResult:
    """Container for a multi-resolution MinDist result."""

    distance: float
    above: float
    below: float

    @property
    def is_defined(self) -> bool:
        return not math.isnan(self.distance)

    def __iter__(self):
        return iter((self.distance, self.above, self.below))


def _as_word(obj: WordLike) -> Optional[Word]:
    if isinstance(obj, Word):
        return obj
    if isinstance(obj, Window):
        return obj.current_word()
    raise TypeError(f"Word or Window expected, got {type(obj).__name__}")


def _cover(symbol: int, coarse: int, fine: int) -> Tuple[int, int]:
    """
    Range of ``fine`` symbols whose regions intersect ``symbol`` at ``coarse``.

    Returns the inclusive ``(first, last)`` symbol indices.
    """
    beta_coarse = breakpoints_for(coarse)
    beta_fine = breakpoints_for(fine)
    first = 0 if symbol == 0 else int(
        np.searchsorted(beta_fine, beta_coarse[symbol - 1], side="right"))
    last = fine - 1 if symbol == coarse - 1 else int(
        np.searchsorted(beta_fine, beta_coarse[symbol], side="left"))
    return first, last


def _overlap(fine_symbol: int, fine: int, low: float, high: float) -> float:
    beta = breakpoints_for(fine)
    fine_low = -np.inf if fine_symbol == 0 else beta[fine_symbol - 1]
    fine_high = np.inf if fine_symbol == fine - 1 else beta[fine_symbol]
    return float(min(high, fine_high) - max(low, fine_low))


def _region_gaps(a: Word, b: Word) -> Tuple[np.ndarray, np.ndarray]:
    """Per-symbol (below, above) region distances on the finer table."""
    if a.cardinality >= b.cardinality:
        fine_word, coarse_word = a, b
    else:
        fine_word, coarse_word = b, a
    fine = fine_word.cardinality
    coarse = coarse_word.cardinality
    table = distance_table(fine)

    if fine == coarse:
        gaps = table[fine_word.symbols, coarse_word.symbols]
        return gaps, gaps

    beta_coarse = breakpoints_for(coarse)
    below = np.empty(len(fine_word), dtype=np.float64)
    above = np.empty(len(fine_word), dtype=np.float64)
    for i, (t, s) in enumerate(zip(fine_word.symbols, coarse_word.symbols)):
        first, last = _cover(int(s), coarse, fine)
        # Region distance grows with symbol separation, so the nearest
        # covering symbol gives the smallest gap.
        nearest = min(max(int(t), first), last)
        below[i] = table[t, nearest]

        low = -np.inf if s == 0 else beta_coarse[s - 1]
        high = np.inf if s == coarse - 1 else beta_coarse[s]
        widths = [_overlap(u, fine, low, high) for u in range(first, last + 1)]
        widest = first + int(np.argmax(widths))
        above[i] = table[t, widest]
    return below, above


def _compatible(a: Word, b: Word) -> bool:
    return a is not None and b is not None and a.symbol_count == b.symbol_count


def mindist_ab(a: WordLike, b: WordLike) -> MinDistResult:
    """
    Lower-bounding distance with multi-resolution bounds.

    Args:
        a, b: Words (or Windows, using their current word)

    Returns:
        MinDistResult where ``distance == below`` is the lower bound on the
        true normalized Euclidean distance. When the cardinalities differ,
        ``above`` is the distance obtained by projecting the coarser word's
        symbols onto the finer region they overlap the most. ``above`` is a
        representative estimate, not an upper bound: re-encoding the raw
        series at the finer cardinality may give a larger MinDist (a c=2
        symbol 0 against a c=16 symbol 0 gives ``above == 0``, yet the coarse
        series may re-encode to symbol 7). All three are NaN when the words
        have different symbol counts or a Window has no word yet.
    """
    a = _as_word(a)
    b = _as_word(b)
    if not _compatible(a, b):
        return MinDistResult(NAN, NAN, NAN)

    below, above = _region_gaps(a, b)
    scale = math.sqrt(min(a.source_length, b.source_length) / a.symbol_count)
    low = scale * math.sqrt(float(np.sum(below ** 2)))
    high = scale * math.sqrt(float(np.sum(above ** 2)))
    return MinDistResult(distance=low, above=high, below=low)


def mindist(a: WordLike, b: WordLike) -> float:
    """
    Lower bound on the Euclidean distance between the normalized series
    behind ``a`` and ``b``.

    Returns NaN when the two words cannot be compared.
    """
    return mindist_ab(a, b).distance


def words_equal(a: WordLike, b: WordLike) -> bool:
    """Value equality of two words: dimensions, cardinality and symbols."""
    a = _as_word(a)
    b = _as_word(b)
    if a is None or b is None:
        return False
    return (
        a.symbol_count == b.symbol_count
        and a.cardinality == b.cardinality
        and a.source_length == b.source_length
        and bool(np.array_equal(a.symbols, b.symbols))
    )


def znorm_euclidean(x: np.ndarray, y: np.ndarray) -> float:
    """
    Euclidean distance between the z-normalized versions of two series.

    This is the quantity MinDist lower-bounds.
    """
    x = znormalize(x)
    y = znormalize(y)
    if x.shape != y.shape:
        raise ValueError(f"series must have equal length, got {len(x)} and {len(y)}")
    return float(np.sqrt(np.sum((x - y) ** 2)))
