"""
Core SAX engine: ring buffer, breakpoint tables, encoder, words and windows.
"""

from .breakpoints import (
    MAX_CARDINALITY,
    MIN_CARDINALITY,
    breakpoints_for,
    distance_table,
    region_bounds,
    region_distance,
    symbol_for,
    symbols_for,
)
from .encoder import STAT_EPS, check_nwc, paa, to_sax, znormalize
from .ring_buffer import RingBuffer
from .window import Window, WindowState
from .word import Word

__all__ = [
    "MAX_CARDINALITY",
    "MIN_CARDINALITY",
    "breakpoints_for",
    "distance_table",
    "region_bounds",
    "region_distance",
    "symbol_for",
    "symbols_for",
    "STAT_EPS",
    "check_nwc",
    "paa",
    "to_sax",
    "znormalize",
    "RingBuffer",
    "Window",
    "WindowState",
    "Word",
]
