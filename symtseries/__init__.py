"""
symtseries: Symbolic (SAX) representations of time series.

This package converts real-valued time series into short words over a small
alphabet (Symbolic Aggregate approXimation) and compares those words with a
distance that provably lower-bounds the Euclidean distance of the underlying
z-normalized series.

Key features:
- Batch encoding of a series (z-normalization + PAA + Gaussian breakpoints)
- Streaming encoding over a fixed-size sliding window
- MinDist lower bound, including words of different cardinality
- Canonical string form of words
- YAML-configured pipeline and a command-line interface
"""

from .exceptions import (
    SymTSeriesError,
    InvalidParameter,
    ResourceExhausted,
    InvalidState,
)

# Core engine
from .core import (
    MAX_CARDINALITY,
    MIN_CARDINALITY,
    RingBuffer,
    Window,
    WindowState,
    Word,
    breakpoints_for,
    paa,
    to_sax,
    znormalize,
)

# Distances and string form
from .distances import MinDistResult, mindist, mindist_ab, words_equal, znorm_euclidean
from .codec import ALPHABET, decode, encode

# Windowed encoding
from .api_windows import sax_windows

__all__ = [
    # Errors
    "SymTSeriesError",
    "InvalidParameter",
    "ResourceExhausted",
    "InvalidState",
    # Core
    "MAX_CARDINALITY",
    "MIN_CARDINALITY",
    "RingBuffer",
    "Window",
    "WindowState",
    "Word",
    "breakpoints_for",
    "paa",
    "to_sax",
    "znormalize",
    # Distances
    "MinDistResult",
    "mindist",
    "mindist_ab",
    "words_equal",
    "znorm_euclidean",
    # String form
    "ALPHABET",
    "decode",
    "encode",
    # Windowed encoding
    "sax_windows",
    "version",
]

# Version
__version__ = "0.1.0"


def version() -> str:
    """Return the package version string."""
    return __version__
