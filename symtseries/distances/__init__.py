"""
Distances between SAX words.

This module provides the MinDist lower bound (single and multi-resolution)
and value equality of words.
"""

from .core import (
    MinDistResult,
    mindist,
    mindist_ab,
    words_equal,
    znorm_euclidean,
)

__all__ = [
    "MinDistResult",
    "mindist",
    "mindist_ab",
    "words_equal",
    "znorm_euclidean",
]
