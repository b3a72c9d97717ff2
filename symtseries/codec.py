"""
Canonical string form of SAX words.

Symbol ``k`` is written as the ``k``-th lowercase letter, so a word over
cardinality ``c`` uses only the first ``c`` letters (``a`` .. ``p`` at most).
The string does not carry the cardinality or the raw series length; both
have to be stored alongside it when a word is persisted.
"""

from __future__ import annotations

import string

import numpy as np

from .core.breakpoints import check_cardinality
from .core.word import Word
from .exceptions import InvalidParameter

ALPHABET = string.ascii_lowercase

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def encode(word: Word) -> str:
    """
    Render ``word`` as its canonical string, one letter per symbol.

    Raises:
        InvalidParameter: if a symbol is not representable for the word's
            cardinality
    """
    symbols = word.symbols
    if symbols.size and int(symbols.max()) >= min(word.cardinality, len(ALPHABET)):
        raise InvalidParameter("unprocessable symbols for cardinality detected")
    return "".join(ALPHABET[s] for s in symbols.tolist())


def decode(text: str, cardinality: int) -> Word:
    """
    Parse a canonical string back into a :class:`Word`.

    The resulting word has ``source_length == symbol_count``.

    Raises:
        InvalidParameter: if the string is shorter than two characters,
            contains a letter outside the alphabet or beyond ``cardinality``,
            or if ``cardinality`` is outside [2, 16]
    """
    if not isinstance(text, str):
        raise InvalidParameter(f"SAX string expected, got {type(text).__name__}")
    if len(text) <= 1:
        raise InvalidParameter("length of SAX string should be > 1")
    c = check_cardinality(cardinality)

    symbols = np.empty(len(text), dtype=np.uint8)
    for i, ch in enumerate(text):
        index = _INDEX.get(ch)
        if index is None or index >= c:
            raise InvalidParameter(
                f"illegal symbol {ch!r} at position {i} for cardinality {c}"
            )
        symbols[i] = index
    return Word(symbols, cardinality=c, source_length=len(text))
