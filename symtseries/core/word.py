"""Immutable symbolic word produced by SAX encoding."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from ..exceptions import InvalidParameter, ResourceExhausted
from .breakpoints import check_cardinality


@dataclass(frozen=True, eq=False)
class Word:
    """
    A SAX word: ``symbol_count`` symbols, each in ``[0, cardinality)``.

    ``source_length`` is the number of raw samples the word summarizes and
    scales the MinDist lower bound. Words decoded from a string carry
    ``source_length == symbol_count`` since the raw length is not part of the
    string.

    The symbol array is a private read-only copy, so a word never aliases
    the buffer it was built from.
    """

    symbols: np.ndarray
    cardinality: int
    source_length: Optional[int] = None

    def __post_init__(self):
        """Validate the word and freeze its symbols."""
        c = check_cardinality(self.cardinality)
        try:
            raw = np.asarray(self.symbols)
            if raw.ndim != 1:
                raise InvalidParameter(f"symbols must be 1D, got shape {raw.shape}")
            if raw.size == 0:
                raise InvalidParameter("a word needs at least one symbol")
            if not np.issubdtype(raw.dtype, np.integer):
                raise InvalidParameter(f"symbols must be integers, got dtype {raw.dtype}")
            if raw.min() < 0 or raw.max() >= c:
                raise InvalidParameter(
                    f"symbols must be in [0, {c}), got range [{raw.min()}, {raw.max()}]"
                )
            symbols = raw.astype(np.uint8, copy=True)
        except MemoryError as e:
            raise ResourceExhausted("could not allocate word symbols") from e
        symbols.setflags(write=False)

        n = len(symbols) if self.source_length is None else int(self.source_length)
        if n < len(symbols):
            raise InvalidParameter(
                f"source_length ({n}) must be >= symbol count ({len(symbols)})"
            )

        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "cardinality", c)
        object.__setattr__(self, "source_length", n)

    @property
    def symbol_count(self) -> int:
        return len(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def copy(self) -> Word:
        """Independent duplicate of this word."""
        return Word(self.symbols, self.cardinality, self.source_length)

    @classmethod
    def from_array(cls, values: Union[np.ndarray, Iterable[float]], w: int, c: int) -> Word:
        """Encode raw ``values`` into a word of ``w`` symbols over ``c`` letters."""
        from .encoder import as_series, check_nwc, to_sax

        values = as_series(values)
        check_nwc(len(values), w, c)
        return to_sax(values, w, c)

    @classmethod
    def from_string(cls, text: str, cardinality: int) -> Word:
        """Decode a canonical SAX string, see :func:`symtseries.codec.decode`."""
        from ..codec import decode

        return decode(text, cardinality)

    def to_string(self) -> str:
        from ..codec import encode

        return encode(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Word({self.to_string()!r}, cardinality={self.cardinality}, "
            f"source_length={self.source_length})"
        )

    def __eq__(self, other) -> bool:
        from ..distances.core import words_equal

        if not isinstance(other, Word):
            return NotImplemented
        return words_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.symbols.tobytes(), self.cardinality, self.source_length))

    def tolist(self) -> Sequence[int]:
        return self.symbols.tolist()
