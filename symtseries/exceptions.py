"""
Exception types raised by symtseries.

Parameter errors subclass ``ValueError`` and allocation errors subclass
``MemoryError`` so callers can keep catching the builtin types.
"""


class SymTSeriesError(Exception):
    """Base class for all symtseries errors."""


class InvalidParameter(SymTSeriesError, ValueError):
    """Out-of-range window/word parameters or malformed input."""


class ResourceExhausted(SymTSeriesError, MemoryError):
    """Allocation of a buffer or word failed."""


class InvalidState(SymTSeriesError, RuntimeError):
    """Operation on a window that was closed or never set up."""
