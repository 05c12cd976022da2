"""Exception types raised by qslice.

All of them derive from :class:`ValueError`, so callers that only care about
"bad input" can keep catching that.
"""

from __future__ import annotations


class DimensionMismatchError(ValueError):
    """Matrix shapes are incompatible with the requested operation."""


class ConfigurationError(ValueError):
    """A gate placed in a slice cannot act as a single-wire operator."""


class MalformedGateError(ConfigurationError):
    """A non-sentinel gate whose matrix is not a 2x2 unitary."""


__all__ = ["ConfigurationError", "DimensionMismatchError", "MalformedGateError"]
