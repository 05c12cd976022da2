"""Diagnostics and debugging utilities for qslice."""

from .core import assert_normalized, is_unitary, state_norm
from .debug_mode import debug_context, is_debug_enabled, set_debug_enabled

__all__ = [
    "state_norm",
    "assert_normalized",
    "is_unitary",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
