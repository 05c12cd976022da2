"""Debug mode: extra consistency checks during evolution.

When enabled, every evolution step checks that the running state is still
normalised and every unitary gate is validated as its slice is built. The
initial value comes from the ``QSLICE_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

ENV_VAR = "QSLICE_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env() -> bool:
    return os.environ.get(ENV_VAR, "").strip().lower() in _TRUTHY


_enabled: bool = _flag_from_env()


def is_debug_enabled() -> bool:
    """Whether debug checks are currently on."""
    return _enabled


def set_debug_enabled(enabled: bool) -> None:
    global _enabled
    _enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch debug checks on (or off) for the duration of a ``with`` block.

    The previous setting is restored on exit, also when the block raises.

    >>> with debug_context():
    ...     states = evolve(initial_state(2), slices)  # doctest: +SKIP
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)
