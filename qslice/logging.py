"""Logging utilities for qslice.

Every module asks for its logger through :func:`get_logger` so that all
output shares one handler and one format.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional, Union

_ROOT_NAME = "qslice"
_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_level: int = logging.WARNING
_formatter = logging.Formatter(_FORMAT)
_stream: Optional[IO[str]] = None

_loggers: dict[str, logging.Logger] = {}

LevelLike = Union[int, str]


def _coerce_level(level: LevelLike) -> int:
    """Map a level name such as ``"debug"`` to its number; unknown names mean WARNING."""
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _install_handler(logger: logging.Logger, stream: Optional[IO[str]]) -> None:
    """Replace the handlers of ``logger`` with one stream handler."""
    for old in list(logger.handlers):
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr if stream is None else stream)
    handler.setLevel(_level)
    handler.setFormatter(_formatter)
    logger.addHandler(handler)
    logger.setLevel(_level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create the logger for ``name``.

    The returned logger is namespaced under ``qslice.`` and cached, so calling
    this repeatedly with the same name never stacks handlers.

    Args:
        name: Logger name (typically ``__name__``). If None, returns the
            package logger.

    Example:
        >>> from qslice.logging import get_logger
        >>> log = get_logger(__name__)
        >>> log.debug("building slice operator")
    """
    full_name = _ROOT_NAME if name in (None, _ROOT_NAME) else name
    if full_name != _ROOT_NAME and not full_name.startswith(_ROOT_NAME + "."):
        full_name = f"{_ROOT_NAME}.{full_name}"

    cached = _loggers.get(full_name)
    if cached is not None:
        return cached

    logger = logging.getLogger(full_name)
    if not logger.handlers:
        _install_handler(logger, _stream)
    logger.propagate = False
    _loggers[full_name] = logger
    return logger


def set_log_level(level: LevelLike) -> None:
    """Set the level of every qslice logger, existing and future.

    Args:
        level: A ``logging`` level constant or its name (``"DEBUG"``, ...).
    """
    global _level
    _level = _coerce_level(level)
    for logger in _loggers.values():
        logger.setLevel(_level)
        for handler in logger.handlers:
            handler.setLevel(_level)


def configure_logging(
    level: LevelLike = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Reconfigure level, format and output stream of all qslice loggers.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses the default.
        stream: Output stream (default: sys.stderr). Loggers created later
            write to the same stream.
    """
    global _level, _formatter, _stream
    _level = _coerce_level(level)
    _formatter = logging.Formatter(format_string or _FORMAT)
    _stream = stream
    for logger in _loggers.values():
        _install_handler(logger, _stream)
