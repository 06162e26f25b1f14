"""Logging helpers for framegaps.

Modules log through ``get_logger(__name__)`` and never configure handlers;
the package logger carries only a NullHandler until a script opts in with
``configure_logging()``. Applications that set up their own logging receive
framegaps records through propagation.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "framegaps"
LOG_LEVEL_ENV_VAR = "FRAMEGAPS_LOG_LEVEL"

# Name of the console handler installed by configure_logging().
CONSOLE_HANDLER_NAME = "framegaps.console"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Optional[Union[str, int]] = None) -> int:
    """Turn a level name or number into a logging level.

    None reads ``FRAMEGAPS_LOG_LEVEL`` and falls back to INFO.

    Raises:
        ValueError: If ``level`` is a name logging does not know.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR) or "INFO"
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> logging.Handler:
    """Attach a stderr console handler to the ``framegaps`` logger (never root).

    Calling it again reuses the existing console handler and only updates its
    level and format; ``force=True`` replaces it instead. Handlers added by
    anyone else are left alone.

    Args:
        level: Level name or number; see :func:`resolve_level`.
        fmt: Record format, defaults to ``DEFAULT_FMT``.
        datefmt: Timestamp format, defaults to ``DEFAULT_DATEFMT``.
        force: Drop the current console handler and install a fresh one.

    Returns:
        The console handler.
    """
    resolved = resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)

    handler = next((h for h in logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME), None)
    if handler is not None and force:
        logger.removeHandler(handler)
        handler.close()
        handler = None
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(CONSOLE_HANDLER_NAME)
        logger.addHandler(handler)

    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT, datefmt=datefmt or DEFAULT_DATEFMT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger for ``name``, or the package logger when omitted."""
    return logging.getLogger(name or PACKAGE_LOGGER)
