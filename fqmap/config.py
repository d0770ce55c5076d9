"""Runtime settings for fqmap.

Settings are module-level values seeded from environment variables:

- ``FQMAP_DEBUG``: enables debug mode (``1``, ``true``, ``yes``, ``on``).
  In debug mode the Jordan-Wigner engine type-checks every input code and
  logs each term it maps.
- ``FQMAP_LOG_LEVEL``: initial level for loggers created through
  :func:`fqmap.logging.get_logger` (``DEBUG``, ``INFO``, ...).
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import Iterator

_DEBUG_ENV_VAR = "FQMAP_DEBUG"
_LOG_LEVEL_ENV_VAR = "FQMAP_LOG_LEVEL"

_TRUTHY = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in _TRUTHY


def is_debug_enabled() -> bool:
    """
    Return whether debug mode is currently enabled.

    Debug mode can be toggled via set_debug_enabled(...) or the
    FQMAP_DEBUG environment variable.
    """
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def log_level_from_env(default: int = logging.WARNING) -> int:
    """
    Return the logging level named by FQMAP_LOG_LEVEL, or `default`.

    Unknown names fall back to `default`.
    """
    value = os.getenv(_LOG_LEVEL_ENV_VAR)
    if not value:
        return default
    if value.isdigit():
        return int(value)
    level = getattr(logging, value.strip().upper(), None)
    return level if isinstance(level, int) else default


__all__ = [
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "log_level_from_env",
]
