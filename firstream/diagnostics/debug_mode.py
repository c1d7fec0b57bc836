"""Process-wide debug switch.

While debug mode is on, a filter built with ``strict=None`` validates its
configuration on ``init()`` and refuses non-finite coefficients. The
initial value comes from the ``FIRSTREAM_DEBUG`` environment variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

_TRUE_VALUES = ("1", "true", "yes", "on")

_debug_enabled: bool = os.getenv("FIRSTREAM_DEBUG", "0").lower() in _TRUE_VALUES


def is_debug_enabled() -> bool:
    """Return whether strict filter checks are currently on."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Turn debug mode on or off for the whole process.

    Parameters
    ----------
    enabled:
        New debug state. Filters that were already initialized are unaffected.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Set debug mode for the duration of a block, then restore the old state.

    Example
    -------
    >>> with debug_context(True):
    ...     FIRFilter(1, "lowpass", "hamming", 0.1).init()  # raises ValueError
    """
    global _debug_enabled
    previous = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = previous
