"""Diagnostics and debugging utilities for firstream."""

from .core import assert_finite, count_non_finite
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "assert_finite",
    "count_non_finite",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
