"""firstream - a streaming windowed-sinc FIR filter."""

__version__ = "0.1.0"

from .buffers import AllocationError, InitResult, InitStatus, allocate_buffer
from .config import FilterConfig, FilterKind, WindowKind
from .diagnostics import (
    assert_finite,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

# Design primitives
from .dsp import design_taps, freqz, get_window
from .filter import FilterState, FIRFilter
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Configuration
    "FilterConfig",
    "FilterKind",
    "WindowKind",
    # Filter
    "FIRFilter",
    "FilterState",
    "InitResult",
    "InitStatus",
    "AllocationError",
    "allocate_buffer",
    # Design
    "design_taps",
    "get_window",
    "freqz",
    # Diagnostics
    "assert_finite",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
