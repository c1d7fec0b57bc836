"""Windowed-sinc FIR design primitives.

This package provides the pure, deterministic building blocks used by
:class:`firstream.FIRFilter`:
- Ideal sinc taps for lowpass, highpass, bandpass and bandstop shapes
- Window functions (Hamming, triangle, Blackman)
- Input validation and FIR frequency response

All functions are NumPy-first and return float64 arrays.
"""

from .design import (
    bandpass_taps,
    bandstop_taps,
    centered_index,
    design_taps,
    highpass_taps,
    lowpass_taps,
    sinc,
)
from .utils import check_1d_array, freqz
from .windows import blackman, get_window, hamming, triangle

__all__ = [
    # Utils
    "check_1d_array",
    "freqz",
    # Windows
    "hamming",
    "triangle",
    "blackman",
    "get_window",
    # Design
    "sinc",
    "centered_index",
    "lowpass_taps",
    "highpass_taps",
    "bandpass_taps",
    "bandstop_taps",
    "design_taps",
]
