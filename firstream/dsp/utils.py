"""Utility functions for signal processing.

Provides input validation and frequency-response inspection of FIR
coefficient sequences.
"""

from typing import Tuple

import numpy as np


def check_1d_array(x) -> np.ndarray:
    """Validate and cast input to 1D float64 array.

    Args:
        x: Input array-like object.

    Returns:
        1D float64 numpy array.

    Raises:
        ValueError: If input is not 1D, contains NaN, or contains Inf.
    """
    arr = np.asarray(x, dtype=float)
    if arr.ndim == 0:
        arr = arr.reshape(1)
    elif arr.ndim > 1:
        raise ValueError(f"Expected 1D array, got {arr.ndim}D array")
    if np.any(np.isnan(arr)):
        raise ValueError("Input contains NaN values")
    if np.any(np.isinf(arr)):
        raise ValueError("Input contains Inf values")
    return arr


def freqz(b: np.ndarray, worN: int = 512, fs: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
    """Compute the frequency response of an FIR filter.

    Samples the DTFT of the taps with a zero-padded real FFT.

    Args:
        b: FIR coefficients.
        worN: FFT length; the response has ``worN // 2 + 1`` points
            (default: 512).
        fs: Sampling frequency in Hz (default: 1.0).

    Returns:
        Tuple (w, h) where:
        - w: Frequency array in Hz (0 to fs/2).
        - h: Complex frequency response H(e^(jw)).

    Raises:
        ValueError: If worN is smaller than the number of taps.
    """
    b = np.asarray(b, dtype=float)
    if b.ndim == 0:
        b = b.reshape(1)

    if worN < len(b):
        raise ValueError(f"worN ({worN}) must be >= number of taps ({len(b)})")

    h = np.fft.rfft(b, n=worN)
    w = np.fft.rfftfreq(worN, 1.0 / fs)
    return w, h
