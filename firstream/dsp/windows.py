"""Window functions for FIR design.

Implements the Hamming, triangle and Blackman weights multiplied into the
raw sinc taps. All windows are the symmetric form of length M.

Hamming and Blackman divide by ``M - 1``; for M = 1 they return NaN rather
than raising, and numpy's floating-point warnings are silenced.
"""

from typing import Union

import numpy as np

from ..config import WindowKind, window_kind


def _phase(M: int) -> np.ndarray:
    # 2πn/(M-1); NaN when M == 1
    n = np.arange(M, dtype=float)
    with np.errstate(divide="ignore", invalid="ignore"):
        return 2.0 * np.pi * n / (M - 1)


def hamming(M: int) -> np.ndarray:
    """Generate Hamming window.

    Hamming window: w[n] = 0.54 - 0.46 * cos(2πn/(M-1))

    Args:
        M: Window length.

    Returns:
        Window array of length M, dtype float64.
    """
    return 0.54 - 0.46 * np.cos(_phase(M))


def triangle(M: int) -> np.ndarray:
    """Generate triangle window.

    Triangle window: w[n] = 1 - |(n - (M-1)/2) / (M/2)|

    The end points are nonzero: for M = 5 the window is
    [0.2, 0.6, 1.0, 0.6, 0.2].

    Args:
        M: Window length.

    Returns:
        Window array of length M, dtype float64.
    """
    n = np.arange(M, dtype=float)
    return 1.0 - np.abs((n - (M - 1) / 2.0) / (M / 2.0))


def blackman(M: int) -> np.ndarray:
    """Generate Blackman window.

    Blackman window: w[n] = 0.42 - 0.5*cos(2πn/(M-1)) - 0.08*cos(4πn/(M-1))

    The second cosine term is subtracted, so the end points are -0.16 and
    the center is 0.84 for odd M.

    Args:
        M: Window length.

    Returns:
        Window array of length M, dtype float64.
    """
    phase = _phase(M)
    return 0.42 - 0.5 * np.cos(phase) - 0.08 * np.cos(2.0 * phase)


def get_window(kind: Union[WindowKind, str], M: int) -> np.ndarray:
    """Return the window of the given kind and length.

    Args:
        kind: Window shape (member or name).
        M: Window length.

    Returns:
        Window array of length M.

    Raises:
        ValueError: If kind is unknown.
    """
    window_funcs = {
        WindowKind.HAMMING: hamming,
        WindowKind.TRIANGLE: triangle,
        WindowKind.BLACKMAN: blackman,
    }
    return window_funcs[window_kind(kind)](M)
