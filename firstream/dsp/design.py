"""FIR coefficient design using the windowed-sinc method.

Produces the raw (unwindowed) taps for lowpass, highpass, bandpass and
bandstop shapes. Taps are indexed by the centered index
``n[i] = i - floor(N/2)``, so for even N the response is centered one
sample to the right of the array midpoint.

The band formulas combine lowpass responses as
``lp(min_freq) - lp(max_freq)`` (plus a unit impulse for bandstop). With
``min_freq < max_freq`` this gives a bandpass of negated sign and a
bandstop whose stop band sits between the edges; see ``DESIGN.md``.
"""

from typing import Union

import numpy as np

from ..config import FilterKind, filter_kind


def sinc(x) -> np.ndarray:
    """Normalized sinc: sin(πx)/(πx), with sinc(0) = 1."""
    return np.sinc(x)


def centered_index(numtaps: int) -> np.ndarray:
    """Return ``i - floor(numtaps/2)`` for i in [0, numtaps) as float64."""
    return np.arange(numtaps, dtype=float) - (numtaps // 2)


def _ideal_lowpass(n: np.ndarray, freq: float) -> np.ndarray:
    # h[n] = 2f * sinc(2f * n)
    return 2.0 * freq * sinc(2.0 * freq * n)


def lowpass_taps(numtaps: int, freq: float) -> np.ndarray:
    """Ideal lowpass taps ``2f * sinc(2f * n)``.

    Args:
        numtaps: Number of taps N.
        freq: Normalized cutoff frequency.

    Returns:
        Array of length N.
    """
    return _ideal_lowpass(centered_index(numtaps), freq)


def highpass_taps(numtaps: int, freq: float) -> np.ndarray:
    """Ideal highpass taps ``sinc(n) - 2f * sinc(2f * n)``.

    ``sinc(n)`` is the unit impulse at the center tap.

    Args:
        numtaps: Number of taps N.
        freq: Normalized cutoff frequency.

    Returns:
        Array of length N.
    """
    n = centered_index(numtaps)
    return sinc(n) - _ideal_lowpass(n, freq)


def bandpass_taps(numtaps: int, min_freq: float, max_freq: float) -> np.ndarray:
    """Band taps ``2f_min * sinc(2f_min * n) - 2f_max * sinc(2f_max * n)``.

    Args:
        numtaps: Number of taps N.
        min_freq: Lower band edge.
        max_freq: Upper band edge.

    Returns:
        Array of length N.
    """
    n = centered_index(numtaps)
    return _ideal_lowpass(n, min_freq) - _ideal_lowpass(n, max_freq)


def bandstop_taps(numtaps: int, min_freq: float, max_freq: float) -> np.ndarray:
    """Band taps ``2f_min * sinc(2f_min * n) - 2f_max * sinc(2f_max * n) + sinc(n)``.

    Args:
        numtaps: Number of taps N.
        min_freq: Lower band edge.
        max_freq: Upper band edge.

    Returns:
        Array of length N.
    """
    n = centered_index(numtaps)
    return _ideal_lowpass(n, min_freq) - _ideal_lowpass(n, max_freq) + sinc(n)


def design_taps(
    kind: Union[FilterKind, str],
    numtaps: int,
    min_freq: float,
    max_freq: float = 0.0,
) -> np.ndarray:
    """Design raw FIR taps for the given shape.

    Pure and deterministic: identical arguments give bit-identical output.
    Lowpass and highpass read only ``min_freq``.

    Args:
        kind: Filter shape (member or name).
        numtaps: Number of taps N.
        min_freq: Cutoff (low/highpass) or lower band edge.
        max_freq: Upper band edge (band shapes only).

    Returns:
        Raw taps, float64 array of length N.

    Raises:
        ValueError: If kind is unknown.
    """
    kind = filter_kind(kind)

    if kind is FilterKind.LOWPASS:
        return lowpass_taps(numtaps, min_freq)
    elif kind is FilterKind.HIGHPASS:
        return highpass_taps(numtaps, min_freq)
    elif kind is FilterKind.BANDPASS:
        return bandpass_taps(numtaps, min_freq, max_freq)
    else:  # bandstop
        return bandstop_taps(numtaps, min_freq, max_freq)
