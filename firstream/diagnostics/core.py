"""Diagnostic checks for filter coefficient sequences."""

from __future__ import annotations

import numpy as np


def count_non_finite(taps: np.ndarray) -> int:
    """Return the number of NaN or Inf entries in ``taps``."""
    return int(np.count_nonzero(~np.isfinite(np.asarray(taps, dtype=float))))


def assert_finite(taps: np.ndarray) -> None:
    """
    Assert that every coefficient is a finite number.

    Parameters
    ----------
    taps:
        Coefficient sequence.

    Raises
    ------
    ValueError
        If any coefficient is NaN or infinite.
    """
    bad = count_non_finite(taps)
    if bad:
        raise ValueError(
            f"Coefficient sequence contains {bad} non-finite value(s) "
            f"out of {len(taps)}."
        )
