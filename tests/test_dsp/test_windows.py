"""Tests for dsp.windows module."""

import warnings

import numpy as np
import pytest

from firstream.config import WindowKind
from firstream.dsp.windows import blackman, get_window, hamming, triangle


def test_hamming():
    """Test Hamming window."""
    w = hamming(5)
    np.testing.assert_allclose(w, [0.08, 0.54, 1.0, 0.54, 0.08], atol=1e-12)

    w = hamming(10)
    assert len(w) == 10
    # Should be symmetric
    np.testing.assert_allclose(w, w[::-1], atol=1e-12)


def test_triangle():
    """Test triangle window."""
    np.testing.assert_allclose(triangle(5), [0.2, 0.6, 1.0, 0.6, 0.2], atol=1e-12)
    np.testing.assert_allclose(triangle(4), [0.25, 0.75, 0.75, 0.25], atol=1e-12)

    w = triangle(1)
    assert len(w) == 1
    assert w[0] == 1.0


def test_blackman():
    """Test Blackman window with subtracted second cosine term."""
    w = blackman(5)
    np.testing.assert_allclose(w, [-0.16, 0.5, 0.84, 0.5, -0.16], atol=1e-12)

    w = blackman(20)
    assert len(w) == 20
    np.testing.assert_allclose(w, w[::-1], atol=1e-12)


@pytest.mark.parametrize("func", [hamming, blackman])
def test_single_sample_cosine_windows_are_nan(func):
    """M = 1 divides by zero: NaN without a floating-point warning."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        w = func(1)
    assert len(w) == 1
    assert np.isnan(w[0])


@pytest.mark.parametrize("M", [2, 3, 8, 31, 64])
@pytest.mark.parametrize("kind", list(WindowKind))
def test_window_length(kind, M):
    assert len(get_window(kind, M)) == M


def test_get_window_dispatch():
    np.testing.assert_array_equal(get_window("hamming", 7), hamming(7))
    np.testing.assert_array_equal(get_window(WindowKind.TRIANGLE, 7), triangle(7))
    np.testing.assert_array_equal(get_window("Blackman", 7), blackman(7))


def test_get_window_unknown():
    with pytest.raises(ValueError, match="Unknown window kind"):
        get_window("kaiser", 7)
