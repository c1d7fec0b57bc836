"""Tests for debug mode and coefficient diagnostics."""

import numpy as np
import pytest

from firstream import FIRFilter, FilterKind, WindowKind
from firstream.diagnostics import (
    assert_finite,
    count_non_finite,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    assert not is_debug_enabled()

    set_debug_enabled(True)
    assert is_debug_enabled()

    with debug_context(False):
        assert not is_debug_enabled()

    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    with debug_context(True):
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    """Test that the previous mode is restored when the block raises."""
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")

    assert not is_debug_enabled()


def test_count_non_finite() -> None:
    assert count_non_finite(np.array([0.0, 1.0, -2.5])) == 0
    assert count_non_finite(np.array([np.nan, 1.0, np.inf, -np.inf])) == 3


def test_assert_finite() -> None:
    assert_finite(np.array([0.1, 0.2]))

    with pytest.raises(ValueError, match="2 non-finite"):
        assert_finite(np.array([np.nan, 0.0, np.inf]))


def test_debug_mode_makes_init_strict() -> None:
    """Test that init() validates parameters only while debug mode is on."""
    permissive = FIRFilter(5, FilterKind.LOWPASS, WindowKind.HAMMING, 0.7)
    assert permissive.init().ok

    with debug_context(True):
        strict = FIRFilter(5, FilterKind.LOWPASS, WindowKind.HAMMING, 0.7)
        assert strict.strict
        with pytest.raises(ValueError, match="min_freq"):
            strict.init()


def test_explicit_strict_overrides_debug_mode() -> None:
    """Test that strict=False wins over debug mode and strict=True applies without it."""
    with debug_context(True):
        fir = FIRFilter(5, FilterKind.LOWPASS, WindowKind.HAMMING, 0.7, strict=False)
        assert not fir.strict
        assert fir.init().ok

    fir = FIRFilter(5, FilterKind.LOWPASS, WindowKind.HAMMING, 0.7, strict=True)
    with pytest.raises(ValueError):
        fir.init()
