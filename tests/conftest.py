"""Pytest configuration and shared fixtures for firstream tests.

This module provides:
- A deterministic numpy RNG fixture
- Debug mode pinned off for every test, so FIRSTREAM_DEBUG in the
  environment does not change permissive-mode expectations
"""

import os

import numpy as np
import pytest

from firstream.diagnostics import is_debug_enabled, set_debug_enabled


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_mode_off():
    """Run each test with debug mode disabled, restoring it afterwards."""
    original = is_debug_enabled()
    set_debug_enabled(False)
    yield
    set_debug_enabled(original)
