"""Tests for buffer allocation and init results."""

import numpy as np
import pytest

from firstream.buffers import AllocationError, InitResult, InitStatus, allocate_buffer


def test_allocate_buffer_zero_filled():
    buf = allocate_buffer(8, "history")
    assert buf.shape == (8,)
    assert buf.dtype == float
    assert not buf.any()


def test_allocate_buffer_reports_memory_error(monkeypatch):
    def failing_zeros(*args, **kwargs):
        raise MemoryError

    monkeypatch.setattr(np, "zeros", failing_zeros)

    with pytest.raises(AllocationError) as excinfo:
        allocate_buffer(1024, "coefficients")

    err = excinfo.value
    assert isinstance(err, MemoryError)
    assert err.buffer == "coefficients"
    assert err.length == 1024
    assert "coefficients" in str(err)


def test_init_result_truthiness():
    ok = InitResult(InitStatus.SUCCESS)
    assert ok.ok
    assert ok
    assert ok.buffer is None

    failed = InitResult(InitStatus.ALLOCATION_ERROR, buffer="window", message="no memory")
    assert not failed.ok
    assert not failed
    assert failed.buffer == "window"


def test_allocate_buffer_reports_oversized_length():
    """numpy raises ValueError when the byte size overflows; report it as allocation failure."""
    with pytest.raises(AllocationError) as excinfo:
        allocate_buffer(2**62, "history")
    assert excinfo.value.buffer == "history"
    assert isinstance(excinfo.value.__cause__, ValueError)
