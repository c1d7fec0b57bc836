"""
Owned sample buffers and the filter initialization result.

Every buffer a filter needs is obtained through :func:`allocate_buffer`,
which turns an interpreter ``MemoryError`` into :class:`AllocationError`
naming the buffer. ``FIRFilter.init()`` reports that failure as an
:class:`InitResult` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np


class AllocationError(MemoryError):
    """Raised when a named filter buffer cannot be allocated."""

    def __init__(self, buffer: str, length: int) -> None:
        super().__init__(f"Could not allocate {length} samples for the {buffer} buffer")
        self.buffer = buffer
        self.length = length


class InitStatus(Enum):
    """Outcome of ``FIRFilter.init()``."""

    SUCCESS = "success"
    ALLOCATION_ERROR = "allocation_error"


@dataclass(frozen=True)
class InitResult:
    """
    Result container returned by ``FIRFilter.init()``.

    Attributes:
        status: Initialization outcome.
        buffer: Name of the buffer that failed to allocate, if any.
        message: Human-readable detail for failures.
    """

    status: InitStatus
    buffer: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is InitStatus.SUCCESS

    def __bool__(self) -> bool:
        return self.ok


def allocate_buffer(length: int, name: str) -> np.ndarray:
    """Allocate a zero-filled float64 buffer.

    Args:
        length: Number of samples.
        name: Buffer name, reported on failure.

    Returns:
        Array of ``length`` zeros.

    Raises:
        AllocationError: If the memory cannot be obtained.
    """
    try:
        return np.zeros(length, dtype=float)
    except (MemoryError, ValueError) as exc:
        # numpy raises ValueError when the byte size overflows the address space
        raise AllocationError(name, length) from exc
