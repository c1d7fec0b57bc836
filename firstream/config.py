"""
Filter configuration.

A :class:`FilterConfig` captures everything needed to design a windowed-sinc
FIR filter: tap count, filter shape, window shape and the normalized cutoff
frequencies (fractions of the sampling rate). It is immutable once built.

Frequencies are not range-checked at construction. :meth:`FilterConfig.validate`
applies the strict checks and is run by ``FIRFilter.init()`` only in strict
mode (see :mod:`firstream.filter`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Union

NYQUIST = 0.5


class _NamedKind(Enum):
    """Enum accepting its lowercase value or member name, case-insensitively."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "").replace("_", "")
            for member in cls:
                if member.value == key or member.name.lower().replace("_", "") == key:
                    return member
        return None


class FilterKind(_NamedKind):
    """Filter shape."""

    LOWPASS = "lowpass"
    HIGHPASS = "highpass"
    BANDPASS = "bandpass"
    BANDSTOP = "bandstop"

    @property
    def is_band(self) -> bool:
        """True for shapes that use both cutoff frequencies."""
        return self in (FilterKind.BANDPASS, FilterKind.BANDSTOP)


class WindowKind(_NamedKind):
    """Window shape applied to the ideal impulse response."""

    HAMMING = "hamming"
    TRIANGLE = "triangle"
    BLACKMAN = "blackman"


def filter_kind(kind: Union[FilterKind, str]) -> FilterKind:
    """Coerce a member or name to :class:`FilterKind`.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return FilterKind(kind)
    except ValueError:
        options = [k.value for k in FilterKind]
        raise ValueError(f"Unknown filter kind: {kind!r}. Options: {options}") from None


def window_kind(kind: Union[WindowKind, str]) -> WindowKind:
    """Coerce a member or name to :class:`WindowKind`.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return WindowKind(kind)
    except ValueError:
        options = [k.value for k in WindowKind]
        raise ValueError(f"Unknown window kind: {kind!r}. Options: {options}") from None


@dataclass(frozen=True)
class FilterConfig:
    """
    Immutable FIR filter configuration.

    Attributes:
        tap_count: Number of coefficients N (positive integer).
        kind: Filter shape.
        window: Window shape.
        min_freq: Cutoff for low/high-pass, lower band edge for band shapes.
        max_freq: Upper band edge; ignored by low/high-pass.
    """

    tap_count: int
    kind: FilterKind
    window: WindowKind
    min_freq: float
    max_freq: float = 0.0

    def __post_init__(self) -> None:
        # bool is an Integral but never a meaningful tap count
        if isinstance(self.tap_count, bool) or not isinstance(self.tap_count, Integral):
            raise ValueError(
                f"tap_count must be a positive integer, got {self.tap_count!r}"
            )
        if self.tap_count < 1:
            raise ValueError(f"tap_count must be a positive integer, got {self.tap_count}")

        object.__setattr__(self, "tap_count", int(self.tap_count))

        # frozen: assign normalized fields through object.__setattr__
        object.__setattr__(self, "kind", filter_kind(self.kind))
        object.__setattr__(self, "window", window_kind(self.window))
        object.__setattr__(self, "min_freq", float(self.min_freq))
        object.__setattr__(self, "max_freq", float(self.max_freq))

    def validate(self) -> None:
        """
        Apply strict parameter checks.

        Requires ``tap_count >= 2`` and ``0 < min_freq < 0.5``; band shapes
        additionally require ``min_freq < max_freq < 0.5``.

        Raises:
            ValueError: On the first violated constraint.
        """
        if self.tap_count < 2:
            raise ValueError(f"tap_count must be >= 2, got {self.tap_count}")

        if not 0.0 < self.min_freq < NYQUIST:
            raise ValueError(
                f"min_freq must lie in (0, {NYQUIST}), got {self.min_freq}"
            )

        if self.kind.is_band:
            if not self.max_freq < NYQUIST:
                raise ValueError(
                    f"max_freq must lie below {NYQUIST}, got {self.max_freq}"
                )
            if not self.min_freq < self.max_freq:
                raise ValueError(
                    f"Band edges must satisfy min_freq < max_freq, "
                    f"got ({self.min_freq}, {self.max_freq})"
                )
