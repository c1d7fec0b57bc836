"""
Streaming windowed-sinc FIR filter.

Designs its coefficients once on :meth:`FIRFilter.init` and then convolves
one input sample per :meth:`FIRFilter.push` call against a circular history
of the most recent ``tap_count`` samples.

Usage:
    fir = FIRFilter(31, FilterKind.LOWPASS, WindowKind.HAMMING, 0.1)
    result = fir.init()
    if not result.ok:
        raise SystemExit(result.message)

    for x in samples:
        y = fir.push(x)
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple, Union

import numpy as np

from .buffers import AllocationError, InitResult, InitStatus, allocate_buffer
from .config import FilterConfig, FilterKind, WindowKind
from .diagnostics import assert_finite, count_non_finite, is_debug_enabled
from .dsp.design import design_taps
from .dsp.utils import check_1d_array, freqz
from .dsp.windows import get_window
from .logging import get_logger

logger = get_logger(__name__)


class FilterState(Enum):
    """Lifecycle state of a :class:`FIRFilter`."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    FAILED = "failed"


class FIRFilter:
    """
    Fixed-coefficient FIR filter with sample-by-sample processing.

    The filter starts UNINITIALIZED, holding only its configuration.
    ``init()`` allocates the coefficient, history and window buffers,
    designs the taps, multiplies in the window and drops the window buffer.
    A successful ``init()`` moves the filter to READY for the rest of its
    lifetime; an allocation failure moves it to FAILED, and the caller has
    to build a new filter.

    Each ``push(x)`` writes ``x`` at the cursor, returns
    ``sum(history[(cursor + k) % N] * coeff[k] for k in range(N))`` and
    advances the cursor. The history starts at zero.

    Instances are not safe for concurrent use: ``push`` mutates the history
    and cursor without locking. Use one filter per channel or serialize
    calls externally.

    Attributes:
        config (FilterConfig): Design parameters.
        state (FilterState): Lifecycle state.
    """

    def __init__(
        self,
        tap_count: int,
        kind: Union[FilterKind, str],
        window: Union[WindowKind, str],
        min_freq: float,
        max_freq: float = 0.0,
        *,
        strict: Optional[bool] = None,
    ):
        """
        Create an uninitialized filter.

        Frequencies are normalized (fraction of the sampling rate) and are
        not range-checked unless strict validation applies on ``init()``.

        Args:
            tap_count: Number of taps N (positive integer)
            kind: Filter shape
            window: Window shape
            min_freq: Cutoff, or lower band edge for band shapes
            max_freq: Upper band edge for band shapes
            strict: Validate parameters on init(). None follows debug mode.

        Raises:
            ValueError: If tap_count is not a positive integer or a kind is unknown
        """
        self._config = FilterConfig(tap_count, kind, window, min_freq, max_freq)
        self._strict = strict
        self._state = FilterState.UNINITIALIZED

        self._coefficients: Optional[np.ndarray] = None
        self._history: Optional[np.ndarray] = None
        self._cursor = 0

    @classmethod
    def from_config(cls, config: FilterConfig, *, strict: Optional[bool] = None) -> "FIRFilter":
        """Create an uninitialized filter from an existing configuration."""
        return cls(
            config.tap_count,
            config.kind,
            config.window,
            config.min_freq,
            config.max_freq,
            strict=strict,
        )

    @property
    def config(self) -> FilterConfig:
        return self._config

    @property
    def state(self) -> FilterState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state is FilterState.READY

    @property
    def tap_count(self) -> int:
        return self._config.tap_count

    @property
    def cursor(self) -> int:
        """History slot the next sample will be written to."""
        return self._cursor

    @property
    def strict(self) -> bool:
        """Whether init() validates parameters (resolved against debug mode)."""
        return is_debug_enabled() if self._strict is None else bool(self._strict)

    def init(self) -> InitResult:
        """
        Allocate buffers and compute the final coefficients.

        Must be called exactly once before streaming.

        Returns:
            InitResult with SUCCESS, or ALLOCATION_ERROR naming the buffer
            that could not be obtained. After a failure the filter is
            FAILED and must not be used.

        Raises:
            RuntimeError: If init() was already called on this filter
            ValueError: In strict mode, if the parameters are out of range
                or the design yields non-finite coefficients
        """
        if self._state is not FilterState.UNINITIALIZED:
            raise RuntimeError(
                f"init() may only be called once; filter is {self._state.value}"
            )

        cfg = self._config
        strict = self.strict
        if strict:
            cfg.validate()

        n_taps = cfg.tap_count
        # design and windowing allocate their own length-N temporaries
        stage = "coefficients"
        try:
            coefficients = allocate_buffer(n_taps, "coefficients")
            history = allocate_buffer(n_taps, "history")
            window = allocate_buffer(n_taps, "window")

            coefficients[:] = design_taps(cfg.kind, n_taps, cfg.min_freq, cfg.max_freq)
            stage = "window"
            window[:] = get_window(cfg.window, n_taps)
            coefficients *= window
            del window
        except AllocationError as exc:
            return self._fail_allocation(exc.buffer, str(exc))
        except MemoryError as exc:
            return self._fail_allocation(
                stage, f"Out of memory computing the {stage} buffer ({n_taps} samples): {exc}"
            )

        if strict:
            assert_finite(coefficients)
        else:
            bad = count_non_finite(coefficients)
            if bad:
                logger.warning(
                    "%d of %d coefficients are not finite (tap_count=%d, window=%s); "
                    "output will be NaN",
                    bad, n_taps, n_taps, cfg.window.value,
                )

        coefficients.flags.writeable = False
        self._coefficients = coefficients
        self._history = history
        self._cursor = 0
        self._state = FilterState.READY

        logger.debug(
            "Designed %d-tap %s filter (%s window, min_freq=%g, max_freq=%g)",
            n_taps, cfg.kind.value, cfg.window.value, cfg.min_freq, cfg.max_freq,
        )
        return InitResult(InitStatus.SUCCESS)

    def _fail_allocation(self, buffer: str, message: str) -> InitResult:
        self._state = FilterState.FAILED
        logger.error("%s; filter is unusable", message)
        return InitResult(InitStatus.ALLOCATION_ERROR, buffer=buffer, message=message)

    def _require_ready(self, operation: str) -> None:
        if self._state is not FilterState.READY:
            raise RuntimeError(f"Must call init() before {operation}")

    @property
    def coefficients(self) -> np.ndarray:
        """Read-only view of the final (windowed) coefficients."""
        self._require_ready("accessing coefficients")
        view = self._coefficients.view()
        view.flags.writeable = False
        return view

    def get_coefficients(self) -> np.ndarray:
        """Get the final coefficients as a read-only array of length tap_count."""
        return self.coefficients

    @property
    def history(self) -> np.ndarray:
        """Copy of the stored samples, oldest first."""
        self._require_ready("accessing history")
        # the slot at the cursor holds the oldest sample
        return np.concatenate((self._history[self._cursor:], self._history[:self._cursor]))

    def push(self, sample: float) -> float:
        """
        Filter a single sample.

        Args:
            sample: Input sample

        Returns:
            Filtered output sample

        Raises:
            RuntimeError: If the filter is not READY
        """
        if self._state is not FilterState.READY:
            raise RuntimeError("Must call init() before push()")

        history = self._history
        coeffs = self._coefficients
        cursor = self._cursor

        history[cursor] = sample

        # history[cursor:] pairs with coeff[:N - cursor], the wrapped head with the rest
        split = self._config.tap_count - cursor
        output = np.dot(history[cursor:], coeffs[:split]) + np.dot(history[:cursor], coeffs[split:])

        self._cursor = (cursor + 1) % self._config.tap_count
        return float(output)

    def process(self, samples: np.ndarray) -> np.ndarray:
        """
        Stream an array of samples through push(), in order.

        Filter state carries over between calls, so a signal may be fed in
        chunks.

        Unlike push(), which accepts any float, the whole array is checked
        up front and rejected if it holds NaN or Inf. Nothing is pushed in
        that case, so the history is left untouched. Stream such samples
        through push() directly.

        Args:
            samples: 1D input signal

        Returns:
            Output signal of the same length

        Raises:
            RuntimeError: If the filter is not READY
            ValueError: If samples is not 1D or contains NaN/Inf
        """
        self._require_ready("process()")
        x = check_1d_array(samples)

        y = np.empty_like(x)
        for i, sample in enumerate(x):
            y[i] = self.push(sample)
        return y

    def frequency_response(self, worN: int = 512, fs: float = 1.0) -> Tuple[np.ndarray, np.ndarray]:
        """
        Compute the frequency response of the final coefficients.

        Args:
            worN: FFT length (>= tap_count)
            fs: Sample rate

        Returns:
            Tuple of (frequencies, complex response)
        """
        self._require_ready("frequency_response()")
        return freqz(self._coefficients, worN=worN, fs=fs)

    def __repr__(self) -> str:
        cfg = self._config
        return (
            f"FIRFilter(tap_count={cfg.tap_count}, kind={cfg.kind.value!r}, "
            f"window={cfg.window.value!r}, min_freq={cfg.min_freq}, "
            f"max_freq={cfg.max_freq}, state={self._state.value!r})"
        )
