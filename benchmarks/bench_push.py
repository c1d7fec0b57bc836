"""Benchmark per-sample streaming throughput."""

import time
from typing import Dict

import numpy as np

from firstream import FilterKind, FIRFilter, WindowKind


def benchmark_push(
    tap_count: int,
    n_samples: int = 20000,
    kind: FilterKind = FilterKind.LOWPASS,
) -> Dict[str, float]:
    """Benchmark push() for one tap count.

    Args:
        tap_count: Number of filter taps.
        n_samples: Number of samples streamed.
        kind: Filter shape.

    Returns:
        Dictionary with timing results.
    """
    fir = FIRFilter(tap_count, kind, WindowKind.HAMMING, 0.1, 0.3)
    result = fir.init()
    if not result.ok:
        raise RuntimeError(result.message)

    x = np.random.default_rng(0).standard_normal(n_samples)

    # Warmup
    for sample in x[:100]:
        fir.push(sample)

    start = time.perf_counter()
    for sample in x:
        fir.push(sample)
    end = time.perf_counter()

    total_time = end - start
    return {
        "tap_count": tap_count,
        "n_samples": n_samples,
        "total_time_sec": total_time,
        "time_per_sample_us": 1e6 * total_time / n_samples,
        "samples_per_sec": n_samples / total_time,
    }


if __name__ == "__main__":
    print("Benchmarking FIRFilter.push...")

    for tap_count in [8, 32, 128, 512, 2048]:
        res = benchmark_push(tap_count)
        print(
            f"  taps={res['tap_count']:5d}: "
            f"{res['time_per_sample_us']:.2f} us/sample, "
            f"{res['samples_per_sec']:.0f} samples/sec"
        )
