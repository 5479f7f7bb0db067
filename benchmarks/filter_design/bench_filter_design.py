"""Benchmarks for filter design functions.

Compares torchfilter designers and conversions against scipy.signal.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch
from scipy import signal as scipy_signal

from torchfilter.filter_analysis import frequency_response_sos
from torchfilter.filter_design import (
    bessel_design,
    butterworth_design,
    chebyshev_type_1_design,
    chebyshev_type_2_design,
    fir_window_design,
    hilbert_transformer,
    zpk_to_sos,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Time ``func(*args, **kwargs)``.

    Returns
    -------
    dict
        'mean', 'std', 'min' and 'max' of the timed runs, in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    ours: dict[str, float],
    scipy_time: dict[str, float] | None = None,
) -> None:
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchfilter: {format_time(ours['mean'])} "
        f"+/- {format_time(ours['std'])}"
    )
    if scipy_time is not None:
        print(
            f"  scipy:       {format_time(scipy_time['mean'])} "
            f"+/- {format_time(scipy_time['std'])}"
        )
        ratio = scipy_time["mean"] / ours["mean"]
        if ratio >= 1:
            print(f"  Speedup:     {ratio:.2f}x faster")
        else:
            print(f"  Speedup:     {1 / ratio:.2f}x slower")


class BenchFilterDesign:
    """Benchmarks for IIR and FIR filter design."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_butterworth_design(
        self, order: int = 8, cutoff: float = 0.3
    ) -> None:
        """Benchmark butterworth_design vs scipy.signal.butter."""
        ours = self._bench(butterworth_design, order, cutoff)
        reference = self._bench(
            scipy_signal.butter, order, cutoff, output="sos"
        )

        print_comparison(f"Butterworth (order={order})", ours, reference)

    def bench_chebyshev_type_1_design(
        self, order: int = 8, cutoff: float = 0.3, ripple: float = 0.5
    ) -> None:
        """Benchmark chebyshev_type_1_design vs scipy.signal.cheby1."""
        ours = self._bench(chebyshev_type_1_design, order, cutoff, ripple)
        reference = self._bench(
            scipy_signal.cheby1, order, ripple, cutoff, output="sos"
        )

        print_comparison(
            f"Chebyshev Type I (order={order})", ours, reference
        )

    def bench_chebyshev_type_2_design(
        self, order: int = 8, cutoff: float = 0.3, attenuation: float = 40
    ) -> None:
        """Benchmark chebyshev_type_2_design vs scipy.signal.cheby2."""
        ours = self._bench(
            chebyshev_type_2_design, order, cutoff, attenuation
        )
        reference = self._bench(
            scipy_signal.cheby2, order, attenuation, cutoff, output="sos"
        )

        print_comparison(
            f"Chebyshev Type II (order={order})", ours, reference
        )

    def bench_bessel_design(self, order: int = 8, cutoff: float = 0.3) -> None:
        """Benchmark bessel_design vs scipy.signal.bessel."""
        ours = self._bench(bessel_design, order, cutoff)
        reference = self._bench(
            scipy_signal.bessel, order, cutoff, output="sos", norm="delay"
        )

        print_comparison(f"Bessel (order={order})", ours, reference)

    def bench_zpk_to_sos(self, order: int = 16) -> None:
        """Benchmark pole-zero pairing vs scipy.signal.zpk2sos."""
        z, p, k = butterworth_design(
            order, 0.3, output="zpk", dtype=torch.float64
        )
        z_np, p_np, k_np = z.numpy(), p.numpy(), k.item()

        ours = self._bench(zpk_to_sos, z, p, k)
        reference = self._bench(scipy_signal.zpk2sos, z_np, p_np, k_np)

        print_comparison(f"zpk_to_sos (order={order})", ours, reference)

    def bench_fir_window_design(
        self, order: int = 100, cutoff: float = 0.3
    ) -> None:
        """Benchmark fir_window_design vs scipy.signal.firwin."""
        ours = self._bench(fir_window_design, order, cutoff)
        reference = self._bench(scipy_signal.firwin, order + 1, cutoff)

        print_comparison(f"fir_window_design (order={order})", ours, reference)

    def bench_hilbert_transformer(self, order: int = 100) -> None:
        ours = self._bench(hilbert_transformer, order)

        print_comparison(f"hilbert_transformer (order={order})", ours)

    def bench_frequency_response_sos(
        self, order: int = 8, n_points: int = 4096
    ) -> None:
        """Benchmark frequency_response_sos vs scipy.signal.sosfreqz."""
        sos = butterworth_design(order, 0.3, dtype=torch.float64)
        sos_np = sos.numpy()

        ours = self._bench(frequency_response_sos, sos, n_points)
        reference = self._bench(scipy_signal.sosfreqz, sos_np, worN=n_points)

        print_comparison(
            f"frequency_response_sos (points={n_points})", ours, reference
        )

    def run_all(self) -> None:
        print("=" * 60)
        print("FILTER DESIGN BENCHMARKS")
        print("=" * 60)

        print("\n--- IIR Filter Design ---")
        self.bench_butterworth_design()
        self.bench_chebyshev_type_1_design()
        self.bench_chebyshev_type_2_design()
        self.bench_bessel_design()
        self.bench_zpk_to_sos()

        print("\n--- FIR Filter Design ---")
        self.bench_fir_window_design()
        self.bench_hilbert_transformer()

        print("\n--- Analysis ---")
        self.bench_frequency_response_sos()

    def run_scaling(self) -> None:
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Butterworth Order Scaling ---")
        for order in [2, 4, 8, 16, 32]:
            self.bench_butterworth_design(order=order)

        print("\n--- FIR Order Scaling ---")
        for order in [10, 50, 100, 500, 1000]:
            self.bench_fir_window_design(order=order)


if __name__ == "__main__":
    bench = BenchFilterDesign(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
