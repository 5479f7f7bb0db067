"""Benchmark polynomial root finding.

Times the companion matrix solver across degrees and reports the worst
residual |p(r)| relative to numpy.roots on the same coefficients.
"""

import time

import numpy as np
import torch

from torchfilter.polynomial import polynomial_evaluate, polynomial_roots


def benchmark_roots(degree: int, n_iterations: int = 10) -> float:
    """Average time per root finding call in milliseconds."""
    coeffs = torch.randn(degree + 1, dtype=torch.float64)
    coeffs[0] = 1.0  # monic

    for _ in range(3):
        polynomial_roots(coeffs)

    start = time.perf_counter()
    for _ in range(n_iterations):
        polynomial_roots(coeffs)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000


def numpy_roots(degree: int, n_iterations: int = 10) -> float:
    coeffs = np.random.randn(degree + 1)
    coeffs[0] = 1.0

    start = time.perf_counter()
    for _ in range(n_iterations):
        np.roots(coeffs)

    return (time.perf_counter() - start) / n_iterations * 1000


def max_residual(degree: int) -> float:
    coeffs = torch.randn(degree + 1, dtype=torch.float64)
    coeffs[0] = 1.0
    roots = polynomial_roots(coeffs)
    return polynomial_evaluate(coeffs, roots).abs().max().item()


def main():
    """Run root finding benchmarks across degrees."""
    degrees = [2, 4, 8, 16, 32, 64, 128]

    print("Polynomial Root Finding Benchmark")
    print("=" * 62)
    print(
        f"{'Degree':>8} {'torchfilter (ms)':>18} {'numpy (ms)':>14} "
        f"{'max |p(r)|':>16}"
    )
    print("-" * 62)

    for degree in degrees:
        ours = benchmark_roots(degree)
        reference = numpy_roots(degree)
        residual = max_residual(degree)
        print(
            f"{degree:>8} {ours:>18.4f} {reference:>14.4f} {residual:>16.2e}"
        )

    print()
    print("Notes:")
    print("- Companion matrix eigenvalues, O(n^3)")
    print("- Filter design stays below degree 64 in practice")


if __name__ == "__main__":
    main()
