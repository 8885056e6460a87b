"""Benchmark Aberth-Ehrlich root finding.

Compares random and symmetric initial guesses on the "easy" test
polynomials across degrees. Cost is O(n^2) per iteration, so the iteration
count is reported alongside the time.
"""

import time
import warnings

import torch

from aberth.root_finding import ConvergenceWarning, RootFinder
from aberth.test_polynomial import easy


def benchmark_aberth_ehrlich(
    degree: int, n_iterations: int = 10, init: str = "random", seed: int = 0
) -> tuple[float, float, int]:
    """Benchmark root finding at given degree.

    Parameters
    ----------
    degree : int
        Degree of the easy polynomial (number of roots to find).
    n_iterations : int
        Number of runs for timing.
    init : str
        'random' or 'symmetric'.
    seed : int
        Seed for the generator shared by all runs.

    Returns
    -------
    tuple[float, float, int]
        Average time per solve in milliseconds, mean number of Aberth
        iterations, and number of runs that converged.
    """
    coeffs = easy(degree)
    generator = torch.Generator().manual_seed(seed)

    elapsed = 0.0
    total_steps = 0
    n_converged = 0
    for _ in range(n_iterations):
        finder = RootFinder(coeffs, init=init, generator=generator)

        start = time.perf_counter()
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", ConvergenceWarning)
            converged = finder.compute()
        elapsed += time.perf_counter() - start

        total_steps += finder.num_iterations
        n_converged += int(converged)

    return (
        elapsed / n_iterations * 1000,  # ms
        total_steps / n_iterations,
        n_converged,
    )


def main():
    """Run root finding benchmarks across degrees."""
    degrees = [10, 20, 40, 60, 80, 100]
    n_iterations = 10

    print("Aberth-Ehrlich Root Finding Benchmark (easy polynomials)")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Random (ms)':>14} {'iters':>7} {'conv':>6}"
        f" {'Symmetric (ms)':>16} {'iters':>7} {'conv':>6}"
    )
    print("-" * 70)

    for degree in degrees:
        ms_rand, it_rand, ok_rand = benchmark_aberth_ehrlich(
            degree, n_iterations, init="random"
        )
        ms_symm, it_symm, ok_symm = benchmark_aberth_ehrlich(
            degree, n_iterations, init="symmetric"
        )
        print(
            f"{degree:>8} {ms_rand:>14.4f} {it_rand:>7.1f} {ok_rand:>3}/{n_iterations:<2}"
            f" {ms_symm:>16.4f} {it_symm:>7.1f} {ok_symm:>3}/{n_iterations:<2}"
        )

    print()
    print("Notes:")
    print("- Random: independent guesses in the first quadrant of the Cauchy disk")
    print("- Symmetric: one random guess, then repeated angle doubling")


if __name__ == "__main__":
    main()
