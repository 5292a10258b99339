"""Benchmark polynomial multiplication.

Times the schoolbook product across polynomial degrees and compares it
against ``numpy.polynomial.polynomial.polymul`` on the same
coefficients.
"""

import time

import numpy as np
import torch

from torchnumeric.polynomial import polynomial, polynomial_multiply


def benchmark_multiply(
    degree: int,
    n_iterations: int = 100,
    device: str = "cpu",
    method: str = "torchnumeric",
) -> float:
    """Benchmark multiplication at given degree.

    Parameters
    ----------
    degree : int
        Degree of polynomials to multiply.
    n_iterations : int
        Number of iterations for timing.
    device : str
        Device to run on ('cpu' or 'cuda').
    method : str
        'torchnumeric' or 'numpy'.

    Returns
    -------
    float
        Average time per multiplication in milliseconds.
    """
    a = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))
    b = polynomial(torch.randn(degree + 1, device=device, dtype=torch.float64))

    if method == "torchnumeric":

        def multiply_fn():
            return polynomial_multiply(a, b)

    elif method == "numpy":
        a_np = a.coeffs.cpu().numpy()
        b_np = b.coeffs.cpu().numpy()

        def multiply_fn():
            return np.polynomial.polynomial.polymul(a_np, b_np)

    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(10):
        multiply_fn()

    if device == "cuda":
        torch.cuda.synchronize()

    start = time.perf_counter()
    for _ in range(n_iterations):
        multiply_fn()

    if device == "cuda":
        torch.cuda.synchronize()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run multiplication benchmarks across degrees."""
    degrees = [4, 8, 16, 32, 64, 128, 256]

    print("Polynomial Multiplication Benchmark")
    print("=" * 50)
    print(f"{'Degree':>8} {'torchnumeric (ms)':>20} {'numpy (ms)':>14}")
    print("-" * 50)

    for degree in degrees:
        ms_torch = benchmark_multiply(degree, method="torchnumeric")
        ms_numpy = benchmark_multiply(degree, method="numpy")

        print(f"{degree:>8} {ms_torch:>20.4f} {ms_numpy:>14.4f}")

    print()
    print("Notes:")
    print("- torchnumeric runs one row update per dividend coefficient")
    print("- numpy uses a C convolution")


if __name__ == "__main__":
    main()
