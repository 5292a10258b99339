"""Benchmark Lagrange and barycentric interpolation.

Builds both interpolants through Chebyshev samples of sin(x) and times
construction plus evaluation on a batch of query points. The barycentric
timings are split into the first call, which computes the weights, and
subsequent calls, which reuse them.
"""

import time

import torch

from torchnumeric.interpolation import (
    BarycentricInterpolator,
    chebyshev_nodes,
    lagrange_polynomial,
)


def _time(fn, n_iterations: int) -> float:
    start = time.perf_counter()
    for _ in range(n_iterations):
        fn()
    return (time.perf_counter() - start) / n_iterations * 1000  # ms


def benchmark_interpolation(
    n_nodes: int,
    n_queries: int = 1000,
    n_iterations: int = 20,
) -> tuple[float, float, float]:
    """Benchmark interpolation with ``n_nodes`` nodes.

    Returns
    -------
    tuple of float
        Milliseconds for Lagrange build and evaluate, barycentric first
        call, and barycentric cached call.
    """
    nodes = chebyshev_nodes(torch.sin, 0.0, 3.0, n_nodes)
    x = torch.linspace(0.01, 2.99, n_queries, dtype=torch.float64)

    def lagrange():
        return lagrange_polynomial(nodes)(x)

    def barycentric_first():
        return BarycentricInterpolator(nodes)(x)

    f = BarycentricInterpolator(nodes)
    f(x)

    def barycentric_cached():
        return f(x)

    return (
        _time(lagrange, n_iterations),
        _time(barycentric_first, n_iterations),
        _time(barycentric_cached, n_iterations),
    )


def main():
    """Run interpolation benchmarks across node counts."""
    node_counts = [4, 8, 16, 32, 64]

    print("Interpolation Benchmark (1000 queries)")
    print("=" * 62)
    print(
        f"{'Nodes':>6} {'Lagrange (ms)':>16} "
        f"{'Bary first (ms)':>18} {'Bary cached (ms)':>18}"
    )
    print("-" * 62)

    for n_nodes in node_counts:
        ms_lagrange, ms_first, ms_cached = benchmark_interpolation(n_nodes)
        print(
            f"{n_nodes:>6} {ms_lagrange:>16.4f} "
            f"{ms_first:>18.4f} {ms_cached:>18.4f}"
        )


if __name__ == "__main__":
    main()
