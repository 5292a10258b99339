"""Differentiation module: finite difference derivatives of callables."""

from torchnumeric.differentiation._finite_difference import finite_difference

__all__ = [
    "finite_difference",
]
