"""torchnumeric: polynomial algebra and interpolation for PyTorch."""

from . import (
    differentiation,
    interpolation,
    limit,
    polynomial,
)

__all__ = [
    "differentiation",
    "interpolation",
    "limit",
    "polynomial",
]

__version__ = "0.1.0"
