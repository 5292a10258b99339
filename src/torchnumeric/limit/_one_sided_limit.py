"""One-sided limits by polynomial extrapolation."""

from __future__ import annotations

import math
import warnings
from typing import Callable

import torch
from torch import Tensor

from torchnumeric.interpolation import lagrange_polynomial, points

from ._exceptions import LimitError, LimitWarning


def _extrapolate(
    f: Callable[[Tensor], Tensor],
    a: float,
    offsets: Tensor,
) -> Tensor:
    y = f(a + offsets)

    if not isinstance(y, Tensor):
        y = torch.as_tensor(y, dtype=offsets.dtype)

    # Interpolate in t = x - a so the limit is the constant term.
    nodes = points(offsets, torch.broadcast_to(y, offsets.shape))
    value = lagrange_polynomial(nodes)(0.0)

    if torch.isnan(value):
        warnings.warn(
            f"Extrapolated limit at {a} is NaN; "
            f"falling back to the sample closest to the limit point.",
            LimitWarning,
            stacklevel=3,
        )
        return nodes.y[-1]

    return value


def _offsets(
    step: float, shrink: float, n_points: int, dtype: torch.dtype
) -> Tensor:
    return step * shrink ** torch.arange(n_points, dtype=dtype)


def left_limit(
    f: Callable[[Tensor], Tensor],
    a: float,
    *,
    step: float = 1.0 / 64.0,
    shrink: float = 0.5,
    n_points: int = 6,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Approximate the left limit of f at a.

    Samples ``f`` at a - h_k with h_0 = step and h_{k+1} = shrink * h_k,
    fits the interpolating polynomial through the samples, and
    extrapolates it to ``a``.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise function. It is called once with all sample points
        and need not be defined at ``a``.
    a : float
        Limit point. ``inf`` is supported by substituting x = 1/t and
        taking the right limit at t = 0.
    step : float, optional
        Largest distance from ``a``. Default is 1/64.
    shrink : float, optional
        Ratio between successive distances. Default is 0.5.
    n_points : int, optional
        Number of samples. Default is 6.
    dtype : torch.dtype, optional
        Data type of the sample points. Default is float64.

    Returns
    -------
    Tensor
        0-d estimate of lim_{x -> a-} f(x). If the extrapolation is NaN,
        the sample closest to ``a`` is returned and a LimitWarning is
        emitted.

    Raises
    ------
    LimitError
        If ``a`` is negative infinity.

    Examples
    --------
    >>> left_limit(lambda x: torch.sin(x) / x, 0.0)
    tensor(1.0000, dtype=torch.float64)
    """
    a = float(a)

    if math.isinf(a):
        if a < 0:
            raise LimitError(
                "Left limit at negative infinity is undefined; "
                "use right_limit instead"
            )

        return right_limit(
            lambda t: f(1.0 / t),
            0.0,
            step=step,
            shrink=shrink,
            n_points=n_points,
            dtype=dtype,
        )

    return _extrapolate(f, a, -_offsets(step, shrink, n_points, dtype))


def right_limit(
    f: Callable[[Tensor], Tensor],
    a: float,
    *,
    step: float = 1.0 / 64.0,
    shrink: float = 0.5,
    n_points: int = 6,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Approximate the right limit of f at a.

    Mirror image of :func:`left_limit`: samples are taken at a + h_k.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise function.
    a : float
        Limit point. ``-inf`` is supported by substituting x = 1/t and
        taking the left limit at t = 0.
    step : float, optional
        Largest distance from ``a``. Default is 1/64.
    shrink : float, optional
        Ratio between successive distances. Default is 0.5.
    n_points : int, optional
        Number of samples. Default is 6.
    dtype : torch.dtype, optional
        Data type of the sample points. Default is float64.

    Returns
    -------
    Tensor
        0-d estimate of lim_{x -> a+} f(x).

    Raises
    ------
    LimitError
        If ``a`` is positive infinity.
    """
    a = float(a)

    if math.isinf(a):
        if a > 0:
            raise LimitError(
                "Right limit at positive infinity is undefined; "
                "use left_limit instead"
            )

        return left_limit(
            lambda t: f(1.0 / t),
            0.0,
            step=step,
            shrink=shrink,
            n_points=n_points,
            dtype=dtype,
        )

    return _extrapolate(f, a, _offsets(step, shrink, n_points, dtype))
