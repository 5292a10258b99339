"""Finite difference derivatives of callables."""

from __future__ import annotations

from typing import Callable, Union

import torch
from torch import Tensor


def finite_difference(
    f: Callable[[Tensor], Tensor],
    x: Union[float, Tensor],
    h: float = 1e-6,
    *,
    mode: str = "central",
) -> Tensor:
    """Approximate f'(x) with a two-point finite difference.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise function.
    x : float or Tensor
        Points at which to differentiate, any shape.
    h : float, optional
        Step size. Default is 1e-6.
    mode : str, optional
        One of:

        - ``"forward"``: (f(x + h) - f(x)) / h, error O(h).
        - ``"backward"``: (f(x) - f(x - h)) / h, error O(h).
        - ``"central"``: (f(x + h) - f(x - h)) / (2h), error O(h^2)
          (default).

    Returns
    -------
    Tensor
        Derivative estimates, same shape as ``x``.

    Raises
    ------
    ValueError
        If ``mode`` is not recognised.

    Examples
    --------
    >>> finite_difference(torch.sin, torch.tensor([0.0], dtype=torch.float64))
    tensor([1.0000], dtype=torch.float64)
    """
    if not isinstance(x, Tensor):
        x = torch.as_tensor(x, dtype=torch.float64)

    if mode == "forward":
        return (f(x + h) - f(x)) / h

    if mode == "backward":
        return (f(x) - f(x - h)) / h

    if mode == "central":
        return (f(x + h) - f(x - h)) / (2.0 * h)

    raise ValueError(
        f"Unknown mode: {mode!r}. Expected 'forward', 'backward' or 'central'"
    )
