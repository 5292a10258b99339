from __future__ import annotations

import math
import warnings
from typing import Callable

import torch
from torch import Tensor

from ._exceptions import LimitError, LimitWarning
from ._one_sided_limit import left_limit, right_limit


def limit(
    f: Callable[[Tensor], Tensor],
    a: float,
    *,
    step: float = 1.0 / 64.0,
    shrink: float = 0.5,
    n_points: int = 6,
    dtype: torch.dtype = torch.float64,
) -> Tensor:
    """Approximate the two-sided limit of f at a.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise function.
    a : float
        Finite limit point.
    step, shrink, n_points, dtype
        Sampling parameters forwarded to :func:`left_limit` and
        :func:`right_limit`.

    Returns
    -------
    Tensor
        0-d mean of the one-sided limits when they agree to within
        sqrt(eps) (relative, with the same absolute slack), NaN
        otherwise.

    Raises
    ------
    LimitError
        If ``a`` is infinite.

    Warns
    -----
    LimitWarning
        If the one-sided limits disagree.

    Notes
    -----
    Agreement is tested with ``torch.isclose`` using rtol = atol =
    sqrt(eps) of ``dtype``. The absolute slack lets one-sided limits of
    zero agree, and it also means a jump smaller than about 1.5e-8 in
    float64 is not detected: the mean of the two sides is returned.

    Examples
    --------
    >>> limit(lambda x: (x**2 - 1) / (x - 1), 1.0)
    tensor(2.0000, dtype=torch.float64)
    """
    a = float(a)

    if math.isinf(a):
        raise LimitError(
            "Cannot evaluate a two-sided limit at infinity; "
            "use left_limit or right_limit instead"
        )

    kwargs = dict(step=step, shrink=shrink, n_points=n_points, dtype=dtype)

    left = left_limit(f, a, **kwargs)
    right = right_limit(f, a, **kwargs)

    tol = math.sqrt(torch.finfo(dtype).eps)

    if torch.isclose(left, right, rtol=tol, atol=tol):
        return (left + right) * 0.5

    warnings.warn(
        f"One-sided limits at {a} disagree "
        f"(left={left.item()}, right={right.item()}); returning NaN.",
        LimitWarning,
        stacklevel=2,
    )
    return torch.full_like(left, math.nan)
