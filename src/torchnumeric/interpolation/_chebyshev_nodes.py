import math
from typing import Callable, Union

import torch
from torch import Tensor

from ._exceptions import NodeCountError
from ._points import Points, _sample


def chebyshev_nodes(
    f: Callable[[Tensor], Tensor],
    start: Union[float, Tensor],
    end: Union[float, Tensor],
    n: int,
    *,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> Points:
    """Sample a function at Chebyshev-Gauss-Lobatto nodes on [start, end].

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise function, called once with the tensor of all
        abscissae.
    start, end : float or Tensor
        Interval endpoints.
    n : int
        Number of nodes. Must be at least 2.
    dtype : torch.dtype, optional
        Data type. Defaults to float64.
    device : torch.device, optional
        Device for the output tensors.

    Returns
    -------
    Points
        Nodes x_k = c + h * cos(pi * k / (n - 1)) for k = 0, ..., n - 1,
        where c = (start + end) / 2 and h = end - c, with y_k = f(x_k).
        The nodes follow the cosine, from ``end`` down to ``start``.

    Raises
    ------
    NodeCountError
        If n < 2.

    Notes
    -----
    The nodes are the extrema of T_{n-1} mapped from [-1, 1] onto the
    interval. They cluster towards the endpoints, which keeps the
    Lebesgue constant logarithmic in n and avoids Runge's phenomenon.

    Examples
    --------
    >>> nodes = chebyshev_nodes(torch.exp, -1.0, 1.0, 3)
    >>> nodes.x
    tensor([ 1.0000e+00,  6.1232e-17, -1.0000e+00], dtype=torch.float64)
    """
    if n < 2:
        raise NodeCountError(
            f"Cannot create fewer than two nodes on an interval, got n={n}"
        )

    if dtype is None:
        dtype = torch.float64

    center = (start + end) * 0.5
    half_interval = end - center

    k = torch.arange(n, dtype=dtype, device=device)
    x = center + half_interval * torch.cos(k / (n - 1) * math.pi)

    return _sample(f, x)
