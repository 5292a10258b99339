from typing import Callable, Union

import torch
from torch import Tensor

from ._exceptions import NodeCountError
from ._points import Points, _sample


def equidistant_nodes(
    f: Callable[[Tensor], Tensor],
    start: Union[float, Tensor],
    end: Union[float, Tensor],
    n: int,
    *,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> Points:
    """Sample a function at equally spaced nodes.

    Parameters
    ----------
    f : Callable[[Tensor], Tensor]
        Element-wise function, e.g. ``torch.sin``. It is called once with
        the tensor of all abscissae.
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
        Nodes x_k = start + k * (end - start) / (n - 1) for
        k = 0, ..., n - 1, strictly ascending when start < end, with
        y_k = f(x_k).

    Raises
    ------
    NodeCountError
        If n < 2.

    Notes
    -----
    Equidistant nodes suffer from Runge's phenomenon for polynomial
    interpolation at high degree. Use :func:`chebyshev_nodes` for better
    conditioning.

    Examples
    --------
    >>> nodes = equidistant_nodes(lambda x: x**2 + 1, 0.0, 2.0, 3)
    >>> nodes.x
    tensor([0., 1., 2.], dtype=torch.float64)
    >>> nodes.y
    tensor([1., 2., 5.], dtype=torch.float64)
    """
    if n < 2:
        raise NodeCountError(
            f"Cannot create fewer than two nodes on an interval, got n={n}"
        )

    if dtype is None:
        dtype = torch.float64

    k = torch.arange(n, dtype=dtype, device=device)
    step = (end - start) / (n - 1)

    return _sample(f, start + k * step)
