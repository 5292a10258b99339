from typing import Callable, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from torchnumeric.polynomial._polynomial._polynomial import _default_dtype

from ._exceptions import NodeError


@tensorclass
class Points:
    """Interpolation nodes: sample pairs (x, y).

    Attributes
    ----------
    x : Tensor
        Abscissae, shape (n,).
    y : Tensor
        Ordinates, shape (n,). y[k] is the sample taken at x[k].

    Notes
    -----
    The batch dimension enumerates the nodes, so ``points[k]`` is the
    single pair (x[k], y[k]) with 0-d fields.
    """

    x: Tensor
    y: Tensor


def points(
    x: Union[Tensor, Sequence[float]],
    y: Union[Tensor, Sequence[float]],
    *,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> Points:
    """Create a set of interpolation nodes.

    Parameters
    ----------
    x : Tensor or sequence of float
        Abscissae, shape (n,).
    y : Tensor or sequence of float
        Ordinates, shape (n,).
    dtype : torch.dtype, optional
        Data type. Defaults to the dtype of a tensor argument and to
        float64 for sequences, or complex128 for sequences with complex
        entries.
    device : torch.device, optional
        Device for the output tensors.

    Returns
    -------
    Points
        Nodes backed by copies of ``x`` and ``y``.

    Raises
    ------
    ValueError
        If ``x`` is not one-dimensional or ``y`` has a different shape.

    Examples
    --------
    >>> nodes = points([0.0, 1.0, 2.0], [1.0, 2.0, 5.0])
    >>> nodes[1].y
    tensor(2., dtype=torch.float64)
    """
    x = torch.as_tensor(
        x,
        dtype=dtype or (None if isinstance(x, Tensor) else _default_dtype(x)),
        device=device,
    )
    y = torch.as_tensor(
        y,
        dtype=dtype or (None if isinstance(y, Tensor) else _default_dtype(y)),
        device=device,
    )

    if x.dim() != 1:
        raise ValueError(
            f"x must be one-dimensional, got shape {tuple(x.shape)}"
        )

    if y.shape != x.shape:
        raise ValueError(
            f"x and y must have the same shape, "
            f"got {tuple(x.shape)} and {tuple(y.shape)}"
        )

    return Points(x=x.clone(), y=y.clone(), batch_size=[x.shape[0]])


def _sample(f: Callable[[Tensor], Tensor], x: Tensor) -> Points:
    y = f(x)

    if not isinstance(y, Tensor):
        y = torch.as_tensor(y, dtype=x.dtype, device=x.device)

    return points(x, torch.broadcast_to(y, x.shape))


def _check_distinct_nodes(x: Tensor) -> None:
    n = x.shape[-1]
    coincident = (x.unsqueeze(1) == x.unsqueeze(0)).sum() - n

    if coincident > 0:
        raise NodeError(
            f"Interpolation nodes must have pairwise distinct x-coordinates, "
            f"found {int(coincident) // 2} coincident pair(s)"
        )
