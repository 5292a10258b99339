import threading
import warnings
from typing import Optional, Union

import torch
from torch import Tensor

from ._exceptions import NodeCollisionWarning, NodeError
from ._points import Points, _check_distinct_nodes, points


def _barycentric_weights(x: Tensor, strict: bool = False) -> Tensor:
    if strict:
        _check_distinct_nodes(x)

    n = x.shape[-1]

    # x_i - x_j with 1 on the diagonal so the row product skips j == i
    dX = x.unsqueeze(1) - x.unsqueeze(0)
    dX = dX + torch.eye(n, dtype=dX.dtype, device=dX.device)

    return 1 / dX.prod(dim=1)


class BarycentricInterpolator:
    """Polynomial interpolant evaluated with the barycentric formula.

    The interpolant through nodes (x_i, y_i) is evaluated as

    .. math::

        P(x) = \\frac{\\sum_i \\frac{w_i}{x - x_i} y_i}
                    {\\sum_i \\frac{w_i}{x - x_i}},
        \\qquad
        w_i = \\frac{1}{\\prod_{j \\neq i} (x_i - x_j)}

    The weights cost O(n^2) and are computed once, on the first call.
    Each evaluation after that is O(n) per query point.

    Parameters
    ----------
    points : Points
        Interpolation nodes with pairwise distinct x-coordinates. The
        nodes are copied; later changes to ``points`` have no effect.
    strict : bool
        If True, raise NodeError for coincident nodes (when the weights
        are computed) and for query points equal to a node. Otherwise
        both propagate as infinities or NaNs, and a query at a node emits
        a NodeCollisionWarning.

    Notes
    -----
    A query exactly at a node divides by zero in that node's term, so
    the result is generally NaN rather than the node's y-value. Query
    points are not snapped to nodes.

    The first weight computation is guarded by a lock, so an instance
    may be shared between threads.

    Examples
    --------
    >>> nodes = chebyshev_nodes(torch.sin, 0.0, 3.0, 12)
    >>> interpolant = BarycentricInterpolator(nodes)
    >>> interpolant(torch.tensor([0.5, 1.5]))
    tensor([0.4794, 0.9975], dtype=torch.float64)
    """

    def __init__(self, points: Points, *, strict: bool = False):
        self._x = points.x.clone()
        self._y = points.y.clone()
        self._strict = strict
        self._weights: Optional[Tensor] = None
        self._lock = threading.Lock()

    @property
    def nodes(self) -> Points:
        """Copy of the interpolation nodes."""
        return points(self._x, self._y)

    @property
    def weights_ready(self) -> bool:
        """Whether the barycentric weights have been computed."""
        return self._weights is not None

    @property
    def weights(self) -> Tensor:
        """Barycentric weights, computed on first access."""
        if self._weights is None:
            with self._lock:
                if self._weights is None:
                    self._weights = _barycentric_weights(
                        self._x, strict=self._strict
                    )

        return self._weights

    def __call__(self, x: Union[float, Tensor]) -> Tensor:
        """Evaluate the interpolant.

        Parameters
        ----------
        x : float or Tensor
            Query points, any shape.

        Returns
        -------
        Tensor
            Interpolated values, same shape as ``x``.

        Raises
        ------
        NodeError
            In strict mode, if a query point equals a node.
        """
        weights = self.weights

        dtype = torch.promote_types(
            torch.result_type(self._x, x), self._y.dtype
        )
        x = torch.as_tensor(x, dtype=dtype, device=self._x.device)

        diff = x.unsqueeze(-1) - self._x

        if (diff == 0).any():
            if self._strict:
                raise NodeError(
                    "Query point coincides with an interpolation node"
                )

            warnings.warn(
                "Query point coincides with an interpolation node; "
                "the barycentric formula returns a non-finite value there.",
                NodeCollisionWarning,
                stacklevel=2,
            )

        terms = weights / diff

        numerator = (terms * self._y).sum(dim=-1)
        denominator = terms.sum(dim=-1)

        return numerator / denominator


def barycentric_interpolator(
    points: Points, *, strict: bool = False
) -> BarycentricInterpolator:
    """Create a barycentric interpolator from nodes.

    Parameters
    ----------
    points : Points
        Interpolation nodes with pairwise distinct x-coordinates.
    strict : bool
        Raise NodeError for coincident nodes and for queries at a node.

    Returns
    -------
    BarycentricInterpolator
        Callable interpolant. Weights are computed on the first call.

    Examples
    --------
    >>> nodes = equidistant_nodes(torch.exp, 0.0, 1.0, 8)
    >>> f = barycentric_interpolator(nodes)
    >>> f(0.25)
    tensor(1.2840, dtype=torch.float64)
    """
    return BarycentricInterpolator(points, strict=strict)
