import torch

from torchnumeric.polynomial import Polynomial, polynomial

from ._points import Points, _check_distinct_nodes


def lagrange_polynomial(
    points: Points, *, strict: bool = False
) -> Polynomial:
    """Construct the interpolating polynomial through a set of nodes.

    Parameters
    ----------
    points : Points
        Interpolation nodes with pairwise distinct x-coordinates.
    strict : bool
        If True, check that the x-coordinates are distinct and raise
        instead of producing non-finite coefficients.

    Returns
    -------
    Polynomial
        The unique polynomial P of degree at most n - 1 with
        P(x_i) = y_i for every node. Zero nodes give the zero polynomial.

    Raises
    ------
    NodeError
        If ``strict`` is True and two nodes share an x-coordinate.

    Notes
    -----
    Evaluates the Lagrange form

    .. math::

        P(x) = \\sum_i y_i \\prod_{j \\neq i} \\frac{x - x_j}{x_i - x_j}

    in polynomial arithmetic: each basis polynomial is grown by
    multiplying by the linear factor (x - x_j) and dividing by the scalar
    (x_i - x_j). This costs O(n^3) coefficient operations. For repeated
    evaluation without coefficients, :class:`BarycentricInterpolator` is
    O(n) per point.

    Outside strict mode a repeated x-coordinate divides by zero and
    the coefficients carry infinities or NaNs. Integer nodes are
    interpolated in float64.

    Examples
    --------
    >>> nodes = points([0.0, 1.0, 2.0], [1.0, 2.0, 5.0])
    >>> p = lagrange_polynomial(nodes)  # x^2 + 1
    >>> p.coeffs
    tensor([1., 0., 1.], dtype=torch.float64)
    >>> p(3.0)
    tensor(10., dtype=torch.float64)
    """
    x = points.x
    y = points.y

    if strict:
        _check_distinct_nodes(x)

    dtype = torch.promote_types(x.dtype, y.dtype)

    if not (dtype.is_floating_point or dtype.is_complex):
        dtype = torch.float64

    result = polynomial(x.new_zeros(0, dtype=dtype))

    for i in range(x.shape[0]):
        basis = polynomial(x.new_ones(1, dtype=dtype))

        for j in range(x.shape[0]):
            if i == j:
                continue

            factor = polynomial(torch.stack([-x[j], torch.ones_like(x[j])]))
            basis = basis * factor
            basis = basis / (x[i] - x[j])

        result = result + basis * y[i]

    return result
