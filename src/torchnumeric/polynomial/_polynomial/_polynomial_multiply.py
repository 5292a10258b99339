from typing import Union

import torch

from ._polynomial import Polynomial, Scalar
from ._polynomial_add import _zero_pad
from ._polynomial_scale import polynomial_scale
from ._polynomial_trim import _trim_coefficients


def polynomial_multiply(
    p: Polynomial, q: Union[Polynomial, Scalar]
) -> Polynomial:
    """Multiply two polynomials, or a polynomial and a scalar.

    Computes the convolution of coefficients. Result degree is
    deg(p) + deg(q). A scalar ``q`` is forwarded to
    :func:`polynomial_scale`.

    Parameters
    ----------
    p : Polynomial
        Left factor.
    q : Polynomial or scalar
        Right factor.

    Returns
    -------
    Polynomial
        Normalized product p * q.

    Notes
    -----
    Schoolbook multiplication that works in place on a single buffer of
    deg(p) + deg(q) + 1 coefficients. Coefficients of ``p`` are consumed
    from the highest power down; each one is cleared and its products
    with ``q`` are accumulated at positions that are either above it or
    itself, so lower coefficients of ``p`` are still intact when they
    are read.

    Examples
    --------
    >>> p = polynomial([-1.0, 1.0])  # x - 1
    >>> q = polynomial([1.0, 1.0])  # x + 1
    >>> polynomial_multiply(p, q).coeffs  # x^2 - 1
    tensor([-1.,  0.,  1.], dtype=torch.float64)
    """
    if not isinstance(q, Polynomial):
        return polynomial_scale(p, q)

    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]

    if n_p == 0 or n_q == 0:
        return Polynomial(coeffs=p_coeffs.new_zeros(0, dtype=common_dtype))

    deg_p = n_p - 1
    deg_q = n_q - 1

    result = _zero_pad(p_coeffs, deg_p + deg_q + 1, common_dtype)
    q_coeffs = q_coeffs.to(common_dtype)

    for k in range(deg_p, -1, -1):
        base = result[k].clone()
        result[k] = 0
        result[k : k + n_q] += base * q_coeffs

    return Polynomial(coeffs=_trim_coefficients(result))
