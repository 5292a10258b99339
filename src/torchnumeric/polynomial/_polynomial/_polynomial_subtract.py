from typing import Union

import torch

from ._polynomial import Polynomial, Scalar
from ._polynomial_add import _add_constant, _zero_pad
from ._polynomial_trim import _trim_coefficients


def polynomial_subtract(
    p: Polynomial, q: Union[Polynomial, Scalar]
) -> Polynomial:
    """Subtract a polynomial or a scalar from a polynomial.

    Parameters
    ----------
    p : Polynomial
        Minuend.
    q : Polynomial or scalar
        Subtrahend. A scalar only changes the constant term.

    Returns
    -------
    Polynomial
        Normalized difference p - q.
    """
    if not isinstance(q, Polynomial):
        return Polynomial(
            coeffs=_trim_coefficients(_add_constant(p.coeffs, -q))
        )

    n_p = p.coeffs.shape[-1]
    n_q = q.coeffs.shape[-1]

    common_dtype = torch.promote_types(p.coeffs.dtype, q.coeffs.dtype)

    result = _zero_pad(p.coeffs, max(n_p, n_q), common_dtype)
    result[:n_q] -= q.coeffs

    return Polynomial(coeffs=_trim_coefficients(result))
