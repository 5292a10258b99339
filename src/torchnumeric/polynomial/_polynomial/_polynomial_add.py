from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial, Scalar
from ._polynomial_scale import _check_scalar
from ._polynomial_trim import _trim_coefficients


def _zero_pad(coeffs: Tensor, n: int, dtype: torch.dtype) -> Tensor:
    result = torch.zeros(n, dtype=dtype, device=coeffs.device)
    result[: coeffs.shape[-1]] = coeffs
    return result


def _add_constant(coeffs: Tensor, c: Scalar) -> Tensor:
    _check_scalar(c)

    dtype = torch.result_type(coeffs, c)

    if coeffs.shape[-1] == 0:
        constant = torch.as_tensor(c, dtype=dtype, device=coeffs.device)
        return constant.reshape(1).clone()

    result = coeffs.to(dtype=dtype, copy=True)
    result[0] += c
    return result


def polynomial_add(
    p: Polynomial, q: Union[Polynomial, Scalar]
) -> Polynomial:
    """Add two polynomials, or a polynomial and a scalar.

    Computes element-wise sum of coefficients with zero-padding for
    polynomials of different degrees. A scalar only changes the constant
    term; added to the zero polynomial it becomes the single coefficient.

    Parameters
    ----------
    p : Polynomial
        Polynomial to add to.
    q : Polynomial or scalar
        Polynomial or scalar to add.

    Returns
    -------
    Polynomial
        Normalized sum p + q. Leading terms that cancel are removed.

    Raises
    ------
    ValueError
        If ``q`` is a tensor with more than zero dimensions.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])
    >>> q = polynomial([1.0, 0.0, -3.0])
    >>> polynomial_add(p, q).coeffs
    tensor([2., 2.], dtype=torch.float64)
    """
    if not isinstance(q, Polynomial):
        return Polynomial(
            coeffs=_trim_coefficients(_add_constant(p.coeffs, q))
        )

    n_p = p.coeffs.shape[-1]
    n_q = q.coeffs.shape[-1]

    common_dtype = torch.promote_types(p.coeffs.dtype, q.coeffs.dtype)

    result = _zero_pad(p.coeffs, max(n_p, n_q), common_dtype)
    result[:n_q] += q.coeffs

    return Polynomial(coeffs=_trim_coefficients(result))
