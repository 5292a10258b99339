import torch
from torch import Tensor

from ._polynomial import Polynomial, Scalar
from ._polynomial_trim import _trim_coefficients


def _check_scalar(c: Scalar) -> None:
    if isinstance(c, Tensor) and c.dim() != 0:
        raise ValueError(
            f"Expected a scalar or 0-d tensor, got shape {tuple(c.shape)}"
        )


def polynomial_scale(p: Polynomial, c: Scalar) -> Polynomial:
    """Multiply polynomial by a scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : scalar
        Python number or 0-d tensor.

    Returns
    -------
    Polynomial
        Scaled polynomial c * p. Scaling by zero gives the zero
        polynomial.

    Raises
    ------
    ValueError
        If ``c`` is a tensor with one or more dimensions.
    """
    _check_scalar(c)

    dtype = torch.result_type(p.coeffs, c)

    if c == 0:
        return Polynomial(coeffs=p.coeffs.new_zeros(0, dtype=dtype))

    return Polynomial(coeffs=_trim_coefficients(p.coeffs * c))
