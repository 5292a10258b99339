from typing import Union

from torchnumeric.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial, Scalar
from ._polynomial_divmod import _division_dtype, polynomial_divmod
from ._polynomial_scale import _check_scalar
from ._polynomial_trim import _trim_coefficients


def polynomial_div(
    p: Polynomial, q: Union[Polynomial, Scalar], *, strict: bool = False
) -> Polynomial:
    """Return quotient of polynomial division, or divide by a scalar.

    Convenience wrapper around polynomial_divmod that returns only the
    quotient. A scalar ``q`` divides every coefficient. Integer
    coefficients are divided in float64.

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial or scalar
        Divisor.
    strict : bool
        If True, raise on a zero divisor instead of returning non-finite
        coefficients.

    Returns
    -------
    Polynomial
        Quotient of p / q.

    Raises
    ------
    DegreeError
        If ``strict`` is True and the divisor is zero.

    Examples
    --------
    >>> p = polynomial([-1.0, 0.0, 0.0, 1.0])  # x^3 - 1
    >>> q = polynomial([-1.0, 1.0])  # x - 1
    >>> polynomial_div(p, q).coeffs  # x^2 + x + 1
    tensor([1., 1., 1.], dtype=torch.float64)
    >>> polynomial_div(p, 2.0).coeffs
    tensor([-0.5000,  0.0000,  0.0000,  0.5000], dtype=torch.float64)
    """
    if isinstance(q, Polynomial):
        quotient, _ = polynomial_divmod(p, q, strict=strict)
        return quotient

    _check_scalar(q)

    if strict and q == 0:
        raise DegreeError("Cannot divide polynomial by zero")

    coeffs = p.coeffs.to(_division_dtype(p.coeffs.dtype, p.coeffs.dtype))

    return Polynomial(coeffs=_trim_coefficients(coeffs / q))
