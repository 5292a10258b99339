import torch

from torchnumeric.polynomial._degree_error import DegreeError

from ._polynomial import Polynomial
from ._polynomial_trim import _trim_coefficients


def _division_dtype(a: torch.dtype, b: torch.dtype) -> torch.dtype:
    dtype = torch.promote_types(a, b)

    if dtype.is_floating_point or dtype.is_complex:
        return dtype

    return torch.float64


def polynomial_divmod(
    p: Polynomial, q: Polynomial, *, strict: bool = False
) -> tuple[Polynomial, Polynomial]:
    """Divide polynomial p by q, returning quotient and remainder.

    Computes quotient and remainder such that p = q * quotient + remainder,
    where deg(remainder) < deg(q).

    Parameters
    ----------
    p : Polynomial
        Dividend polynomial.
    q : Polynomial
        Divisor polynomial. Leading coefficient must be non-zero.
    strict : bool
        If True, raise instead of returning non-finite coefficients when
        ``q`` is the zero polynomial.

    Returns
    -------
    quotient : Polynomial
        Quotient of division.
    remainder : Polynomial
        Remainder of division.

    Raises
    ------
    DegreeError
        If ``strict`` is True and the leading coefficient of ``q`` is zero.

    Notes
    -----
    Long (synthetic) division from the highest power down. Each of the
    deg(p) - deg(q) + 1 steps divides the leading remainder coefficient
    by the leading coefficient of ``q`` and subtracts the shifted,
    scaled divisor from the remainder. Steps whose leading remainder
    coefficient is already zero produce no quotient term.

    When deg(p) < deg(q) the quotient is the zero polynomial and the
    remainder is ``p``. Integer coefficients are divided in float64.

    Outside strict mode, dividing by the zero polynomial is not an
    error: the quotient carries infinities or NaNs.

    Examples
    --------
    >>> p = polynomial([-1.0, 0.0, 1.0])  # x^2 - 1
    >>> q = polynomial([-1.0, 1.0])  # x - 1
    >>> quotient, remainder = polynomial_divmod(p, q)
    >>> quotient.coeffs  # x + 1
    tensor([1., 1.], dtype=torch.float64)
    >>> remainder.coeffs
    tensor([], dtype=torch.float64)
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    dtype = _division_dtype(p_coeffs.dtype, q_coeffs.dtype)

    if q_coeffs.shape[-1] == 0 or q_coeffs[-1] == 0:
        if strict:
            raise DegreeError("Cannot divide by zero polynomial")

        if q_coeffs.shape[-1] == 0:
            q_coeffs = q_coeffs.new_zeros(1)

    n_p = p_coeffs.shape[-1]
    n_q = q_coeffs.shape[-1]
    deg_p = max(n_p - 1, 0)
    deg_q = n_q - 1

    zero = Polynomial(coeffs=p_coeffs.new_zeros(0, dtype=dtype))

    # If dividend degree < divisor degree, quotient is 0, remainder is dividend
    if n_p == 0 or deg_p < deg_q:
        return zero, Polynomial(coeffs=p_coeffs.to(dtype=dtype, copy=True))

    remainder = p_coeffs.to(dtype=dtype, copy=True)
    divisor = q_coeffs.to(dtype)
    leading = divisor[-1]

    deg_quotient = deg_p - deg_q
    quotient = torch.zeros(
        deg_quotient + 1, dtype=dtype, device=p_coeffs.device
    )

    for i in range(deg_quotient + 1):
        k = deg_p - i

        if remainder[k] == 0:
            continue

        c = remainder[k] / leading
        quotient[deg_quotient - i] = c

        remainder[k - deg_q : k + 1] -= c * divisor
        # The leading term cancels exactly; drop rounding residue.
        remainder[k] = 0

    return (
        Polynomial(coeffs=_trim_coefficients(quotient)),
        Polynomial(coeffs=_trim_coefficients(remainder)),
    )
