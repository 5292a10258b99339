import torch
from torch import Tensor

from ._polynomial import Polynomial


def _trim_coefficients(coeffs: Tensor, tol: float = 0.0) -> Tensor:
    # NaN never compares <= tol, so non-finite coefficients are kept.
    keep = ~(coeffs.abs() <= tol)
    indices = torch.nonzero(keep, as_tuple=True)[0]

    if indices.numel() == 0:
        return coeffs[:0]

    return coeffs[: int(indices[-1]) + 1]


def polynomial_trim(p: Polynomial, tol: float = 0.0) -> Polynomial:
    """Remove trailing near-zero coefficients.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    tol : float
        Tolerance for considering coefficient as zero.

    Returns
    -------
    Polynomial
        Trimmed polynomial. If every coefficient is within ``tol`` of
        zero, the zero polynomial (no coefficients) is returned.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 1e-17])
    >>> polynomial_trim(p, tol=1e-12).coeffs
    tensor([1., 2.], dtype=torch.float64)
    """
    return Polynomial(coeffs=_trim_coefficients(p.coeffs, tol).clone())
