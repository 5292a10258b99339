from typing import Optional

import torch

from ._polynomial import Polynomial
from ._polynomial_add import _zero_pad


def polynomial_equal(
    p: Polynomial,
    q: Polynomial,
    tol: Optional[float] = None,
) -> bool:
    """Check polynomial equality.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare.
    tol : float, optional
        Absolute tolerance for coefficient comparison. If omitted, the
        coefficient sequences must be structurally identical: same length
        and equal entries.

    Returns
    -------
    bool
        True if the polynomials are equal.

    Notes
    -----
    Structural comparison is only meaningful for normalized polynomials,
    which is what every operation in this package returns. With ``tol``
    the shorter sequence is zero-padded first, so a trailing coefficient
    within ``tol`` of zero does not make the polynomials differ.
    """
    p_coeffs = p.coeffs
    q_coeffs = q.coeffs

    if tol is None:
        if p_coeffs.shape != q_coeffs.shape:
            return False

        return bool((p_coeffs == q_coeffs).all())

    n = max(p_coeffs.shape[-1], q_coeffs.shape[-1])
    common_dtype = torch.promote_types(p_coeffs.dtype, q_coeffs.dtype)

    diff = _zero_pad(p_coeffs, n, common_dtype) - _zero_pad(
        q_coeffs, n, common_dtype
    )

    return bool((diff.abs() <= tol).all())
