from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1. The zero polynomial has degree 0
        by convention.
    """
    return max(p.coeffs.shape[-1] - 1, 0)
