from ._polynomial import Polynomial


def polynomial_negate(p: Polynomial) -> Polynomial:
    """Negate polynomial.

    Computes element-wise negation of coefficients.

    Parameters
    ----------
    p : Polynomial
        Polynomial to negate.

    Returns
    -------
    Polynomial
        Negated polynomial -p.
    """
    return Polynomial(coeffs=-p.coeffs)
