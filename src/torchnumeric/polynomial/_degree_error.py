from torchnumeric.polynomial._polynomial_error import PolynomialError


class DegreeError(PolynomialError):
    """Raised when a division has a zero divisor in strict mode."""

    pass
