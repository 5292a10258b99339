"""Univariate polynomial ring arithmetic on PyTorch tensors.

Polynomials are stored in power basis with ascending coefficients and
are kept normalized: the last coefficient is non-zero and the zero
polynomial has no coefficients.

Construction
------------
polynomial
    Create a normalized polynomial from coefficients.

Arithmetic
----------
polynomial_add
    Sum of polynomials, or of a polynomial and a scalar.
polynomial_subtract
    Difference of polynomials, or of a polynomial and a scalar.
polynomial_multiply
    Product of polynomials, or of a polynomial and a scalar.
polynomial_scale
    Product of a polynomial and a scalar.
polynomial_negate
    Additive inverse.
polynomial_divmod
    Long division with quotient and remainder.
polynomial_div
    Quotient of long division, or division by a scalar.
polynomial_mod
    Remainder of long division.

Calculus and Evaluation
-----------------------
polynomial_derivative
    Formal derivative.
polynomial_evaluate
    Evaluate at points.

Utilities
---------
polynomial_degree
    Degree (0 for the zero polynomial).
polynomial_equal
    Structural or tolerance-based equality.
polynomial_trim
    Remove trailing near-zero coefficients.

Exceptions
----------
PolynomialError
    Base exception for polynomial operations.
DegreeError
    Division by a zero divisor in strict mode.
"""

from ._degree_error import DegreeError
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_degree,
    polynomial_derivative,
    polynomial_div,
    polynomial_divmod,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_mod,
    polynomial_multiply,
    polynomial_negate,
    polynomial_scale,
    polynomial_subtract,
    polynomial_trim,
)
from ._polynomial_error import PolynomialError

__all__ = [
    # Data types
    "Polynomial",
    "polynomial",
    # Arithmetic
    "polynomial_add",
    "polynomial_div",
    "polynomial_divmod",
    "polynomial_mod",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_scale",
    "polynomial_subtract",
    # Calculus and evaluation
    "polynomial_derivative",
    "polynomial_evaluate",
    # Utilities
    "polynomial_degree",
    "polynomial_equal",
    "polynomial_trim",
    # Exceptions
    "DegreeError",
    "PolynomialError",
]
