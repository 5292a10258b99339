from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_div import polynomial_div
from ._polynomial_divmod import polynomial_divmod
from ._polynomial_equal import polynomial_equal
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_mod import polynomial_mod
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_trim import polynomial_trim

__all__ = [
    "Polynomial",
    "polynomial",
    "polynomial_add",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_div",
    "polynomial_divmod",
    "polynomial_equal",
    "polynomial_evaluate",
    "polynomial_mod",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_trim",
]
