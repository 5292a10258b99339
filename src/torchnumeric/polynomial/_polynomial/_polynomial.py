from dataclasses import dataclass
from typing import Sequence, Union

import torch
from torch import Tensor

from torchnumeric.polynomial._polynomial_error import PolynomialError

Scalar = Union[int, float, complex, Tensor]


def _default_dtype(values: object) -> torch.dtype:
    if torch.as_tensor(values).is_complex():
        return torch.complex128

    return torch.float64


@dataclass(frozen=True, eq=False)
class Polynomial:
    """Univariate polynomial in power basis with ascending coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i. The last coefficient is
        non-zero; the zero polynomial has shape (0,).

    Notes
    -----
    Instances should be built with :func:`polynomial`, which copies and
    normalizes its input. Every operation returns a new polynomial backed
    by fresh storage, so polynomials behave as values.

    This class uses a standard dataclass rather than tensorclass because
    ``==`` must be a structural comparison returning ``bool``.

    Examples
    --------
    Polynomial 1 + 2x + 3x^2:
        polynomial([1.0, 2.0, 3.0])

    Operator overloading:
        p + q       # polynomial_add(p, q)
        p - q       # polynomial_subtract(p, q)
        p * q       # polynomial_multiply(p, q)
        p * 2.0     # polynomial_scale(p, 2.0)
        p / 2.0     # polynomial_div(p, 2.0)
        p // q      # polynomial_div(p, q)
        p % q       # polynomial_mod(p, q)
        divmod(p, q)
        -p          # polynomial_negate(p)
        p(x)        # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __add__(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __radd__(self, other: Scalar) -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __sub__(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def __rsub__(self, other: Scalar) -> "Polynomial":
        from ._polynomial_add import polynomial_add
        from ._polynomial_negate import polynomial_negate

        return polynomial_add(polynomial_negate(self), other)

    def __mul__(self, other: Union["Polynomial", Scalar]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply

        return polynomial_multiply(self, other)

    def __rmul__(self, other: Scalar) -> "Polynomial":
        from ._polynomial_scale import polynomial_scale

        return polynomial_scale(self, other)

    def __truediv__(
        self, other: Union["Polynomial", Scalar]
    ) -> "Polynomial":
        from ._polynomial_div import polynomial_div

        return polynomial_div(self, other)

    def __floordiv__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_div import polynomial_div

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_div(self, other)

    def __mod__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_mod import polynomial_mod

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_mod(self, other)

    def __divmod__(
        self, other: "Polynomial"
    ) -> tuple["Polynomial", "Polynomial"]:
        from ._polynomial_divmod import polynomial_divmod

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_divmod(self, other)

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)

    def __pos__(self) -> "Polynomial":
        return Polynomial(coeffs=self.coeffs.clone())

    def __eq__(self, other: object) -> bool:
        from ._polynomial_equal import polynomial_equal

        if not isinstance(other, Polynomial):
            return NotImplemented

        return polynomial_equal(self, other)

    def __call__(self, x: Scalar) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)

    @property
    def degree(self) -> int:
        from ._polynomial_degree import polynomial_degree

        return polynomial_degree(self)


def polynomial(
    coeffs: Union[Tensor, Sequence[Scalar], Scalar],
    *,
    dtype: torch.dtype | None = None,
    device: torch.device | None = None,
) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of scalars
        Coefficients in ascending order, shape (N,). A single scalar
        creates a constant polynomial. An empty sequence creates the zero
        polynomial.
    dtype : torch.dtype, optional
        Data type. Defaults to the dtype of ``coeffs`` when it is a
        tensor. Otherwise float64, or complex128 when any entry is
        complex.
    device : torch.device, optional
        Device for the coefficient tensor.

    Returns
    -------
    Polynomial
        Polynomial backed by a normalized copy of ``coeffs``: trailing
        zero coefficients are removed.

    Raises
    ------
    PolynomialError
        If coeffs has more than one dimension.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.], dtype=torch.float64)
    >>> polynomial([1.0, 0.0, 0.0]).coeffs
    tensor([1.], dtype=torch.float64)
    """
    from ._polynomial_trim import _trim_coefficients

    if dtype is None and not isinstance(coeffs, Tensor):
        dtype = _default_dtype(coeffs)

    coeffs = torch.as_tensor(coeffs, dtype=dtype, device=device)

    if coeffs.dim() == 0:
        coeffs = coeffs.reshape(1)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, "
            f"got shape {tuple(coeffs.shape)}"
        )

    return Polynomial(coeffs=_trim_coefficients(coeffs.clone()))
