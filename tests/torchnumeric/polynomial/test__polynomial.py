"""Tests for core polynomial operations."""

import pytest
import torch
from numpy.polynomial import Polynomial as NpPolynomial

from torchnumeric.polynomial import (
    Polynomial,
    PolynomialError,
    polynomial,
    polynomial_degree,
    polynomial_derivative,
    polynomial_equal,
    polynomial_evaluate,
    polynomial_negate,
    polynomial_trim,
)


class TestPolynomialConstructor:
    """Tests for polynomial() constructor."""

    def test_multiple_coefficients(self):
        """Standard polynomial."""
        p = polynomial(torch.tensor([1.0, 2.0, 3.0]))
        assert p.coeffs.shape == (3,)
        torch.testing.assert_close(p.coeffs, torch.tensor([1.0, 2.0, 3.0]))

    def test_sequence_defaults_to_float64(self):
        """Python sequences become float64 coefficients."""
        p = polynomial([1, 2, 3])
        assert p.coeffs.dtype == torch.float64

    def test_complex_sequence(self):
        """Sequences with complex entries become complex128."""
        p = polynomial([1 + 2j, 3.0])
        assert p.coeffs.dtype == torch.complex128
        torch.testing.assert_close(
            p.coeffs, torch.tensor([1 + 2j, 3 + 0j], dtype=torch.complex128)
        )
        torch.testing.assert_close(
            p(1.0), torch.tensor(4 + 2j, dtype=torch.complex128)
        )

    def test_tensor_dtype_preserved(self):
        """Tensor input keeps its dtype."""
        p = polynomial(torch.tensor([1.0, 2.0], dtype=torch.float32))
        assert p.coeffs.dtype == torch.float32

    def test_scalar_is_constant(self):
        """A single scalar creates a constant polynomial."""
        p = polynomial(3.0)
        torch.testing.assert_close(
            p.coeffs, torch.tensor([3.0], dtype=torch.float64)
        )

    def test_trailing_zeros_removed(self):
        """Construction normalizes trailing zeros away."""
        p = polynomial([1.0, 2.0, 0.0, 0.0])
        torch.testing.assert_close(
            p.coeffs, torch.tensor([1.0, 2.0], dtype=torch.float64)
        )

    def test_interior_zeros_kept(self):
        """Only trailing zeros are removed."""
        p = polynomial([0.0, 0.0, 1.0])
        assert p.coeffs.shape == (3,)

    def test_empty_is_zero_polynomial(self):
        """Empty coefficients give the zero polynomial."""
        p = polynomial([])
        assert p.coeffs.shape == (0,)

    def test_all_zero_is_zero_polynomial(self):
        """All-zero coefficients normalize to the zero polynomial."""
        p = polynomial([0.0, 0.0, 0.0])
        assert p.coeffs.shape == (0,)
        assert p == polynomial([])

    def test_input_is_copied(self):
        """Mutating the input tensor does not affect the polynomial."""
        coeffs = torch.tensor([1.0, 2.0])
        p = polynomial(coeffs)
        coeffs[0] = 100.0
        assert p.coeffs[0] == 1.0

    def test_batched_raises(self):
        """Two-dimensional coefficients raise error."""
        with pytest.raises(PolynomialError):
            polynomial(torch.zeros(2, 3))


class TestPolynomialDegree:
    """Tests for polynomial_degree."""

    def test_degree(self):
        p = polynomial([1.0, 2.0, 3.0])
        assert polynomial_degree(p) == 2
        assert p.degree == 2

    def test_constant_degree(self):
        assert polynomial_degree(polynomial([5.0])) == 0

    def test_zero_polynomial_degree(self):
        """Zero polynomial has degree 0 by convention."""
        assert polynomial_degree(polynomial([])) == 0


class TestPolynomialEqual:
    """Tests for structural and tolerance-based equality."""

    def test_equal(self):
        p = polynomial([1.0, 2.0, 3.0])
        q = polynomial([1.0, 2.0, 3.0])
        assert polynomial_equal(p, q)
        assert p == q

    def test_not_equal_values(self):
        p = polynomial([1.0, 2.0, 3.0])
        q = polynomial([1.0, 2.0, 4.0])
        assert not polynomial_equal(p, q)
        assert p != q

    def test_not_equal_length(self):
        p = polynomial([1.0, 2.0])
        q = polynomial([1.0, 2.0, 3.0])
        assert p != q

    def test_tolerance(self):
        p = polynomial([1.0, 2.0])
        q = polynomial([1.0 + 1e-10, 2.0, 1e-12])
        assert not polynomial_equal(p, q)
        assert polynomial_equal(p, q, tol=1e-9)

    def test_compare_with_other_type(self):
        """Comparison with a non-polynomial is not equal."""
        assert polynomial([1.0]) != 1.0

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(polynomial([1.0]))


class TestPolynomialTrim:
    """Tests for polynomial_trim."""

    def test_trim_small_leading(self):
        p = polynomial([1.0, 2.0, 1e-17])
        trimmed = polynomial_trim(p, tol=1e-12)
        torch.testing.assert_close(
            trimmed.coeffs, torch.tensor([1.0, 2.0], dtype=torch.float64)
        )

    def test_trim_to_zero(self):
        p = polynomial([1e-15, 1e-16])
        assert polynomial_trim(p, tol=1e-12).coeffs.shape == (0,)

    def test_trim_keeps_nan(self):
        p = polynomial([1.0, float("nan")])
        assert polynomial_trim(p, tol=1.0).coeffs.shape == (2,)


class TestPolynomialNegate:
    """Tests for polynomial_negate."""

    def test_negate(self):
        p = polynomial([1.0, -2.0, 3.0])
        torch.testing.assert_close(
            polynomial_negate(p).coeffs,
            torch.tensor([-1.0, 2.0, -3.0], dtype=torch.float64),
        )

    def test_negate_operator(self):
        p = polynomial([1.0, -2.0, 3.0])
        assert -p == polynomial([-1.0, 2.0, -3.0])

    def test_positive_is_copy(self):
        p = polynomial([1.0, 2.0])
        q = +p
        assert q == p
        assert q.coeffs.data_ptr() != p.coeffs.data_ptr()


class TestPolynomialEvaluate:
    """Tests for polynomial_evaluate."""

    def test_evaluate(self):
        """1 + 2x + 3x^2 at several points."""
        p = polynomial([1.0, 2.0, 3.0])
        x = torch.tensor([0.0, 1.0, 2.0, -1.0], dtype=torch.float64)
        torch.testing.assert_close(
            polynomial_evaluate(p, x),
            torch.tensor([1.0, 6.0, 17.0, 2.0], dtype=torch.float64),
        )

    def test_call_operator(self):
        p = polynomial([1.0, 0.0, 1.0])
        torch.testing.assert_close(
            p(3.0), torch.tensor(10.0, dtype=torch.float64)
        )

    def test_python_scalar_keeps_coefficient_dtype(self):
        p = polynomial([1.0, 2.0])
        assert polynomial_evaluate(p, 2.0).dtype == torch.float64
        assert polynomial_evaluate(p, 2).dtype == torch.float64

    def test_complex_point(self):
        """Real polynomial evaluated at a complex point."""
        p = polynomial([1.0, 0.0, 1.0])  # 1 + x^2
        result = polynomial_evaluate(p, 1j)
        assert result.dtype == torch.complex128
        torch.testing.assert_close(
            result, torch.tensor(0.0 + 0.0j, dtype=torch.complex128)
        )

    def test_at_zero_returns_constant_term(self):
        """x = 0 gives the constant term even with non-finite coefficients."""
        p = polynomial([2.0, float("inf")])
        torch.testing.assert_close(
            polynomial_evaluate(p, 0.0),
            torch.tensor(2.0, dtype=torch.float64),
        )

    def test_zero_polynomial(self):
        x = torch.tensor([1.0, 2.0], dtype=torch.float64)
        torch.testing.assert_close(
            polynomial_evaluate(polynomial([]), x), torch.zeros_like(x)
        )

    def test_shape_preserved(self):
        p = polynomial([1.0, 1.0])
        x = torch.ones(2, 3, dtype=torch.float64)
        assert polynomial_evaluate(p, x).shape == (2, 3)

    def test_vs_numpy(self):
        coeffs = [0.5, -1.5, 2.0, 0.25, -3.0]
        p = polynomial(coeffs)
        x = torch.linspace(-2.0, 2.0, 11, dtype=torch.float64)
        expected = torch.from_numpy(NpPolynomial(coeffs)(x.numpy()))
        torch.testing.assert_close(polynomial_evaluate(p, x), expected)


class TestPolynomialDerivative:
    """Tests for polynomial_derivative."""

    def test_derivative(self):
        """d/dx (1 + 2x + 3x^2) = 2 + 6x."""
        p = polynomial([1.0, 2.0, 3.0])
        torch.testing.assert_close(
            polynomial_derivative(p).coeffs,
            torch.tensor([2.0, 6.0], dtype=torch.float64),
        )

    def test_constant_derivative_is_zero(self):
        """Derivative of a degree-0 polynomial is a single zero."""
        p = polynomial([7.0])
        result = polynomial_derivative(p)
        torch.testing.assert_close(
            result.coeffs, torch.tensor([0.0], dtype=torch.float64)
        )
        assert polynomial_degree(result) == 0

    def test_zero_polynomial_derivative(self):
        result = polynomial_derivative(polynomial([]))
        torch.testing.assert_close(
            result.coeffs, torch.tensor([0.0], dtype=torch.float64)
        )

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
    def test_monomial(self, n):
        """d/dx x^n = n x^(n-1)."""
        p = polynomial([0.0] * n + [1.0])
        expected = polynomial([0.0] * (n - 1) + [float(n)])
        assert polynomial_derivative(p) == expected

    def test_monomial_degree_zero(self):
        """d/dx x^0 = 0."""
        result = polynomial_derivative(polynomial([1.0]))
        torch.testing.assert_close(result(2.0), torch.tensor(0.0).double())

    def test_integer_coefficients(self):
        p = polynomial(torch.tensor([1, 1, 1, 1]))
        torch.testing.assert_close(
            polynomial_derivative(p).coeffs, torch.tensor([1, 2, 3])
        )

    def test_returns_polynomial(self):
        assert isinstance(
            polynomial_derivative(polynomial([1.0, 1.0])), Polynomial
        )
