"""Tests for one-sided and two-sided limits."""

import math
import warnings

import pytest
import torch

from torchnumeric.limit import (
    LimitError,
    LimitWarning,
    left_limit,
    limit,
    right_limit,
)


def _sinc(x):
    return torch.sin(x) / x


def _scalar(value):
    return torch.tensor(value, dtype=torch.float64)


class TestLimit:
    """Tests for the two-sided limit."""

    def test_removable_singularity(self):
        """sin(x)/x -> 1 as x -> 0."""
        torch.testing.assert_close(
            limit(_sinc, 0.0), _scalar(1.0), atol=1e-8, rtol=0.0
        )

    def test_difference_quotient(self):
        """(x^2 - 1)/(x - 1) -> 2 as x -> 1."""
        torch.testing.assert_close(
            limit(lambda x: (x**2 - 1) / (x - 1), 1.0),
            _scalar(2.0),
            atol=1e-8,
            rtol=0.0,
        )

    def test_continuous_function(self):
        torch.testing.assert_close(
            limit(torch.exp, 0.5), _scalar(math.exp(0.5)), atol=1e-8, rtol=0.0
        )

    def test_jump_warns_and_is_nan(self):
        """One-sided limits of sign(x) at 0 disagree."""
        with pytest.warns(LimitWarning, match="disagree"):
            result = limit(torch.sign, 0.0)

        assert torch.isnan(result)

    def test_jump_below_tolerance_is_absorbed(self):
        """Jumps under sqrt(eps) count as agreement and return the mean."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            result = limit(lambda x: 1e-9 * torch.sign(x), 0.0)

        torch.testing.assert_close(result, _scalar(0.0), atol=1e-12, rtol=0.0)

    def test_infinite_point_raises(self):
        with pytest.raises(LimitError):
            limit(_sinc, math.inf)
        with pytest.raises(LimitError):
            limit(_sinc, -math.inf)

    def test_result_dtype(self):
        assert limit(_sinc, 0.0).dtype == torch.float64

    def test_scalar_valued_function(self):
        """Functions returning Python scalars are broadcast."""
        torch.testing.assert_close(
            limit(lambda x: 3.0, 1.0), _scalar(3.0), atol=1e-9, rtol=0.0
        )


class TestOneSidedLimit:
    """Tests for left_limit and right_limit."""

    def test_sign(self):
        torch.testing.assert_close(
            left_limit(torch.sign, 0.0), _scalar(-1.0), atol=1e-9, rtol=0.0
        )
        torch.testing.assert_close(
            right_limit(torch.sign, 0.0), _scalar(1.0), atol=1e-9, rtol=0.0
        )

    def test_removable_singularity(self):
        torch.testing.assert_close(
            left_limit(_sinc, 0.0), _scalar(1.0), atol=1e-8, rtol=0.0
        )
        torch.testing.assert_close(
            right_limit(_sinc, 0.0), _scalar(1.0), atol=1e-8, rtol=0.0
        )

    def test_left_limit_at_positive_infinity(self):
        """1/x -> 0 as x -> inf."""
        torch.testing.assert_close(
            left_limit(lambda x: 1.0 / x, math.inf),
            _scalar(0.0),
            atol=1e-10,
            rtol=0.0,
        )

    def test_right_limit_at_negative_infinity(self):
        """1/x -> 0 as x -> -inf."""
        torch.testing.assert_close(
            right_limit(lambda x: 1.0 / x, -math.inf),
            _scalar(0.0),
            atol=1e-10,
            rtol=0.0,
        )

    def test_rational_at_infinity(self):
        """(2x + 1)/(x - 3) -> 2 as x -> +-inf."""

        def f(x):
            return (2 * x + 1) / (x - 3)

        torch.testing.assert_close(
            left_limit(f, math.inf), _scalar(2.0), atol=1e-8, rtol=0.0
        )
        torch.testing.assert_close(
            right_limit(f, -math.inf), _scalar(2.0), atol=1e-8, rtol=0.0
        )

    def test_wrong_infinity_raises(self):
        with pytest.raises(LimitError, match="right_limit"):
            left_limit(_sinc, -math.inf)
        with pytest.raises(LimitError, match="left_limit"):
            right_limit(_sinc, math.inf)

    def test_custom_sampling(self):
        torch.testing.assert_close(
            right_limit(_sinc, 0.0, step=0.1, shrink=0.25, n_points=8),
            _scalar(1.0),
            atol=1e-8,
            rtol=0.0,
        )

    def test_nan_extrapolation_falls_back(self):
        """A NaN estimate warns and returns the closest sample."""

        def f(x):
            return torch.where(x > 1e-3, torch.full_like(x, math.nan), x + 5)

        with pytest.warns(LimitWarning, match="NaN"):
            result = right_limit(f, 0.0)

        # Closest sample to 0 is at step * shrink ** (n_points - 1).
        torch.testing.assert_close(
            result, _scalar(5.0 + 2.0**-11), atol=1e-12, rtol=0.0
        )


class TestExceptionHierarchy:
    def test_limit_warning_is_user_warning(self):
        assert issubclass(LimitWarning, UserWarning)

    def test_limit_error_is_exception(self):
        assert issubclass(LimitError, Exception)
