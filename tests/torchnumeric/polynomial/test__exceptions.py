"""Tests for polynomial exception hierarchy."""

import pytest

from torchnumeric.polynomial import DegreeError, PolynomialError


class TestExceptionHierarchy:
    """Test that all exceptions inherit from PolynomialError."""

    def test_degree_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            raise DegreeError("test")


class TestExceptionMessages:
    """Test that exceptions preserve their messages."""

    def test_degree_error_message(self):
        with pytest.raises(DegreeError, match="zero polynomial"):
            raise DegreeError("Cannot divide by zero polynomial")
