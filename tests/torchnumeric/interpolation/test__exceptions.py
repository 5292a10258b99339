"""Tests for interpolation exception hierarchy."""

import pytest

from torchnumeric.interpolation import (
    InterpolationError,
    NodeCollisionWarning,
    NodeCountError,
    NodeError,
)


class TestExceptionHierarchy:
    """Test that all exceptions inherit from InterpolationError."""

    def test_node_count_error_is_interpolation_error(self):
        with pytest.raises(InterpolationError):
            raise NodeCountError("test")

    def test_node_error_is_interpolation_error(self):
        with pytest.raises(InterpolationError):
            raise NodeError("test")

    def test_collision_warning_is_user_warning(self):
        assert issubclass(NodeCollisionWarning, UserWarning)
