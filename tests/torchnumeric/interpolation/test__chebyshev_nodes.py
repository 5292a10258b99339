"""Tests for Chebyshev node generation."""

import math

import pytest
import torch

from torchnumeric.interpolation import NodeCountError, chebyshev_nodes


class TestChebyshevNodes:
    """Tests for chebyshev_nodes."""

    def test_standard_interval(self):
        nodes = chebyshev_nodes(torch.exp, -1.0, 1.0, 3)
        torch.testing.assert_close(
            nodes.x, torch.tensor([1.0, 0.0, -1.0], dtype=torch.float64)
        )
        torch.testing.assert_close(nodes.y, torch.exp(nodes.x))

    def test_mapped_interval(self):
        """Nodes on [0, 4] are 2 + 2 cos(k pi / 4)."""
        nodes = chebyshev_nodes(torch.sin, 0.0, 4.0, 5)
        s = math.sqrt(2.0)
        expected = torch.tensor(
            [4.0, 2.0 + s, 2.0, 2.0 - s, 0.0], dtype=torch.float64
        )
        torch.testing.assert_close(nodes.x, expected)

    def test_follows_cosine_order(self):
        """Nodes run from end down to start."""
        nodes = chebyshev_nodes(torch.sin, -3.0, 5.0, 9)
        assert (nodes.x[1:] < nodes.x[:-1]).all()
        torch.testing.assert_close(
            nodes.x[0], torch.tensor(5.0, dtype=torch.float64)
        )
        torch.testing.assert_close(
            nodes.x[-1], torch.tensor(-3.0, dtype=torch.float64)
        )

    def test_clustered_at_endpoints(self):
        nodes = chebyshev_nodes(torch.sin, -1.0, 1.0, 11)
        gaps = (nodes.x[:-1] - nodes.x[1:]).abs()
        assert gaps[0] < gaps[5]
        assert gaps[-1] < gaps[4]

    def test_dtype(self):
        nodes = chebyshev_nodes(torch.sin, 0.0, 1.0, 4, dtype=torch.float32)
        assert nodes.x.dtype == torch.float32

    @pytest.mark.parametrize("n", [0, 1])
    def test_too_few_nodes_raises(self, n):
        with pytest.raises(NodeCountError):
            chebyshev_nodes(torch.sin, 0.0, 1.0, n)
