"""Polynomial interpolation of sampled functions.

Nodes
-----
equidistant_nodes
    Sample a function at equally spaced nodes.
chebyshev_nodes
    Sample a function at Chebyshev-Gauss-Lobatto nodes.
points
    Create a node set from x and y values.

Interpolants
------------
lagrange_polynomial
    Interpolating polynomial in power basis (Lagrange form).
barycentric_interpolator
    Create a barycentric interpolator (weights computed lazily).

Data Types
----------
Points
    Set of (x, y) interpolation nodes.
BarycentricInterpolator
    Callable interpolant with cached barycentric weights.

Exceptions
----------
InterpolationError
    Base exception for interpolation operations.
NodeCountError
    Fewer than two nodes requested.
NodeError
    Coincident nodes or a query at a node, in strict mode.
NodeCollisionWarning
    A barycentric query coincides with a node.
"""

from ._barycentric_interpolator import (
    BarycentricInterpolator,
    barycentric_interpolator,
)
from ._chebyshev_nodes import chebyshev_nodes
from ._equidistant_nodes import equidistant_nodes
from ._exceptions import (
    InterpolationError,
    NodeCollisionWarning,
    NodeCountError,
    NodeError,
)
from ._lagrange_polynomial import lagrange_polynomial
from ._points import Points, points

__all__ = [
    # Nodes
    "chebyshev_nodes",
    "equidistant_nodes",
    "points",
    # Interpolants
    "barycentric_interpolator",
    "lagrange_polynomial",
    # Data types
    "BarycentricInterpolator",
    "Points",
    # Exceptions
    "InterpolationError",
    "NodeCollisionWarning",
    "NodeCountError",
    "NodeError",
]
