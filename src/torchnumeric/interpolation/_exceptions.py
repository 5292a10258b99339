"""Exceptions for polynomial interpolation."""


class InterpolationError(Exception):
    """Base exception for interpolation operations."""

    pass


class NodeCountError(InterpolationError):
    """Raised when too few interpolation nodes are requested."""

    pass


class NodeError(InterpolationError):
    """Raised in strict mode for coincident nodes or a query at a node."""

    pass


class NodeCollisionWarning(UserWarning):
    """Warning when a barycentric query coincides with a node."""

    pass
