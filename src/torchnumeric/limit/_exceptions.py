"""Exceptions for limit approximation."""


class LimitError(Exception):
    """Raised when a limit is requested at an unsupported point."""

    pass


class LimitWarning(UserWarning):
    """Warning when a limit estimate is unreliable."""

    pass
