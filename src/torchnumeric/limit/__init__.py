"""Limit approximation by polynomial extrapolation.

Functions
---------
left_limit
    Approximate lim_{x -> a-} f(x).
right_limit
    Approximate lim_{x -> a+} f(x).
limit
    Approximate a two-sided limit.

Exceptions
----------
LimitError
    Limit requested at an unsupported infinity.
LimitWarning
    Unreliable limit estimate.
"""

from ._exceptions import LimitError, LimitWarning
from ._limit import limit
from ._one_sided_limit import left_limit, right_limit

__all__ = [
    "LimitError",
    "LimitWarning",
    "left_limit",
    "limit",
    "right_limit",
]
