import torch

from ._polynomial import Polynomial


def polynomial_derivative(p: Polynomial) -> Polynomial:
    """Compute formal derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Derivative dp/dx. A polynomial of degree 0 (including the zero
        polynomial) returns a single zero coefficient, [0].

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_derivative(p).coeffs  # 2 + 6x
    tensor([2., 6.], dtype=torch.float64)
    """
    coeffs = p.coeffs
    n = coeffs.shape[-1]

    if n <= 1:
        # Derivative of constant is zero
        return Polynomial(coeffs=coeffs.new_zeros(1))

    # d/dx (a_0 + a_1*x + a_2*x^2 + ... + a_n*x^n)
    # = a_1 + 2*a_2*x + 3*a_3*x^2 + ... + n*a_n*x^(n-1)
    powers = torch.arange(1, n, device=coeffs.device)

    return Polynomial(coeffs=coeffs[1:] * powers)
