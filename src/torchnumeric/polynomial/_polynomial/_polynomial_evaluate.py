import torch
from torch import Tensor

from ._polynomial import Polynomial, Scalar


def polynomial_evaluate(p: Polynomial, x: Scalar) -> Tensor:
    """Evaluate polynomial at points.

    Parameters
    ----------
    p : Polynomial
        Polynomial to evaluate.
    x : Tensor or scalar
        Evaluation points, any shape. Evaluation is element-wise.

    Returns
    -------
    Tensor
        Values p(x), same shape as ``x``. The dtype is
        ``torch.result_type(p.coeffs, x)``, so a real polynomial can be
        evaluated at complex points.

    Notes
    -----
    Sums a_i * x^i while carrying a running power of x. Where x is zero
    the constant term is returned directly.

    Examples
    --------
    >>> p = polynomial([1.0, 2.0, 3.0])  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.], dtype=torch.float64)
    """
    coeffs = p.coeffs

    dtype = torch.result_type(coeffs, x)
    x = torch.as_tensor(x, dtype=dtype, device=coeffs.device)

    if coeffs.shape[-1] == 0:
        return torch.zeros_like(x)

    coeffs = coeffs.to(dtype)

    result = torch.zeros_like(x)
    power = torch.ones_like(x)
    for a in coeffs:
        result = result + a * power
        power = power * x

    return torch.where(x == 0, coeffs[0], result)
