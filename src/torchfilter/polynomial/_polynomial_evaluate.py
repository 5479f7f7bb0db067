from typing import Sequence, Union

import torch
from torch import Tensor

from ._exceptions import DegreeError


def polynomial_evaluate(
    coeffs: Union[Tensor, Sequence[float]],
    x: Union[Tensor, float, complex],
) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Coefficients, shape (N,), in descending order.
    x : Tensor or scalar
        Evaluation points, any shape. Real or complex.

    Returns
    -------
    Tensor
        Values p(x), same shape as x. The dtype is the promotion of the
        coefficient and point dtypes.

    Raises
    ------
    DegreeError
        If coeffs is empty.

    Examples
    --------
    >>> p = torch.tensor([3.0, 2.0, 1.0])  # 3x^2 + 2x + 1
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    if not isinstance(coeffs, Tensor):
        coeffs = torch.as_tensor(coeffs, dtype=torch.float64)
    if not isinstance(x, Tensor):
        x = torch.as_tensor(x, device=coeffs.device)

    coeffs = coeffs.reshape(-1)
    if coeffs.numel() == 0:
        raise DegreeError("Cannot evaluate an empty coefficient sequence")

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    p = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    degree = p.numel() - 1

    # Unrolled low degrees
    if degree == 0:
        return torch.zeros_like(x) + p[0]
    if degree == 1:
        return p[0] * x + p[1]
    if degree == 2:
        return p[2] + x * (p[1] + x * p[0])
    if degree == 3:
        return p[3] + x * (p[2] + x * (p[1] + x * p[0]))

    y = p[0] * x
    for c in p[1:-1]:
        y = (y + c) * x

    return y + p[-1]
