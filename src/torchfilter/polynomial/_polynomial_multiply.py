from typing import Sequence, Union

import torch
from torch import Tensor


def polynomial_multiply(
    p: Union[Tensor, Sequence[float]],
    q: Union[Tensor, Sequence[float]],
) -> Tensor:
    """Multiply two polynomials.

    Computes the full linear convolution of the coefficients. The result
    degree is deg(p) + deg(q). Coefficient order (ascending or descending)
    is preserved, since convolution does not depend on it.

    Parameters
    ----------
    p, q : Tensor or sequence of float
        Coefficients, shapes (N,) and (M,).

    Returns
    -------
    Tensor
        Product coefficients, shape (N + M - 1,). Empty if either input
        is empty.
    """
    if not isinstance(p, Tensor):
        p = torch.as_tensor(p, dtype=torch.float64)
    if not isinstance(q, Tensor):
        q = torch.as_tensor(q, dtype=torch.float64, device=p.device)

    p = p.reshape(-1)
    q = q.reshape(-1)
    common_dtype = torch.promote_types(p.dtype, q.dtype)
    p = p.to(common_dtype)
    q = q.to(common_dtype)

    n_p = p.numel()
    n_q = q.numel()
    if n_p == 0 or n_q == 0:
        return torch.zeros(0, dtype=common_dtype, device=p.device)

    # Loop over the shorter operand
    if n_q > n_p:
        p, q = q, p
        n_p, n_q = n_q, n_p

    result = torch.zeros(n_p + n_q - 1, dtype=common_dtype, device=p.device)
    for i, c in enumerate(q):
        shifted = torch.nn.functional.pad(c * p, (i, n_q - 1 - i))
        result = result + shifted

    return result
