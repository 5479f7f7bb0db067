from typing import Sequence, Union

import torch
from torch import Tensor


def polynomial_from_roots(roots: Union[Tensor, Sequence[complex]]) -> Tensor:
    """Construct monic polynomial from its roots.

    Constructs (x - r_0)(x - r_1)...(x - r_{n-1}) by repeated convolution
    with (x - r_i).

    Parameters
    ----------
    roots : Tensor or sequence
        Roots, shape (N,). Can be real or complex.

    Returns
    -------
    Tensor
        Coefficients in descending order, shape (N+1,). The leading
        coefficient is 1. float64 for real roots, complex128 otherwise.
        Imaginary parts smaller than the float64 machine epsilon are set
        to zero so that conjugate-symmetric roots give real coefficients.

    Examples
    --------
    >>> polynomial_from_roots(torch.tensor([1.0, 2.0]))  # x^2 - 3x + 2
    tensor([ 1., -3.,  2.], dtype=torch.float64)
    """
    if not isinstance(roots, Tensor):
        roots = torch.as_tensor(roots)

    roots = roots.reshape(-1)
    work_dtype = torch.complex128 if roots.is_complex() else torch.float64
    roots = roots.to(work_dtype)

    coeffs = torch.ones(1, dtype=work_dtype, device=roots.device)
    zero = torch.zeros(1, dtype=work_dtype, device=roots.device)

    for root in roots:
        # (c_0 x^k + ... + c_k) * x - root * (c_0 x^k + ... + c_k)
        coeffs = torch.cat([coeffs, zero]) - root * torch.cat([zero, coeffs])

    if coeffs.is_complex():
        eps = torch.finfo(torch.float64).eps
        snapped = torch.complex(coeffs.real, torch.zeros_like(coeffs.real))
        coeffs = torch.where(coeffs.imag.abs() < eps, snapped, coeffs)

    return coeffs
