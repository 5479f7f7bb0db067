from typing import Sequence, Union

import torch
from torch import Tensor

from ._exceptions import DegreeError, RootFindingError


def polynomial_roots(coeffs: Union[Tensor, Sequence[float]]) -> Tensor:
    """Find polynomial roots via companion matrix eigenvalues.

    Parameters
    ----------
    coeffs : Tensor or sequence of float
        Polynomial coefficients, shape (N,), in descending order
        [c_{N-1}, ..., c_1, c_0]. The leading coefficient must be non-zero.

    Returns
    -------
    Tensor
        Roots, shape (N-1,). Always complex128, regardless of the input
        precision.

    Raises
    ------
    DegreeError
        If coeffs is empty, not one-dimensional, or its leading coefficient
        is zero.
    RootFindingError
        If the coefficients are not finite or the eigenvalue decomposition
        fails to converge.

    Examples
    --------
    >>> polynomial_roots(torch.tensor([1.0, -3.0, 2.0]))  # (x-1)(x-2)
    tensor([2.+0.j, 1.+0.j], dtype=torch.complex128)

    Notes
    -----
    The companion matrix of the monic polynomial
    x^n + a_1 x^{n-1} + ... + a_n is

        [[-a_1, -a_2, ..., -a_{n-1}, -a_n],
         [   1,    0, ...,        0,    0],
         [   0,    1, ...,        0,    0],
         [                              .],
         [   0,    0, ...,        1,    0]]

    and its eigenvalues are the roots of the polynomial. Real coefficients
    give a real companion matrix; the eigenvalues are computed with
    torch.linalg.eigvals in double precision. The cost is O(n^3).
    """
    if not isinstance(coeffs, Tensor):
        coeffs = torch.as_tensor(coeffs, dtype=torch.float64)

    if coeffs.ndim != 1:
        raise DegreeError(
            f"Coefficients must be one-dimensional, got shape {tuple(coeffs.shape)}"
        )
    if coeffs.numel() == 0:
        raise DegreeError("Cannot find roots of an empty coefficient sequence")

    work_dtype = torch.complex128 if coeffs.is_complex() else torch.float64
    coeffs = coeffs.to(work_dtype)

    if coeffs[0] == 0:
        raise DegreeError(
            "Leading coefficient must be non-zero for root finding"
        )

    degree = coeffs.numel() - 1
    if degree == 0:
        return torch.empty(0, dtype=torch.complex128, device=coeffs.device)

    # Top row holds the negated, normalized coefficients
    normalized = -coeffs[1:] / coeffs[0]
    if not torch.all(torch.isfinite(normalized)):
        raise RootFindingError(
            "Normalized polynomial coefficients are not finite"
        )

    companion = torch.zeros(
        (degree, degree), dtype=work_dtype, device=coeffs.device
    )
    companion[0, :] = normalized

    # Set subdiagonal to 1
    if degree > 1:
        indices = torch.arange(degree - 1, device=coeffs.device)
        companion[indices + 1, indices] = 1.0

    try:
        roots = torch.linalg.eigvals(companion)
    except torch.linalg.LinAlgError as error:
        raise RootFindingError(
            f"Eigenvalue decomposition of the degree {degree} companion "
            f"matrix did not converge"
        ) from error

    return roots.to(torch.complex128)
