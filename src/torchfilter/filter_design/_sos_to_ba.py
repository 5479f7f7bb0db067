"""Conversion from second-order sections to transfer function coefficients."""

from typing import Tuple

import torch
from torch import Tensor

from torchfilter.polynomial import polynomial_multiply

from ._dtypes import result_dtype
from ._validation import check_sos


def sos_to_ba(
    sos: Tensor,
    validate: bool = True,
) -> Tuple[Tensor, Tensor]:
    """Convert second-order sections to transfer function coefficients.

    Parameters
    ----------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
        Each row is [b0, b1, b2, a0, a1, a2].
    validate : bool, default True
        If True, validate SOS normalization (a0 = 1).

    Returns
    -------
    numerator : Tensor
        Numerator polynomial coefficients, length 2 * n_sections + 1.
    denominator : Tensor
        Denominator polynomial coefficients, length 2 * n_sections + 1.

    Raises
    ------
    SOSNormalizationError
        If sos does not have shape (n_sections, 6), or if validate=True
        and a0 != 1 for any section.

    Examples
    --------
    >>> sos = torch.tensor([[1.0, 1.0, 0.0, 1.0, -0.5, 0.0]])
    >>> sos_to_ba(sos)
    (tensor([1., 1., 0.]), tensor([ 1.0000, -0.5000,  0.0000]))
    """
    sos = check_sos(sos, validate)
    dtype = result_dtype(sos)
    sos = sos.to(torch.float64)

    b = sos[0, :3]
    a = sos[0, 3:]
    for section in sos[1:]:
        b = polynomial_multiply(b, section[:3])
        a = polynomial_multiply(a, section[3:])

    return b.to(dtype), a.to(dtype)
