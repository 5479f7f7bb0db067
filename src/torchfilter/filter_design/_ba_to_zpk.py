"""Conversion from transfer function coefficients to zeros-poles-gain."""

from typing import Tuple

import torch
from torch import Tensor

from torchfilter.polynomial import (
    DegreeError,
    RootFindingError,
    polynomial_roots,
)

from ._dtypes import complex_dtype_for, result_dtype
from ._exceptions import ConvergenceError, InvalidCoefficientsError


def ba_to_zpk(
    numerator: Tensor,
    denominator: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    """Convert transfer function coefficients to zeros, poles, gain.

    Parameters
    ----------
    numerator : Tensor
        Numerator polynomial coefficients in descending order.
    denominator : Tensor
        Denominator polynomial coefficients in descending order.

    Returns
    -------
    zeros : Tensor
        Zeros of the transfer function.
    poles : Tensor
        Poles of the transfer function.
    gain : Tensor
        Gain of the transfer function, numerator[0] / denominator[0].

    Raises
    ------
    InvalidCoefficientsError
        If either sequence is empty or has a zero leading coefficient.
    ConvergenceError
        If the roots of either polynomial cannot be computed.

    Notes
    -----
    The transfer function:

    .. math::
        H(z) = \\frac{b_0 + b_1 z^{-1} + ... + b_n z^{-n}}{a_0 + a_1 z^{-1} + ... + a_m z^{-m}}

    is converted to:

    .. math::
        H(z) = k \\frac{(z - z_0)(z - z_1)...}{(z - p_0)(z - p_1)...}

    where k is the gain.

    Examples
    --------
    >>> b = torch.tensor([0.25, 0.25])
    >>> a = torch.tensor([1.0, -0.5])
    >>> zeros, poles, gain = ba_to_zpk(b, a)
    >>> poles
    tensor([0.5000+0.j])
    """
    b = torch.as_tensor(numerator)
    a = torch.as_tensor(denominator, device=b.device)
    dtype = result_dtype(b, a)
    complex_dtype = complex_dtype_for(dtype)

    b = b.reshape(-1).to(torch.float64)
    a = a.reshape(-1).to(torch.float64)

    zeros = _roots(b, "numerator")
    poles = _roots(a, "denominator")

    gain = b[0] / a[0]

    return zeros.to(complex_dtype), poles.to(complex_dtype), gain.to(dtype)


def _roots(coeffs: Tensor, name: str) -> Tensor:
    try:
        return polynomial_roots(coeffs)
    except DegreeError as error:
        raise InvalidCoefficientsError(
            f"Invalid {name}: {error}", "conversion"
        ) from error
    except RootFindingError as error:
        raise ConvergenceError(
            f"Could not find the roots of the {name}", "conversion"
        ) from error
