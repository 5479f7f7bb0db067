"""Conversion from second-order sections to zeros-poles-gain."""

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
from ._validation import check_sos


def sos_to_zpk(
    sos: Tensor,
    validate: bool = True,
) -> Tuple[Tensor, Tensor, Tensor]:
    """Convert second-order sections to zeros, poles, gain.

    Parameters
    ----------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
        Each row is [b0, b1, b2, a0, a1, a2].
    validate : bool, default True
        If True, validate SOS normalization (a0 = 1).

    Returns
    -------
    zeros : Tensor
        Zeros of the filter.
    poles : Tensor
        Poles of the filter.
    gain : Tensor
        System gain, the product of the leading non-zero numerator
        coefficient over a0 of every section.

    Raises
    ------
    SOSNormalizationError
        If sos does not have shape (n_sections, 6), or if validate=True
        and a0 != 1 for any section.
    InvalidCoefficientsError
        If a section numerator or denominator is identically zero.

    Notes
    -----
    Each second-order section represents a biquad filter:

    .. math::
        H_k(z) = \\frac{b_{k0} + b_{k1}z^{-1} + b_{k2}z^{-2}}{a_{k0} + a_{k1}z^{-1} + a_{k2}z^{-2}}

    A section with b2 = a2 = 0 is first order: it contributes one zero and
    one pole rather than an extra pair at the origin.

    Examples
    --------
    >>> sos = torch.tensor([[1.0, 2.0, 1.0, 1.0, -0.5, 0.1]])
    >>> zeros, poles, gain = sos_to_zpk(sos)
    >>> gain
    tensor(1.)
    """
    sos = check_sos(sos, validate)
    dtype = result_dtype(sos)
    complex_dtype = complex_dtype_for(dtype)
    sos = sos.to(torch.float64)

    zeros = []
    poles = []
    gain = torch.ones((), dtype=torch.float64, device=sos.device)
    for index, section in enumerate(sos):
        b = section[:3]
        a = section[3:]
        if b[2] == 0 and a[2] == 0:
            b = b[:2]
            a = a[:2]
        b = _strip_leading_zeros(b)
        a = _strip_leading_zeros(a)

        zeros.append(_roots(b, f"section {index} numerator"))
        poles.append(_roots(a, f"section {index} denominator"))
        gain = gain * b[0] / a[0]

    return (
        torch.cat(zeros).to(complex_dtype),
        torch.cat(poles).to(complex_dtype),
        gain.to(dtype),
    )


def _strip_leading_zeros(coeffs: Tensor) -> Tensor:
    nonzero = torch.nonzero(coeffs).flatten()
    if nonzero.numel() == 0:
        return coeffs[:0]
    return coeffs[int(nonzero[0]) :]


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
