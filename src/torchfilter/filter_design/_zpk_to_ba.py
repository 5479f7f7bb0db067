"""Conversion from zeros-poles-gain to transfer function coefficients."""

import math
import warnings
from typing import Tuple

import torch
from torch import Tensor

from torchfilter.polynomial import polynomial_from_roots

from ._dtypes import promote_zpk
from ._exceptions import FilterDesignWarning


def zpk_to_ba(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
) -> Tuple[Tensor, Tensor]:
    """Convert zeros, poles, gain to transfer function coefficients.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the transfer function.
    poles : Tensor
        Poles of the transfer function.
    gain : Tensor
        Gain of the transfer function.

    Returns
    -------
    numerator : Tensor
        Numerator polynomial coefficients in descending order, gain times
        the monic polynomial with the given zeros. ``[gain]`` if there
        are no zeros.
    denominator : Tensor
        Monic denominator polynomial coefficients in descending order.
        ``[1]`` if there are no poles.

    Warns
    -----
    FilterDesignWarning
        If the expanded polynomials have a significant imaginary part,
        which happens when the roots are not conjugate-symmetric. Only
        the real part is returned.

    Notes
    -----
    The transfer function is:

    .. math::
        H(z) = k \\frac{(z - z_0)(z - z_1)...}{(z - p_0)(z - p_1)...}

    which is converted to:

    .. math::
        H(z) = \\frac{b_0 + b_1 z^{-1} + ...}{a_0 + a_1 z^{-1} + ...}

    Examples
    --------
    >>> zeros = torch.tensor([-1.0 + 0j])
    >>> poles = torch.tensor([-0.5 + 0j])
    >>> gain = torch.tensor(0.25)
    >>> b, a = zpk_to_ba(zeros, poles, gain)
    >>> b
    tensor([0.2500, 0.2500])
    """
    zeros, poles, gain, dtype, _ = promote_zpk(zeros, poles, gain)

    b = gain * _real_polynomial(zeros, "numerator")
    a = _real_polynomial(poles, "denominator")

    return b.to(dtype), a.to(dtype)


def _real_polynomial(roots: Tensor, name: str) -> Tensor:
    coeffs = polynomial_from_roots(roots)
    if not coeffs.is_complex():
        return coeffs

    scale = coeffs.abs().max().item()
    residue = coeffs.imag.abs().max().item()
    if residue > math.sqrt(torch.finfo(torch.float64).eps) * max(scale, 1.0):
        warnings.warn(
            f"Discarding imaginary part of the {name} polynomial "
            f"(max {residue:.2e}); roots are not conjugate-symmetric",
            FilterDesignWarning,
            stacklevel=3,
        )
    return coeffs.real
