"""Chebyshev Type I analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._dtypes import resolve_dtypes
from ._exceptions import InvalidOrderError, InvalidRippleError


def chebyshev_type_1_prototype(
    order: int,
    passband_ripple_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Chebyshev Type I lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog Chebyshev Type I
    lowpass filter with the specified passband ripple. The filter has equiripple
    passband and monotonic stopband.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    passband_ripple_db : float
        Maximum ripple in the passband in decibels. Must be positive.
        Common values: 0.5 dB, 1 dB, 3 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter (empty for Chebyshev Type I).
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain, scalar tensor.

    Raises
    ------
    InvalidOrderError
        If order is less than 1.
    InvalidRippleError
        If passband_ripple_db is not positive and finite.

    Notes
    -----
    The magnitude response oscillates between 1 and 1/sqrt(1+eps^2) in the
    passband, where:

    .. math::
        \\epsilon = \\sqrt{10^{R_p/10} - 1}

    The poles lie on an ellipse in the left half-plane:

    .. math::
        p_k = -\\sinh(\\mu) \\sin(\\theta_k) + j \\cosh(\\mu) \\cos(\\theta_k)

    with mu = arcsinh(1/eps) / n and theta_k = pi (2k + 1) / (2n).

    For even order the DC gain is 1/sqrt(1+eps^2) (the bottom of the ripple),
    so that the passband edge at 1 rad/s meets the requested ripple.

    Examples
    --------
    >>> zeros, poles, gain = chebyshev_type_1_prototype(4, passband_ripple_db=1.0)
    >>> poles.shape
    torch.Size([4])
    """
    if order < 1:
        raise InvalidOrderError(
            f"Filter order must be positive, got {order}", "prototype"
        )
    if not math.isfinite(passband_ripple_db) or passband_ripple_db <= 0:
        raise InvalidRippleError(
            f"Passband ripple must be positive, got {passband_ripple_db}",
            "prototype",
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device, "prototype")

    # eps = sqrt(10^(Rp/10) - 1)
    eps = math.sqrt(10 ** (passband_ripple_db / 10) - 1)
    mu = math.asinh(1.0 / eps) / order

    k = torch.arange(order, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k + 1) / (2 * order)

    cos_theta = torch.cos(theta)
    # The middle pole of an odd order filter lies on the real axis
    if order % 2 == 1:
        cos_theta[order // 2] = 0.0

    poles = torch.complex(
        -math.sinh(mu) * torch.sin(theta),
        math.cosh(mu) * cos_theta,
    )

    zeros = torch.zeros(0, dtype=complex_dtype, device=device)

    gain = torch.prod(-poles).real
    if order % 2 == 0:
        gain = gain / math.sqrt(1 + eps**2)

    return zeros, poles.to(complex_dtype), gain.to(dtype)
