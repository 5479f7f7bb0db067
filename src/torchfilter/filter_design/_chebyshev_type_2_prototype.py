"""Chebyshev Type II analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._dtypes import resolve_dtypes
from ._exceptions import InvalidOrderError, InvalidRippleError


def chebyshev_type_2_prototype(
    order: int,
    stopband_attenuation_db: float,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Chebyshev Type II lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog Chebyshev Type II
    lowpass filter with the specified stopband attenuation. The filter has
    monotonic passband and equiripple stopband. The stopband edge is at
    1 rad/s.

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must be positive.
        Common values: 20 dB, 40 dB, 60 dB.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter (on imaginary axis), complex tensor. There are
        order zeros for even order and order - 1 for odd order.
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain, scalar tensor. Normalizes the DC gain to 1.

    Raises
    ------
    InvalidOrderError
        If order is less than 1.
    InvalidRippleError
        If stopband_attenuation_db is not positive and finite.

    Notes
    -----
    The Chebyshev Type II filter (also called inverse Chebyshev) is
    obtained from the Type I construction with

    .. math::
        \\epsilon = 1 / \\sqrt{10^{R_s/10} - 1}

    by taking reciprocals of the Type I poles. The zeros are located at:

    .. math::
        z_k = j / \\cos(\\theta_k)

    where theta_k = pi * (2k + 1) / (2n). For odd order the middle zero is
    at infinity and is dropped.

    Examples
    --------
    >>> zeros, poles, gain = chebyshev_type_2_prototype(4, stopband_attenuation_db=40.0)
    >>> zeros.shape, poles.shape
    (torch.Size([4]), torch.Size([4]))
    """
    if order < 1:
        raise InvalidOrderError(
            f"Filter order must be positive, got {order}", "prototype"
        )
    if not math.isfinite(stopband_attenuation_db) or stopband_attenuation_db <= 0:
        raise InvalidRippleError(
            f"Stopband attenuation must be positive, got {stopband_attenuation_db}",
            "prototype",
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device, "prototype")

    eps = 1.0 / math.sqrt(10 ** (stopband_attenuation_db / 10) - 1)
    mu = math.asinh(1.0 / eps) / order

    k = torch.arange(order, dtype=torch.float64, device=device)
    theta = math.pi * (2 * k + 1) / (2 * order)

    # The middle pole of an odd order filter lies on the real axis
    cos_theta = torch.cos(theta)
    if order % 2 == 1:
        cos_theta[order // 2] = 0.0

    # Type I poles, then reciprocal
    type_1_poles = torch.complex(
        -math.sinh(mu) * torch.sin(theta),
        math.cosh(mu) * cos_theta,
    )
    poles = 1.0 / type_1_poles

    # cos(theta) vanishes at the middle index of an odd order filter
    if order % 2 == 1:
        mid = order // 2
        cos_theta = torch.cat([cos_theta[:mid], cos_theta[mid + 1 :]])

    zeros_imag = 1.0 / cos_theta
    zeros = torch.complex(torch.zeros_like(zeros_imag), zeros_imag)

    num = torch.prod(-poles)
    if zeros.numel() > 0:
        gain = (num / torch.prod(-zeros)).real
    else:
        gain = num.real

    return zeros.to(complex_dtype), poles.to(complex_dtype), gain.to(dtype)
