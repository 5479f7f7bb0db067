"""Butterworth analog lowpass filter prototype."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from ._dtypes import resolve_dtypes
from ._exceptions import InvalidOrderError


def butterworth_prototype(
    order: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Normalized analog Butterworth lowpass prototype.

    The prototype is maximally flat at DC and has its -3 dB point at
    1 rad/s. Use ``lowpass_to_lowpass_zpk`` and friends to move it to other
    frequencies and bands.

    Parameters
    ----------
    order : int
        Number of poles. Must be positive.
    dtype : torch.dtype, optional
        Real output dtype, float32 or float64. Defaults to
        torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Empty complex tensor; every zero is at infinity.
    poles : Tensor
        Complex tensor of shape (order,) on the left half of the unit
        circle.
    gain : Tensor
        Scalar 1.

    Raises
    ------
    InvalidOrderError
        If order is less than 1.

    Notes
    -----
    The poles are equally spaced in angle:

    .. math::
        s_k = e^{j \\pi (2k + n + 1) / (2n)}, \\quad k = 0, \\ldots, n-1

    For odd n the middle pole is set to exactly -1.

    Examples
    --------
    >>> zeros, poles, gain = butterworth_prototype(3, dtype=torch.float64)
    >>> poles[1]
    tensor(-1.+0.j, dtype=torch.complex128)
    """
    if order < 1:
        raise InvalidOrderError(
            f"Filter order must be positive, got {order}", "prototype"
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device, "prototype")

    # Zeros: empty for Butterworth (all zeros at infinity)
    zeros = torch.empty(0, dtype=complex_dtype, device=device)

    # s_k = exp(j * pi * (2k + n + 1) / (2n)) for k = 0, ..., n-1
    k_indices = torch.arange(order, dtype=torch.float64, device=device)
    angles = math.pi * (2 * k_indices + order + 1) / (2 * order)
    poles = torch.polar(torch.ones_like(angles), angles)

    # The middle pole of an odd order filter is exactly -1
    if order % 2 == 1:
        poles[order // 2] = -1.0

    gain = torch.tensor(1.0, dtype=dtype, device=device)

    return zeros, poles.to(complex_dtype), gain
