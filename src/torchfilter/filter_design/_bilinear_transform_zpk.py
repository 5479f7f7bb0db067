"""Bilinear transform for analog to digital filter conversion."""

import math
from typing import Tuple, Union

import torch
from torch import Tensor

from ._dtypes import promote_zpk
from ._exceptions import InvalidSamplingFrequencyError, PoleZeroCountError


def bilinear_transform_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    sampling_frequency: Union[float, Tensor],
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Transform an analog filter to a digital filter using bilinear transform.

    The bilinear transform maps the s-plane to the z-plane using:
    s = (2*sampling_frequency) * (z - 1) / (z + 1)

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog filter.
    poles : Tensor
        Poles of the analog filter.
    gain : Tensor
        System gain of the analog filter.
    sampling_frequency : float or Tensor
        Sampling frequency (Hz). Must be positive and finite.

    Returns
    -------
    zeros_digital : Tensor
        Zeros of the digital filter.
    poles_digital : Tensor
        Poles of the digital filter.
    gain_digital : Tensor
        System gain of the digital filter.

    Raises
    ------
    PoleZeroCountError
        If the analog filter has more zeros than poles.
    InvalidSamplingFrequencyError
        If sampling_frequency is not positive and finite.

    Notes
    -----
    The bilinear transform:

    - Maps left half-plane (stable analog) to inside unit circle (stable digital)
    - Maps imaginary axis to unit circle
    - Introduces frequency warping: omega_d = 2*fs * arctan(omega_a / (2*fs))
    - Adds zeros at z=-1 for each degree difference (all-pole analog -> FIR zeros)

    For frequency prewarping (not included here), prewarp the analog
    filter before calling bilinear_transform_zpk.

    Examples
    --------
    >>> z, p, k = bilinear_transform_zpk(
    ...     torch.zeros(0, dtype=torch.complex128),
    ...     torch.tensor([-1.0 + 0j], dtype=torch.complex128),
    ...     torch.tensor(1.0, dtype=torch.float64),
    ...     1.0,
    ... )
    >>> p
    tensor([0.3333+0.j], dtype=torch.complex128)
    """
    fs = float(sampling_frequency)
    if not math.isfinite(fs) or fs <= 0:
        raise InvalidSamplingFrequencyError(
            f"sampling_frequency must be positive and finite, got {fs}",
            "bilinear_transform",
        )

    zeros, poles, gain, dtype, complex_dtype = promote_zpk(zeros, poles, gain)

    degree_diff = poles.numel() - zeros.numel()
    if degree_diff < 0:
        raise PoleZeroCountError(
            f"Improper filter: {zeros.numel()} zeros but only "
            f"{poles.numel()} poles",
            "bilinear_transform",
        )

    fs2 = 2.0 * fs

    zeros_digital = torch.cat(
        [
            (fs2 + zeros) / (fs2 - zeros),
            -torch.ones(degree_diff, dtype=zeros.dtype, device=zeros.device),
        ]
    )
    poles_digital = (fs2 + poles) / (fs2 - poles)

    gain_digital = gain * torch.real(
        torch.prod(fs2 - zeros) / torch.prod(fs2 - poles)
    )

    return (
        zeros_digital.to(complex_dtype),
        poles_digital.to(complex_dtype),
        gain_digital.to(dtype),
    )
