"""Lowpass to bandpass frequency transform for analog filters."""

from typing import Tuple, Union

import torch
from torch import Tensor

from ._dtypes import promote_zpk
from ._validation import check_frequency, check_proper


def lowpass_to_bandpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center_frequency: Union[float, Tensor] = 1.0,
    bandwidth: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Transform a lowpass filter to a bandpass filter.

    Performs the analog transformation s -> (s^2 + w0^2) / (bw * s), which
    converts a lowpass filter with cutoff 1 rad/s to a bandpass filter with
    center frequency w0 rad/s and bandwidth bw rad/s.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog lowpass filter.
    poles : Tensor
        Poles of the analog lowpass filter.
    gain : Tensor
        System gain of the analog lowpass filter.
    center_frequency : float or Tensor
        Center frequency w0 of the bandpass filter (rad/s). Must be
        non-negative.
    bandwidth : float or Tensor
        Bandwidth bw of the bandpass filter (rad/s). Must be positive.

    Returns
    -------
    zeros_new : Tensor
        Zeros of the bandpass filter.
    poles_new : Tensor
        Poles of the bandpass filter.
    gain_new : Tensor
        System gain of the bandpass filter.

    Raises
    ------
    InvalidCutoffError
        If center_frequency is negative or bandwidth is not positive.
    PoleZeroCountError
        If the filter is empty or has more zeros than poles.

    Notes
    -----
    The transformation:

    - Doubles the filter order (each root becomes two roots)
    - Adds (len(poles) - len(zeros)) zeros at s = 0
    - Multiplies the gain by bw^(len(poles) - len(zeros))

    For each root r, the new roots are:
        r_new = (bw * r / 2) ± sqrt((bw * r / 2)^2 - w0^2)
    """
    w0 = check_frequency(
        center_frequency, "center_frequency", "band_transform", allow_zero=True
    )
    bw = check_frequency(bandwidth, "bandwidth", "band_transform")
    zeros, poles, gain, dtype, complex_dtype = promote_zpk(zeros, poles, gain)
    check_proper(zeros, poles, "band_transform")

    degree_diff = poles.numel() - zeros.numel()

    zeros_new = torch.cat(
        [
            _split_roots(zeros * bw / 2, w0),
            torch.zeros(degree_diff, dtype=zeros.dtype, device=zeros.device),
        ]
    )
    poles_new = _split_roots(poles * bw / 2, w0)

    gain_new = gain * bw**degree_diff

    return (
        zeros_new.to(complex_dtype),
        poles_new.to(complex_dtype),
        gain_new.to(dtype),
    )


def _split_roots(scaled: Tensor, w0: float) -> Tensor:
    """Both solutions of x^2 - 2 * scaled * x + w0^2 = 0 for each root."""
    sqrt_disc = torch.sqrt(scaled * scaled - w0 * w0)
    return torch.cat([scaled + sqrt_disc, scaled - sqrt_disc])
