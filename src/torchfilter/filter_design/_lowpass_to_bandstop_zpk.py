"""Lowpass to bandstop frequency transform for analog filters."""

from typing import Tuple, Union

import torch
from torch import Tensor

from ._dtypes import promote_zpk
from ._lowpass_to_bandpass_zpk import _split_roots
from ._validation import check_frequency, check_proper


def lowpass_to_bandstop_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    center_frequency: Union[float, Tensor] = 1.0,
    bandwidth: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Transform a lowpass filter to a bandstop filter.

    Performs the analog transformation s -> (bw * s) / (s^2 + w0^2), which
    converts a lowpass filter with cutoff 1 rad/s to a bandstop filter with
    center frequency w0 rad/s and stopband width bw rad/s.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog lowpass filter.
    poles : Tensor
        Poles of the analog lowpass filter.
    gain : Tensor
        System gain of the analog lowpass filter.
    center_frequency : float or Tensor
        Center frequency w0 of the stopband (rad/s). Must be non-negative.
    bandwidth : float or Tensor
        Width bw of the stopband (rad/s). Must be non-negative.

    Returns
    -------
    zeros_new : Tensor
        Zeros of the bandstop filter.
    poles_new : Tensor
        Poles of the bandstop filter.
    gain_new : Tensor
        System gain of the bandstop filter.

    Raises
    ------
    InvalidCutoffError
        If center_frequency or bandwidth is negative or not finite.
    PoleZeroCountError
        If the filter is empty or has more zeros than poles.

    Notes
    -----
    The transformation:

    - Inverts and doubles every root:
      r_new = bw / (2r) ± sqrt((bw / (2r))^2 - w0^2)
    - Adds (len(poles) - len(zeros)) zeros at each of s = +j*w0 and -j*w0
    - Multiplies the gain by real(prod(-zeros) / prod(-poles)) so the DC
      gain is preserved
    """
    w0 = check_frequency(
        center_frequency, "center_frequency", "band_transform", allow_zero=True
    )
    bw = check_frequency(
        bandwidth, "bandwidth", "band_transform", allow_zero=True
    )
    zeros, poles, gain, dtype, complex_dtype = promote_zpk(zeros, poles, gain)
    check_proper(zeros, poles, "band_transform")

    degree_diff = poles.numel() - zeros.numel()

    notch = torch.full(
        (degree_diff,), 1j * w0, dtype=zeros.dtype, device=zeros.device
    )
    zeros_new = torch.cat(
        [_split_roots((bw / 2) / zeros, w0), notch, -notch]
    )
    poles_new = _split_roots((bw / 2) / poles, w0)

    gain_new = gain * torch.real(torch.prod(-zeros) / torch.prod(-poles))

    return (
        zeros_new.to(complex_dtype),
        poles_new.to(complex_dtype),
        gain_new.to(dtype),
    )
