"""Lowpass to highpass frequency transform for analog filters."""

from typing import Tuple, Union

import torch
from torch import Tensor

from ._dtypes import promote_zpk
from ._validation import check_frequency, check_proper


def lowpass_to_highpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff_frequency: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Transform a lowpass filter to a highpass filter.

    Performs the analog transformation s -> cutoff_frequency / s, which turns
    a lowpass filter with cutoff 1 rad/s into a highpass filter with cutoff
    cutoff_frequency rad/s.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog lowpass filter.
    poles : Tensor
        Poles of the analog lowpass filter.
    gain : Tensor
        System gain of the analog lowpass filter.
    cutoff_frequency : float or Tensor
        Cutoff frequency of the highpass filter (rad/s).

    Returns
    -------
    zeros_new : Tensor
        Zeros of the highpass filter.
    poles_new : Tensor
        Poles of the highpass filter.
    gain_new : Tensor
        System gain of the highpass filter.

    Notes
    -----
    The transformation s -> cutoff_frequency / s:

    - Inverts every root: r -> cutoff_frequency / r
    - Adds (len(poles) - len(zeros)) zeros at s = 0
    - Multiplies the gain by real(prod(-zeros) / prod(-poles)) so the
      high frequency gain equals the lowpass DC gain
    """
    w0 = check_frequency(
        cutoff_frequency, "cutoff_frequency", "band_transform", allow_zero=True
    )
    zeros, poles, gain, dtype, complex_dtype = promote_zpk(zeros, poles, gain)
    check_proper(zeros, poles, "band_transform")

    degree_diff = poles.numel() - zeros.numel()

    zeros_new = torch.cat(
        [
            w0 / zeros,
            torch.zeros(degree_diff, dtype=zeros.dtype, device=zeros.device),
        ]
    )
    poles_new = w0 / poles

    # Input roots; prod of an empty tensor is 1
    gain_new = gain * torch.real(torch.prod(-zeros) / torch.prod(-poles))

    return (
        zeros_new.to(complex_dtype),
        poles_new.to(complex_dtype),
        gain_new.to(dtype),
    )
