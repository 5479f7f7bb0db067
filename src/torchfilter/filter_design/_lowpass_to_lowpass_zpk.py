"""Lowpass to lowpass frequency transform for analog filters."""

from typing import Tuple, Union

from torch import Tensor

from ._dtypes import promote_zpk
from ._validation import check_frequency, check_proper


def lowpass_to_lowpass_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    cutoff_frequency: Union[float, Tensor] = 1.0,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Transform a lowpass filter to a different cutoff frequency.

    Performs the analog frequency scaling s -> s / cutoff_frequency, which
    moves the cutoff from 1 rad/s to cutoff_frequency rad/s.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the analog filter.
    poles : Tensor
        Poles of the analog filter.
    gain : Tensor
        System gain of the analog filter.
    cutoff_frequency : float or Tensor
        New cutoff frequency (rad/s). Must be non-negative and finite.

    Returns
    -------
    zeros_new : Tensor
        Zeros of the transformed filter.
    poles_new : Tensor
        Poles of the transformed filter.
    gain_new : Tensor
        System gain of the transformed filter.

    Raises
    ------
    InvalidCutoffError
        If cutoff_frequency is negative or not finite.
    PoleZeroCountError
        If the filter has neither poles nor zeros, or more zeros than
        poles.

    Notes
    -----
    The gain is multiplied by cutoff_frequency^(len(poles) - len(zeros)) so
    that the response at the scaled frequencies is unchanged.
    """
    w0 = check_frequency(
        cutoff_frequency, "cutoff_frequency", "band_transform", allow_zero=True
    )
    zeros, poles, gain, dtype, complex_dtype = promote_zpk(zeros, poles, gain)
    check_proper(zeros, poles, "band_transform")

    degree_diff = poles.numel() - zeros.numel()

    zeros_new = zeros * w0
    poles_new = poles * w0
    gain_new = gain * w0**degree_diff

    return (
        zeros_new.to(complex_dtype),
        poles_new.to(complex_dtype),
        gain_new.to(dtype),
    )
