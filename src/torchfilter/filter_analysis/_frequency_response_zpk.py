"""Frequency response computation for ZPK filters."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from torchfilter.filter_design._dtypes import promote_zpk
from torchfilter.polynomial import polynomial_evaluate, polynomial_from_roots

from ._frequency_grid import frequency_grid


def frequency_response_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute frequency response of a digital filter (ZPK form).

    Parameters
    ----------
    zeros : Tensor
        Filter zeros (complex), shape (n_zeros,).
    poles : Tensor
        Filter poles (complex), shape (n_poles,).
    gain : Tensor
        Filter gain (scalar).
    frequencies : Tensor or int, default 512
        If int: Number of frequency points to compute.
        If Tensor: Specific frequency points at which to evaluate.
    whole : bool, default False
        If True and frequencies is int, compute full circle.
    sampling_frequency : float, optional
        If None: frequencies are normalized [0, 1] where 1 = Nyquist.
        If provided: frequencies are in Hz.
    dtype : torch.dtype, optional
        Output dtype for frequency response.
    device : torch.device, optional
        Output device. Defaults to the device of zeros.

    Returns
    -------
    frequencies : Tensor
        Frequency points.
    response : Tensor
        Complex frequency response
        k * prod(e^{jw} - z_i) / prod(e^{jw} - p_i).
    """
    zeros, poles, gain, real_dtype, complex_dtype = promote_zpk(
        zeros, poles, gain
    )
    if device is None:
        device = zeros.device
    if dtype is None:
        dtype = complex_dtype

    freq_points, w = frequency_grid(
        frequencies, whole, sampling_frequency, device
    )

    z = torch.exp(1j * w)
    numerator = polynomial_from_roots(zeros.to(device))
    denominator = polynomial_from_roots(poles.to(device))
    response = (
        gain.to(device)
        * polynomial_evaluate(numerator, z)
        / polynomial_evaluate(denominator, z)
    )

    return freq_points.to(real_dtype), response.to(dtype)
