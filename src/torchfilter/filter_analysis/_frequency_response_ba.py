"""Frequency response computation for transfer function filters."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from torchfilter.filter_design._dtypes import complex_dtype_for, result_dtype
from torchfilter.polynomial import polynomial_evaluate

from ._frequency_grid import frequency_grid


def frequency_response_ba(
    numerator: Tensor,
    denominator: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute frequency response of a digital filter (BA form).

    Parameters
    ----------
    numerator : Tensor
        Numerator coefficients [b0, b1, ...] of powers of z^-1.
    denominator : Tensor
        Denominator coefficients [a0, a1, ...] of powers of z^-1.
    frequencies : Tensor or int, default 512
        If int: Number of frequency points to compute, evenly spaced from
        0 to Nyquist (or 0 to sampling frequency if whole=True).
        If Tensor: Specific frequency points at which to evaluate.
    whole : bool, default False
        If True and frequencies is int, compute the full circle.
    sampling_frequency : float, optional
        If None: frequencies are normalized [0, 1] where 1 = Nyquist.
        If provided: frequencies are in Hz.
    dtype : torch.dtype, optional
        Output dtype for frequency response. Defaults to complex64 or
        complex128 following the coefficients.
    device : torch.device, optional
        Output device. Defaults to the numerator's device.

    Returns
    -------
    frequencies : Tensor
        Frequency points (normalized or Hz depending on sampling_frequency).
    response : Tensor
        Complex frequency response H(e^{jw}).

    Examples
    --------
    >>> b, a = butterworth_design(4, 0.3, output="ba")
    >>> freqs, response = frequency_response_ba(b, a)
    >>> freqs.shape, response.shape
    (torch.Size([512]), torch.Size([512]))
    """
    numerator = torch.as_tensor(numerator)
    denominator = torch.as_tensor(denominator)
    if device is None:
        device = numerator.device
    real_dtype = result_dtype(numerator, denominator)
    if dtype is None:
        dtype = complex_dtype_for(real_dtype)

    freq_points, w = frequency_grid(
        frequencies, whole, sampling_frequency, device
    )

    # Sum of c_k z^-k is a polynomial in z^-1 with ascending coefficients
    z_inv = torch.exp(-1j * w)
    b = numerator.to(dtype=torch.float64, device=device).flip(0)
    a = denominator.to(dtype=torch.float64, device=device).flip(0)
    response = polynomial_evaluate(b, z_inv) / polynomial_evaluate(a, z_inv)

    return freq_points.to(real_dtype), response.to(dtype)
