"""Frequency response computation for analog ZPK filters."""

import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from torchfilter.filter_design._dtypes import promote_zpk
from torchfilter.polynomial import polynomial_evaluate, polynomial_from_roots


def frequency_response_analog_zpk(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    frequencies: Union[Tensor, int] = 200,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute frequency response of an analog filter (ZPK form).

    Parameters
    ----------
    zeros : Tensor
        Filter zeros in the s-plane.
    poles : Tensor
        Filter poles in the s-plane.
    gain : Tensor
        Filter gain (scalar).
    frequencies : Tensor or int, default 200
        If int: Number of logarithmically spaced angular frequencies,
        covering the interesting part of the response (chosen from the
        roots).
        If Tensor: Angular frequencies (rad/s) at which to evaluate.
    dtype : torch.dtype, optional
        Output dtype for frequency response.
    device : torch.device, optional
        Output device. Defaults to the device of zeros.

    Returns
    -------
    frequencies : Tensor
        Angular frequencies in rad/s.
    response : Tensor
        Complex frequency response H(jw).

    Examples
    --------
    >>> z, p, k = butterworth_prototype(4, dtype=torch.float64)
    >>> w, h = frequency_response_analog_zpk(z, p, k, torch.tensor([1.0]))
    >>> h.abs() ** 2
    tensor([0.5000], dtype=torch.float64)
    """
    zeros, poles, gain, real_dtype, complex_dtype = promote_zpk(
        zeros, poles, gain
    )
    if device is None:
        device = zeros.device
    if dtype is None:
        dtype = complex_dtype
    zeros = zeros.to(device)
    poles = poles.to(device)

    if isinstance(frequencies, int):
        w = _default_frequencies(zeros, poles, frequencies)
    else:
        w = torch.as_tensor(frequencies).to(dtype=torch.float64, device=device)

    s = 1j * w
    response = (
        gain.to(device)
        * polynomial_evaluate(polynomial_from_roots(zeros), s)
        / polynomial_evaluate(polynomial_from_roots(poles), s)
    )

    return w.to(real_dtype), response.to(dtype)


def _default_frequencies(zeros: Tensor, poles: Tensor, n: int) -> Tensor:
    """Log-spaced frequencies spanning the pole and zero magnitudes."""
    roots = torch.cat([poles, zeros])
    roots = roots[roots.imag >= 0]
    if roots.numel() == 0:
        return torch.logspace(-2, 2, n, dtype=torch.float64, device=zeros.device)

    # Roots at the origin count as 1 rad/s
    at_origin = (roots.abs() < 1e-10).to(torch.float64)
    shifted = roots.real.abs() + at_origin
    high = math.floor(
        math.log10(torch.max(3 * shifted + 1.5 * roots.imag).item()) + 1.0
    )
    low = math.floor(
        math.log10(0.1 * torch.min(shifted + 2 * roots.imag).item())
    )
    return torch.logspace(low, high, n, dtype=torch.float64, device=zeros.device)
