"""Frequency response computation for SOS filters."""

from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from torchfilter.filter_design._dtypes import complex_dtype_for, result_dtype
from torchfilter.filter_design._validation import check_sos

from ._frequency_grid import frequency_grid


def frequency_response_sos(
    sos: Tensor,
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
    validate: bool = True,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Evaluate H(e^{jw}) of a cascade of second-order sections.

    Each section is evaluated on its own and the results are multiplied,
    which stays accurate for orders where the expanded (b, a) form does
    not.

    Parameters
    ----------
    sos : Tensor
        Sections of shape (n_sections, 6), rows [b0, b1, b2, a0, a1, a2].
    frequencies : Tensor or int, default 512
        Number of evenly spaced points on [0, Nyquist) (or [0, fs) with
        ``whole``), or explicit points.
    whole : bool, default False
        Span the full circle when ``frequencies`` is a count.
    sampling_frequency : float, optional
        Points are in Hz when given, fractions of Nyquist otherwise.
    validate : bool, default True
        Check that every a0 equals 1.
    dtype, device
        Complex output dtype (defaults to the precision of ``sos``) and
        device (defaults to that of ``sos``).

    Returns
    -------
    frequencies : Tensor
        The evaluation points in the caller's units.
    response : Tensor
        Complex response at each point.

    Raises
    ------
    SOSNormalizationError
        If ``sos`` is malformed, or ``validate`` and some a0 != 1.

    Examples
    --------
    >>> sos = butterworth_design(4, 0.3)
    >>> freqs, response = frequency_response_sos(sos)
    >>> response.shape
    torch.Size([512])
    """
    sos = check_sos(sos, validate)
    if device is None:
        device = sos.device
    real_dtype = result_dtype(sos)
    if dtype is None:
        dtype = complex_dtype_for(real_dtype)

    freq_points, w = frequency_grid(
        frequencies, whole, sampling_frequency, device
    )

    z_inv = torch.exp(-1j * w)

    # H(z) = product of (b0 + b1*z^-1 + b2*z^-2) / (a0 + a1*z^-1 + a2*z^-2)
    response = torch.ones_like(z_inv)
    for section in sos.to(dtype=torch.float64, device=device):
        b0, b1, b2, a0, a1, a2 = section
        num = b0 + z_inv * (b1 + z_inv * b2)
        den = a0 + z_inv * (a1 + z_inv * a2)
        response = response * (num / den)

    return freq_points.to(real_dtype), response.to(dtype)
