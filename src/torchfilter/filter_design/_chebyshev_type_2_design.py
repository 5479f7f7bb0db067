"""Chebyshev Type II filter design function."""

from __future__ import annotations

from typing import Literal, Optional

import torch
from torch import Tensor

from ._iir_design import iir_design, unpack


def chebyshev_type_2_design(
    order: int,
    cutoff: Tensor | float | list[float],
    stopband_attenuation_db: float,
    filter_type: Literal[
        "lowpass", "highpass", "bandpass", "bandstop"
    ] = "lowpass",
    output: Literal["sos", "zpk", "ba"] = "sos",
    sampling_frequency: Optional[float] = None,
    analog: bool = False,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor | tuple[Tensor, Tensor, Tensor] | tuple[Tensor, Tensor]:
    """Design an Nth-order Chebyshev Type II filter.

    Chebyshev Type II (inverse Chebyshev) filters have a monotonic passband
    and an equiripple stopband with finite transmission zeros.

    Parameters
    ----------
    order : int
        The order of the filter.
    cutoff : Tensor or float or list[float]
        The critical frequency or frequencies, where the gain first reaches
        -stopband_attenuation_db. See ``butterworth_design``.
    stopband_attenuation_db : float
        Minimum attenuation in the stopband in decibels. Must be positive.
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}, optional
        The type of filter. Default is "lowpass".
    output : {"sos", "zpk", "ba"}, optional
        Type of output. Default is "sos".
    sampling_frequency : float, optional
        The sampling frequency of the digital system.
    analog : bool, default False
        If True, design an analog filter.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    Tensor or tuple of Tensors
        Sections, (zeros, poles, gain) or (numerator, denominator),
        depending on output.

    Examples
    --------
    >>> sos = chebyshev_type_2_design(5, 0.3, stopband_attenuation_db=40.0)
    >>> sos.shape
    torch.Size([3, 6])
    """
    return unpack(
        iir_design(
            order,
            cutoff,
            "chebyshev_type_2",
            filter_type,
            stopband_attenuation_db=stopband_attenuation_db,
            analog=analog,
            output=output,
            sampling_frequency=sampling_frequency,
            dtype=dtype,
            device=device,
        )
    )
