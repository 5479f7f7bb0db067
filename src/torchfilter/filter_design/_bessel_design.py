"""Bessel/Thomson filter design function."""

from __future__ import annotations

from typing import Literal, Optional

import torch
from torch import Tensor

from ._iir_design import iir_design, unpack


def bessel_design(
    order: int,
    cutoff: Tensor | float | list[float],
    filter_type: Literal[
        "lowpass", "highpass", "bandpass", "bandstop"
    ] = "lowpass",
    output: Literal["sos", "zpk", "ba"] = "sos",
    sampling_frequency: Optional[float] = None,
    analog: bool = False,
    normalization: Literal["delay", "phase", "magnitude"] = "delay",
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor | tuple[Tensor, Tensor, Tensor] | tuple[Tensor, Tensor]:
    """Design an Nth-order Bessel/Thomson filter.

    Parameters
    ----------
    order : int
        The order of the filter.
    cutoff : Tensor or float or list[float]
        The critical frequency or frequencies. Its meaning depends on
        normalization. See ``butterworth_design`` for units.
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}, optional
        The type of filter. Default is "lowpass".
    output : {"sos", "zpk", "ba"}, optional
        Type of output. Default is "sos".
    sampling_frequency : float, optional
        The sampling frequency of the digital system.
    analog : bool, default False
        If True, design an analog filter.
    normalization : {"delay", "phase", "magnitude"}, default "delay"
        Prototype normalization, see ``bessel_prototype``. With "delay"
        an analog lowpass has a group delay of 1 / cutoff seconds at DC.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    Tensor or tuple of Tensors
        Sections, (zeros, poles, gain) or (numerator, denominator),
        depending on output.
    """
    return unpack(
        iir_design(
            order,
            cutoff,
            "bessel",
            filter_type,
            analog=analog,
            output=output,
            sampling_frequency=sampling_frequency,
            bessel_normalization=normalization,
            dtype=dtype,
            device=device,
        )
    )
