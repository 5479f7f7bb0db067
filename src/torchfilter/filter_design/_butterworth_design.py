"""Butterworth filter design function."""

from __future__ import annotations

from typing import Literal, Optional

import torch
from torch import Tensor

from ._iir_design import iir_design, unpack


def butterworth_design(
    order: int,
    cutoff: Tensor | float | list[float],
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
    """Design a digital or analog Butterworth filter.

    The magnitude response is maximally flat in the passband, falls
    monotonically, and sits at -3 dB at each cut-off.

    Parameters
    ----------
    order : int
        Order of the lowpass prototype. Band designs have twice as many
        poles.
    cutoff : Tensor or float or list[float]
        Cut-off for lowpass/highpass, or ``[low, high]`` for
        bandpass/bandstop. Digital cut-offs are fractions of Nyquist in
        (0, 1), or Hz when ``sampling_frequency`` is given. Analog cut-offs
        are in rad/s.
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}
        Band shape.
    output : {"sos", "zpk", "ba"}
        Form of the result.
    sampling_frequency : float, optional
        Sampling rate the cut-offs are expressed against.
    analog : bool, default False
        Return an s-plane design instead of a z-plane one.
    dtype, device
        Output dtype and device.

    Returns
    -------
    Tensor or tuple of Tensor
        ``sos`` of shape (n_sections, 6), ``(b, a)`` or ``(z, p, k)``
        depending on ``output``. See ``iir_design`` for the container form.

    Examples
    --------
    >>> sos = butterworth_design(4, 0.25)
    >>> sos.shape
    torch.Size([2, 6])
    """
    return unpack(
        iir_design(
            order,
            cutoff,
            "butterworth",
            filter_type,
            analog=analog,
            output=output,
            sampling_frequency=sampling_frequency,
            dtype=dtype,
            device=device,
        )
    )
