"""Chebyshev Type I filter design function."""

from __future__ import annotations

from typing import Literal, Optional

import torch
from torch import Tensor

from ._iir_design import iir_design, unpack


def chebyshev_type_1_design(
    order: int,
    cutoff: Tensor | float | list[float],
    passband_ripple_db: float,
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
    """Design a digital or analog Chebyshev Type I filter.

    The passband ripples between 0 and -passband_ripple_db; the stopband
    falls monotonically. ``cutoff`` marks where the gain last leaves the
    ripple band. All other arguments behave as in ``butterworth_design``.

    Parameters
    ----------
    passband_ripple_db : float
        Peak-to-peak passband ripple in dB. Must be positive.

    Examples
    --------
    >>> sos = chebyshev_type_1_design(4, 0.3, passband_ripple_db=1.0)
    >>> sos.shape
    torch.Size([2, 6])
    """
    return unpack(
        iir_design(
            order,
            cutoff,
            "chebyshev_type_1",
            filter_type,
            passband_ripple_db=passband_ripple_db,
            analog=analog,
            output=output,
            sampling_frequency=sampling_frequency,
            dtype=dtype,
            device=device,
        )
    )
