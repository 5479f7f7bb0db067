"""Window-based FIR filter design."""

from __future__ import annotations

import math
from typing import Literal, Optional

import torch
from torch import Tensor

from torchfilter.window_function import (
    bartlett_window,
    hamming_window,
    hann_window,
    optimal_blackman_window,
)

from ._dtypes import resolve_dtypes
from ._exceptions import (
    FrequencyOrderError,
    InvalidArgumentError,
    InvalidCutoffError,
    InvalidNumTapsError,
    InvalidOrderError,
    InvalidSamplingFrequencyError,
    InvalidWindowParameterError,
)

_WINDOWS = {
    "hamming": hamming_window,
    "hann": hann_window,
    "bartlett": bartlett_window,
    "optimal_blackman": optimal_blackman_window,
}


def fir_window_design(
    order: int,
    cutoff: float | list[float] | Tensor,
    filter_type: Literal[
        "lowpass", "highpass", "bandpass", "bandstop"
    ] = "lowpass",
    window: Literal[
        "hamming", "hann", "bartlett", "optimal_blackman"
    ] = "hamming",
    sampling_frequency: Optional[float] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Design a linear-phase FIR filter using the window method.

    Parameters
    ----------
    order : int
        Order of the filter. Must be at least 4. The filter has order + 1
        taps. Must be even for highpass and bandstop filters.
    cutoff : float or list[float] or Tensor
        Cutoff frequency(ies) of the filter. For lowpass and highpass, this
        is a scalar. For bandpass and bandstop, this is a length-2 sequence
        [low, high]. Frequencies are expressed as a fraction of the Nyquist
        frequency, strictly between 0 and 1, unless sampling_frequency is
        specified.
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}, optional
        Type of filter. Default is "lowpass".
    window : {"hamming", "hann", "bartlett", "optimal_blackman"}, optional
        Window applied to the ideal impulse response. Default is "hamming".
    sampling_frequency : float, optional
        The sampling frequency of the system. If specified, cutoff is in
        the same units (e.g., Hz).
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    Tensor
        Filter taps, shape (order + 1,). The taps are symmetric.

    Raises
    ------
    InvalidOrderError
        If order is less than 4.
    InvalidNumTapsError
        If order is odd for a highpass or bandstop filter.
    InvalidCutoffError
        If a cutoff is outside (0, 1) or has the wrong number of edges.
    FrequencyOrderError
        If the band edges are not increasing.
    InvalidWindowParameterError
        If the window name is unknown.

    Notes
    -----
    The window method designs filters by:

    1. Computing the ideal impulse response, centered at order / 2. The
       lowpass kernel is fc * sinc(fc * t). Highpass is the unit impulse
       minus the lowpass, bandpass is the difference of two lowpass
       kernels and bandstop is the unit impulse minus the bandpass.
    2. Multiplying by the window to reduce spectral leakage.
    3. Scaling for unity gain at DC (lowpass, bandstop), at Nyquist
       (highpass) or at the center of the passband (bandpass).

    An odd order gives a Type II filter, whose response is forced to zero
    at Nyquist, so highpass and bandstop filters need an even order.

    Examples
    --------
    >>> h = fir_window_design(50, 0.3)  # Lowpass with cutoff 0.3 * Nyquist
    >>> h.shape
    torch.Size([51])
    """
    if isinstance(order, bool) or int(order) != order or order < 4:
        raise InvalidOrderError(
            f"FIR order must be an integer of at least 4, got {order}", "fir"
        )
    order = int(order)
    if filter_type not in ("lowpass", "highpass", "bandpass", "bandstop"):
        raise InvalidArgumentError(
            f"filter_type must be 'lowpass', 'highpass', 'bandpass' or "
            f"'bandstop', got '{filter_type}'",
            "fir",
        )
    if window not in _WINDOWS:
        raise InvalidWindowParameterError(
            f"Unknown window '{window}', expected one of {sorted(_WINDOWS)}",
            "fir",
        )
    if filter_type in ("highpass", "bandstop") and order % 2 == 1:
        raise InvalidNumTapsError(
            f"A {filter_type} filter needs an even order (odd number of "
            f"taps), got order {order}",
            "fir",
        )

    dtype, _, device = resolve_dtypes(dtype, device, "fir")
    edges = _cutoff_edges(cutoff, filter_type, sampling_frequency)

    n_taps = order + 1
    t = torch.arange(n_taps, dtype=torch.float64, device=device) - order / 2.0
    impulse = (t == 0).to(torch.float64)

    if filter_type == "lowpass":
        h = _lowpass_kernel(t, edges[0])
        scale_frequency = 0.0
    elif filter_type == "highpass":
        h = impulse - _lowpass_kernel(t, edges[0])
        scale_frequency = 1.0
    elif filter_type == "bandpass":
        h = _lowpass_kernel(t, edges[1]) - _lowpass_kernel(t, edges[0])
        scale_frequency = (edges[0] + edges[1]) / 2.0
    else:
        h = impulse - (
            _lowpass_kernel(t, edges[1]) - _lowpass_kernel(t, edges[0])
        )
        scale_frequency = 0.0

    h = h * _WINDOWS[window](n_taps, dtype=torch.float64, device=device)

    # Response of a symmetric filter at w = pi * f, relative to its center
    gain = torch.sum(h * torch.cos(math.pi * scale_frequency * t))
    h = h / gain

    return h.to(dtype)


def _lowpass_kernel(t: Tensor, cutoff: float) -> Tensor:
    """Ideal lowpass impulse response fc * sinc(fc * t)."""
    return cutoff * torch.sinc(cutoff * t)


def _cutoff_edges(
    cutoff: float | list[float] | Tensor,
    filter_type: str,
    sampling_frequency: Optional[float],
) -> list[float]:
    edges = torch.as_tensor(cutoff, dtype=torch.float64).reshape(-1).tolist()

    n_edges = 2 if filter_type in ("bandpass", "bandstop") else 1
    if len(edges) != n_edges:
        raise InvalidCutoffError(
            f"A {filter_type} filter needs {n_edges} cutoff "
            f"frequenc{'ies' if n_edges == 2 else 'y'}, got {len(edges)}",
            "fir",
        )

    if sampling_frequency is not None:
        fs = float(sampling_frequency)
        if not math.isfinite(fs) or fs <= 0:
            raise InvalidSamplingFrequencyError(
                f"sampling_frequency must be positive and finite, got {fs}",
                "fir",
            )
        edges = [2.0 * edge / fs for edge in edges]

    if not all(0 < edge < 1 for edge in edges):
        raise InvalidCutoffError(
            f"Cutoff frequencies must be in (0, 1), got {edges}", "fir"
        )
    if n_edges == 2 and edges[0] >= edges[1]:
        raise FrequencyOrderError(
            f"Cutoff frequencies must be strictly increasing, got {edges}",
            "fir",
        )

    return edges
