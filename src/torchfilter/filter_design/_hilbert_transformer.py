"""Kaiser-windowed FIR Hilbert transformer."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from torchfilter.window_function import kaiser_window

from ._dtypes import resolve_dtypes
from ._exceptions import InvalidOrderError, InvalidWindowParameterError


def hilbert_transformer(
    order: int,
    beta: float = 8.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Design an FIR Hilbert transformer with a Kaiser window.

    The pair of filters (real, imag) approximates the analytic signal
    filter: applying real gives a delayed copy of the input and applying
    imag gives its Hilbert transform with the same delay.

    Parameters
    ----------
    order : int
        Order of the filter. Must be non-negative. Both filters have
        order + 1 taps.
    beta : float, default 8.0
        Shape parameter of the Kaiser window.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    real : Tensor
        Real part of the transformer, shape (order + 1,).
    imag : Tensor
        Imaginary part of the transformer, shape (order + 1,).

    Raises
    ------
    InvalidOrderError
        If order is negative.
    InvalidWindowParameterError
        If beta is negative, not finite, or so large that I_0(beta)
        overflows.

    Notes
    -----
    With t = k - order / 2:

    - Even order (Type III): real is a unit impulse at the center tap and
      imag[k] = 2 / (pi * t) for odd t, zero otherwise. Half of the taps are
      zero, which makes this form cheap to apply.
    - Odd order (Type IV): real[k] = sinc(t) and
      imag[k] = (1 - cos(pi * t)) / (pi * t). Neither filter is sparse, but
      the amplitude stays flat up to Nyquist.

    Both filters are multiplied by the Kaiser window.

    Examples
    --------
    >>> real, imag = hilbert_transformer(4)
    >>> real
    tensor([0., 0., 1., 0., 0.])
    """
    if isinstance(order, bool) or int(order) != order or order < 0:
        raise InvalidOrderError(
            f"Hilbert transformer order must be a non-negative integer, "
            f"got {order}",
            "fir",
        )
    order = int(order)
    dtype, _, device = resolve_dtypes(dtype, device, "fir")

    beta = float(beta)
    if not math.isfinite(beta) or beta < 0:
        raise InvalidWindowParameterError(
            f"Kaiser beta must be finite and non-negative, got {beta}", "fir"
        )
    normalizer = torch.special.i0(torch.tensor(beta, dtype=torch.float64))
    if not torch.isfinite(normalizer):
        raise InvalidWindowParameterError(
            f"Kaiser beta={beta} is too large, I_0(beta) overflows", "fir"
        )

    n_taps = order + 1
    t = torch.arange(n_taps, dtype=torch.float64, device=device) - order / 2.0

    if order % 2 == 0:
        offsets = t.round().to(torch.int64)
        odd = offsets % 2 != 0
        safe_t = torch.where(odd, t, torch.ones_like(t))
        real = (offsets == 0).to(torch.float64)
        imag = torch.where(odd, 2.0 / (math.pi * safe_t), torch.zeros_like(t))
    else:
        # t is a half-integer, never zero
        real = torch.sinc(t)
        imag = (1.0 - torch.cos(math.pi * t)) / (math.pi * t)

    window = kaiser_window(n_taps, beta, dtype=torch.float64, device=device)

    return (real * window).to(dtype), (imag * window).to(dtype)
