from typing import Optional, Union

import torch
from torch import Tensor


def kaiser_window(
    n: int,
    beta: Union[float, Tensor],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Kaiser window function (symmetric).

    Computes a symmetric Kaiser window of length n. The Kaiser window is
    an approximation to the DPSS (discrete prolate spheroidal sequence)
    window, which provides optimal energy concentration.

    Mathematical Definition
    -----------------------
    The symmetric Kaiser window is defined as:

        w[k] = I_0(beta * sqrt(1 - ((k - (n-1)/2) / ((n-1)/2))^2)) / I_0(beta)

    for k = 0, 1, ..., n-1, where I_0 is the modified Bessel function
    of the first kind, order 0.

    Properties
    ----------
    - beta controls the trade-off between main lobe width and sidelobe level
    - beta = 0: rectangular window
    - beta = 5: similar to Hamming window
    - beta = 8.6: similar to Blackman window

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be non-negative.
    beta : float or Tensor
        Shape parameter. Must be non-negative and small enough for
        I_0(beta) to be representable in double precision (about 713).
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Defaults to
        torch.get_default_dtype().
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.

    Raises
    ------
    ValueError
        If n is negative, beta is negative, or I_0(beta) overflows.
    """
    if n < 0:
        raise ValueError(f"kaiser_window: n must be non-negative, got {n}")

    if dtype is None:
        dtype = torch.get_default_dtype()

    beta = torch.as_tensor(beta, dtype=torch.float64, device=device)
    if not torch.isfinite(beta) or beta < 0:
        raise ValueError(
            f"kaiser_window: beta must be finite and non-negative, got {beta.item()}"
        )

    denominator = torch.special.i0(beta)
    if not torch.isfinite(denominator):
        raise ValueError(
            f"kaiser_window: beta={beta.item()} is too large, I_0(beta) overflows"
        )

    if n <= 1:
        return torch.ones(n, dtype=dtype, device=device)

    alpha = (n - 1) / 2.0
    k = torch.arange(n, dtype=torch.float64, device=device)
    ratio = (k - alpha) / alpha
    arg = beta * torch.sqrt(torch.clamp(1 - ratio * ratio, min=0.0))
    w = torch.special.i0(arg) / denominator

    return w.to(dtype)
