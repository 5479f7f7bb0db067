import math
from typing import Optional

import torch
from torch import Tensor


def hamming_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Hamming window function (symmetric).

    Mathematical Definition
    -----------------------
    The symmetric Hamming window is defined as:

        w[k] = 0.54 - 0.46 * cos(2 * pi * k / (n - 1))

    for k = 0, 1, ..., n-1.

    Properties
    ----------
    - Side lobe level: -43 dB
    - Non-zero endpoints (0.08)
    - Default window for windowed-sinc FIR design

    Parameters
    ----------
    n : int
        Number of points in the output window. Must be non-negative.
    dtype : torch.dtype, optional
        The desired data type of the returned tensor. Defaults to
        torch.get_default_dtype().
    device : torch.device, optional
        The desired device of the returned tensor.

    Returns
    -------
    Tensor
        A 1-D tensor of size (n,) containing the window values.
    """
    if n < 0:
        raise ValueError(f"hamming_window: n must be non-negative, got {n}")

    if dtype is None:
        dtype = torch.get_default_dtype()

    if n <= 1:
        return torch.ones(n, dtype=dtype, device=device)

    k = torch.arange(n, dtype=torch.float64, device=device)
    w = 0.54 - 0.46 * torch.cos(2 * math.pi * k / (n - 1))

    return w.to(dtype)
