from typing import Optional

import torch
from torch import Tensor


def bartlett_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Bartlett window function (symmetric).

    Computes a symmetric Bartlett (triangular) window of length n.

    Mathematical Definition
    -----------------------
    The symmetric Bartlett window is defined as:

        w[k] = 1 - |k - (n-1)/2| / ((n-1)/2),  for k = 0, 1, ..., n-1

    Properties
    ----------
    - Side lobe level: -26.5 dB
    - Zero at endpoints
    - Linear slopes

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
        raise ValueError(f"bartlett_window: n must be non-negative, got {n}")

    if dtype is None:
        dtype = torch.get_default_dtype()

    if n <= 1:
        return torch.ones(n, dtype=dtype, device=device)

    k = torch.arange(n, dtype=torch.float64, device=device)
    w = 1 - torch.abs(2 * k / (n - 1) - 1)

    return w.to(dtype)
