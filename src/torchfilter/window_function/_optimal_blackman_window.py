import math
from typing import Optional

import torch
from torch import Tensor


def optimal_blackman_window(
    n: int,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """
    Optimal Blackman window function (symmetric).

    A three-term Blackman window whose shape parameter is chosen from the
    window length so that the endpoints and their neighbours fall off
    smoothly.

    Mathematical Definition
    -----------------------
    With

        alpha = -0.5 / (1 + cos(2 * pi / (n - 1)))

    the window is

        w[k] = (alpha + 1) / 2
               - 0.5 * cos(2 * pi * k / (n - 1))
               - (alpha / 2) * cos(4 * pi * k / (n - 1))

    for k = 0, 1, ..., n-1. The classic Blackman window is the special
    case alpha = -0.16.

    Properties
    ----------
    - alpha tends to -0.25 for long windows
    - Lower side lobes than Hamming at the cost of a wider main lobe

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
        raise ValueError(
            f"optimal_blackman_window: n must be non-negative, got {n}"
        )

    if dtype is None:
        dtype = torch.get_default_dtype()

    if n <= 1:
        return torch.ones(n, dtype=dtype, device=device)

    if n == 3:
        # alpha diverges but the alpha terms cancel at every sample
        return torch.tensor([0.0, 1.0, 0.0], dtype=dtype, device=device)

    alpha = -0.5 / (1 + math.cos(2 * math.pi / (n - 1)))

    k = torch.arange(n, dtype=torch.float64, device=device)
    w = (
        (alpha + 1) / 2
        - 0.5 * torch.cos(2 * math.pi * k / (n - 1))
        - (alpha / 2) * torch.cos(4 * math.pi * k / (n - 1))
    )

    return w.to(dtype)
