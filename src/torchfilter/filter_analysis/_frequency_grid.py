import math
from typing import Optional, Tuple, Union

import torch
from torch import Tensor


def frequency_grid(
    frequencies: Union[Tensor, int],
    whole: bool,
    sampling_frequency: Optional[float],
    device: torch.device,
) -> Tuple[Tensor, Tensor]:
    """Frequency points and the matching angular frequencies in rad/sample.

    Integer ``frequencies`` gives that many evenly spaced points from 0 up to,
    but excluding, Nyquist (or the sampling frequency when ``whole``).
    """
    if isinstance(frequencies, int):
        if whole:
            max_freq = (
                2.0 if sampling_frequency is None else sampling_frequency
            )
        else:
            max_freq = (
                1.0 if sampling_frequency is None else sampling_frequency / 2.0
            )

        # Matches scipy.signal.freqz: np.linspace(0, pi, worN, endpoint=False)
        freq_points = torch.linspace(
            0, max_freq, frequencies + 1, dtype=torch.float64, device=device
        )[:-1]
    else:
        freq_points = torch.as_tensor(frequencies).to(
            dtype=torch.float64, device=device
        )

    if sampling_frequency is not None:
        w = 2 * math.pi * freq_points / sampling_frequency
    else:
        w = math.pi * freq_points

    return freq_points, w
