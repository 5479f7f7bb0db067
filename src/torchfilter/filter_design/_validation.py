import math
from typing import Union

import torch
from torch import Tensor

from ._exceptions import (
    InvalidCutoffError,
    PoleZeroCountError,
    SOSNormalizationError,
    Stage,
)


def check_frequency(
    value: Union[float, Tensor],
    name: str,
    stage: Stage,
    *,
    allow_zero: bool = False,
) -> float:
    """Return ``value`` as a float, raising if it is not a usable frequency."""
    value = float(value)
    if not math.isfinite(value):
        raise InvalidCutoffError(f"{name} must be finite, got {value}", stage)
    if value < 0 or (value == 0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise InvalidCutoffError(f"{name} must be {bound}, got {value}", stage)
    return value


def check_proper(zeros: Tensor, poles: Tensor, stage: Stage) -> None:
    """Raise unless the filter has roots and no more zeros than poles."""
    if zeros.numel() == 0 and poles.numel() == 0:
        raise PoleZeroCountError(
            "Filter has no poles or zeros to transform", stage
        )
    if zeros.numel() > poles.numel():
        raise PoleZeroCountError(
            f"Improper filter: {zeros.numel()} zeros but only "
            f"{poles.numel()} poles",
            stage,
        )


def check_sos(sos, validate: bool = True) -> Tensor:
    """Return ``sos`` as a tensor after checking its shape and a0 column."""
    sos = torch.as_tensor(sos)
    if sos.ndim != 2 or sos.shape[-1] != 6 or sos.shape[0] < 1:
        raise SOSNormalizationError(
            f"sos must have shape (n_sections, 6) with n_sections >= 1, "
            f"got {tuple(sos.shape)}",
            "conversion",
        )
    if validate:
        a0 = sos[:, 3].to(torch.float64)
        if not torch.allclose(a0, torch.ones_like(a0), atol=1e-10):
            raise SOSNormalizationError(
                f"SOS sections must have a0 = 1, got a0 values: {a0.tolist()}",
                "conversion",
            )
    return sos
