"""Conversion from transfer function coefficients to second-order sections."""

from typing import Literal

import torch
from torch import Tensor

from ._ba_to_zpk import ba_to_zpk
from ._zpk_to_sos import zpk_to_sos


def ba_to_sos(
    numerator: Tensor,
    denominator: Tensor,
    pairing: Literal["nearest", "keep_odd"] = "nearest",
) -> Tensor:
    """Convert transfer function coefficients to second-order sections.

    Parameters
    ----------
    numerator : Tensor
        Numerator polynomial coefficients in descending order.
    denominator : Tensor
        Denominator polynomial coefficients in descending order.
    pairing : {"nearest", "keep_odd"}, default "nearest"
        Pairing strategy for poles and zeros, see ``zpk_to_sos``.

    Returns
    -------
    sos : Tensor
        Second-order sections, shape (n_sections, 6).
        Each row is [b0, b1, b2, a0, a1, a2].

    Notes
    -----
    This function converts via the ZPK representation:
    BA -> ZPK -> SOS

    This is done because direct BA to SOS conversion would require
    root finding anyway, and the ZPK intermediate form allows for
    optimal pole-zero pairing. The shorter of the zero and pole lists
    is padded with roots at the origin.

    Examples
    --------
    >>> b = torch.tensor([0.0675, 0.2025, 0.2025, 0.0675])
    >>> a = torch.tensor([1.0, -0.8178, 0.4536, -0.0697])
    >>> ba_to_sos(b, a).shape
    torch.Size([2, 6])
    """
    zeros, poles, gain = ba_to_zpk(numerator, denominator)

    n_roots = max(zeros.numel(), poles.numel())
    zeros = _pad_with_origin(zeros, n_roots)
    poles = _pad_with_origin(poles, n_roots)

    return zpk_to_sos(zeros, poles, gain, pairing=pairing)


def _pad_with_origin(roots: Tensor, length: int) -> Tensor:
    padding = torch.zeros(
        length - roots.numel(), dtype=roots.dtype, device=roots.device
    )
    return torch.cat([roots, padding])
