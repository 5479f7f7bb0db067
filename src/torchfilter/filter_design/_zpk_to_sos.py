"""Conversion from zeros-poles-gain to second-order sections."""

from typing import Literal

import torch
from torch import Tensor

from torchfilter.polynomial import polynomial_from_roots

from ._dtypes import promote_zpk
from ._exceptions import (
    InvalidArgumentError,
    PairingError,
    PoleZeroCountError,
)

# Relative tolerance for treating a root as real or two roots as conjugates
_CONJUGATE_TOLERANCE = 100 * torch.finfo(torch.float64).eps


def zpk_to_sos(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
    pairing: Literal["nearest", "keep_odd"] = "nearest",
    *,
    analog: bool = False,
) -> Tensor:
    """
    Convert zeros, poles, and gain to second-order sections.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the filter. Must have as many entries as poles, or at
        most as many when analog=True.
    poles : Tensor
        Poles of the filter. At least one is required.
    gain : Tensor
        System gain.
    pairing : {"nearest", "keep_odd"}, default "nearest"
        Pairing strategy:

        - "nearest": an odd system is padded with a pole and a zero at the
          origin so that every section has two poles.
        - "keep_odd": an odd system keeps one strictly first-order section
          (b2 == a2 == 0).
    analog : bool, default False
        If True, the roots are in the s-plane and missing zeros are zeros
        at infinity: section numerators with fewer than two zeros are
        right-aligned instead of padded with zeros at the origin.

    Returns
    -------
    sos : Tensor
        Second-order sections, shape (ceil(len(poles) / 2), 6).
        Each row is [b0, b1, b2, a0, a1, a2] with a0 = 1.

    Raises
    ------
    InvalidArgumentError
        If pairing is not a known strategy.
    PoleZeroCountError
        If there are no poles, or the numbers of zeros and poles differ
        (more zeros than poles when analog=True).
    PairingError
        If a complex root has no conjugate partner.

    Notes
    -----
    Sections are filled from last to first. Each step takes the remaining
    pole closest to the unit circle, pairs it with its conjugate (or with
    the remaining real pole closest to the unit circle) and with the zeros
    nearest to it. Poles close to the unit circle therefore end up late in
    the cascade. Two cases are handled specially:

    - A real pole with no real partner left forms a first-order section
      with the nearest real zero.
    - When one real pole and one real zero remain, a complex pole must
      take a complex zero pair so the real pole and zero can meet.

    The whole gain is applied to the numerator of the first section.

    Examples
    --------
    >>> zeros = torch.tensor([-1.0, -1.0, -1.0], dtype=torch.complex128)
    >>> poles = torch.tensor(
    ...     [0.5, 0.3 + 0.4j, 0.3 - 0.4j], dtype=torch.complex128
    ... )
    >>> zpk_to_sos(zeros, poles, torch.tensor(0.1), pairing="keep_odd")[:, 2]
    tensor([0., 1.], dtype=torch.float64)
    """
    if pairing not in ("nearest", "keep_odd"):
        raise InvalidArgumentError(
            f"pairing must be 'nearest' or 'keep_odd', got '{pairing}'",
            "conversion",
        )

    zeros, poles, gain, dtype, _ = promote_zpk(zeros, poles, gain)

    if poles.numel() == 0:
        raise PoleZeroCountError(
            "At least one pole is required to build sections", "conversion"
        )
    if zeros.numel() > poles.numel() or (
        zeros.numel() < poles.numel() and not analog
    ):
        raise PoleZeroCountError(
            f"Sections need as many zeros as poles, got {zeros.numel()} "
            f"zeros and {poles.numel()} poles",
            "conversion",
        )

    n_sections = (poles.numel() + 1) // 2

    if poles.numel() % 2 == 1 and pairing == "nearest":
        origin = torch.zeros(1, dtype=poles.dtype, device=poles.device)
        poles = torch.cat([poles, origin])
        zeros = torch.cat([zeros, origin])

    zeros = _split_conjugates(zeros, "zero")
    poles = _split_conjugates(poles, "pole")
    origin = torch.zeros((), dtype=poles.dtype, device=poles.device)

    sections = [None] * n_sections
    for index in range(n_sections - 1, -1, -1):
        p1_index = _closest_to_unit_circle(poles)
        p1 = poles[p1_index]
        poles = _delete(poles, p1_index)

        if _is_real(p1) and not _is_real(poles).any():
            # Last real pole: first-order section
            if analog and not _is_real(zeros).any():
                section_zeros = origin.reshape(1)
            else:
                z1_index = _nearest(zeros, p1, "real")
                z1 = zeros[z1_index]
                zeros = _delete(zeros, z1_index)
                section_zeros = torch.stack([z1, origin])
            sections[index] = _section(
                section_zeros, torch.stack([p1, origin])
            )
        elif (
            poles.numel() + 1 == zeros.numel()
            and not _is_real(p1)
            and int(_is_real(poles).sum()) == 1
            and int(_is_real(zeros).sum()) == 1
        ):
            # Leave the single real zero for the single real pole
            z1_index = _nearest(zeros, p1, "complex")
            z1 = zeros[z1_index]
            zeros = _delete(zeros, z1_index)
            sections[index] = _section(
                _with_conjugate(z1), _with_conjugate(p1)
            )
        else:
            if _is_real(p1):
                real_indices = torch.nonzero(_is_real(poles)).flatten()
                p2_index = int(
                    real_indices[_closest_to_unit_circle(poles[real_indices])]
                )
                p2 = poles[p2_index]
                poles = _delete(poles, p2_index)
                section_poles = torch.stack([p1, p2])
            else:
                section_poles = _with_conjugate(p1)

            if zeros.numel() == 0:
                section_zeros = zeros
            else:
                z1_index = _nearest(zeros, p1, "any")
                z1 = zeros[z1_index]
                zeros = _delete(zeros, z1_index)
                if not _is_real(z1):
                    section_zeros = _with_conjugate(z1)
                elif _is_real(zeros).any():
                    z2_index = _nearest(zeros, p1, "real")
                    z2 = zeros[z2_index]
                    zeros = _delete(zeros, z2_index)
                    section_zeros = torch.stack([z1, z2])
                else:
                    section_zeros = z1.reshape(1)
            sections[index] = _section(section_zeros, section_poles)

    sos = torch.stack(sections)

    # Whole gain on the first numerator, without inplace ops for autograd
    first = torch.cat([sos[0, :3] * gain, sos[0, 3:]])
    sos = torch.cat([first.unsqueeze(0), sos[1:]])

    return sos.to(dtype)


def _split_conjugates(roots: Tensor, kind: str) -> Tensor:
    """Collapse conjugate pairs to their positive-imaginary member.

    Returns the averaged complex representatives followed by the real
    roots, whose imaginary parts are set to exactly zero.
    """
    if roots.numel() == 0:
        return roots

    # Scale floored at 1 so tiny real roots keep an absolute tolerance
    scale = roots.abs().clamp(min=1.0)
    is_real = roots.imag.abs() <= _CONJUGATE_TOLERANCE * scale
    real = roots[is_real].real.to(roots.dtype)
    positive = roots[~is_real & (roots.imag > 0)]
    negative = roots[~is_real & (roots.imag < 0)].conj_physical()

    if positive.numel() != negative.numel():
        raise PairingError(
            f"Complex {kind} without a matching conjugate", "conversion"
        )

    representatives = []
    for root in positive:
        distances = (negative - root).abs()
        match = int(torch.argmin(distances))
        tolerance = _CONJUGATE_TOLERANCE * max(float(root.abs()), 1.0)
        if distances[match] > tolerance:
            raise PairingError(
                f"Complex {kind} {complex(root)} has no matching conjugate",
                "conversion",
            )
        representatives.append((root + negative[match]) / 2)
        negative = _delete(negative, match)

    if not representatives:
        return real
    return torch.cat([torch.stack(representatives), real])


def _is_real(roots: Tensor) -> Tensor:
    return roots.imag == 0


def _closest_to_unit_circle(roots: Tensor) -> int:
    return int(torch.argmin((1 - roots.abs()).abs()))


def _nearest(
    roots: Tensor, target: Tensor, kind: Literal["any", "real", "complex"]
) -> int:
    """Index of the root of the given kind nearest to ``target``."""
    order = torch.argsort((roots - target).abs(), stable=True)
    if kind == "real":
        order = order[_is_real(roots[order])]
    elif kind == "complex":
        order = order[~_is_real(roots[order])]
    if order.numel() == 0:
        raise PairingError(
            f"No {kind} zero left to pair with pole {complex(target)}",
            "conversion",
        )
    return int(order[0])


def _delete(roots: Tensor, index: int) -> Tensor:
    return torch.cat([roots[:index], roots[index + 1 :]])


def _with_conjugate(root: Tensor) -> Tensor:
    return torch.stack([root, root.conj_physical()])


def _section(zeros: Tensor, poles: Tensor) -> Tensor:
    """Unit-gain section row, coefficients right-aligned in each half."""
    b = polynomial_from_roots(zeros).real
    a = polynomial_from_roots(poles).real
    return torch.cat(
        [
            torch.nn.functional.pad(b, (3 - b.numel(), 0)),
            torch.nn.functional.pad(a, (3 - a.numel(), 0)),
        ]
    )
