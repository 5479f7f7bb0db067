"""IIR filter design from analog prototypes."""

from __future__ import annotations

import math
import warnings
from typing import Literal, Optional

import torch
from torch import Tensor

from ._bessel_prototype import bessel_prototype
from ._bilinear_transform_zpk import bilinear_transform_zpk
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._dtypes import resolve_dtypes
from ._exceptions import (
    FilterDesignWarning,
    FrequencyOrderError,
    InvalidArgumentError,
    InvalidCutoffError,
    InvalidOrderError,
    InvalidRippleError,
    InvalidSamplingFrequencyError,
)
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._representations import BA, SOS, ZPK
from ._zpk_to_ba import zpk_to_ba
from ._zpk_to_sos import zpk_to_sos

Prototype = Literal[
    "butterworth", "chebyshev_type_1", "chebyshev_type_2", "bessel"
]
FilterType = Literal["lowpass", "highpass", "bandpass", "bandstop"]
Output = Literal["sos", "zpk", "ba"]


def iir_design(
    order: int,
    cutoff: Tensor | float | list[float],
    prototype: Prototype = "butterworth",
    filter_type: FilterType = "lowpass",
    passband_ripple_db: Optional[float] = None,
    stopband_attenuation_db: Optional[float] = None,
    analog: bool = False,
    output: Output = "sos",
    pairing: Literal["nearest", "keep_odd"] = "nearest",
    sampling_frequency: Optional[float] = None,
    *,
    bessel_normalization: Literal["delay", "phase", "magnitude"] = "delay",
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> ZPK | BA | SOS:
    """Design an Nth-order analog or digital IIR filter.

    The filter is built from a normalized analog lowpass prototype, moved to
    the requested band with an analog frequency transformation and, for
    digital filters, mapped to the z-plane with the bilinear transform.

    Parameters
    ----------
    order : int
        Order of the prototype. Band designs have twice as many poles.
    cutoff : Tensor or float or list[float]
        The critical frequency or frequencies. For lowpass and highpass this
        is a scalar; for bandpass and bandstop a length-2 sequence
        [low, high] with low < high. Digital frequencies are fractions of
        the Nyquist frequency in (0, 1), unless sampling_frequency is given,
        in which case they are in the same units as sampling_frequency.
        Analog frequencies are in rad/s and must be positive.
    prototype : {"butterworth", "chebyshev_type_1", "chebyshev_type_2", "bessel"}
        Analog prototype family. Default is "butterworth".
    filter_type : {"lowpass", "highpass", "bandpass", "bandstop"}, optional
        The type of filter. Default is "lowpass".
    passband_ripple_db : float, optional
        Passband ripple in dB. Required for "chebyshev_type_1".
    stopband_attenuation_db : float, optional
        Minimum stopband attenuation in dB. Required for
        "chebyshev_type_2".
    analog : bool, default False
        If True, return an analog filter.
    output : {"sos", "zpk", "ba"}, optional
        Representation of the result. Default is "sos".
    pairing : {"nearest", "keep_odd"}, default "nearest"
        Pole-zero pairing used for "sos" output, see ``zpk_to_sos``.
    sampling_frequency : float, optional
        Sampling frequency of a digital filter.
    bessel_normalization : {"delay", "phase", "magnitude"}, default "delay"
        Frequency normalization of the Bessel prototype.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    ZPK or BA or SOS
        The designed filter, as a tensorclass container.

    Raises
    ------
    InvalidOrderError
        If order is less than 1.
    InvalidCutoffError
        If a cutoff is out of range or has the wrong number of edges.
    FrequencyOrderError
        If the band edges are not increasing.
    InvalidRippleError
        If a Chebyshev ripple or attenuation is missing or not positive.
    InvalidSamplingFrequencyError
        If sampling_frequency is not positive, or given for an analog
        design.
    InvalidArgumentError
        If prototype, filter_type, output or pairing is unknown.

    Warns
    -----
    FilterDesignWarning
        If a digital design has a pole on or outside the unit circle.

    Notes
    -----
    Digital designs pre-warp the critical frequencies with
    4 * tan(pi * Wn / 2) and use the bilinear transform at fs = 2, so the
    cutoff of the digital filter lands exactly on Wn.

    Analog "sos" output keeps the zeros at infinity: section numerators
    with fewer than two zeros are right-aligned.

    Examples
    --------
    >>> sos = iir_design(4, 0.25)
    >>> sos.sections.shape
    torch.Size([2, 6])
    >>> zpk = iir_design(3, [0.2, 0.4], "chebyshev_type_1", "bandpass",
    ...                  passband_ripple_db=1.0, output="zpk")
    >>> zpk.poles.shape
    torch.Size([6])
    """
    dtype, complex_dtype, device = resolve_dtypes(dtype, device, "prototype")

    if isinstance(order, bool) or int(order) != order or order < 1:
        raise InvalidOrderError(
            f"Filter order must be a positive integer, got {order}",
            "prototype",
        )
    order = int(order)
    if filter_type not in ("lowpass", "highpass", "bandpass", "bandstop"):
        raise InvalidArgumentError(
            f"filter_type must be 'lowpass', 'highpass', 'bandpass' or "
            f"'bandstop', got '{filter_type}'",
            "band_transform",
        )
    if output not in ("sos", "zpk", "ba"):
        raise InvalidArgumentError(
            f"output must be 'sos', 'zpk' or 'ba', got '{output}'",
            "conversion",
        )
    if pairing not in ("nearest", "keep_odd"):
        raise InvalidArgumentError(
            f"pairing must be 'nearest' or 'keep_odd', got '{pairing}'",
            "conversion",
        )

    edges = _critical_frequencies(
        cutoff, filter_type, analog, sampling_frequency
    )

    zeros, poles, gain = _prototype_zpk(
        order,
        prototype,
        passband_ripple_db,
        stopband_attenuation_db,
        bessel_normalization,
        device,
    )

    if analog:
        warped = edges
    else:
        # Pre-warp for the bilinear transform at fs = 2
        warped = [4.0 * math.tan(math.pi * edge / 2.0) for edge in edges]

    if filter_type == "lowpass":
        zeros, poles, gain = lowpass_to_lowpass_zpk(
            zeros, poles, gain, cutoff_frequency=warped[0]
        )
    elif filter_type == "highpass":
        zeros, poles, gain = lowpass_to_highpass_zpk(
            zeros, poles, gain, cutoff_frequency=warped[0]
        )
    elif filter_type == "bandpass":
        zeros, poles, gain = lowpass_to_bandpass_zpk(
            zeros,
            poles,
            gain,
            center_frequency=math.sqrt(warped[0] * warped[1]),
            bandwidth=warped[1] - warped[0],
        )
    else:
        zeros, poles, gain = lowpass_to_bandstop_zpk(
            zeros,
            poles,
            gain,
            center_frequency=math.sqrt(warped[0] * warped[1]),
            bandwidth=warped[1] - warped[0],
        )

    if not analog:
        zeros, poles, gain = bilinear_transform_zpk(
            zeros, poles, gain, sampling_frequency=2.0
        )
        if torch.any(poles.abs() >= 1.0):
            warnings.warn(
                f"Digital {prototype} design of order {order} has a pole on "
                f"or outside the unit circle (max |p| = "
                f"{poles.abs().max().item():.6f}); the filter is unstable",
                FilterDesignWarning,
                stacklevel=2,
            )

    if output == "zpk":
        return ZPK(
            zeros=zeros.to(dtype=complex_dtype, device=device),
            poles=poles.to(dtype=complex_dtype, device=device),
            gain=gain.to(dtype=dtype, device=device),
        )
    if output == "ba":
        numerator, denominator = zpk_to_ba(zeros, poles, gain)
        return BA(
            numerator=numerator.to(dtype=dtype, device=device),
            denominator=denominator.to(dtype=dtype, device=device),
        )
    sections = zpk_to_sos(zeros, poles, gain, pairing, analog=analog)
    return SOS(sections=sections.to(dtype=dtype, device=device))


def _critical_frequencies(
    cutoff: Tensor | float | list[float],
    filter_type: str,
    analog: bool,
    sampling_frequency: Optional[float],
) -> list[float]:
    """Validate the cutoff and return it as a list of normalized floats."""
    edges = torch.as_tensor(cutoff, dtype=torch.float64).reshape(-1).tolist()

    n_edges = 2 if filter_type in ("bandpass", "bandstop") else 1
    if len(edges) != n_edges:
        raise InvalidCutoffError(
            f"A {filter_type} design needs {n_edges} critical "
            f"frequenc{'ies' if n_edges == 2 else 'y'}, got {len(edges)}",
            "band_transform",
        )

    if sampling_frequency is not None:
        if analog:
            raise InvalidSamplingFrequencyError(
                "sampling_frequency cannot be given for an analog design",
                "bilinear_transform",
            )
        fs = float(sampling_frequency)
        if not math.isfinite(fs) or fs <= 0:
            raise InvalidSamplingFrequencyError(
                f"sampling_frequency must be positive and finite, got {fs}",
                "bilinear_transform",
            )
        edges = [2.0 * edge / fs for edge in edges]

    for edge in edges:
        if not math.isfinite(edge) or edge <= 0:
            raise InvalidCutoffError(
                f"Critical frequencies must be positive and finite, got "
                f"{edges}",
                "band_transform",
            )
        if not analog and edge >= 1:
            raise InvalidCutoffError(
                f"Digital critical frequencies must be between 0 and 1 "
                f"(Nyquist), got {edges}",
                "band_transform",
            )

    if n_edges == 2 and edges[0] >= edges[1]:
        raise FrequencyOrderError(
            f"Band edges must satisfy low < high, got {edges}",
            "band_transform",
        )

    return edges


def _prototype_zpk(
    order: int,
    prototype: str,
    passband_ripple_db: Optional[float],
    stopband_attenuation_db: Optional[float],
    bessel_normalization: str,
    device: torch.device,
) -> tuple[Tensor, Tensor, Tensor]:
    """Analog lowpass prototype in double precision."""
    if prototype == "butterworth":
        return butterworth_prototype(
            order, dtype=torch.float64, device=device
        )
    elif prototype == "chebyshev_type_1":
        if passband_ripple_db is None:
            raise InvalidRippleError(
                "passband_ripple_db is required for a Chebyshev type I design",
                "prototype",
            )
        return chebyshev_type_1_prototype(
            order, passband_ripple_db, dtype=torch.float64, device=device
        )
    elif prototype == "chebyshev_type_2":
        if stopband_attenuation_db is None:
            raise InvalidRippleError(
                "stopband_attenuation_db is required for a Chebyshev type II "
                "design",
                "prototype",
            )
        return chebyshev_type_2_prototype(
            order, stopband_attenuation_db, dtype=torch.float64, device=device
        )
    elif prototype == "bessel":
        return bessel_prototype(
            order, bessel_normalization, dtype=torch.float64, device=device
        )
    raise InvalidArgumentError(
        f"prototype must be 'butterworth', 'chebyshev_type_1', "
        f"'chebyshev_type_2' or 'bessel', got '{prototype}'",
        "prototype",
    )


def unpack(design: ZPK | BA | SOS) -> Tensor | tuple[Tensor, ...]:
    """Plain tensors of a designed filter: sections, (b, a) or (z, p, k)."""
    if isinstance(design, SOS):
        return design.sections
    if isinstance(design, BA):
        return design.numerator, design.denominator
    return design.zeros, design.poles, design.gain
