"""Bessel/Thomson analog lowpass filter prototype."""

import math
import warnings
from typing import Literal, Optional, Tuple

import torch
from torch import Tensor

from torchfilter.polynomial import RootFindingError, polynomial_roots

from ._dtypes import resolve_dtypes
from ._exceptions import (
    ConvergenceError,
    FilterDesignWarning,
    InvalidArgumentError,
    InvalidOrderError,
)


def bessel_prototype(
    order: int,
    normalization: Literal["delay", "phase", "magnitude"] = "delay",
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor, Tensor]:
    """
    Design an analog Bessel/Thomson lowpass filter prototype.

    Returns the zeros, poles, and gain of a normalized analog Bessel lowpass
    filter. Bessel filters are optimized for maximally flat group delay
    (linear phase in the passband).

    Parameters
    ----------
    order : int
        The order of the filter. Must be positive.
    normalization : {"delay", "phase", "magnitude"}, default "delay"
        Frequency normalization method:
        - "delay": Group delay at DC is 1 second (the poles are the roots
          of the reverse Bessel polynomial itself).
        - "phase": The phase response is -45° × order at 1 rad/s, and the
          high frequency asymptote matches a Butterworth filter of the
          same order.
        - "magnitude": The magnitude response is -3 dB at 1 rad/s.
    dtype : torch.dtype, optional
        Output dtype. Defaults to torch.get_default_dtype().
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    zeros : Tensor
        Zeros of the filter (empty for Bessel).
    poles : Tensor
        Poles of the filter, complex tensor of shape (order,).
    gain : Tensor
        System gain, scalar tensor. Normalizes the DC gain to 1.

    Raises
    ------
    InvalidOrderError
        If order is less than 1.
    ConvergenceError
        If the roots of the Bessel polynomial cannot be computed.

    Notes
    -----
    The Bessel filter transfer function is derived from the reverse Bessel
    polynomial:

    .. math::
        H(s) = \\frac{\\theta_n(0)}{\\theta_n(s)}, \\quad
        \\theta_n(s) = \\sum_{k=0}^{n} \\frac{(2n-k)!}{2^{n-k} k! (n-k)!} s^k

    The poles are found as eigenvalues of the companion matrix of
    theta_n, so accuracy degrades for orders above roughly 25.

    Examples
    --------
    >>> zeros, poles, gain = bessel_prototype(4)
    >>> poles.shape
    torch.Size([4])
    """
    if order < 1:
        raise InvalidOrderError(
            f"Filter order must be positive, got {order}", "prototype"
        )
    if normalization not in ("delay", "phase", "magnitude"):
        raise InvalidArgumentError(
            f"normalization must be 'delay', 'phase', or 'magnitude', got '{normalization}'",
            "prototype",
        )

    dtype, complex_dtype, device = resolve_dtypes(dtype, device, "prototype")

    # theta_n has a unit leading coefficient, so its constant term is
    # the product of the negated roots
    coeffs = _bessel_polynomial_coefficients(order)
    coeffs_tensor = torch.tensor(
        coeffs[::-1], dtype=torch.float64, device=device
    )
    try:
        poles = polynomial_roots(coeffs_tensor)
    except RootFindingError as error:
        raise ConvergenceError(
            f"Could not find the roots of the order {order} Bessel polynomial",
            "prototype",
        ) from error

    if normalization == "delay":
        poles = poles * _group_delay_at_dc(poles)
    elif normalization == "phase":
        poles = poles / coeffs[0] ** (1.0 / order)
    else:
        poles = poles / coeffs[0] ** (1.0 / order)
        poles = poles * _magnitude_normalization_factor(poles)

    zeros = torch.zeros(0, dtype=complex_dtype, device=device)

    gain = torch.prod(-poles).real

    return zeros, poles.to(complex_dtype), gain.to(dtype)


def _bessel_polynomial_coefficients(n: int) -> list:
    """Coefficients [a_0, a_1, ..., a_n] of the reverse Bessel polynomial.

    a_k = (2n-k)! / (2^(n-k) * k! * (n-k)!)
    """
    coeffs = []
    for k in range(n + 1):
        numerator = math.factorial(2 * n - k)
        denominator = (
            (2 ** (n - k)) * math.factorial(k) * math.factorial(n - k)
        )
        coeffs.append(numerator / denominator)
    return coeffs


def _group_delay_at_dc(poles: Tensor) -> float:
    """Group delay of prod_k 1/(s - p_k) at w = 0.

    tau(0) = -sum_k Re(1 / p_k). Scaling every pole by tau(0) gives a
    filter with unit delay at DC.
    """
    return -torch.sum((1.0 / poles).real).item()


def _magnitude_normalization_factor(
    poles: Tensor, max_iterations: int = 50, tolerance: float = 1e-12
) -> float:
    """Factor that moves the -3 dB point of an all-pole filter to 1 rad/s.

    Solves sum_k log|jw - p_k|^2 = log(2 * |prod(-p_k)|^2) for w with
    Newton's method, starting at w = 1, and returns 1/w.
    """
    target = math.log(2.0) + 2.0 * math.log(abs(torch.prod(-poles).item()))

    w = 1.0
    for _ in range(max_iterations):
        diff = 1j * w - poles
        abs_sq = diff.abs() ** 2
        error = torch.sum(torch.log(abs_sq)).item() - target
        if abs(error) < tolerance:
            break
        derivative = torch.sum(2 * (w - poles.imag) / abs_sq).item()
        w = max(w - error / derivative, 0.01)
    else:
        warnings.warn(
            f"Bessel magnitude normalization did not converge "
            f"(residual {error:.2e})",
            FilterDesignWarning,
            stacklevel=3,
        )

    return 1.0 / w
