"""Exceptions for filter design module."""

from typing import Literal, Optional

Stage = Literal[
    "prototype",
    "band_transform",
    "bilinear_transform",
    "conversion",
    "fir",
]


class FilterDesignError(Exception):
    """Base exception for filter design errors.

    Parameters
    ----------
    message : str
        Description of the failure.
    stage : str, optional
        Pipeline stage that raised the error: "prototype",
        "band_transform", "bilinear_transform", "conversion" or "fir".
        When given, the message is prefixed with it.
    """

    def __init__(self, message: str, stage: Optional[Stage] = None):
        self.stage = stage
        if stage is not None:
            message = f"[{stage}] {message}"
        super().__init__(message)


class FilterDesignWarning(UserWarning):
    """Warning for recoverable numerical issues during filter design."""

    pass


class InvalidArgumentError(FilterDesignError, ValueError):
    """Raised when a design input is malformed.

    Subclasses ValueError so callers can treat all bad input uniformly.
    """

    pass


class InvalidOrderError(InvalidArgumentError):
    """Raised when filter order is invalid.

    This occurs when:
    - Order is not a positive integer
    - FIR order is below the minimum of 4
    - Hilbert transformer order is negative
    """

    pass


class InvalidCutoffError(InvalidArgumentError):
    """Raised when cutoff frequency is invalid.

    This occurs when:
    - A digital cutoff is outside (0, 1) (fraction of Nyquist)
    - An analog cutoff is not positive
    - A band transform center frequency or bandwidth is out of range
    - A band design does not receive exactly two edges
    """

    pass


class FrequencyOrderError(InvalidArgumentError):
    """Raised when band edges are not in ascending order (low >= high)."""

    pass


class InvalidRippleError(InvalidArgumentError):
    """Raised when a Chebyshev ripple or attenuation is missing or not positive."""

    pass


class InvalidNumTapsError(InvalidArgumentError):
    """Raised when FIR filter tap count is invalid for the requested filter type.

    This occurs when an odd order (even tap count, Type II) is used with a
    highpass or bandstop design, which forces a zero at Nyquist.
    """

    pass


class InvalidWindowParameterError(InvalidArgumentError):
    """Raised when a window name or parameter is invalid.

    This occurs when:
    - The window name is unknown
    - The Kaiser beta is negative or so large that I_0(beta) overflows
    """

    pass


class InvalidSamplingFrequencyError(InvalidArgumentError):
    """Raised when a sampling frequency is not positive and finite."""

    pass


class InvalidCoefficientsError(InvalidArgumentError):
    """Raised when transfer function coefficients cannot be converted.

    This occurs when:
    - A numerator or denominator is empty
    - A leading coefficient is zero
    """

    pass


class PoleZeroCountError(InvalidArgumentError):
    """Raised when the numbers of zeros and poles are incompatible.

    This occurs when:
    - The bilinear transform receives more zeros than poles
    - Second-order section pairing receives unequal counts or no poles
    - A band transform receives an empty filter
    """

    pass


class SOSNormalizationError(InvalidArgumentError):
    """Raised when second-order sections are malformed.

    This occurs when:
    - sos does not have shape (n_sections, 6) with n_sections >= 1
    - a0 coefficient is not 1
    """

    pass


class NumericalDegeneracyError(FilterDesignError, ArithmeticError):
    """Raised when a design is ill-conditioned rather than malformed."""

    pass


class ConvergenceError(NumericalDegeneracyError):
    """Raised when an iterative algorithm fails to converge.

    This occurs in:
    - Companion matrix eigenvalue decomposition
    """

    pass


class PairingError(NumericalDegeneracyError):
    """Raised when poles or zeros cannot be paired into sections.

    This occurs when a complex root has no conjugate partner within
    tolerance, or when pairing leaves roots unmatched.
    """

    pass
