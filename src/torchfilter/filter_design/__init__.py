"""Filter design functions for IIR and FIR filters."""

from ._ba_to_sos import ba_to_sos
from ._ba_to_zpk import ba_to_zpk
from ._bessel_design import bessel_design
from ._bessel_prototype import bessel_prototype
from ._bilinear_transform_zpk import bilinear_transform_zpk
from ._butterworth_design import butterworth_design
from ._butterworth_prototype import butterworth_prototype
from ._chebyshev_type_1_design import chebyshev_type_1_design
from ._chebyshev_type_1_prototype import chebyshev_type_1_prototype
from ._chebyshev_type_2_design import chebyshev_type_2_design
from ._chebyshev_type_2_prototype import chebyshev_type_2_prototype
from ._exceptions import (
    ConvergenceError,
    FilterDesignError,
    FilterDesignWarning,
    FrequencyOrderError,
    InvalidArgumentError,
    InvalidCoefficientsError,
    InvalidCutoffError,
    InvalidNumTapsError,
    InvalidOrderError,
    InvalidRippleError,
    InvalidSamplingFrequencyError,
    InvalidWindowParameterError,
    NumericalDegeneracyError,
    PairingError,
    PoleZeroCountError,
    SOSNormalizationError,
)
from ._fir_window_design import fir_window_design
from ._hilbert_transformer import hilbert_transformer
from ._iir_design import iir_design
from ._lowpass_to_bandpass_zpk import lowpass_to_bandpass_zpk
from ._lowpass_to_bandstop_zpk import lowpass_to_bandstop_zpk
from ._lowpass_to_highpass_zpk import lowpass_to_highpass_zpk
from ._lowpass_to_lowpass_zpk import lowpass_to_lowpass_zpk
from ._representations import BA, SOS, ZPK
from ._sos_to_ba import sos_to_ba
from ._sos_to_zpk import sos_to_zpk
from ._zpk_to_ba import zpk_to_ba
from ._zpk_to_sos import zpk_to_sos

__all__ = [
    # Design functions
    "bessel_design",
    "butterworth_design",
    "chebyshev_type_1_design",
    "chebyshev_type_2_design",
    "fir_window_design",
    "hilbert_transformer",
    "iir_design",
    # Analog prototypes
    "bessel_prototype",
    "butterworth_prototype",
    "chebyshev_type_1_prototype",
    "chebyshev_type_2_prototype",
    # Frequency transformations
    "bilinear_transform_zpk",
    "lowpass_to_bandpass_zpk",
    "lowpass_to_bandstop_zpk",
    "lowpass_to_highpass_zpk",
    "lowpass_to_lowpass_zpk",
    # Conversions
    "ba_to_sos",
    "ba_to_zpk",
    "sos_to_ba",
    "sos_to_zpk",
    "zpk_to_ba",
    "zpk_to_sos",
    # Representations
    "BA",
    "SOS",
    "ZPK",
    # Exceptions
    "ConvergenceError",
    "FilterDesignError",
    "FilterDesignWarning",
    "FrequencyOrderError",
    "InvalidArgumentError",
    "InvalidCoefficientsError",
    "InvalidCutoffError",
    "InvalidNumTapsError",
    "InvalidOrderError",
    "InvalidRippleError",
    "InvalidSamplingFrequencyError",
    "InvalidWindowParameterError",
    "NumericalDegeneracyError",
    "PairingError",
    "PoleZeroCountError",
    "SOSNormalizationError",
]
