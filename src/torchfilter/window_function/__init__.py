"""Symmetric window functions used for FIR filter design."""

from ._bartlett_window import bartlett_window
from ._hamming_window import hamming_window
from ._hann_window import hann_window
from ._kaiser_window import kaiser_window
from ._optimal_blackman_window import optimal_blackman_window

__all__ = [
    "bartlett_window",
    "hamming_window",
    "hann_window",
    "kaiser_window",
    "optimal_blackman_window",
]
