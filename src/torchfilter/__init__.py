"""torchfilter: analog and digital filter design in PyTorch."""

from . import (
    filter_analysis,
    filter_design,
    polynomial,
    window_function,
)

__all__ = [
    "filter_analysis",
    "filter_design",
    "polynomial",
    "window_function",
]

__version__ = "0.1.0"
