"""Polynomial root finding, expansion and evaluation.

Coefficients are ordered from the highest degree to the constant term.
"""

from ._exceptions import DegreeError, PolynomialError, RootFindingError
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_from_roots import polynomial_from_roots
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_roots import polynomial_roots

__all__ = [
    "polynomial_evaluate",
    "polynomial_from_roots",
    "polynomial_multiply",
    "polynomial_roots",
    # Exceptions
    "DegreeError",
    "PolynomialError",
    "RootFindingError",
]
