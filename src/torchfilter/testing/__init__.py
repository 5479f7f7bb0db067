"""Testing utilities for torchfilter.

Requires the ``test`` extra, which installs hypothesis.
"""

from .strategies import (
    band_edges,
    conjugate_symmetric_roots,
    digital_cutoffs,
    filter_orders,
)

__all__ = [
    "band_edges",
    "conjugate_symmetric_roots",
    "digital_cutoffs",
    "filter_orders",
]
