"""Hypothesis strategies for filter design testing."""

from ._band_edges import band_edges
from ._conjugate_symmetric_roots import conjugate_symmetric_roots
from ._digital_cutoffs import digital_cutoffs
from ._filter_orders import filter_orders

__all__ = [
    # Design parameter strategies
    "band_edges",
    "digital_cutoffs",
    "filter_orders",
    # Root strategies
    "conjugate_symmetric_roots",
]
