"""Benchmarks comparing torchfilter filter design against scipy baselines."""

from .bench_filter_design import BenchFilterDesign

__all__ = ["BenchFilterDesign"]
