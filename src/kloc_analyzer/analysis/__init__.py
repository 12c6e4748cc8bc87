"""Contributor aggregation and metrics."""

from .aggregator import Aggregator
from .engine import KlocAnalyzer
from .metrics import (
    compute_kloc,
    compute_totals,
    filter_by_min_kloc,
    finalize,
    round2,
    summarize,
)

__all__ = [
    "Aggregator",
    "KlocAnalyzer",
    "compute_kloc",
    "compute_totals",
    "filter_by_min_kloc",
    "finalize",
    "round2",
    "summarize",
]
