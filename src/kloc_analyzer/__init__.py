"""
kloc-analyzer - KLOC statistics for git contributors

Groups the commits of a date window by author email, sums lines added and
deleted per contributor, and ranks contributors by KLOC (lines added / 1000).
"""

__version__ = "1.2.0"
__author__ = "Ngo Tuan Long"

from .analysis import KlocAnalyzer
from .api import analyze
from .models import AnalysisResult, ContributorStats

__all__ = [
    "analyze",  # Main entry point
    "KlocAnalyzer",
    "AnalysisResult",
    "ContributorStats",
]
