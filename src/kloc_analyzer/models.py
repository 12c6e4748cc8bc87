"""Contributor-level data models produced by the analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class ContributorAccumulator:
    """Running totals for one author email during a single run."""

    author: str  # name seen on the contributor's first commit
    email: str
    lines_added: int = 0
    lines_deleted: int = 0
    commits: int = 0


@dataclass(frozen=True)
class ContributorStats:
    author: str
    email: str
    lines_added: int
    lines_deleted: int
    net_lines: int  # may be negative
    commits: int
    kloc: float  # lines_added / 1000, 2 decimals


@dataclass(frozen=True)
class ReportTotals:
    lines_added: int = 0
    lines_deleted: int = 0
    net_lines: int = 0
    commits: int = 0
    kloc: float = 0.0


@dataclass(frozen=True)
class AnalysisSummary:
    total_contributors: int
    total_kloc: float
    total_commits: int
    average_kloc: float
    average_commits: float
    top_contributor: Optional[ContributorStats]
    execution_time: float  # seconds


@dataclass(frozen=True)
class AnalysisResult:
    """Everything one run produces, ready for a formatter."""

    repo_path: str
    from_date: str
    to_date: str
    contributors: tuple[ContributorStats, ...]
    totals: ReportTotals
    summary: AnalysisSummary
    commits_analyzed: int = 0
    used_bulk_stats: bool = False
