"""Derived contributor metrics: net lines, KLOC, ranking, totals, summary."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Mapping, Sequence

from ..models import AnalysisSummary, ContributorAccumulator, ContributorStats, ReportTotals

_HUNDREDTHS = Decimal("0.01")


def round2(value) -> float:
    """Round to 2 decimals, halves away from zero (never banker's rounding).

    Works in Decimal from the exact input so 12.345 gives 12.35.
    """
    exact = value if isinstance(value, Decimal) else Decimal(str(value))
    return float(exact.quantize(_HUNDREDTHS, rounding=ROUND_HALF_UP))


def compute_kloc(lines_added: int) -> float:
    """Thousands of added lines, rounded to 2 decimals."""
    return round2(Decimal(lines_added) / Decimal(1000))


def to_contributor_stats(acc: ContributorAccumulator) -> ContributorStats:
    return ContributorStats(
        author=acc.author,
        email=acc.email,
        lines_added=acc.lines_added,
        lines_deleted=acc.lines_deleted,
        net_lines=acc.lines_added - acc.lines_deleted,
        commits=acc.commits,
        kloc=compute_kloc(acc.lines_added),
    )


def finalize(accumulators: Mapping[str, ContributorAccumulator]) -> List[ContributorStats]:
    """Rank contributors by KLOC, highest first.

    ``sorted`` is stable, so contributors with equal KLOC keep the order in
    which their email was first seen.
    """
    stats = [to_contributor_stats(acc) for acc in accumulators.values()]
    return sorted(stats, key=lambda s: s.kloc, reverse=True)


def compute_totals(stats: Iterable[ContributorStats]) -> ReportTotals:
    """Column totals for the report.

    Net lines come from the added/deleted totals, not from summing each
    contributor's net.
    """
    added = deleted = commits = 0
    kloc = Decimal(0)
    for s in stats:
        added += s.lines_added
        deleted += s.lines_deleted
        commits += s.commits
        kloc += Decimal(str(s.kloc))
    return ReportTotals(
        lines_added=added,
        lines_deleted=deleted,
        net_lines=added - deleted,
        commits=commits,
        kloc=round2(kloc),
    )


def summarize(
    stats: Sequence[ContributorStats], totals: ReportTotals, execution_time: float = 0.0
) -> AnalysisSummary:
    count = len(stats)
    return AnalysisSummary(
        total_contributors=count,
        total_kloc=totals.kloc,
        total_commits=totals.commits,
        average_kloc=totals.kloc / count if count else 0.0,
        average_commits=totals.commits / count if count else 0.0,
        top_contributor=stats[0] if stats else None,
        execution_time=execution_time,
    )


def filter_by_min_kloc(stats: Sequence[ContributorStats], min_kloc: float) -> List[ContributorStats]:
    """Keep contributors at or above ``min_kloc``, preserving rank order."""
    return [s for s in stats if s.kloc >= min_kloc]
