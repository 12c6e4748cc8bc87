"""Tests for KLOC rounding, ranking, totals and summary."""

from decimal import Decimal

import pytest

from kloc_analyzer.analysis import (
    compute_kloc,
    compute_totals,
    filter_by_min_kloc,
    finalize,
    round2,
    summarize,
)
from kloc_analyzer.models import ContributorAccumulator, ContributorStats


def _acc(email, added, deleted=0, commits=1, author=None):
    return ContributorAccumulator(
        author=author or email.split("@")[0],
        email=email,
        lines_added=added,
        lines_deleted=deleted,
        commits=commits,
    )


def _accs(*items):
    return {a.email: a for a in items}


class TestKloc:
    @pytest.mark.parametrize(
        "added,expected",
        [
            (1000, 1.00),
            (1234, 1.23),
            (1236, 1.24),
            (567, 0.57),
            (12345, 12.35),
            (0, 0.00),
            (5, 0.01),
            (4, 0.0),
            (1005, 1.01),
            (2675, 2.68),
        ],
    )
    def test_round_half_away_from_zero(self, added, expected):
        assert compute_kloc(added) == expected

    def test_matches_scaled_integer_rule(self):
        for added in range(0, 20000, 7):
            scaled = (added * 100 * 2 + 1000) // 2000  # round(added / 10) with halves up
            assert compute_kloc(added) == scaled / 100

    def test_round2_negative_halves_go_away_from_zero(self):
        assert round2(Decimal("-1.235")) == -1.24
        assert round2(2.5) == 2.5
        assert round2(Decimal("0.125")) == 0.13


class TestFinalize:
    def test_net_lines_may_be_negative(self):
        (stats,) = finalize(_accs(_acc("x@y", 100, 300)))
        assert stats.net_lines == -200
        assert stats.kloc == 0.1

    def test_ranked_by_kloc_descending(self):
        ranked = finalize(_accs(_acc("low@x", 150), _acc("high@x", 5000), _acc("mid@x", 200)))
        assert [s.email for s in ranked] == ["high@x", "mid@x", "low@x"]

    def test_ties_keep_first_seen_order(self):
        ranked = finalize(_accs(_acc("first@x", 1), _acc("big@x", 3000), _acc("second@x", 2)))
        assert [s.email for s in ranked] == ["big@x", "first@x", "second@x"]
        assert ranked[1].kloc == ranked[2].kloc == 0.0

    def test_same_kloc_from_different_counts_is_a_tie(self):
        ranked = finalize(_accs(_acc("a@x", 1231), _acc("b@x", 1234)))
        assert [s.email for s in ranked] == ["a@x", "b@x"]

    def test_copies_identity_fields(self):
        (stats,) = finalize(_accs(_acc("john@x", 150, 15, commits=2, author="John")))
        assert stats == ContributorStats(
            author="John",
            email="john@x",
            lines_added=150,
            lines_deleted=15,
            net_lines=135,
            commits=2,
            kloc=0.15,
        )

    def test_empty(self):
        assert finalize({}) == []


class TestTotals:
    def test_totals(self):
        ranked = finalize(_accs(_acc("a@x", 1234, 34, 3), _acc("b@x", 567, 1000, 2)))
        totals = compute_totals(ranked)

        assert totals.lines_added == 1801
        assert totals.lines_deleted == 1034
        assert totals.commits == 5
        assert totals.kloc == 1.80  # 1.23 + 0.57

    def test_net_derived_independently(self):
        ranked = finalize(_accs(_acc("a@x", 100, 300), _acc("b@x", 50, 5), _acc("c@x", 0, 42)))
        totals = compute_totals(ranked)

        assert totals.net_lines == totals.lines_added - totals.lines_deleted
        assert totals.net_lines == sum(s.net_lines for s in ranked)

    def test_empty_totals(self):
        totals = compute_totals([])
        assert (totals.lines_added, totals.net_lines, totals.commits, totals.kloc) == (0, 0, 0, 0.0)


class TestSummary:
    def test_summary(self):
        ranked = finalize(_accs(_acc("a@x", 1000, commits=4), _acc("b@x", 3000, commits=2)))
        summary = summarize(ranked, compute_totals(ranked), execution_time=1.5)

        assert summary.total_contributors == 2
        assert summary.total_kloc == 4.0
        assert summary.average_kloc == 2.0
        assert summary.average_commits == 3.0
        assert summary.top_contributor.email == "b@x"
        assert summary.execution_time == 1.5

    def test_empty_summary(self):
        summary = summarize([], compute_totals([]))
        assert summary.total_contributors == 0
        assert summary.average_kloc == 0.0
        assert summary.top_contributor is None


class TestFilter:
    def test_min_kloc_keeps_order(self):
        ranked = finalize(_accs(_acc("a@x", 2000), _acc("b@x", 100), _acc("c@x", 1000)))
        assert [s.email for s in filter_by_min_kloc(ranked, 1.0)] == ["a@x", "c@x"]

    def test_zero_keeps_everyone(self):
        ranked = finalize(_accs(_acc("a@x", 0), _acc("b@x", 1)))
        assert len(filter_by_min_kloc(ranked, 0)) == 2
