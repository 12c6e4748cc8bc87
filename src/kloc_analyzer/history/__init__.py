"""Commit history: the git boundary, commit listing and change counts."""

from .change_stats import ChangeStatsSource, parse_numstat_stream
from .commit_lister import CommitLister, parse_commit_line
from .git_source import GitHistorySource
from .models import ZERO_CHANGE, ChangeCount, Commit
from .source import HistorySource

__all__ = [
    "ChangeCount",
    "ChangeStatsSource",
    "Commit",
    "CommitLister",
    "GitHistorySource",
    "HistorySource",
    "ZERO_CHANGE",
    "parse_commit_line",
    "parse_numstat_stream",
]
