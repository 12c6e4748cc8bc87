"""Per-commit insertion/deletion counts from git numstat output.

Two strategies cover the same window: ``bulk`` parses one combined
``git log --numstat`` stream for every commit at once, ``single`` asks git
about one commit. Neither raises; failures degrade to empty/zero results.
"""

import re
from typing import Dict

from ..logging_config import get_logger
from .models import ZERO_CHANGE, ChangeCount
from .source import HistorySource

logger = get_logger(__name__)

# A bare 40-char hex line opens a new commit segment in the bulk stream
_HASH_LINE_RE = re.compile(r"^[0-9a-f]{40}$")


def parse_count_token(token: str) -> int:
    """Numstat count token to int. ``-`` (binary file) or junk counts as 0."""
    token = token.strip()
    if token == "-":
        return 0
    try:
        value = int(token)
    except ValueError:
        return 0
    return max(value, 0)


def parse_numstat_line(line: str) -> ChangeCount:
    """Parse ``added<TAB>deleted<TAB>path``; lines without a tab count as zero."""
    parts = line.split("\t")
    if len(parts) < 2:
        return ZERO_CHANGE
    return ChangeCount(parse_count_token(parts[0]), parse_count_token(parts[1]))


def parse_numstat_stream(raw: str) -> Dict[str, ChangeCount]:
    """Group a ``git log --numstat --pretty=format:%H`` stream by commit.

    Every hash line gets an entry, so commits with no file changes map to
    (0, 0). Numstat lines before the first hash line are ignored.
    """
    stats: Dict[str, ChangeCount] = {}
    current = None

    for line in raw.split("\n"):
        line = line.rstrip("\r")
        if _HASH_LINE_RE.match(line):
            current = line
            stats.setdefault(current, ZERO_CHANGE)
        elif current and "\t" in line:
            stats[current] = stats[current] + parse_numstat_line(line)

    return stats


def sum_numstat_lines(raw: str) -> ChangeCount:
    """Total the numstat lines of a single commit."""
    total = ZERO_CHANGE
    for line in raw.split("\n"):
        if line.strip():
            total = total + parse_numstat_line(line)
    return total


class ChangeStatsSource:
    """Change counts for commits, with a bulk path and a per-commit fallback."""

    def __init__(self, source: HistorySource):
        self.source = source

    def bulk(self, from_date: str, to_date: str) -> Dict[str, ChangeCount]:
        """Counts for every commit in the window; empty dict on any failure."""
        try:
            raw = self.source.log_numstat(from_date, to_date)
            return parse_numstat_stream(raw)
        except Exception as e:
            logger.warning(
                "Could not get optimized stats, falling back to individual commits: %s", e
            )
            return {}

    def single(self, commit_id: str) -> ChangeCount:
        """Counts for one commit; (0, 0) with a warning on any failure."""
        try:
            raw = self.source.show_numstat(commit_id)
            return sum_numstat_lines(raw)
        except Exception as e:
            logger.warning("Could not get stats for commit %s: %s", commit_id, e)
            return ZERO_CHANGE
