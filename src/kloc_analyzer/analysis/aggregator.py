"""Fold commits into per-email running totals."""

from typing import Callable, Dict, Iterable, Optional, Sequence

from ..history.change_stats import ChangeStatsSource
from ..history.models import ZERO_CHANGE, Commit
from ..logging_config import get_logger
from ..models import ContributorAccumulator

logger = get_logger(__name__)

ProgressCallback = Callable[[int, int], None]


def progress_checkpoints(total: int, interval_percent: int = 10) -> Iterable[int]:
    """Commit indices at which a progress notification is due."""
    step = max(1, (total * interval_percent) // 100)
    return range(0, total, step)


class Aggregator:
    """Join commits with their change counts and sum them by author email.

    The stats strategy is chosen once per run: if the bulk query returns any
    entries every commit is looked up there (absent commits count as zero),
    otherwise each commit is queried individually.
    """

    def __init__(
        self,
        progress: Optional[ProgressCallback] = None,
        progress_interval: int = 10,
    ):
        self.progress = progress
        self.progress_interval = progress_interval
        self.last_used_bulk = False

    def aggregate(
        self,
        commits: Sequence[Commit],
        stats_source: ChangeStatsSource,
        from_date: str,
        to_date: str,
    ) -> Dict[str, ContributorAccumulator]:
        """Return accumulators keyed by email, in first-seen order."""
        accumulators: Dict[str, ContributorAccumulator] = {}
        total = len(commits)

        logger.info("Processing %d commits...", total)

        bulk_stats = stats_source.bulk(from_date, to_date)
        use_bulk = bool(bulk_stats)
        self.last_used_bulk = use_bulk
        if use_bulk:
            logger.info("Using optimized stats collection...")
        else:
            logger.info("Bulk stats unavailable, querying %d commits individually", total)

        checkpoints = set(progress_checkpoints(total, self.progress_interval))

        for index, commit in enumerate(commits):
            if index in checkpoints:
                self._notify(index, total)

            if use_bulk:
                change = bulk_stats.get(commit.hash, ZERO_CHANGE)
            else:
                change = stats_source.single(commit.hash)

            acc = accumulators.get(commit.email)
            if acc is None:
                acc = ContributorAccumulator(author=commit.author, email=commit.email)
                accumulators[commit.email] = acc

            acc.lines_added += change.added
            acc.lines_deleted += change.deleted
            acc.commits += 1

        if total:
            self._notify(total, total)

        return accumulators

    def _notify(self, processed: int, total: int) -> None:
        percentage = round(processed / total * 100) if total else 100
        logger.info("Progress: %d%% (%d/%d commits)", percentage, processed, total)
        if self.progress is not None:
            self.progress(processed, total)
