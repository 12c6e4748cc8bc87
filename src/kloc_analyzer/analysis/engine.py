"""Analysis pipeline: list commits, aggregate change counts, rank contributors."""

import time
from pathlib import Path
from typing import Optional

from ..config import AnalysisConfig
from ..history import ChangeStatsSource, CommitLister, GitHistorySource, HistorySource
from ..logging_config import get_logger
from ..models import AnalysisResult
from ..utils import current_date
from ..validation import check_date_range, check_repository
from .aggregator import Aggregator, ProgressCallback
from .metrics import compute_totals, filter_by_min_kloc, finalize, summarize

logger = get_logger(__name__)


class KlocAnalyzer:
    """Compute KLOC statistics for one repository and date window.

    Example:
        >>> analyzer = KlocAnalyzer("/path/to/repo", "2024-01-01", "2024-12-31")
        >>> result = analyzer.analyze()
        >>> result.contributors[0].email
        'jane@example.com'
    """

    def __init__(
        self,
        repo_path,
        from_date: Optional[str] = None,
        to_date: Optional[str] = None,
        config: Optional[AnalysisConfig] = None,
        source: Optional[HistorySource] = None,
        progress: Optional[ProgressCallback] = None,
    ):
        self.config = config or AnalysisConfig()
        self.repo_path = Path(repo_path) if repo_path is not None else None
        self.from_date = from_date or self.config.default_from_date
        self.to_date = to_date or current_date()
        self._source = source
        self.progress = progress if self.config.show_progress else None

    @property
    def source(self) -> HistorySource:
        if self._source is None:
            self._source = GitHistorySource(
                self.repo_path,
                timeout_seconds=self.config.git_timeout_seconds,
                max_output_bytes=self.config.max_output_bytes,
            )
        return self._source

    def analyze(self) -> AnalysisResult:
        """Run the full pipeline.

        Raises:
            ValidationError: On a malformed date, an inverted range or no path
            RepositoryError: If the path is missing or not a git checkout
            RetrievalError: If the commit listing query fails
        """
        start = time.perf_counter()

        logger.info("Analyzing repository: %s", self.repo_path)
        logger.info("Date range: %s to %s", self.from_date, self.to_date)

        # Fail fast before any git process is started
        check_date_range(self.from_date, self.to_date)
        check_repository(self.repo_path)

        commits = CommitLister(self.source).list_commits(self.from_date, self.to_date)
        logger.info("Found %d commits in the specified date range", len(commits))

        used_bulk = False
        if commits:
            aggregator = Aggregator(
                progress=self.progress,
                progress_interval=self.config.progress_interval_percent,
            )
            accumulators = aggregator.aggregate(
                commits, ChangeStatsSource(self.source), self.from_date, self.to_date
            )
            used_bulk = aggregator.last_used_bulk
            ranked = finalize(accumulators)
        else:
            logger.info("No commits found in the specified date range")
            ranked = []

        if self.config.min_kloc > 0:
            ranked = filter_by_min_kloc(ranked, self.config.min_kloc)

        totals = compute_totals(ranked)
        elapsed = time.perf_counter() - start
        logger.info("Analysis completed in %.2fs", elapsed)

        return AnalysisResult(
            repo_path=str(self.repo_path),
            from_date=self.from_date,
            to_date=self.to_date,
            contributors=tuple(ranked),
            totals=totals,
            summary=summarize(ranked, totals, elapsed),
            commits_analyzed=len(commits),
            used_bulk_stats=used_bulk,
        )
