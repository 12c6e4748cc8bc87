"""Boundary between the analyzer and the version-control tool.

A HistorySource answers three queries with raw text. Parsing lives in
CommitLister and ChangeStatsSource, so tests can script the text directly.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class HistorySource(ABC):
    """Abstract source of raw git history text for one repository."""

    def __init__(self, repo_path):
        self.repo_path = Path(repo_path)

    @abstractmethod
    def log_commits(self, from_date: str, to_date: str) -> str:
        """One ``hash|author|email|date|subject`` line per commit in the window.

        Raises:
            RetrievalError: If the query fails
        """

    @abstractmethod
    def log_numstat(self, from_date: str, to_date: str) -> str:
        """Each commit hash on its own line, followed by its numstat lines.

        Raises:
            RetrievalError: If the query fails
        """

    @abstractmethod
    def show_numstat(self, commit_id: str) -> str:
        """Numstat lines (``added<TAB>deleted<TAB>path``) for a single commit.

        Raises:
            RetrievalError: If the query fails
        """
