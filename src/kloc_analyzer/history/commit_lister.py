"""List the commits of a date window as Commit records."""

from typing import List

from ..exceptions import MalformedRecordError
from ..logging_config import get_logger
from ..validation import check_date_range, check_repository
from .models import Commit
from .source import HistorySource

logger = get_logger(__name__)

FIELD_DELIMITER = "|"
FIELD_COUNT = 5


def parse_commit_line(line: str) -> Commit:
    """Split one ``hash|author|email|date|subject`` line into a Commit.

    The subject is the last field, so a ``|`` inside it stays part of the
    subject.

    Raises:
        MalformedRecordError: If the line has fewer than five fields
    """
    parts = line.split(FIELD_DELIMITER, FIELD_COUNT - 1)
    if len(parts) < FIELD_COUNT:
        raise MalformedRecordError(
            line, f"expected {FIELD_COUNT} fields, found {len(parts)}"
        )
    commit_hash, author, email, date, subject = parts
    return Commit(hash=commit_hash, author=author, email=email, date=date, subject=subject)


class CommitLister:
    """Retrieve commits in a date window, in the order git reports them."""

    def __init__(self, source: HistorySource):
        self.source = source

    def list_commits(self, from_date: str, to_date: str) -> List[Commit]:
        """Return commits between ``from_date`` and ``to_date`` (newest first).

        Inputs are checked before git is queried. Malformed lines are logged
        and skipped; an empty window yields an empty list.

        Raises:
            ValidationError: If a date is malformed or from > to
            RepositoryError: If the repository path is missing or not a git checkout
            RetrievalError: If the history query fails
        """
        check_date_range(from_date, to_date)
        check_repository(self.source.repo_path)

        raw = self.source.log_commits(from_date, to_date)
        if not raw.strip():
            return []

        commits = []
        for line in raw.split("\n"):
            if not line.strip():
                continue
            try:
                commits.append(parse_commit_line(line))
            except MalformedRecordError as e:
                logger.warning("Skipping commit record: %s", e)
        return commits
