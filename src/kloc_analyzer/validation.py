"""Input checks that run before any git query.

These wrap the boolean predicates in ``utils`` and raise instead of returning
a flag, so the first bad input stops the run with a precise message.
"""

from pathlib import Path
from typing import Union

from .exceptions import NotARepositoryError, RepositoryNotFoundError, ValidationError
from .utils import validate_date_format, validate_date_range, validate_repository_path


def check_date_range(from_date: str, to_date: str) -> None:
    """Raise ValidationError unless both dates parse and from <= to."""
    if not validate_date_format(from_date):
        raise ValidationError("from date format", from_date, "Expected YYYY-MM-DD")
    if not validate_date_format(to_date):
        raise ValidationError("to date format", to_date, "Expected YYYY-MM-DD")
    if not validate_date_range(from_date, to_date):
        raise ValidationError(
            "date range",
            f"{from_date}..{to_date}",
            f"From date ({from_date}) must be before to date ({to_date})",
        )


def check_repository(repo_path: Union[str, Path, None]) -> Path:
    """Return the repository path, or raise if it is missing or not a git checkout.

    The presence of a ``.git`` entry (directory, or file for worktrees and
    submodules) is the only check.
    """
    if repo_path is None or str(repo_path).strip() == "":
        raise ValidationError("repository path", repo_path, "A repository path is required")
    path = Path(repo_path)
    if not validate_repository_path(path):
        if not path.exists():
            raise RepositoryNotFoundError(path)
        raise NotARepositoryError(path)
    return path
