"""Repository location exceptions."""

from pathlib import Path
from typing import Union

from .base import KlocAnalyzerError


class RepositoryError(KlocAnalyzerError):
    """Base class for errors locating the repository to analyze."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(f"{reason}: {path}")
        self.path = Path(path)
        self.reason = reason


class RepositoryNotFoundError(RepositoryError):
    """Raised when the repository path does not exist."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, "Repository path does not exist")


class NotARepositoryError(RepositoryError):
    """Raised when the path exists but carries no .git metadata."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(path, "Not a git repository")
