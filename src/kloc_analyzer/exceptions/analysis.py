"""Analysis-related exceptions: history retrieval, record parsing, report output."""

from pathlib import Path
from typing import Union

from .base import KlocAnalyzerError


class AnalysisError(KlocAnalyzerError):
    """Base class for analysis-related errors."""
    pass


class RetrievalError(AnalysisError):
    """Raised when a history or diff query against git fails."""

    def __init__(self, command: str, reason: str):
        super().__init__(
            f"Git command failed: {command}",
            details={"reason": reason},
        )
        self.command = command
        self.reason = reason


class MalformedRecordError(AnalysisError):
    """Raised when a raw history line cannot be split into a commit record."""

    def __init__(self, line: str, reason: str):
        super().__init__(
            f"Invalid commit line format: {line}",
            details={"reason": reason},
        )
        self.line = line
        self.reason = reason


class ReportWriteError(AnalysisError):
    """Raised when the exported report file cannot be written."""

    def __init__(self, path: Union[str, Path], reason: str):
        super().__init__(
            f"Error saving file: {path}",
            details={"reason": reason},
        )
        self.path = Path(path)
        self.reason = reason
