"""Exception hierarchy for kloc-analyzer."""

from .analysis import (
    AnalysisError,
    MalformedRecordError,
    ReportWriteError,
    RetrievalError,
)
from .base import KlocAnalyzerError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    ValidationError,
)
from .repository import (
    NotARepositoryError,
    RepositoryError,
    RepositoryNotFoundError,
)

__all__ = [
    "KlocAnalyzerError",
    "AnalysisError",
    "RetrievalError",
    "MalformedRecordError",
    "ReportWriteError",
    "ConfigurationError",
    "ValidationError",
    "InvalidConfigError",
    "RepositoryError",
    "RepositoryNotFoundError",
    "NotARepositoryError",
]
