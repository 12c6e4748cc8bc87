"""Base formatter interface for kloc-analyzer output rendering."""

from abc import ABC, abstractmethod

from ..models import AnalysisResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult) -> None:
        """Render the result to the terminal."""

    @abstractmethod
    def format(self, result: AnalysisResult) -> str:
        """Return formatted string representation of the result."""
