"""Public API for kloc-analyzer.

Example:
    >>> from kloc_analyzer import analyze
    >>>
    >>> result = analyze("/path/to/repo", from_date="2024-01-01")
    >>> for stats in result.contributors:
    ...     print(stats.email, stats.kloc)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .analysis import KlocAnalyzer
from .analysis.aggregator import ProgressCallback
from .config import load_config
from .models import AnalysisResult


def analyze(
    repo_path,
    from_date: Optional[str] = None,
    to_date: Optional[str] = None,
    config_file: Optional[Path] = None,
    progress: Optional[ProgressCallback] = None,
    **overrides,
) -> AnalysisResult:
    """Analyze a repository and return ranked contributor statistics.

    Args:
        repo_path: Path to the git working directory
        from_date: Start date (YYYY-MM-DD); defaults to ``default_from_date``
        to_date: End date (YYYY-MM-DD); defaults to today
        config_file: Optional explicit TOML config file
        progress: Optional ``(processed, total)`` callback
        **overrides: Configuration overrides (e.g., show_progress=False)

    Raises:
        KlocAnalyzerError: On invalid input, a missing repository or a
            failed commit listing
    """
    config = load_config(config_file=config_file, **overrides)
    return KlocAnalyzer(
        repo_path, from_date, to_date, config=config, progress=progress
    ).analyze()
