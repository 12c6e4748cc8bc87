"""Shared CLI helpers."""

import datetime as dt
from pathlib import Path
from typing import Optional

from rich.console import Console

from ..config import AnalysisConfig, load_config

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def resolve_config(
    config: Optional[Path] = None,
    no_progress: bool = False,
    min_kloc: Optional[float] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> AnalysisConfig:
    """Build configuration from CLI options."""
    overrides = {}
    if no_progress:
        overrides["show_progress"] = False
    if min_kloc is not None:
        overrides["min_kloc"] = min_kloc
    if verbose:
        overrides["verbose"] = True
    if quiet:
        overrides["quiet"] = True
    return load_config(config_file=config, **overrides)


def default_report_path(config: AnalysisConfig, now: Optional[dt.datetime] = None) -> Path:
    """Timestamped CSV path used when --output is not given."""
    stamp = (now or dt.datetime.now()).strftime("%Y%m%d-%H%M%S")
    return Path(config.output_dir) / f"{config.output_prefix}-{stamp}.csv"
