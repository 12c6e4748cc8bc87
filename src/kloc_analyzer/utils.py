"""Formatting and date helpers shared by the analyzer and the CLI."""

import datetime as dt
import re
from pathlib import Path
from typing import Union

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def format_number(num: int) -> str:
    """Format an integer with comma thousand separators."""
    return f"{num:,}"


def format_duration(seconds: float) -> str:
    """Render a duration as ``12.34 seconds``, ``2m 5s`` or ``1h 1m``."""
    if seconds < 60:
        return f"{seconds:.2f} seconds"
    if seconds < 3600:
        minutes = int(seconds // 60)
        return f"{minutes}m {seconds % 60:.0f}s"
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    return f"{hours}h {minutes}m"


def current_date() -> str:
    """Today's date as YYYY-MM-DD."""
    return dt.date.today().isoformat()


def parse_date(date: str) -> dt.date:
    """Parse a strict YYYY-MM-DD string. Raises ValueError otherwise."""
    if not isinstance(date, str) or not _DATE_RE.match(date):
        raise ValueError(f"{date!r} does not match YYYY-MM-DD")
    return dt.date.fromisoformat(date)


def validate_date_format(date: str) -> bool:
    """True if ``date`` is YYYY-MM-DD and names a real calendar day."""
    try:
        parse_date(date)
    except ValueError:
        return False
    return True


def validate_date_range(from_date: str, to_date: str) -> bool:
    """True if both dates are valid and ``from_date <= to_date``."""
    if not validate_date_format(from_date) or not validate_date_format(to_date):
        return False
    return parse_date(from_date) <= parse_date(to_date)


def validate_repository_path(repo_path: Union[str, Path]) -> bool:
    """True if the path exists and holds a .git entry."""
    path = Path(repo_path)
    return path.exists() and (path / ".git").exists()
