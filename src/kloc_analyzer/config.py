"""Configuration loading and management for kloc-analyzer.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.kloc-analyzer.toml)
    3. Project config (./kloc-analyzer.toml)
    4. Explicit config file (--config)
    5. Environment variables (KLOC_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(show_progress=False)
    >>> config.show_progress
    False
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError
from .utils import validate_date_format

Verbosity = Literal["quiet", "normal", "verbose"]

GLOBAL_CONFIG_NAME = ".kloc-analyzer.toml"
PROJECT_CONFIG_NAME = "kloc-analyzer.toml"
ENV_PREFIX = "KLOC_"

# Accepted Python types per annotated field type; bool is never accepted as a number
_FIELD_TYPES = {bool: (bool,), int: (int,), float: (int, float), str: (str,)}


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Date window:
            default_from_date: Start date used when --from is omitted

        Progress:
            show_progress: Emit progress notifications while aggregating
            progress_interval_percent: Notify every N percent of commits

        Report output:
            output_dir: Directory for auto-named CSV reports
            output_prefix: File name prefix for auto-named CSV reports
            min_kloc: Hide contributors below this KLOC in the report

        Git integration:
            git_timeout_seconds: Timeout for each git invocation
            max_output_mb: Cap on the output read from a single git invocation

        Output control:
            verbosity: Logging verbosity level (quiet, normal or verbose)
            log_file: Optional file that also receives log records
    """

    default_from_date: str = "1970-01-01"

    show_progress: bool = True
    progress_interval_percent: int = 10

    output_dir: str = "."
    output_prefix: str = "kloc-report"
    min_kloc: float = 0.0

    git_timeout_seconds: int = 300
    max_output_mb: float = 50.0

    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._check_types()
        if not validate_date_format(self.default_from_date):
            raise InvalidConfigError(
                "default_from_date", self.default_from_date, "expected YYYY-MM-DD"
            )
        if not 1 <= self.progress_interval_percent <= 100:
            raise InvalidConfigError(
                "progress_interval_percent",
                self.progress_interval_percent,
                "must be between 1 and 100",
            )
        if not self.output_prefix:
            raise InvalidConfigError("output_prefix", self.output_prefix, "must not be empty")
        if self.min_kloc < 0:
            raise InvalidConfigError("min_kloc", self.min_kloc, "must be non-negative")
        if self.git_timeout_seconds < 1:
            raise InvalidConfigError(
                "git_timeout_seconds", self.git_timeout_seconds, "must be at least 1"
            )
        if self.max_output_mb <= 0:
            raise InvalidConfigError("max_output_mb", self.max_output_mb, "must be positive")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "expected quiet, normal or verbose"
            )

    def _check_types(self) -> None:
        """Reject values of the wrong type, e.g. ``show_progress = "no"`` in TOML."""
        type_hints = get_type_hints(type(self))
        for f in fields(self):
            value = getattr(self, f.name)
            hint = type_hints[f.name]
            if f.name == "log_file":
                if value is not None and not isinstance(value, str):
                    raise InvalidConfigError(f.name, value, "expected a file path")
                continue
            expected = _FIELD_TYPES.get(hint)
            if expected is None:
                continue
            if (isinstance(value, bool) and hint is not bool) or not isinstance(value, expected):
                raise InvalidConfigError(f.name, value, f"expected {hint.__name__}")

    @property
    def max_output_bytes(self) -> int:
        """Get the git output cap in bytes."""
        return int(self.max_output_mb * 1024 * 1024)


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset CLI options keep lower-priority values.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_load_toml_file(global_config))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_load_toml_file(project_config))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_file(config_file))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from KLOC_* environment variables.

    Every AnalysisConfig field can be set, e.g. KLOC_SHOW_PROGRESS=false or
    KLOC_OUTPUT_DIR=reports.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    if type_hint is float:
        return float(value)

    # str and Literal types (Verbosity)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Invalid config file '{path}': {e}")
