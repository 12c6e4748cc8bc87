"""Configuration and input validation exceptions: dates, paths, settings."""

from typing import Any

from .base import KlocAnalyzerError


class ConfigurationError(KlocAnalyzerError):
    """Base class for configuration-related errors."""

    pass


class ValidationError(ConfigurationError):
    """Raised when a user-supplied input (date, path) is invalid."""

    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(f"Invalid {field}: {value}. {reason}")
        self.field = field
        self.value = value
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason
