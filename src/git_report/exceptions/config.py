"""Configuration and input exceptions: paths, repositories, settings."""

from pathlib import Path
from typing import Any

from .base import GitReportError


class ConfigurationError(GitReportError):
    """Base class for configuration-related errors."""

    pass


class InvalidPathError(ConfigurationError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class NotARepositoryError(ConfigurationError):
    """Raised when a path exists but is not a git working tree."""

    def __init__(self, path: Path):
        super().__init__(
            f"Path is not a git repository: {path}",
            details={"expected": str(Path(path) / ".git")},
        )
        self.path = path


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
