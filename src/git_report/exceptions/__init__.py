"""Exception hierarchy for git-report."""

from .base import GitReportError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
    NotARepositoryError,
)
from .history import CommandExecutionError, HistoryError, MalformedRecordError
from .report import RenderError, ReportError, WriteError

__all__ = [
    "GitReportError",
    "ConfigurationError",
    "InvalidPathError",
    "NotARepositoryError",
    "InvalidConfigError",
    "HistoryError",
    "CommandExecutionError",
    "MalformedRecordError",
    "ReportError",
    "RenderError",
    "WriteError",
]
