"""Commit history exceptions: running git and parsing its output."""

from typing import Optional, Sequence

from .base import GitReportError


class HistoryError(GitReportError):
    """Base class for commit-history extraction errors."""

    pass


class CommandExecutionError(HistoryError):
    """Raised when the git command cannot be run or exits non-zero."""

    def __init__(self, command: Sequence[str], reason: str, returncode: Optional[int] = None):
        details = {"command": " ".join(command), "reason": reason}
        if returncode is not None:
            details["returncode"] = str(returncode)

        super().__init__("Failed to execute git command", details=details)
        self.command = list(command)
        self.reason = reason
        self.returncode = returncode


class MalformedRecordError(HistoryError):
    """Raised when a line of git log output is not a valid commit record."""

    def __init__(self, line_number: int, line: str, reason: str):
        super().__init__(
            f"Malformed commit record on line {line_number}",
            details={"line": line, "reason": reason},
        )
        self.line_number = line_number
        self.line = line
        self.reason = reason
