"""Report exceptions: chart rendering and writing the HTML artifact."""

from pathlib import Path

from .base import GitReportError


class ReportError(GitReportError):
    """Base class for report generation errors."""

    pass


class RenderError(ReportError):
    """Raised when a chart or the HTML template cannot be rendered."""

    def __init__(self, target: str, reason: str):
        super().__init__(f"Failed to render {target}", details={"reason": reason})
        self.target = target
        self.reason = reason


class WriteError(ReportError):
    """Raised when the report file cannot be written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot write report: {path}", details={"path": str(path), "reason": reason}
        )
        self.path = path
        self.reason = reason
