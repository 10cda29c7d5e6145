"""Tests for the exception hierarchy."""

from pathlib import Path

import pytest

from git_report.exceptions import (
    CommandExecutionError,
    ConfigurationError,
    GitReportError,
    HistoryError,
    InvalidConfigError,
    InvalidPathError,
    MalformedRecordError,
    NotARepositoryError,
    RenderError,
    ReportError,
    WriteError,
)


class TestGitReportError:
    def test_message_only(self):
        assert str(GitReportError("boom")) == "boom"

    def test_details_rendered(self):
        err = GitReportError("boom", details={"a": "1", "b": "2"})
        assert str(err) == "boom (a=1, b=2)"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err, parent",
        [
            (InvalidPathError(Path("/x"), "missing"), ConfigurationError),
            (NotARepositoryError(Path("/x")), ConfigurationError),
            (InvalidConfigError("top_n", -1, "negative"), ConfigurationError),
            (CommandExecutionError(["git", "log"], "failed", 128), HistoryError),
            (MalformedRecordError(3, "junk", "bad"), HistoryError),
            (RenderError("chart", "bad"), ReportError),
            (WriteError(Path("/x"), "denied"), ReportError),
        ],
    )
    def test_subclasses(self, err, parent):
        assert isinstance(err, parent)
        assert isinstance(err, GitReportError)

    def test_not_a_repository_details(self):
        err = NotARepositoryError(Path("/src/proj"))
        assert "not a git repository" in str(err)
        assert err.details["expected"] == str(Path("/src/proj") / ".git")

    def test_command_execution_details(self):
        err = CommandExecutionError(["git", "log"], "fatal", 128)
        assert err.details == {"command": "git log", "reason": "fatal", "returncode": "128"}

    def test_command_execution_without_returncode(self):
        err = CommandExecutionError(["git"], "not found")
        assert "returncode" not in err.details
