"""Shared test fixtures for git-report tests."""

import os
import shutil
import subprocess
from datetime import date

import pytest

from git_report.history.models import CommitRecord


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory, monkeypatch):
    """Keep user config files and GIT_REPORT_* variables out of tests."""
    home = tmp_path_factory.mktemp("home")
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("GIT_REPORT_"):
            monkeypatch.delenv(key)


@pytest.fixture
def sample_records():
    """Four commits by two authors across two months."""
    return [
        CommitRecord(date(2024, 1, 5), "Alice"),
        CommitRecord(date(2024, 1, 20), "Bob"),
        CommitRecord(date(2024, 2, 1), "Alice"),
        CommitRecord(date(2024, 2, 2), "Alice"),
    ]


def _require_git():
    if shutil.which("git") is None:
        pytest.skip("git executable not found")


def _git(repo, *args, author="Tester", when="2024-01-01T12:00:00"):
    env = dict(os.environ)
    env.update(
        {
            "GIT_AUTHOR_NAME": author,
            "GIT_AUTHOR_EMAIL": "dev@example.com",
            "GIT_COMMITTER_NAME": author,
            "GIT_COMMITTER_EMAIL": "dev@example.com",
            "GIT_AUTHOR_DATE": when,
            "GIT_COMMITTER_DATE": when,
        }
    )
    subprocess.run(
        ["git", "-c", "commit.gpgsign=false", "-C", str(repo), *args],
        check=True,
        capture_output=True,
        env=env,
    )


@pytest.fixture
def empty_git_repo(tmp_path):
    """An initialised repository with no commits."""
    _require_git()
    repo = tmp_path / "empty-repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    return repo


@pytest.fixture
def git_repo(tmp_path):
    """A small repository with commits by three authors and a few source files."""
    _require_git()
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")

    (repo / "main.py").write_text('# entry point\n\ndef main():\n    return 1\n')
    (repo / "lib.rs").write_text("// library\nfn add(a: i32, b: i32) -> i32 {\n    a + b\n}\n")
    (repo / "README.md").write_text("# Repo\n\nSome text.\n")

    commits = [
        ("Alice", "2024-01-05T10:00:00"),
        ("Bob", "2024-01-20T10:00:00"),
        ("Alice", "2024-02-01T10:00:00"),
        ("Alice", "2024-02-02T10:00:00"),
        ("Smith, Carol", "2024-03-15T10:00:00"),
    ]
    _git(repo, "add", ".")
    for i, (author, when) in enumerate(commits):
        _git(repo, "commit", "-q", "--allow-empty", "-m", f"commit {i}", author=author, when=when)

    return repo
