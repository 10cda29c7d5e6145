"""Public API for git-report.

Example:
    >>> from git_report import generate_report
    >>> path = generate_report("/path/to/repo", top_n=5)
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .config import ReportConfig, load_config
from .exceptions import InvalidPathError, NotARepositoryError
from .history import (
    GitLogExtractor,
    aggregate_monthly,
    aggregate_totals,
    top_n_authors,
)
from .languages import collect_language_stats
from .logging_config import get_logger
from .visualization import (
    build_activity_chart,
    build_author_ranking_chart,
    build_report,
    write_report,
)

logger = get_logger(__name__)


def validate_repository(path) -> Path:
    """Check that *path* exists and is the root of a git working tree.

    Raises:
        InvalidPathError: If the path does not exist or is not a directory
        NotARepositoryError: If there is no ``.git`` entry in it
    """
    repo = Path(path)
    if not repo.exists():
        raise InvalidPathError(repo, "path does not exist")
    if not repo.is_dir():
        raise InvalidPathError(repo, "not a directory")
    if not (repo / ".git").exists():
        raise NotARepositoryError(repo)
    return repo


def run_report(repo_path, config: ReportConfig) -> str:
    """Run extract -> aggregate -> chart -> render -> write for one repository.

    Returns:
        Absolute path to the written report
    """
    repo = validate_repository(repo_path)

    records = GitLogExtractor(repo, timeout_seconds=config.git_timeout_seconds).extract()
    monthly = aggregate_monthly(records)
    totals = aggregate_totals(records)
    ranked = top_n_authors(totals, config.top_n)
    logger.debug("%d commits by %d authors", len(records), len(totals))

    activity = build_activity_chart(monthly, config.plot_width)
    ranking = build_author_ranking_chart(ranked, config.plot_width)

    languages = collect_language_stats(repo, exclude_dirs=config.exclude_dirs)

    html = build_report(
        repo,
        activity,
        ranking,
        languages,
        commit_count=len(records),
        author_count=len(totals),
        include_plotlyjs=config.include_plotlyjs,
    )
    return write_report(html, config.output_path)


def generate_report(
    path: str = ".",
    config_file: Optional[Path] = None,
    **overrides,
) -> str:
    """Generate an HTML report for the repository at *path*.

    Args:
        path: Path to the repository root (default: current directory)
        config_file: Optional explicit config file path
        **overrides: Configuration overrides (e.g., top_n=5, output_path="r.html")

    Returns:
        Absolute path to the written report

    Raises:
        GitReportError: For invalid configuration, paths, git failures or
            write failures
    """
    config = load_config(config_file=config_file, **overrides)
    logger.info("Generating report for %s", path)
    return run_report(path, config)
