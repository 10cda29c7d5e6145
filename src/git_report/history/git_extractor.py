"""Extract commit records from git log via subprocess."""

import subprocess
from datetime import datetime
from pathlib import Path

from ..exceptions import CommandExecutionError, MalformedRecordError
from ..logging_config import get_logger
from .models import CommitRecord

logger = get_logger(__name__)

# %as = author date as YYYY-MM-DD, %cn = committer name
LOG_FORMAT = "%as,%cn"
DATE_FORMAT = "%Y-%m-%d"


class GitLogExtractor:
    """Run ``git log`` and parse it into CommitRecords, newest first."""

    def __init__(self, repo_path, timeout_seconds: int = 60):
        self.repo_path = str(Path(repo_path).resolve())
        self.timeout_seconds = timeout_seconds

    def extract(self) -> list[CommitRecord]:
        raw = self._run_git_log()
        records = parse_log(raw)
        logger.info("Parsed %d commits from %s", len(records), self.repo_path)
        return records

    def _command(self) -> list[str]:
        return ["git", "-C", self.repo_path, "log", f"--format={LOG_FORMAT}"]

    def _run(self, cmd: list[str]) -> subprocess.CompletedProcess:
        logger.debug("Running %s", " ".join(cmd))
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self.timeout_seconds,
            )
        except FileNotFoundError:
            raise CommandExecutionError(cmd, "git executable not found")
        except subprocess.TimeoutExpired:
            raise CommandExecutionError(cmd, f"timed out after {self.timeout_seconds}s")

    def _has_commits(self) -> bool:
        """True when HEAD resolves; exit status 1 means an unborn branch.

        Decided from exit codes only, so it does not depend on the locale
        git prints its messages in.
        """
        cmd = ["git", "-C", self.repo_path, "rev-parse", "--verify", "--quiet", "HEAD"]
        result = self._run(cmd)
        if result.returncode == 0:
            return True
        if result.returncode == 1:
            return False
        raise CommandExecutionError(
            cmd, result.stderr.strip() or "non-zero exit", result.returncode
        )

    def _run_git_log(self) -> str:
        if not self._has_commits():
            logger.warning("Repository has no commits yet")
            return ""

        cmd = self._command()
        result = self._run(cmd)
        if result.returncode != 0:
            raise CommandExecutionError(
                cmd, result.stderr.strip() or "non-zero exit", result.returncode
            )
        return result.stdout


def parse_log(raw: str) -> list[CommitRecord]:
    """Parse ``%as,%cn`` lines into CommitRecords.

    The date never contains a comma, so each line is split on the first
    one only and the rest of the line is the author name. Blank lines are
    ignored.

    Raises:
        MalformedRecordError: If a line has no comma, an unparseable date
            or an empty author
    """
    records = []
    for line_number, line in enumerate(raw.splitlines(), start=1):
        if not line.strip():
            continue

        date_part, sep, author = line.partition(",")
        if not sep:
            raise MalformedRecordError(line_number, line, "expected '<date>,<author>'")

        try:
            commit_date = datetime.strptime(date_part.strip(), DATE_FORMAT).date()
        except ValueError:
            raise MalformedRecordError(line_number, line, f"could not parse date '{date_part}'")

        author = author.strip()
        if not author:
            raise MalformedRecordError(line_number, line, "empty author")

        records.append(CommitRecord(date=commit_date, author=author))

    return records
