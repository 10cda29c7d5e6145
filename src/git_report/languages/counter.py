"""Count code, comment and blank lines per language in a directory tree."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..logging_config import get_logger
from .languages import LanguageConfig, detect_language

logger = get_logger(__name__)

# pruned even when a caller supplies its own exclude list
ALWAYS_EXCLUDED = frozenset({".git"})


@dataclass
class LineCounts:
    code: int = 0
    comments: int = 0
    blanks: int = 0

    @property
    def lines(self) -> int:
        return self.code + self.comments + self.blanks


@dataclass
class LanguageStats:
    name: str
    files: int = 0
    code: int = 0
    comments: int = 0
    blanks: int = 0

    @property
    def lines(self) -> int:
        return self.code + self.comments + self.blanks

    def add(self, counts: LineCounts) -> None:
        self.files += 1
        self.code += counts.code
        self.comments += counts.comments
        self.blanks += counts.blanks


def count_lines(text: str, language: LanguageConfig) -> LineCounts:
    """Classify each line of *text* as code, comment or blank.

    A line that only opens, continues or closes a block comment is a
    comment line. A line with code before a comment marker counts as code.
    """
    counts = LineCounts()
    block_end: Optional[str] = None

    for raw_line in text.splitlines():
        line = raw_line.strip()

        if block_end is not None:
            counts.comments += 1
            if block_end in line:
                block_end = None
            continue

        if not line:
            counts.blanks += 1
            continue

        # block markers first: Lua's "--[[" also starts with its line marker
        opened = _opening_block(line, language)
        if opened is not None:
            start, end = opened
            counts.comments += 1
            if end not in line[len(start):]:
                block_end = end
            continue

        if any(line.startswith(marker) for marker in language.line_comments):
            counts.comments += 1
            continue

        counts.code += 1

    return counts


def _opening_block(line: str, language: LanguageConfig) -> Optional[tuple[str, str]]:
    for start, end in language.block_comments:
        if line.startswith(start):
            return start, end
    return None


def iter_source_files(root: Path, exclude_dirs: Iterable[str] = ()) -> Iterator[Path]:
    """Yield files under *root*, pruning excluded directory names and ``.git``."""
    excluded = ALWAYS_EXCLUDED.union(exclude_dirs)
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        for filename in sorted(filenames):
            yield Path(dirpath) / filename


def collect_language_stats(root, exclude_dirs: Iterable[str] = ()) -> list[LanguageStats]:
    """Count lines for every recognised file under *root*.

    Unknown file types and unreadable files are skipped.

    Returns:
        One LanguageStats per language found, largest (by total lines)
        first; equal totals are ordered by name
    """
    stats: dict[str, LanguageStats] = {}

    for path in iter_source_files(Path(root), exclude_dirs):
        language = detect_language(path)
        if language is None:
            continue

        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Skipping unreadable file %s: %s", path, e)
            continue

        entry = stats.setdefault(language.name, LanguageStats(name=language.name))
        entry.add(count_lines(text, language))

    result = sorted(stats.values(), key=lambda s: (-s.lines, s.name))
    logger.info("Counted %d languages under %s", len(result), root)
    return result
