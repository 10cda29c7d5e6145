"""Data models for commit history and its aggregates."""

from dataclasses import dataclass
from datetime import date

# year-month bucket key, e.g. "2024-02"; sorts chronologically as a string
MONTH_FORMAT = "%Y-%m"


@dataclass(frozen=True)
class CommitRecord:
    date: date
    author: str

    @property
    def month(self) -> str:
        return self.date.strftime(MONTH_FORMAT)


@dataclass(frozen=True)
class AuthorTotal:
    author: str
    count: int  # commits across all months
