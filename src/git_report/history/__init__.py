"""Commit history: extraction from git and aggregation by author and month."""

from .aggregation import aggregate_monthly, aggregate_totals, top_n_authors
from .git_extractor import GitLogExtractor, parse_log
from .models import AuthorTotal, CommitRecord

__all__ = [
    "AuthorTotal",
    "CommitRecord",
    "GitLogExtractor",
    "aggregate_monthly",
    "aggregate_totals",
    "parse_log",
    "top_n_authors",
]
