"""
git-report - static HTML reports of a git repository's activity.

Shells out to git for the commit log, counts commits per author and month,
counts lines of code per language, and writes one self-contained HTML page
with two plotly bar charts and a language table.
"""

__version__ = "0.1.0"

from .api import generate_report
from .history import AuthorTotal, CommitRecord, aggregate_monthly, aggregate_totals, top_n_authors

__all__ = [
    "generate_report",
    "AuthorTotal",
    "CommitRecord",
    "aggregate_monthly",
    "aggregate_totals",
    "top_n_authors",
]
