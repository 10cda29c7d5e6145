"""Group commit records by author and month, and rank authors by commits.

All three functions are pure: they read the records once and build fresh
dicts/lists, so running them twice on the same input gives equal output.
"""

from collections import Counter, defaultdict
from typing import Iterable, Mapping

from .models import AuthorTotal, CommitRecord


def aggregate_monthly(records: Iterable[CommitRecord]) -> dict[str, dict[str, int]]:
    """Count commits per ``(author, "YYYY-MM")``.

    Returns ``{author: {month: count}}``. Only months in which the author
    committed appear, so every count is at least 1 and an author's counts
    sum to their total.
    """
    monthly: dict[str, dict[str, int]] = defaultdict(dict)
    for record in records:
        months = monthly[record.author]
        months[record.month] = months.get(record.month, 0) + 1
    return dict(monthly)


def aggregate_totals(records: Iterable[CommitRecord]) -> dict[str, int]:
    """Count commits per author. The values sum to the number of records."""
    return dict(Counter(record.author for record in records))


def top_n_authors(totals: Mapping[str, int], n: int) -> list[AuthorTotal]:
    """Return the ``n`` authors with the most commits, in ascending order.

    Ascending order puts the biggest contributor last, which is the top
    bar of a horizontal bar chart. Equal counts are ordered by descending
    author name, so when a tie straddles the cut the alphabetically first
    names are the ones kept.

    Raises:
        ValueError: If ``n`` is negative
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return []

    by_name = sorted(totals.items(), key=lambda item: item[0], reverse=True)
    ranked = sorted(by_name, key=lambda item: item[1])  # stable
    return [AuthorTotal(author=author, count=count) for author, count in ranked[-n:]]
