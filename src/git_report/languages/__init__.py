"""Language composition of a working tree."""

from .counter import LanguageStats, LineCounts, collect_language_stats, count_lines
from .languages import LANGUAGES, LanguageConfig, detect_language

__all__ = [
    "LANGUAGES",
    "LanguageConfig",
    "LanguageStats",
    "LineCounts",
    "collect_language_stats",
    "count_lines",
    "detect_language",
]
