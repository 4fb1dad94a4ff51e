"""Mood statistics engine."""

from moodlog.stats.engine import (
    DuplicateEntryError,
    calculate_average,
    calculate_current_streak,
    calculate_distribution,
    calculate_longest_streak,
    compute_stats,
    ensure_unique_dates,
    mood_trend,
)

__all__ = [
    "DuplicateEntryError",
    "calculate_average",
    "calculate_current_streak",
    "calculate_distribution",
    "calculate_longest_streak",
    "compute_stats",
    "ensure_unique_dates",
    "mood_trend",
]
