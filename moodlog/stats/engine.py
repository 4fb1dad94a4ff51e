"""Mood statistics and streak calculations.

All functions here are pure: they read only their arguments and, when no
``today`` is given, the local calendar date.
"""

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import date
from typing import Optional

from moodlog import dates
from moodlog.models import Mood, MoodEntry, MoodStats, TrendPoint

logger = logging.getLogger(__name__)


class DuplicateEntryError(ValueError):
    """Raised when more than one entry exists for the same date."""

    def __init__(self, duplicate_dates: list[date]):
        self.duplicate_dates = duplicate_dates
        joined = ", ".join(d.isoformat() for d in duplicate_dates)
        super().__init__(f"Duplicate mood entries for: {joined}")


def ensure_unique_dates(entries: Iterable[MoodEntry]) -> list[MoodEntry]:
    """Return the entries as a list, rejecting repeated dates.

    Raises:
        DuplicateEntryError: If two entries share a date.
    """
    entries = list(entries)
    counts = Counter(entry.date for entry in entries)
    duplicates = sorted(day for day, count in counts.items() if count > 1)
    if duplicates:
        raise DuplicateEntryError(duplicates)
    return entries


def calculate_average(entries: list[MoodEntry]) -> float:
    """Arithmetic mean of the moods, 0.0 for no entries."""
    if not entries:
        return 0.0
    return sum(int(entry.mood) for entry in entries) / len(entries)


def calculate_distribution(entries: list[MoodEntry]) -> dict[Mood, int]:
    """Count entries per mood. Moods that never occur are left out."""
    return dict(Counter(entry.mood for entry in entries))


def calculate_current_streak(
    entries: Iterable[MoodEntry],
    today: Optional[date] = None,
) -> int:
    """Count consecutive logged days ending at today or yesterday.

    The walk starts at the most recent entry and moves back one day per
    match. A latest entry older than yesterday means no active streak.

    Args:
        entries: Entries in any order, unique by date.
        today: Evaluation date. Defaults to the local date.

    Returns:
        Length of the current streak in days.
    """
    entries = ensure_unique_dates(entries)
    if not entries:
        return 0

    today = today or dates.today()
    ordered = sorted(entries, key=lambda e: e.date, reverse=True)
    latest = ordered[0].date

    if latest not in (today, dates.add_days(today, -1)):
        return 0

    streak = 0
    expected = latest
    for entry in ordered:
        if entry.date == expected:
            streak += 1
            expected = dates.add_days(expected, -1)
        elif dates.days_between(entry.date, expected) > 0:
            break

    return streak


def calculate_longest_streak(entries: Iterable[MoodEntry]) -> int:
    """Length of the longest run of consecutive logged days.

    Args:
        entries: Entries in any order, unique by date.

    Returns:
        Longest run in days; 0 only when there are no entries.
    """
    entries = ensure_unique_dates(entries)
    if not entries:
        return 0

    ordered = sorted(entries, key=lambda e: e.date)

    temp_streak = 1
    longest_streak = 1
    for previous, current in zip(ordered, ordered[1:]):
        if dates.days_between(previous.date, current.date) == 1:
            temp_streak += 1
        else:
            longest_streak = max(longest_streak, temp_streak)
            temp_streak = 1

    return max(longest_streak, temp_streak)


def compute_stats(
    entries: Iterable[MoodEntry],
    today: Optional[date] = None,
) -> MoodStats:
    """Reduce a set of mood entries to a statistics snapshot.

    Args:
        entries: Entries in any order. Dates must be unique.
        today: Evaluation date for the current streak. Defaults to the
            local date.

    Returns:
        MoodStats for the entries. Empty input gives all zeros.

    Raises:
        DuplicateEntryError: If two entries share a date.
    """
    entries = ensure_unique_dates(entries)
    if not entries:
        return MoodStats()

    stats = MoodStats(
        average_mood=calculate_average(entries),
        total_entries=len(entries),
        mood_distribution=calculate_distribution(entries),
        current_streak=calculate_current_streak(entries, today=today),
        longest_streak=calculate_longest_streak(entries),
    )
    logger.debug(
        "Computed stats over %d entries: current=%d longest=%d",
        stats.total_entries,
        stats.current_streak,
        stats.longest_streak,
    )
    return stats


def mood_trend(
    entries: Iterable[MoodEntry],
    limit: Optional[int] = None,
) -> list[TrendPoint]:
    """Chronological mood series.

    Args:
        entries: Entries in any order.
        limit: Keep only the most recent ``limit`` points.

    Returns:
        Trend points ordered by date, indexed from 1.
    """
    ordered = sorted(ensure_unique_dates(entries), key=lambda e: e.date)
    if limit is not None:
        ordered = ordered[-limit:] if limit > 0 else []

    return [
        TrendPoint(index=i, date=entry.date, mood=entry.mood)
        for i, entry in enumerate(ordered, 1)
    ]
