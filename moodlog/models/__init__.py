"""Data models for MoodLog."""

from moodlog.models.mood import Mood, MoodEntry
from moodlog.models.stats import MoodStats, TrendPoint

__all__ = [
    "Mood",
    "MoodEntry",
    "MoodStats",
    "TrendPoint",
]
