"""Mood entry storage for MoodLog."""

from moodlog.db.base import EntryStore
from moodlog.db.memory import InMemoryEntryStore
from moodlog.db.store import SQLiteEntryStore
from moodlog.errors import StorageError

__all__ = [
    "EntryStore",
    "InMemoryEntryStore",
    "SQLiteEntryStore",
    "StorageError",
]
