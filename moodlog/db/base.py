"""Entry store interface for MoodLog."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from moodlog.errors import StorageError
from moodlog.models import MoodEntry


class EntryStore(ABC):
    """Abstract base class for mood entry storage.

    A store holds at most one entry per date. Writing an entry for a date
    that already has one replaces it. Implementations raise
    :class:`StorageError` on failure; an empty store reads as ``[]``.
    """

    @abstractmethod
    def upsert(self, entry: MoodEntry) -> None:
        """Save an entry, replacing any existing entry for its date.

        Args:
            entry: Entry to save.

        Raises:
            StorageError: If the entry could not be written.
        """
        pass

    @abstractmethod
    def read_all(self) -> list[MoodEntry]:
        """Get every entry.

        Returns:
            All entries ordered by date, oldest first.

        Raises:
            StorageError: If the entries could not be read.
        """
        pass

    @abstractmethod
    def read_one(self, day: date) -> Optional[MoodEntry]:
        """Get the entry for a date.

        Args:
            day: Date to look up.

        Returns:
            The entry, or None if the date has none.

        Raises:
            StorageError: If the store could not be read.
        """
        pass

    @abstractmethod
    def delete(self, day: date) -> bool:
        """Remove the entry for a date.

        Args:
            day: Date whose entry to remove.

        Returns:
            True if an entry was removed, False if there was none.

        Raises:
            StorageError: If the store could not be written.
        """
        pass

    def read_range(self, start: date, end: date) -> list[MoodEntry]:
        """Get entries with ``start <= date <= end``, oldest first."""
        if end < start:
            raise ValueError(f"Range end {end} is before start {start}")
        return [entry for entry in self.read_all() if start <= entry.date <= end]
