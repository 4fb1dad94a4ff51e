"""In-memory entry store for tests and dry runs."""

from datetime import date
from typing import Optional

from moodlog.db.base import EntryStore
from moodlog.models import MoodEntry


class InMemoryEntryStore(EntryStore):
    """Entry store backed by a dict keyed by date.

    Nothing is persisted; the store lives as long as the instance.
    """

    def __init__(self, entries: Optional[list[MoodEntry]] = None):
        self._entries: dict[date, MoodEntry] = {}
        for entry in entries or []:
            self.upsert(entry)

    def upsert(self, entry: MoodEntry) -> None:
        self._entries[entry.date] = entry

    def read_all(self) -> list[MoodEntry]:
        return [self._entries[day] for day in sorted(self._entries)]

    def read_one(self, day: date) -> Optional[MoodEntry]:
        return self._entries.get(day)

    def delete(self, day: date) -> bool:
        return self._entries.pop(day, None) is not None
