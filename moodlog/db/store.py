"""SQLite entry store for MoodLog."""

import logging
import sqlite3
from datetime import date, datetime
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from moodlog.db.base import EntryStore
from moodlog.errors import StorageError
from moodlog.models import MoodEntry

logger = logging.getLogger(__name__)


class SQLiteEntryStore(EntryStore):
    """SQLite-based store keeping one mood entry per date."""

    REQUIRED_TABLES = ["moods"]

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.

        Raises:
            StorageError: If the database cannot be created.
        """
        self.db_path = Path(db_path)
        try:
            self._ensure_db_dir()
            self._init_schema()
        except (OSError, sqlite3.Error) as e:
            logger.error("Failed to open mood database %s: %s", self.db_path, e)
            raise StorageError(f"Cannot open database {self.db_path}: {e}") from e

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS moods (
                    date TEXT PRIMARY KEY,
                    mood INTEGER NOT NULL CHECK (mood BETWEEN 1 AND 5),
                    timestamp TEXT NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> MoodEntry:
        try:
            return MoodEntry(
                date=row["date"],
                mood=row["mood"],
                timestamp=datetime.fromisoformat(row["timestamp"]),
            )
        except (ValidationError, ValueError) as e:
            raise StorageError(f"Corrupt mood entry for {row['date']!r}: {e}") from e

    def get_tables(self) -> list[str]:
        """Get list of all tables in the database."""
        conn = self._get_connection()
        try:
            cursor = conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'"
            )
            return [row["name"] for row in cursor.fetchall()]
        finally:
            conn.close()

    def upsert(self, entry: MoodEntry) -> None:
        """Save an entry, replacing any existing entry for its date.

        Args:
            entry: Entry to save.
        """
        try:
            conn = self._get_connection()
            try:
                conn.execute(
                    """
                    INSERT OR REPLACE INTO moods (date, mood, timestamp)
                    VALUES (?, ?, ?)
                    """,
                    (
                        entry.date.isoformat(),
                        int(entry.mood),
                        entry.timestamp.isoformat(),
                    ),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to save mood for %s: %s", entry.date, e)
            raise StorageError(f"Failed to save mood for {entry.date}: {e}") from e

        logger.debug("Saved mood %d for %s", entry.mood, entry.date)

    def read_all(self) -> list[MoodEntry]:
        """Get every entry, oldest first."""
        try:
            conn = self._get_connection()
            try:
                rows = conn.execute(
                    "SELECT date, mood, timestamp FROM moods ORDER BY date ASC"
                ).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to read mood entries: %s", e)
            raise StorageError(f"Failed to read mood entries: {e}") from e

        return [self._row_to_entry(row) for row in rows]

    def read_one(self, day: date) -> Optional[MoodEntry]:
        """Get the entry for a date, or None."""
        try:
            conn = self._get_connection()
            try:
                row = conn.execute(
                    "SELECT date, mood, timestamp FROM moods WHERE date = ?",
                    (day.isoformat(),),
                ).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to read mood for %s: %s", day, e)
            raise StorageError(f"Failed to read mood for {day}: {e}") from e

        return self._row_to_entry(row) if row else None

    def read_range(self, start: date, end: date) -> list[MoodEntry]:
        """Get entries between two dates inclusive, oldest first."""
        if end < start:
            raise ValueError(f"Range end {end} is before start {start}")
        try:
            conn = self._get_connection()
            try:
                rows = conn.execute(
                    """
                    SELECT date, mood, timestamp FROM moods
                    WHERE date >= ? AND date <= ?
                    ORDER BY date ASC
                    """,
                    (start.isoformat(), end.isoformat()),
                ).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to read moods %s..%s: %s", start, end, e)
            raise StorageError(f"Failed to read mood entries: {e}") from e

        return [self._row_to_entry(row) for row in rows]

    def delete(self, day: date) -> bool:
        """Remove the entry for a date."""
        try:
            conn = self._get_connection()
            try:
                cursor = conn.execute(
                    "DELETE FROM moods WHERE date = ?", (day.isoformat(),)
                )
                conn.commit()
                removed = cursor.rowcount > 0
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to delete mood for %s: %s", day, e)
            raise StorageError(f"Failed to delete mood for {day}: {e}") from e

        if removed:
            logger.debug("Deleted mood for %s", day)
        return removed

