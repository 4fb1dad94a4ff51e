"""Shared helpers for MoodLog CLI commands."""

from datetime import date

import click
from rich.console import Console
from rich.panel import Panel

from moodlog import dates
from moodlog.models import Mood

console = Console()


class MoodType(click.ParamType):
    """Click parameter accepting a mood number (1-5) or name."""

    name = "mood"

    def convert(self, value, param, ctx):
        if isinstance(value, Mood):
            return value
        try:
            return Mood.parse(str(value))
        except ValueError:
            names = ", ".join(m.name.lower().replace("_", "-") for m in Mood)
            self.fail(f"'{value}' is not a mood. Use 1-5 or one of: {names}", param, ctx)


class DateType(click.ParamType):
    """Click parameter accepting a YYYY-MM-DD date, 'today' or 'yesterday'."""

    name = "date"

    def convert(self, value, param, ctx):
        if isinstance(value, date):
            return value
        text = str(value).strip().lower()
        if text == "today":
            return dates.today()
        if text == "yesterday":
            return dates.add_days(dates.today(), -1)
        try:
            return dates.parse_date(text)
        except ValueError as e:
            self.fail(str(e), param, ctx)


MOOD = MoodType()
DATE = DateType()


def get_config() -> dict:
    """Load configuration, exiting with an error panel if it is invalid."""
    from moodlog.config import load_config
    from moodlog.errors import ConfigError

    try:
        return load_config()
    except ConfigError as e:
        print_error("Configuration error", e)
        raise SystemExit(1)


def get_store(config: dict):
    """Get the entry store for the configured database."""
    from moodlog.config import get_db_path
    from moodlog.db.store import SQLiteEntryStore
    from moodlog.errors import StorageError

    try:
        return SQLiteEntryStore(get_db_path(config))
    except StorageError as e:
        print_error("Storage error", e)
        raise SystemExit(1)


def print_error(title: str, error: Exception) -> None:
    """Print an error in a red panel."""
    console.print(Panel(
        f"[red]{error}[/red]",
        title=f"[bold red]{title}[/bold red]",
        border_style="red",
    ))


def mood_text(mood: Mood) -> str:
    """Mood as coloured emoji and label markup."""
    return f"{mood.emoji} [{mood.color}]{mood.label}[/]"
