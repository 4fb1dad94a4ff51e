"""Entry commands for MoodLog CLI.

Handles logging a mood, showing a single day, listing history
and deleting entries.
"""

from datetime import date
from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from moodlog import dates
from moodlog.cli.common import DATE, MOOD, console, get_config, get_store, mood_text, print_error
from moodlog.errors import StorageError
from moodlog.models import Mood, MoodEntry
from moodlog.stats import DuplicateEntryError, compute_stats


@click.command()
@click.argument("mood", type=MOOD)
@click.option(
    "--date", "-d", "day",
    type=DATE,
    default=None,
    help="Date to log for (YYYY-MM-DD, 'today' or 'yesterday'). Defaults to today.",
)
def log(mood: Mood, day: Optional[date]) -> None:
    """Log your mood for a day.

    MOOD is a number from 1 (terrible) to 5 (amazing) or a mood name.
    Logging again for the same day replaces the earlier entry.

    \b
    Examples:
      moodlog log 4
      moodlog log not-great
      moodlog log amazing --date 2024-01-31
    """
    today = dates.today()
    day = day or today
    if day > today:
        raise click.BadParameter("Cannot log a mood for a future date.", param_hint="'--date'")

    config = get_config()
    store = get_store(config)

    try:
        replaced = store.read_one(day)
        store.upsert(MoodEntry(date=day, mood=mood))
        stats = compute_stats(store.read_all(), today=today)
    except (StorageError, DuplicateEntryError) as e:
        print_error("Failed to save mood", e)
        raise SystemExit(1)

    verb = "Updated" if replaced is not None else "Logged"
    console.print(Panel(
        f"[bold]{mood.emoji}  {mood.label}[/bold]\n\n"
        f"{mood.feedback}",
        title=f"[bold]{verb} mood for {day.isoformat()}[/bold]",
        border_style=mood.color,
    ))

    if stats.current_streak > 0:
        days_word = "day" if stats.current_streak == 1 else "days"
        console.print(f"[bold]🔥 Current streak:[/bold] {stats.current_streak} {days_word}")


@click.command()
@click.argument("day", type=DATE, required=False)
def show(day: Optional[date]) -> None:
    """Show the mood logged for a day.

    DAY defaults to today.

    \b
    Examples:
      moodlog show
      moodlog show yesterday
      moodlog show 2024-01-31
    """
    day = day or dates.today()

    config = get_config()
    store = get_store(config)

    try:
        entry = store.read_one(day)
    except StorageError as e:
        print_error("Failed to read mood", e)
        raise SystemExit(1)

    if entry is None:
        console.print(Panel(
            "[dim]No mood logged for this day.[/dim]\n\n"
            "Run [cyan]moodlog log <1-5>[/cyan] to add one.",
            title=f"[bold]{day.isoformat()}[/bold]",
            border_style="dim",
        ))
        return

    console.print(Panel(
        f"[bold]{entry.emoji}  {entry.label}[/bold] ({int(entry.mood)}/5)\n\n"
        f"[dim]Logged at {entry.timestamp.strftime('%Y-%m-%d %H:%M')}[/dim]",
        title=f"[bold]{day.isoformat()}[/bold]",
        border_style=entry.mood.color,
    ))


@click.command()
@click.option(
    "--days",
    type=click.IntRange(min=1),
    default=None,
    help="Only show the last N days.",
)
def history(days: Optional[int]) -> None:
    """List logged moods, newest first.

    \b
    Examples:
      moodlog history           # Everything
      moodlog history --days 7  # Last week
    """
    config = get_config()
    store = get_store(config)

    try:
        if days is not None:
            today = dates.today()
            entries = store.read_range(dates.add_days(today, -(days - 1)), today)
        else:
            entries = store.read_all()
    except StorageError as e:
        print_error("Failed to read moods", e)
        raise SystemExit(1)

    if not entries:
        console.print(Panel(
            "[dim]No moods logged yet[/dim]",
            title="[bold]Mood History[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title="Mood History",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="dim")
    table.add_column("Day")
    table.add_column("Mood")
    table.add_column("Rating", justify="right")

    for entry in reversed(entries):
        table.add_row(
            entry.date.isoformat(),
            entry.date.strftime("%a"),
            mood_text(entry.mood),
            f"{int(entry.mood)}/5",
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(entries)} entries[/dim]")


@click.command()
@click.argument("day", type=DATE)
@click.option("--yes", "-y", is_flag=True, default=False, help="Skip confirmation.")
def delete(day: date, yes: bool) -> None:
    """Delete the mood logged for a day.

    \b
    Examples:
      moodlog delete 2024-01-31
      moodlog delete yesterday --yes
    """
    config = get_config()
    store = get_store(config)

    try:
        entry = store.read_one(day)
        if entry is None:
            console.print(f"[yellow]No mood logged for {day.isoformat()}[/yellow]")
            return

        if not yes and not click.confirm(
            f"Delete {entry.emoji} {entry.label} for {day.isoformat()}?"
        ):
            console.print("[dim]Cancelled[/dim]")
            return

        store.delete(day)
    except StorageError as e:
        print_error("Failed to delete mood", e)
        raise SystemExit(1)

    console.print(f"[green]✓ Deleted mood for {day.isoformat()}[/green]")
