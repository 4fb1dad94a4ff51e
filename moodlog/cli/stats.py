"""Statistics commands for MoodLog CLI.

Displays average mood, streaks, mood distribution and the recent trend.
"""

import click
from rich.panel import Panel
from rich.table import Table

from moodlog import dates
from moodlog.cli.common import console, get_config, get_store, mood_text, print_error
from moodlog.errors import StorageError
from moodlog.models import Mood, MoodStats, TrendPoint
from moodlog.stats import DuplicateEntryError, compute_stats, mood_trend

BAR_WIDTH = 30


def average_mood_face(average: float) -> Mood:
    """Mood closest to an average rating."""
    # round half up, 3.5 reads as GOOD
    return Mood(min(5, max(1, int(average + 0.5))))


def _bar(share: float, color: str) -> str:
    filled = round(share / 100 * BAR_WIDTH)
    return f"[{color}]{'█' * filled}[/][dim]{'░' * (BAR_WIDTH - filled)}[/dim]"


def _summary_panel(stats: MoodStats) -> Panel:
    face = average_mood_face(stats.average_mood)
    streak_color = "green" if stats.current_streak > 0 else "dim"
    lines = [
        f"[bold]Average Mood:[/bold]    {face.emoji}  {stats.average_mood:.1f} / 5",
        f"[bold]Total Entries:[/bold]   {stats.total_entries}",
        f"[bold]Current Streak:[/bold]  [{streak_color}]{stats.current_streak} days[/{streak_color}]",
        f"[bold]Longest Streak:[/bold]  {stats.longest_streak} days",
    ]
    return Panel("\n".join(lines), title="[bold]Mood Summary[/bold]", border_style="cyan")


def _distribution_table(stats: MoodStats) -> Table:
    table = Table(
        title="Mood Distribution",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Mood")
    table.add_column("Count", justify="right")
    table.add_column("Share", justify="right")
    table.add_column("")

    percentages = stats.distribution_percentages()
    for mood in sorted(stats.mood_distribution, reverse=True):
        share = percentages[mood]
        table.add_row(
            mood_text(mood),
            str(stats.mood_distribution[mood]),
            f"{share:.0f}%",
            _bar(share, mood.color),
        )
    return table


def _trend_table(points: list[TrendPoint]) -> Table:
    table = Table(
        title=f"Recent Trend (last {len(points)} entries)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("", no_wrap=True)

    for point in points:
        table.add_row(
            point.date.isoformat(),
            mood_text(point.mood),
            f"[{point.mood.color}]{'●' * int(point.mood)}[/]",
        )
    return table


@click.command()
@click.option(
    "--json", "as_json",
    is_flag=True,
    default=False,
    help="Print the statistics as JSON.",
)
def stats(as_json: bool) -> None:
    """Show mood statistics.

    Average mood, total entries, current and longest streak,
    how often each mood was logged and the recent trend.

    \b
    Examples:
      moodlog stats
      moodlog stats --json
    """
    config = get_config()
    store = get_store(config)

    try:
        entries = store.read_all()
        mood_stats = compute_stats(entries, today=dates.today())
        trend = mood_trend(entries, limit=config["display"]["trend_days"])
    except (StorageError, DuplicateEntryError) as e:
        print_error("Failed to compute statistics", e)
        raise SystemExit(1)

    if as_json:
        click.echo(mood_stats.model_dump_json(indent=2))
        return

    if mood_stats.total_entries == 0:
        console.print(Panel(
            "[dim]No moods logged yet.[/dim]\n\n"
            "Start logging your moods to see statistics and trends!\n"
            "Run [cyan]moodlog log <1-5>[/cyan] to add today's mood.",
            title="[bold]Mood Statistics[/bold]",
            border_style="dim",
        ))
        return

    console.print(_summary_panel(mood_stats))
    console.print(_distribution_table(mood_stats))
    console.print(_trend_table(trend))


@click.command()
def moods() -> None:
    """List the mood scale.

    \b
    Examples:
      moodlog moods
    """
    table = Table(
        title="Mood Scale",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", justify="right", style="bold")
    table.add_column("Mood")
    table.add_column("Name", style="dim")

    for mood in Mood:
        table.add_row(str(int(mood)), mood_text(mood), mood.name.lower().replace("_", "-"))

    console.print(table)
