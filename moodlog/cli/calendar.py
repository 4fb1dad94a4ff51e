"""Calendar command for MoodLog CLI.

Shows one month as a grid with the logged mood of each day.
"""

import calendar as cal
import re
from datetime import date
from typing import Optional

import click
from rich.table import Table

from moodlog import dates
from moodlog.cli.common import console, get_config, get_store, mood_text, print_error
from moodlog.errors import StorageError
from moodlog.models import MoodEntry

_MONTH_RE = re.compile(r"^([0-9]{4})-([0-9]{2})$")

WEEKDAY_NAMES = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def parse_month(text: str) -> tuple[int, int]:
    """Parse a ``YYYY-MM`` string into ``(year, month)``.

    Raises:
        ValueError: If the text is not a valid month.
    """
    match = _MONTH_RE.match(text.strip())
    if not match:
        raise ValueError(f"Invalid month '{text}': expected YYYY-MM")
    year, month = int(match.group(1)), int(match.group(2))
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month '{text}': month must be 01-12")
    return year, month


def build_month_grid(year: int, month: int, week_start: str = "monday") -> list[list[Optional[date]]]:
    """Lay out a month as weeks of seven slots.

    Slots outside the month are None.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        week_start: ``"monday"`` or ``"sunday"``.

    Returns:
        List of weeks, each a list of seven dates or None.
    """
    first_weekday = cal.SUNDAY if week_start == "sunday" else cal.MONDAY
    weeks = cal.Calendar(firstweekday=first_weekday).monthdatescalendar(year, month)
    return [
        [day if day.month == month else None for day in week]
        for week in weeks
    ]


def weekday_headers(week_start: str = "monday") -> list[str]:
    if week_start == "sunday":
        return WEEKDAY_NAMES[6:] + WEEKDAY_NAMES[:6]
    return list(WEEKDAY_NAMES)


def _render_day(day: date, entry: Optional[MoodEntry], today: date) -> str:
    number = f"[bold underline]{day.day}[/]" if day == today else str(day.day)
    if entry is None:
        return f"{number}\n[dim]·[/dim]"
    return f"{number}\n{entry.emoji}"


@click.command("calendar")
@click.option(
    "--month", "-m",
    default=None,
    help="Month to show as YYYY-MM. Defaults to the current month.",
)
def calendar_view(month: Optional[str]) -> None:
    """Show a month of moods as a calendar.

    \b
    Examples:
      moodlog calendar
      moodlog calendar --month 2024-01
    """
    today = dates.today()
    if month:
        try:
            year, month_number = parse_month(month)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="'--month'")
    else:
        year, month_number = today.year, today.month

    config = get_config()
    week_start = config["display"]["week_start"]
    store = get_store(config)

    days = dates.month_days(year, month_number)
    try:
        entries = store.read_range(days[0], days[-1])
    except StorageError as e:
        print_error("Failed to read moods", e)
        raise SystemExit(1)

    by_date = {entry.date: entry for entry in entries}

    table = Table(
        title=f"{cal.month_name[month_number]} {year}",
        show_header=True,
        header_style="bold cyan",
        show_lines=True,
    )
    for name in weekday_headers(week_start):
        table.add_column(name, justify="center", width=5)

    for week in build_month_grid(year, month_number, week_start):
        table.add_row(*[
            _render_day(day, by_date.get(day), today) if day else ""
            for day in week
        ])

    console.print(table)

    if entries:
        moods = sorted({entry.mood for entry in entries}, reverse=True)
        legend = "  ".join(mood_text(mood) for mood in moods)
        console.print(f"\n[dim]Logged {len(entries)} of {len(days)} days[/dim]   {legend}")
    else:
        console.print("\n[dim]No moods logged this month[/dim]")
