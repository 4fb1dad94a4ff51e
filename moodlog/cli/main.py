"""Main CLI entry point for MoodLog.

This module provides the main click group and registers the
entry, calendar, stats and config commands on it.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from moodlog.cli.calendar import calendar_view
from moodlog.cli.configure import init
from moodlog.cli.entries import delete, history, log, show
from moodlog.cli.stats import moods, stats

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="moodlog")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """MoodLog - a daily mood journal for your terminal.

    Record how you feel once a day, browse past days on a calendar
    and keep an eye on your averages and streaks.

    \b
    Quick Start:
      moodlog log good         # Log today's mood
      moodlog calendar         # This month at a glance
      moodlog stats            # Averages, streaks, distribution
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)


# Entry commands
cli.add_command(log)
cli.add_command(show)
cli.add_command(history)
cli.add_command(delete)

# Views
cli.add_command(calendar_view)
cli.add_command(stats)
cli.add_command(moods)

# Setup
cli.add_command(init)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
