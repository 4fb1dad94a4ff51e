"""CLI commands for MoodLog.

This package provides the command-line interface for logging moods,
browsing the calendar and viewing statistics.
"""

from moodlog.cli.main import cli, main

__all__ = ["cli", "main"]
