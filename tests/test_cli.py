"""Tests for the MoodLog command line."""

import json
import re
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner

from moodlog import dates
from moodlog.cli import cli
from moodlog.cli.calendar import build_month_grid, parse_month, weekday_headers
from moodlog.cli.stats import average_mood_face
from moodlog.db import SQLiteEntryStore
from moodlog.models import Mood, MoodEntry

TODAY = date(2024, 3, 15)

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    """Isolated MoodLog home with a fixed current date."""
    monkeypatch.setenv("MOODLOG_HOME", str(tmp_path))
    monkeypatch.setattr(dates, "today", lambda: TODAY)
    return tmp_path


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def open_store(home: Path) -> SQLiteEntryStore:
    return SQLiteEntryStore(home / "moodlog.db")


def plain(result) -> str:
    """CLI output without terminal colour codes."""
    return ANSI_RE.sub("", result.output)


class TestCommandGroup:

    def test_all_commands_registered(self):
        assert sorted(cli.commands) == [
            "calendar", "delete", "history", "init", "log", "moods", "show", "stats",
        ]

    def test_help_lists_commands(self, runner: CliRunner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0, result.output
        for name in cli.commands:
            assert name in result.output


class TestLogCommand:

    def test_log_today(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["log", "4"])

        assert result.exit_code == 0, result.output
        assert "Logged mood for 2024-03-15" in plain(result)
        entry = open_store(home).read_one(TODAY)
        assert entry is not None
        assert entry.mood is Mood.GOOD

    def test_log_by_name_and_date(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["log", "not-great", "--date", "2024-03-01"])

        assert result.exit_code == 0, result.output
        assert open_store(home).read_one(date(2024, 3, 1)).mood is Mood.NOT_GREAT

    def test_log_again_replaces(self, home: Path, runner: CliRunner):
        runner.invoke(cli, ["log", "2"])
        result = runner.invoke(cli, ["log", "5"])

        assert result.exit_code == 0, result.output
        assert "Updated mood for 2024-03-15" in plain(result)
        entries = open_store(home).read_all()
        assert len(entries) == 1
        assert entries[0].mood is Mood.AMAZING

    def test_log_reports_streak(self, home: Path, runner: CliRunner):
        store = open_store(home)
        store.upsert(MoodEntry(date="2024-03-13", mood=3))
        store.upsert(MoodEntry(date="2024-03-14", mood=3))

        result = runner.invoke(cli, ["log", "3"])

        assert result.exit_code == 0, result.output
        assert "Current streak: 3 days" in plain(result)

    @pytest.mark.parametrize("mood", ["0", "6", "fine"])
    def test_log_rejects_unknown_mood(self, home: Path, runner: CliRunner, mood: str):
        result = runner.invoke(cli, ["log", mood])

        assert result.exit_code == 2
        assert open_store(home).read_all() == []

    def test_log_rejects_bad_date(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["log", "3", "--date", "03/01/2024"])

        assert result.exit_code == 2

    def test_log_rejects_future_date(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["log", "3", "--date", "2024-03-16"])

        assert result.exit_code == 2
        assert open_store(home).read_all() == []

    def test_storage_failure_exits_with_error(self, home: Path, runner: CliRunner):
        (home / "config.toml").write_text(f'[storage]\ndb_path = "{home}"\n')

        result = runner.invoke(cli, ["log", "3"])

        assert result.exit_code == 1
        assert "Storage error" in plain(result)


class TestShowHistoryDelete:

    def test_show_missing_day(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["show"])

        assert result.exit_code == 0, result.output
        assert "No mood logged" in plain(result)

    def test_show_yesterday(self, home: Path, runner: CliRunner):
        open_store(home).upsert(MoodEntry(date="2024-03-14", mood=1))

        result = runner.invoke(cli, ["show", "yesterday"])

        assert result.exit_code == 0, result.output
        assert "Terrible" in plain(result)

    def test_show_trims_typed_date(self, home: Path, runner: CliRunner):
        open_store(home).upsert(MoodEntry(date="2024-03-14", mood=4))

        result = runner.invoke(cli, ["show", " 2024-03-14 "])

        assert result.exit_code == 0, result.output
        assert "Good" in plain(result)

    def test_history_newest_first(self, home: Path, runner: CliRunner):
        store = open_store(home)
        store.upsert(MoodEntry(date="2024-03-01", mood=2))
        store.upsert(MoodEntry(date="2024-03-10", mood=4))

        result = runner.invoke(cli, ["history"])

        assert result.exit_code == 0, result.output
        assert plain(result).index("2024-03-10") < plain(result).index("2024-03-01")
        assert "Total: 2 entries" in plain(result)

    def test_history_days_window(self, home: Path, runner: CliRunner):
        store = open_store(home)
        store.upsert(MoodEntry(date="2024-03-01", mood=2))
        store.upsert(MoodEntry(date="2024-03-14", mood=4))

        result = runner.invoke(cli, ["history", "--days", "7"])

        assert result.exit_code == 0, result.output
        assert "2024-03-14" in plain(result)
        assert "2024-03-01" not in plain(result)

    def test_history_empty(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["history"])

        assert result.exit_code == 0, result.output
        assert "No moods logged yet" in plain(result)

    def test_delete(self, home: Path, runner: CliRunner):
        open_store(home).upsert(MoodEntry(date="2024-03-14", mood=1))

        result = runner.invoke(cli, ["delete", "2024-03-14", "--yes"])

        assert result.exit_code == 0, result.output
        assert open_store(home).read_one(date(2024, 3, 14)) is None

    def test_delete_asks_for_confirmation(self, home: Path, runner: CliRunner):
        open_store(home).upsert(MoodEntry(date="2024-03-14", mood=1))

        result = runner.invoke(cli, ["delete", "2024-03-14"], input="n\n")

        assert result.exit_code == 0, result.output
        assert "Cancelled" in plain(result)
        assert open_store(home).read_one(date(2024, 3, 14)) is not None


class TestStatsCommand:

    def test_stats_empty(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["stats"])

        assert result.exit_code == 0, result.output
        assert "No moods logged yet" in plain(result)

    def test_stats_json(self, home: Path, runner: CliRunner):
        store = open_store(home)
        for day, mood in [("2024-03-13", 3), ("2024-03-14", 5), ("2024-03-15", 4), ("2024-03-01", 4)]:
            store.upsert(MoodEntry(date=day, mood=mood))

        result = runner.invoke(cli, ["stats", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["total_entries"] == 4
        assert data["average_mood"] == 4.0
        assert data["current_streak"] == 3
        assert data["longest_streak"] == 3
        assert sum(data["mood_distribution"].values()) == 4
        assert len(data["mood_distribution"]) == 3

    def test_stats_tables(self, home: Path, runner: CliRunner):
        store = open_store(home)
        store.upsert(MoodEntry(date="2024-03-14", mood=2))
        store.upsert(MoodEntry(date="2024-03-15", mood=4))

        result = runner.invoke(cli, ["stats"])

        assert result.exit_code == 0, result.output
        assert "Mood Summary" in plain(result)
        assert "Mood Distribution" in plain(result)
        assert "Recent Trend" in plain(result)

    def test_average_face(self):
        assert average_mood_face(0.0) is Mood.TERRIBLE
        assert average_mood_face(3.4) is Mood.OKAY
        assert average_mood_face(3.5) is Mood.GOOD
        assert average_mood_face(5.0) is Mood.AMAZING

    def test_moods(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["moods"])

        assert result.exit_code == 0, result.output
        for mood in Mood:
            assert mood.label in plain(result)


class TestCalendarCommand:

    def test_calendar_current_month(self, home: Path, runner: CliRunner):
        open_store(home).upsert(MoodEntry(date="2024-03-10", mood=5))

        result = runner.invoke(cli, ["calendar"])

        assert result.exit_code == 0, result.output
        assert "March 2024" in plain(result)
        assert "Logged 1 of 31 days" in plain(result)

    def test_calendar_other_month(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["calendar", "--month", "2024-02"])

        assert result.exit_code == 0, result.output
        assert "February 2024" in plain(result)
        assert "No moods logged this month" in plain(result)

    def test_calendar_bad_month(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["calendar", "--month", "2024-13"])

        assert result.exit_code == 2

    def test_parse_month(self):
        assert parse_month("2024-02") == (2024, 2)
        with pytest.raises(ValueError):
            parse_month("2024-2")
        with pytest.raises(ValueError):
            parse_month("２０２４-02")

    def test_month_grid_monday_start(self):
        grid = build_month_grid(2024, 3)

        # 1 March 2024 was a Friday
        assert grid[0] == [None, None, None, None, date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 3)]
        assert all(len(week) == 7 for week in grid)
        assert sum(day is not None for week in grid for day in week) == 31

    def test_month_grid_sunday_start(self):
        grid = build_month_grid(2024, 3, week_start="sunday")

        assert grid[0][5] == date(2024, 3, 1)
        assert weekday_headers("sunday")[0] == "Sun"


class TestConfigErrors:

    def test_invalid_config_exits(self, home: Path, runner: CliRunner):
        (home / "config.toml").write_text("[display\n")

        result = runner.invoke(cli, ["stats"])

        assert result.exit_code == 1
        assert "Configuration error" in plain(result)

    @pytest.mark.parametrize("content", ["display = 5\n", 'storage = "x"\n'])
    def test_section_not_a_table_exits(self, home: Path, runner: CliRunner, content: str):
        (home / "config.toml").write_text(content)

        result = runner.invoke(cli, ["stats"])

        assert result.exit_code == 1
        assert "Configuration error" in plain(result)

    def test_init_creates_config(self, home: Path, runner: CliRunner):
        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 0, result.output
        assert (home / "config.toml").exists()

    def test_init_keeps_existing(self, home: Path, runner: CliRunner):
        (home / "config.toml").write_text('[display]\nweek_start = "sunday"\n')

        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 0, result.output
        assert "already exists" in plain(result)
        assert "sunday" in (home / "config.toml").read_text()
