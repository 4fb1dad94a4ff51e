"""Tests for configuration loading."""

from pathlib import Path

import pytest
import toml

from moodlog.config import (
    DEFAULT_CONFIG,
    create_template_config,
    get_config_path,
    get_db_path,
    get_home_dir,
    load_config,
)
from moodlog.errors import ConfigError


@pytest.fixture
def home(tmp_path, monkeypatch) -> Path:
    monkeypatch.setenv("MOODLOG_HOME", str(tmp_path))
    return tmp_path


class TestConfigPaths:

    def test_home_from_env(self, home: Path):
        assert get_home_dir() == home
        assert get_config_path() == home / "config.toml"

    def test_default_home(self, monkeypatch):
        monkeypatch.delenv("MOODLOG_HOME", raising=False)

        assert get_home_dir() == Path.home() / ".config" / "moodlog"

    def test_default_db_path(self, home: Path):
        assert get_db_path(load_config()) == home / "moodlog.db"

    def test_configured_db_path(self, home: Path):
        config = {"storage": {"db_path": str(home / "elsewhere" / "moods.db")}}

        assert get_db_path(config) == home / "elsewhere" / "moods.db"


class TestLoadConfig:

    def test_missing_file_gives_defaults(self, home: Path):
        assert load_config() == DEFAULT_CONFIG

    def test_defaults_are_not_shared(self, home: Path):
        config = load_config()
        config["display"]["trend_days"] = 99

        assert DEFAULT_CONFIG["display"]["trend_days"] == 14

    def test_partial_file_merges_over_defaults(self, home: Path):
        (home / "config.toml").write_text('[display]\nweek_start = "sunday"\n')

        config = load_config()

        assert config["display"]["week_start"] == "sunday"
        assert config["display"]["trend_days"] == 14
        assert config["storage"]["db_path"] == ""

    def test_corrupt_file_raises(self, home: Path):
        (home / "config.toml").write_text("[display\nweek_start = ")

        with pytest.raises(ConfigError):
            load_config()

    @pytest.mark.parametrize(
        "content",
        [
            '[display]\nweek_start = "friday"\n',
            "[display]\ntrend_days = 0\n",
            '[display]\ntrend_days = "ten"\n',
            "[storage]\ndb_path = 5\n",
            "display = 5\n",
            'storage = "x"\n',
        ],
    )
    def test_invalid_values_raise(self, home: Path, content: str):
        (home / "config.toml").write_text(content)

        with pytest.raises(ConfigError):
            load_config()


class TestTemplateConfig:

    def test_template_round_trips(self, home: Path):
        path = create_template_config()

        assert path == home / "config.toml"
        assert toml.load(path) == DEFAULT_CONFIG
        assert load_config() == DEFAULT_CONFIG

    def test_template_at_custom_path(self, tmp_path: Path):
        path = create_template_config(tmp_path / "nested" / "moodlog.toml")

        assert path.exists()
        assert load_config(path) == DEFAULT_CONFIG
