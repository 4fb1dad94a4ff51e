"""Configuration loading for MoodLog.

Settings live in ``config.toml`` under the MoodLog home directory,
``~/.config/moodlog`` unless ``MOODLOG_HOME`` points elsewhere.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Any

import toml

from moodlog.errors import ConfigError

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "MOODLOG_HOME"

DEFAULT_CONFIG: dict[str, Any] = {
    "storage": {
        "db_path": "",  # empty means <home>/moodlog.db
    },
    "display": {
        "week_start": "monday",  # monday or sunday
        "trend_days": 14,
    },
}

WEEK_STARTS = ("monday", "sunday")


def get_home_dir() -> Path:
    """Directory holding the config file and default database."""
    override = os.environ.get(HOME_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "moodlog"


def get_config_path() -> Path:
    return get_home_dir() / "config.toml"


def _merge(base: dict, override: dict) -> dict:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _validate_config(config: dict) -> list[str]:
    """Validate configuration and return a list of problems."""
    problems = []

    for section in ("storage", "display"):
        if not isinstance(config.get(section), dict):
            problems.append(f"{section} must be a table")
    if problems:
        return problems

    week_start = config["display"].get("week_start")
    if week_start not in WEEK_STARTS:
        problems.append(f"display.week_start must be one of {', '.join(WEEK_STARTS)}")

    trend_days = config["display"].get("trend_days")
    if not isinstance(trend_days, int) or isinstance(trend_days, bool) or trend_days < 1:
        problems.append("display.trend_days must be a positive integer")

    if not isinstance(config["storage"].get("db_path"), str):
        problems.append("storage.db_path must be a string")

    return problems


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration merged over the defaults.

    Args:
        config_path: Config file to read. Defaults to the home config file.

    Returns:
        Configuration dict. A missing file yields the defaults.

    Raises:
        ConfigError: If the file cannot be parsed or holds invalid values.
    """
    config_path = config_path or get_config_path()

    if not config_path.exists():
        logger.debug("No config file at %s, using defaults", config_path)
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        loaded = toml.load(config_path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    config = _merge(DEFAULT_CONFIG, loaded)
    problems = _validate_config(config)
    if problems:
        raise ConfigError(f"Invalid config file {config_path}: " + "; ".join(problems))

    return config


def create_template_config(config_path: Path | None = None) -> Path:
    """Write the default configuration file.

    Returns:
        Path of the written file.
    """
    config_path = config_path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    logger.debug("Wrote template config to %s", config_path)
    return config_path


def get_db_path(config: dict[str, Any]) -> Path:
    """Resolve the database path from configuration."""
    db_path = config.get("storage", {}).get("db_path")
    if db_path:
        return Path(db_path).expanduser()
    return get_home_dir() / "moodlog.db"
