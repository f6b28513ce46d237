"""Centralized path management for GTD.

All local state (config, database, logs) lives under a single base directory.
The base directory can be overridden with the GTD_HOME environment variable.

Default location: ~/.gtd
"""

import os
from functools import lru_cache
from pathlib import Path

ENV_VAR = "GTD_HOME"


@lru_cache(maxsize=1)
def get_gtd_home() -> Path:
    """Get the base directory for all GTD data.

    Resolution order:
    1. GTD_HOME environment variable (if set)
    2. Platform default (~/.gtd)

    Returns:
        Path to the GTD home directory.
    """
    if env_home := os.environ.get(ENV_VAR):
        return Path(env_home).expanduser().resolve()

    return Path.home() / ".gtd"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_gtd_home() / "config.toml"


def get_database_path() -> Path:
    """Get the default SQLite database path."""
    return get_gtd_home() / "gtd.db"


def get_logs_path() -> Path:
    """Get the default logs directory path."""
    return get_gtd_home() / "logs"


def get_all_paths() -> dict[str, Path]:
    """Get all standard paths for debugging/display."""
    return {
        "home": get_gtd_home(),
        "config": get_config_path(),
        "database": get_database_path(),
        "logs": get_logs_path(),
    }
