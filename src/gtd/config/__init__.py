"""Configuration module."""

from gtd.config.loader import get_default_config, load_config
from gtd.config.models import (
    ClientConfig,
    ConfigError,
    DatabaseConfig,
    GtdConfig,
    LoggingConfig,
    ServerConfig,
)
from gtd.config.paths import (
    get_config_path,
    get_database_path,
    get_gtd_home,
    get_logs_path,
)

__all__ = [
    "ClientConfig",
    "ConfigError",
    "DatabaseConfig",
    "GtdConfig",
    "LoggingConfig",
    "ServerConfig",
    "get_config_path",
    "get_database_path",
    "get_default_config",
    "get_gtd_home",
    "get_logs_path",
    "load_config",
]
