"""Configuration models using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from gtd.config.paths import get_database_path


class ServerConfig(BaseModel):
    """Configuration for the HTTP API server."""

    host: str = "127.0.0.1"
    port: int = 3000
    # Origins allowed to call the API from a browser
    cors_origins: list[str] = ["*"]


class DatabaseConfig(BaseModel):
    """Configuration for the task database.

    `url` takes precedence over `path` when both are set.
    """

    path: Path = Field(default_factory=get_database_path)
    url: str | None = None
    echo: bool = False


class ClientConfig(BaseModel):
    """Configuration for the API client used by `gtd tasks`."""

    api_url: str = "http://127.0.0.1:3000"
    timeout: float | None = 10.0

    @field_validator("api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class LoggingConfig(BaseModel):
    """Configuration for logging output."""

    level: str | None = None  # None = GTD_LOG_LEVEL env var or INFO
    log_to_file: bool = False


class ConfigError(Exception):
    """Configuration error."""

    pass


class GtdConfig(BaseModel):
    """Root configuration model."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
