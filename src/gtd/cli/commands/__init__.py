"""CLI command modules."""

from gtd.cli.commands import config, database, serve, tasks

__all__ = [
    "config",
    "database",
    "serve",
    "tasks",
]
