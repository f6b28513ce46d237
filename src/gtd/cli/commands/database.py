"""Database management commands.

Provides commands for:
- init: create the tasks table directly (fresh databases)
- migrate/status: manage schema migrations with alembic
"""

from __future__ import annotations

import asyncio
import subprocess
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from gtd.cli.console import console, error, success

if TYPE_CHECKING:
    from gtd.config import GtdConfig


def register(app: typer.Typer) -> None:
    """Register the db command group."""
    db_app = typer.Typer(help="Database management commands")

    @db_app.command("init")
    def db_init(
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
    ) -> None:
        """Create missing tables in the configured database."""
        from gtd.config import load_config

        gtd_config = load_config(config_path)
        url = asyncio.run(_create_schema(gtd_config))
        success(f"Database ready: {url}")

    @db_app.command("migrate")
    def db_migrate(
        revision: Annotated[
            str,
            typer.Option(
                "--revision",
                "-r",
                help="Target revision",
            ),
        ] = "head",
    ) -> None:
        """Run database migrations."""
        console.print(f"[bold]Running migrations to {revision}...[/bold]")
        result = subprocess.run(
            [sys.executable, "-m", "alembic", "upgrade", revision],
            capture_output=False,
        )
        if result.returncode == 0:
            success("Migrations completed successfully")
        else:
            error("Migration failed")
            raise typer.Exit(1)

    @db_app.command("status")
    def db_status() -> None:
        """Show migration status."""
        console.print("[bold]Migration status:[/bold]")
        subprocess.run(
            [sys.executable, "-m", "alembic", "current"],
            capture_output=False,
        )
        console.print("\n[bold]History:[/bold]")
        subprocess.run(
            [sys.executable, "-m", "alembic", "history", "--indicate-current"],
            capture_output=False,
        )

    app.add_typer(db_app, name="db")


async def _create_schema(gtd_config: GtdConfig) -> str:
    from gtd.db import Database

    database = Database(
        database_url=gtd_config.database.url,
        database_path=gtd_config.database.path,
    )
    await database.connect()
    try:
        await database.create_schema()
    finally:
        await database.disconnect()
    return database.url
