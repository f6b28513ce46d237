"""Configuration management commands."""

from pathlib import Path
from typing import Annotated

import click
import typer

from gtd.cli.console import console, error, success


def register(app: typer.Typer) -> None:
    """Register the config command."""

    @app.command()
    def config(
        action: Annotated[
            str | None,
            typer.Argument(help="Action: show, validate, paths"),
        ] = None,
        path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                help="Path to config file (default: $GTD_HOME/config.toml)",
            ),
        ] = None,
    ) -> None:
        """Manage configuration."""
        if action is None:
            ctx = click.get_current_context()
            click.echo(ctx.get_help())
            raise typer.Exit(0)

        from rich.syntax import Syntax
        from rich.table import Table

        from gtd.config import ConfigError, load_config
        from gtd.config.paths import get_all_paths, get_config_path

        expanded_path = path.expanduser() if path else get_config_path()

        if action == "show":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            content = expanded_path.read_text()
            syntax = Syntax(content, "toml", theme="monokai", line_numbers=True)
            console.print(f"[bold]Config file: {expanded_path}[/bold]\n")
            console.print(syntax)

        elif action == "validate":
            if not expanded_path.exists():
                error(f"Config file not found: {expanded_path}")
                raise typer.Exit(1)

            try:
                config_obj = load_config(expanded_path)
            except ConfigError as e:
                error(f"Configuration validation failed: {e}")
                raise typer.Exit(1) from None

            table = Table(title="Configuration Summary")
            table.add_column("Setting", style="cyan")
            table.add_column("Value", style="green")
            table.add_row(
                "Server", f"{config_obj.server.host}:{config_obj.server.port}"
            )
            table.add_row(
                "Database", config_obj.database.url or str(config_obj.database.path)
            )
            table.add_row("API URL", config_obj.client.api_url)
            console.print(table)
            success("Configuration is valid")

        elif action == "paths":
            table = Table(title="GTD Paths")
            table.add_column("Name", style="cyan")
            table.add_column("Path")
            for name, value in get_all_paths().items():
                table.add_row(name, str(value))
            console.print(table)

        else:
            error(f"Unknown action: {action}")
            raise typer.Exit(1)
