"""Server command for running the task API."""

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer

logger = logging.getLogger(__name__)


def register(app: typer.Typer) -> None:
    """Register the serve command."""

    @app.command()
    def serve(
        config: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                help="Path to configuration file",
            ),
        ] = None,
        host: Annotated[
            str | None,
            typer.Option(
                "--host",
                "-h",
                help="Host to bind to (default: server.host)",
            ),
        ] = None,
        port: Annotated[
            int | None,
            typer.Option(
                "--port",
                "-p",
                help="Port to bind to (default: server.port)",
            ),
        ] = None,
    ) -> None:
        """Start the GTD API server."""
        try:
            asyncio.run(_run_server(config, host, port))
        except KeyboardInterrupt:
            # Use print here since logging may not be configured yet
            print("\nServer stopped")


async def _run_server(
    config_path: Path | None = None,
    host: str | None = None,
    port: int | None = None,
) -> None:
    """Run the server asynchronously."""
    from gtd.config import load_config
    from gtd.db import Database
    from gtd.logging import configure_logging
    from gtd.server import ServerRunner, create_app

    gtd_config = load_config(config_path)

    configure_logging(
        level=gtd_config.logging.level,
        use_rich=True,
        log_to_file=gtd_config.logging.log_to_file,
    )

    logger.info("Initializing database")
    database = Database(
        database_url=gtd_config.database.url,
        database_path=gtd_config.database.path,
        echo=gtd_config.database.echo,
    )

    app = create_app(database, config=gtd_config.server)
    runner = ServerRunner(
        app,
        host=host or gtd_config.server.host,
        port=port or gtd_config.server.port,
    )
    await runner.run()
