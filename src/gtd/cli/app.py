"""Main CLI application."""

import typer

from gtd.cli.commands import config, database, serve, tasks

app = typer.Typer(
    name="gtd",
    help="GTD - Getting Things Done to-do list",
    no_args_is_help=True,
)

config.register(app)
database.register(app)
serve.register(app)
tasks.register(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
