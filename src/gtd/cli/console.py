"""Shared console utilities for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from gtd.client.state import ClientState

# Shared console instance for all CLI commands
console = Console()

EMPTY_INBOX = "Your inbox is empty - time to celebrate!"


def error(msg: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{escape(msg)}[/red]")


def warning(msg: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]{escape(msg)}[/yellow]")


def success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{msg}[/green]")


def dim(msg: str) -> None:
    """Print a dimmed message."""
    console.print(f"[dim]{msg}[/dim]")


def render_tasks(state: ClientState) -> None:
    """Print the task list as a table, with a pending/done footer."""
    if not state.tasks:
        dim(EMPTY_INBOX)
        return

    table = Table(
        title="Inbox",
        caption=f"{state.pending_count} pending, {state.done_count} done",
    )
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Done", justify="center")
    table.add_column("Title")
    table.add_column("Created", style="dim")

    for task in state.tasks:
        table.add_row(
            str(task.id),
            "[green]x[/green]" if task.is_done else "",
            f"[strike]{escape(task.title)}[/strike]" if task.is_done else escape(task.title),
            task.created_at.astimezone().strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)
