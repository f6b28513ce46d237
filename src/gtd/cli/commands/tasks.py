"""Task list commands.

Each command loads the list from a running server into a TaskListState,
performs one action through it and prints the resulting list.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from gtd.cli.console import error, render_tasks, success

if TYPE_CHECKING:
    from gtd.client import TaskListState

Action = Callable[["TaskListState"], Awaitable[bool]]

app = typer.Typer(
    name="tasks",
    help="Manage the to-do list on a running server.",
    invoke_without_command=True,
)

UrlOption = Annotated[
    str | None,
    typer.Option("--url", "-u", help="API base URL (default: client.api_url)"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to configuration file"),
]
TaskIdArg = Annotated[int, typer.Argument(help="Task ID")]


def register(root: typer.Typer) -> None:
    root.add_typer(app, name="tasks")


def _run(action: Action, url: str | None, config_path: Path | None) -> None:
    """Run one state action against the server, exiting 1 on failure."""
    from gtd.config import ConfigError, load_config

    try:
        gtd_config = load_config(config_path)
    except (ConfigError, FileNotFoundError) as e:
        error(str(e))
        raise typer.Exit(1) from None

    api_url = url or gtd_config.client.api_url
    ok = asyncio.run(_with_state(api_url, gtd_config.client.timeout, action))
    if not ok:
        raise typer.Exit(1)


async def _with_state(api_url: str, timeout: float | None, action: Action) -> bool:
    from gtd.client import TaskApi, TaskListState

    async with TaskApi(api_url, timeout=timeout) as api:
        state = TaskListState(api, notify=error)
        if not await state.load():
            return False
        ok = await action(state)
        render_tasks(state.state)
        return ok


async def _noop(_state: TaskListState) -> bool:
    return True


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


@app.callback()
def _default(
    ctx: typer.Context, url: UrlOption = None, config: ConfigOption = None
) -> None:
    """Manage the to-do list. Run without a subcommand to list tasks."""
    if ctx.invoked_subcommand is None:
        _run(_noop, url, config)


@app.command("list")
def list_cmd(url: UrlOption = None, config: ConfigOption = None) -> None:
    """List all tasks."""
    _run(_noop, url, config)


@app.command("add")
def add_cmd(
    title: Annotated[str, typer.Argument(help="Task title")],
    url: UrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Add a new task."""

    async def action(state: TaskListState) -> bool:
        if await state.create(title):
            success(f"Added task {state.state.tasks[-1].id}")
            return True
        return False

    _run(action, url, config)


@app.command("done")
def done_cmd(
    task_id: TaskIdArg, url: UrlOption = None, config: ConfigOption = None
) -> None:
    """Mark a task as complete."""
    _run(lambda state: state.toggle(task_id, True), url, config)


@app.command("undone")
def undone_cmd(
    task_id: TaskIdArg, url: UrlOption = None, config: ConfigOption = None
) -> None:
    """Reopen a completed task."""
    _run(lambda state: state.toggle(task_id, False), url, config)


@app.command("edit")
def edit_cmd(
    task_id: TaskIdArg,
    title: Annotated[str, typer.Argument(help="New task title")],
    url: UrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Rename a task."""

    async def action(state: TaskListState) -> bool:
        try:
            state.open_editor(task_id)
        except KeyError:
            error(f"Task {task_id} not found")
            return False
        state.set_modal_input(title)
        return await state.submit_edit()

    _run(action, url, config)


@app.command("delete")
def delete_cmd(
    task_id: TaskIdArg, url: UrlOption = None, config: ConfigOption = None
) -> None:
    """Delete a task."""
    _run(lambda state: state.delete(task_id), url, config)


@app.command("clear")
def clear_cmd(
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Skip confirmation")
    ] = False,
    url: UrlOption = None,
    config: ConfigOption = None,
) -> None:
    """Delete every task."""
    if not yes:
        typer.confirm("Delete all tasks?", abort=True)
    _run(lambda state: state.clear(), url, config)
