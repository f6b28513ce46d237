"""Client-side mirror of the server's task list.

TaskListState is the single source of truth for whatever renders the list
and the edit modal. Renderers read `state` (an immutable snapshot) and call
the actions; every change is pushed to subscribers.

Local state is only changed after the server confirms a mutation. A rejected
or failed request leaves the snapshot untouched and emits one notification.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from gtd.client.errors import ClientError
from gtd.tasks.types import TaskPatch

if TYPE_CHECKING:
    from gtd.client.api import TaskApi
    from gtd.tasks.types import Task

logger = logging.getLogger(__name__)

Listener = Callable[["ClientState"], None]
Notifier = Callable[[str], None]


@dataclass(frozen=True)
class ClientState:
    """Immutable snapshot of the list view and edit modal."""

    tasks: tuple[Task, ...] = ()
    selected_task_id: int | None = None
    is_modal_open: bool = False
    modal_input_value: str = ""
    loaded: bool = False

    def find(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    @property
    def done_count(self) -> int:
        return sum(1 for t in self.tasks if t.is_done)

    @property
    def pending_count(self) -> int:
        return len(self.tasks) - self.done_count


def _log_notification(message: str) -> None:
    logger.info("notification: %s", message)


class TaskListState:
    """State container driving the task list UI."""

    def __init__(self, api: TaskApi, notify: Notifier | None = None) -> None:
        self._api = api
        self._notify = notify or _log_notification
        self._state = ClientState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ClientState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, **changes: Any) -> None:
        self._state = replace(self._state, **changes)
        for listener in list(self._listeners):
            listener(self._state)

    def _fail(self, message: str, exc: ClientError) -> None:
        logger.warning("%s: %s", message, exc, exc_info=exc)
        self._notify(message)

    def _replace_task(self, updated: Task) -> tuple[Task, ...]:
        return tuple(updated if t.id == updated.id else t for t in self._state.tasks)

    # ---- list actions ----

    async def load(self) -> bool:
        """Fetch the full list once and replace the local copy."""
        try:
            tasks = await self._api.list_tasks()
        except ClientError as e:
            self._fail("Cannot load to-do list", e)
            self._set(tasks=(), loaded=True)
            return False
        self._set(tasks=tuple(tasks), loaded=True)
        return True

    async def create(self, title: str) -> bool:
        """Append the server-created task once its id is known."""
        try:
            task = await self._api.create_task(title)
        except ClientError as e:
            self._fail(f"Cannot add task: {e}", e)
            return False
        self._set(tasks=(*self._state.tasks, task))
        return True

    async def toggle(self, task_id: int, is_done: bool) -> bool:
        """Set completion and reconcile the entry from the server's answer."""
        try:
            task = await self._api.update_task(task_id, TaskPatch(is_done=is_done))
        except ClientError as e:
            self._fail("Cannot complete task", e)
            return False
        self._set(tasks=self._replace_task(task))
        return True

    async def delete(self, task_id: int) -> bool:
        try:
            deleted = await self._api.delete_task(task_id)
        except ClientError as e:
            self._fail("Cannot remove selected task", e)
            return False
        self._set(tasks=tuple(t for t in self._state.tasks if t.id != deleted.id))
        return True

    async def clear(self) -> bool:
        """Delete every task. Skips the request when the list is empty."""
        if not self._state.tasks:
            return True
        try:
            await self._api.delete_all_tasks()
        except ClientError as e:
            self._fail("Cannot clear to-do list", e)
            return False
        self._set(tasks=())
        return True

    # ---- edit modal ----

    def open_editor(self, task_id: int) -> None:
        """Select a task and open the modal prefilled with its title.

        Raises:
            KeyError: If the task is not in the local list.
        """
        task = self._state.find(task_id)
        if task is None:
            raise KeyError(task_id)
        self._set(
            selected_task_id=task.id,
            modal_input_value=task.title,
            is_modal_open=True,
        )

    def set_modal_input(self, value: str) -> None:
        self._set(modal_input_value=value)

    def close_editor(self) -> None:
        self._set(is_modal_open=False)

    async def submit_edit(self, title: str | None = None) -> bool:
        """Send the modal's title for the selected task.

        On success the entry is replaced and the modal closes; on failure the
        modal stays open with its input intact.

        Raises:
            RuntimeError: If no task is selected.
        """
        task_id = self._state.selected_task_id
        if task_id is None:
            raise RuntimeError("no task selected")
        if title is None:
            title = self._state.modal_input_value

        try:
            task = await self._api.update_task(task_id, TaskPatch(title=title))
        except ClientError as e:
            self._fail("Cannot update task", e)
            return False
        self._set(tasks=self._replace_task(task), is_modal_open=False)
        return True
