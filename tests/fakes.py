"""Test doubles for the client layer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import UTC, datetime

from gtd.client.errors import ClientError, ResponseError
from gtd.tasks.types import Task, TaskPatch


def make_task(task_id: int, title: str = "task", is_done: bool = False) -> Task:
    return Task(
        id=task_id,
        title=title,
        is_done=is_done,
        created_at=datetime(2026, 1, 1, tzinfo=UTC),
    )


@dataclass
class FakeTaskApi:
    """In-memory TaskApi with call capture and scripted failures.

    Set `fail_with` to make the next call raise that error.
    """

    tasks: dict[int, Task] = field(default_factory=dict)
    calls: list[str] = field(default_factory=list)
    fail_with: ClientError | None = None
    next_id: int = 1

    def _check(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            error, self.fail_with = self.fail_with, None
            raise error

    def _require(self, task_id: int) -> Task:
        if task_id not in self.tasks:
            raise ResponseError(404, f"task {task_id} not found")
        return self.tasks[task_id]

    async def list_tasks(self) -> list[Task]:
        self._check("list")
        return list(self.tasks.values())

    async def create_task(self, title: str) -> Task:
        self._check("create")
        task = make_task(self.next_id, title)
        self.tasks[task.id] = task
        self.next_id += 1
        return task

    async def update_task(self, task_id: int, patch: TaskPatch) -> Task:
        self._check("update")
        task = self._require(task_id)
        if patch.title is not None:
            task = replace(task, title=patch.title)
        if patch.is_done is not None:
            task = replace(task, is_done=patch.is_done)
        self.tasks[task_id] = task
        return task

    async def delete_task(self, task_id: int) -> Task:
        self._check("delete")
        return self.tasks.pop(self._require(task_id).id)

    async def delete_all_tasks(self) -> int:
        self._check("delete_all")
        count = len(self.tasks)
        self.tasks.clear()
        return count

    async def __aenter__(self) -> FakeTaskApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.calls.append("close")
