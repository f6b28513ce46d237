"""SQL-backed task store.

Every operation opens its own session and commits before returning, so a
request maps to exactly one transaction.
"""

from __future__ import annotations

import logging
from builtins import list as builtin_list
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, select

from gtd.db.models import TaskRecord
from gtd.tasks.errors import NotFoundError
from gtd.tasks.types import Task, TaskPatch, validate_title

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from gtd.db import Database

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
MAX_TASK_ID = 2**63 - 1


class TaskStore:
    """Authoritative CRUD over the tasks table."""

    def __init__(self, database: Database) -> None:
        self._database = database

    async def create(self, title: Any) -> Task:
        text = validate_title(title)
        async with self._database.session() as session:
            record = TaskRecord(title=text, is_done=False)
            session.add(record)
            await session.flush()
            await session.refresh(record)
            task = Task.from_record(record)
        logger.info("task_created id=%s", task.id)
        return task

    async def list(self) -> builtin_list[Task]:
        async with self._database.session() as session:
            result = await session.execute(select(TaskRecord).order_by(TaskRecord.id))
            return [Task.from_record(r) for r in result.scalars().all()]

    async def get(self, task_id: int) -> Task:
        async with self._database.session() as session:
            return Task.from_record(await _require(session, task_id))

    async def update(self, task_id: int, patch: TaskPatch) -> Task:
        patch = patch.validated()
        async with self._database.session() as session:
            record = await _require(session, task_id)
            patch.apply(record)
            await session.flush()
            task = Task.from_record(record)
        if not patch.is_empty:
            logger.info("task_updated id=%s fields=%s", task_id, sorted(patch.to_dict()))
        return task

    async def delete(self, task_id: int) -> Task:
        async with self._database.session() as session:
            record = await _require(session, task_id)
            task = Task.from_record(record)
            await session.delete(record)
        logger.info("task_deleted id=%s", task_id)
        return task

    async def delete_all(self) -> int:
        async with self._database.session() as session:
            count = await _count(session)
            await session.execute(delete(TaskRecord))
        logger.info("tasks_cleared count=%d", count)
        return count

    async def count(self) -> int:
        async with self._database.session() as session:
            return await _count(session)


async def _require(session: AsyncSession, task_id: int) -> TaskRecord:
    if not -MAX_TASK_ID - 1 <= task_id <= MAX_TASK_ID:
        raise NotFoundError(task_id)
    record = await session.get(TaskRecord, task_id)
    if record is None:
        raise NotFoundError(task_id)
    return record


async def _count(session: AsyncSession) -> int:
    result = await session.execute(select(func.count()).select_from(TaskRecord))
    return int(result.scalar_one())
