"""Task routes mounted under /task.

Handlers only translate HTTP shapes; all state lives in TaskStore.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status

from gtd.server.schemas import (
    CreateTaskRequest,
    DeleteAllResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from gtd.tasks import TaskStore

router = APIRouter()


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


Store = Annotated[TaskStore, Depends(get_task_store)]


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_task(body: CreateTaskRequest, store: Store) -> dict[str, Any]:
    task = await store.create(body.title)
    return task.to_dict()


@router.get("", response_model=list[TaskResponse])
async def list_tasks(store: Store) -> list[dict[str, Any]]:
    return [task.to_dict() for task in await store.list()]


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(task_id: int, store: Store) -> dict[str, Any]:
    task = await store.get(task_id)
    return task.to_dict()


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: int, body: UpdateTaskRequest, store: Store
) -> dict[str, Any]:
    task = await store.update(task_id, body.to_patch())
    return task.to_dict()


@router.delete("", response_model=DeleteAllResponse)
async def delete_all_tasks(store: Store) -> dict[str, int]:
    return {"count": await store.delete_all()}


@router.delete("/{task_id}", response_model=TaskResponse)
async def delete_task(task_id: int, store: Store) -> dict[str, Any]:
    task = await store.delete(task_id)
    return task.to_dict()
