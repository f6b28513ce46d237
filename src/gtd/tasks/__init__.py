"""Task subsystem public API.

Public API:
- TaskStore: authoritative CRUD over the tasks table

Types:
- Task, TaskPatch

Errors:
- TaskError, ValidationError, NotFoundError
"""

from gtd.tasks.errors import NotFoundError, TaskError, ValidationError
from gtd.tasks.store import TaskStore
from gtd.tasks.types import Task, TaskPatch, validate_title

__all__ = [
    "NotFoundError",
    "Task",
    "TaskError",
    "TaskPatch",
    "TaskStore",
    "ValidationError",
    "validate_title",
]
