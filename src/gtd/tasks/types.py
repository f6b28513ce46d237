"""Task domain types and their JSON wire shape."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from gtd.tasks.errors import ValidationError

if TYPE_CHECKING:
    from gtd.db.models import TaskRecord


@dataclass(frozen=True)
class Task:
    """A single persisted to-do item."""

    id: int
    title: str
    is_done: bool
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "isDone": self.is_done,
            "createdAt": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Parse the wire shape.

        Raises:
            ValueError: If a field is missing or has the wrong type.
        """
        try:
            task_id = data["id"]
            title = data["title"]
            is_done = data["isDone"]
            created_at = data["createdAt"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed task payload: {data!r}") from e

        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ValueError(f"task id must be an integer: {task_id!r}")
        if not isinstance(title, str):
            raise ValueError(f"task title must be a string: {title!r}")
        if not isinstance(is_done, bool):
            raise ValueError(f"task isDone must be a boolean: {is_done!r}")
        if not isinstance(created_at, str):
            raise ValueError(f"task createdAt must be a string: {created_at!r}")

        return cls(
            id=task_id,
            title=title,
            is_done=is_done,
            created_at=_as_utc(datetime.fromisoformat(created_at)),
        )

    @classmethod
    def from_record(cls, record: TaskRecord) -> Task:
        return cls(
            id=record.id,
            title=record.title,
            is_done=bool(record.is_done),
            created_at=_as_utc(record.created_at),
        )


@dataclass(frozen=True)
class TaskPatch:
    """Partial task update.

    A field left as None is not touched. Only `title` and `is_done` are
    mutable after creation.
    """

    title: str | None = None
    is_done: bool | None = None

    @property
    def is_empty(self) -> bool:
        return self.title is None and self.is_done is None

    def validated(self) -> TaskPatch:
        """Return a copy with the title normalized.

        Raises:
            ValidationError: If a provided field is invalid.
        """
        title = None if self.title is None else validate_title(self.title)
        if self.is_done is not None and not isinstance(self.is_done, bool):
            raise ValidationError("isDone must be a boolean")
        return TaskPatch(title=title, is_done=self.is_done)

    def apply(self, record: TaskRecord) -> None:
        """Apply provided fields to a row, one at a time."""
        if self.title is not None:
            record.title = self.title
        if self.is_done is not None:
            record.is_done = self.is_done

    def to_dict(self) -> dict[str, Any]:
        """Request body containing only the provided fields."""
        body: dict[str, Any] = {}
        if self.title is not None:
            body["title"] = self.title
        if self.is_done is not None:
            body["isDone"] = self.is_done
        return body


def validate_title(title: Any) -> str:
    """Return the stripped title.

    Raises:
        ValidationError: If the title is not a string or is blank.
    """
    if not isinstance(title, str):
        raise ValidationError("title must be a string")
    text = title.strip()
    if not text:
        raise ValidationError("title is required")
    return text


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
