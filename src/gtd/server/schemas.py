"""Request and response payloads for the task API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

from gtd.tasks import TaskPatch, ValidationError, validate_title


def _checked_title(value: Any) -> str:
    try:
        return validate_title(value)
    except ValidationError as e:
        raise ValueError(str(e)) from e


class CreateTaskRequest(BaseModel):
    """Body of POST /task."""

    title: StrictStr

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        return _checked_title(value)


class UpdateTaskRequest(BaseModel):
    """Body of PUT /task/{id}. Omitted fields are left unchanged."""

    model_config = ConfigDict(populate_by_name=True)

    title: StrictStr | None = None
    is_done: StrictBool | None = Field(default=None, alias="isDone")

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str | None) -> str:
        # Only runs for values actually sent; an explicit null is rejected.
        if value is None:
            raise ValueError("title must be a string")
        return _checked_title(value)

    @field_validator("is_done")
    @classmethod
    def _is_done_not_null(cls, value: bool | None) -> bool:
        if value is None:
            raise ValueError("isDone must be a boolean")
        return value

    def to_patch(self) -> TaskPatch:
        return TaskPatch(title=self.title, is_done=self.is_done)


class TaskResponse(BaseModel):
    """Wire shape of a task."""

    id: int
    title: str
    isDone: bool
    createdAt: str


class DeleteAllResponse(BaseModel):
    """Body of DELETE /task."""

    count: int
