"""Task domain errors."""


class TaskError(Exception):
    """Base class for task store errors."""


class ValidationError(TaskError):
    """Malformed or missing task input."""


class NotFoundError(TaskError):
    """No task exists with the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"task {task_id} not found")
        self.task_id = task_id
