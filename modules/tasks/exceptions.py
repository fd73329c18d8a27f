"""
Tasks module exceptions.
"""

from shared.exceptions import (
    NotFoundError,
    ValidationError,
)


class TaskNotFoundError(NotFoundError):
    """Raised when no task has the given ID."""

    def __init__(self, task_id: str):
        super().__init__(
            f"Task not found: {task_id}",
            code="TASK_NOT_FOUND",
            details={"task_id": task_id},
        )


class InvalidTaskIdError(ValidationError):
    """Raised when a task ID is not a well-formed ObjectId."""

    def __init__(self, task_id: str):
        super().__init__(
            f"Invalid task id: {task_id}",
            code="INVALID_TASK_ID",
            details={"task_id": task_id},
        )


class EmptyTaskUpdateError(ValidationError):
    """Raised when an update names no fields."""

    def __init__(self, task_id: str):
        super().__init__(
            "Update must contain at least one of: title, description, completed",
            code="EMPTY_TASK_UPDATE",
            details={"task_id": task_id},
        )
