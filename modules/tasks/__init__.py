"""
Tasks module.

Handles task persistence and the /tasks CRUD endpoints.

Public API:
- ITaskService: Interface for task operations
- Task: Stored task
- CreateTaskRequest / TaskUpdate: Request bodies
"""

from .interfaces import ITaskService
from .models import Task, CreateTaskRequest, TaskUpdate
from .exceptions import (
    TaskNotFoundError,
    InvalidTaskIdError,
    EmptyTaskUpdateError,
)

__all__ = [
    # Interface
    "ITaskService",
    # Models
    "Task",
    "CreateTaskRequest",
    "TaskUpdate",
    # Exceptions
    "TaskNotFoundError",
    "InvalidTaskIdError",
    "EmptyTaskUpdateError",
]
