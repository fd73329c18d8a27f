"""
Tasks module interface.

The API layer depends on ITaskService for all task operations.
"""

from typing import Protocol, runtime_checkable

from .models import CreateTaskRequest, Task, TaskUpdate


@runtime_checkable
class ITaskService(Protocol):
    """
    Interface for task operations.

    Methods are synchronous: each one is a blocking round trip to the
    store, and FastAPI runs the calling route in its worker thread pool.
    """

    def list_tasks(self) -> list[Task]:
        """
        List all tasks.

        Returns:
            Every task, most recently created first
        """
        ...

    def get_task(self, task_id: str) -> Task:
        """
        Get a task by ID.

        Args:
            task_id: Task ID (ObjectId hex string)

        Returns:
            The task

        Raises:
            InvalidTaskIdError: If task_id is malformed
            TaskNotFoundError: If the task doesn't exist
        """
        ...

    def create_task(self, request: CreateTaskRequest) -> Task:
        """
        Create a new task.

        Args:
            request: Title, description and completion state

        Returns:
            The stored task with ID and timestamps
        """
        ...

    def update_task(self, task_id: str, update: TaskUpdate) -> Task:
        """
        Partially update a task.

        Only fields present in the update are changed; updatedAt is
        always refreshed.

        Args:
            task_id: Task ID (ObjectId hex string)
            update: Fields to change

        Returns:
            The task after the update

        Raises:
            EmptyTaskUpdateError: If the update names no fields
            InvalidTaskIdError: If task_id is malformed
            TaskNotFoundError: If the task doesn't exist
        """
        ...

    def delete_task(self, task_id: str) -> None:
        """
        Delete a task.

        Args:
            task_id: Task ID (ObjectId hex string)

        Raises:
            InvalidTaskIdError: If task_id is malformed
            TaskNotFoundError: If the task doesn't exist
        """
        ...
