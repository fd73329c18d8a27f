"""
Tasks service implementation.

Thin orchestration over TaskRepository. Store errors are passed through
untouched so the API layer can classify them.
"""

from .interfaces import ITaskService
from .models import CreateTaskRequest, Task, TaskUpdate
from .repository import TaskRepository
from .exceptions import EmptyTaskUpdateError


class TaskService(ITaskService):
    """
    Task service backed by a TaskRepository.

    Implements ITaskService protocol.
    """

    def __init__(self, repository: TaskRepository):
        self._repository = repository

    def list_tasks(self) -> list[Task]:
        return self._repository.list_tasks()

    def get_task(self, task_id: str) -> Task:
        return self._repository.get_task(task_id)

    def create_task(self, request: CreateTaskRequest) -> Task:
        return self._repository.create_task(request)

    def update_task(self, task_id: str, update: TaskUpdate) -> Task:
        """Apply a partial update; an update with no fields is refused without a write."""
        if update.is_empty():
            raise EmptyTaskUpdateError(task_id)
        return self._repository.update_task(task_id, update)

    def delete_task(self, task_id: str) -> None:
        self._repository.delete_task(task_id)
