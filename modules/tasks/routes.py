"""
Task API endpoints.

Provides REST endpoints for task CRUD operations. Every route requires a
bearer token. Handlers are plain functions, so FastAPI runs each request
on a worker thread while it waits on MongoDB.
"""

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import AuthenticatedRoute, get_current_user
from api.dependencies import get_task_service
from shared.models import AuthenticatedUser

from .interfaces import ITaskService
from .models import CreateTaskRequest, Task, TaskUpdate
from .exceptions import EmptyTaskUpdateError, InvalidTaskIdError, TaskNotFoundError

router = APIRouter(route_class=AuthenticatedRoute)


@router.get("", response_model=list[Task])
def list_tasks(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> list[Task]:
    """
    List all tasks, most recently created first.
    """
    return service.list_tasks()


@router.post("", response_model=Task, status_code=201)
def create_task(
    request: CreateTaskRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """
    Create a new task.

    description defaults to "" and completed to false.
    """
    return service.create_task(request)


@router.get("/{task_id}", response_model=Task)
def get_task(
    task_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """
    Get a single task.
    """
    try:
        return service.get_task(task_id)
    except InvalidTaskIdError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.api_route("/{task_id}", methods=["PUT", "PATCH"], response_model=Task)
def update_task(
    task_id: str,
    update: TaskUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> Task:
    """
    Partially update a task.

    Only the fields present in the body are changed. updatedAt is always
    refreshed. A body naming no fields is rejected with 400.
    """
    try:
        return service.update_task(task_id, update)
    except (InvalidTaskIdError, EmptyTaskUpdateError) as e:
        raise HTTPException(status_code=400, detail=e.message)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")


@router.delete("/{task_id}", status_code=204)
def delete_task(
    task_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ITaskService = Depends(get_task_service),
) -> None:
    """
    Delete a task. Deleting a missing task returns 404.
    """
    try:
        service.delete_task(task_id)
    except InvalidTaskIdError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except TaskNotFoundError:
        raise HTTPException(status_code=404, detail="Task not found")
