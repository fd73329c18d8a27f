"""
Task repository for database access.

Encapsulates all MongoDB queries and document mapping for the tasks
collection. Every call is a single-document operation (or a single
collection scan for listing); concurrent writes to the same task are
arbitrated by MongoDB itself.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection

from shared.repository import BaseRepository, DEFAULT_TIMEOUT
from .exceptions import InvalidTaskIdError, TaskNotFoundError
from .models import CreateTaskRequest, Task, TaskUpdate

logger = logging.getLogger(__name__)

LIST_ORDER = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def utc_now() -> datetime:
    """Current UTC time truncated to the millisecond precision MongoDB stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class TaskRepository(BaseRepository[Task]):
    """
    Repository for task data access.

    All methods return Pydantic models mapped from stored documents.
    PyMongo errors (connection loss, timeouts, codec failures) are not
    caught here; the API layer turns them into 500 responses.
    """

    def __init__(
        self,
        collection: Collection,
        timeout: float = DEFAULT_TIMEOUT,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        super().__init__(collection, timeout)
        self._clock = clock

    def ensure_indexes(self) -> None:
        """Create the index backing the list ordering."""
        with self._deadline():
            self._collection.create_index(LIST_ORDER)

    # -------------------------------------------------------------------------
    # CRUD operations
    # -------------------------------------------------------------------------

    def list_tasks(self) -> list[Task]:
        """
        List every task, most recently created first.

        Returns:
            All tasks sorted by createdAt descending.
        """
        with self._deadline():
            cursor = self._collection.find({}).sort(LIST_ORDER)
            try:
                return [self._map_to_task(doc) for doc in cursor]
            finally:
                cursor.close()

    def get_task(self, task_id: str) -> Task:
        """
        Get a task by ID.

        Raises:
            InvalidTaskIdError: If task_id is not an ObjectId.
            TaskNotFoundError: If no task has this ID.
        """
        oid = self._parse_id(task_id)
        with self._deadline():
            doc = self._collection.find_one({"_id": oid})
        if doc is None:
            raise TaskNotFoundError(task_id)
        return self._map_to_task(doc)

    def create_task(self, request: CreateTaskRequest) -> Task:
        """
        Insert a new task.

        createdAt and updatedAt are stamped with the same instant.

        Returns:
            The stored task with its generated ID.
        """
        now = self._clock()
        doc: dict[str, Any] = {
            "_id": ObjectId(),
            "title": request.title,
            "description": request.description,
            "completed": request.completed,
            "createdAt": now,
            "updatedAt": now,
        }
        with self._deadline():
            self._collection.insert_one(doc)
        logger.info("Created task %s", doc["_id"])
        return self._map_to_task(doc)

    def update_task(self, task_id: str, update: TaskUpdate) -> Task:
        """
        Apply a partial update and refresh updatedAt.

        Only the fields present in ``update`` are written. The caller is
        responsible for rejecting empty updates. The write is a single
        pipeline update so updatedAt can be compared with the stored
        createdAt: it is the clock value, or createdAt plus one
        millisecond if the clock has not moved past it.

        Returns:
            The task as it is after the update.

        Raises:
            InvalidTaskIdError: If task_id is not an ObjectId.
            TaskNotFoundError: If no task has this ID.
        """
        oid = self._parse_id(task_id)
        # $literal keeps client strings such as "$5 milk" from being read as field paths.
        stage = {name: {"$literal": value} for name, value in update.changes().items()}
        stage["updatedAt"] = {"$max": [self._clock(), {"$add": ["$createdAt", 1]}]}

        with self._deadline():
            doc = self._collection.find_one_and_update(
                {"_id": oid},
                [{"$set": stage}],
                return_document=ReturnDocument.AFTER,
            )
        if doc is None:
            raise TaskNotFoundError(task_id)
        logger.info("Updated task %s fields=%s", task_id, sorted(update.model_fields_set))
        return self._map_to_task(doc)

    def delete_task(self, task_id: str) -> None:
        """
        Delete a task.

        Raises:
            InvalidTaskIdError: If task_id is not an ObjectId.
            TaskNotFoundError: If nothing was deleted.
        """
        oid = self._parse_id(task_id)
        with self._deadline():
            result = self._collection.delete_one({"_id": oid})
        if result.deleted_count == 0:
            raise TaskNotFoundError(task_id)
        logger.info("Deleted task %s", task_id)

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _parse_id(task_id: str) -> ObjectId:
        """Convert a wire ID to an ObjectId, accepting only 24 hex characters."""
        if not isinstance(task_id, str) or len(task_id) != 24 or not ObjectId.is_valid(task_id):
            raise InvalidTaskIdError(task_id)
        return ObjectId(task_id)

    def _map_to_task(self, doc: dict[str, Any]) -> Task:
        """Map a stored document to a Task model."""
        return Task(
            id=str(doc["_id"]),
            title=doc["title"],
            description=doc.get("description") or "",
            completed=bool(doc.get("completed", False)),
            created_at=_as_utc(doc["createdAt"]),
            updated_at=_as_utc(doc["updatedAt"]),
        )


def _as_utc(value: datetime) -> datetime:
    # Documents written by other clients may come back naive.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
