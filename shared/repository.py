"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB collection access and the per-call timeout.
"""

from contextlib import contextmanager
from typing import Iterator, TypeVar, Generic

import pymongo
from pymongo.collection import Collection


T = TypeVar("T")

DEFAULT_TIMEOUT = 10.0  # seconds


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - MongoDB collection access via self._collection
    - Deadline-bounded operations via self._deadline()
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle document-to-Pydantic model mapping internally.

    Example:
        class TaskRepository(BaseRepository[Task]):
            def get_by_id(self, task_id: str) -> Task:
                with self._deadline():
                    doc = self._collection.find_one({"_id": ObjectId(task_id)})
                return self._map_to_task(doc)
    """

    def __init__(self, collection: Collection, timeout: float = DEFAULT_TIMEOUT) -> None:
        """
        Initialize the repository with a MongoDB collection.

        Args:
            collection: pymongo Collection for database operations.
            timeout: Seconds allowed for each repository call.
        """
        self._collection = collection
        self._timeout = timeout

    @contextmanager
    def _deadline(self) -> Iterator[None]:
        """Bound every pymongo operation inside the block by the timeout."""
        with pymongo.timeout(self._timeout):
            yield
