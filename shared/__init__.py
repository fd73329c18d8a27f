"""
Shared infrastructure for the Task List backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory
- exceptions: Base exception classes
- logging_setup: Root logger configuration

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_mongo_client,
    get_tasks_collection,
    ping_database,
    close_mongo_client,
    reset_client_cache,
)
from .exceptions import (
    TaskListError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_mongo_client",
    "get_tasks_collection",
    "ping_database",
    "close_mongo_client",
    "reset_client_cache",
    "TaskListError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "ExternalServiceError",
    "AuthenticatedUser",
]
