"""
Base exception classes for the Task List backend.

Each module should define its own exceptions that inherit from these bases.
Route handlers map them onto HTTP status codes.
"""

from typing import Optional, Any


class TaskListError(Exception):
    """
    Base exception for all Task List errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}


class NotFoundError(TaskListError):
    """Resource not found."""

    pass


class ValidationError(TaskListError):
    """Input validation failed."""

    pass


class AuthenticationError(TaskListError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ExternalServiceError(TaskListError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
