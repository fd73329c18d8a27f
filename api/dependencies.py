"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations from Settings.

Settings are read once, when the container is created, and handed to the
services explicitly. Nothing downstream looks configuration up on its own.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ITokenService
    from modules.auth.oauth import GoogleOAuthClient
    from modules.tasks.interfaces import ITaskService
    from modules.tasks.repository import TaskRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._token_service: "ITokenService | None" = None
        self._oauth_client: "GoogleOAuthClient | None" = None
        self._task_repository: "TaskRepository | None" = None
        self._task_service: "ITaskService | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def tokens(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.service import create_token_service
            self._token_service = create_token_service(
                self._settings.jwt_secret,
                ttl_hours=self._settings.token_ttl_hours,
            )
        return self._token_service

    @property
    def oauth(self) -> "GoogleOAuthClient":
        """Get the Google OAuth client instance."""
        if self._oauth_client is None:
            from modules.auth.oauth import GoogleOAuthClient
            self._oauth_client = GoogleOAuthClient(
                client_id=self._settings.google_client_id,
                client_secret=self._settings.google_client_secret,
                redirect_url=self._settings.google_redirect_url,
                timeout=self._settings.request_timeout,
            )
        return self._oauth_client

    @property
    def task_repository(self) -> "TaskRepository":
        """Get the task repository instance."""
        if self._task_repository is None:
            from modules.tasks.repository import TaskRepository
            from shared.database import get_tasks_collection
            repository = TaskRepository(
                get_tasks_collection(),
                timeout=self._settings.request_timeout,
            )
            repository.ensure_indexes()
            self._task_repository = repository
        return self._task_repository

    @property
    def tasks(self) -> "ITaskService":
        """Get the task service instance."""
        if self._task_service is None:
            from modules.tasks.service import TaskService
            self._task_service = TaskService(repository=self.task_repository)
        return self._task_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._token_service = None
        self._oauth_client = None
        self._task_repository = None
        self._task_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() will create a fresh container
    with new service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_token_service() -> "ITokenService":
    """FastAPI dependency for the token service."""
    return get_container().tokens


def get_oauth_client() -> "GoogleOAuthClient":
    """FastAPI dependency for the Google OAuth client."""
    return get_container().oauth


def get_task_service() -> "ITaskService":
    """FastAPI dependency for the task service."""
    return get_container().tasks
