"""
Task List API package.

Provides the FastAPI application for the task list service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
