"""
Authentication module exceptions.

These exceptions are raised by the auth module and caught by the
access gate and the login routes to return appropriate HTTP responses.
"""

from typing import Optional

from shared.exceptions import (
    AuthenticationError,
    ExternalServiceError,
    TaskListError,
    ValidationError,
)


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed, badly signed or uses a disallowed algorithm."""

    def __init__(self, message: str = "Invalid authentication token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(AuthenticationError):
    """Raised when a token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_TOKEN")


class AuthNotConfiguredError(AuthenticationError):
    """Raised when the server has no signing secret."""

    def __init__(self, message: str = "Server authentication not configured"):
        super().__init__(message, code="AUTH_NOT_CONFIGURED")


class TokenSigningError(TaskListError):
    """Raised when a token cannot be issued."""

    def __init__(self, message: str = "Unable to issue token"):
        super().__init__(message, code="TOKEN_SIGNING_FAILED")


class OAuthStateMismatchError(ValidationError):
    """Raised when the callback state doesn't match the one set at login."""

    def __init__(self):
        super().__init__("OAuth state mismatch", code="OAUTH_STATE_MISMATCH")


class OAuthExchangeError(ExternalServiceError):
    """Raised when the identity provider exchange fails."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="google",
            code="OAUTH_EXCHANGE_FAILED",
            details={"original_error": original_error},
        )
