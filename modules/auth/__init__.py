"""
Authentication module.

Handles bearer token issuing/verification and Google sign-in.

Public API:
- ITokenService: Interface for token operations
- TokenClaims: Decoded token claims
- GoogleOAuthClient: Login exchange with Google
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import ITokenService
from .models import TokenClaims, GoogleUserInfo, TokenResponse
from .oauth import GoogleOAuthClient
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
    TokenSigningError,
    OAuthExchangeError,
    OAuthStateMismatchError,
)

__all__ = [
    # Interface
    "ITokenService",
    # Models
    "TokenClaims",
    "GoogleUserInfo",
    "TokenResponse",
    "GoogleOAuthClient",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
    "TokenSigningError",
    "OAuthExchangeError",
    "OAuthStateMismatchError",
]
