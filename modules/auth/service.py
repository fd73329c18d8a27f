"""
Token service implementation.

Issues and verifies HMAC-signed JWTs with a single process-wide secret.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from .interfaces import ITokenService
from .models import TokenClaims
from .exceptions import (
    AuthNotConfiguredError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenSigningError,
)

logger = logging.getLogger(__name__)

SIGNING_ALGORITHM = "HS256"

# Only the HMAC family is accepted; anything else (none, RS*, ES*, PS*)
# is refused before the signature is looked at.
ACCEPTED_ALGORITHMS = ["HS256", "HS384", "HS512"]

DEFAULT_TOKEN_TTL = timedelta(hours=72)


class TokenService(ITokenService):
    """
    Implementation of the token service.

    The secret is fixed at construction; the instance holds no other
    state and is safe to share between request threads.
    """

    def __init__(
        self,
        secret: str,
        ttl: timedelta = DEFAULT_TOKEN_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._secret = secret
        self._ttl = ttl
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def issue_token(self, identity: str) -> str:
        """Sign a token asserting ``identity``, valid for the configured TTL."""
        if not self._secret:
            raise TokenSigningError("Server authentication not configured")
        if not identity:
            raise TokenSigningError("Cannot issue a token without an identity")

        now = self._clock()
        payload = {
            "sub": identity,
            "iat": int(now.timestamp()),
            "exp": int((now + self._ttl).timestamp()),
        }
        try:
            return jwt.encode(payload, self._secret, algorithm=SIGNING_ALGORITHM)
        except jwt.PyJWTError as e:
            raise TokenSigningError(str(e))

    def verify_token(self, token: str) -> TokenClaims:
        """
        Verify signature, algorithm and expiry, then return the claims.

        A token is accepted only when decoding succeeds and every check
        passes; any failure raises.
        """
        if not token:
            raise MissingTokenError()
        if not self._secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=ACCEPTED_ALGORITHMS,
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            logger.info("Rejected token: %s", e)
            raise InvalidTokenError(f"Invalid token: {e}")

        try:
            return TokenClaims(**payload)
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: malformed claims")


def create_token_service(secret: str, ttl_hours: int = 72) -> TokenService:
    """Build a TokenService from configuration values."""
    if not secret:
        logger.warning("JWT_SECRET is not set; protected routes will reject every request")
    return TokenService(secret, ttl=timedelta(hours=ttl_hours))
