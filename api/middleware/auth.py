"""
Bearer token authentication for protected routes.

Checks the Authorization header, verifies the token and binds the
caller's identity to the request before the route handler runs.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Coroutine, Optional
from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.routing import APIRoute
from fastapi.security import APIKeyHeader

from modules.auth.exceptions import ExpiredTokenError
from modules.auth.interfaces import ITokenService
from modules.auth.models import TokenClaims
from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser
from ..dependencies import get_token_service

logger = logging.getLogger(__name__)

# Scheme prefix is matched exactly: case-sensitive, one space.
BEARER_PREFIX = "Bearer "

# Request state attribute holding the AuthenticatedUser
USER_STATE_KEY = "user"

# Raw header extractor. HTTPBearer would accept any casing of the scheme.
authorization_header = APIKeyHeader(
    name="Authorization",
    scheme_name="BearerToken",
    description="Bearer token issued by /auth/google/callback",
    auto_error=False,
)


class AuthError(HTTPException):
    """Authentication error with consistent format."""
    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


def extract_bearer_token(header_value: Optional[str]) -> str:
    """
    Return the token part of an Authorization header.

    Raises:
        AuthError: If the header is absent or not a Bearer credential
    """
    if not header_value:
        raise AuthError("Missing authorization header")
    if not header_value.startswith(BEARER_PREFIX):
        raise AuthError("Malformed authorization header")
    token = header_value[len(BEARER_PREFIX):]
    if not token:
        raise AuthError("Missing bearer token")
    return token


def get_user_from_claims(claims: TokenClaims) -> AuthenticatedUser:
    """
    Convert verified token claims to an AuthenticatedUser.

    Args:
        claims: Decoded token claims

    Returns:
        AuthenticatedUser instance
    """
    return AuthenticatedUser(
        id=claims.sub,
        issued_at=datetime.fromtimestamp(claims.iat, tz=timezone.utc) if claims.iat else None,
        expires_at=datetime.fromtimestamp(claims.exp, tz=timezone.utc),
    )


def authenticate(
    request: Request,
    authorization: Optional[str],
    tokens: ITokenService,
) -> AuthenticatedUser:
    """
    Verify the Authorization header value and bind the caller to the request.

    The token must decode, carry an HMAC signature made with the server
    secret, and not have expired. On success the user is stored on
    ``request.state.user``.

    Raises:
        AuthError: On any failure (401)
    """
    token = extract_bearer_token(authorization)

    try:
        claims = tokens.verify_token(token)
    except ExpiredTokenError:
        logger.info("Rejected expired token for %s %s", request.method, request.url.path)
        raise AuthError("Token has expired")
    except AuthenticationError as e:
        logger.info("Rejected token for %s %s: %s", request.method, request.url.path, e.code)
        raise AuthError(e.message)

    user = get_user_from_claims(claims)
    setattr(request.state, USER_STATE_KEY, user)
    return user


async def get_current_user(
    request: Request,
    authorization: Optional[str] = Depends(authorization_header),
    tokens: ITokenService = Depends(get_token_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Returns the user bound by AuthenticatedRoute when the route has one,
    otherwise authenticates the request itself.

    Usage:
        @router.get("/protected")
        def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    user = getattr(request.state, USER_STATE_KEY, None)
    if user is None:
        user = authenticate(request, authorization, tokens)
    return user


class AuthenticatedRoute(APIRoute):
    """
    Route that authenticates before FastAPI reads the request body.

    An unauthenticated request is answered 401 whatever its body holds;
    body validation (422) only runs for callers with a valid token.
    """

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        handler = super().get_route_handler()

        async def authenticated_handler(request: Request) -> Response:
            overrides = getattr(request.app, "dependency_overrides", {})
            tokens = overrides.get(get_token_service, get_token_service)()
            authenticate(request, request.headers.get("Authorization"), tokens)
            return await handler(request)

        return authenticated_handler
