"""
Login endpoints.

Google sign-in: /login redirects to the consent page, /callback trades the
returned code for the caller's email and answers with a signed token.
"""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, HTTPException, Query, Response
from fastapi.responses import RedirectResponse

from api.dependencies import get_oauth_client, get_token_service

from .interfaces import ITokenService
from .models import TokenResponse
from .oauth import GoogleOAuthClient
from .exceptions import OAuthExchangeError, OAuthStateMismatchError, TokenSigningError

logger = logging.getLogger(__name__)

router = APIRouter()

STATE_COOKIE = "oauth_state"
STATE_MAX_AGE = 600  # seconds


def check_state(state: Optional[str], expected: Optional[str]) -> None:
    """Raise unless the callback state matches the one stored at login."""
    if not state or not expected or not secrets.compare_digest(state, expected):
        raise OAuthStateMismatchError()


@router.get("/google/login")
async def google_login(
    oauth: GoogleOAuthClient = Depends(get_oauth_client),
) -> RedirectResponse:
    """
    Redirect to the Google consent page.

    A random state value is kept in an HTTP-only cookie and checked by
    the callback.
    """
    if not oauth.configured:
        raise HTTPException(status_code=503, detail="Google login not configured")

    state = secrets.token_urlsafe(24)
    response = RedirectResponse(oauth.authorization_url(state), status_code=307)
    response.set_cookie(
        STATE_COOKIE,
        state,
        max_age=STATE_MAX_AGE,
        httponly=True,
        samesite="lax",
    )
    return response


@router.get("/google/callback", response_model=TokenResponse)
async def google_callback(
    response: Response,
    code: Optional[str] = Query(default=None, description="Authorization code from Google"),
    state: Optional[str] = Query(default=None, description="State echoed by Google"),
    oauth_state: Optional[str] = Cookie(default=None),
    oauth: GoogleOAuthClient = Depends(get_oauth_client),
    tokens: ITokenService = Depends(get_token_service),
) -> TokenResponse:
    """
    Complete Google sign-in and return a bearer token.
    """
    if not code:
        raise HTTPException(status_code=400, detail="Missing authorization code")
    try:
        check_state(state, oauth_state)
    except OAuthStateMismatchError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        user_info = await oauth.exchange_code(code)
    except OAuthExchangeError:
        raise HTTPException(status_code=502, detail="Login with identity provider failed")

    try:
        token = tokens.issue_token(user_info.email)
    except TokenSigningError:
        logger.exception("Could not issue token")
        raise HTTPException(status_code=500, detail="Internal server error")

    logger.info("Issued token for %s", user_info.email)
    response.delete_cookie(STATE_COOKIE)
    return TokenResponse(token=token)
