"""
Google OAuth 2.0 login exchange.

Builds the consent URL, trades an authorization code for an access token
and reads the account email from the userinfo endpoint. The result is a
verified identity that TokenService can sign.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

import httpx
from pydantic import ValidationError as PydanticValidationError

from .models import GoogleUserInfo
from .exceptions import OAuthExchangeError

logger = logging.getLogger(__name__)

GOOGLE_AUTH_URL = "https://accounts.google.com/o/oauth2/v2/auth"
GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_USERINFO_URL = "https://www.googleapis.com/oauth2/v2/userinfo"
GOOGLE_SCOPES = ["openid", "https://www.googleapis.com/auth/userinfo.email"]


class GoogleOAuthClient:
    """
    Client for the Google authorization code flow.

    Args:
        client_id: OAuth client ID
        client_secret: OAuth client secret
        redirect_url: Callback URL registered with Google
        timeout: Seconds allowed for each HTTP call
        transport: Optional httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._redirect_url = redirect_url
        self._timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self._client_id and self._client_secret and self._redirect_url)

    def authorization_url(self, state: str) -> str:
        """URL of the Google consent page for this client."""
        params = {
            "client_id": self._client_id,
            "redirect_uri": self._redirect_url,
            "response_type": "code",
            "scope": " ".join(GOOGLE_SCOPES),
            "state": state,
            "access_type": "online",
        }
        return f"{GOOGLE_AUTH_URL}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> GoogleUserInfo:
        """
        Exchange an authorization code for the caller's Google identity.

        Raises:
            OAuthExchangeError: If Google rejects the code, is unreachable,
                or returns no verified email.
        """
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                token_response = await client.post(
                    GOOGLE_TOKEN_URL,
                    data={
                        "code": code,
                        "client_id": self._client_id,
                        "client_secret": self._client_secret,
                        "redirect_uri": self._redirect_url,
                        "grant_type": "authorization_code",
                    },
                    headers={"Accept": "application/json"},
                )
                token_response.raise_for_status()
                access_token = token_response.json().get("access_token")
                if not access_token:
                    raise OAuthExchangeError("Token response did not include an access token")

                userinfo_response = await client.get(
                    GOOGLE_USERINFO_URL,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                userinfo_response.raise_for_status()
                payload = userinfo_response.json()
            except (httpx.HTTPError, ValueError) as e:
                logger.warning("Google OAuth exchange failed: %s", e)
                raise OAuthExchangeError("Identity provider request failed", original_error=str(e))

        try:
            user_info = GoogleUserInfo.model_validate(payload)
        except PydanticValidationError:
            raise OAuthExchangeError("Identity provider returned no email")
        if not user_info.verified_email:
            raise OAuthExchangeError("Identity provider email is not verified")
        return user_info
