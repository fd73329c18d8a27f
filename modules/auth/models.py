"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class TokenClaims(BaseModel):
    """
    Decoded bearer token claims.

    Tokens are issued by TokenService after a successful Google login.
    """

    model_config = ConfigDict(extra="ignore")

    sub: str = Field(..., min_length=1, description="Subject (verified email)")
    exp: int = Field(..., description="Expiration timestamp")
    iat: Optional[int] = Field(None, description="Issued at timestamp")


class GoogleUserInfo(BaseModel):
    """Subset of the Google userinfo response that login relies on."""

    model_config = ConfigDict(extra="ignore")

    email: str = Field(..., min_length=1, description="Google account email")
    verified_email: bool = Field(default=True, description="Whether Google verified the email")
    name: Optional[str] = Field(None, description="Display name")


class TokenResponse(BaseModel):
    """Response returned by the login callback."""

    token: str = Field(..., description="Signed bearer token")
