"""
Authentication module interface.

Other modules should depend on ITokenService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from .models import TokenClaims


@runtime_checkable
class ITokenService(Protocol):
    """
    Interface for bearer token operations.

    Issuing and verifying share a single secret held by the implementation.
    """

    def issue_token(self, identity: str) -> str:
        """
        Issue a signed token for a verified identity.

        Args:
            identity: Email confirmed by the identity provider

        Returns:
            Signed token string

        Raises:
            TokenSigningError: If the token cannot be signed
        """
        ...

    def verify_token(self, token: str) -> TokenClaims:
        """
        Verify a token and return its claims.

        Args:
            token: Token string from the Authorization header

        Returns:
            Decoded claims

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...
