"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from .models import JWTPayload


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer.
    """

    def decode_token(self, token: str) -> JWTPayload:
        """
        Verify a Supabase JWT and return its claims.

        Raises:
            MissingTokenError: If token is empty
            ExpiredTokenError: If token has expired
            InvalidTokenError: If signature or audience is wrong
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a JWT token and return the caller with their profile role.

        Args:
            token: JWT access token from Supabase Auth

        Returns:
            AuthenticatedUser with id, email, name, role and blocked flag

        Raises:
            AuthenticationError: If token is invalid or the user has no profile
        """
        ...
