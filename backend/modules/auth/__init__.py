"""
Authentication module.

Handles JWT validation and resolves the caller's profile role.

Public API:
- IAuthService: Interface for auth operations
- JWTPayload: Decoded Supabase JWT claims
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    AccountBlockedError,
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
    InsufficientPermissionsError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "JWTPayload",
    # Exceptions
    "AccountBlockedError",
    "AuthNotConfiguredError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "UserNotFoundError",
    "InsufficientPermissionsError",
]
