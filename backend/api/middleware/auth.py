"""
Bearer-token authentication dependencies.

Validates Supabase JWTs through the auth service and enforces the
blocked flag and the admin role.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.models import AuthenticatedUser, UserRole
from modules.auth.exceptions import (
    AccountBlockedError,
    InsufficientPermissionsError,
    MissingTokenError,
)
from modules.auth.interfaces import IAuthService
from ..dependencies import get_auth_service

# Bearer token extractor
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires a signed-in, unblocked user.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None:
        raise MissingTokenError()

    user = await auth.validate_token(credentials.credentials)
    if user.is_blocked:
        raise AccountBlockedError(user.id)
    return user


async def require_admin(
    user: AuthenticatedUser = Depends(get_current_user),
) -> AuthenticatedUser:
    """Dependency that additionally requires the admin role."""
    if user.role != UserRole.ADMIN:
        raise InsufficientPermissionsError(UserRole.ADMIN.value, user.role.value)
    return user
