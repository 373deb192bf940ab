"""
Authentication service implementation.

Validates Supabase JWT tokens and joins the subject with its profile row,
which carries the role and the blocked flag.
"""

from typing import Optional
import jwt

from shared.config import get_settings
from shared.models import AuthenticatedUser
from modules.users.repository import ProfileRepository

from .interfaces import IAuthService
from .models import JWTPayload
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    UserNotFoundError,
)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Uses Supabase JWT tokens for authentication and the ``profiles``
    table for roles.
    """

    def __init__(self, profiles: ProfileRepository):
        self._settings = get_settings()
        self._profiles = profiles

    def decode_token(self, token: Optional[str]) -> JWTPayload:
        if not token:
            raise MissingTokenError()
        if not self._settings.supabase_jwt_secret:
            raise AuthNotConfiguredError()

        try:
            payload = jwt.decode(
                token,
                self._settings.supabase_jwt_secret,
                algorithms=["HS256"],
                audience="authenticated",
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")

        return JWTPayload(**payload)

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        payload = self.decode_token(token)

        profile = self._profiles.get_by_id(payload.sub)
        if profile is None:
            raise UserNotFoundError(payload.sub)

        return AuthenticatedUser(
            id=profile.id,
            email=profile.email or payload.email or "",
            name=profile.name,
            role=profile.role,
            is_blocked=profile.is_blocked,
        )
