"""
User management service.

Profile administration goes through the profiles table; identity changes
(create admin, reset password, delete) go through the Supabase Auth admin
API, which needs the service-role client.
"""

import logging
from datetime import date
from typing import Any, Optional

from supabase import AuthError, Client

from shared.config import get_settings
from shared.dates import today
from shared.models import AuthenticatedUser, UserRole

from .csv_export import export_filename, users_to_csv
from .exceptions import (
    AdminProfileSetupError,
    IdentityProviderError,
    MissingAdminFieldsError,
    ProfileNotFoundError,
    ProfileStoreError,
    SelfModificationError,
)
from .interfaces import IUserService
from .models import (
    CreateAdminRequest,
    CreateAdminResponse,
    Profile,
    ProfileUpdate,
    ResetPasswordResponse,
)
from .passwords import generate_temporary_password
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User service backed by Supabase.

    Args:
        repository: Profile table access.
        db: Service-role Supabase client, used for ``auth.admin`` calls.
    """

    def __init__(self, repository: ProfileRepository, db: Client):
        self._profiles = repository
        self._db = db
        self._settings = get_settings()

    @property
    def _auth_admin(self) -> Any:
        return self._db.auth.admin

    async def list_users(self) -> list[Profile]:
        return self._profiles.list_profiles()

    async def get_user(self, user_id: str) -> Profile:
        profile = self._profiles.get_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def set_blocked(
        self,
        actor: AuthenticatedUser,
        user_id: str,
        blocked: bool,
    ) -> Profile:
        if actor.id == user_id:
            raise SelfModificationError("block" if blocked else "unblock")

        profile = self._profiles.update(user_id, {"is_blocked": blocked})
        if profile is None:
            raise ProfileNotFoundError(user_id)

        logger.info(
            "User %s %s by %s", user_id, "blocked" if blocked else "unblocked", actor.id
        )
        return profile

    async def delete_user(self, actor: AuthenticatedUser, user_id: str) -> None:
        if actor.id == user_id:
            raise SelfModificationError("delete")

        await self.get_user(user_id)

        # profiles.id references auth.users(id) ON DELETE CASCADE, and
        # reservations.worker_id references profiles(id) ON DELETE CASCADE
        try:
            self._auth_admin.delete_user(user_id)
        except AuthError as e:
            raise IdentityProviderError(e.message)

        logger.info("User %s deleted by %s", user_id, actor.id)

    async def update_own_profile(self, user_id: str, update: ProfileUpdate) -> Profile:
        profile = self._profiles.update(
            user_id,
            {
                "phone_number": (update.phone_number or "").strip() or None,
                "avatar_url": (update.avatar_url or "").strip() or None,
            },
        )
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def export_csv(self, on: Optional[date] = None) -> tuple[str, str]:
        users = await self.list_users()
        return export_filename(on or today()), users_to_csv(users)

    async def create_admin(self, request: CreateAdminRequest) -> CreateAdminResponse:
        name = request.name.strip()
        email = request.email.strip()
        if not name or not email:
            raise MissingAdminFieldsError()

        temporary_password = generate_temporary_password(
            self._settings.temporary_password_prefix
        )

        try:
            created = self._auth_admin.create_user({
                "email": email,
                "password": temporary_password,
                "email_confirm": True,
                "user_metadata": {
                    "name": name,
                    "role": UserRole.ADMIN.value,
                    "must_change_password": True,
                },
            })
        except AuthError as e:
            raise IdentityProviderError(e.message)

        new_user_id = created.user.id

        # The signup trigger has already inserted a worker profile
        try:
            profile = self._profiles.update(
                new_user_id,
                {"name": name, "role": UserRole.ADMIN.value},
            )
        except ProfileStoreError as e:
            self._auth_admin.delete_user(new_user_id)
            raise AdminProfileSetupError(new_user_id) from e
        if profile is None:
            self._auth_admin.delete_user(new_user_id)
            raise AdminProfileSetupError(new_user_id)

        logger.info("Admin account created for %s (%s)", email, new_user_id)
        return CreateAdminResponse(
            success=True,
            email=email,
            temporary_password=temporary_password,
        )

    async def reset_password(self, user_id: str) -> ResetPasswordResponse:
        await self.get_user(user_id)

        temporary_password = generate_temporary_password(
            self._settings.temporary_password_prefix
        )
        try:
            self._auth_admin.update_user_by_id(
                user_id,
                {
                    "password": temporary_password,
                    "user_metadata": {"must_change_password": True},
                },
            )
        except AuthError as e:
            raise IdentityProviderError(e.message)

        logger.info("Temporary password issued for user %s", user_id)
        return ResetPasswordResponse(temporary_password=temporary_password)
