"""
Users module interface.

The API layer and the admin console depend on IUserService, not the
concrete implementation.
"""

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from .models import (
    CreateAdminRequest,
    CreateAdminResponse,
    Profile,
    ProfileUpdate,
    ResetPasswordResponse,
)


@runtime_checkable
class IUserService(Protocol):
    """Interface for user management and privileged admin operations."""

    async def list_users(self) -> list[Profile]:
        """All profiles, newest first."""
        ...

    async def get_user(self, user_id: str) -> Profile:
        """
        Get one profile.

        Raises:
            ProfileNotFoundError: If the user has no profile
        """
        ...

    async def set_blocked(
        self,
        actor: AuthenticatedUser,
        user_id: str,
        blocked: bool,
    ) -> Profile:
        """
        Block or unblock a user.

        Raises:
            SelfModificationError: If the admin targets their own account
            ProfileNotFoundError: If the user doesn't exist
        """
        ...

    async def delete_user(self, actor: AuthenticatedUser, user_id: str) -> None:
        """
        Delete a user's identity, profile and reservations.

        Raises:
            SelfModificationError: If the admin targets their own account
            ProfileNotFoundError: If the user doesn't exist
        """
        ...

    async def update_own_profile(self, user_id: str, update: ProfileUpdate) -> Profile:
        """Change the caller's phone number and avatar URL."""
        ...

    async def export_csv(self, on: Optional[date] = None) -> tuple[str, str]:
        """
        Export all users as CSV.

        Returns:
            (filename, csv_text)
        """
        ...

    async def create_admin(self, request: CreateAdminRequest) -> CreateAdminResponse:
        """
        Create a confirmed admin identity with a temporary password.

        Raises:
            MissingAdminFieldsError: If name or email is empty
            IdentityProviderError: If Supabase Auth rejects the identity
            AdminProfileSetupError: If the profile could not be promoted
        """
        ...

    async def reset_password(self, user_id: str) -> ResetPasswordResponse:
        """
        Assign a new temporary password to a user.

        Raises:
            ProfileNotFoundError: If the user doesn't exist
            IdentityProviderError: If Supabase Auth rejects the change
        """
        ...
