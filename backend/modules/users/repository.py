"""
Profile repository for database access.

Encapsulates Supabase queries against the ``profiles`` table.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .exceptions import ProfileStoreError
from .models import Profile


class ProfileRepository(BaseRepository[Profile]):
    """
    Repository for profile data access.

    Note: This repository does NOT perform authorization checks.
    The service layer decides who may read or change which profile.
    """

    def list_profiles(self) -> list[Profile]:
        """All profiles, newest first."""
        try:
            result = (
                self._db.table("profiles")
                .select("*")
                .order("created_at", desc=True)
                .execute()
            )
        except APIError as e:
            raise ProfileStoreError("Failed to load users", e.message)
        return [self._map_to_profile(row) for row in result.data]

    def get_by_id(self, user_id: str) -> Optional[Profile]:
        """
        Get a profile by user ID.

        Returns:
            Profile, or None if the user has no profile row.
        """
        try:
            result = self._db.table("profiles").select("*").eq("id", user_id).execute()
        except APIError as e:
            raise ProfileStoreError("Failed to load user", e.message)

        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[Profile]:
        """
        Update columns of one profile.

        Returns:
            The updated profile, or None if no row matched.
        """
        try:
            result = self._db.table("profiles").update(data).eq("id", user_id).execute()
        except APIError as e:
            raise ProfileStoreError("Failed to update user", e.message)

        if not result.data:
            return None
        return self._map_to_profile(result.data[0])

    def _map_to_profile(self, data: dict[str, Any]) -> Profile:
        """Map database row to Profile model."""
        return Profile(
            id=str(data["id"]),
            email=data.get("email") or "",
            name=data.get("name") or "",
            role=data.get("role") or "worker",
            created_at=data["created_at"],
            is_blocked=bool(data.get("is_blocked", False)),
            phone_number=data.get("phone_number"),
            avatar_url=data.get("avatar_url"),
        )
