"""
Users module exceptions.
"""

from typing import Optional

from shared.exceptions import (
    ExternalServiceError,
    NotFoundError,
    SlotdeskError,
    ValidationError,
)


class ProfileNotFoundError(NotFoundError):
    """Raised when no profile exists for a user ID."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class SelfModificationError(ValidationError):
    """Raised when an admin tries to block or delete their own account."""

    def __init__(self, action: str):
        super().__init__(
            f"You cannot {action} your own account",
            code="SELF_MODIFICATION",
            details={"action": action},
        )


class MissingAdminFieldsError(ValidationError):
    """Raised when create-admin is called without a name or email."""

    def __init__(self):
        super().__init__("Name and email are required", code="MISSING_FIELDS")


class IdentityProviderError(ValidationError):
    """Raised when Supabase Auth rejects an identity change (e.g. email taken)."""

    def __init__(self, message: str):
        super().__init__(message, code="IDENTITY_REJECTED")


class ProfileStoreError(ExternalServiceError):
    """Raised when a profile read or write fails in the store."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="supabase",
            code="PROFILE_STORE_ERROR",
            details={"original_error": original_error} if original_error else {},
        )


class AdminProfileSetupError(SlotdeskError):
    """Raised when a new admin identity was created but its profile could not be set."""

    def __init__(self, user_id: str):
        super().__init__(
            "Failed to create admin profile",
            code="ADMIN_PROFILE_FAILED",
            details={"user_id": user_id},
        )
