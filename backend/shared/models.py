"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from pydantic import BaseModel, Field


class UserRole(str, Enum):
    """Role stored on every profile."""

    ADMIN = "admin"
    WORKER = "worker"


class AuthenticatedUser(BaseModel):
    """
    The caller of a request.

    Built from the verified JWT subject joined with the caller's profile
    row, and made available to route handlers via dependency injection.
    """

    id: str = Field(..., description="User ID (UUID from Supabase)")
    email: str = Field(..., description="User's email address")
    name: str = Field(default="", description="Display name from the profile")
    role: UserRole = Field(default=UserRole.WORKER, description="Profile role")
    is_blocked: bool = Field(default=False, description="Whether an admin blocked the account")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
