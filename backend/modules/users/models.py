"""
Users module data models.

Profiles mirror the ``profiles`` table; the request/response models
cover profile edits and the two privileged admin operations.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import UserRole


class Profile(BaseModel):
    """A row of the ``profiles`` table (one per auth identity)."""

    id: str = Field(..., description="User ID (UUID, same as the auth identity)")
    email: str = Field(..., description="Email address")
    name: str = Field(default="", description="Display name")
    role: UserRole = Field(default=UserRole.WORKER, description="admin or worker")
    created_at: datetime = Field(..., description="When the profile was created")
    is_blocked: bool = Field(default=False, description="Blocked by an admin")
    phone_number: Optional[str] = Field(None, description="Optional phone number")
    avatar_url: Optional[str] = Field(None, description="Optional avatar image URL")


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile."""

    phone_number: Optional[str] = Field(None, max_length=32)
    avatar_url: Optional[str] = Field(None, max_length=2048)


class BlockRequest(BaseModel):
    """Block or unblock a user."""

    blocked: bool


class CreateAdminRequest(BaseModel):
    """Body of the create-admin operation."""

    name: str = ""
    email: str = ""


class CreateAdminResponse(BaseModel):
    """Result of the create-admin operation."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    email: str
    temporary_password: str = Field(..., alias="temporaryPassword")
    message: str = "Admin user created successfully"


class ResetPasswordRequest(BaseModel):
    """Body of the reset-password operation."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., alias="userId")


class ResetPasswordResponse(BaseModel):
    """Result of the reset-password operation."""

    model_config = ConfigDict(populate_by_name=True)

    temporary_password: str = Field(..., alias="temporaryPassword")
