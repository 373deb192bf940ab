"""
Users module.

Profiles, user management (block, delete, CSV export) and the privileged
admin operations (create admin, reset password).

Public API:
- IUserService: Interface for user operations
- Profile, ProfileUpdate: Profile models
- CreateAdminRequest/Response, ResetPasswordRequest/Response
"""

from .interfaces import IUserService
from .models import (
    BlockRequest,
    CreateAdminRequest,
    CreateAdminResponse,
    Profile,
    ProfileUpdate,
    ResetPasswordRequest,
    ResetPasswordResponse,
)
from .exceptions import (
    AdminProfileSetupError,
    IdentityProviderError,
    MissingAdminFieldsError,
    ProfileNotFoundError,
    ProfileStoreError,
    SelfModificationError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "BlockRequest",
    "CreateAdminRequest",
    "CreateAdminResponse",
    "Profile",
    "ProfileUpdate",
    "ResetPasswordRequest",
    "ResetPasswordResponse",
    # Exceptions
    "AdminProfileSetupError",
    "IdentityProviderError",
    "MissingAdminFieldsError",
    "ProfileNotFoundError",
    "ProfileStoreError",
    "SelfModificationError",
]
