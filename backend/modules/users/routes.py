"""
User endpoints.

``router`` serves profiles and user management under /api/users;
``admin_router`` serves the privileged operations under /api/admin.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_user_service
from api.middleware.auth import get_current_user, require_admin
from shared.models import AuthenticatedUser

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

router = APIRouter()
admin_router = APIRouter()


@router.get("/me", response_model=Profile)
async def get_own_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> Profile:
    """
    Get the current user's profile.

    Requires authentication.
    """
    return await service.get_user(user.id)


@router.patch("/me", response_model=Profile)
async def update_own_profile(
    update: ProfileUpdate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> Profile:
    """Change the caller's phone number and avatar URL."""
    return await service.update_own_profile(user.id, update)


@router.get("", response_model=list[Profile])
async def list_users(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> list[Profile]:
    return await service.list_users()


@router.get("/export.csv")
async def export_users(
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> Response:
    """Download every registered user as a CSV attachment."""
    filename, content = await service.export_csv()
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/{user_id}/block", response_model=Profile)
async def set_blocked(
    user_id: str,
    request: BlockRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> Profile:
    """Block or unblock a user. Admins cannot block themselves."""
    return await service.set_blocked(admin, user_id, request.blocked)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> Response:
    """Delete a user with their profile and reservations."""
    await service.delete_user(admin, user_id)
    return Response(status_code=204)


@admin_router.post("/create-admin", response_model=CreateAdminResponse)
async def create_admin(
    request: CreateAdminRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> CreateAdminResponse:
    """
    Create a confirmed admin account with a temporary password.

    The password is returned once; the new admin must change it on first
    sign-in.
    """
    return await service.create_admin(request)


@admin_router.post("/reset-password", response_model=ResetPasswordResponse)
async def reset_password(
    request: ResetPasswordRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IUserService = Depends(get_user_service),
) -> ResetPasswordResponse:
    """Assign a new temporary password to a user."""
    return await service.reset_password(request.user_id)
