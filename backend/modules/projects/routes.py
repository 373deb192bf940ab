"""
Project endpoints.

Any signed-in user can list projects; creating and deleting is admin only.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_project_service
from api.middleware.auth import get_current_user, require_admin
from shared.models import AuthenticatedUser

from .interfaces import IProjectService
from .models import CreateProjectRequest, Project, ProjectDeletion

router = APIRouter()


@router.get("", response_model=list[Project])
async def list_projects(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> list[Project]:
    """List projects, latest starting date first."""
    return await service.list_projects()


@router.post("", response_model=Project, status_code=201)
async def create_project(
    request: CreateProjectRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IProjectService = Depends(get_project_service),
) -> Project:
    return await service.create_project(request, admin.id)


@router.get("/{project_id}", response_model=Project)
async def get_project(
    project_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IProjectService = Depends(get_project_service),
) -> Project:
    return await service.get_project(project_id)


@router.delete("/{project_id}", response_model=ProjectDeletion)
async def delete_project(
    project_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IProjectService = Depends(get_project_service),
) -> ProjectDeletion:
    """
    Delete a project.

    Its time slots and their reservations go with it; the response reports
    how many of each were removed.
    """
    return await service.delete_project(project_id)
