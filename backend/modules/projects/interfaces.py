"""
Projects module interface.
"""

from typing import Protocol, runtime_checkable

from .models import CreateProjectRequest, Project, ProjectDeletion


@runtime_checkable
class IProjectService(Protocol):
    """Interface for project operations used by the API and the consoles."""

    async def list_projects(self) -> list[Project]:
        """All projects, latest starting date first."""
        ...

    async def get_project(self, project_id: str) -> Project:
        """
        Get a project by ID.

        Raises:
            ProjectNotFoundError: If the project doesn't exist
        """
        ...

    async def create_project(
        self,
        request: CreateProjectRequest,
        created_by: str,
    ) -> Project:
        """Create a project owned by the admin ``created_by``."""
        ...

    async def delete_project(self, project_id: str) -> ProjectDeletion:
        """
        Delete a project with its time slots and reservations.

        Raises:
            ProjectNotFoundError: If the project doesn't exist
        """
        ...
