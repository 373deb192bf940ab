"""
Project service implementation.
"""

import logging

from .exceptions import ProjectNotFoundError
from .interfaces import IProjectService
from .models import CreateProjectRequest, Project, ProjectDeletion
from .repository import ProjectRepository

logger = logging.getLogger(__name__)


class ProjectService(IProjectService):
    """Project CRUD on top of ProjectRepository."""

    def __init__(self, repository: ProjectRepository):
        self._repo = repository

    async def list_projects(self) -> list[Project]:
        return self._repo.list_projects()

    async def get_project(self, project_id: str) -> Project:
        project = self._repo.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)
        return project

    async def create_project(
        self,
        request: CreateProjectRequest,
        created_by: str,
    ) -> Project:
        project = self._repo.create({
            "name": request.name,
            "starting_date": request.starting_date.isoformat(),
            "created_by": created_by,
        })
        logger.info("Project %s (%s) created by %s", project.id, project.name, created_by)
        return project

    async def delete_project(self, project_id: str) -> ProjectDeletion:
        await self.get_project(project_id)

        slot_ids = self._repo.get_slot_ids(project_id)
        reservation_count = self._repo.count_reservations(slot_ids)

        self._repo.delete(project_id)

        logger.info(
            "Project %s deleted with %d slot(s) and %d reservation(s)",
            project_id,
            len(slot_ids),
            reservation_count,
        )
        return ProjectDeletion(
            project_id=project_id,
            slots_removed=len(slot_ids),
            reservations_removed=reservation_count,
        )
