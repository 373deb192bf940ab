"""
Project repository for database access.

Encapsulates Supabase queries for the ``projects`` table, plus the counts
of dependent rows a project delete will cascade to.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository
from .exceptions import ProjectStoreError
from .models import Project


class ProjectRepository(BaseRepository[Project]):
    """
    Repository for project data access.

    Note: This repository does NOT perform authorization checks.
    """

    def list_projects(self) -> list[Project]:
        """All projects, latest starting date first."""
        try:
            result = (
                self._db.table("projects")
                .select("*")
                .order("starting_date", desc=True)
                .execute()
            )
        except APIError as e:
            raise ProjectStoreError("Failed to load projects", e.message)
        return [self._map_to_project(row) for row in result.data]

    def get_by_id(self, project_id: str) -> Optional[Project]:
        try:
            result = self._db.table("projects").select("*").eq("id", project_id).execute()
        except APIError as e:
            raise ProjectStoreError("Failed to load project", e.message)

        if not result.data:
            return None
        return self._map_to_project(result.data[0])

    def create(self, data: dict[str, Any]) -> Project:
        """
        Insert a project.

        Args:
            data: Dictionary with name, starting_date and created_by.

        Returns:
            Created Project with generated ID and timestamp.
        """
        try:
            result = self._db.table("projects").insert(data).execute()
        except APIError as e:
            raise ProjectStoreError("Failed to create project", e.message)
        return self._map_to_project(result.data[0])

    def delete(self, project_id: str) -> None:
        """
        Delete a project.

        Note: Time slots and their reservations are deleted via CASCADE.
        """
        try:
            self._db.table("projects").delete().eq("id", project_id).execute()
        except APIError as e:
            raise ProjectStoreError("Failed to delete project", e.message)

    def get_slot_ids(self, project_id: str) -> list[str]:
        """IDs of every time slot in a project."""
        try:
            result = (
                self._db.table("time_slots")
                .select("id")
                .eq("project_id", project_id)
                .execute()
            )
        except APIError as e:
            raise ProjectStoreError("Failed to load time slots", e.message)
        return [str(row["id"]) for row in result.data]

    def count_reservations(self, slot_ids: list[str]) -> int:
        """Number of reservations referencing any of ``slot_ids``."""
        if not slot_ids:
            return 0
        try:
            result = (
                self._db.table("reservations")
                .select("id", count="exact")
                .in_("time_slot_id", slot_ids)
                .execute()
            )
        except APIError as e:
            raise ProjectStoreError("Failed to count reservations", e.message)
        return result.count or 0

    def _map_to_project(self, data: dict[str, Any]) -> Project:
        """Map database row to Project model."""
        created_by = data.get("created_by")
        return Project(
            id=str(data["id"]),
            name=data["name"],
            starting_date=data["starting_date"],
            created_by=str(created_by) if created_by else None,
            created_at=data["created_at"],
        )
