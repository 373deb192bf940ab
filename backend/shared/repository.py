"""
Base repository class for database access.

Repositories wrap the Supabase query builder for one group of tables and
map rows to the owning module's pydantic models.
"""

from typing import TypeVar, Generic
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Subclasses implement domain-specific data access methods and
    handle dict-to-model mapping internally.

    Example:
        class ProjectRepository(BaseRepository[Project]):
            def get_by_id(self, project_id: str) -> Optional[Project]:
                result = self._db.table("projects").select("*").eq("id", project_id).execute()
                if not result.data:
                    return None
                return self._map_to_project(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db
