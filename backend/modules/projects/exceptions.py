"""
Projects module exceptions.
"""

from typing import Optional

from shared.exceptions import ExternalServiceError, NotFoundError


class ProjectNotFoundError(NotFoundError):
    """Raised when a project is not found."""

    def __init__(self, project_id: str):
        super().__init__(
            f"Project not found: {project_id}",
            code="PROJECT_NOT_FOUND",
            details={"project_id": project_id},
        )


class ProjectStoreError(ExternalServiceError):
    """Raised when a project read or write fails in the store."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="supabase",
            code="PROJECT_STORE_ERROR",
            details={"original_error": original_error} if original_error else {},
        )
