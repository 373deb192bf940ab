"""
Projects module.

Public API:
- IProjectService: Interface for project operations
- Project, CreateProjectRequest, ProjectDeletion: Models
"""

from .interfaces import IProjectService
from .models import CreateProjectRequest, Project, ProjectDeletion
from .exceptions import ProjectNotFoundError, ProjectStoreError

__all__ = [
    "IProjectService",
    "CreateProjectRequest",
    "Project",
    "ProjectDeletion",
    "ProjectNotFoundError",
    "ProjectStoreError",
]
