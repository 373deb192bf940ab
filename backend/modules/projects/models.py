"""
Projects module data models.
"""

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Project(BaseModel):
    """A named campaign that groups time slots."""

    id: str = Field(..., description="Project ID (UUID)")
    name: str = Field(..., description="Project name")
    starting_date: date = Field(..., description="First day of the campaign")
    created_by: Optional[str] = Field(None, description="Admin who created the project")
    created_at: datetime = Field(..., description="When the project was created")


class CreateProjectRequest(BaseModel):
    """Request to create a project."""

    name: str = Field(..., min_length=1, max_length=200)
    starting_date: date

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Project name must not be blank")
        return value


class ProjectDeletion(BaseModel):
    """What a project delete removed through the cascade."""

    project_id: str
    slots_removed: int = 0
    reservations_removed: int = 0
