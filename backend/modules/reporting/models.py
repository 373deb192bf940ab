"""
Reporting module data models.
"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class DateRangePreset(str, Enum):
    """Named shorthands for the admin date filter."""

    LAST_MONTH = "last-month"
    LAST_TWO_WEEKS = "last-two-weeks"
    NEXT_TWO_WEEKS = "next-two-weeks"
    NEXT_MONTH = "next-month"
    ALL_TIME = "all-time"


class DateRange(BaseModel):
    """Inclusive date bounds; a missing bound means no filter on that side."""

    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_unbounded(self) -> bool:
        return self.start is None and self.end is None


class DailyCount(BaseModel):
    """Reservations on slots starting on one calendar day."""

    date: date
    count: int = Field(0, ge=0)


class ReservationSeries(BaseModel):
    """Zero-filled, ascending per-day reservation counts for a project."""

    project_id: str
    start_date: date
    end_date: date
    points: list[DailyCount] = Field(default_factory=list)
    total: int = 0
