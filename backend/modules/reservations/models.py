"""
Reservations module data models.

A time slot is a bounded interval with a fixed number of seats; a
reservation is one worker's claim on one seat. Occupancy is derived,
never stored.
"""

from datetime import date, datetime, time
from typing import Annotated, Optional
from pydantic import BaseModel, Field, model_validator

from shared.dates import to_store


class TimeSlot(BaseModel):
    """A row of the ``time_slots`` table."""

    id: str = Field(..., description="Slot ID (UUID)")
    project_id: str = Field(..., description="Owning project")
    start_time: datetime = Field(..., description="Slot start (UTC)")
    end_time: datetime = Field(..., description="Slot end (UTC)")
    total_seats: int = Field(..., ge=1, description="Seat capacity")
    created_at: Optional[datetime] = Field(None, description="When the slot was created")


class NewTimeSlot(BaseModel):
    """A slot about to be inserted."""

    project_id: str
    start_time: datetime
    end_time: datetime
    total_seats: int = Field(..., ge=1)

    def to_row(self) -> dict:
        return {
            "project_id": self.project_id,
            "start_time": to_store(self.start_time),
            "end_time": to_store(self.end_time),
            "total_seats": self.total_seats,
        }


class ReservationWorker(BaseModel):
    """Worker details shown next to a reservation in the admin view."""

    name: str = ""
    email: str = ""
    avatar_url: Optional[str] = None


class Reservation(BaseModel):
    """A row of the ``reservations`` table."""

    id: str = Field(..., description="Reservation ID (UUID)")
    time_slot_id: str = Field(..., description="Reserved slot")
    worker_id: str = Field(..., description="Worker holding the seat")
    created_at: Optional[datetime] = Field(None, description="When the seat was taken")
    worker: Optional[ReservationWorker] = Field(None, description="Worker profile, admin view only")


class SlotOccupancy(TimeSlot):
    """
    A time slot with its derived occupancy at the moment of the fetch.

    ``user_reserved`` and ``user_reservation_id`` describe the acting
    worker; ``reservations`` is only filled for the admin view.
    """

    reservation_count: int = Field(0, ge=0)
    is_full: bool = False
    available_seats: int = Field(0, ge=0)
    user_reserved: bool = False
    user_reservation_id: Optional[str] = None
    reservations: list[Reservation] = Field(default_factory=list)


class CreateTimeSlotRequest(BaseModel):
    """Create one slot on a single day."""

    date: date
    start_time: time
    end_time: time
    total_seats: int = Field(..., ge=1, le=10000)


Weekday = Annotated[int, Field(ge=0, le=6)]


class BatchTimeSlotRequest(BaseModel):
    """
    Create one slot per selected weekday over a date range.

    Weekdays count from 0=Sunday to 6=Saturday.
    """

    start_date: date
    end_date: date
    weekdays: list[Weekday] = Field(default_factory=lambda: [1, 2, 3, 4, 5])
    start_time: time
    end_time: time
    total_seats: int = Field(..., ge=1, le=10000)

    @model_validator(mode="after")
    def dedupe_weekdays(self) -> "BatchTimeSlotRequest":
        self.weekdays = sorted(set(self.weekdays))
        return self


class BatchCreateResult(BaseModel):
    """Slots inserted by a batch request."""

    created: int
    slots: list[TimeSlot]
