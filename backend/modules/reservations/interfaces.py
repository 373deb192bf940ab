"""
Reservations module interface.

The API layer and the consoles depend on IReservationService for slot
occupancy and for reserve/cancel.
"""

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from .models import (
    BatchCreateResult,
    BatchTimeSlotRequest,
    CreateTimeSlotRequest,
    Reservation,
    SlotOccupancy,
    TimeSlot,
)


@runtime_checkable
class IReservationService(Protocol):
    """Interface for the reservation and capacity engine."""

    async def list_slots(
        self,
        project_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        acting_user_id: Optional[str] = None,
        include_reservations: bool = False,
    ) -> list[SlotOccupancy]:
        """
        Slots of a project with their occupancy, ordered by start time.

        Args:
            project_id: Project UUID
            start_date: Only slots starting at or after this day's midnight
            end_date: Only slots starting at or before 23:59:59.999 of this day
            acting_user_id: Worker whose own reservation is flagged per slot
            include_reservations: Attach reservation rows with worker names
        """
        ...

    async def reserve(self, slot_id: str, worker_id: str) -> Reservation:
        """
        Take one seat of a slot for a worker.

        Raises:
            TimeSlotNotFoundError: If the slot doesn't exist
            SlotFullError: If every seat is taken
            DuplicateReservationError: If the worker already holds a seat
        """
        ...

    async def cancel(self, reservation_id: str, actor: AuthenticatedUser) -> None:
        """
        Give a seat back.

        Raises:
            ReservationNotFoundError: If the reservation doesn't exist
            ReservationAccessDeniedError: If a worker cancels another's seat
        """
        ...

    async def get_slot(self, slot_id: str) -> TimeSlot:
        """
        Raises:
            TimeSlotNotFoundError: If the slot doesn't exist
        """
        ...

    async def create_slot(self, project_id: str, request: CreateTimeSlotRequest) -> TimeSlot:
        """
        Create one slot.

        Raises:
            InvalidSlotRangeError: If end time is not after start time
        """
        ...

    async def create_batch(
        self,
        project_id: str,
        request: BatchTimeSlotRequest,
    ) -> BatchCreateResult:
        """
        Create one slot per selected weekday across a date range, in one write.

        Raises:
            EmptyWeekdaySelectionError, InvalidDateRangeError,
            InvalidSlotRangeError, NoSlotsGeneratedError
        """
        ...

    async def delete_slot(self, slot_id: str) -> None:
        """
        Delete a slot and its reservations.

        Raises:
            TimeSlotNotFoundError: If the slot doesn't exist
        """
        ...
