"""
Reservations module exceptions.
"""

from datetime import date, datetime
from typing import Optional

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)


class TimeSlotNotFoundError(NotFoundError):
    """Raised when a time slot is not found."""

    def __init__(self, slot_id: str):
        super().__init__(
            f"Time slot not found: {slot_id}",
            code="TIME_SLOT_NOT_FOUND",
            details={"slot_id": slot_id},
        )


class ReservationNotFoundError(NotFoundError):
    """Raised when a reservation is not found."""

    def __init__(self, reservation_id: str):
        super().__init__(
            f"Reservation not found: {reservation_id}",
            code="RESERVATION_NOT_FOUND",
            details={"reservation_id": reservation_id},
        )


class UnknownProjectError(NotFoundError):
    """Raised when slots are created for a project that doesn't exist."""

    def __init__(self, project_id: str):
        super().__init__(
            f"Project not found: {project_id}",
            code="PROJECT_NOT_FOUND",
            details={"project_id": project_id},
        )


class SlotFullError(ConflictError):
    """Raised when every seat of a slot is already taken."""

    def __init__(self, slot_id: str):
        super().__init__(
            "This time slot is full",
            code="SLOT_FULL",
            details={"slot_id": slot_id},
        )


class DuplicateReservationError(ConflictError):
    """Raised when a worker already holds a seat in the slot."""

    def __init__(self, slot_id: str, worker_id: str):
        super().__init__(
            "You already have a reservation for this time slot",
            code="ALREADY_RESERVED",
            details={"slot_id": slot_id, "worker_id": worker_id},
        )


class ReservationAccessDeniedError(AuthorizationError):
    """Raised when a worker tries to cancel someone else's reservation."""

    def __init__(self, reservation_id: str, user_id: str):
        super().__init__(
            "You can only cancel your own reservations",
            code="RESERVATION_ACCESS_DENIED",
            details={"reservation_id": reservation_id, "user_id": user_id},
        )


class InvalidSlotRangeError(ValidationError):
    """Raised when a slot would end at or before its start."""

    def __init__(self, start: datetime, end: datetime):
        super().__init__(
            "End time must be after start time",
            code="INVALID_SLOT_RANGE",
            details={"start_time": start.isoformat(), "end_time": end.isoformat()},
        )


class InvalidSeatCountError(ValidationError):
    """Raised when a slot is given fewer than one seat."""

    def __init__(self, total_seats: int):
        super().__init__(
            "A time slot needs at least one seat",
            code="INVALID_SEAT_COUNT",
            details={"total_seats": total_seats},
        )


class EmptyWeekdaySelectionError(ValidationError):
    """Raised when a batch request selects no weekdays."""

    def __init__(self):
        super().__init__("Please select at least one weekday", code="EMPTY_WEEKDAY_SELECTION")


class InvalidDateRangeError(ValidationError):
    """Raised when a batch end date is not after its start date."""

    def __init__(self, start: date, end: date):
        super().__init__(
            "End date must be after start date",
            code="INVALID_DATE_RANGE",
            details={"start_date": start.isoformat(), "end_date": end.isoformat()},
        )


class NoSlotsGeneratedError(ValidationError):
    """Raised when no day in a batch range matches the selected weekdays."""

    def __init__(self):
        super().__init__(
            "No time slots to create with the selected criteria",
            code="NO_SLOTS_GENERATED",
        )


class ReservationStoreError(ExternalServiceError):
    """Raised when a slot or reservation read or write fails in the store."""

    def __init__(self, message: str, original_error: Optional[str] = None):
        super().__init__(
            message,
            service="supabase",
            code="RESERVATION_STORE_ERROR",
            details={"original_error": original_error} if original_error else {},
        )
