"""
Reservations module.

Time slots with a seat limit, worker reservations and the capacity rules
that keep a slot from being overbooked.

Public API:
- IReservationService: Interface for slot and reservation operations
- TimeSlot, SlotOccupancy, Reservation: Core models
- Reservation exceptions: SlotFullError, DuplicateReservationError, etc.
"""

from .interfaces import IReservationService
from .models import (
    BatchCreateResult,
    BatchTimeSlotRequest,
    CreateTimeSlotRequest,
    NewTimeSlot,
    Reservation,
    ReservationWorker,
    SlotOccupancy,
    TimeSlot,
)
from .exceptions import (
    DuplicateReservationError,
    EmptyWeekdaySelectionError,
    InvalidDateRangeError,
    InvalidSeatCountError,
    InvalidSlotRangeError,
    NoSlotsGeneratedError,
    ReservationAccessDeniedError,
    ReservationNotFoundError,
    ReservationStoreError,
    SlotFullError,
    TimeSlotNotFoundError,
    UnknownProjectError,
)

__all__ = [
    # Interface
    "IReservationService",
    # Models
    "BatchCreateResult",
    "BatchTimeSlotRequest",
    "CreateTimeSlotRequest",
    "NewTimeSlot",
    "Reservation",
    "ReservationWorker",
    "SlotOccupancy",
    "TimeSlot",
    # Exceptions
    "DuplicateReservationError",
    "EmptyWeekdaySelectionError",
    "InvalidDateRangeError",
    "InvalidSeatCountError",
    "InvalidSlotRangeError",
    "NoSlotsGeneratedError",
    "ReservationAccessDeniedError",
    "ReservationNotFoundError",
    "ReservationStoreError",
    "SlotFullError",
    "TimeSlotNotFoundError",
    "UnknownProjectError",
]
