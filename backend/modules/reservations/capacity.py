"""
Seat-capacity bookkeeping.

Pure functions: occupancy of a slot from its reservation rows, the
availability filter used by the admin slot list, and the expansion of a
recurring weekday pattern into concrete slots. Nothing here talks to the
store.
"""

from datetime import date, datetime, time, timezone
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from shared.dates import combine, get_zone, iter_days
from .exceptions import (
    EmptyWeekdaySelectionError,
    InvalidDateRangeError,
    InvalidSeatCountError,
    InvalidSlotRangeError,
    NoSlotsGeneratedError,
)
from .models import (
    BatchTimeSlotRequest,
    CreateTimeSlotRequest,
    NewTimeSlot,
    Reservation,
    SlotOccupancy,
    TimeSlot,
)


def is_full(reservation_count: int, total_seats: int) -> bool:
    return reservation_count >= total_seats


def build_occupancy(
    slot: TimeSlot,
    reservations: list[Reservation],
    reservation_count: Optional[int] = None,
    acting_user_id: Optional[str] = None,
    include_reservations: bool = False,
) -> SlotOccupancy:
    """
    Derive a slot's occupancy from the reservation rows referencing it.

    Args:
        slot: The slot.
        reservations: Reservation rows whose ``time_slot_id`` is the slot's id.
        reservation_count: Exact count reported by the store, when it was
            requested; falls back to ``len(reservations)``.
        acting_user_id: Worker whose own reservation should be flagged.
        include_reservations: Keep the rows on the result (admin view).
    """
    count = len(reservations) if reservation_count is None else reservation_count

    own = None
    if acting_user_id is not None:
        own = next((r for r in reservations if r.worker_id == acting_user_id), None)

    return SlotOccupancy(
        **slot.model_dump(),
        reservation_count=count,
        is_full=is_full(count, slot.total_seats),
        available_seats=max(slot.total_seats - count, 0),
        user_reserved=own is not None,
        user_reservation_id=own.id if own else None,
        reservations=reservations if include_reservations else [],
    )


def filter_by_availability(
    slots: Iterable[SlotOccupancy],
    show_available: bool = True,
    show_full: bool = True,
) -> list[SlotOccupancy]:
    """Keep open slots when ``show_available`` and full ones when ``show_full``."""
    return [
        slot for slot in slots
        if (slot.is_full and show_full) or (not slot.is_full and show_available)
    ]


def js_weekday(day: date) -> int:
    """Weekday number with 0=Sunday through 6=Saturday."""
    return (day.weekday() + 1) % 7


def slot_bounds(
    day: date,
    start: time,
    end: time,
    tz: Optional[ZoneInfo] = None,
) -> tuple[datetime, datetime]:
    """
    Start and end of a slot on ``day`` from wall-clock times-of-day.

    Raises:
        InvalidSlotRangeError: If the end is not after the start
    """
    tz = tz or get_zone()
    start_at = combine(day, start, tz)
    end_at = combine(day, end, tz)
    # Compare instants; wall-clock order breaks inside a DST gap
    if end_at.astimezone(timezone.utc) <= start_at.astimezone(timezone.utc):
        raise InvalidSlotRangeError(start_at, end_at)
    return start_at, end_at


def build_single_slot(
    project_id: str,
    request: CreateTimeSlotRequest,
    tz: Optional[ZoneInfo] = None,
) -> NewTimeSlot:
    """Validate a single-day request and turn it into an insertable slot."""
    if request.total_seats < 1:
        raise InvalidSeatCountError(request.total_seats)

    start_at, end_at = slot_bounds(request.date, request.start_time, request.end_time, tz)
    return NewTimeSlot(
        project_id=project_id,
        start_time=start_at,
        end_time=end_at,
        total_seats=request.total_seats,
    )


def generate_batch_slots(
    project_id: str,
    request: BatchTimeSlotRequest,
    tz: Optional[ZoneInfo] = None,
) -> list[NewTimeSlot]:
    """
    Expand a recurring weekday pattern into one slot per matching day.

    Every day in [start_date, end_date] whose weekday is selected gets a
    slot from ``start_time`` to ``end_time``.

    Raises:
        EmptyWeekdaySelectionError: If no weekday is selected
        InvalidDateRangeError: If end_date is not after start_date
        InvalidSeatCountError: If total_seats < 1
        InvalidSlotRangeError: If a generated slot would end at or before its start
        NoSlotsGeneratedError: If no day in the range matches
    """
    if not request.weekdays:
        raise EmptyWeekdaySelectionError()
    if request.end_date <= request.start_date:
        raise InvalidDateRangeError(request.start_date, request.end_date)
    if request.total_seats < 1:
        raise InvalidSeatCountError(request.total_seats)

    selected = set(request.weekdays)
    slots = []
    for day in iter_days(request.start_date, request.end_date):
        if js_weekday(day) not in selected:
            continue
        start_at, end_at = slot_bounds(day, request.start_time, request.end_time, tz)
        slots.append(NewTimeSlot(
            project_id=project_id,
            start_time=start_at,
            end_time=end_at,
            total_seats=request.total_seats,
        ))

    if not slots:
        raise NoSlotsGeneratedError()
    return slots
