"""
Time slot and reservation endpoints.

Slots are listed per project; reserving and cancelling act on a single
slot or reservation.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from api.dependencies import get_reservation_service
from api.middleware.auth import get_current_user, require_admin
from shared.models import AuthenticatedUser

from .capacity import filter_by_availability
from .interfaces import IReservationService
from .models import (
    BatchCreateResult,
    BatchTimeSlotRequest,
    CreateTimeSlotRequest,
    Reservation,
    SlotOccupancy,
    TimeSlot,
)

router = APIRouter()


@router.get("/projects/{project_id}/slots", response_model=list[SlotOccupancy])
async def list_slots(
    project_id: str,
    start_date: Optional[date] = Query(default=None, description="First day, inclusive"),
    end_date: Optional[date] = Query(default=None, description="Last day, inclusive"),
    show_available: bool = Query(default=True),
    show_full: bool = Query(default=True),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReservationService = Depends(get_reservation_service),
) -> list[SlotOccupancy]:
    """
    List a project's slots with occupancy, earliest first.

    Admins also get the reservation rows of each slot.
    """
    slots = await service.list_slots(
        project_id,
        start_date=start_date,
        end_date=end_date,
        acting_user_id=user.id,
        include_reservations=user.is_admin,
    )
    return filter_by_availability(slots, show_available, show_full)


@router.post("/projects/{project_id}/slots", response_model=TimeSlot, status_code=201)
async def create_slot(
    project_id: str,
    request: CreateTimeSlotRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IReservationService = Depends(get_reservation_service),
) -> TimeSlot:
    """Create a single slot on one day."""
    return await service.create_slot(project_id, request)


@router.post(
    "/projects/{project_id}/slots/batch",
    response_model=BatchCreateResult,
    status_code=201,
)
async def create_slot_batch(
    project_id: str,
    request: BatchTimeSlotRequest,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IReservationService = Depends(get_reservation_service),
) -> BatchCreateResult:
    """Create one slot per selected weekday across a date range."""
    return await service.create_batch(project_id, request)


@router.delete("/slots/{slot_id}", status_code=204)
async def delete_slot(
    slot_id: str,
    admin: AuthenticatedUser = Depends(require_admin),
    service: IReservationService = Depends(get_reservation_service),
) -> Response:
    """Delete a slot together with its reservations."""
    await service.delete_slot(slot_id)
    return Response(status_code=204)


@router.post("/slots/{slot_id}/reserve", response_model=Reservation, status_code=201)
async def reserve_slot(
    slot_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReservationService = Depends(get_reservation_service),
) -> Reservation:
    """
    Take one seat of a slot for the caller.

    Fails with 409 when the slot is full or the caller already holds a seat.
    """
    return await service.reserve(slot_id, user.id)


@router.delete("/reservations/{reservation_id}", status_code=204)
async def cancel_reservation(
    reservation_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IReservationService = Depends(get_reservation_service),
) -> Response:
    """Cancel a reservation. Workers may only cancel their own."""
    await service.cancel(reservation_id, user)
    return Response(status_code=204)
