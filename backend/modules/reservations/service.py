"""
Reservation and capacity engine.

Occupancy is re-derived from the store on every call; nothing is cached
between requests. Seats are taken through the store's reserve_seat()
function, which is the single place capacity is enforced.
"""

import logging
from datetime import date
from typing import Optional

from shared.dates import end_of_day, get_zone, start_of_day
from shared.models import AuthenticatedUser

from .capacity import build_occupancy, build_single_slot, generate_batch_slots
from .exceptions import (
    ReservationAccessDeniedError,
    ReservationNotFoundError,
    TimeSlotNotFoundError,
)
from .interfaces import IReservationService
from .models import (
    BatchCreateResult,
    BatchTimeSlotRequest,
    CreateTimeSlotRequest,
    Reservation,
    SlotOccupancy,
    TimeSlot,
)
from .repository import ReservationRepository

logger = logging.getLogger(__name__)


class ReservationService(IReservationService):
    """Reservation service on top of ReservationRepository."""

    def __init__(self, repository: ReservationRepository):
        self._repo = repository

    async def list_slots(
        self,
        project_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        acting_user_id: Optional[str] = None,
        include_reservations: bool = False,
    ) -> list[SlotOccupancy]:
        tz = get_zone()
        slots = self._repo.list_slots(
            project_id,
            start=start_of_day(start_date, tz) if start_date else None,
            end=end_of_day(end_date, tz) if end_date else None,
        )

        occupancy = []
        for slot in slots:
            reservations, count = self._repo.list_reservations_for_slot(
                slot.id,
                include_workers=include_reservations,
            )
            occupancy.append(build_occupancy(
                slot,
                reservations,
                reservation_count=count,
                acting_user_id=acting_user_id,
                include_reservations=include_reservations,
            ))
        return occupancy

    async def reserve(self, slot_id: str, worker_id: str) -> Reservation:
        reservation = self._repo.reserve_seat(slot_id, worker_id)
        logger.info("Worker %s reserved slot %s (%s)", worker_id, slot_id, reservation.id)
        return reservation

    async def cancel(self, reservation_id: str, actor: AuthenticatedUser) -> None:
        reservation = self._repo.get_reservation(reservation_id)
        if reservation is None:
            raise ReservationNotFoundError(reservation_id)
        if reservation.worker_id != actor.id and not actor.is_admin:
            raise ReservationAccessDeniedError(reservation_id, actor.id)

        self._repo.delete_reservation(reservation_id)
        logger.info(
            "Reservation %s on slot %s cancelled by %s",
            reservation_id,
            reservation.time_slot_id,
            actor.id,
        )

    async def get_slot(self, slot_id: str) -> TimeSlot:
        slot = self._repo.get_slot(slot_id)
        if slot is None:
            raise TimeSlotNotFoundError(slot_id)
        return slot

    async def create_slot(self, project_id: str, request: CreateTimeSlotRequest) -> TimeSlot:
        new_slot = build_single_slot(project_id, request, get_zone())
        created = self._repo.insert_slots([new_slot])[0]
        logger.info("Time slot %s created in project %s", created.id, project_id)
        return created

    async def create_batch(
        self,
        project_id: str,
        request: BatchTimeSlotRequest,
    ) -> BatchCreateResult:
        new_slots = generate_batch_slots(project_id, request, get_zone())
        created = self._repo.insert_slots(new_slots)
        logger.info(
            "Batch created %d time slot(s) in project %s (%s to %s)",
            len(created),
            project_id,
            request.start_date,
            request.end_date,
        )
        return BatchCreateResult(created=len(created), slots=created)

    async def delete_slot(self, slot_id: str) -> None:
        await self.get_slot(slot_id)
        self._repo.delete_slot(slot_id)
        logger.info("Time slot %s deleted", slot_id)
