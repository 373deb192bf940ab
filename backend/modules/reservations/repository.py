"""
Reservation repository for database access.

Encapsulates all Supabase queries for the bookable side of the schema:
- time_slots
- reservations
- the reserve_seat() database function (see migrations/004_reserve_seat.sql)
"""

from datetime import datetime
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.dates import to_store
from shared.repository import BaseRepository
from .exceptions import (
    DuplicateReservationError,
    ReservationStoreError,
    SlotFullError,
    TimeSlotNotFoundError,
    UnknownProjectError,
)
from .models import NewTimeSlot, Reservation, ReservationWorker, TimeSlot

UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"
NO_DATA_FOUND = "P0002"

RESERVATION_COLUMNS = "id, time_slot_id, worker_id, created_at"
RESERVATION_WITH_WORKER = f"{RESERVATION_COLUMNS}, profiles(name, email, avatar_url)"


class ReservationRepository(BaseRepository[TimeSlot]):
    """
    Repository for time slot and reservation data access.

    Note: This repository does NOT perform authorization checks.
    The service layer decides who may reserve, cancel or edit slots.
    """

    # -------------------------------------------------------------------------
    # Time slot operations
    # -------------------------------------------------------------------------

    def list_slots(
        self,
        project_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[TimeSlot]:
        """
        Slots of a project ordered by start time, optionally windowed.

        Args:
            project_id: The project UUID.
            start: Inclusive lower bound on ``start_time``.
            end: Inclusive upper bound on ``start_time``.
        """
        query = self._db.table("time_slots").select("*").eq("project_id", project_id)
        if start is not None:
            query = query.gte("start_time", to_store(start))
        if end is not None:
            query = query.lte("start_time", to_store(end))

        try:
            result = query.order("start_time", desc=False).execute()
        except APIError as e:
            raise ReservationStoreError("Failed to load time slots", e.message)

        return [self._map_to_slot(row, project_id) for row in result.data]

    def get_slot(self, slot_id: str) -> Optional[TimeSlot]:
        try:
            result = self._db.table("time_slots").select("*").eq("id", slot_id).execute()
        except APIError as e:
            raise ReservationStoreError("Failed to load time slot", e.message)

        if not result.data:
            return None
        return self._map_to_slot(result.data[0])

    def insert_slots(self, slots: list[NewTimeSlot]) -> list[TimeSlot]:
        """
        Insert one or many slots in a single write.

        The store applies the batch all-or-nothing.
        """
        rows = [slot.to_row() for slot in slots]
        try:
            result = self._db.table("time_slots").insert(rows).execute()
        except APIError as e:
            if e.code == FOREIGN_KEY_VIOLATION and slots:
                raise UnknownProjectError(slots[0].project_id)
            raise ReservationStoreError("Failed to create time slots", e.message)

        return [self._map_to_slot(row) for row in result.data]

    def delete_slot(self, slot_id: str) -> None:
        """
        Delete a slot.

        Note: Its reservations are deleted via CASCADE.
        """
        try:
            self._db.table("time_slots").delete().eq("id", slot_id).execute()
        except APIError as e:
            raise ReservationStoreError("Failed to delete time slot", e.message)

    # -------------------------------------------------------------------------
    # Reservation operations
    # -------------------------------------------------------------------------

    def list_reservations_for_slot(
        self,
        slot_id: str,
        include_workers: bool = False,
    ) -> tuple[list[Reservation], int]:
        """
        Reservations of one slot with the store's exact count.

        Returns:
            (reservations, count)
        """
        columns = RESERVATION_WITH_WORKER if include_workers else RESERVATION_COLUMNS
        try:
            result = (
                self._db.table("reservations")
                .select(columns, count="exact")
                .eq("time_slot_id", slot_id)
                .execute()
            )
        except APIError as e:
            raise ReservationStoreError("Failed to load reservations", e.message)

        reservations = [self._map_to_reservation(row) for row in result.data]
        count = result.count if result.count is not None else len(reservations)
        return reservations, count

    def list_reservations_for_slots(self, slot_ids: list[str]) -> list[Reservation]:
        """Reservations referencing any of ``slot_ids`` (one ``in`` query)."""
        if not slot_ids:
            return []
        try:
            result = (
                self._db.table("reservations")
                .select(RESERVATION_COLUMNS)
                .in_("time_slot_id", slot_ids)
                .execute()
            )
        except APIError as e:
            raise ReservationStoreError("Failed to load reservations", e.message)
        return [self._map_to_reservation(row) for row in result.data]

    def get_reservation(self, reservation_id: str) -> Optional[Reservation]:
        try:
            result = (
                self._db.table("reservations")
                .select(RESERVATION_COLUMNS)
                .eq("id", reservation_id)
                .execute()
            )
        except APIError as e:
            raise ReservationStoreError("Failed to load reservation", e.message)

        if not result.data:
            return None
        return self._map_to_reservation(result.data[0])

    def reserve_seat(self, slot_id: str, worker_id: str) -> Reservation:
        """
        Take one seat through the ``reserve_seat`` database function.

        The function locks the slot row, counts its reservations and inserts
        only while a seat is left, so concurrent reservations cannot oversell.

        Raises:
            TimeSlotNotFoundError: If the slot doesn't exist
            SlotFullError: If no seat is left
            DuplicateReservationError: If the worker already holds a seat
        """
        try:
            result = self._db.rpc(
                "reserve_seat",
                {"p_time_slot_id": slot_id, "p_worker_id": worker_id},
            ).execute()
        except APIError as e:
            raise self._map_reserve_error(e, slot_id, worker_id)

        row = result.data[0] if isinstance(result.data, list) else result.data
        return self._map_to_reservation(row)

    def delete_reservation(self, reservation_id: str) -> None:
        try:
            self._db.table("reservations").delete().eq("id", reservation_id).execute()
        except APIError as e:
            raise ReservationStoreError("Failed to cancel reservation", e.message)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_reserve_error(self, error: APIError, slot_id: str, worker_id: str) -> Exception:
        message = error.message or ""
        if error.code == UNIQUE_VIOLATION or "ALREADY_RESERVED" in message:
            return DuplicateReservationError(slot_id, worker_id)
        if "SLOT_FULL" in message:
            return SlotFullError(slot_id)
        if error.code == NO_DATA_FOUND or "SLOT_NOT_FOUND" in message:
            return TimeSlotNotFoundError(slot_id)
        return ReservationStoreError("Failed to create reservation", message)

    def _map_to_slot(self, data: dict[str, Any], project_id: Optional[str] = None) -> TimeSlot:
        """Map database row to TimeSlot model."""
        return TimeSlot(
            id=str(data["id"]),
            project_id=str(data.get("project_id") or project_id),
            start_time=data["start_time"],
            end_time=data["end_time"],
            total_seats=data["total_seats"],
            created_at=data.get("created_at"),
        )

    def _map_to_reservation(self, data: dict[str, Any]) -> Reservation:
        """Map database row (optionally with embedded profile) to Reservation."""
        worker = data.get("profiles")
        return Reservation(
            id=str(data["id"]),
            time_slot_id=str(data["time_slot_id"]),
            worker_id=str(data["worker_id"]),
            created_at=data.get("created_at"),
            worker=ReservationWorker(
                name=worker.get("name") or "",
                email=worker.get("email") or "",
                avatar_url=worker.get("avatar_url"),
            ) if worker else None,
        )
