"""Tests for the reservation repository."""

import pytest
from unittest.mock import MagicMock
from datetime import datetime, timezone

from postgrest.exceptions import APIError

from modules.reservations.exceptions import (
    DuplicateReservationError,
    ReservationStoreError,
    SlotFullError,
    TimeSlotNotFoundError,
    UnknownProjectError,
)
from modules.reservations.models import NewTimeSlot
from modules.reservations.repository import (
    RESERVATION_COLUMNS,
    RESERVATION_WITH_WORKER,
    ReservationRepository,
)


def create_mock_slot_data(slot_id: str = "slot-123", total_seats: int = 2) -> dict:
    """Helper to create mock time slot data."""
    return {
        "id": slot_id,
        "project_id": "project-123",
        "start_time": "2025-06-02T09:00:00+00:00",
        "end_time": "2025-06-02T12:00:00+00:00",
        "total_seats": total_seats,
        "created_at": "2025-05-20T10:00:00+00:00",
    }


def create_mock_reservation_data(
    reservation_id: str = "reservation-123",
    worker_id: str = "worker-123",
    with_profile: bool = False,
) -> dict:
    """Helper to create mock reservation data."""
    data = {
        "id": reservation_id,
        "time_slot_id": "slot-123",
        "worker_id": worker_id,
        "created_at": "2025-05-21T10:00:00+00:00",
    }
    if with_profile:
        data["profiles"] = {"name": "Wendy Worker", "email": "worker@example.com", "avatar_url": None}
    return data


def api_error(message: str, code: str = "P0001") -> APIError:
    return APIError({"message": message, "code": code, "details": None, "hint": None})


@pytest.fixture
def mock_db():
    return MagicMock()


@pytest.fixture
def repo(mock_db):
    return ReservationRepository(mock_db)


class TestListSlots:
    def test_orders_by_start_time(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.order.return_value.execute.return_value.data = [create_mock_slot_data()]

        slots = repo.list_slots("project-123")

        mock_db.table.assert_called_with("time_slots")
        query.order.assert_called_once_with("start_time", desc=False)
        assert slots[0].id == "slot-123"
        assert slots[0].start_time == datetime(2025, 6, 2, 9, tzinfo=timezone.utc)

    def test_applies_window_in_utc(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.gte.return_value.lte.return_value.order.return_value.execute.return_value.data = []

        repo.list_slots(
            "project-123",
            start=datetime(2025, 6, 1, tzinfo=timezone.utc),
            end=datetime(2025, 6, 15, 23, 59, 59, 999000, tzinfo=timezone.utc),
        )

        query.gte.assert_called_once_with("start_time", "2025-06-01T00:00:00+00:00")
        query.gte.return_value.lte.assert_called_once_with(
            "start_time", "2025-06-15T23:59:59.999000+00:00"
        )

    def test_wraps_store_errors(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value.eq.return_value
        query.order.return_value.execute.side_effect = api_error("boom")

        with pytest.raises(ReservationStoreError):
            repo.list_slots("project-123")


class TestInsertSlots:
    def make_new_slot(self) -> NewTimeSlot:
        return NewTimeSlot(
            project_id="project-123",
            start_time=datetime(2025, 6, 2, 9, tzinfo=timezone.utc),
            end_time=datetime(2025, 6, 2, 12, tzinfo=timezone.utc),
            total_seats=2,
        )

    def test_inserts_all_rows_in_one_call(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.return_value.data = [
            create_mock_slot_data("a"), create_mock_slot_data("b"),
        ]

        created = repo.insert_slots([self.make_new_slot(), self.make_new_slot()])

        mock_db.table.return_value.insert.assert_called_once()
        rows = mock_db.table.return_value.insert.call_args[0][0]
        assert len(rows) == 2
        assert rows[0]["start_time"] == "2025-06-02T09:00:00+00:00"
        assert [slot.id for slot in created] == ["a", "b"]

    def test_unknown_project(self, repo, mock_db):
        mock_db.table.return_value.insert.return_value.execute.side_effect = api_error(
            "violates foreign key constraint", code="23503"
        )
        with pytest.raises(UnknownProjectError):
            repo.insert_slots([self.make_new_slot()])


class TestListReservations:
    def test_uses_exact_count(self, repo, mock_db):
        result = mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value
        result.data = [create_mock_reservation_data()]
        result.count = 1

        reservations, count = repo.list_reservations_for_slot("slot-123")

        mock_db.table.return_value.select.assert_called_once_with(RESERVATION_COLUMNS, count="exact")
        assert count == 1
        assert reservations[0].worker is None

    def test_embeds_worker_profile(self, repo, mock_db):
        result = mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value
        result.data = [create_mock_reservation_data(with_profile=True)]
        result.count = 1

        reservations, _ = repo.list_reservations_for_slot("slot-123", include_workers=True)

        mock_db.table.return_value.select.assert_called_once_with(RESERVATION_WITH_WORKER, count="exact")
        assert reservations[0].worker.name == "Wendy Worker"

    def test_many_slots_skips_query_when_empty(self, repo, mock_db):
        assert repo.list_reservations_for_slots([]) == []
        mock_db.table.assert_not_called()

    def test_many_slots_uses_in_filter(self, repo, mock_db):
        query = mock_db.table.return_value.select.return_value
        query.in_.return_value.execute.return_value.data = [create_mock_reservation_data()]

        reservations = repo.list_reservations_for_slots(["slot-123", "slot-456"])

        query.in_.assert_called_once_with("time_slot_id", ["slot-123", "slot-456"])
        assert len(reservations) == 1


class TestReserveSeat:
    def test_calls_reserve_function(self, repo, mock_db):
        mock_db.rpc.return_value.execute.return_value.data = create_mock_reservation_data()

        reservation = repo.reserve_seat("slot-123", "worker-123")

        mock_db.rpc.assert_called_once_with(
            "reserve_seat",
            {"p_time_slot_id": "slot-123", "p_worker_id": "worker-123"},
        )
        assert reservation.id == "reservation-123"

    def test_accepts_list_result(self, repo, mock_db):
        mock_db.rpc.return_value.execute.return_value.data = [create_mock_reservation_data()]
        assert repo.reserve_seat("slot-123", "worker-123").worker_id == "worker-123"

    @pytest.mark.parametrize("message,code,expected", [
        ("SLOT_FULL", "P0001", SlotFullError),
        ("ALREADY_RESERVED", "23505", DuplicateReservationError),
        ("duplicate key value violates unique constraint", "23505", DuplicateReservationError),
        ("SLOT_NOT_FOUND", "P0002", TimeSlotNotFoundError),
        ("connection reset", "08006", ReservationStoreError),
    ])
    def test_maps_function_errors(self, repo, mock_db, message, code, expected):
        mock_db.rpc.return_value.execute.side_effect = api_error(message, code)
        with pytest.raises(expected):
            repo.reserve_seat("slot-123", "worker-123")


class TestGetReservation:
    def test_missing_returns_none(self, repo, mock_db):
        mock_db.table.return_value.select.return_value.eq.return_value.execute.return_value.data = []
        assert repo.get_reservation("nope") is None

    def test_delete(self, repo, mock_db):
        repo.delete_reservation("reservation-123")
        mock_db.table.assert_called_with("reservations")
        mock_db.table.return_value.delete.return_value.eq.assert_called_once_with("id", "reservation-123")
