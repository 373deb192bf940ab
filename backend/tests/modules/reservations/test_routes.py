"""
Tests for the time slot and reservation endpoints.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from datetime import datetime, timezone

from api.dependencies import get_reservation_service
from modules.reservations.capacity import build_occupancy
from modules.reservations.exceptions import (
    DuplicateReservationError,
    EmptyWeekdaySelectionError,
    ReservationAccessDeniedError,
    SlotFullError,
)
from modules.reservations.models import BatchCreateResult, Reservation, TimeSlot

from tests.conftest import WORKER_ID


def make_slot(slot_id: str = "slot-1", total_seats: int = 2) -> TimeSlot:
    return TimeSlot(
        id=slot_id,
        project_id="project-1",
        start_time=datetime(2025, 6, 2, 9, tzinfo=timezone.utc),
        end_time=datetime(2025, 6, 2, 12, tzinfo=timezone.utc),
        total_seats=total_seats,
    )


@pytest.fixture
def mock_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_reservation_service] = lambda: service
    return service


@pytest.fixture
def client(app):
    return TestClient(app)


class TestListSlots:
    """Tests for GET /api/projects/{project_id}/slots"""

    def test_worker_view(self, client, mock_service, worker_headers):
        mock_service.list_slots.return_value = [build_occupancy(make_slot(), [])]

        response = client.get("/api/projects/project-1/slots", headers=worker_headers)

        assert response.status_code == 200
        assert response.json()[0]["available_seats"] == 2
        kwargs = mock_service.list_slots.call_args.kwargs
        assert kwargs["acting_user_id"] == WORKER_ID
        assert kwargs["include_reservations"] is False

    def test_admin_view_with_filters(self, client, mock_service, admin_headers):
        full = build_occupancy(
            make_slot("full", 1),
            [Reservation(id="r1", time_slot_id="full", worker_id=WORKER_ID)],
            include_reservations=True,
        )
        mock_service.list_slots.return_value = [build_occupancy(make_slot("open"), []), full]

        response = client.get(
            "/api/projects/project-1/slots",
            params={"start_date": "2025-06-01", "end_date": "2025-06-15", "show_available": "false"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert [slot["id"] for slot in response.json()] == ["full"]
        kwargs = mock_service.list_slots.call_args.kwargs
        assert kwargs["include_reservations"] is True
        assert str(kwargs["start_date"]) == "2025-06-01"

    def test_requires_auth(self, client, mock_service):
        response = client.get("/api/projects/project-1/slots")
        assert response.status_code == 401


class TestCreateSlots:
    """Tests for POST /api/projects/{project_id}/slots[/batch]"""

    def test_admin_creates_slot(self, client, mock_service, admin_headers):
        mock_service.create_slot.return_value = make_slot()

        response = client.post(
            "/api/projects/project-1/slots",
            json={"date": "2025-06-02", "start_time": "09:00", "end_time": "12:00", "total_seats": 2},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["id"] == "slot-1"

    def test_worker_cannot_create(self, client, mock_service, worker_headers):
        response = client.post(
            "/api/projects/project-1/slots",
            json={"date": "2025-06-02", "start_time": "09:00", "end_time": "12:00", "total_seats": 2},
            headers=worker_headers,
        )

        assert response.status_code == 403
        assert response.json()["error"] == "Unauthorized: Admin access required"
        mock_service.create_slot.assert_not_called()

    def test_zero_seats_rejected(self, client, mock_service, admin_headers):
        response = client.post(
            "/api/projects/project-1/slots",
            json={"date": "2025-06-02", "start_time": "09:00", "end_time": "12:00", "total_seats": 0},
            headers=admin_headers,
        )
        assert response.status_code == 422

    def test_batch(self, client, mock_service, admin_headers):
        mock_service.create_batch.return_value = BatchCreateResult(
            created=3, slots=[make_slot("a"), make_slot("b"), make_slot("c")]
        )

        response = client.post(
            "/api/projects/project-1/slots/batch",
            json={
                "start_date": "2025-06-02",
                "end_date": "2025-06-08",
                "weekdays": [1, 3, 5],
                "start_time": "09:00",
                "end_time": "12:00",
                "total_seats": 3,
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["created"] == 3

    def test_batch_without_weekdays(self, client, mock_service, admin_headers):
        mock_service.create_batch.side_effect = EmptyWeekdaySelectionError()

        response = client.post(
            "/api/projects/project-1/slots/batch",
            json={
                "start_date": "2025-06-02",
                "end_date": "2025-06-08",
                "weekdays": [],
                "start_time": "09:00",
                "end_time": "12:00",
                "total_seats": 3,
            },
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["code"] == "EMPTY_WEEKDAY_SELECTION"


class TestReserveAndCancel:
    """Tests for POST /api/slots/{id}/reserve and DELETE /api/reservations/{id}"""

    def test_reserve(self, client, mock_service, worker_headers):
        mock_service.reserve.return_value = Reservation(
            id="r1", time_slot_id="slot-1", worker_id=WORKER_ID
        )

        response = client.post("/api/slots/slot-1/reserve", headers=worker_headers)

        assert response.status_code == 201
        mock_service.reserve.assert_called_once_with("slot-1", WORKER_ID)

    def test_reserve_full_slot(self, client, mock_service, worker_headers):
        mock_service.reserve.side_effect = SlotFullError("slot-1")

        response = client.post("/api/slots/slot-1/reserve", headers=worker_headers)

        assert response.status_code == 409
        assert response.json()["code"] == "SLOT_FULL"

    def test_reserve_twice(self, client, mock_service, worker_headers):
        mock_service.reserve.side_effect = DuplicateReservationError("slot-1", WORKER_ID)
        response = client.post("/api/slots/slot-1/reserve", headers=worker_headers)
        assert response.status_code == 409
        assert response.json()["code"] == "ALREADY_RESERVED"

    def test_cancel(self, client, mock_service, worker_headers):
        response = client.delete("/api/reservations/r1", headers=worker_headers)

        assert response.status_code == 204
        reservation_id, actor = mock_service.cancel.call_args[0]
        assert reservation_id == "r1"
        assert actor.id == WORKER_ID

    def test_cancel_someone_elses(self, client, mock_service, worker_headers):
        mock_service.cancel.side_effect = ReservationAccessDeniedError("r1", WORKER_ID)
        response = client.delete("/api/reservations/r1", headers=worker_headers)
        assert response.status_code == 403


class TestDeleteSlot:
    def test_admin_deletes(self, client, mock_service, admin_headers):
        response = client.delete("/api/slots/slot-1", headers=admin_headers)
        assert response.status_code == 204
        mock_service.delete_slot.assert_called_once_with("slot-1")

    def test_worker_cannot_delete(self, client, mock_service, worker_headers):
        response = client.delete("/api/slots/slot-1", headers=worker_headers)
        assert response.status_code == 403
