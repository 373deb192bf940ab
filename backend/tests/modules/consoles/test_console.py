"""Tests for the role-specific consoles."""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch
from datetime import date, datetime, timezone

from modules.consoles.console import AdminConsole, WorkerConsole, console_for
from modules.consoles.sequencer import RequestSequencer
from modules.consoles.state import ConsoleState, SlotFilter, state_from_query
from modules.projects.models import Project, ProjectDeletion
from modules.reporting.models import ReservationSeries
from modules.reporting.service import ReportingService
from modules.reservations.capacity import build_occupancy
from modules.reservations.models import Reservation, TimeSlot
from modules.reservations.repository import ReservationRepository
from shared.models import AuthenticatedUser, UserRole

WORKER = AuthenticatedUser(id="worker-1", email="w@example.com")
ADMIN = AuthenticatedUser(id="admin-1", email="a@example.com", role=UserRole.ADMIN)


def make_project(project_id: str, starting_day: int) -> Project:
    return Project(
        id=project_id,
        name=f"Project {project_id}",
        starting_date=date(2025, 6, starting_day),
        created_at=datetime(2025, 5, 1, tzinfo=timezone.utc),
    )


def make_occupancy(slot_id: str, total_seats: int, taken: int):
    slot = TimeSlot(
        id=slot_id,
        project_id="p-new",
        start_time=datetime(2025, 6, 2, 9, tzinfo=timezone.utc),
        end_time=datetime(2025, 6, 2, 12, tzinfo=timezone.utc),
        total_seats=total_seats,
    )
    reservations = [
        Reservation(id=f"{slot_id}-r{i}", time_slot_id=slot_id, worker_id=f"w{i}") for i in range(taken)
    ]
    return build_occupancy(slot, reservations)


@pytest.fixture
def projects():
    service = AsyncMock()
    # Latest starting date first
    service.list_projects.return_value = [make_project("p-new", 20), make_project("p-old", 1)]
    return service


@pytest.fixture
def reservations():
    service = AsyncMock()
    service.list_slots.return_value = []
    return service


@pytest.fixture
def reporting():
    service = AsyncMock()
    service.daily_reservation_counts.return_value = ReservationSeries(
        project_id="p-new", start_date=date(2025, 6, 1), end_date=date(2025, 6, 15)
    )
    return service


@pytest.fixture
def users():
    service = AsyncMock()
    service.list_users.return_value = []
    return service


@pytest.fixture
def sequencer():
    return RequestSequencer()


class TestConsoleFor:
    def test_admin(self, projects, reservations, reporting, users, sequencer):
        console = console_for(ADMIN, projects, reservations, reporting, users, sequencer)
        assert isinstance(console, AdminConsole)

    def test_worker(self, projects, reservations, reporting, users, sequencer):
        console = console_for(WORKER, projects, reservations, reporting, users, sequencer)
        assert isinstance(console, WorkerConsole)


class TestProjectSelection:
    @pytest.mark.asyncio
    async def test_selects_latest_project(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)

        view = await console.load(ConsoleState())

        assert view.state.selected_project_id == "p-new"
        assert reservations.list_slots.call_args[0][0] == "p-new"

    @pytest.mark.asyncio
    async def test_keeps_existing_selection(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)
        view = await console.load(ConsoleState(selected_project_id="p-old"))
        assert view.state.selected_project_id == "p-old"

    @pytest.mark.asyncio
    async def test_vanished_selection_falls_back(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)
        view = await console.load(ConsoleState(selected_project_id="deleted"))
        assert view.state.selected_project_id == "p-new"

    @pytest.mark.asyncio
    async def test_no_projects(self, projects, reservations, sequencer):
        projects.list_projects.return_value = []
        console = WorkerConsole(WORKER, projects, reservations, sequencer)

        view = await console.load(ConsoleState())

        assert view.state.selected_project_id is None
        reservations.list_slots.assert_not_called()


class TestWorkerConsole:
    @pytest.mark.asyncio
    async def test_slots_flag_own_reservations(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)

        view = await console.load(ConsoleState())

        assert view.role == UserRole.WORKER
        assert view.users is None and view.report is None
        assert reservations.list_slots.call_args.kwargs["acting_user_id"] == "worker-1"

    @pytest.mark.asyncio
    async def test_reserve_reloads(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)

        view = await console.reserve(ConsoleState(), "slot-1")

        reservations.reserve.assert_called_once_with("slot-1", "worker-1")
        assert view.stale is False
        assert reservations.list_slots.call_count == 1

    @pytest.mark.asyncio
    async def test_cancel_reloads(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)

        await console.cancel(ConsoleState(), "r1")

        reservations.cancel.assert_called_once_with("r1", WORKER)


class TestAdminConsole:
    @pytest.mark.asyncio
    async def test_loads_slots_report_and_users(self, projects, reservations, reporting, users, sequencer):
        reservations.list_slots.return_value = [make_occupancy("open", 2, 1), make_occupancy("full", 1, 1)]
        console = AdminConsole(ADMIN, projects, reservations, reporting, users, sequencer)
        state = ConsoleState(filter=SlotFilter.admin_default(date(2025, 6, 1)).model_copy(
            update={"show_full": False}
        ))

        view = await console.load(state)

        assert reservations.list_slots.call_args.kwargs["include_reservations"] is True
        assert [slot.id for slot in view.slots] == ["open"]
        reporting.daily_reservation_counts.assert_called_once_with(
            "p-new", start_date=date(2025, 6, 1), end_date=date(2025, 6, 15)
        )
        assert view.report is not None
        assert view.users == []

    @pytest.mark.asyncio
    async def test_deleting_selected_project_clears_selection(
        self, projects, reservations, reporting, users, sequencer
    ):
        projects.delete_project.return_value = ProjectDeletion(
            project_id="p-old", slots_removed=3, reservations_removed=5
        )
        console = AdminConsole(ADMIN, projects, reservations, reporting, users, sequencer)

        deletion, state = await console.delete_project(ConsoleState(selected_project_id="p-old"), "p-old")

        assert deletion.reservations_removed == 5
        assert state.selected_project_id is None

    @pytest.mark.asyncio
    async def test_deleting_other_project_keeps_selection(
        self, projects, reservations, reporting, users, sequencer
    ):
        projects.delete_project.return_value = ProjectDeletion(project_id="p-old")
        console = AdminConsole(ADMIN, projects, reservations, reporting, users, sequencer)

        _, state = await console.delete_project(ConsoleState(selected_project_id="p-new"), "p-old")

        assert state.selected_project_id == "p-new"

    @pytest.mark.asyncio
    async def test_lone_future_start_date_still_loads(self, projects, reservations, users, sequencer):
        repo = MagicMock(spec=ReservationRepository)
        repo.list_slots.return_value = []
        repo.list_reservations_for_slots.return_value = []
        with patch("modules.reporting.service.get_settings") as mock_settings, \
             patch("modules.reporting.service.get_zone", return_value=timezone.utc), \
             patch("modules.reporting.service.today", return_value=date(2025, 6, 1)):
            mock_settings.return_value.default_window_days = 14
            console = AdminConsole(ADMIN, projects, reservations, ReportingService(repo), users, sequencer)

            view = await console.load(
                state_from_query(UserRole.ADMIN, project_id="p-new", start_date=date(2025, 7, 1))
            )

        assert view.stale is False
        assert view.report.start_date == date(2025, 7, 1)
        assert view.report.end_date == date(2025, 7, 15)
        assert view.report.total == 0


class TestStaleLoads:
    @pytest.mark.asyncio
    async def test_overtaken_load_is_dropped(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)
        project_list = projects.list_projects.return_value

        async def newer_load_starts(*args, **kwargs):
            # Another load for the same user is issued while this one waits
            sequencer.issue(console.view_key)
            return project_list

        projects.list_projects.side_effect = newer_load_starts

        view = await console.load(ConsoleState())

        assert view.stale is True
        assert view.projects == []
        assert view.slots == []

    @pytest.mark.asyncio
    async def test_loads_of_different_users_do_not_interfere(self, projects, reservations, sequencer):
        console = WorkerConsole(WORKER, projects, reservations, sequencer)
        sequencer.issue("someone-else:console")

        view = await console.load(ConsoleState())

        assert view.stale is False
