"""
Role-specific consoles.

A console loads everything one role's dashboard shows, for an explicit
ConsoleState. ``console_for`` picks the admin or worker variant once from
the caller's profile role.
"""

import logging
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from shared.models import AuthenticatedUser, UserRole
from modules.projects.interfaces import IProjectService
from modules.projects.models import Project, ProjectDeletion
from modules.reporting.interfaces import IReportingService
from modules.reporting.models import ReservationSeries
from modules.reservations.capacity import filter_by_availability
from modules.reservations.interfaces import IReservationService
from modules.reservations.models import SlotOccupancy
from modules.users.interfaces import IUserService
from modules.users.models import Profile

from .sequencer import RequestSequencer
from .state import ConsoleState

logger = logging.getLogger(__name__)


class ConsoleView(BaseModel):
    """
    One load of a console.

    ``stale`` is set when a newer load for the same view was issued while
    this one was in flight; a stale view carries no data and must not
    replace what the caller already shows.
    """

    role: UserRole
    sequence: int
    stale: bool = False
    state: ConsoleState
    projects: list[Project] = Field(default_factory=list)
    slots: list[SlotOccupancy] = Field(default_factory=list)
    report: Optional[ReservationSeries] = None
    users: Optional[list[Profile]] = None


@runtime_checkable
class IConsole(Protocol):
    """What both dashboards can do."""

    role: UserRole

    async def load(self, state: ConsoleState) -> ConsoleView:
        """Fetch everything the dashboard shows for ``state``."""
        ...


class BaseConsole:
    """Project selection and stale-response handling shared by both roles."""

    role: UserRole
    view_name = "console"

    def __init__(
        self,
        user: AuthenticatedUser,
        projects: IProjectService,
        reservations: IReservationService,
        sequencer: RequestSequencer,
    ):
        self._user = user
        self._projects = projects
        self._reservations = reservations
        self._sequencer = sequencer

    @property
    def view_key(self) -> str:
        return f"{self._user.id}:{self.view_name}"

    async def load(self, state: ConsoleState) -> ConsoleView:
        sequence = self._sequencer.issue(self.view_key)

        projects = await self._projects.list_projects()
        state = self.resolve_selection(state, projects)
        view = ConsoleView(role=self.role, sequence=sequence, state=state, projects=projects)
        if state.selected_project_id is not None:
            await self._load_project(view, state)
        await self._load_extras(view)

        if not self._sequencer.is_current(self.view_key, sequence):
            logger.debug(
                "Dropping stale %s load #%d (latest #%d)",
                self.view_key,
                sequence,
                self._sequencer.latest(self.view_key),
            )
            return ConsoleView(role=self.role, sequence=sequence, stale=True, state=state)
        return view

    @staticmethod
    def resolve_selection(state: ConsoleState, projects: list[Project]) -> ConsoleState:
        """
        Keep the selected project if it still exists, else fall back to
        the first project (latest starting date), or none.
        """
        project_ids = {project.id for project in projects}
        if state.selected_project_id in project_ids:
            return state
        return state.select(projects[0].id if projects else None)

    async def _load_project(self, view: ConsoleView, state: ConsoleState) -> None:
        raise NotImplementedError

    async def cancel(self, state: ConsoleState, reservation_id: str) -> ConsoleView:
        """Give a seat back, then reload. Admins may cancel any reservation."""
        await self._reservations.cancel(reservation_id, self._user)
        return await self.load(state)

    async def _load_extras(self, view: ConsoleView) -> None:
        pass


class WorkerConsole(BaseConsole):
    """Project browsing plus reserve/cancel for the signed-in worker."""

    role = UserRole.WORKER

    async def _load_project(self, view: ConsoleView, state: ConsoleState) -> None:
        view.slots = await self._reservations.list_slots(
            state.selected_project_id,
            start_date=state.filter.start_date,
            end_date=state.filter.end_date,
            acting_user_id=self._user.id,
        )

    async def reserve(self, state: ConsoleState, slot_id: str) -> ConsoleView:
        """Take a seat, then reload so the occupancy shown is fresh."""
        await self._reservations.reserve(slot_id, self._user.id)
        return await self.load(state)


class AdminConsole(BaseConsole):
    """Projects, slots with their reservations, the daily chart and users."""

    role = UserRole.ADMIN

    def __init__(
        self,
        user: AuthenticatedUser,
        projects: IProjectService,
        reservations: IReservationService,
        reporting: IReportingService,
        users: IUserService,
        sequencer: RequestSequencer,
    ):
        super().__init__(user, projects, reservations, sequencer)
        self._reporting = reporting
        self._users = users

    async def _load_project(self, view: ConsoleView, state: ConsoleState) -> None:
        slots = await self._reservations.list_slots(
            state.selected_project_id,
            start_date=state.filter.start_date,
            end_date=state.filter.end_date,
            include_reservations=True,
        )
        view.slots = filter_by_availability(
            slots,
            show_available=state.filter.show_available,
            show_full=state.filter.show_full,
        )
        view.report = await self._reporting.daily_reservation_counts(
            state.selected_project_id,
            start_date=state.filter.start_date,
            end_date=state.filter.end_date,
        )

    async def _load_extras(self, view: ConsoleView) -> None:
        view.users = await self._users.list_users()

    async def delete_project(
        self,
        state: ConsoleState,
        project_id: str,
    ) -> tuple[ProjectDeletion, ConsoleState]:
        """
        Delete a project; if it was the selected one the selection is cleared.
        """
        deletion = await self._projects.delete_project(project_id)
        if state.selected_project_id == project_id:
            state = state.select(None)
        return deletion, state


def console_for(
    user: AuthenticatedUser,
    projects: IProjectService,
    reservations: IReservationService,
    reporting: IReportingService,
    users: IUserService,
    sequencer: RequestSequencer,
) -> BaseConsole:
    """Pick the console variant for the caller's role."""
    if user.role == UserRole.ADMIN:
        return AdminConsole(user, projects, reservations, reporting, users, sequencer)
    return WorkerConsole(user, projects, reservations, sequencer)
