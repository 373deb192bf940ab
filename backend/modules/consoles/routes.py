"""
Console endpoints.

The console state travels in the query string; every call returns the
caller's role-specific view for that state.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import (
    get_project_service,
    get_reporting_service,
    get_reservation_service,
    get_sequencer,
    get_user_service,
)
from api.middleware.auth import get_current_user
from modules.auth.exceptions import InsufficientPermissionsError
from modules.projects.interfaces import IProjectService
from modules.reporting.interfaces import IReportingService
from modules.reporting.presets import parse_preset
from modules.reservations.interfaces import IReservationService
from modules.users.interfaces import IUserService
from shared.models import AuthenticatedUser, UserRole

from .console import AdminConsole, BaseConsole, ConsoleView, WorkerConsole, console_for
from .sequencer import RequestSequencer
from .state import ConsoleState, state_from_query

router = APIRouter()


def get_console(
    user: AuthenticatedUser = Depends(get_current_user),
    projects: IProjectService = Depends(get_project_service),
    reservations: IReservationService = Depends(get_reservation_service),
    reporting: IReportingService = Depends(get_reporting_service),
    users: IUserService = Depends(get_user_service),
    sequencer: RequestSequencer = Depends(get_sequencer),
) -> BaseConsole:
    """FastAPI dependency: the console variant for the caller's role."""
    return console_for(user, projects, reservations, reporting, users, sequencer)


def get_console_state(
    project_id: Optional[str] = Query(default=None, description="Selected project"),
    start_date: Optional[date] = Query(default=None),
    end_date: Optional[date] = Query(default=None),
    preset: Optional[str] = Query(default=None, description="e.g. next-two-weeks"),
    show_available: bool = Query(default=True),
    show_full: bool = Query(default=True),
    user: AuthenticatedUser = Depends(get_current_user),
) -> ConsoleState:
    return state_from_query(
        user.role,
        project_id=project_id,
        start_date=start_date,
        end_date=end_date,
        preset=parse_preset(preset),
        show_available=show_available,
        show_full=show_full,
    )


@router.get("", response_model=ConsoleView)
async def load_console(
    state: ConsoleState = Depends(get_console_state),
    console: BaseConsole = Depends(get_console),
) -> ConsoleView:
    """
    Load the caller's dashboard.

    When no project is selected the one with the latest starting date is.
    A response with ``stale: true`` was overtaken by a newer load for the
    same user and carries no data.
    """
    return await console.load(state)


@router.post("/slots/{slot_id}/reserve", response_model=ConsoleView)
async def reserve_from_console(
    slot_id: str,
    state: ConsoleState = Depends(get_console_state),
    console: BaseConsole = Depends(get_console),
) -> ConsoleView:
    """Reserve a seat and return the refreshed worker view."""
    if not isinstance(console, WorkerConsole):
        raise InsufficientPermissionsError(UserRole.WORKER.value, console.role.value)
    return await console.reserve(state, slot_id)


@router.delete("/reservations/{reservation_id}", response_model=ConsoleView)
async def cancel_from_console(
    reservation_id: str,
    state: ConsoleState = Depends(get_console_state),
    console: BaseConsole = Depends(get_console),
) -> ConsoleView:
    """Cancel a reservation and return the refreshed view."""
    return await console.cancel(state, reservation_id)


@router.delete("/projects/{deleted_project_id}", response_model=ConsoleView)
async def delete_project_from_console(
    deleted_project_id: str,
    state: ConsoleState = Depends(get_console_state),
    console: BaseConsole = Depends(get_console),
) -> ConsoleView:
    """
    Delete a project from the admin dashboard.

    If it was the selected project the selection falls back to the next
    project.
    """
    if not isinstance(console, AdminConsole):
        raise InsufficientPermissionsError(UserRole.ADMIN.value, console.role.value)
    _, state = await console.delete_project(state, deleted_project_id)
    return await console.load(state)
