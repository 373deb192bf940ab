"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations on top of the
service-role Supabase client.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.consoles.sequencer import RequestSequencer
    from modules.projects.interfaces import IProjectService
    from modules.reporting.interfaces import IReportingService
    from modules.reservations.interfaces import IReservationService
    from modules.reservations.repository import ReservationRepository
    from modules.users.interfaces import IUserService
    from modules.users.repository import ProfileRepository


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._profile_repository: "ProfileRepository | None" = None
        self._reservation_repository: "ReservationRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._project_service: "IProjectService | None" = None
        self._reservation_service: "IReservationService | None" = None
        self._reporting_service: "IReportingService | None" = None
        self._sequencer: "RequestSequencer | None" = None

    @property
    def profile_repository(self) -> "ProfileRepository":
        """Get the profile repository instance."""
        if self._profile_repository is None:
            from modules.users.repository import ProfileRepository
            from shared.database import get_supabase_client
            self._profile_repository = ProfileRepository(get_supabase_client())
        return self._profile_repository

    @property
    def reservation_repository(self) -> "ReservationRepository":
        """Get the time slot / reservation repository instance."""
        if self._reservation_repository is None:
            from modules.reservations.repository import ReservationRepository
            from shared.database import get_supabase_client
            self._reservation_repository = ReservationRepository(get_supabase_client())
        return self._reservation_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.profile_repository)
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user management service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            from shared.database import get_supabase_client
            self._user_service = UserService(self.profile_repository, get_supabase_client())
        return self._user_service

    @property
    def projects(self) -> "IProjectService":
        """Get the project service instance."""
        if self._project_service is None:
            from modules.projects.repository import ProjectRepository
            from modules.projects.service import ProjectService
            from shared.database import get_supabase_client
            self._project_service = ProjectService(ProjectRepository(get_supabase_client()))
        return self._project_service

    @property
    def reservations(self) -> "IReservationService":
        """Get the reservation service instance."""
        if self._reservation_service is None:
            from modules.reservations.service import ReservationService
            self._reservation_service = ReservationService(self.reservation_repository)
        return self._reservation_service

    @property
    def reporting(self) -> "IReportingService":
        """Get the reporting service instance."""
        if self._reporting_service is None:
            from modules.reporting.service import ReportingService
            self._reporting_service = ReportingService(self.reservation_repository)
        return self._reporting_service

    @property
    def sequencer(self) -> "RequestSequencer":
        """Get the process-wide console request sequencer."""
        if self._sequencer is None:
            from modules.consoles.sequencer import RequestSequencer
            self._sequencer = RequestSequencer()
        return self._sequencer

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_project_service() -> "IProjectService":
    """FastAPI dependency for project service."""
    return get_container().projects


def get_reservation_service() -> "IReservationService":
    """FastAPI dependency for reservation service."""
    return get_container().reservations


def get_reporting_service() -> "IReportingService":
    """FastAPI dependency for reporting service."""
    return get_container().reporting


def get_sequencer() -> "RequestSequencer":
    """FastAPI dependency for the console request sequencer."""
    return get_container().sequencer
