"""
Reporting module interface.
"""

from datetime import date
from typing import Optional, Protocol, runtime_checkable

from .models import ReservationSeries


@runtime_checkable
class IReportingService(Protocol):
    """Interface for the reservation reporting aggregator."""

    async def daily_reservation_counts(
        self,
        project_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ReservationSeries:
        """
        Reservations per slot start day over an inclusive window.

        With no bounds the window is today through today + default_window_days.
        A lone start runs default_window_days past it; a lone end starts at
        today, or at the end itself when that is already past.

        Raises:
            InvalidReportWindowError: If both bounds are given and end_date
                is before start_date
        """
        ...
