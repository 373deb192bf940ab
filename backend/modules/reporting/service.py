"""
Reporting service implementation.
"""

from datetime import date
from typing import Optional

from shared.config import get_settings
from shared.dates import end_of_day, get_zone, start_of_day, today
from modules.reservations.repository import ReservationRepository

from .aggregator import bucket_reservations_by_day
from .exceptions import InvalidReportWindowError
from .interfaces import IReportingService
from .models import ReservationSeries
from .presets import default_range


class ReportingService(IReportingService):
    """Builds the admin's daily reservation chart from slot and reservation rows."""

    def __init__(self, repository: ReservationRepository):
        self._repo = repository
        self._settings = get_settings()

    async def daily_reservation_counts(
        self,
        project_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> ReservationSeries:
        tz = get_zone()
        days = self._settings.default_window_days
        if start_date is not None and end_date is not None:
            if end_date < start_date:
                raise InvalidReportWindowError(start_date, end_date)
            start, end = start_date, end_date
        elif start_date is not None:
            start, end = start_date, default_range(start_date, days).end
        elif end_date is not None:
            start, end = min(today(tz), end_date), end_date
        else:
            window = default_range(today(tz), days)
            start, end = window.start, window.end

        slots = self._repo.list_slots(
            project_id,
            start=start_of_day(start, tz),
            end=end_of_day(end, tz),
        )
        reservations = self._repo.list_reservations_for_slots([slot.id for slot in slots])

        points = bucket_reservations_by_day(start, end, slots, reservations, tz)
        return ReservationSeries(
            project_id=project_id,
            start_date=start,
            end_date=end,
            points=points,
            total=sum(point.count for point in points),
        )
