"""
Reporting endpoints: per-day reservation counts and date-range presets.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_reporting_service
from api.middleware.auth import get_current_user, require_admin
from shared.models import AuthenticatedUser

from .interfaces import IReportingService
from .models import DateRange, ReservationSeries
from .presets import resolve_preset

router = APIRouter()


@router.get("/projects/{project_id}/report/daily", response_model=ReservationSeries)
async def daily_report(
    project_id: str,
    start_date: Optional[date] = Query(default=None, description="Defaults to today"),
    end_date: Optional[date] = Query(default=None, description="Defaults to start + 14 days"),
    admin: AuthenticatedUser = Depends(require_admin),
    service: IReportingService = Depends(get_reporting_service),
) -> ReservationSeries:
    """
    Reservations per day of slot start, zero-filled over the window.
    """
    return await service.daily_reservation_counts(project_id, start_date, end_date)


@router.get("/presets/{preset}", response_model=DateRange)
async def get_preset_range(
    preset: str,
    user: AuthenticatedUser = Depends(get_current_user),
) -> DateRange:
    """Resolve a preset token against today's date."""
    return resolve_preset(preset)
