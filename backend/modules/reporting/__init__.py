"""
Reporting module.

Aggregates reservations per day for the admin chart and resolves the
date-range presets of the admin filters.

Public API:
- IReportingService: Interface for the daily aggregation
- ReservationSeries, DailyCount: Report models
- DateRangePreset, DateRange, resolve_preset: Preset handling
"""

from .interfaces import IReportingService
from .models import DailyCount, DateRange, DateRangePreset, ReservationSeries
from .presets import DEFAULT_PRESET, default_range, parse_preset, resolve_preset
from .exceptions import InvalidReportWindowError, UnknownPresetError

__all__ = [
    # Interface
    "IReportingService",
    # Models
    "DailyCount",
    "DateRange",
    "DateRangePreset",
    "ReservationSeries",
    # Presets
    "DEFAULT_PRESET",
    "default_range",
    "parse_preset",
    "resolve_preset",
    # Exceptions
    "InvalidReportWindowError",
    "UnknownPresetError",
]
