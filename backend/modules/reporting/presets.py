"""
Date-range preset resolution for the admin filters.

Presets are evaluated against today's date (local midnight). Calendar-month
presets move by one month and clamp to the last day of shorter months.
"""

from datetime import date, timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from shared.dates import today
from .exceptions import UnknownPresetError
from .models import DateRange, DateRangePreset

TWO_WEEKS = timedelta(days=14)

DEFAULT_PRESET = DateRangePreset.NEXT_TWO_WEEKS


def parse_preset(preset: Union[str, DateRangePreset, None]) -> Optional[DateRangePreset]:
    """
    Turn a token into a preset; empty or None means "no preset".

    Raises:
        UnknownPresetError: If the token is not a known preset
    """
    if preset is None or preset == "":
        return None
    if isinstance(preset, DateRangePreset):
        return preset
    try:
        return DateRangePreset(preset)
    except ValueError:
        raise UnknownPresetError(preset)


def resolve_preset(
    preset: Union[str, DateRangePreset, None],
    now: Optional[date] = None,
) -> DateRange:
    """
    Map a preset token to concrete bounds.

    ============== ================ ================
    preset         start            end
    ============== ================ ================
    last-month     now - 1 month    now
    last-two-weeks now - 14 days    now
    next-two-weeks now              now + 14 days
    next-month     now              now + 1 month
    all-time/unset (none)           (none)
    ============== ================ ================
    """
    resolved = parse_preset(preset)
    now = now or today()

    if resolved == DateRangePreset.LAST_MONTH:
        return DateRange(start=now - relativedelta(months=1), end=now)
    if resolved == DateRangePreset.LAST_TWO_WEEKS:
        return DateRange(start=now - TWO_WEEKS, end=now)
    if resolved == DateRangePreset.NEXT_TWO_WEEKS:
        return DateRange(start=now, end=now + TWO_WEEKS)
    if resolved == DateRangePreset.NEXT_MONTH:
        return DateRange(start=now, end=now + relativedelta(months=1))
    return DateRange()


def default_range(now: Optional[date] = None, days: int = 14) -> DateRange:
    """The admin's default window: today through ``days`` days ahead."""
    now = now or today()
    return DateRange(start=now, end=now + timedelta(days=days))
