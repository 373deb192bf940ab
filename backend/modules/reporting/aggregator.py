"""
Day-bucketed reservation counts for the admin chart.

A reservation counts on the calendar day its slot starts, not the day it
was made. Every day of the window gets a bucket, so the chart always has
one bar per day.
"""

from collections import OrderedDict
from datetime import date
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from shared.dates import get_zone, iter_days, local_day
from modules.reservations.models import Reservation, TimeSlot

from .models import DailyCount


def empty_buckets(start: date, end: date) -> "OrderedDict[date, int]":
    """One zero bucket per day in [start, end], ascending."""
    return OrderedDict((day, 0) for day in iter_days(start, end))


def bucket_reservations_by_day(
    start: date,
    end: date,
    slots: Iterable[TimeSlot],
    reservations: Iterable[Reservation],
    tz: Optional[ZoneInfo] = None,
) -> list[DailyCount]:
    """
    Count reservations per slot start day over an inclusive window.

    Reservations whose slot is not among ``slots``, or whose slot starts
    outside the window, are not counted.
    """
    tz = tz or get_zone()
    buckets = empty_buckets(start, end)
    slot_days = {slot.id: local_day(slot.start_time, tz) for slot in slots}

    for reservation in reservations:
        day = slot_days.get(reservation.time_slot_id)
        if day is not None and day in buckets:
            buckets[day] += 1

    return [DailyCount(date=day, count=count) for day, count in buckets.items()]
