"""
Explicit console state.

The selected project and the slot filter are plain values handed to a
console on every load; a console never keeps them between calls.
"""

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field

from shared.models import UserRole
from modules.reporting.models import DateRangePreset
from modules.reporting.presets import DEFAULT_PRESET, resolve_preset


class SlotFilter(BaseModel):
    """
    Date window and availability filter for the slot list.

    Applying a preset overwrites both bounds. Editing a bound afterwards
    keeps the preset label, so the two may disagree.
    """

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    preset: Optional[DateRangePreset] = None
    show_available: bool = True
    show_full: bool = True

    def apply_preset(self, preset: DateRangePreset, now: Optional[date] = None) -> "SlotFilter":
        window = resolve_preset(preset, now)
        return self.model_copy(update={
            "preset": preset,
            "start_date": window.start,
            "end_date": window.end,
        })

    def with_start(self, start_date: Optional[date]) -> "SlotFilter":
        return self.model_copy(update={"start_date": start_date})

    def with_end(self, end_date: Optional[date]) -> "SlotFilter":
        return self.model_copy(update={"end_date": end_date})

    @classmethod
    def admin_default(cls, now: Optional[date] = None) -> "SlotFilter":
        """Next two weeks, available and full slots both shown."""
        return cls().apply_preset(DEFAULT_PRESET, now)

    @classmethod
    def worker_default(cls) -> "SlotFilter":
        """No date bounds."""
        return cls()


class ConsoleState(BaseModel):
    """What a console renders: the selected project and the slot filter."""

    selected_project_id: Optional[str] = None
    filter: SlotFilter = Field(default_factory=SlotFilter)

    def select(self, project_id: Optional[str]) -> "ConsoleState":
        return self.model_copy(update={"selected_project_id": project_id})

    def reset_filters(self, role: UserRole, now: Optional[date] = None) -> "ConsoleState":
        return self.model_copy(update={"filter": default_filter(role, now)})

    @classmethod
    def initial(cls, role: UserRole, now: Optional[date] = None) -> "ConsoleState":
        return cls(filter=default_filter(role, now))


def default_filter(role: UserRole, now: Optional[date] = None) -> SlotFilter:
    if role == UserRole.ADMIN:
        return SlotFilter.admin_default(now)
    return SlotFilter.worker_default()


def state_from_query(
    role: UserRole,
    project_id: Optional[str] = None,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    preset: Optional[DateRangePreset] = None,
    show_available: bool = True,
    show_full: bool = True,
    now: Optional[date] = None,
) -> ConsoleState:
    """
    Rebuild console state from request parameters.

    A preset is applied first; explicit bounds then override it. With
    neither, the role's default filter is used.
    """
    if preset is None and start_date is None and end_date is None:
        slot_filter = default_filter(role, now)
    else:
        slot_filter = SlotFilter()
        if preset is not None:
            slot_filter = slot_filter.apply_preset(preset, now)
        if start_date is not None:
            slot_filter = slot_filter.with_start(start_date)
        if end_date is not None:
            slot_filter = slot_filter.with_end(end_date)

    slot_filter = slot_filter.model_copy(update={
        "show_available": show_available,
        "show_full": show_full,
    })
    return ConsoleState(selected_project_id=project_id, filter=slot_filter)
