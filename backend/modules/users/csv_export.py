"""
CSV export of the registered users list.

Name, email, phone and joined date are always double-quoted; role and
status are bare words and are written unquoted.
"""

from datetime import date
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

from shared.dates import get_zone
from .models import Profile

CSV_HEADERS = ["Name", "Email", "Phone", "Role", "Status", "Joined"]
MISSING_PHONE = "Not provided"


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def format_joined(profile: Profile, tz: Optional[ZoneInfo] = None) -> str:
    """Long US date of when the profile was created, e.g. ``June 1, 2025``."""
    joined = profile.created_at.astimezone(tz or get_zone())
    return f"{joined:%B} {joined.day}, {joined.year}"


def users_to_csv(users: Iterable[Profile], tz: Optional[ZoneInfo] = None) -> str:
    """Render profiles as CSV text, one row per user, header first."""
    rows = [",".join(CSV_HEADERS)]
    for user in users:
        rows.append(",".join([
            _quote(user.name),
            _quote(user.email),
            _quote(user.phone_number or MISSING_PHONE),
            user.role.value,
            "Blocked" if user.is_blocked else "Active",
            _quote(format_joined(user, tz)),
        ]))
    return "\n".join(rows)


def export_filename(on: date) -> str:
    return f"registered_users_{on.isoformat()}.csv"
