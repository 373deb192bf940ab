"""
Reporting module exceptions.
"""

from datetime import date

from shared.exceptions import ValidationError


class UnknownPresetError(ValidationError):
    """Raised when a date-range preset token is not recognised."""

    def __init__(self, preset: str):
        super().__init__(
            f"Unknown date range preset: {preset}",
            code="UNKNOWN_PRESET",
            details={"preset": preset},
        )


class InvalidReportWindowError(ValidationError):
    """Raised when a report window ends before it starts."""

    def __init__(self, start: date, end: date):
        super().__init__(
            "Report end date must not be before its start date",
            code="INVALID_REPORT_WINDOW",
            details={"start_date": start.isoformat(), "end_date": end.isoformat()},
        )
