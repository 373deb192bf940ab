"""
Base exception classes for the Slotdesk backend.

Each module defines its own exceptions that inherit from these bases.
The API layer maps the bases to HTTP status codes (see api/errors.py).
"""

from typing import Optional, Any


class SlotdeskError(Exception):
    """
    Base exception for all Slotdesk errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.message,
            "code": self.code,
            "details": self.details,
        }


class NotFoundError(SlotdeskError):
    """Resource not found."""

    pass


class ValidationError(SlotdeskError):
    """Input validation failed."""

    pass


class ConflictError(SlotdeskError):
    """The request conflicts with the current state of a resource."""

    pass


class AuthenticationError(SlotdeskError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(SlotdeskError):
    """Authorization failed (insufficient permissions)."""

    pass


class ExternalServiceError(SlotdeskError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service
