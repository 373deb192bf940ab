"""
Slotdesk API package.

Provides the FastAPI application for the time-slot reservation service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
