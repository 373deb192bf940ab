"""
Supabase client factory.

The backend talks to Supabase with the service-role client, which bypasses
row level security and carries the auth admin API used by privileged
operations. Services therefore check ownership and roles themselves.
"""

from typing import Optional
from supabase import create_client, Client

from .config import get_settings

_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get the Supabase client with the service role key.

    Returns:
        Supabase client configured with the service role key

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def reset_client_cache() -> None:
    """Drop the cached service-role client (tests, config changes)."""
    global _service_client
    _service_client = None
