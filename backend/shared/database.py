"""
Database client factory for Supabase.

The service-role client is the process-wide storage handle: it is opened
once at startup (see api.app.lifespan) and released on shutdown.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The API performs its own authorization checks, so every repository
    talks to the database through this client.

    Returns:
        Supabase client configured with service role key
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
        logger.info("Supabase client created")

    return _service_client


def reset_client_cache() -> None:
    """
    Release the cached database client.

    Called on graceful shutdown and between tests.
    """
    global _service_client
    _service_client = None
