"""
Supabase client for the resource store.

The backend connects with the service role key and enforces ownership in
its own queries, so every repository shares one client per process.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_client: Optional[Client] = None


def get_supabase_client() -> Client:
    """
    Return the shared Supabase client, creating it on first use.

    Raises:
        ConfigurationError: If the store URL or service role key is unset
    """
    global _client

    if _client is not None:
        return _client

    settings = get_settings()
    missing = [
        name
        for name, value in (
            ("SAARTHI_SUPABASE_URL", settings.supabase_url),
            ("SAARTHI_SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise ConfigurationError(
            f"Store connection not configured: set {', '.join(missing)}",
            details={"missing": missing},
        )

    _client = create_client(settings.supabase_url, settings.supabase_service_role_key)
    logger.info("Connected Supabase client for %s", settings.supabase_url)
    return _client


def reset_client_cache() -> None:
    """Drop the shared client so the next call reconnects with current settings."""
    global _client
    _client = None
