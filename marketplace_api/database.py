"""Database connection and utilities"""
from functools import lru_cache

from supabase import create_client, Client

from marketplace_api.config import get_settings


@lru_cache()
def get_supabase_admin() -> Client:
    """
    Get the service role Supabase client (bypasses RLS - use carefully)

    Created on first use so that importing the app does not require a
    reachable Supabase project.
    """
    settings = get_settings()
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key
    )
