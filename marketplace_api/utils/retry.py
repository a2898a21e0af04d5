"""
Retry utility for transient Supabase connection errors.
"""
import time
import logging
from typing import Callable, Any

logger = logging.getLogger(__name__)

BASE_DELAY = 0.5
MAX_DELAY = 4.0


def _is_connection_reset(error: Exception) -> bool:
    message = str(error).lower()
    return "connection reset" in message or "errno 104" in message


def retry_supabase_query(query_func: Callable, max_retries: int = 3) -> Any:
    """
    Execute a Supabase query, retrying connection resets with backoff.

    Usage:
        result = retry_supabase_query(
            lambda: get_supabase_admin().table("vas").select("*").execute()
        )

    Args:
        query_func: A callable that executes the Supabase query
        max_retries: Maximum number of retry attempts

    Returns:
        The query result
    """
    for attempt in range(max_retries + 1):
        try:
            return query_func()
        except Exception as e:
            retryable = isinstance(e, ConnectionResetError) or _is_connection_reset(e)
            if not retryable or attempt >= max_retries:
                raise
            delay = min(BASE_DELAY * (2 ** attempt), MAX_DELAY)
            logger.warning(
                f"Supabase connection reset, retry {attempt + 1}/{max_retries}. "
                f"Waiting {delay}s..."
            )
            time.sleep(delay)
