"""Recipient lookup through Supabase Auth"""
import logging
from typing import Optional

from marketplace_api.database import get_supabase_admin

logger = logging.getLogger(__name__)


def get_user_email(user_id: str) -> Optional[str]:
    """
    Resolve a Supabase auth user id to its email address.

    Lookup failures are not errors for the caller: any exception, unknown
    user or user without an email gives None.
    """
    try:
        response = get_supabase_admin().auth.admin.get_user_by_id(user_id)
    except Exception as e:
        logger.warning(f"User lookup failed for {user_id}: {e}")
        return None

    user = getattr(response, "user", None)
    email = getattr(user, "email", None)
    return email or None
