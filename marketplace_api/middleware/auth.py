"""Authentication middleware and dependencies"""
from fastapi import HTTPException, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional, Dict
from marketplace_api.config import get_settings
import httpx
import logging

logger = logging.getLogger(__name__)

settings = get_settings()
security = HTTPBearer(auto_error=False)


async def verify_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[Dict]:
    """
    Verify Supabase JWT token via Supabase Auth API
    """
    if not credentials:
        return None

    token = credentials.credentials

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                f"{settings.supabase_url}/auth/v1/user",
                headers={
                    "Authorization": f"Bearer {token}",
                    "apikey": settings.supabase_anon_key
                }
            )

        if response.status_code != 200:
            logger.warning(f"Supabase auth failed: {response.status_code} - {response.text}")
            raise HTTPException(status_code=401, detail="Unauthorized - invalid token")

        user_data = response.json()

        return {
            "user_id": user_data.get("id"),
            "email": user_data.get("email"),
            "raw_token": token,
        }
    except httpx.RequestError:
        raise HTTPException(status_code=401, detail="Authentication service unavailable")
    except HTTPException:
        raise
    except Exception:
        raise HTTPException(status_code=401, detail="Unauthorized - invalid token")


async def get_current_user(
    auth_data: Optional[Dict] = Depends(verify_token)
) -> Dict:
    """
    Get current authenticated user

    Raises:
        HTTPException: If no bearer token was sent
    """
    if not auth_data or not auth_data.get("user_id"):
        raise HTTPException(status_code=401, detail="Unauthorized - missing token")

    return auth_data
