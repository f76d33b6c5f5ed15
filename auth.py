"""User identity for API requests, resolved through Supabase auth."""
import logging
from functools import lru_cache
from typing import Optional

from fastapi import Header, HTTPException
from supabase import create_client, Client

from config import get_settings

logger = logging.getLogger(__name__)

SIGN_IN_MESSAGE = "Please sign in to analyze your resume"


@lru_cache()
def get_supabase() -> Client:
    settings = get_settings()
    if not settings.supabase_url or not settings.supabase_anon_key:
        raise ValueError("Supabase credentials not found. Set SUPABASE_URL and SUPABASE_ANON_KEY in .env")
    return create_client(settings.supabase_url, settings.supabase_anon_key)


def email_from_token(token: str) -> Optional[str]:
    try:
        response = get_supabase().auth.get_user(token)
    except Exception as e:
        logger.warning(f"Supabase token lookup failed: {e}")
        return None
    user = getattr(response, "user", None)
    return getattr(user, "email", None)


def current_user_email(
    authorization: Optional[str] = Header(default=None),
    x_user_email: Optional[str] = Header(default=None),
) -> str:
    """FastAPI dependency: the signed-in user's email, or 401."""
    settings = get_settings()
    if settings.auth_disabled:
        if x_user_email:
            return x_user_email.strip()
        raise HTTPException(status_code=401, detail=SIGN_IN_MESSAGE)

    if not authorization or not authorization.lower().startswith("bearer "):
        raise HTTPException(status_code=401, detail=SIGN_IN_MESSAGE)
    email = email_from_token(authorization.split(" ", 1)[1].strip())
    if not email:
        raise HTTPException(status_code=401, detail=SIGN_IN_MESSAGE)
    return email
