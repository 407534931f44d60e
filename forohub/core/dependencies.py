"""
Dependencies - authentication gate for protected routes

FastAPI resolves these before the endpoint body runs.
"""
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from forohub.database import get_db
from forohub.models.user import User
from forohub.core.security import decode_token

logger = logging.getLogger(__name__)


# ============= HTTP BEARER SECURITY SCHEME =============

# auto_error=False: a missing header yields None instead of FastAPI's own error,
# so the gate below decides between anonymous access and a 401
security = HTTPBearer(auto_error=False)


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


# ============= GET CURRENT USER OR NONE =============

def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """
    Resolve the caller from the bearer token, or None when no token was sent.

    WORKFLOW:
    1. No "Authorization: Bearer <token>" header → anonymous (None)
    2. Decode the JWT (signature + expiry) → 401 if invalid
    3. Read the user id from the "sub" claim → 401 if missing
    4. Load the user → 401 if it no longer exists

    Routes that allow anonymous access depend on this directly; protected
    routes go through get_current_user.
    """
    if credentials is None:
        return None

    payload = decode_token(credentials.credentials)
    if payload is None:
        logger.info("Rejected invalid or expired bearer token")
        raise _credentials_exception()

    user_id = payload.get("sub")
    if user_id is None:
        raise _credentials_exception()

    try:
        user = db.get(User, int(user_id))
    except ValueError:
        raise _credentials_exception()

    if user is None:
        raise _credentials_exception()

    return user


# ============= GET CURRENT USER DEPENDENCY =============

def get_current_user(
    current_user: Optional[User] = Depends(get_current_user_optional)
) -> User:
    """
    Dependency for protected routes: the authenticated caller or 401.

    Example usage:
        @router.get("/topicos")
        def list_topics(current_user: User = Depends(get_current_user)):
            ...
    """
    if current_user is None:
        raise _credentials_exception()
    return current_user
