"""
Authentication Dependencies - session access for protected routes.

Provides:
- FastAPI dependencies that read the shared SessionStore
- Gateway error -> HTTPException translation used by every route

Usage:
    @router.get("/protected")
    async def route(token: str = Depends(get_current_token)):
        ...
"""

import logging

from fastapi import Depends, HTTPException, status

from path2placement.core.errors import GatewayError
from path2placement.core.session import SessionStore, get_session_store, display_name
from path2placement.schemas.schemas import SessionResponse

logger = logging.getLogger(__name__)


def gateway_http_error(err: GatewayError, action: str) -> HTTPException:
    """Log a failed remote call and turn it into a user-facing HTTP error."""
    logger.error("%s failed: %s", action, err.message)
    return HTTPException(status_code=err.status_code, detail=err.message)


def session_response(store: SessionStore) -> SessionResponse:
    return SessionResponse(
        authenticated=store.is_authenticated,
        has_profile=store.profile is not None,
        loading=store.loading,
        display_name=display_name(store.profile),
        profile=store.profile,
    )


async def get_current_token(store: SessionStore = Depends(get_session_store)) -> str:
    """Dependency - Require a session token."""
    if not store.token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please log in first.",
        )
    return store.token


async def get_current_user(
    store: SessionStore = Depends(get_session_store),
    token: str = Depends(get_current_token),
) -> dict:
    """Dependency - Require a token AND a resolved profile with user.id."""
    user_id = store.user_id
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please log in to use the resume analyzer.",
        )
    return {"user_id": user_id, "token": token}
