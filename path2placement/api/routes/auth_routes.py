"""
Authentication Routes

POST /auth/register - Register a new account on the backend
POST /auth/login - Login, store token and profile locally
POST /auth/logout - Forget token and profile
GET /auth/profile - Current session (refresh=true re-fetches the profile)
"""

import logging

from fastapi import APIRouter, HTTPException, Depends, Query

from path2placement.core.auth import gateway_http_error, session_response
from path2placement.core.errors import GatewayError
from path2placement.core.session import SessionStore, get_session_store
from path2placement.services.backend_client import BackendClient, get_backend_client
from path2placement.schemas.schemas import (
    LoginRequest, RegisterRequest, SessionResponse, MessageResponse
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(
    request: RegisterRequest,
    client: BackendClient = Depends(get_backend_client)
):
    """
    Register a new account.

    Passwords must match and the terms must be accepted before
    anything is sent. After registration, login.
    """
    if request.password != request.confirm_password:
        raise HTTPException(status_code=400, detail="Passwords do not match")
    if not request.agreed:
        raise HTTPException(status_code=400, detail="Please accept the terms to register")

    try:
        client.register(request.model_dump(by_alias=True))
    except GatewayError as e:
        raise gateway_http_error(e, "Registration")

    return MessageResponse(message="Registration successful! Please login.")


@router.post("/login", response_model=SessionResponse)
async def login(
    request: LoginRequest,
    store: SessionStore = Depends(get_session_store),
    client: BackendClient = Depends(get_backend_client)
):
    """
    Login against the backend.

    The token is taken from session.access_token (or token) and the
    profile from the same response, so no second request is needed.
    """
    try:
        data = client.login(request.email, request.password)
    except GatewayError as e:
        raise gateway_http_error(e, "Login")

    if not isinstance(data, dict):
        raise HTTPException(status_code=502, detail="Login failed")

    session = data.get("session") if isinstance(data.get("session"), dict) else {}
    token = session.get("access_token") or data.get("token")
    if not token:
        logger.error("Login response had no token")
        raise HTTPException(status_code=502, detail="Login failed")

    # Same shape as GET /auth/profile: {"user": ..., "profile": ...}
    profile = {"user": data.get("user"), "profile": data.get("profile") or {}}
    store.login(token, profile)

    return session_response(store)


@router.post("/logout", response_model=SessionResponse)
async def logout(store: SessionStore = Depends(get_session_store)):
    """Clear token and profile. Safe to call when already logged out."""
    store.logout()
    return session_response(store)


@router.get("/profile", response_model=SessionResponse)
async def get_profile(
    refresh: bool = Query(False, description="Re-fetch the profile from the backend"),
    store: SessionStore = Depends(get_session_store)
):
    """
    Current session.

    A failed refresh is not an error: the response simply has no profile.
    """
    if refresh:
        store.refresh_profile()
    return session_response(store)
