"""
Session Store - who is logged in, and as whom.

State:
- token: bearer token (persisted in local storage) or None
- profile: user/profile payload or None
- loading: True while a profile fetch is in flight

Mutated ONLY through login(), logout() and refresh_profile().
One instance is created at startup and shared by every route
(see get_session_store).

Edge case kept on purpose: when a profile fetch fails the token stays.
The user then has a token but no profile, which the UI shows as logged out.
"""

import logging
from typing import Any, Optional

from path2placement.core.config import get_settings
from path2placement.core.errors import GatewayError
from path2placement.core.local_storage import LocalStorage
from path2placement.services.backend_client import get_backend_client

logger = logging.getLogger(__name__)


def display_name(profile: Optional[dict]) -> str:
    """Name shown in the navbar: fullName -> name -> email -> 'User'."""
    if not isinstance(profile, dict):
        return "User"
    details = profile.get("profile") if isinstance(profile.get("profile"), dict) else {}
    user = profile.get("user") if isinstance(profile.get("user"), dict) else {}
    return (
        details.get("fullName")
        or details.get("name")
        or profile.get("fullName")
        or profile.get("name")
        or user.get("email")
        or "User"
    )


class SessionStore:
    """
    Single source of truth for the current session.

    Args:
        storage: Where the token is persisted
        client: Anything with fetch_profile(token) -> dict (BackendClient)
        token_key: Storage key for the token
    """

    def __init__(self, storage: LocalStorage, client: Any, token_key: str = "authToken"):
        self.storage = storage
        self.client = client
        self.token_key = token_key

        self.token: Optional[str] = storage.get_item(token_key) or None
        self.profile: Optional[Any] = None
        self.loading = False

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    @property
    def user_id(self) -> Optional[Any]:
        """profile.user.id, needed by the resume screens."""
        if not isinstance(self.profile, dict):
            return None
        user = self.profile.get("user")
        if not isinstance(user, dict):
            return None
        return user.get("id")

    def login(self, token: str, profile_data: Any) -> None:
        """Persist token and trust the caller's profile; no network call."""
        self.storage.set_item(self.token_key, token)
        self.token = token
        self.profile = profile_data
        logger.info("Logged in as %s", display_name(profile_data))

    def logout(self) -> None:
        self.storage.remove_item(self.token_key)
        self.token = None
        self.profile = None
        logger.info("Logged out")

    def refresh_profile(self) -> Optional[Any]:
        """
        Re-fetch the profile for the current token.

        Failures are logged and leave the token in place with no profile.
        Returns the new profile (or None).
        """
        if not self.token:
            self.profile = None
            return None

        self.loading = True
        try:
            profile = self.client.fetch_profile(self.token)
        except GatewayError as e:
            logger.warning("Profile fetch failed: %s", e.message)
            self.profile = None
            return None
        finally:
            self.loading = False

        self.profile = profile
        return profile


# Singleton instance
_session_store: SessionStore = None


def get_session_store() -> SessionStore:
    """Get or create the session store (singleton pattern)"""
    global _session_store
    if _session_store is None:
        settings = get_settings()
        _session_store = SessionStore(
            storage=LocalStorage(settings.resolved_storage_path),
            client=get_backend_client(),
            token_key=settings.auth_token_key,
        )
    return _session_store
