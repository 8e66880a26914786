"""Admin session guard: token presence gates every protected view."""

from enum import Enum
from typing import Optional

from job_board.routes import LOGIN_PATH, Navigator
from job_board.services.api_client import ApiClient
from job_board.services.token_store import TokenStore
from job_board.utils.logger import get_logger

logger = get_logger(__name__)


class AuthState(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class SessionGuard:
    """
    Two-state machine over the persisted token.

    Registers itself with the API client so any 401/403 from an admin endpoint
    clears the token and redirects to the login view.
    """

    def __init__(self, store: TokenStore, client: ApiClient, navigator: Navigator) -> None:
        self._store = store
        self._client = client
        self._navigator = navigator
        self._state = AuthState.UNAUTHENTICATED
        client.add_unauthorized_handler(self.invalidate)

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def is_authenticated(self) -> bool:
        return self._state is AuthState.AUTHENTICATED

    def ensure_authenticated(self) -> bool:
        """Call on entry to a protected view. False means the caller must not issue admin calls."""
        token: Optional[str] = self._store.get()
        if not token:
            if self._state is not AuthState.UNAUTHENTICATED:
                logger.info("Session token missing; redirecting to login")
            self._state = AuthState.UNAUTHENTICATED
            self._client.set_token(None)
            self._navigator.go(LOGIN_PATH)
            return False
        self._client.set_token(token)
        self._state = AuthState.AUTHENTICATED
        return True

    def sign_in(self, token: str) -> None:
        self._store.set(token)
        self._client.set_token(token)
        self._state = AuthState.AUTHENTICATED
        logger.info("Admin signed in")

    def invalidate(self) -> None:
        """Drop the session after the API rejected the token."""
        self._store.clear()
        self._client.set_token(None)
        self._state = AuthState.UNAUTHENTICATED
        logger.info("Admin session invalidated; redirecting to login")
        self._navigator.go(LOGIN_PATH)

    def sign_out(self) -> None:
        self._store.clear()
        self._client.set_token(None)
        self._state = AuthState.UNAUTHENTICATED
        logger.info("Admin signed out")
        self._navigator.go(LOGIN_PATH)
