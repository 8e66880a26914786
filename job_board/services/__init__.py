"""Service exports."""

from .api_client import ApiClient
from .jobs_service import JobsService
from .notifier import Notifier, QueuedNotifier
from .session_guard import AuthState, SessionGuard
from .token_store import JsonFileStorage, TokenStore, default_token_store

__all__ = [
    "ApiClient",
    "JobsService",
    "Notifier",
    "QueuedNotifier",
    "AuthState",
    "SessionGuard",
    "TokenStore",
    "JsonFileStorage",
    "default_token_store",
]
