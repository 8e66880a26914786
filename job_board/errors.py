"""Error taxonomy shared by the API client, controllers and views."""

from typing import Dict, Optional


class ApiError(Exception):
    """Network failure or server error from the remote job API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message


class AuthorizationError(ApiError):
    """401/403 from the API. The client's response hook has already invalidated the session."""


class ServerValidationError(ApiError):
    """A 4xx rejection of a request, usually with a message body explaining why."""


class FormValidationError(ValueError):
    """Client-side form checks failed; submission is blocked."""

    def __init__(self, errors: Dict[str, str]) -> None:
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors
