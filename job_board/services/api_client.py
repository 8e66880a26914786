"""Async HTTP client for the remote job API: one configured httpx client, optional bearer token."""

from typing import Any, Callable, Dict, List, Optional

import httpx

from job_board.config import API_BASE
from job_board.errors import ApiError, AuthorizationError, ServerValidationError
from job_board.utils.logger import get_logger

logger = get_logger(__name__)

UNAUTHORIZED_STATUSES = (401, 403)
ADMIN_PATH_MARKER = "/api/admin/"

UnauthorizedHandler = Callable[[], None]


def _server_message(response: httpx.Response) -> Optional[str]:
    """The API reports failures as {"message": "..."}; anything else yields None."""
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if isinstance(message, str) and message.strip():
            return message.strip()
    return None


class ApiClient:
    """
    Single entry point for API calls. No retry and no timeout policy beyond httpx's default;
    failures surface as ApiError subclasses. 401/403 responses from admin endpoints are
    intercepted once here and fanned out to the registered unauthorized handlers.
    """

    def __init__(
        self,
        base_url: str = API_BASE,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._transport = transport
        self._token: Optional[str] = None
        self._unauthorized_handlers: List[UnauthorizedHandler] = []
        self._retired: List[httpx.AsyncClient] = []
        self._client = self._build(base_url)

    def _build(self, base_url: str) -> httpx.AsyncClient:
        headers = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            transport=self._transport,
            event_hooks={"response": [self._intercept_unauthorized]},
        )

    @property
    def base_url(self) -> str:
        return str(self._client.base_url)

    @property
    def token(self) -> Optional[str]:
        return self._token

    def configure(self, base_url: str) -> None:
        """Point the client at another API base URL. The old client is closed by aclose()."""
        self._retired.append(self._client)
        self._client = self._build(base_url)
        logger.info("API client configured for %s", base_url)

    def set_token(self, token: Optional[str]) -> None:
        """Attach (or with None, remove) the Authorization header for all later requests."""
        self._token = token or None
        if self._token:
            self._client.headers["Authorization"] = f"Bearer {self._token}"
        else:
            self._client.headers.pop("Authorization", None)

    def add_unauthorized_handler(self, handler: UnauthorizedHandler) -> None:
        if handler not in self._unauthorized_handlers:
            self._unauthorized_handlers.append(handler)

    def remove_unauthorized_handler(self, handler: UnauthorizedHandler) -> None:
        if handler in self._unauthorized_handlers:
            self._unauthorized_handlers.remove(handler)

    async def _intercept_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code not in UNAUTHORIZED_STATUSES:
            return
        if ADMIN_PATH_MARKER not in response.request.url.path:
            return
        logger.warning(
            "Admin request %s %s rejected with %s; invalidating session",
            response.request.method,
            response.request.url.path,
            response.status_code,
        )
        for handler in list(self._unauthorized_handlers):
            handler()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """
        Send one request and return the decoded JSON body (None when empty).
        asyncio.CancelledError is never caught here, so superseded requests stay distinguishable.
        """
        clean_params = {k: v for k, v in (params or {}).items() if v is not None and v != ""}
        try:
            response = await self._client.request(method, path, params=clean_params or None, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(f"Request failed: {e}") from e

        if response.is_error:
            status = response.status_code
            message = _server_message(response)
            logger.warning("%s %s returned %s: %s", method, path, status, message or "-")
            if status in UNAUTHORIZED_STATUSES:
                raise AuthorizationError(f"Not authorized ({status})", status, message)
            if 400 <= status < 500:
                raise ServerValidationError(message or f"Request rejected ({status})", status, message)
            raise ApiError(f"Server error ({status})", status, message)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON from {path}", response.status_code) from e

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        for client in self._retired + [self._client]:
            if not client.is_closed:
                await client.aclose()
        self._retired.clear()
