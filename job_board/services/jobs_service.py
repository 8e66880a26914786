"""Bindings for the job API endpoints (public listing, auth, admin CRUD)."""

from typing import Any, Optional

from pydantic import ValidationError

from job_board.errors import ApiError
from job_board.schemas.filters import FilterState
from job_board.schemas.job_posting import JobId, JobPayload, JobPosting, PageResult
from job_board.services.api_client import ApiClient
from job_board.utils.logger import get_logger

logger = get_logger(__name__)

JOBS_PATH = "/api/jobs"
LOGIN_PATH = "/api/auth/login"
ADMIN_JOBS_PATH = "/api/admin/jobs"


def _parse_page(data: Any, path: str) -> PageResult:
    if not isinstance(data, dict):
        raise ApiError(f"Unexpected list response from {path}")
    try:
        return PageResult.model_validate(data)
    except ValidationError as e:
        logger.warning("List response from %s failed validation: %s", path, e)
        raise ApiError(f"Malformed list response from {path}") from e


def _parse_job(data: Any, path: str) -> JobPosting:
    # Some deployments wrap single records as {"job": {...}}
    if isinstance(data, dict) and isinstance(data.get("job"), dict):
        data = data["job"]
    if not isinstance(data, dict):
        raise ApiError(f"Unexpected job response from {path}")
    try:
        return JobPosting.model_validate(data)
    except ValidationError as e:
        logger.warning("Job response from %s failed validation: %s", path, e)
        raise ApiError(f"Malformed job response from {path}") from e


def _maybe_job(data: Any, path: str) -> Optional[JobPosting]:
    """Mutation endpoints may or may not echo the record back."""
    if isinstance(data, dict) and ("id" in data or isinstance(data.get("job"), dict)):
        return _parse_job(data, path)
    return None


class JobsService:
    """Typed wrapper over ApiClient, one method per REST endpoint."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    @property
    def client(self) -> ApiClient:
        return self._client

    # ----- Public -----

    async def list_jobs(self, filters: FilterState) -> PageResult:
        data = await self._client.get(JOBS_PATH, params=filters.to_request_params())
        return _parse_page(data, JOBS_PATH)

    async def get_job(self, job_id: JobId) -> JobPosting:
        path = f"{JOBS_PATH}/{job_id}"
        return _parse_job(await self._client.get(path), path)

    # ----- Auth -----

    async def login(self, username: str, password: str) -> str:
        """Exchange admin credentials for a bearer token."""
        data = await self._client.post(LOGIN_PATH, json={"username": username, "password": password})
        token = data.get("token") if isinstance(data, dict) else None
        if not token or not isinstance(token, str):
            raise ApiError("Login response did not contain a token")
        return token

    # ----- Admin -----

    async def admin_list_jobs(self, filters: FilterState) -> PageResult:
        """Admin listing takes page, limit and search only."""
        params = {"page": filters.page, "limit": filters.limit, "search": filters.search or None}
        data = await self._client.get(ADMIN_JOBS_PATH, params=params)
        return _parse_page(data, ADMIN_JOBS_PATH)

    async def admin_get_job(self, job_id: JobId) -> JobPosting:
        path = f"{ADMIN_JOBS_PATH}/{job_id}"
        return _parse_job(await self._client.get(path), path)

    async def create_job(self, payload: JobPayload) -> Optional[JobPosting]:
        data = await self._client.post(ADMIN_JOBS_PATH, json=payload.model_dump(mode="json"))
        logger.info("Created job '%s'", payload.title)
        return _maybe_job(data, ADMIN_JOBS_PATH)

    async def update_job(self, job_id: JobId, payload: JobPayload) -> Optional[JobPosting]:
        path = f"{ADMIN_JOBS_PATH}/{job_id}"
        data = await self._client.put(path, json=payload.model_dump(mode="json"))
        logger.info("Updated job %s", job_id)
        return _maybe_job(data, path)

    async def toggle_job(self, job_id: JobId) -> Optional[JobPosting]:
        """Flip is_active on the server."""
        path = f"{ADMIN_JOBS_PATH}/{job_id}/toggle"
        data = await self._client.patch(path)
        logger.info("Toggled job %s", job_id)
        return _maybe_job(data, path)

    async def delete_job(self, job_id: JobId) -> None:
        await self._client.delete(f"{ADMIN_JOBS_PATH}/{job_id}")
        logger.info("Deleted job %s", job_id)
