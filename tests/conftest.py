"""
Shared fixtures.

The remote job API is replaced by FakeJobApi, an in-memory implementation of the
REST endpoints served through httpx.MockTransport, so every test exercises the real
ApiClient/JobsService stack without network access.
"""

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from job_board.services.api_client import ApiClient
from job_board.services.jobs_service import JobsService
from job_board.services.session_guard import SessionGuard
from job_board.services.token_store import TokenStore
from job_board.state.signals import ViewportSignal

VALID_TOKEN = "test-token"
ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "secret"
BASE_URL = "http://jobs.test"


def make_job(job_id: int, **overrides: Any) -> Dict[str, Any]:
    job = {
        "id": job_id,
        "title": f"Engineer {job_id}",
        "company": "Acme",
        "location": "Hanoi",
        "job_type": "Full-time",
        "salary_min": 15000000,
        "salary_max": 30000000,
        "salary_currency": "VND",
        "description": "<p>Build things</p>",
        "requirements": None,
        "benefits": None,
        "contact_email": "hr@acme.test",
        "contact_phone": None,
        "is_active": True,
    }
    job.update(overrides)
    return job


class FakeJobApi:
    """In-memory stand-in for the job API."""

    def __init__(self) -> None:
        self.jobs: Dict[int, Dict[str, Any]] = {}
        self.next_id = 1
        self.requests: List[httpx.Request] = []
        # Seconds to wait before answering a request; lets tests stage races.
        self.delay: Callable[[httpx.Request], float] = lambda request: 0.0
        # Force a status code for a request (e.g. 500); None answers normally.
        self.fail: Callable[[httpx.Request], Optional[int]] = lambda request: None

    def add_job(self, **overrides: Any) -> Dict[str, Any]:
        job = make_job(self.next_id, **overrides)
        self.jobs[job["id"]] = job
        self.next_id = max(self.next_id, job["id"]) + 1
        return job

    def requests_to(self, path: str, method: str = "GET") -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path == path and r.method == method]

    def admin_requests(self) -> List[httpx.Request]:
        return [r for r in self.requests if r.url.path.startswith("/api/admin/")]

    # ----- transport -----

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        delay = self.delay(request)
        if delay:
            await asyncio.sleep(delay)
        forced = self.fail(request)
        if forced:
            return httpx.Response(forced, json={"message": "Forced failure"})
        return self._route(request)

    def _route(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        parts = [p for p in path.split("/") if p]
        method = request.method

        if path == "/api/auth/login" and method == "POST":
            body = json.loads(request.content or b"{}")
            if body.get("username") == ADMIN_USERNAME and body.get("password") == ADMIN_PASSWORD:
                return httpx.Response(200, json={"token": VALID_TOKEN})
            return httpx.Response(401, json={"message": "Invalid credentials"})

        if parts[:2] == ["api", "jobs"]:
            if len(parts) == 2 and method == "GET":
                active = [j for j in self.jobs.values() if j["is_active"]]
                return self._page(request, active)
            if len(parts) == 3 and method == "GET":
                return self._get(parts[2])

        if parts[:3] == ["api", "admin", "jobs"]:
            if request.headers.get("Authorization") != f"Bearer {VALID_TOKEN}":
                return httpx.Response(401, json={"message": "Unauthorized"})
            if len(parts) == 3 and method == "GET":
                return self._page(request, list(self.jobs.values()))
            if len(parts) == 3 and method == "POST":
                return self._create(json.loads(request.content))
            if len(parts) == 4 and method == "GET":
                return self._get(parts[3])
            if len(parts) == 4 and method == "PUT":
                return self._update(parts[3], json.loads(request.content))
            if len(parts) == 4 and method == "DELETE":
                if self.jobs.pop(int(parts[3]), None) is None:
                    return httpx.Response(404, json={"message": "Job not found"})
                return httpx.Response(200, json={"message": "Deleted"})
            if len(parts) == 5 and parts[4] == "toggle" and method == "PATCH":
                job = self.jobs.get(int(parts[3]))
                if job is None:
                    return httpx.Response(404, json={"message": "Job not found"})
                job["is_active"] = not job["is_active"]
                return httpx.Response(200, json=job)

        return httpx.Response(404, json={"message": "Not found"})

    def _page(self, request: httpx.Request, jobs: List[Dict[str, Any]]) -> httpx.Response:
        params = request.url.params
        search = params.get("search", "").lower()
        location = params.get("location", "").lower()
        job_type = params.get("job_type", "")
        if search:
            jobs = [j for j in jobs if search in j["title"].lower() or search in j["company"].lower()]
        if location:
            jobs = [j for j in jobs if location in j["location"].lower()]
        if job_type:
            jobs = [j for j in jobs if j["job_type"] == job_type]
        page = int(params.get("page", "1"))
        limit = int(params.get("limit", "10"))
        total = len(jobs)
        total_pages = max(1, -(-total // limit))
        chunk = jobs[(page - 1) * limit: page * limit]
        return httpx.Response(
            200,
            json={
                "jobs": chunk,
                "pagination": {"currentPage": page, "totalPages": total_pages, "totalJobs": total},
            },
        )

    def _get(self, raw_id: str) -> httpx.Response:
        job = self.jobs.get(int(raw_id)) if raw_id.isdigit() else None
        if job is None:
            return httpx.Response(404, json={"message": "Job not found"})
        return httpx.Response(200, json=job)

    def _create(self, body: Dict[str, Any]) -> httpx.Response:
        if not body.get("title"):
            return httpx.Response(400, json={"message": "Title is required"})
        job = self.add_job(**{k: v for k, v in body.items() if k != "id"})
        return httpx.Response(201, json=job)

    def _update(self, raw_id: str, body: Dict[str, Any]) -> httpx.Response:
        job = self.jobs.get(int(raw_id))
        if job is None:
            return httpx.Response(404, json={"message": "Job not found"})
        job.update({k: v for k, v in body.items() if k != "id"})
        return httpx.Response(200, json=job)


class RecordingNavigator:
    def __init__(self) -> None:
        self.paths: List[str] = []

    def go(self, path: str) -> None:
        self.paths.append(path)

    @property
    def last(self) -> Optional[str]:
        return self.paths[-1] if self.paths else None


class ScriptedNotifier:
    """Answers confirm() with a fixed reply and records everything."""

    def __init__(self, answer: bool = True) -> None:
        self.answer = answer
        self.confirmations: List[str] = []
        self.messages: List[tuple] = []

    def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.answer

    def notify(self, message: str, level: str = "info") -> None:
        self.messages.append((message, level))

    def levels(self) -> List[str]:
        return [level for _, level in self.messages]


@pytest.fixture
def fake_api() -> FakeJobApi:
    return FakeJobApi()


@pytest.fixture
async def client(fake_api):
    api_client = ApiClient(BASE_URL, transport=httpx.MockTransport(fake_api.handler))
    yield api_client
    await api_client.aclose()


@pytest.fixture
def service(client) -> JobsService:
    return JobsService(client)


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def notifier() -> ScriptedNotifier:
    return ScriptedNotifier()


@pytest.fixture
def storage() -> Dict[str, Any]:
    return {}


@pytest.fixture
def token_store(storage) -> TokenStore:
    return TokenStore(storage)


@pytest.fixture
def guard(token_store, client, navigator) -> SessionGuard:
    return SessionGuard(token_store, client, navigator)


@pytest.fixture
def logged_in(token_store, guard) -> SessionGuard:
    token_store.set(VALID_TOKEN)
    return guard


@pytest.fixture
def desktop() -> ViewportSignal:
    return ViewportSignal(1280)


@pytest.fixture
def mobile() -> ViewportSignal:
    return ViewportSignal(375)
