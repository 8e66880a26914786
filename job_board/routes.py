"""Route table and navigation for the app's views."""

import re
import threading
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Tuple

HOME_PATH = "/"
LOGIN_PATH = "/admin/login"
ADMIN_PATH = "/admin"
ADMIN_NEW_PATH = "/admin/job/new"

# (view name, pattern); first match wins, so "new" precedes the id routes
ROUTES: List[Tuple[str, "re.Pattern[str]"]] = [
    ("jobs", re.compile(r"^/$")),
    ("job_detail", re.compile(r"^/jobs/(?P<id>[^/]+)$")),
    ("admin_login", re.compile(r"^/admin/login$")),
    ("admin_jobs", re.compile(r"^/admin$")),
    ("admin_job_new", re.compile(r"^/admin/job/new$")),
    ("admin_job_detail", re.compile(r"^/admin/job/(?P<id>[^/]+)$")),
    ("admin_job_edit", re.compile(r"^/admin/job/(?P<id>[^/]+)/edit$")),
]

# Views that require a stored admin token
PROTECTED_VIEWS = {"admin_jobs", "admin_job_new", "admin_job_detail", "admin_job_edit"}


@dataclass(frozen=True)
class Route:
    name: str
    path: str
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def protected(self) -> bool:
        return self.name in PROTECTED_VIEWS


def resolve(path: Optional[str]) -> Route:
    """Match a path against ROUTES; unknown paths fall back to the job list."""
    normalized = (path or HOME_PATH).strip() or HOME_PATH
    if len(normalized) > 1:
        normalized = normalized.rstrip("/")
    for name, pattern in ROUTES:
        m = pattern.match(normalized)
        if m:
            return Route(name=name, path=normalized, params=m.groupdict())
    return Route(name="jobs", path=HOME_PATH)


def job_detail_path(job_id) -> str:
    return f"/jobs/{job_id}"


def admin_job_path(job_id) -> str:
    return f"/admin/job/{job_id}"


def admin_job_edit_path(job_id) -> str:
    return f"/admin/job/{job_id}/edit"


class Navigator(Protocol):
    def go(self, path: str) -> None:
        ...


class PendingNavigator:
    """
    Records the latest navigation request. Controllers call go() from the event loop
    thread; the page script consumes the target and performs the actual rerun.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: Optional[str] = None

    def go(self, path: str) -> None:
        with self._lock:
            self._pending = path

    def consume(self) -> Optional[str]:
        with self._lock:
            path, self._pending = self._pending, None
        return path

    @property
    def pending(self) -> Optional[str]:
        return self._pending
