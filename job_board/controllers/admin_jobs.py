"""Admin job table: paginated search plus toggle/delete row actions."""

from dataclasses import dataclass, field
from typing import List, Optional

from job_board.config import ADMIN_LIST_ERROR_MESSAGE
from job_board.errors import ApiError, AuthorizationError
from job_board.schemas.filters import FilterState
from job_board.schemas.job_posting import JobId, JobPosting, Pagination
from job_board.services.jobs_service import JobsService
from job_board.services.notifier import Notifier
from job_board.services.session_guard import SessionGuard
from job_board.utils.logger import get_logger

logger = get_logger(__name__)

DELETE_CONFIRM_MESSAGE = "Delete this job?"


@dataclass
class AdminListState:
    jobs: List[JobPosting] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)
    loading: bool = False
    error: str = ""


class AdminJobsController:
    """Every mutation is followed by a re-fetch; the table never shows optimistic state."""

    def __init__(self, service: JobsService, guard: SessionGuard, notifier: Notifier) -> None:
        self._service = service
        self._guard = guard
        self._notifier = notifier
        self.state = AdminListState()
        self._filters: Optional[FilterState] = None

    async def load(self, filters: Optional[FilterState] = None) -> None:
        if filters is not None:
            self._filters = filters
        if self._filters is None:
            self._filters = FilterState()
        if not self._guard.ensure_authenticated():
            return
        self.state.loading = True
        self.state.error = ""
        try:
            result = await self._service.admin_list_jobs(self._filters)
        except AuthorizationError:
            # Session already invalidated by the client's response hook
            return
        except ApiError as e:
            logger.warning("Admin job list failed: %s", e)
            self.state.error = ADMIN_LIST_ERROR_MESSAGE
        else:
            self.state.jobs = result.jobs
            self.state.pagination = result.pagination
        finally:
            self.state.loading = False

    async def toggle(self, job_id: JobId) -> bool:
        if not self._guard.ensure_authenticated():
            return False
        try:
            await self._service.toggle_job(job_id)
        except AuthorizationError:
            return False
        except ApiError as e:
            logger.warning("Toggle of job %s failed: %s", job_id, e)
            self._notifier.notify("Could not change the job status.", "error")
            return False
        self._notifier.notify("Job status changed.", "success")
        await self.load()
        return True

    async def delete(self, job_id: JobId) -> bool:
        """Asks for confirmation first; returns True only if the job was deleted."""
        if not self._guard.ensure_authenticated():
            return False
        if not self._notifier.confirm(DELETE_CONFIRM_MESSAGE):
            return False
        try:
            await self._service.delete_job(job_id)
        except AuthorizationError:
            return False
        except ApiError as e:
            logger.warning("Delete of job %s failed: %s", job_id, e)
            self._notifier.notify("Delete failed.", "error")
            return False
        self._notifier.notify("Job deleted.", "success")
        await self.load()
        return True
