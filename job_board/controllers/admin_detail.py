"""Admin read-only job view with edit/toggle/delete actions."""

from typing import Optional

from job_board.config import DETAIL_ERROR_MESSAGE
from job_board.controllers.admin_jobs import DELETE_CONFIRM_MESSAGE
from job_board.errors import ApiError, AuthorizationError
from job_board.routes import ADMIN_PATH, Navigator
from job_board.schemas.job_posting import JobId, JobPosting
from job_board.services.jobs_service import JobsService
from job_board.services.notifier import Notifier
from job_board.services.session_guard import SessionGuard
from job_board.utils.logger import get_logger

logger = get_logger(__name__)


class AdminJobDetailController:
    def __init__(
        self,
        service: JobsService,
        guard: SessionGuard,
        notifier: Notifier,
        navigator: Navigator,
    ) -> None:
        self._service = service
        self._guard = guard
        self._notifier = notifier
        self._navigator = navigator
        self.job_id: Optional[JobId] = None
        self.job: Optional[JobPosting] = None
        self.loading = False
        self.error = ""

    async def load(self, job_id: Optional[JobId] = None) -> None:
        if job_id is not None:
            self.job_id = job_id
        if not self._guard.ensure_authenticated():
            return
        self.loading = True
        self.error = ""
        try:
            self.job = await self._service.admin_get_job(self.job_id)
        except AuthorizationError:
            return
        except ApiError as e:
            logger.warning("Admin detail for job %s failed: %s", self.job_id, e)
            self.job = None
            self.error = DETAIL_ERROR_MESSAGE
        finally:
            self.loading = False

    async def toggle(self) -> bool:
        if not self._guard.ensure_authenticated():
            return False
        try:
            await self._service.toggle_job(self.job_id)
        except AuthorizationError:
            return False
        except ApiError as e:
            logger.warning("Toggle of job %s failed: %s", self.job_id, e)
            self._notifier.notify("Could not change the job status.", "error")
            return False
        self._notifier.notify("Job status changed.", "success")
        await self.load()
        return True

    async def delete(self) -> bool:
        """Confirm, delete, then return to the admin list."""
        if not self._guard.ensure_authenticated():
            return False
        if not self._notifier.confirm(DELETE_CONFIRM_MESSAGE):
            return False
        try:
            await self._service.delete_job(self.job_id)
        except AuthorizationError:
            return False
        except ApiError as e:
            logger.warning("Delete of job %s failed: %s", self.job_id, e)
            self._notifier.notify("Delete failed.", "error")
            return False
        self._notifier.notify("Job deleted.", "success")
        self._navigator.go(ADMIN_PATH)
        return True
