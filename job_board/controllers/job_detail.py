"""Public job detail page (the target of a selection in mobile layout)."""

from typing import Optional

from job_board.config import DETAIL_ERROR_MESSAGE
from job_board.errors import ApiError
from job_board.schemas.job_posting import JobId, JobPosting
from job_board.services.jobs_service import JobsService
from job_board.utils.logger import get_logger

logger = get_logger(__name__)


class JobDetailController:
    def __init__(self, service: JobsService) -> None:
        self._service = service
        self.job: Optional[JobPosting] = None
        self.error = ""

    async def load(self, job_id: JobId) -> Optional[JobPosting]:
        self.error = ""
        try:
            self.job = await self._service.get_job(job_id)
        except ApiError as e:
            logger.warning("Job %s could not be loaded: %s", job_id, e)
            self.job = None
            self.error = DETAIL_ERROR_MESSAGE
        return self.job
