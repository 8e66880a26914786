"""Schema exports."""

from .filters import FilterSnapshot, FilterState
from .job_posting import JobId, JobPayload, JobPosting, PageResult, Pagination

__all__ = [
    "FilterState",
    "FilterSnapshot",
    "JobId",
    "JobPayload",
    "JobPosting",
    "PageResult",
    "Pagination",
]
