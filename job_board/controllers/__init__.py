"""View controllers: framework-free state and actions behind each page."""

from .admin_detail import AdminJobDetailController
from .admin_form import AdminJobFormController, build_payload, validate_field, validate_form
from .admin_jobs import AdminJobsController
from .job_detail import JobDetailController
from .job_list import JobListOrchestrator, JobListState
from .login import LoginController

__all__ = [
    "AdminJobDetailController",
    "AdminJobFormController",
    "AdminJobsController",
    "JobDetailController",
    "JobListOrchestrator",
    "JobListState",
    "LoginController",
    "build_payload",
    "validate_field",
    "validate_form",
]
