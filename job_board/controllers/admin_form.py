"""Admin create/edit form: field rules, submit, and server error surfacing."""

from typing import Any, Dict, Optional

from pydantic import ValidationError

from job_board.config import CURRENCIES, DEFAULT_CURRENCY, DEFAULT_JOB_TYPE, JOB_TYPES, SAVE_FAILED_MESSAGE
from job_board.errors import ApiError, AuthorizationError, FormValidationError
from job_board.routes import ADMIN_PATH, Navigator
from job_board.schemas.job_posting import JobId, JobPayload
from job_board.services.jobs_service import JobsService
from job_board.services.notifier import Notifier
from job_board.services.session_guard import SessionGuard
from job_board.utils.helpers import is_blank_html, is_valid_email
from job_board.utils.logger import get_logger

logger = get_logger(__name__)

FORM_FIELDS = (
    "title",
    "company",
    "location",
    "salary_min",
    "salary_max",
    "salary_currency",
    "job_type",
    "contact_email",
    "contact_phone",
    "description",
    "requirements",
    "benefits",
    "is_active",
)
REQUIRED_FIELDS = ("title", "company", "location", "description", "contact_email")

REQUIRED_MESSAGE = "Required"
EMAIL_MESSAGE = "Enter a valid email address"
AMOUNT_MESSAGE = "Must be a number >= 0"
SALARY_MIN_MESSAGE = "Must not exceed the maximum salary"
SALARY_MAX_MESSAGE = "Must be at least the minimum salary"


def default_form_values() -> Dict[str, Any]:
    return {
        "title": "",
        "company": "",
        "location": "",
        "salary_min": None,
        "salary_max": None,
        "salary_currency": DEFAULT_CURRENCY,
        "job_type": DEFAULT_JOB_TYPE,
        "contact_email": "",
        "contact_phone": "",
        "description": "",
        "requirements": "",
        "benefits": "",
        "is_active": True,
    }


def _amount(value: Any) -> Optional[float]:
    """None for blank, float for numeric; raises ValueError otherwise."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValueError(value)
    return float(value)


def validate_field(name: str, values: Dict[str, Any]) -> Optional[str]:
    """Live check for one field against the current form values; None means valid."""
    value = values.get(name)
    if name in ("title", "company", "location"):
        return REQUIRED_MESSAGE if not str(value or "").strip() else None
    if name == "description":
        return REQUIRED_MESSAGE if is_blank_html(str(value or "")) else None
    if name == "contact_email":
        if not str(value or "").strip():
            return REQUIRED_MESSAGE
        return None if is_valid_email(str(value)) else EMAIL_MESSAGE
    if name == "salary_currency":
        return None if (value or DEFAULT_CURRENCY) in CURRENCIES else f"One of {', '.join(CURRENCIES)}"
    if name == "job_type":
        return None if (value or DEFAULT_JOB_TYPE) in JOB_TYPES else f"One of {', '.join(JOB_TYPES)}"
    if name in ("salary_min", "salary_max"):
        try:
            low = _amount(values.get("salary_min"))
            high = _amount(values.get("salary_max"))
        except (TypeError, ValueError):
            return AMOUNT_MESSAGE
        own = low if name == "salary_min" else high
        if own is not None and own < 0:
            return AMOUNT_MESSAGE
        if low is not None and high is not None and low > high:
            return SALARY_MIN_MESSAGE if name == "salary_min" else SALARY_MAX_MESSAGE
    return None


def validate_form(values: Dict[str, Any]) -> Dict[str, str]:
    """All field errors at once, keyed by field name."""
    errors = {}
    for name in FORM_FIELDS:
        message = validate_field(name, values)
        if message:
            errors[name] = message
    return errors


def build_payload(values: Dict[str, Any]) -> JobPayload:
    """Run the field rules, then let JobPayload re-check them; raises FormValidationError."""
    errors = validate_form(values)
    if errors:
        raise FormValidationError(errors)
    data = {k: values.get(k) for k in FORM_FIELDS if k in values}
    try:
        return JobPayload.model_validate(data)
    except ValidationError as e:
        model_errors = {}
        for err in e.errors():
            field_name = str(err["loc"][0]) if err.get("loc") else "form"
            model_errors[field_name] = err.get("msg", "Invalid value")
        raise FormValidationError(model_errors) from e


class AdminJobFormController:
    """Create when job_id is None, edit otherwise."""

    def __init__(
        self,
        service: JobsService,
        guard: SessionGuard,
        notifier: Notifier,
        navigator: Navigator,
        job_id: Optional[JobId] = None,
    ) -> None:
        self._service = service
        self._guard = guard
        self._notifier = notifier
        self._navigator = navigator
        self.job_id = job_id
        self.values: Dict[str, Any] = default_form_values()
        self.errors: Dict[str, str] = {}
        self.loading = False

    @property
    def is_edit(self) -> bool:
        return self.job_id is not None

    async def load(self) -> Dict[str, Any]:
        """Fill values from the existing job when editing."""
        if not self._guard.ensure_authenticated() or not self.is_edit:
            return self.values
        self.loading = True
        try:
            job = await self._service.admin_get_job(self.job_id)
        except AuthorizationError:
            return self.values
        except ApiError as e:
            logger.warning("Could not load job %s for editing: %s", self.job_id, e)
            self._notifier.notify("Could not load the job.", "error")
            return self.values
        finally:
            self.loading = False
        values = default_form_values()
        values.update(
            {
                "title": job.title,
                "company": job.company,
                "location": job.location,
                "salary_min": job.salary_min,
                "salary_max": job.salary_max,
                "salary_currency": job.salary_currency or DEFAULT_CURRENCY,
                "job_type": job.job_type or DEFAULT_JOB_TYPE,
                "contact_email": job.contact_email,
                "contact_phone": job.contact_phone or "",
                "description": job.description,
                "requirements": job.requirements or "",
                "benefits": job.benefits or "",
                "is_active": job.is_active,
            }
        )
        self.values = values
        return values

    def validate_field(self, name: str, values: Dict[str, Any]) -> Optional[str]:
        self.values = values
        message = validate_field(name, values)
        if message:
            self.errors[name] = message
        else:
            self.errors.pop(name, None)
        return message

    async def submit(self, values: Dict[str, Any]) -> bool:
        """Validate again, create/update, return to the list. False keeps the user on the form."""
        self.values = values
        if not self._guard.ensure_authenticated():
            return False
        try:
            payload = build_payload(values)
        except FormValidationError as e:
            self.errors = e.errors
            self._notifier.notify("Please fix the highlighted fields.", "error")
            return False
        self.errors = {}
        self.loading = True
        try:
            if self.is_edit:
                await self._service.update_job(self.job_id, payload)
                self._notifier.notify("Job updated.", "success")
            else:
                await self._service.create_job(payload)
                self._notifier.notify("Job created.", "success")
        except AuthorizationError:
            return False
        except ApiError as e:
            logger.warning("Saving job failed: %s", e)
            self._notifier.notify(e.server_message or SAVE_FAILED_MESSAGE, "error")
            return False
        finally:
            self.loading = False
        self._navigator.go(ADMIN_PATH)
        return True
