"""Job posting schemas as served by (and sent to) the remote job API."""

from datetime import datetime
from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from job_board.config import DEFAULT_CURRENCY, DEFAULT_JOB_TYPE
from job_board.utils.helpers import is_blank_html, is_valid_email

JobType = Literal["Full-time", "Part-time", "Contract", "Internship"]
Currency = Literal["VND", "USD", "EUR"]
JobId = Union[int, str]


def _coerce_amount(value: Any) -> Optional[int]:
    """API amounts may arrive as decimals or numeric strings ("15000000.00"); keep whole units."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("salary must be a number")
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        try:
            return int(float(value.strip()))
        except ValueError:
            raise ValueError(f"salary must be a number, got {value!r}")
    raise ValueError(f"salary must be a number, got {type(value).__name__}")


class JobPosting(BaseModel):
    """A job posting. Created and destroyed only by the API; the client holds read-mostly copies."""

    id: JobId = Field(..., description="Stable identifier, also the list rendering key")
    title: str = ""
    company: str = ""
    location: str = ""
    job_type: str = Field(default=DEFAULT_JOB_TYPE, description="Full-time, Part-time, Contract or Internship")
    salary_min: Optional[int] = None
    salary_max: Optional[int] = None
    salary_currency: Optional[str] = Field(default=DEFAULT_CURRENCY, description="Currency code, e.g. VND")
    description: str = Field(default="", description="Rich HTML text")
    requirements: Optional[str] = Field(default=None, description="Rich HTML text")
    benefits: Optional[str] = Field(default=None, description="Rich HTML text")
    contact_email: str = ""
    contact_phone: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> Optional[int]:
        return _coerce_amount(value)

    @field_validator("title", "company", "location", "description", "contact_email", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class Pagination(BaseModel):
    """Pagination metadata; camelCase on the wire."""

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(default=1, alias="currentPage")
    total_pages: int = Field(default=1, alias="totalPages")
    total_jobs: int = Field(default=0, alias="totalJobs")


class PageResult(BaseModel):
    """One page of jobs plus its pagination metadata."""

    jobs: List[JobPosting] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)

    @field_validator("jobs", mode="before")
    @classmethod
    def _none_to_list(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("pagination", mode="before")
    @classmethod
    def _none_to_default(cls, value: Any) -> Any:
        return {} if value is None else value


class JobPayload(BaseModel):
    """Create/update body for admin job endpoints. Mirrors the form's rules at submit time."""

    title: str
    company: str
    location: str
    salary_min: Optional[int] = Field(default=None, ge=0)
    salary_max: Optional[int] = Field(default=None, ge=0)
    salary_currency: Currency = DEFAULT_CURRENCY
    job_type: JobType = DEFAULT_JOB_TYPE
    description: str
    requirements: Optional[str] = None
    benefits: Optional[str] = None
    contact_email: str
    contact_phone: Optional[str] = None
    is_active: bool = True

    @field_validator("salary_min", "salary_max", mode="before")
    @classmethod
    def _amount(cls, value: Any) -> Optional[int]:
        return _coerce_amount(value)

    @field_validator("title", "company", "location")
    @classmethod
    def _required_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("required")
        return value

    @field_validator("description")
    @classmethod
    def _required_html(cls, value: str) -> str:
        if is_blank_html(value):
            raise ValueError("required")
        return value

    @field_validator("requirements", "benefits", "contact_phone", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and is_blank_html(value):
            return None
        return value

    @field_validator("contact_email")
    @classmethod
    def _email(cls, value: str) -> str:
        value = value.strip()
        if not is_valid_email(value):
            raise ValueError("must be a valid email address")
        return value

    @model_validator(mode="after")
    def _salary_range(self) -> "JobPayload":
        if self.salary_min is not None and self.salary_max is not None and self.salary_min > self.salary_max:
            raise ValueError("salary_min must not be greater than salary_max")
        return self
