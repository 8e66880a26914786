"""Filter state derived from (and written back to) the URL query string."""

from typing import Any, Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_board.config import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS

# Query parameter names, shared with the synchronizer
FILTER_KEYS: Tuple[str, ...] = ("search", "location", "job_type", "limit")
PAGE_KEY = "page"

# (search, location, job_type, limit): everything the debouncer stages
FilterSnapshot = Tuple[str, str, str, int]


def _parse_page(raw: Any) -> int:
    try:
        page = int(str(raw).strip())
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def _parse_limit(raw: Any) -> int:
    try:
        limit = int(str(raw).strip())
    except (TypeError, ValueError):
        return DEFAULT_PAGE_SIZE
    return limit if limit in PAGE_SIZE_OPTIONS else DEFAULT_PAGE_SIZE


class FilterState(BaseModel):
    """Search filters plus pagination. Immutable; page >= 1 and limit in PAGE_SIZE_OPTIONS."""

    model_config = ConfigDict(frozen=True)

    search: str = ""
    location: str = ""
    job_type: str = ""
    page: int = Field(default=1, ge=1)
    limit: int = DEFAULT_PAGE_SIZE

    @field_validator("limit")
    @classmethod
    def _limit_allowed(cls, value: int) -> int:
        if value not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"limit must be one of {PAGE_SIZE_OPTIONS}")
        return value

    @classmethod
    def from_query_params(cls, params: Mapping[str, Any]) -> "FilterState":
        """Tolerant parse: missing or malformed values fall back to defaults."""
        return cls(
            search=str(params.get("search") or ""),
            location=str(params.get("location") or ""),
            job_type=str(params.get("job_type") or ""),
            page=_parse_page(params.get(PAGE_KEY, 1)),
            limit=_parse_limit(params.get("limit", DEFAULT_PAGE_SIZE)),
        )

    @classmethod
    def from_snapshot(cls, snapshot: FilterSnapshot, page: int = 1) -> "FilterState":
        search, location, job_type, limit = snapshot
        return cls(search=search, location=location, job_type=job_type, limit=limit, page=page)

    def snapshot(self) -> FilterSnapshot:
        """Non-page part of the filters; this is what gets debounced."""
        return (self.search, self.location, self.job_type, self.limit)

    def to_request_params(self) -> Dict[str, Any]:
        """Query params for GET /api/jobs; empty filters are omitted."""
        params: Dict[str, Any] = {"page": self.page, "limit": self.limit}
        for key in ("search", "location", "job_type"):
            value = getattr(self, key)
            if value:
                params[key] = value
        return params
