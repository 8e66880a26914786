"""List/preview orchestration for the public job board.

Fetches the paginated list for the committed (debounced) filters plus the current
page, and on desktop layouts loads the selected job's detail into a preview pane.
All methods must be called on the event loop that owns this object.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from job_board.config import (
    LIST_ERROR_MESSAGE,
    MIN_LOADING_SECONDS,
    SEARCH_DEBOUNCE_SECONDS,
)
from job_board.errors import ApiError
from job_board.routes import Navigator, job_detail_path
from job_board.schemas.filters import FilterSnapshot, FilterState
from job_board.schemas.job_posting import JobId, JobPosting, Pagination
from job_board.services.jobs_service import JobsService
from job_board.state.debounce import Debouncer
from job_board.state.signals import ViewportSignal
from job_board.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class JobListState:
    """Everything the list and preview panes render from."""

    jobs: List[JobPosting] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)
    loading: bool = False
    error: str = ""
    selected_id: Optional[JobId] = None
    selected_job: Optional[JobPosting] = None
    preview_loading: bool = False

    @property
    def preview_status(self) -> str:
        """One of: loading, ready, unavailable, empty."""
        if self.preview_loading:
            return "loading"
        if self.selected_job is not None:
            return "ready"
        if self.selected_id is not None:
            return "unavailable"
        return "empty"


class JobListOrchestrator:
    """Drives JobListState from filter changes, selections and viewport changes."""

    def __init__(
        self,
        service: JobsService,
        viewport: ViewportSignal,
        navigator: Navigator,
        debounce_seconds: float = SEARCH_DEBOUNCE_SECONDS,
        min_loading_seconds: float = MIN_LOADING_SECONDS,
    ) -> None:
        self._service = service
        self._viewport = viewport
        self._navigator = navigator
        self._min_loading = min_loading_seconds
        self._debouncer: Debouncer[FilterSnapshot] = Debouncer(self._commit, debounce_seconds)

        self.state = JobListState()
        self._staged: Optional[FilterSnapshot] = None
        self._committed: Optional[FilterSnapshot] = None
        self._page = 1
        self._list_task: Optional[asyncio.Task] = None
        self._preview_task: Optional[asyncio.Task] = None
        self._unsubscribe: Optional[Callable[[], None]] = None
        self._mounted = False

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def committed_filters(self) -> Optional[FilterState]:
        """Filters the current (or last) list request was issued for."""
        if self._committed is None:
            return None
        return FilterState.from_snapshot(self._committed, self._page)

    @property
    def list_task(self) -> Optional[asyncio.Task]:
        return self._list_task

    @property
    def preview_task(self) -> Optional[asyncio.Task]:
        return self._preview_task

    # ----- Lifecycle -----

    def mount(self, filters: FilterState) -> None:
        """Start the view: initial filters are committed without waiting for the debounce."""
        if self._mounted:
            self.apply(filters)
            return
        self._mounted = True
        self._unsubscribe = self._viewport.subscribe(self._on_viewport_change)
        self._staged = self._committed = filters.snapshot()
        self._page = filters.page
        self._refresh()

    def unmount(self) -> None:
        """Tear down: no timer or request started by this view may fire afterwards."""
        self._debouncer.cancel()
        for task in (self._list_task, self._preview_task):
            if task is not None and not task.done():
                task.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        # A remount must fetch the preview again
        self.state.selected_id = None
        self.state.selected_job = None
        self.state.preview_loading = False
        self._mounted = False

    # ----- Inputs -----

    def apply(self, filters: FilterState) -> None:
        """Feed the latest URL-derived filters. Non-page fields are debounced, page is not."""
        if not self._mounted:
            self.mount(filters)
            return
        snapshot = filters.snapshot()
        if snapshot != self._staged:
            self._staged = snapshot
            self._debouncer.push(snapshot)
        if filters.page != self._page:
            self._page = filters.page
            self._refresh()

    def _commit(self, snapshot: FilterSnapshot) -> None:
        if snapshot == self._committed:
            return
        self._committed = snapshot
        logger.debug("Committed filters %s", snapshot)
        self._refresh()

    def _on_viewport_change(self, width: int) -> None:
        logger.debug("Viewport width %s (mobile=%s)", width, self._viewport.is_mobile)
        if self._viewport.is_mobile:
            if self._preview_task is not None and not self._preview_task.done():
                self._preview_task.cancel()
                self.state.preview_loading = False
            return
        # Back on desktop: a preview interrupted by the mobile layout is fetched again
        state = self.state
        if state.selected_id is not None and state.selected_job is None and not state.preview_loading:
            self.select_job(state.selected_id)

    # ----- List -----

    def _refresh(self) -> None:
        if self._list_task is not None and not self._list_task.done():
            self._list_task.cancel()
        filters = FilterState.from_snapshot(self._committed, self._page)
        self._list_task = asyncio.get_running_loop().create_task(self._load_list(filters))

    async def _load_list(self, filters: FilterState) -> None:
        loop = asyncio.get_running_loop()
        started = loop.time()
        self.state.loading = True
        self.state.error = ""
        try:
            result = await self._service.list_jobs(filters)
        except asyncio.CancelledError:
            logger.debug("List request superseded: %s", filters.to_request_params())
            raise
        except ApiError as e:
            logger.warning("Job list request failed: %s", e)
            self.state.error = LIST_ERROR_MESSAGE
        else:
            self.state.jobs = result.jobs
            self.state.pagination = result.pagination
            self._auto_select(result.jobs)

        # Hold the loading indicator for the minimum display time to avoid flicker
        remaining = self._min_loading - (loop.time() - started)
        if remaining > 0:
            await asyncio.sleep(remaining)
        self.state.loading = False

    def _auto_select(self, jobs: List[JobPosting]) -> None:
        if self._viewport.is_mobile or not jobs:
            return
        selected = self.state.selected_id
        if selected is not None and any(j.id == selected for j in jobs):
            return
        self.select_job(jobs[0].id)

    # ----- Preview -----

    def select_job(self, job_id: Optional[JobId]) -> None:
        """Mobile: navigate to the detail view. Desktop: load the inline preview."""
        if job_id is None or job_id == "":
            return
        if self._viewport.is_mobile:
            self._navigator.go(job_detail_path(job_id))
            return
        if self._preview_task is not None and not self._preview_task.done():
            self._preview_task.cancel()
        self.state.selected_id = job_id
        self.state.selected_job = None
        self.state.preview_loading = True
        self._preview_task = asyncio.get_running_loop().create_task(self._load_preview(job_id))

    async def _load_preview(self, job_id: JobId) -> None:
        try:
            job = await self._service.get_job(job_id)
        except asyncio.CancelledError:
            logger.debug("Preview request for %s superseded", job_id)
            raise
        except ApiError as e:
            logger.warning("Preview for job %s failed: %s", job_id, e)
            job = None
        if self.state.selected_id != job_id:
            return
        self.state.selected_job = job
        self.state.preview_loading = False
