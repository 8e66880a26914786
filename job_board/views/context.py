"""Per-browser-session wiring shared by all pages."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import streamlit as st

from job_board.config import API_BASE, DESKTOP_DEFAULT_WIDTH, MOBILE_MAX_WIDTH
from job_board.controllers.admin_jobs import AdminJobsController
from job_board.controllers.job_list import JobListOrchestrator
from job_board.routes import HOME_PATH, PendingNavigator
from job_board.services.api_client import ApiClient
from job_board.services.jobs_service import JobsService
from job_board.services.notifier import QueuedNotifier
from job_board.services.session_guard import SessionGuard
from job_board.services.token_store import default_token_store
from job_board.state.signals import ViewportSignal
from job_board.utils.event_loop import BackgroundLoop
from job_board.utils.logger import get_logger

logger = get_logger(__name__)

_CONTEXT_KEY = "_job_board_ctx"
ROUTE_PARAM = "route"

NOTIFY_ICONS = {"success": "✅", "error": "❌", "warning": "⚠️", "info": "ℹ️"}


@dataclass
class AppContext:
    loop: BackgroundLoop
    client: ApiClient
    service: JobsService
    navigator: PendingNavigator
    notifier: QueuedNotifier
    guard: SessionGuard
    viewport: ViewportSignal
    job_list: JobListOrchestrator
    admin_jobs: AdminJobsController
    # Per-route controllers (detail/form pages), keyed by route path
    views: Dict[str, Any] = field(default_factory=dict)
    confirm_retry: Optional[Callable[[], Any]] = None


def get_context() -> AppContext:
    """Build the session's context once; later reruns reuse it."""
    ctx = st.session_state.get(_CONTEXT_KEY)
    if ctx is not None:
        return ctx

    # Plain dict: the loop thread reads the token, and st.session_state is only
    # reachable from the script thread.
    browser_storage: Dict[str, Any] = st.session_state.setdefault("_browser_storage", {})

    loop = BackgroundLoop()
    client = ApiClient(API_BASE)
    service = JobsService(client)
    navigator = PendingNavigator()
    notifier = QueuedNotifier()
    guard = SessionGuard(default_token_store(browser_storage), client, navigator)
    viewport = ViewportSignal(DESKTOP_DEFAULT_WIDTH)
    ctx = AppContext(
        loop=loop,
        client=client,
        service=service,
        navigator=navigator,
        notifier=notifier,
        guard=guard,
        viewport=viewport,
        job_list=JobListOrchestrator(service, viewport, navigator),
        admin_jobs=AdminJobsController(service, guard, notifier),
    )
    st.session_state[_CONTEXT_KEY] = ctx
    logger.info("New browser session against %s", API_BASE)
    return ctx


def current_path() -> str:
    return st.query_params.get(ROUTE_PARAM) or HOME_PATH


def apply_pending_navigation(ctx: AppContext) -> bool:
    """Move the URL to the navigator's pending target, if any. Returns True when it moved."""
    path = ctx.navigator.consume()
    if not path:
        return False
    st.query_params.from_dict({ROUTE_PARAM: path})
    return True


def set_compact_layout(ctx: AppContext, compact: bool) -> None:
    """Browsers do not report their width to Streamlit; the sidebar toggle stands in for it."""
    width = MOBILE_MAX_WIDTH if compact else DESKTOP_DEFAULT_WIDTH
    ctx.loop.call(ctx.viewport.resize, width)


def flush_notifications(ctx: AppContext) -> None:
    for message, level in ctx.notifier.drain():
        st.toast(message, icon=NOTIFY_ICONS.get(level, NOTIFY_ICONS["info"]))


def request_with_confirm(ctx: AppContext, action: Callable[[], Any]) -> None:
    """Run an action that may ask for confirmation; it is re-run once the user approves."""
    ctx.confirm_retry = action
    action()


def _approve(ctx: AppContext, message: str) -> None:
    ctx.notifier.approve(message)
    retry, ctx.confirm_retry = ctx.confirm_retry, None
    if retry is not None:
        retry()


def _dismiss(ctx: AppContext) -> None:
    ctx.notifier.dismiss()
    ctx.confirm_retry = None


def render_confirm_prompt(ctx: AppContext) -> None:
    message = ctx.notifier.pending_confirm
    if not message:
        return
    with st.container(border=True):
        st.warning(message)
        col_ok, col_cancel = st.columns(2)
        col_ok.button("Confirm", type="primary", key="confirm_ok", on_click=_approve, args=(ctx, message))
        col_cancel.button("Cancel", key="confirm_cancel", on_click=_dismiss, args=(ctx,))
