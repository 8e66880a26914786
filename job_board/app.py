"""
Job board – Streamlit frontend.
Routing and page chrome only; state and API orchestration live in controllers.
"""

import streamlit as st

from job_board.routes import ADMIN_PATH, HOME_PATH, Route, resolve
from job_board.views.admin_pages import (
    render_admin_job_detail_page,
    render_admin_job_form_page,
    render_admin_jobs_page,
    render_login_page,
)
from job_board.views.context import (
    AppContext,
    apply_pending_navigation,
    current_path,
    flush_notifications,
    get_context,
    render_confirm_prompt,
    set_compact_layout,
)
from job_board.views.jobs_page import render_job_detail_page, render_jobs_page

# Session keys owned by a single view; dropped when the user leaves it
_VIEW_SCOPED_PREFIXES = ("jobs_", "admin_search", "admin_limit", "form_")


def _on_route_change(ctx: AppContext, previous: str, route: Route) -> None:
    """Tear down the view being left."""
    if previous == "jobs" and route.name != "jobs":
        ctx.loop.call(ctx.job_list.unmount)
    ctx.views.clear()
    ctx.notifier.dismiss()
    for key in list(st.session_state.keys()):
        if isinstance(key, str) and key.startswith(_VIEW_SCOPED_PREFIXES):
            del st.session_state[key]


def _render_sidebar(ctx: AppContext) -> None:
    with st.sidebar:
        st.markdown("### JobPortal")
        st.button("Jobs", use_container_width=True, on_click=ctx.navigator.go, args=(HOME_PATH,))
        st.button("Admin", use_container_width=True, on_click=ctx.navigator.go, args=(ADMIN_PATH,))
        compact = st.toggle(
            "Compact layout",
            key="layout_compact",
            help="Phone-style layout: one column, selecting a job opens its page.",
        )
        set_compact_layout(ctx, compact)
        if ctx.guard.is_authenticated:
            st.divider()
            st.button(
                "Log out",
                use_container_width=True,
                on_click=ctx.loop.run_callable,
                args=(ctx.guard.sign_out,),
            )


def render_layout() -> None:
    st.set_page_config(page_title="JobPortal", layout="wide")
    ctx = get_context()

    if apply_pending_navigation(ctx):
        st.rerun()

    route = resolve(current_path())
    previous = st.session_state.get("_active_view")
    if previous != route.path:
        _on_route_change(ctx, st.session_state.get("_active_view_name"), route)
        st.session_state["_active_view"] = route.path
        st.session_state["_active_view_name"] = route.name

    _render_sidebar(ctx)

    # Protected views: no admin request is issued without a stored token
    if route.protected and not ctx.loop.run_callable(ctx.guard.ensure_authenticated):
        apply_pending_navigation(ctx)
        st.rerun()

    render_confirm_prompt(ctx)

    if route.name == "jobs":
        st.title("Find your next job")
        render_jobs_page(ctx)
    elif route.name == "job_detail":
        render_job_detail_page(ctx, route.params["id"])
    elif route.name == "admin_login":
        render_login_page(ctx)
    elif route.name == "admin_jobs":
        st.title("Manage jobs")
        render_admin_jobs_page(ctx)
    elif route.name == "admin_job_new":
        render_admin_job_form_page(ctx)
    elif route.name == "admin_job_detail":
        render_admin_job_detail_page(ctx, route.params["id"])
    elif route.name == "admin_job_edit":
        render_admin_job_form_page(ctx, route.params["id"])

    # Navigate before flushing so notifications show on the destination page
    if apply_pending_navigation(ctx):
        st.rerun()
    flush_notifications(ctx)

    st.divider()
    st.caption("JobPortal · Connecting candidates and employers.")


if __name__ == "__main__":
    render_layout()
