"""Public job board: search bar, result list, inline preview (desktop) and pagination."""

import streamlit as st

from job_board.config import JOB_TYPES, PAGE_SIZE_OPTIONS, PREVIEW_UNAVAILABLE_MESSAGE, RESULTS_POLL_SECONDS
from job_board.controllers.job_detail import JobDetailController
from job_board.routes import job_detail_path
from job_board.schemas.filters import FilterState
from job_board.state.search_sync import SearchStateSynchronizer
from job_board.views.components import render_job_body, render_job_summary, render_list_placeholders
from job_board.views.context import AppContext, apply_pending_navigation

# Widget keys for the filter controls
_FILTER_WIDGETS = {
    "search": "jobs_search",
    "location": "jobs_location",
    "job_type": "jobs_job_type",
    "limit": "jobs_limit",
}


def _seed_widgets(filters: FilterState) -> None:
    """First render (or deep link): controls start from the URL."""
    for param, key in _FILTER_WIDGETS.items():
        if key not in st.session_state:
            st.session_state[key] = getattr(filters, param)


def _on_filter_change(sync: SearchStateSynchronizer, param: str) -> None:
    sync.update_param(param, st.session_state[_FILTER_WIDGETS[param]])


def _render_filter_bar(sync: SearchStateSynchronizer) -> None:
    col_search, col_location, col_button = st.columns([3, 2, 1], vertical_alignment="bottom")
    col_search.text_input(
        "Search",
        placeholder="Job title, keyword or company",
        key=_FILTER_WIDGETS["search"],
        on_change=_on_filter_change,
        args=(sync, "search"),
    )
    col_location.text_input(
        "Location",
        placeholder="City",
        key=_FILTER_WIDGETS["location"],
        on_change=_on_filter_change,
        args=(sync, "location"),
    )
    col_button.button("Search", type="primary", on_click=sync.go_to_page, args=(1,), key="jobs_search_btn")

    col_type, col_limit, _ = st.columns([2, 1, 3])
    col_type.selectbox(
        "Job type",
        options=[""] + JOB_TYPES,
        format_func=lambda v: v or "Any job type",
        key=_FILTER_WIDGETS["job_type"],
        on_change=_on_filter_change,
        args=(sync, "job_type"),
    )
    col_limit.selectbox(
        "Per page",
        options=list(PAGE_SIZE_OPTIONS),
        format_func=lambda v: f"{v} / page",
        key=_FILTER_WIDGETS["limit"],
        on_change=_on_filter_change,
        args=(sync, "limit"),
    )


def _render_list(ctx: AppContext) -> None:
    state = ctx.job_list.state
    if state.loading:
        render_list_placeholders()
        return
    if not state.jobs and not state.error:
        st.info("No jobs match these filters.")
        return
    for job in state.jobs:
        with st.container(border=True):
            render_job_summary(job)
            selected = state.selected_id == job.id and not ctx.viewport.is_mobile
            st.button(
                "Selected" if selected else "View",
                key=f"select_{job.id}",
                disabled=selected,
                on_click=ctx.loop.call,
                args=(ctx.job_list.select_job, job.id),
            )


def _render_preview(ctx: AppContext) -> None:
    state = ctx.job_list.state
    with st.container(border=True):
        status = state.preview_status
        if status == "loading":
            st.caption("Loading job details…")
        elif status == "unavailable":
            st.warning(PREVIEW_UNAVAILABLE_MESSAGE)
        elif status == "empty":
            st.caption("Select a job to preview it here.")
        else:
            job = state.selected_job
            render_job_body(job)
            st.button(
                "Open full page",
                key=f"open_{job.id}",
                on_click=ctx.navigator.go,
                args=(job_detail_path(job.id),),
            )


def _render_pagination(ctx: AppContext, sync: SearchStateSynchronizer) -> None:
    p = ctx.job_list.state.pagination
    col_prev, col_info, col_next = st.columns([1, 3, 1])
    col_prev.button(
        "Previous",
        key="jobs_prev",
        disabled=p.current_page <= 1,
        on_click=sync.go_to_page,
        args=(p.current_page - 1,),
    )
    col_info.caption(f"Page {p.current_page}/{p.total_pages} · {p.total_jobs} jobs")
    col_next.button(
        "Next",
        key="jobs_next",
        disabled=p.current_page >= p.total_pages,
        on_click=sync.go_to_page,
        args=(p.current_page + 1,),
    )


@st.fragment(run_every=RESULTS_POLL_SECONDS)
def _results(ctx: AppContext, sync: SearchStateSynchronizer) -> None:
    """Re-rendered on a timer so debounced fetches and previews show up without user input."""
    if ctx.navigator.pending:
        st.rerun(scope="app")
    ctx.loop.call(ctx.job_list.apply, sync.filters)

    state = ctx.job_list.state
    if state.error:
        st.error(state.error)
    if ctx.viewport.is_mobile:
        _render_list(ctx)
    else:
        col_list, col_preview = st.columns([2, 3])
        with col_list:
            _render_list(ctx)
        with col_preview:
            _render_preview(ctx)
    _render_pagination(ctx, sync)


def render_jobs_page(ctx: AppContext) -> None:
    sync = SearchStateSynchronizer(st.query_params)
    _seed_widgets(sync.filters)
    _render_filter_bar(sync)
    st.divider()
    _results(ctx, sync)


def render_job_detail_page(ctx: AppContext, job_id: str) -> None:
    key = f"/jobs/{job_id}"
    controller = ctx.views.get(key)
    if controller is None:
        controller = JobDetailController(ctx.service)
        ctx.loop.run(controller.load(job_id))
        ctx.views[key] = controller

    if st.button("← Back to jobs", key="detail_back"):
        ctx.navigator.go("/")
        apply_pending_navigation(ctx)
        st.rerun()

    if controller.error:
        st.error(controller.error)
    elif controller.job is not None:
        with st.container(border=True):
            render_job_body(controller.job)
