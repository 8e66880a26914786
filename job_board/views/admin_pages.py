"""Admin area: login, job table, job detail and the create/edit form."""

from typing import Any, Dict, Optional

import streamlit as st

from job_board.config import CURRENCIES, JOB_TYPES, PAGE_SIZE_OPTIONS
from job_board.controllers.admin_detail import AdminJobDetailController
from job_board.controllers.admin_form import FORM_FIELDS, AdminJobFormController
from job_board.controllers.login import LoginController
from job_board.routes import ADMIN_NEW_PATH, ADMIN_PATH, admin_job_edit_path, admin_job_path
from job_board.state.search_sync import SearchStateSynchronizer
from job_board.views.components import render_job_body, status_badge
from job_board.views.context import AppContext, request_with_confirm


def _go(ctx: AppContext, path: str) -> None:
    ctx.navigator.go(path)


# ----- Login -----


def render_login_page(ctx: AppContext) -> None:
    controller: LoginController = ctx.views.setdefault("login", LoginController(ctx.service, ctx.guard, ctx.navigator))
    st.subheader("Admin login")
    with st.form("admin_login"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Log in", type="primary")
    if submitted:
        with st.spinner("Logging in…"):
            ctx.loop.run(controller.submit(username, password))
        if not controller.error:
            st.rerun()
    if controller.error:
        st.error(controller.error)


# ----- Job table -----


def _admin_search_changed(sync: SearchStateSynchronizer, key: str, param: str) -> None:
    sync.update_param(param, st.session_state[key])


def render_admin_jobs_page(ctx: AppContext) -> None:
    sync = SearchStateSynchronizer(st.query_params)
    filters = sync.filters
    controller = ctx.admin_jobs
    st.session_state.setdefault("admin_search", filters.search)
    st.session_state.setdefault("admin_limit", filters.limit)

    col_search, col_limit, col_new = st.columns([3, 1, 1], vertical_alignment="bottom")
    col_search.text_input(
        "Search title / company",
        key="admin_search",
        on_change=_admin_search_changed,
        args=(sync, "admin_search", "search"),
    )
    col_limit.selectbox(
        "Per page",
        options=list(PAGE_SIZE_OPTIONS),
        format_func=lambda v: f"{v} / page",
        key="admin_limit",
        on_change=_admin_search_changed,
        args=(sync, "admin_limit", "limit"),
    )
    col_new.button("New job", type="primary", on_click=_go, args=(ctx, ADMIN_NEW_PATH))

    ctx.loop.run(controller.load(sync.filters))
    state = controller.state
    if state.error:
        st.error(state.error)

    header = st.columns([3, 2, 2, 1, 1, 3])
    for col, label in zip(header, ["Title", "Company", "Location", "Type", "Status", "Actions"]):
        col.markdown(f"**{label}**")
    for job in state.jobs:
        row = st.columns([3, 2, 2, 1, 1, 3])
        row[0].button(job.title or "Untitled", key=f"admin_view_{job.id}", on_click=_go, args=(ctx, admin_job_path(job.id)))
        row[1].write(job.company)
        row[2].write(job.location)
        row[3].write(job.job_type)
        row[4].markdown(status_badge(job.is_active))
        with row[5]:
            a, b, c = st.columns(3)
            a.button("Edit", key=f"admin_edit_{job.id}", on_click=_go, args=(ctx, admin_job_edit_path(job.id)))
            b.button(
                "Disable" if job.is_active else "Enable",
                key=f"admin_toggle_{job.id}",
                on_click=lambda job_id=job.id: ctx.loop.run(controller.toggle(job_id)),
            )
            c.button(
                "Delete",
                key=f"admin_delete_{job.id}",
                on_click=lambda job_id=job.id: request_with_confirm(
                    ctx, lambda: ctx.loop.run(controller.delete(job_id))
                ),
            )

    p = state.pagination
    col_prev, col_info, col_next = st.columns([1, 3, 1])
    col_prev.button("Previous", key="admin_prev", disabled=p.current_page <= 1, on_click=sync.go_to_page, args=(p.current_page - 1,))
    col_info.caption(f"Page {p.current_page}/{p.total_pages} · {p.total_jobs} jobs")
    col_next.button(
        "Next", key="admin_next", disabled=p.current_page >= p.total_pages, on_click=sync.go_to_page, args=(p.current_page + 1,)
    )


# ----- Job detail -----


def render_admin_job_detail_page(ctx: AppContext, job_id: str) -> None:
    key = admin_job_path(job_id)
    controller: Optional[AdminJobDetailController] = ctx.views.get(key)
    if controller is None:
        controller = AdminJobDetailController(ctx.service, ctx.guard, ctx.notifier, ctx.navigator)
        ctx.views[key] = controller
        ctx.loop.run(controller.load(job_id))

    if controller.loading:
        st.caption("Loading…")
        return
    if controller.error:
        st.error(controller.error)
        return
    job = controller.job
    if job is None:
        return

    col_edit, col_toggle, col_delete, col_back = st.columns(4)
    col_edit.button("Edit", on_click=_go, args=(ctx, admin_job_edit_path(job.id)))
    col_toggle.button(
        "Disable" if job.is_active else "Enable",
        on_click=lambda: ctx.loop.run(controller.toggle()),
    )
    col_delete.button(
        "Delete",
        on_click=lambda: request_with_confirm(ctx, lambda: ctx.loop.run(controller.delete())),
    )
    col_back.button("Back", on_click=_go, args=(ctx, ADMIN_PATH))
    with st.container(border=True):
        render_job_body(job)


# ----- Create / edit form -----


def _widget_key(field_name: str) -> str:
    return f"form_{field_name}"


def _form_values() -> Dict[str, Any]:
    return {name: st.session_state.get(_widget_key(name)) for name in FORM_FIELDS}


def _validate_live(controller: AdminJobFormController, field_name: str) -> None:
    values = _form_values()
    controller.validate_field(field_name, values)
    # salary bounds depend on each other
    if field_name in ("salary_min", "salary_max"):
        other = "salary_max" if field_name == "salary_min" else "salary_min"
        controller.validate_field(other, values)


def _field_error(controller: AdminJobFormController, field_name: str) -> None:
    message = controller.errors.get(field_name)
    if message:
        st.caption(f":red[{message}]")


def render_admin_job_form_page(ctx: AppContext, job_id: Optional[str] = None) -> None:
    key = admin_job_edit_path(job_id) if job_id else ADMIN_NEW_PATH
    controller: Optional[AdminJobFormController] = ctx.views.get(key)
    if controller is None:
        controller = AdminJobFormController(ctx.service, ctx.guard, ctx.notifier, ctx.navigator, job_id=job_id)
        ctx.views[key] = controller
        values = ctx.loop.run(controller.load())
        for name in FORM_FIELDS:
            st.session_state[_widget_key(name)] = values.get(name)

    st.subheader("Edit job" if controller.is_edit else "Create job")

    def text(field_name: str, label: str, **kwargs: Any) -> None:
        st.text_input(label, key=_widget_key(field_name), on_change=_validate_live, args=(controller, field_name), **kwargs)
        _field_error(controller, field_name)

    text("title", "Title", placeholder="e.g. Frontend Developer")
    col_company, col_location = st.columns(2)
    with col_company:
        text("company", "Company")
    with col_location:
        text("location", "Location")

    col_min, col_max, col_currency = st.columns(3)
    with col_min:
        st.number_input(
            "Minimum salary", value=None, min_value=0, step=1_000_000, key=_widget_key("salary_min"),
            on_change=_validate_live, args=(controller, "salary_min"),
        )
        _field_error(controller, "salary_min")
    with col_max:
        st.number_input(
            "Maximum salary", value=None, min_value=0, step=1_000_000, key=_widget_key("salary_max"),
            on_change=_validate_live, args=(controller, "salary_max"),
        )
        _field_error(controller, "salary_max")
    col_currency.selectbox("Currency", options=CURRENCIES, key=_widget_key("salary_currency"))

    col_type, col_email, col_phone = st.columns(3)
    col_type.selectbox("Job type", options=JOB_TYPES, key=_widget_key("job_type"))
    with col_email:
        text("contact_email", "Contact email", placeholder="hr@company.com")
    with col_phone:
        text("contact_phone", "Contact phone")

    st.text_area(
        "Description (HTML)", height=200, key=_widget_key("description"),
        on_change=_validate_live, args=(controller, "description"),
    )
    _field_error(controller, "description")
    st.text_area("Requirements (HTML)", height=150, key=_widget_key("requirements"))
    st.text_area("Benefits (HTML)", height=150, key=_widget_key("benefits"))
    st.checkbox("Active", key=_widget_key("is_active"))

    col_cancel, col_submit = st.columns([1, 1])
    col_cancel.button("Cancel", on_click=_go, args=(ctx, ADMIN_PATH))
    if col_submit.button("Update" if controller.is_edit else "Create", type="primary", disabled=controller.loading):
        ctx.loop.run(controller.submit(_form_values()))
        st.rerun()
