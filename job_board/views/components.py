"""Rendering helpers shared by the public and admin pages."""

import streamlit as st

from job_board.schemas.job_posting import JobPosting
from job_board.utils.format import format_salary
from job_board.utils.helpers import strip_unsafe_html


def status_badge(is_active: bool) -> str:
    return ":green[Hiring]" if is_active else ":red[Paused]"


def render_job_summary(job: JobPosting) -> None:
    """Compact card lines used in the result list."""
    st.markdown(f"**{job.title or 'Untitled'}**")
    st.caption(f"{job.company or '—'} · {job.location or '—'} · {job.job_type}")
    st.caption(f"Salary: {format_salary(job.salary_min, job.salary_max, job.salary_currency)}")


def _rich_text(title: str, html_text: str) -> None:
    st.markdown(f"##### {title}")
    # API HTML is trusted by the server; active content is stripped before rendering
    st.html(strip_unsafe_html(html_text))


def render_job_body(job: JobPosting) -> None:
    """Full job description block: meta, rich-text sections and contact."""
    st.markdown(f"### {job.title or 'Untitled'}")
    st.markdown(f"**Company:** {job.company or '—'}  \n**Location:** {job.location or '—'}")
    st.markdown(
        f"`{job.job_type}` {status_badge(job.is_active)}  \n"
        f"**Salary:** {format_salary(job.salary_min, job.salary_max, job.salary_currency)}"
    )
    st.divider()
    _rich_text("Job description", job.description or "")
    if job.requirements:
        _rich_text("Requirements", job.requirements)
    if job.benefits:
        _rich_text("Benefits", job.benefits)
    st.markdown("##### Contact")
    st.caption(f"Email: {job.contact_email or '—'}")
    if job.contact_phone:
        st.caption(f"Phone: {job.contact_phone}")


def render_list_placeholders(count: int = 6) -> None:
    """Stand-in cards while the list is loading."""
    for _ in range(count):
        with st.container(border=True):
            st.markdown(":gray[▒▒▒▒▒▒▒▒▒▒▒▒▒▒]")
            st.caption("Loading…")
