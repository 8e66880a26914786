"""Tests for the admin job table, detail view and create/edit form."""

import json

import pytest

from job_board.controllers.admin_detail import AdminJobDetailController
from job_board.controllers.admin_form import (
    REQUIRED_MESSAGE,
    SALARY_MAX_MESSAGE,
    SALARY_MIN_MESSAGE,
    AdminJobFormController,
    build_payload,
    default_form_values,
    validate_field,
    validate_form,
)
from job_board.controllers.admin_jobs import DELETE_CONFIRM_MESSAGE, AdminJobsController
from job_board.errors import FormValidationError
from job_board.schemas.filters import FilterState

from tests.conftest import ScriptedNotifier


def valid_values(**overrides):
    values = default_form_values()
    values.update(
        {
            "title": "Frontend Developer",
            "company": "Acme",
            "location": "Hanoi",
            "salary_min": 15000000,
            "salary_max": 30000000,
            "contact_email": "hr@acme.test",
            "description": "<p>Build UIs</p>",
        }
    )
    values.update(overrides)
    return values


class TestFormRules:
    def test_valid_values_have_no_errors(self):
        assert validate_form(valid_values()) == {}

    def test_required_fields(self):
        errors = validate_form(default_form_values())
        assert set(errors) == {"title", "company", "location", "description", "contact_email"}
        assert errors["title"] == REQUIRED_MESSAGE

    def test_empty_rich_text_counts_as_blank(self):
        assert validate_field("description", {"description": "<p><br></p>"}) == REQUIRED_MESSAGE

    def test_bad_email(self):
        assert validate_field("contact_email", {"contact_email": "not-an-email"})

    def test_salary_min_above_max_flags_both(self):
        values = valid_values(salary_min=30000000, salary_max=15000000)
        assert validate_field("salary_min", values) == SALARY_MIN_MESSAGE
        assert validate_field("salary_max", values) == SALARY_MAX_MESSAGE

    def test_salary_bounds_are_optional(self):
        assert validate_form(valid_values(salary_min=None, salary_max=None)) == {}
        assert validate_form(valid_values(salary_min="", salary_max=5)) == {}

    def test_negative_or_non_numeric_amount(self):
        assert validate_field("salary_min", valid_values(salary_min=-1))
        assert validate_field("salary_max", valid_values(salary_max="lots"))

    def test_build_payload_normalizes_optional_html(self):
        payload = build_payload(valid_values(requirements="<p><br></p>", contact_phone="  "))
        assert payload.requirements is None
        assert payload.contact_phone is None
        assert payload.salary_min == 15000000

    def test_build_payload_raises_with_field_errors(self):
        with pytest.raises(FormValidationError) as exc:
            build_payload(valid_values(title="  "))
        assert "title" in exc.value.errors


class TestAdminJobForm:
    async def test_inverted_salary_is_rejected_without_request(self, fake_api, service, logged_in, notifier, navigator):
        controller = AdminJobFormController(service, logged_in, notifier, navigator)
        ok = await controller.submit(valid_values(salary_min=30000000, salary_max=15000000))

        assert ok is False
        assert fake_api.requests_to("/api/admin/jobs", "POST") == []
        assert set(controller.errors) == {"salary_min", "salary_max"}
        assert notifier.levels() == ["error"]
        assert navigator.paths == []

    async def test_create_then_list_shows_job(self, fake_api, service, logged_in, notifier, navigator):
        controller = AdminJobFormController(service, logged_in, notifier, navigator)
        assert await controller.submit(valid_values()) is True
        assert navigator.last == "/admin"
        assert notifier.messages[-1] == ("Job created.", "success")

        body = json.loads(fake_api.requests_to("/api/admin/jobs", "POST")[0].content)
        assert body["salary_currency"] == "VND"
        assert body["job_type"] == "Full-time"

        table = AdminJobsController(service, logged_in, notifier)
        await table.load(FilterState())
        assert [j.title for j in table.state.jobs] == ["Frontend Developer"]

    async def test_server_rejection_surfaces_message(self, fake_api, service, logged_in, notifier, navigator):
        fake_api.fail = lambda request: 422 if request.method == "POST" else None
        controller = AdminJobFormController(service, logged_in, notifier, navigator)
        assert await controller.submit(valid_values()) is False
        assert notifier.messages[-1] == ("Forced failure", "error")
        assert navigator.paths == []
        assert controller.loading is False

    async def test_edit_loads_and_updates(self, fake_api, service, logged_in, notifier, navigator):
        job = fake_api.add_job(title="Old title", requirements=None)
        controller = AdminJobFormController(service, logged_in, notifier, navigator, job_id=job["id"])
        values = await controller.load()
        assert controller.is_edit
        assert values["title"] == "Old title"
        assert values["requirements"] == ""

        values["title"] = "New title"
        assert await controller.submit(values) is True
        assert fake_api.jobs[job["id"]]["title"] == "New title"
        assert len(fake_api.requests_to(f"/api/admin/jobs/{job['id']}", "PUT")) == 1
        assert notifier.messages[-1] == ("Job updated.", "success")

    async def test_submit_without_session_redirects(self, fake_api, service, guard, notifier, navigator):
        controller = AdminJobFormController(service, guard, notifier, navigator)
        assert await controller.submit(valid_values()) is False
        assert fake_api.admin_requests() == []
        assert navigator.last == "/admin/login"


class TestAdminJobTable:
    async def test_toggle_flips_exactly_once_and_refetches(self, fake_api, service, logged_in, notifier):
        job = fake_api.add_job()
        table = AdminJobsController(service, logged_in, notifier)
        await table.load(FilterState())

        assert await table.toggle(job["id"]) is True
        assert len(fake_api.requests_to(f"/api/admin/jobs/{job['id']}/toggle", "PATCH")) == 1
        assert fake_api.jobs[job["id"]]["is_active"] is False
        assert table.state.jobs[0].is_active is False
        assert len(fake_api.requests_to("/api/admin/jobs")) == 2

    async def test_delete_asks_for_confirmation(self, fake_api, service, logged_in):
        job = fake_api.add_job()
        notifier = ScriptedNotifier(answer=False)
        table = AdminJobsController(service, logged_in, notifier)

        assert await table.delete(job["id"]) is False
        assert notifier.confirmations == [DELETE_CONFIRM_MESSAGE]
        assert fake_api.requests_to(f"/api/admin/jobs/{job['id']}", "DELETE") == []
        assert job["id"] in fake_api.jobs

    async def test_confirmed_delete_removes_job(self, fake_api, service, logged_in, notifier):
        keep = fake_api.add_job()
        gone = fake_api.add_job()
        table = AdminJobsController(service, logged_in, notifier)
        await table.load(FilterState())

        assert await table.delete(gone["id"]) is True
        assert [j.id for j in table.state.jobs] == [keep["id"]]
        assert notifier.messages[-1] == ("Job deleted.", "success")

    async def test_failed_delete_notifies(self, service, logged_in, notifier):
        table = AdminJobsController(service, logged_in, notifier)
        assert await table.delete(404) is False
        assert notifier.levels() == ["error"]

    async def test_list_error_is_shown(self, fake_api, service, logged_in, notifier):
        fake_api.fail = lambda request: 500
        table = AdminJobsController(service, logged_in, notifier)
        await table.load(FilterState())
        assert table.state.error
        assert table.state.loading is False

    async def test_admin_list_includes_inactive_jobs(self, fake_api, service, logged_in, notifier):
        fake_api.add_job()
        fake_api.add_job(is_active=False)
        table = AdminJobsController(service, logged_in, notifier)
        await table.load(FilterState())
        assert len(table.state.jobs) == 2


class TestAdminJobDetail:
    async def test_load_toggle_delete(self, fake_api, service, logged_in, notifier, navigator):
        job = fake_api.add_job()
        detail = AdminJobDetailController(service, logged_in, notifier, navigator)
        await detail.load(job["id"])
        assert detail.job.id == job["id"]

        await detail.toggle()
        assert detail.job.is_active is False

        assert await detail.delete() is True
        assert job["id"] not in fake_api.jobs
        assert navigator.last == "/admin"

    async def test_missing_job_shows_error(self, service, logged_in, notifier, navigator):
        detail = AdminJobDetailController(service, logged_in, notifier, navigator)
        await detail.load(42)
        assert detail.job is None
        assert detail.error
