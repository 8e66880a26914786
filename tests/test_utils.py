"""Tests for helpers, token storage, routing, notifications and the background loop."""

import asyncio

import pytest

from job_board.routes import PendingNavigator, resolve
from job_board.services.notifier import QueuedNotifier
from job_board.services.token_store import JsonFileStorage, TokenStore
from job_board.utils.event_loop import BackgroundLoop
from job_board.utils.helpers import is_blank_html, is_valid_email, strip_unsafe_html


class TestHelpers:
    @pytest.mark.parametrize("value", ["hr@acme.vn", "first.last+jobs@mail.example.com"])
    def test_valid_emails(self, value):
        assert is_valid_email(value)

    @pytest.mark.parametrize("value", ["", "hr", "hr@", "hr@acme", "a b@c.com"])
    def test_invalid_emails(self, value):
        assert not is_valid_email(value)

    def test_blank_html(self):
        assert is_blank_html("<p><br></p>")
        assert is_blank_html("<p>&nbsp;</p>")
        assert not is_blank_html("<p>Hi</p>")

    def test_strip_unsafe_html(self):
        dirty = '<p onclick="steal()">Hi</p><script>alert(1)</script><a href="javascript:alert(1)">x</a>'
        clean = strip_unsafe_html(dirty)
        assert "script" not in clean
        assert "onclick" not in clean
        assert "javascript:" not in clean
        assert "<p>Hi</p>" in clean

    def test_strip_unsafe_html_unquoted_and_slash_separated(self):
        clean = strip_unsafe_html('<img/onerror=alert(1) src=x><a href=javascript:alert(1)>x</a>')
        assert "onerror" not in clean
        assert "javascript:" not in clean
        assert "src=x" in clean
        assert ">x</a>" in clean


class TestTokenStore:
    def test_dict_storage(self):
        storage = {}
        store = TokenStore(storage)
        assert store.get() is None
        store.set("abc")
        assert storage == {"token": "abc"}
        store.clear()
        assert store.get() is None
        store.clear()

    def test_json_file_survives_new_instances(self, tmp_path):
        path = tmp_path / "session" / "token.json"
        TokenStore(JsonFileStorage(str(path))).set("abc")
        assert TokenStore(JsonFileStorage(str(path))).get() == "abc"

        TokenStore(JsonFileStorage(str(path))).clear()
        assert TokenStore(JsonFileStorage(str(path))).get() is None

    def test_unreadable_file_is_treated_as_empty(self, tmp_path):
        path = tmp_path / "token.json"
        path.write_text("{not json", encoding="utf-8")
        assert TokenStore(JsonFileStorage(str(path))).get() is None


class TestRoutes:
    @pytest.mark.parametrize(
        "path,name,params",
        [
            ("/", "jobs", {}),
            ("/jobs/12", "job_detail", {"id": "12"}),
            ("/admin/login", "admin_login", {}),
            ("/admin", "admin_jobs", {}),
            ("/admin/", "admin_jobs", {}),
            ("/admin/job/new", "admin_job_new", {}),
            ("/admin/job/5", "admin_job_detail", {"id": "5"}),
            ("/admin/job/5/edit", "admin_job_edit", {"id": "5"}),
        ],
    )
    def test_resolve(self, path, name, params):
        route = resolve(path)
        assert route.name == name
        assert route.params == params

    def test_unknown_paths_fall_back_to_job_list(self):
        assert resolve("/nowhere").name == "jobs"
        assert resolve(None).name == "jobs"

    def test_protected_views(self):
        assert resolve("/admin").protected
        assert resolve("/admin/job/1/edit").protected
        assert not resolve("/admin/login").protected
        assert not resolve("/jobs/1").protected

    def test_pending_navigator_keeps_latest(self):
        navigator = PendingNavigator()
        navigator.go("/admin")
        navigator.go("/admin/login")
        assert navigator.consume() == "/admin/login"
        assert navigator.consume() is None


class TestQueuedNotifier:
    def test_notifications_drain_once(self):
        notifier = QueuedNotifier()
        notifier.notify("Saved", "success")
        assert notifier.drain() == [("Saved", "success")]
        assert notifier.drain() == []

    def test_confirm_requires_approval(self):
        notifier = QueuedNotifier()
        assert notifier.confirm("Delete this job?") is False
        assert notifier.pending_confirm == "Delete this job?"

        notifier.approve("Delete this job?")
        assert notifier.confirm("Delete this job?") is True
        assert notifier.pending_confirm is None
        assert notifier.confirm("Delete this job?") is False

    def test_dismiss_clears_prompt(self):
        notifier = QueuedNotifier()
        notifier.confirm("Delete this job?")
        notifier.dismiss()
        assert notifier.pending_confirm is None


class TestBackgroundLoop:
    def test_runs_coroutines_and_callables(self):
        background = BackgroundLoop()
        try:

            async def answer():
                await asyncio.sleep(0.01)
                return 42

            assert background.run(answer(), timeout=2) == 42
            assert background.run_callable(lambda a, b: a + b, 1, 2, timeout=2) == 3
        finally:
            background.stop()

    def test_exceptions_propagate(self):
        background = BackgroundLoop()
        try:

            async def fail():
                raise ValueError("boom")

            with pytest.raises(ValueError):
                background.run(fail(), timeout=2)
        finally:
            background.stop()
