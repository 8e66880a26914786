"""Tests for the debouncer and reactive signals."""

import asyncio

from job_board.state.debounce import Debouncer
from job_board.state.signals import Signal, ViewportSignal


class TestDebouncer:
    async def test_rapid_pushes_collapse_into_last_value(self):
        committed = []
        debouncer = Debouncer(committed.append, delay=0.05)
        for value in ("p", "py", "pyt", "pyth", "python"):
            debouncer.push(value)
            await asyncio.sleep(0.01)
        assert committed == []
        await asyncio.sleep(0.1)
        assert committed == ["python"]
        assert debouncer.pending is False

    async def test_separate_bursts_commit_separately(self):
        committed = []
        debouncer = Debouncer(committed.append, delay=0.03)
        debouncer.push("a")
        await asyncio.sleep(0.06)
        debouncer.push("b")
        await asyncio.sleep(0.06)
        assert committed == ["a", "b"]

    async def test_cancel_drops_pending_value(self):
        committed = []
        debouncer = Debouncer(committed.append, delay=0.03)
        debouncer.push("never")
        assert debouncer.pending is True
        debouncer.cancel()
        await asyncio.sleep(0.06)
        assert committed == []


class TestSignal:
    def test_notifies_on_change_only(self):
        seen = []
        signal = Signal(1)
        signal.subscribe(seen.append)
        signal.set(1)
        signal.set(2)
        assert seen == [2]

    def test_unsubscribe_stops_notifications(self):
        seen = []
        signal = Signal("a")
        unsubscribe = signal.subscribe(seen.append)
        unsubscribe()
        signal.set("b")
        assert seen == []
        assert signal.subscriber_count == 0


class TestViewportSignal:
    def test_mobile_threshold_is_inclusive(self):
        viewport = ViewportSignal(640)
        assert viewport.is_mobile is True
        viewport.resize(641)
        assert viewport.is_mobile is False

    def test_resize_notifies_subscribers(self):
        widths = []
        viewport = ViewportSignal(1280)
        viewport.subscribe(widths.append)
        viewport.resize(375)
        assert widths == [375]
        assert viewport.is_mobile
