"""Tests for ennu.core.scheduler – virtual-clock scheduler."""

from __future__ import annotations

from ennu.core.scheduler import ManualScheduler


class TestManualScheduler:
    def test_nothing_fires_before_due(self):
        s = ManualScheduler()
        fired = []
        s.call_later(1000, lambda: fired.append("a"))
        s.advance(999)
        assert fired == []
        assert s.pending() == 1

    def test_fires_when_due(self):
        s = ManualScheduler()
        fired = []
        s.call_later(1000, lambda: fired.append("a"))
        s.advance(1000)
        assert fired == ["a"]
        assert s.pending() == 0

    def test_fires_once(self):
        s = ManualScheduler()
        fired = []
        s.call_later(10, lambda: fired.append("a"))
        s.advance(10)
        s.advance(1000)
        assert fired == ["a"]

    def test_order_by_due_time_then_insertion(self):
        s = ManualScheduler()
        fired = []
        s.call_later(20, lambda: fired.append("late"))
        s.call_later(10, lambda: fired.append("first"))
        s.call_later(10, lambda: fired.append("second"))
        s.advance(50)
        assert fired == ["first", "second", "late"]

    def test_cancel(self):
        s = ManualScheduler()
        fired = []
        handle = s.call_later(10, lambda: fired.append("a"))
        handle.cancel()
        assert not handle.active
        s.advance(100)
        assert fired == []
        assert s.pending() == 0

    def test_callback_can_schedule_more(self):
        s = ManualScheduler()
        fired = []

        def first():
            fired.append(("first", s.now_ms))
            s.call_later(5, lambda: fired.append(("second", s.now_ms)))

        s.call_later(10, first)
        s.advance(100)
        assert fired == [("first", 10), ("second", 15)]
        assert s.now_ms == 100

    def test_run_all(self):
        s = ManualScheduler()
        fired = []
        s.call_later(3000, lambda: fired.append("a"))
        s.call_later(1, lambda: fired.append("b"))
        s.run_all()
        assert fired == ["b", "a"]
        assert s.now_ms == 3000

    def test_negative_delay_is_immediate(self):
        s = ManualScheduler()
        fired = []
        s.call_later(-5, lambda: fired.append("a"))
        s.advance(0)
        assert fired == ["a"]
