"""
Tests for Debouncer: last settle wins.
"""

import threading

from hanyulearn.review import Debouncer, ThreadingScheduler


class TestDebouncer:
    def test_fires_after_delay(self, scheduler):
        fired = []
        debouncer = Debouncer(0.5, scheduler)
        debouncer.schedule("x", lambda: fired.append("x"))

        scheduler.advance(0.4)
        assert fired == []
        assert debouncer.pending_key == "x"

        scheduler.advance(0.1)
        assert fired == ["x"]
        assert debouncer.pending_key is None

    def test_new_schedule_cancels_pending(self, scheduler):
        fired = []
        debouncer = Debouncer(0.5, scheduler)
        debouncer.schedule("x", lambda: fired.append("x"))
        scheduler.advance(0.3)
        debouncer.schedule("y", lambda: fired.append("y"))

        scheduler.advance(0.3)
        assert fired == []
        scheduler.advance(0.2)
        assert fired == ["y"]
        scheduler.advance(5)
        assert fired == ["y"]

    def test_cancel(self, scheduler):
        fired = []
        debouncer = Debouncer(0.5, scheduler)
        debouncer.schedule("x", lambda: fired.append("x"))
        debouncer.cancel()
        scheduler.advance(1)
        assert fired == []
        assert debouncer.pending_key is None

    def test_cancelled_timer_that_already_woke_does_not_fire(self, scheduler):
        fired = []
        debouncer = Debouncer(0.5, scheduler)
        debouncer.schedule("x", lambda: fired.append("x"))
        stale = scheduler.pending[0]
        debouncer.cancel()
        # simulate a timer thread that woke before cancel() took effect
        stale.callback()
        assert fired == []

    def test_threading_scheduler(self):
        done = threading.Event()
        debouncer = Debouncer(0.01, ThreadingScheduler())
        debouncer.schedule("x", done.set)
        assert done.wait(2)
