"""
Debouncer - Run a side effect once the focused item stops changing.

Each schedule() cancels whatever is still pending, so only the last
settled item fires.
"""

import logging
import threading
from typing import Any, Callable, Hashable, Optional, Protocol


logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class ThreadingScheduler:
    """Run callbacks on daemon timer threads."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


class Debouncer:
    """Cancellable deferred task keyed by the identity of the focused item."""

    def __init__(self, delay: float = 0.5, scheduler: Optional[Scheduler] = None):
        """
        Initialize debouncer.

        Args:
            delay: Quiet period in seconds before the task runs
            scheduler: Timer backend (default: ThreadingScheduler)
        """
        self.delay = delay
        self.scheduler = scheduler or ThreadingScheduler()
        self._lock = threading.Lock()
        self._handle: Optional[TimerHandle] = None
        self._key: Optional[Hashable] = None
        self._generation = 0

    @property
    def pending_key(self) -> Optional[Hashable]:
        """Key of the task waiting to run, if any."""
        with self._lock:
            return self._key

    def schedule(self, key: Hashable, callback: Callable[[], Any]):
        """Cancel any pending task and schedule callback after the quiet period."""
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            generation = self._generation
            self._key = key
            self._handle = self.scheduler.call_later(
                self.delay, lambda: self._fire(generation, callback)
            )

    def cancel(self):
        """Drop the pending task without running it."""
        with self._lock:
            self._cancel_locked()

    def _cancel_locked(self):
        if self._handle is not None:
            self._handle.cancel()
            logger.debug(f"Cancelled pending task for {self._key!r}")
        self._handle = None
        self._key = None
        # a timer thread that already woke up sees a stale generation
        self._generation += 1

    def _fire(self, generation: int, callback: Callable[[], Any]):
        with self._lock:
            if generation != self._generation:
                return
            self._handle = None
            self._key = None
        callback()
