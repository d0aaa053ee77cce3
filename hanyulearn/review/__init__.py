"""
HanyuLearn Review - Runtime components for the review screens.

This module provides:
- ReviewCursor: two-level traversal, progress and mastered flags
- StrokeBuffer: freehand strokes for writing practice
- Debouncer: delayed, cancellable side effects
- ReviewController: screen state combining the above with content sources
"""

from .cursor import (
    ReviewCursor,
    InvalidCollectionError,
)

from .strokes import (
    StrokeBuffer,
    StrokeState,
)

from .debounce import (
    Debouncer,
    Scheduler,
    ThreadingScheduler,
    TimerHandle,
)

from .controller import ReviewController

__all__ = [
    # Cursor
    "ReviewCursor",
    "InvalidCollectionError",
    # Strokes
    "StrokeBuffer",
    "StrokeState",
    # Debounce
    "Debouncer",
    "Scheduler",
    "ThreadingScheduler",
    "TimerHandle",
    # Controller
    "ReviewController",
]
