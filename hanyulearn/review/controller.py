"""
ReviewController - State behind the Vocabulary and Grammar screens.

Combines:
- ContentSource (lesson content, with built-in fallback)
- ReviewCursor (position, progress, mastered flags)
- StrokeBuffer (writing practice pad)
- Debouncer + ProgressReporter (tracking of the item being viewed)

All state changes happen on UI events. A load that finishes after a newer
load was started, or after the screen was closed, is dropped.
"""

import logging
import threading
from typing import Optional

from hanyulearn.content import ContentSource, ProgressReporter, ReviewContent, ReviewKind
from hanyulearn.schemas import InnerItem, LessonInfo, OuterItem, ProgressEvent

from .cursor import ReviewCursor
from .debounce import Debouncer
from .strokes import StrokeBuffer


logger = logging.getLogger(__name__)


class ReviewController:
    """
    One review screen visit.

    Owns the cursor, the mastered/favorite flags and the stroke buffer;
    nothing is shared between screens.
    """

    def __init__(
        self,
        kind: ReviewKind,
        lesson_id: int,
        source: ContentSource,
        reporter: Optional[ProgressReporter] = None,
        debouncer: Optional[Debouncer] = None,
    ):
        """
        Initialize controller. Nothing is fetched until load().

        Args:
            kind: Vocabulary or grammar review
            lesson_id: Lesson to review
            source: Content source (normally a FallbackContentSource)
            reporter: Progress reporter; None disables tracking
            debouncer: Delay for progress reports (default: 0.5 s on timer threads)
        """
        self.kind = kind
        self.lesson_id = lesson_id
        self.source = source
        self.reporter = reporter
        self.debouncer = debouncer or Debouncer()
        self.strokes = StrokeBuffer()

        self.cursor: Optional[ReviewCursor] = None
        self.info: Optional[LessonInfo] = None
        self.is_fallback = False
        self.is_loading = False
        self.writing_mode = False
        self._favorites: set[tuple[str, str]] = set()

        self._lock = threading.Lock()
        self._ticket = 0
        self._closed = False

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @property
    def is_loaded(self) -> bool:
        return self.cursor is not None

    def begin_load(self) -> int:
        """
        Start a load; returns the ticket that finish_load() must present.

        Reopens a closed controller. Tickets issued before close() stay stale.
        """
        with self._lock:
            self._closed = False
            self._ticket += 1
            self.is_loading = True
            return self._ticket

    def finish_load(self, ticket: int, content: ReviewContent) -> bool:
        """
        Apply fetched content if it belongs to the latest load.

        Returns False when the content is stale and was dropped.
        """
        with self._lock:
            if self._closed or ticket != self._ticket:
                logger.info(f"Dropping stale {self.kind.value} content for lesson {self.lesson_id}")
                return False
            self.is_loading = False

        self.debouncer.cancel()
        # raises InvalidCollectionError for an empty collection
        self.cursor = ReviewCursor(content.collection)
        self.info = content.info
        self.is_fallback = content.is_fallback
        self._favorites = set()
        self.writing_mode = False
        self.strokes.clear()
        logger.info(
            f"Loaded {self.cursor.total_count} {self.kind.value} items for lesson {self.lesson_id}"
            + (" (built-in)" if content.is_fallback else "")
        )
        self._schedule_report()
        return True

    def load(self) -> bool:
        """Fetch content for the lesson and reset all review state."""
        ticket = self.begin_load()
        content = self.source.fetch(self.lesson_id, self.kind)
        return self.finish_load(ticket, content)

    def close(self):
        """Screen left: ignore in-flight loads and drop any pending report."""
        with self._lock:
            self._closed = True
            self._ticket += 1
            self.is_loading = False
        self.debouncer.cancel()

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def _require_cursor(self) -> ReviewCursor:
        if self.cursor is None:
            raise RuntimeError("ReviewController.load() has not completed")
        return self.cursor

    def current(self) -> tuple[OuterItem, InnerItem]:
        return self._require_cursor().current()

    def has_next(self) -> bool:
        return self.cursor is not None and self.cursor.has_next()

    def has_previous(self) -> bool:
        return self.cursor is not None and self.cursor.has_previous()

    def progress(self) -> tuple[int, int]:
        return self._require_cursor().progress()

    def next(self) -> bool:
        moved = self._require_cursor().next()
        if moved:
            self._on_focus_changed()
        return moved

    def previous(self) -> bool:
        moved = self._require_cursor().previous()
        if moved:
            self._on_focus_changed()
        return moved

    def _on_focus_changed(self):
        self.strokes.clear()
        self._schedule_report()

    # -------------------------------------------------------------------------
    # Flags
    # -------------------------------------------------------------------------

    def toggle_mastered(self) -> bool:
        return self._require_cursor().toggle_mastered()

    def is_mastered(self) -> bool:
        return self.cursor is not None and self.cursor.is_mastered()

    def _current_key(self) -> tuple[str, str]:
        outer, inner = self.current()
        return (outer.id, inner.id)

    def toggle_favorite(self) -> bool:
        """Flip the favorite flag of the current item; returns the new flag."""
        key = self._current_key()
        if key in self._favorites:
            self._favorites.discard(key)
            return False
        self._favorites.add(key)
        return True

    def is_favorite(self) -> bool:
        return self.cursor is not None and self._current_key() in self._favorites

    # -------------------------------------------------------------------------
    # Writing practice
    # -------------------------------------------------------------------------

    def toggle_writing_mode(self) -> bool:
        """Switch the writing pad on or off; it always opens empty."""
        self.writing_mode = not self.writing_mode
        if self.writing_mode:
            self.strokes.clear()
        return self.writing_mode

    # -------------------------------------------------------------------------
    # Progress tracking
    # -------------------------------------------------------------------------

    def _schedule_report(self):
        if self.reporter is None:
            return
        outer, inner = self.current()
        if inner.source_id is None:
            logger.debug(f"Item {outer.id}/{inner.id} has no upstream id, not tracked")
            self.debouncer.cancel()
            return
        event = ProgressEvent(
            item_type=self.kind.item_type,
            item_id=inner.source_id,
            completed=True,
        )
        self.debouncer.schedule((outer.id, inner.id), lambda: self.reporter.report(event))
