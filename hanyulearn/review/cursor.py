"""
ReviewCursor - Position tracking over a two-level review collection.

Provides:
- Next/previous traversal that crosses word boundaries
- Position-based progress (completed, total)
- Mastered flags per example, independent of position
"""

from typing import Sequence

from hanyulearn.schemas import InnerItem, OuterItem


class InvalidCollectionError(ValueError):
    """Raised when a review collection is empty or has a word without examples."""


class ReviewCursor:
    """
    Cursor over words (outer items) and their examples (inner items).

    The position always points at an existing example. Mastered flags are
    keyed by (word id, example id) because example ids are only unique
    within their word.
    """

    def __init__(self, collection: Sequence[OuterItem]):
        """
        Initialize cursor at the first example of the first word.

        Args:
            collection: Ordered words, each with at least one example

        Raises:
            InvalidCollectionError: If the collection or any word's examples are empty
        """
        self._items: tuple[OuterItem, ...] = ()
        self._offsets: list[int] = []
        self._total = 0
        self._outer = 0
        self._inner = 0
        self._mastered: set[tuple[str, str]] = set()
        self.reset(collection)

    def reset(self, collection: Sequence[OuterItem]):
        """Replace the collection; position and mastered flags start over."""
        items = tuple(collection)
        if not items:
            raise InvalidCollectionError("Review collection is empty")
        for item in items:
            if not item.examples:
                raise InvalidCollectionError(f"Word {item.id!r} has no examples")

        offsets = []
        total = 0
        for item in items:
            offsets.append(total)
            total += len(item.examples)

        self._items = items
        self._offsets = offsets
        self._total = total
        self._outer = 0
        self._inner = 0
        self._mastered = set()

    # -------------------------------------------------------------------------
    # Position
    # -------------------------------------------------------------------------

    @property
    def items(self) -> tuple[OuterItem, ...]:
        return self._items

    @property
    def position(self) -> tuple[int, int]:
        """Current (outer index, inner index)."""
        return (self._outer, self._inner)

    @property
    def total_count(self) -> int:
        """Number of examples across all words."""
        return self._total

    def current(self) -> tuple[OuterItem, InnerItem]:
        """Word and example under the cursor."""
        outer = self._items[self._outer]
        return outer, outer.examples[self._inner]

    def has_next(self) -> bool:
        return self._offsets[self._outer] + self._inner + 1 < self._total

    def has_previous(self) -> bool:
        return self._outer > 0 or self._inner > 0

    def next(self) -> bool:
        """
        Advance to the next example, moving on to the next word when needed.

        Returns False (and stays put) on the last example of the last word.
        """
        if self._inner + 1 < len(self._items[self._outer].examples):
            self._inner += 1
            return True
        if self._outer + 1 < len(self._items):
            self._outer += 1
            self._inner = 0
            return True
        return False

    def previous(self) -> bool:
        """
        Step back to the previous example; from a word's first example this
        lands on the previous word's last example.

        Returns False (and stays put) at the very first example.
        """
        if self._inner > 0:
            self._inner -= 1
            return True
        if self._outer > 0:
            self._outer -= 1
            self._inner = len(self._items[self._outer].examples) - 1
            return True
        return False

    def progress(self) -> tuple[int, int]:
        """
        Traversal progress as (completed, total).

        Counts every example up to and including the current one. Mastered
        flags do not affect this.
        """
        return (self._offsets[self._outer] + self._inner + 1, self._total)

    # -------------------------------------------------------------------------
    # Mastered flags
    # -------------------------------------------------------------------------

    def _current_key(self) -> tuple[str, str]:
        outer, inner = self.current()
        return (outer.id, inner.id)

    def toggle_mastered(self) -> bool:
        """Flip the mastered flag of the current example; returns the new flag."""
        key = self._current_key()
        if key in self._mastered:
            self._mastered.discard(key)
            return False
        self._mastered.add(key)
        return True

    def is_mastered(self) -> bool:
        """Whether the current example is marked mastered."""
        return self._current_key() in self._mastered

    @property
    def mastered(self) -> frozenset[tuple[str, str]]:
        return frozenset(self._mastered)

    @property
    def mastered_count(self) -> int:
        return len(self._mastered)
