"""
Content sources for the review screens.

Provides:
- RemoteContentSource: lesson content from the backend
- MockContentSource: built-in content
- FallbackContentSource: remote first, built-in content when remote fails

Keeps network failures out of the review controller: a FallbackContentSource
always returns a usable, non-empty collection.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from pydantic import ValidationError

from hanyulearn.schemas import ItemType, LessonInfo, LessonPayload, OuterItem

from .client import ApiError, HanyuApiClient
from .mapping import grammar_collection, lesson_info, vocabulary_collection
from .mock_data import mock_grammar_payload, mock_vocabulary_payload


logger = logging.getLogger(__name__)


class ReviewKind(str, Enum):
    """Which review screen a collection feeds."""
    VOCABULARY = "vocabulary"
    GRAMMAR = "grammar"

    @property
    def item_type(self) -> ItemType:
        if self == ReviewKind.VOCABULARY:
            return ItemType.VOCABULARY
        return ItemType.GRAMMAR_EXAMPLE


class ContentUnavailableError(Exception):
    """Remote lesson content could not be fetched or used."""


@dataclass
class ReviewContent:
    info: LessonInfo
    collection: list[OuterItem]
    is_fallback: bool = False


class ContentSource(Protocol):
    def fetch(self, lesson_id: int, kind: ReviewKind) -> ReviewContent: ...


def build_content(
    payload: LessonPayload,
    lesson_id: int,
    kind: ReviewKind,
    default_hsk_level: int = 1,
    is_fallback: bool = False,
) -> ReviewContent:
    """Map a lesson payload onto the collection for one review screen."""
    if kind == ReviewKind.VOCABULARY:
        collection = vocabulary_collection(payload)
    else:
        collection = grammar_collection(payload)
    return ReviewContent(
        info=lesson_info(payload, lesson_id, default_hsk_level),
        collection=collection,
        is_fallback=is_fallback,
    )


class RemoteContentSource:
    """Lesson content from GET /api/lessons/{id}."""

    def __init__(self, client: HanyuApiClient, default_hsk_level: int = 1):
        self.client = client
        self.default_hsk_level = default_hsk_level

    def fetch(self, lesson_id: int, kind: ReviewKind) -> ReviewContent:
        """
        Raises:
            ContentUnavailableError: On network errors, non-success status,
                a malformed body, or a lesson with nothing to review
        """
        try:
            data = self.client.get_lesson(lesson_id)
        except ApiError as e:
            raise ContentUnavailableError(f"Lesson {lesson_id}: {e}") from e

        try:
            payload = LessonPayload.model_validate(data)
            content = build_content(payload, lesson_id, kind, self.default_hsk_level)
        except (ValidationError, AttributeError, TypeError, ValueError) as e:
            raise ContentUnavailableError(f"Lesson {lesson_id}: malformed body ({e})") from e

        if not content.collection:
            raise ContentUnavailableError(f"Lesson {lesson_id}: no {kind.value} items")
        return content


class MockContentSource:
    """Built-in content, identical for every lesson."""

    def __init__(self, default_hsk_level: int = 1):
        self.default_hsk_level = default_hsk_level

    def fetch(self, lesson_id: int, kind: ReviewKind) -> ReviewContent:
        if kind == ReviewKind.VOCABULARY:
            data = mock_vocabulary_payload()
        else:
            data = mock_grammar_payload()
        return build_content(
            LessonPayload.model_validate(data),
            lesson_id,
            kind,
            self.default_hsk_level,
            is_fallback=True,
        )


def use_mock_on_failure(error: Exception) -> bool:
    """Fall back to built-in content whenever remote content is unavailable."""
    return isinstance(error, ContentUnavailableError)


class FallbackContentSource:
    """Try the primary source; switch to the fallback when the policy says so."""

    def __init__(
        self,
        primary: ContentSource,
        fallback: Optional[ContentSource] = None,
        policy: Callable[[Exception], bool] = use_mock_on_failure,
    ):
        self.primary = primary
        self.fallback = fallback or MockContentSource()
        self.policy = policy

    def fetch(self, lesson_id: int, kind: ReviewKind) -> ReviewContent:
        try:
            return self.primary.fetch(lesson_id, kind)
        except Exception as e:
            if not self.policy(e):
                raise
            logger.warning(f"Using built-in {kind.value} content for lesson {lesson_id}: {e}")
            return self.fallback.fetch(lesson_id, kind)
