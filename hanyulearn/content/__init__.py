"""
HanyuLearn Content - Backend access and lesson content for the review screens.

This module provides:
- HanyuApiClient: REST client for lessons, progress tracking and resume
- Content sources: remote, built-in, and remote-with-fallback
- ProgressReporter: fire-and-forget progress events
- LessonDetailLoader: lesson overview with inline error/retry
"""

from .client import (
    ApiError,
    TokenStore,
    HanyuApiClient,
    DEFAULT_TOKEN_DIR,
    DEFAULT_TOKEN_FILE,
)

from .fields import FieldChain

from .mapping import (
    vocabulary_collection,
    grammar_collection,
    lesson_info,
)

from .sources import (
    ReviewKind,
    ReviewContent,
    ContentSource,
    ContentUnavailableError,
    RemoteContentSource,
    MockContentSource,
    FallbackContentSource,
    build_content,
    use_mock_on_failure,
)

from .tracking import ProgressReporter

from .resume import (
    normalize_lesson_id,
    fetch_resume,
)

from .lesson_detail import (
    Activity,
    LessonDetailLoader,
    LessonProgressSummary,
)

__all__ = [
    # Client
    "ApiError",
    "TokenStore",
    "HanyuApiClient",
    "DEFAULT_TOKEN_DIR",
    "DEFAULT_TOKEN_FILE",
    # Mapping
    "FieldChain",
    "vocabulary_collection",
    "grammar_collection",
    "lesson_info",
    # Sources
    "ReviewKind",
    "ReviewContent",
    "ContentSource",
    "ContentUnavailableError",
    "RemoteContentSource",
    "MockContentSource",
    "FallbackContentSource",
    "build_content",
    "use_mock_on_failure",
    # Tracking
    "ProgressReporter",
    # Resume
    "normalize_lesson_id",
    "fetch_resume",
    # Lesson detail
    "Activity",
    "LessonDetailLoader",
    "LessonProgressSummary",
]
