"""
LessonDetailLoader - Lesson overview with an inline error and retry.

Unlike the review screens, the lesson detail screen has no built-in
content to fall back on: a failed load shows a message and a retry button.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from hanyulearn.schemas import LessonOverview, LessonStatus

from .client import ApiError, HanyuApiClient
from .resume import normalize_lesson_id


logger = logging.getLogger(__name__)

LOAD_FAILED_MESSAGE = "Không thể tải bài học"
CONNECTION_FAILED_MESSAGE = "Không thể kết nối đến server"


@dataclass
class Activity:
    id: str
    title: str
    subtitle: str
    icon: str
    status: LessonStatus


@dataclass
class LessonProgressSummary:
    percent: float = 0
    vocab_learned: int = 0
    vocab_total: int = 0
    grammar_learned: int = 0
    grammar_total: int = 0
    listening_learned: int = 0
    speaking_learned: int = 0
    activities_completed: int = 0
    activities_total: int = 5
    status: LessonStatus = "available"

    @property
    def is_completed(self) -> bool:
        return self.status == "completed" or self.percent == 100


def summarize(overview: LessonOverview) -> LessonProgressSummary:
    """Learned counters with the backend's missing fields filled in."""
    percent = overview.progressPercent or 0
    status = overview.status or "available"
    if status == "completed":
        activities_completed = 5
    else:
        activities_completed = 1 if percent > 0 else 0
    return LessonProgressSummary(
        percent=percent,
        vocab_learned=overview.learnedVocabCount or 0,
        vocab_total=overview.vocabCount or len(overview.vocabulary or []),
        grammar_learned=overview.learnedGrammarCount or 0,
        grammar_total=len(overview.grammar or []),
        listening_learned=overview.learnedListeningCount or 0,
        speaking_learned=overview.learnedSpeakingCount or 0,
        activities_completed=activities_completed,
        status=status,
    )


class LessonDetailLoader:
    """Load one lesson overview; keeps the last error for inline display."""

    def __init__(self, client: HanyuApiClient, lesson_id):
        """
        Args:
            client: Backend client
            lesson_id: Numeric id or "lesson_<n>" reference
        """
        self.client = client
        self.lesson_id = normalize_lesson_id(lesson_id)
        self.overview: Optional[LessonOverview] = None
        self.progress = LessonProgressSummary()
        self.error: Optional[str] = None
        self.is_loading = False

    def load(self) -> bool:
        """Fetch the overview. Returns False and sets error on failure."""
        self.is_loading = True
        self.error = None
        try:
            data = self.client.get_lesson(self.lesson_id)
            self.overview = LessonOverview.model_validate(data)
            self.progress = summarize(self.overview)
            return True
        except ApiError as e:
            logger.error(f"Error fetching lesson detail {self.lesson_id}: {e}")
            if e.status_code is None:
                self.error = CONNECTION_FAILED_MESSAGE
            else:
                self.error = e.detail or LOAD_FAILED_MESSAGE
            return False
        except ValidationError as e:
            logger.error(f"Malformed lesson detail {self.lesson_id}: {e}")
            self.error = LOAD_FAILED_MESSAGE
            return False
        finally:
            self.is_loading = False

    def retry(self) -> bool:
        return self.load()

    # -------------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------------

    def activities(self) -> list[Activity]:
        p = self.progress
        done = p.is_completed

        def status_for(learned: int) -> LessonStatus:
            if done:
                return "completed"
            return "in_progress" if learned > 0 else "available"

        return [
            Activity(
                id="vocabulary",
                title="Từ vựng",
                subtitle="Hoàn thành" if done else f"Đã học {p.vocab_learned}/{p.vocab_total} từ",
                icon="book-open",
                status=status_for(p.vocab_learned),
            ),
            Activity(
                id="sentences",
                title="Câu mẫu",
                subtitle="Hoàn thành" if done else (
                    f"Đã học {p.grammar_learned}/{p.grammar_total} câu" if p.grammar_learned > 0 else "Chưa học"
                ),
                icon="message-square",
                status=status_for(p.grammar_learned),
            ),
            Activity(
                id="speaking",
                title="Luyện nói",
                subtitle="Hoàn thành" if done else (
                    f"Đã hoàn thành {p.speaking_learned} bài" if p.speaking_learned > 0 else "Chưa học"
                ),
                icon="mic",
                status=status_for(p.speaking_learned),
            ),
            Activity(
                id="writing",
                title="Viết chữ Hán",
                subtitle="Hoàn thành" if done else "Chưa học",
                icon="edit-3",
                status="completed" if done else "available",
            ),
        ]

    def main_button_label(self) -> str:
        p = self.progress
        if p.is_completed:
            return "Ôn lại bài học"
        if p.status == "in_progress" or p.percent > 0:
            return "Tiếp tục bài học"
        return "Bắt đầu học"
