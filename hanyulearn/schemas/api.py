"""
REST payload schemas for HanyuLearn.

Defines Pydantic models for the backend API including:
- Lesson content payload (GET /api/lessons/{id})
- Lesson overview for the lesson detail screen
- Resume pointer (GET /api/v1/learning/resume)
"""

from pydantic import BaseModel, ConfigDict
from typing import Any, Literal, Optional


class LessonPayload(BaseModel):
    """
    Lesson content as returned by the backend.

    Vocabulary and grammar entries stay as raw dicts: their field names vary
    between upstream data versions and are resolved by content.fields.
    """
    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    hsk_level: Optional[int] = None
    title: Optional[str] = None
    vocabulary: Optional[list[dict[str, Any]]] = None
    grammar: Optional[list[dict[str, Any]]] = None


LessonStatus = Literal["completed", "in_progress", "available", "locked"]


class LessonOverview(BaseModel):
    """Lesson detail with learned counters, as shown before starting a lesson."""
    model_config = ConfigDict(extra="allow")

    id: int
    title: str
    description: Optional[str] = None
    hsk_level: Optional[int] = None
    estimated_time: Optional[int] = None
    vocabCount: Optional[int] = None
    status: Optional[LessonStatus] = None
    progressPercent: Optional[float] = None
    learnedVocabCount: Optional[int] = None
    learnedGrammarCount: Optional[int] = None
    learnedListeningCount: Optional[int] = None
    learnedSpeakingCount: Optional[int] = None
    vocabulary: Optional[list[dict[str, Any]]] = None
    grammar: Optional[list[dict[str, Any]]] = None


class ResumePointer(BaseModel):
    lesson_id: int
    course_id: Optional[int] = None
    hsk_level: Optional[int] = None
    title: Optional[str] = None
