"""
Review item schemas for HanyuLearn.

Defines the two-level collection shown on the review screens:
- OuterItem: a vocabulary word
- InnerItem: one example sentence (or the word itself on the vocabulary screen)
- LessonInfo: header metadata for a lesson
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional


class InnerItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str                          # unique within the parent OuterItem only
    source_id: Optional[int] = None  # upstream numeric id, used for tracking
    text: str
    pinyin: str = ""
    translation: str = ""
    keyword: Optional[str] = None
    keyword_pinyin: Optional[str] = None
    image_url: Optional[str] = None
    audio_url: Optional[str] = None


class OuterItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    source_id: Optional[int] = None
    word: str
    pinyin: str = ""
    meaning: str = ""
    examples: tuple[InnerItem, ...] = ()


class LessonInfo(BaseModel):
    lesson_id: int
    hsk_level: int = 1
    title: str
    lesson_number: int
