"""
Progress tracking schemas for HanyuLearn.

Defines Pydantic models for the learning tracker:
- Item types accepted by POST /api/v1/learning/track
- Progress events
"""

from pydantic import BaseModel
from enum import Enum


class ItemType(str, Enum):
    VOCABULARY = "vocabulary"
    GRAMMAR_EXAMPLE = "grammar_example"
    LISTENING = "listening"
    SPEAKING = "speaking"


class ProgressEvent(BaseModel):
    item_type: ItemType
    item_id: int
    completed: bool = True

    def to_payload(self) -> dict:
        """Request body for the tracking endpoint."""
        return {
            "item_type": self.item_type.value,
            "item_id": self.item_id,
            "completed": self.completed,
        }
