"""
HanyuLearn Schemas - Pydantic models for the review screens and backend API.

This module exports all schema classes for:
- Review: outer/inner review items, lesson header info
- API: lesson payload, lesson overview, resume pointer
- Progress: tracked item types and progress events
"""

# Review schemas
from .review import (
    InnerItem,
    OuterItem,
    LessonInfo,
)

# API schemas
from .api import (
    LessonPayload,
    LessonOverview,
    LessonStatus,
    ResumePointer,
)

# Progress schemas
from .progress import (
    ItemType,
    ProgressEvent,
)

__all__ = [
    # Review
    'InnerItem',
    'OuterItem',
    'LessonInfo',
    # API
    'LessonPayload',
    'LessonOverview',
    'LessonStatus',
    'ResumePointer',
    # Progress
    'ItemType',
    'ProgressEvent',
]
