"""
Continue-learning pointer from GET /api/v1/learning/resume.

Lesson ids arrive either as integers or as "lesson_<n>" strings.
"""

import logging
from typing import Optional, Union

from pydantic import ValidationError

from hanyulearn.schemas import ResumePointer

from .client import ApiError, HanyuApiClient


logger = logging.getLogger(__name__)

LESSON_ID_PREFIX = "lesson_"


def normalize_lesson_id(raw: Union[int, str]) -> int:
    """
    Turn a lesson reference into a numeric lesson id.

    >>> normalize_lesson_id("lesson_12")
    12

    Raises:
        ValueError: If the value is not an int, a digit string or "lesson_<n>"
    """
    if isinstance(raw, bool):
        raise ValueError(f"Invalid lesson id: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        value = raw.strip()
        if value.startswith(LESSON_ID_PREFIX):
            value = value[len(LESSON_ID_PREFIX):]
        if value.isdecimal():
            return int(value)
    raise ValueError(f"Invalid lesson id: {raw!r}")


def fetch_resume(client: HanyuApiClient) -> Optional[ResumePointer]:
    """Where the learner left off, or None if the backend has no usable answer."""
    try:
        data = client.get_resume()
    except ApiError as e:
        logger.error(f"Failed to fetch resume pointer: {e}")
        return None

    raw_id = data.get("lesson_id")
    if raw_id is None:
        logger.info("Resume pointer has no lesson")
        return None

    try:
        return ResumePointer(
            lesson_id=normalize_lesson_id(raw_id),
            course_id=data.get("course_id"),
            hsk_level=data.get("hsk_level"),
            title=data.get("title"),
        )
    except (ValueError, ValidationError) as e:
        logger.error(f"Malformed resume pointer {data!r}: {e}")
        return None
