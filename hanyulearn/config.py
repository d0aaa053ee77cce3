"""
Runtime configuration for HanyuLearn.

Settings come from environment variables, with a .env file in the
working directory loaded first.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


DEFAULT_API_BASE_URL = "http://localhost:8000"


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_BASE_URL
    request_timeout: float = 10.0
    progress_debounce: float = 0.5   # seconds
    access_token: Optional[str] = None
    default_lesson_id: int = 1


def _number(name: str, default: str, cast):
    raw = os.environ.get(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build settings from the environment.

    Args:
        env_file: Optional path to a .env file (default: search from cwd)

    Raises:
        ValueError: If a numeric variable cannot be parsed
    """
    load_dotenv(env_file)

    return Settings(
        api_base_url=os.environ.get("API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
        request_timeout=_number("HANYU_REQUEST_TIMEOUT", "10", float),
        progress_debounce=_number("HANYU_PROGRESS_DEBOUNCE_MS", "500", int) / 1000,
        access_token=os.environ.get("HANYU_ACCESS_TOKEN") or None,
        default_lesson_id=_number("HANYU_DEFAULT_LESSON_ID", "1", int),
    )
