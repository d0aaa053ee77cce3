"""
HanyuApiClient - Thin wrapper over the HanyuLearn REST backend.

Endpoints:
- GET  /api/lessons/{id}          lesson content
- POST /api/v1/learning/track     progress events
- GET  /api/v1/learning/resume    continue-learning pointer

Requests are authorized with a bearer token from TokenStore when one is
available.
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import requests

from hanyulearn.config import DEFAULT_API_BASE_URL
from hanyulearn.schemas import ProgressEvent


logger = logging.getLogger(__name__)

DEFAULT_TOKEN_DIR = Path.home() / ".hanyulearn"
DEFAULT_TOKEN_FILE = DEFAULT_TOKEN_DIR / "access_token"


class ApiError(Exception):
    """Backend request failed; status_code is None for transport errors."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class TokenStore:
    """
    Read-only access to the stored access token.

    Lookup order: explicit token, HANYU_ACCESS_TOKEN, token file.
    """

    def __init__(self, token: Optional[str] = None, path: Optional[Path] = None):
        self._token = token
        self.path = path or DEFAULT_TOKEN_FILE

    def get(self) -> Optional[str]:
        if self._token:
            return self._token
        env_token = os.environ.get("HANYU_ACCESS_TOKEN")
        if env_token:
            return env_token
        if not self.path.exists():
            return None
        try:
            token = self.path.read_text(encoding="utf-8").strip()
        except OSError as e:
            logger.warning(f"Could not read token file {self.path}: {e}")
            return None
        return token or None


class HanyuApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        token_store: Optional[TokenStore] = None,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token_store = token_store or TokenStore()
        self.timeout = timeout
        self.session = session or requests.Session()

    def _headers(self, token: Optional[str]) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(self, method: str, path: str, token: Optional[str] = None, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(
                method, url, headers=self._headers(token), timeout=self.timeout, **kwargs
            )
        except requests.RequestException as e:
            raise ApiError(f"{method} {path} failed: {e}") from e

        if not response.ok:
            detail = None
            try:
                body = response.json()
                if isinstance(body, dict):
                    detail = body.get("detail")
            except ValueError:
                pass
            raise ApiError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        return response

    def _json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ApiError("Response body is not valid JSON", status_code=response.status_code) from e

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    def get_lesson(self, lesson_id: int) -> dict:
        """Fetch lesson content."""
        data = self._json(self._request("GET", f"/api/lessons/{lesson_id}", token=self.token_store.get()))
        if not isinstance(data, dict):
            raise ApiError(f"Lesson {lesson_id}: expected a JSON object")
        return data

    def get_resume(self) -> dict:
        """Fetch the continue-learning pointer."""
        data = self._json(self._request("GET", "/api/v1/learning/resume", token=self.token_store.get()))
        if not isinstance(data, dict):
            raise ApiError("Resume: expected a JSON object")
        return data

    def track_progress(self, event: ProgressEvent, token: str) -> int:
        """Post one progress event; returns the response status code."""
        response = self._request("POST", "/api/v1/learning/track", token=token, json=event.to_payload())
        return response.status_code
