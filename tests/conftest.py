"""
Shared fixtures: a manual timer backend and a fake requests session.
"""

import pytest
import requests

from hanyulearn.content import HanyuApiClient, TokenStore
from hanyulearn.schemas import InnerItem, OuterItem


# -----------------------------------------------------------------------------
# Timers
# -----------------------------------------------------------------------------

class ManualHandle:
    def __init__(self, due: float, callback):
        self.due = due
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class ManualScheduler:
    """Scheduler driven by advance() instead of wall-clock time."""

    def __init__(self):
        self.now = 0.0
        self.handles: list[ManualHandle] = []

    def call_later(self, delay, callback):
        handle = ManualHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float):
        self.now += seconds
        due = [h for h in self.handles if h.due <= self.now and not h.cancelled]
        self.handles = [h for h in self.handles if h not in due]
        for handle in sorted(due, key=lambda h: h.due):
            handle.callback()

    @property
    def pending(self) -> list[ManualHandle]:
        return [h for h in self.handles if not h.cancelled]


@pytest.fixture
def scheduler():
    return ManualScheduler()


# -----------------------------------------------------------------------------
# HTTP
# -----------------------------------------------------------------------------

class FakeResponse:
    def __init__(self, status_code: int = 200, body=None, raw: str = None):
        self.status_code = status_code
        self._body = body
        self._raw = raw

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self):
        if self._raw is not None:
            raise ValueError(f"Expecting value: {self._raw[:20]!r}")
        if self._body is None:
            raise ValueError("No body")
        return self._body


class FakeSession:
    """Records requests; answers from a queue of responses or exceptions."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls: list[dict] = []

    def queue(self, *responses):
        self.responses.extend(responses)

    def request(self, method, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"method": method, "url": url, "headers": headers or {}, **kwargs})
        if not self.responses:
            raise requests.ConnectionError("no response queued")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def no_env_token(monkeypatch):
    monkeypatch.delenv("HANYU_ACCESS_TOKEN", raising=False)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session, tmp_path, no_env_token):
    """Client with a token and a fake session."""
    return HanyuApiClient(
        base_url="http://api.test",
        token_store=TokenStore(token="secret", path=tmp_path / "token"),
        session=session,
    )


@pytest.fixture
def anonymous_client(session, tmp_path, no_env_token):
    """Client without any access token."""
    return HanyuApiClient(
        base_url="http://api.test",
        token_store=TokenStore(path=tmp_path / "token"),
        session=session,
    )


# -----------------------------------------------------------------------------
# Collections
# -----------------------------------------------------------------------------

def make_outer(outer_id: str, *inner_ids: str, source_ids=None) -> OuterItem:
    source_ids = source_ids or [None] * len(inner_ids)
    return OuterItem(
        id=outer_id,
        word=outer_id.upper(),
        examples=tuple(
            InnerItem(id=inner_id, source_id=source_id, text=f"{outer_id}:{inner_id}")
            for inner_id, source_id in zip(inner_ids, source_ids)
        ),
    )


@pytest.fixture
def small_collection() -> list[OuterItem]:
    """[A: a1, a2], [B: b1]"""
    return [make_outer("A", "a1", "a2"), make_outer("B", "b1")]
