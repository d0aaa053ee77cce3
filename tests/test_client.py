"""
Tests for the backend client, progress reporter, resume pointer and
lesson detail loader.
"""

import logging

import pytest
import requests

from hanyulearn.content import (
    ApiError,
    LessonDetailLoader,
    ProgressReporter,
    TokenStore,
    fetch_resume,
    normalize_lesson_id,
)
from hanyulearn.content.lesson_detail import CONNECTION_FAILED_MESSAGE, LOAD_FAILED_MESSAGE
from hanyulearn.schemas import ItemType, ProgressEvent

from conftest import FakeResponse


EVENT = ProgressEvent(item_type=ItemType.GRAMMAR_EXAMPLE, item_id=42, completed=True)


class TestTokenStore:
    def test_explicit_token(self, tmp_path, no_env_token):
        assert TokenStore(token="abc", path=tmp_path / "t").get() == "abc"

    def test_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HANYU_ACCESS_TOKEN", "from-env")
        assert TokenStore(path=tmp_path / "t").get() == "from-env"

    def test_file(self, tmp_path, no_env_token):
        path = tmp_path / "t"
        path.write_text("from-file\n", encoding="utf-8")
        assert TokenStore(path=path).get() == "from-file"

    def test_missing(self, tmp_path, no_env_token):
        assert TokenStore(path=tmp_path / "t").get() is None


class TestApiClient:
    def test_get_lesson(self, client, session):
        session.queue(FakeResponse(200, {"title": "x"}))
        assert client.get_lesson(5) == {"title": "x"}
        call = session.calls[0]
        assert call["method"] == "GET"
        assert call["url"] == "http://api.test/api/lessons/5"

    def test_anonymous_request_has_no_authorization(self, anonymous_client, session):
        session.queue(FakeResponse(200, {}))
        anonymous_client.get_lesson(1)
        assert "Authorization" not in session.calls[0]["headers"]

    def test_error_status_carries_detail(self, client, session):
        session.queue(FakeResponse(404, {"detail": "Lesson not found"}))
        with pytest.raises(ApiError) as exc_info:
            client.get_lesson(5)
        assert exc_info.value.status_code == 404
        assert exc_info.value.detail == "Lesson not found"

    def test_transport_error(self, client, session):
        session.queue(requests.Timeout("slow"))
        with pytest.raises(ApiError) as exc_info:
            client.get_lesson(5)
        assert exc_info.value.status_code is None

    def test_non_object_body(self, client, session):
        session.queue(FakeResponse(200, [1, 2]))
        with pytest.raises(ApiError):
            client.get_lesson(5)

    def test_track_progress_body(self, client, session):
        session.queue(FakeResponse(201))
        assert client.track_progress(EVENT, "tok") == 201
        call = session.calls[0]
        assert call["method"] == "POST"
        assert call["url"] == "http://api.test/api/v1/learning/track"
        assert call["json"] == {"item_type": "grammar_example", "item_id": 42, "completed": True}
        assert call["headers"]["Authorization"] == "Bearer tok"


class TestProgressReporter:
    def test_report(self, client, session):
        session.queue(FakeResponse(200, {"ok": True}))
        assert ProgressReporter(client).report(EVENT) is True
        assert len(session.calls) == 1

    def test_no_token_skips(self, anonymous_client, session):
        assert ProgressReporter(anonymous_client).report(EVENT) is False
        assert session.calls == []

    def test_error_status_is_logged_not_raised(self, client, session, caplog):
        session.queue(FakeResponse(422, {"detail": "bad item"}))
        with caplog.at_level(logging.ERROR):
            assert ProgressReporter(client).report(EVENT) is False
        assert "bad item" in caplog.text
        # not retried
        assert len(session.calls) == 1

    def test_network_error_is_logged_not_raised(self, client, session, caplog):
        session.queue(requests.ConnectionError("down"))
        with caplog.at_level(logging.ERROR):
            assert ProgressReporter(client).report(EVENT) is False
        assert "Error tracking progress" in caplog.text


class TestResume:
    @pytest.mark.parametrize("raw, expected", [
        (7, 7),
        ("7", 7),
        ("lesson_12", 12),
        (" lesson_3 ", 3),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_lesson_id(raw) == expected

    @pytest.mark.parametrize("raw", ["lesson_", "lesson_x", "course_1", "", None, True, 1.5])
    def test_normalize_invalid(self, raw):
        with pytest.raises(ValueError):
            normalize_lesson_id(raw)

    def test_fetch_resume(self, client, session):
        session.queue(FakeResponse(200, {"lesson_id": "lesson_4", "course_id": 1, "title": "Mua sắm"}))
        pointer = fetch_resume(client)
        assert pointer.lesson_id == 4
        assert pointer.title == "Mua sắm"
        assert session.calls[0]["url"] == "http://api.test/api/v1/learning/resume"

    def test_fetch_resume_failure(self, client, session):
        session.queue(FakeResponse(500))
        assert fetch_resume(client) is None

    def test_fetch_resume_without_lesson(self, client, session):
        session.queue(FakeResponse(200, {"lesson_id": None}))
        assert fetch_resume(client) is None

    def test_fetch_resume_malformed_id(self, client, session):
        session.queue(FakeResponse(200, {"lesson_id": "unit_2"}))
        assert fetch_resume(client) is None


OVERVIEW = {
    "id": 2,
    "title": "Gia đình",
    "hsk_level": 1,
    "vocabCount": 15,
    "status": "in_progress",
    "progressPercent": 40,
    "learnedVocabCount": 6,
    "learnedGrammarCount": 0,
    "learnedSpeakingCount": 2,
    "vocabulary": [],
    "grammar": [{"id": 1}, {"id": 2}],
}


class TestLessonDetailLoader:
    def test_accepts_prefixed_id(self, client):
        assert LessonDetailLoader(client, "lesson_2").lesson_id == 2

    def test_load(self, client, session):
        session.queue(FakeResponse(200, OVERVIEW))
        loader = LessonDetailLoader(client, 2)
        assert loader.load()
        assert loader.error is None
        assert loader.progress.vocab_total == 15
        assert loader.progress.grammar_total == 2
        assert loader.progress.activities_completed == 1
        assert loader.main_button_label() == "Tiếp tục bài học"

        activities = {a.id: a for a in loader.activities()}
        assert activities["vocabulary"].status == "in_progress"
        assert activities["vocabulary"].subtitle == "Đã học 6/15 từ"
        assert activities["sentences"].status == "available"
        assert activities["sentences"].subtitle == "Chưa học"
        assert activities["speaking"].subtitle == "Đã hoàn thành 2 bài"
        assert activities["writing"].status == "available"

    def test_completed_lesson(self, client, session):
        session.queue(FakeResponse(200, {**OVERVIEW, "status": "completed", "progressPercent": 100}))
        loader = LessonDetailLoader(client, 2)
        loader.load()
        assert loader.main_button_label() == "Ôn lại bài học"
        assert loader.progress.activities_completed == 5
        assert all(a.status == "completed" for a in loader.activities())

    def test_missing_counters_default(self, client, session):
        session.queue(FakeResponse(200, {"id": 2, "title": "x", "status": None, "vocabulary": [{}, {}]}))
        loader = LessonDetailLoader(client, 2)
        assert loader.load()
        assert loader.progress.status == "available"
        assert loader.progress.vocab_total == 2
        assert loader.main_button_label() == "Bắt đầu học"

    def test_error_detail_shown_inline(self, client, session):
        session.queue(FakeResponse(403, {"detail": "Bài học bị khóa"}))
        loader = LessonDetailLoader(client, 2)
        assert loader.load() is False
        assert loader.error == "Bài học bị khóa"
        assert loader.is_loading is False

    def test_error_without_detail(self, client, session):
        session.queue(FakeResponse(500))
        loader = LessonDetailLoader(client, 2)
        loader.load()
        assert loader.error == LOAD_FAILED_MESSAGE

    def test_connection_error_then_retry(self, client, session):
        session.queue(requests.ConnectionError("down"), FakeResponse(200, OVERVIEW))
        loader = LessonDetailLoader(client, 2)
        assert loader.load() is False
        assert loader.error == CONNECTION_FAILED_MESSAGE

        assert loader.retry() is True
        assert loader.error is None
        assert loader.overview.title == "Gia đình"

    def test_malformed_body(self, client, session):
        session.queue(FakeResponse(200, {"title": "no id"}))
        loader = LessonDetailLoader(client, 2)
        assert loader.load() is False
        assert loader.error == LOAD_FAILED_MESSAGE
