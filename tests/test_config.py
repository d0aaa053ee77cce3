"""
Tests for settings loading.
"""

import pytest

from hanyulearn.config import DEFAULT_API_BASE_URL, load_settings


VARIABLES = [
    "API_BASE_URL",
    "HANYU_REQUEST_TIMEOUT",
    "HANYU_PROGRESS_DEBOUNCE_MS",
    "HANYU_ACCESS_TOKEN",
    "HANYU_DEFAULT_LESSON_ID",
]


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Unset all settings variables; values loaded from .env files are undone too."""
    for name in VARIABLES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path / "missing.env"


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings(clean_env)
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.request_timeout == 10.0
        assert settings.progress_debounce == 0.5
        assert settings.access_token is None
        assert settings.default_lesson_id == 1

    def test_environment_overrides(self, clean_env, monkeypatch):
        monkeypatch.setenv("API_BASE_URL", "https://api.example.vn/")
        monkeypatch.setenv("HANYU_PROGRESS_DEBOUNCE_MS", "250")
        monkeypatch.setenv("HANYU_ACCESS_TOKEN", "tok")
        monkeypatch.setenv("HANYU_DEFAULT_LESSON_ID", "4")

        settings = load_settings(clean_env)
        assert settings.api_base_url == "https://api.example.vn"
        assert settings.progress_debounce == 0.25
        assert settings.access_token == "tok"
        assert settings.default_lesson_id == 4

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("HANYU_REQUEST_TIMEOUT=3.5\nHANYU_DEFAULT_LESSON_ID=9\n", encoding="utf-8")
        settings = load_settings(env_file)
        assert settings.request_timeout == 3.5
        assert settings.default_lesson_id == 9

    def test_empty_token_is_none(self, clean_env, monkeypatch):
        monkeypatch.setenv("HANYU_ACCESS_TOKEN", "")
        assert load_settings(clean_env).access_token is None

    def test_invalid_number(self, clean_env, monkeypatch):
        monkeypatch.setenv("HANYU_PROGRESS_DEBOUNCE_MS", "soon")
        with pytest.raises(ValueError, match="HANYU_PROGRESS_DEBOUNCE_MS"):
            load_settings(clean_env)
