import pytest
from pydantic import ValidationError

from actionpoints.core.settings import Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("ACTIONABLE_POINTS_BASE_URL", raising=False)
    monkeypatch.delenv("HTTP_TIMEOUT", raising=False)
    s = Settings()
    assert s.ACTIONABLE_POINTS_BASE_URL == "http://localhost:3000"
    assert s.HTTP_TIMEOUT is None


def test_env_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("http_timeout", "12")
    assert Settings().HTTP_TIMEOUT == 12.0


def test_timeout_must_be_positive():
    with pytest.raises(ValidationError):
        Settings(HTTP_TIMEOUT=0)


def test_get_settings_is_cached(clean_settings_cache):
    assert get_settings() is get_settings()
