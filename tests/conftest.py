"""Shared fixtures: deterministic settings and an in-memory logger.

The client and demo accept an injected logger, so tests record log calls
directly instead of parsing structlog output.
"""
from __future__ import annotations

import pytest

from actionpoints.core.settings import Settings, get_settings

BASE_URL = "http://actionpoints.test"
ENDPOINT = f"{BASE_URL}/api/actionable-points"


class RecordingLogger:
    def __init__(self):
        self.records: list[tuple[str, str, dict]] = []

    def _log(self, level: str, event: str, *args, **kw):
        self.records.append((level, event % args if args else event, kw))

    def debug(self, event, *args, **kw):
        self._log("debug", event, *args, **kw)

    def info(self, event, *args, **kw):
        self._log("info", event, *args, **kw)

    def warning(self, event, *args, **kw):
        self._log("warning", event, *args, **kw)

    def error(self, event, *args, **kw):
        self._log("error", event, *args, **kw)

    def events(self, level: str | None = None) -> list[str]:
        return [ev for lvl, ev, _ in self.records if level is None or lvl == level]


@pytest.fixture
def recorder() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def settings() -> Settings:
    return Settings(ACTIONABLE_POINTS_BASE_URL=BASE_URL)


@pytest.fixture
def clean_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_body() -> dict:
    return {
        "ok": True,
        "actionablePoints": [
            {
                "id": "1",
                "title": "Complete UI design",
                "description": "",
                "priority": "high",
                "category": "design",
                "dueDate": "Friday",
                "assignee": "John",
                "status": "pending",
            },
            {
                "id": "2",
                "title": "Review backend changes",
                "description": "Sarah reviews the API refactor",
                "priority": "medium",
                "category": "engineering",
                "dueDate": "",
                "assignee": "Sarah",
                "status": "in-progress",
            },
        ],
    }
