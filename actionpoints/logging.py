"""Centralized structlog configuration and reusable event helpers.

Import order safety: this module only reads settings; it must not import the
client or demo modules.
"""
from __future__ import annotations

import logging
import structlog

from actionpoints.core.settings import get_settings


def _level() -> int:
    level = logging.getLevelName((get_settings().LOG_LEVEL or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


# One-time structlog configuration (idempotent)
if not getattr(structlog, "_ACTIONPOINTS_CONFIGURED", False):
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level()),
        cache_logger_on_first_use=True,
    )
    structlog._ACTIONPOINTS_CONFIGURED = True  # type: ignore[attr-defined]

slog = structlog.get_logger("actionpoints")


def get_logger(name: str | None = None):
    if name is None:
        return slog
    return structlog.get_logger(name)


def log_points_extracted(count: int, logger=None, **extra):
    (logger or slog).info("actionable_points_extracted", count=count, **extra)


__all__ = ["slog", "get_logger", "log_points_extracted"]
