from __future__ import annotations
from typing import Any, Dict, Optional
import httpx

from .base import ActionablePointsHTTPError
from actionpoints.core.settings import Settings, get_settings
from actionpoints.logging import get_logger
from actionpoints.schemas.actionable_points import ActionablePointsRequest, ActionablePointsResponse

ACTIONABLE_POINTS_PATH = "/api/actionable-points"
ERROR_PREFIX = "Error extracting actionable points:"


class ActionablePointsClient:
    """Single request/response wrapper around POST /api/actionable-points.

    A caller-supplied `http_client` is used as-is and never closed; otherwise a
    short-lived `httpx.AsyncClient` is opened per call. Every failure is logged
    once to `logger` and re-raised unchanged.
    """
    base_url: str
    http_client: httpx.AsyncClient | None
    settings: Settings

    def __init__(self, base_url: str | None = None, *, http_client: httpx.AsyncClient | None = None,
                 logger=None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.base_url = (base_url or self.settings.ACTIONABLE_POINTS_BASE_URL).rstrip('/')
        self.http_client = http_client
        self.logger = logger or get_logger("actionable_points_client")

    @property
    def url(self) -> str:
        return f"{self.base_url}{ACTIONABLE_POINTS_PATH}"

    def _client_kwargs(self) -> Dict[str, Any]:
        # no timeout of our own unless configured; httpx's default applies
        if self.settings.HTTP_TIMEOUT is None:
            return {}
        return {"timeout": self.settings.HTTP_TIMEOUT}

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        headers = {"Content-Type": "application/json"}
        if self.http_client is not None:
            return await self.http_client.post(self.url, json=payload, headers=headers)
        async with httpx.AsyncClient(**self._client_kwargs()) as client:
            return await client.post(self.url, json=payload, headers=headers)

    async def extract(self, transcription: str, context: Optional[str] = None) -> ActionablePointsResponse:
        try:
            payload = ActionablePointsRequest(transcription=transcription, context=context).to_payload()
            resp = await self._post(payload)
            if not resp.is_success:
                raise ActionablePointsHTTPError(resp.status_code)
            return ActionablePointsResponse.model_validate(resp.json())
        except Exception as e:
            self.logger.error(f"{ERROR_PREFIX} %r", e, error_type=type(e).__name__)
            raise


async def extract_actionable_points(transcription: str, context: Optional[str] = None, *,
                                    client: ActionablePointsClient | None = None,
                                    logger=None) -> ActionablePointsResponse:
    """Extract actionable points from `transcription`.

    `context` is optional; when omitted the request body carries no `context`
    key. `logger` only applies when no `client` is passed.
    """
    if client is None:
        client = ActionablePointsClient(logger=logger)
    return await client.extract(transcription, context)


__all__ = ['ActionablePointsClient', 'extract_actionable_points', 'ACTIONABLE_POINTS_PATH', 'ERROR_PREFIX']
