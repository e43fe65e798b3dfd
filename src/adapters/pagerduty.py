"""PagerDuty generic events client.

Implements `core.interfaces.incident_api.IncidentApi`:
- POSTs the request payload as JSON to the account's events endpoint.
- One attempt per call; no retries or backoff.
- A reply carrying a JSON `status` (even on 4xx, e.g. `invalid event`) is a
  logical answer and is returned. Transport errors, 5xx, and unparseable
  replies raise `ApiError`.
"""

from __future__ import annotations

import json
import logging

import httpx
from pydantic import ValidationError

from adapters.http_client import build_client
from core.config import AppSettings
from core.domain.models import (
    IncidentRequest,
    IncidentResponse,
    ResolveRequest,
    TriggerRequest,
)
from core.errors import ApiError
from core.interfaces.incident_api import IncidentApi


class PagerDutyClient(IncidentApi):
    """Send resolve/trigger events for one account subdomain."""

    def __init__(
        self,
        subdomain: str,
        settings: AppSettings | None = None,
        *,
        client: httpx.Client | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._url = self._settings.events_url(subdomain)
        self._owns_client = client is None
        self._client = client or build_client(self._settings)
        self._logger = logger or logging.getLogger("pager_relay.pagerduty")

    def resolve_incident(self, request: ResolveRequest) -> IncidentResponse:
        return self._send(request)

    def trigger_incident(self, request: TriggerRequest) -> IncidentResponse:
        return self._send(request)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "PagerDutyClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _send(self, request: IncidentRequest) -> IncidentResponse:
        payload = request.to_payload()
        self._logger.debug("POST %s %s", self._url, json.dumps(payload, sort_keys=True))

        try:
            response = self._client.post(self._url, json=payload)
        except httpx.HTTPError as exc:
            raise ApiError(f"Request to {self._url} failed: {exc}") from exc

        self._logger.debug("HTTP %s %s", response.status_code, response.text)

        if response.status_code >= 500:
            raise ApiError(f"Incident API returned HTTP {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            raise ApiError(
                f"Incident API returned a non-JSON reply (HTTP {response.status_code})"
            ) from exc

        if not isinstance(body, dict) or "status" not in body:
            raise ApiError(
                f"Incident API reply has no status field (HTTP {response.status_code})"
            )

        try:
            return IncidentResponse.model_validate(body)
        except ValidationError as exc:
            raise ApiError(f"Unexpected incident API reply: {exc}") from exc
