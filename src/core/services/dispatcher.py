"""Map a command outcome to an incident event.

A successful command resolves the incident, a failed one triggers it. The
dispatcher builds exactly one request per invocation, sends it through the
`IncidentApi` collaborator, and turns the reply into a process exit code.
Transport errors (`ApiError`) are not handled here; they propagate to the CLI
boundary.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from core.domain.models import (
    CommandResult,
    IncidentResponse,
    ResolveRequest,
    TriggerRequest,
)
from core.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from core.interfaces.incident_api import IncidentApi

NO_OUTPUT_DESCRIPTION = "No output provided"


def select_description(result: CommandResult) -> str:
    return result.stdout or result.stderr or NO_OUTPUT_DESCRIPTION


def select_details(result: CommandResult, options: Mapping[str, Any]) -> dict[str, Any]:
    """Explicit `details` option, else the captured streams."""

    details = options.get("details")
    if details is not None:
        return details
    return {"stdout": result.stdout, "stderr": result.stderr}


def build_resolve_request(options: Mapping[str, Any]) -> ResolveRequest:
    return ResolveRequest(
        incident_key=options["incident_key"],
        service_key=options["service_key"],
    )


def build_trigger_request(result: CommandResult, options: Mapping[str, Any]) -> TriggerRequest:
    return TriggerRequest(
        description=select_description(result),
        details=select_details(result, options),
        client=options.get("client"),
        client_url=options.get("client_url"),
        incident_key=options.get("incident_key"),
        service_key=options["service_key"],
    )


class IncidentDispatcher:
    """Send the incident event matching a command result."""

    def __init__(self, api: IncidentApi, logger: logging.Logger | None = None) -> None:
        self._api = api
        self._logger = logger or logging.getLogger("pager_relay.dispatcher")

    def dispatch(self, result: CommandResult, options: Mapping[str, Any]) -> int:
        if result.exit_success:
            self._logger.debug("Command succeeded, resolving incident")
            return self._send_resolve(build_resolve_request(options))

        self._logger.debug("Command failed with exit code %s, triggering incident", result.exit_code)
        return self._send_trigger(build_trigger_request(result, options))

    def resolve(self, options: Mapping[str, Any]) -> int:
        return self._send_resolve(build_resolve_request(options))

    def trigger(self, options: Mapping[str, Any]) -> int:
        request = TriggerRequest(
            description=options["description"],
            details=options.get("details") or {},
            client=options.get("client"),
            client_url=options.get("client_url"),
            incident_key=options.get("incident_key"),
            service_key=options["service_key"],
        )
        return self._send_trigger(request)

    def _send_resolve(self, request: ResolveRequest) -> int:
        return self._report(request.event_type, self._api.resolve_incident(request))

    def _send_trigger(self, request: TriggerRequest) -> int:
        return self._report(request.event_type, self._api.trigger_incident(request))

    def _report(self, event_type: str, response: IncidentResponse) -> int:
        if response.ok:
            self._logger.debug(
                "%s event accepted: %s (incident key %s)",
                event_type,
                response.message,
                response.incident_key,
            )
            return EXIT_SUCCESS

        self._logger.error(
            "%s event rejected (%s): %s",
            event_type,
            response.status,
            response.message,
        )
        for error in response.errors:
            self._logger.error("  %s", error)
        return EXIT_FAILURE
