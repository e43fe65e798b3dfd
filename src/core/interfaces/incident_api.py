"""Incident API contract.

Why Protocol:
- Defines a structural contract (duck typing) without rigid inheritance.
- Lets the dispatcher run against the real PagerDuty client or a test fake
  without coupling the Core to a concrete implementation.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import IncidentResponse, ResolveRequest, TriggerRequest


@runtime_checkable
class IncidentApi(Protocol):
    """Minimal contract consumed by the dispatcher.

    Design rules:
    - One call per request, no retries.
    - Transport failures raise `core.errors.ApiError`; a non-success reply is
      returned as an `IncidentResponse`.
    """

    def resolve_incident(self, request: ResolveRequest) -> IncidentResponse:
        ...

    def trigger_incident(self, request: TriggerRequest) -> IncidentResponse:
        ...
