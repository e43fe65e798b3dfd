"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  Core to I/O libraries.
- Requests render themselves to the wire payload in one place.

Note:
- These models describe *what* the data is, not *how* it is sent.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

OptionSet = dict[str, Any]


class CommandResult(BaseModel):
    """Outcome of running the target command once.

    Empty captures are stored as `None` so that description selection can
    simply pick the first truthy stream.
    """

    model_config = ConfigDict(frozen=True)

    stdout: str | None = Field(
        default=None,
        description="Captured standard output, `None` when nothing was written.",
    )
    stderr: str | None = Field(
        default=None,
        description="Captured standard error, `None` when nothing was written.",
    )
    exit_success: bool = Field(
        ...,
        description="True when the command exited with status 0.",
    )
    exit_code: int | None = Field(
        default=None,
        description="Raw exit status, kept for logging.",
    )


class _IncidentEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    service_key: str = Field(..., min_length=1)
    incident_key: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Generic-events payload; unset top-level fields are dropped."""

        payload = self.model_dump(mode="json")
        return {k: v for k, v in payload.items() if v is not None}


class ResolveRequest(_IncidentEvent):
    """Mark the incident identified by `incident_key` as resolved."""

    event_type: Literal["resolve"] = "resolve"
    incident_key: str = Field(..., min_length=1)


class TriggerRequest(_IncidentEvent):
    """Create (or re-open) an incident with descriptive details."""

    event_type: Literal["trigger"] = "trigger"
    description: str = Field(..., min_length=1)
    details: dict[str, Any] = Field(default_factory=dict)
    client: str | None = None
    client_url: str | None = None


IncidentRequest = ResolveRequest | TriggerRequest


class IncidentResponse(BaseModel):
    """Reply of the events API."""

    model_config = ConfigDict(extra="ignore")

    status: str = Field(..., description="`success` or an error status.")
    message: str = Field(default="")
    incident_key: str | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status == "success"
