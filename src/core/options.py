"""Option resolution: built-in defaults < config file < CLI flags."""

from __future__ import annotations

import json
import socket
from typing import Any, Iterable, Mapping

from core.domain.models import OptionSet
from core.errors import OptionValidationError

INCIDENT_OPTION_KEYS: tuple[str, ...] = (
    "client",
    "service_key",
    "subdomain",
    "incident_key",
    "details",
    "client_url",
)
TRIGGER_OPTION_KEYS: tuple[str, ...] = INCIDENT_OPTION_KEYS + ("description",)
RESOLVE_OPTION_KEYS: tuple[str, ...] = ("service_key", "subdomain", "incident_key")


def builtin_defaults() -> OptionSet:
    return {"client": socket.gethostname()}


def merge_options(keys: Iterable[str], *layers: Mapping[str, Any]) -> OptionSet:
    """Merge `layers` left to right; later layers win.

    `None` values never override, and keys outside `keys` are ignored.
    """

    allowed = set(keys)
    merged: OptionSet = {key: None for key in allowed}
    for layer in layers:
        for key, value in layer.items():
            if key in allowed and value is not None:
                merged[key] = value
    return merged


def coerce_details(value: Any) -> Any:
    """Parse a JSON string into a structure; anything else passes through."""

    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise OptionValidationError("details", f"Option details is not valid JSON: {exc}") from exc


def resolve_options(
    keys: Iterable[str],
    *,
    file_values: Mapping[str, Any],
    flags: Mapping[str, Any],
    defaults: Mapping[str, Any] | None = None,
) -> OptionSet:
    options = merge_options(
        keys,
        builtin_defaults() if defaults is None else defaults,
        file_values,
        flags,
    )
    if "details" in options:
        options["details"] = coerce_details(options["details"])
    return options
