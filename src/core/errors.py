"""Error taxonomy.

Every fatal condition derives from `PagerRelayError` so the CLI boundary can
report it and map it to a non-zero exit code. A non-success reply from the
incident API is *not* an exception; see `core.services.dispatcher`.
"""

from __future__ import annotations


class PagerRelayError(Exception):
    """Base class for fatal errors reported at the CLI boundary."""


class ConfigParseError(PagerRelayError):
    """The config file exists but could not be parsed."""


class OptionValidationError(PagerRelayError):
    """A required option is missing or an option has the wrong type."""

    def __init__(self, option: str, message: str) -> None:
        super().__init__(message)
        self.option = option


class ExecutionError(PagerRelayError):
    """The target command could not be launched."""


class ApiError(PagerRelayError):
    """Transport or HTTP failure talking to the incident API."""
