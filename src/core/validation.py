"""Declarative option validation.

Each command owns an ordered tuple of `ValidationRule`. Rule sets are built by
concatenating a shared base set with command-specific additions
(`extend_rules`), never by subclassing. Validation is fail-fast: the first
violated rule, in declaration order, is the one reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping

from core.errors import OptionValidationError


class OptionKind(str, Enum):
    """Primitive type tags an option value can be constrained to."""

    STRING = "string"
    MAPPING = "mapping"

    def matches(self, value: Any) -> bool:
        if self is OptionKind.STRING:
            return isinstance(value, str)
        return isinstance(value, dict)


@dataclass(frozen=True)
class ValidationRule:
    option: str
    required: bool = False
    kind: OptionKind | None = None


RuleSet = tuple[ValidationRule, ...]


def extend_rules(base: Iterable[ValidationRule], *extra: ValidationRule) -> RuleSet:
    return tuple(base) + tuple(extra)


def validate(options: Mapping[str, Any], rules: Iterable[ValidationRule]) -> None:
    """Raise `OptionValidationError` for the first rule `options` violates.

    An empty string counts as absent.
    """

    for rule in rules:
        value = options.get(rule.option)
        if value is None or value == "":
            if rule.required:
                raise OptionValidationError(
                    rule.option, f"Missing required option: {rule.option}"
                )
            continue
        if rule.kind is not None and not rule.kind.matches(value):
            raise OptionValidationError(
                rule.option,
                f"Option {rule.option} must be a {rule.kind.value}, "
                f"got {type(value).__name__}",
            )


INCIDENT_RULES: RuleSet = (
    ValidationRule("service_key", required=True, kind=OptionKind.STRING),
    ValidationRule("subdomain", required=True, kind=OptionKind.STRING),
    ValidationRule("client", kind=OptionKind.STRING),
    ValidationRule("client_url", kind=OptionKind.STRING),
    ValidationRule("incident_key", kind=OptionKind.STRING),
    ValidationRule("details", kind=OptionKind.MAPPING),
)

RESOLVE_RULES: RuleSet = extend_rules(
    INCIDENT_RULES,
    ValidationRule("incident_key", required=True),
)

TRIGGER_RULES: RuleSet = extend_rules(
    INCIDENT_RULES,
    ValidationRule("description", required=True, kind=OptionKind.STRING),
)

INCIDENT_FROM_COMMAND_RULES: RuleSet = extend_rules(
    INCIDENT_RULES,
    ValidationRule("incident_key", required=True),
)
