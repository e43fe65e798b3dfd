"""
Tests for core/options.py

Tests cover:
- Merge precedence (defaults < file < flags)
- Details coercion
"""

import pytest

from core.errors import OptionValidationError
from core.options import (
    INCIDENT_OPTION_KEYS,
    builtin_defaults,
    coerce_details,
    merge_options,
    resolve_options,
)


class TestMergeOptions:
    """Layered merging."""

    def test_flags_beat_file_beat_defaults(self):
        merged = merge_options(
            INCIDENT_OPTION_KEYS,
            {"client": "default-host", "service_key": "default"},
            {"client": "file-host", "service_key": "file-key"},
            {"service_key": "flag-key"},
        )
        assert merged["service_key"] == "flag-key"
        assert merged["client"] == "file-host"

    def test_none_flag_does_not_override_file(self):
        merged = merge_options(INCIDENT_OPTION_KEYS, {"subdomain": "acme"}, {"subdomain": None})
        assert merged["subdomain"] == "acme"

    def test_unknown_keys_are_ignored(self):
        merged = merge_options(INCIDENT_OPTION_KEYS, {"colour": "blue"})
        assert "colour" not in merged

    def test_every_key_is_present(self):
        merged = merge_options(INCIDENT_OPTION_KEYS)
        assert set(merged) == set(INCIDENT_OPTION_KEYS)
        assert all(value is None for value in merged.values())


class TestResolveOptions:
    def test_client_defaults_to_hostname(self):
        assert builtin_defaults() == {"client": "test-host"}
        options = resolve_options(INCIDENT_OPTION_KEYS, file_values={}, flags={})
        assert options["client"] == "test-host"

    def test_details_flag_is_parsed_as_json(self):
        options = resolve_options(
            INCIDENT_OPTION_KEYS,
            file_values={"details": {"from": "file"}},
            flags={"details": '{"from": "flag"}'},
        )
        assert options["details"] == {"from": "flag"}

    def test_details_from_file_mapping_passes_through(self):
        options = resolve_options(
            INCIDENT_OPTION_KEYS, file_values={"details": {"team": "ops"}}, flags={}
        )
        assert options["details"] == {"team": "ops"}


class TestCoerceDetails:
    def test_invalid_json_raises_validation_error(self):
        with pytest.raises(OptionValidationError) as excinfo:
            coerce_details("{not json")
        assert excinfo.value.option == "details"

    def test_non_string_passes_through(self):
        assert coerce_details(None) is None
        assert coerce_details({"a": 1}) == {"a": 1}

    def test_json_array_is_left_for_the_validator(self):
        assert coerce_details("[1, 2]") == [1, 2]
