"""
Tests for core/config_loader.py

Tests cover:
- Missing file / missing section fallbacks
- Key normalization
- Parse errors
"""

import pytest

from core.config_loader import load_config_section, normalize_key
from core.errors import ConfigParseError


class TestLoadConfigSection:
    """Reading one integration section from the YAML file."""

    def test_missing_file_returns_empty_mapping(self, tmp_path):
        """An absent config file is not an error."""
        assert load_config_section(tmp_path / "nope.yml", "pagerduty") == {}

    def test_missing_section_returns_empty_mapping(self, write_config):
        path = write_config("other:\n  service_key: abc\n")
        assert load_config_section(path, "pagerduty") == {}

    def test_empty_file_returns_empty_mapping(self, write_config):
        path = write_config("")
        assert load_config_section(path, "pagerduty") == {}

    def test_section_values_are_returned(self, write_config):
        path = write_config(
            "pagerduty:\n"
            "  service_key: key1\n"
            "  subdomain: acme\n"
            "  details:\n"
            "    team: ops\n"
        )
        assert load_config_section(path, "pagerduty") == {
            "service_key": "key1",
            "subdomain": "acme",
            "details": {"team": "ops"},
        }

    def test_keys_are_normalized_to_flag_identifiers(self, write_config):
        path = write_config("pagerduty:\n  Service-Key: key1\n  client url: http://x\n")
        assert load_config_section(path, "pagerduty") == {
            "service_key": "key1",
            "client_url": "http://x",
        }

    def test_malformed_yaml_raises(self, write_config):
        path = write_config("pagerduty: {service_key: key1\n")
        with pytest.raises(ConfigParseError):
            load_config_section(path, "pagerduty")

    def test_non_mapping_document_raises(self, write_config):
        path = write_config("- a\n- b\n")
        with pytest.raises(ConfigParseError):
            load_config_section(path, "pagerduty")

    def test_non_mapping_section_raises(self, write_config):
        path = write_config("pagerduty: just-a-string\n")
        with pytest.raises(ConfigParseError, match="pagerduty"):
            load_config_section(path, "pagerduty")

    def test_unreadable_path_raises(self, tmp_path):
        """A directory where the file should be is reported, not a traceback."""
        directory = tmp_path / "config.yml"
        directory.mkdir()
        with pytest.raises(ConfigParseError, match="Cannot read"):
            load_config_section(directory, "pagerduty")


def test_normalize_key():
    assert normalize_key(" Incident-Key ") == "incident_key"
