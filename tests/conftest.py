"""
pager-relay test configuration.

Shared fixtures: an isolated environment (no user config, no .env), a fake
incident API, and a helper to write YAML config files.
"""

from pathlib import Path
from typing import Callable

import pytest

from core.domain.models import IncidentResponse, ResolveRequest, TriggerRequest


class FakeIncidentApi:
    """In-memory IncidentApi recording every request it receives."""

    def __init__(self, response: IncidentResponse | None = None):
        self.response = response or IncidentResponse(
            status="success", message="Event processed", incident_key="abc123"
        )
        self.resolved: list[ResolveRequest] = []
        self.triggered: list[TriggerRequest] = []

    def resolve_incident(self, request: ResolveRequest) -> IncidentResponse:
        self.resolved.append(request)
        return self.response

    def trigger_incident(self, request: TriggerRequest) -> IncidentResponse:
        self.triggered.append(request)
        return self.response


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the user's config dir, .env and PAGER_RELAY_* vars out of tests."""
    import os

    for name in list(os.environ):
        if name.startswith("PAGER_RELAY_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("core.options.socket.gethostname", lambda: "test-host")
    yield


@pytest.fixture
def fake_api() -> FakeIncidentApi:
    return FakeIncidentApi()


@pytest.fixture
def write_config(tmp_path) -> Callable[[str], Path]:
    def _write(text: str, name: str = "config.yml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def fake_api_factory() -> type[FakeIncidentApi]:
    return FakeIncidentApi
