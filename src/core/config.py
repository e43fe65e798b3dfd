"""Core configuration.

Why here:
- Centralizes tool-level settings (pydantic-settings) without polluting the CLI.
- Lets adapters (HTTP/PagerDuty) read config consistently.

Note: incident options (service key, subdomain, ...) do not live here. They
come from the YAML config file and CLI flags, see `core.config_loader`.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pager-relay"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pager-relay"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pager-relay"
    return Path.home() / ".config" / "pager-relay"


def get_default_config_file() -> Path:
    return get_user_config_dir() / "config.yml"


class AppSettings(BaseSettings):
    """Central application settings.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without leaking into the Core.
    - A single configuration contract for CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAGER_RELAY_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    config_path: Path = Field(
        default_factory=get_default_config_file,
        description="YAML file holding one section per integration.",
    )
    config_section: str = Field(
        default="pagerduty",
        min_length=1,
        description="Section of the config file read for incident options.",
    )

    events_url_template: str = Field(
        default="https://{subdomain}.pagerduty.com/generic/2010-04-15/create_event.json",
        min_length=8,
        description="Events endpoint; `{subdomain}` is replaced by the account subdomain.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default="pager-relay/0.1",
        min_length=1,
        description="User-Agent for API requests.",
    )

    def events_url(self, subdomain: str) -> str:
        return self.events_url_template.format(subdomain=subdomain)
