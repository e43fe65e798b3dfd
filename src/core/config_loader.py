"""YAML config file loader.

The file holds one section per integration (e.g. `pagerduty:`) whose keys
mirror CLI option names. Keys are normalized to the identifier form used by
the CLI (`service-key` -> `service_key`) so merging with flags is direct.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from core.errors import ConfigParseError


def normalize_key(key: object) -> str:
    return str(key).strip().lower().replace("-", "_").replace(" ", "_")


def load_config_section(path: Path, section: str) -> dict[str, Any]:
    """Return the `section` mapping of the YAML file at `path`.

    A missing file or a missing section yields an empty mapping. Malformed
    YAML, or a document/section that is not a mapping, raises
    `ConfigParseError`.
    """

    if not path.exists():
        return {}

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigParseError(f"Failed to parse config file {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigParseError(f"Cannot read config file {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(f"Config file {path} must contain a mapping at the top level")

    raw = data.get(section)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigParseError(f"Section '{section}' in {path} must be a mapping")

    return {normalize_key(k): v for k, v in raw.items()}
