"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse the same tables.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from rich.table import Table

_SECRET_OPTIONS = {"service_key"}


def mask_secret(value: str) -> str:
    """Keep the last 4 characters of a credential."""

    if len(value) <= 4:
        return "*" * len(value)
    return "*" * (len(value) - 4) + value[-4:]


def format_option_value(name: str, value: Any) -> str:
    if value is None:
        return "-"
    if isinstance(value, (dict, list)):
        return json.dumps(value, sort_keys=True)
    text = str(value)
    if name in _SECRET_OPTIONS:
        return mask_secret(text)
    return text


def build_options_table(options: Mapping[str, Any], *, title: str = "Config file options") -> Table:
    """Table of option name -> value, secrets masked."""

    table = Table(title=title)
    table.add_column("Option", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for name in sorted(options):
        table.add_row(name, format_option_value(name, options[name]))
    return table
