"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from cli.state import get_state
from cli.ui_components import build_options_table
from core.config_loader import load_config_section
from core.errors import ConfigParseError
from core.validation import INCIDENT_FROM_COMMAND_RULES

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


@app.command()
def run(ctx: typer.Context) -> None:
    """Show settings, config file state and the resolved events endpoint."""

    state = get_state(ctx)
    settings = state.settings
    config_path = state.effective_config_path

    table = Table(title="pager-relay Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim", overflow="fold")

    options: dict[str, object] = {}
    if not config_path.exists():
        table.add_row("Config file", "MISSING", f"{config_path} (flags only)")
    else:
        try:
            options = load_config_section(config_path, settings.config_section)
        except ConfigParseError as exc:
            table.add_row("Config file", "FAIL", str(exc))
        else:
            table.add_row("Config file", "OK", str(config_path))
            status = "OK" if options else "EMPTY"
            table.add_row(f"Section '{settings.config_section}'", status, f"{len(options)} keys")

    checked: set[str] = set()
    for rule in INCIDENT_FROM_COMMAND_RULES:
        if rule.required and rule.option not in checked:
            checked.add(rule.option)
            present = options.get(rule.option) not in (None, "")
            table.add_row(
                rule.option,
                "OK" if present else "FLAG",
                "set in config" if present else "must be passed as a flag",
            )

    subdomain = options.get("subdomain")
    if isinstance(subdomain, str):
        table.add_row("Events endpoint", "OK", settings.events_url(subdomain))
    else:
        table.add_row("Events endpoint", "UNKNOWN", settings.events_url_template)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")

    _console.print(table)
    if options:
        _console.print(build_options_table(options))
