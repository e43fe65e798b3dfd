"""pager-relay CLI (Typer).

Command tree:
- `pagerduty incident from-command [flags] [--] COMMAND...`
- `pagerduty incident trigger --description TEXT [flags]`
- `pagerduty incident resolve [flags]`
- `doctor run`

Every incident command goes through the same pipeline: config file section,
flags on top, validation against the command's rule set, then the dispatcher.
Fatal errors are reported here and mapped to exit code 1.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator

import typer
from rich.console import Console
from rich.markup import escape

from adapters.pagerduty import PagerDutyClient
from cli import doctor
from cli.state import CliState, get_state
from core.command_runner import run_command
from core.config_loader import load_config_section
from core.domain.models import OptionSet
from core.errors import PagerRelayError
from core.exit_codes import EXIT_FAILURE
from core.logging_config import LoggingConfig
from core.options import (
    INCIDENT_OPTION_KEYS,
    RESOLVE_OPTION_KEYS,
    TRIGGER_OPTION_KEYS,
    resolve_options,
)
from core.services.dispatcher import IncidentDispatcher
from core.validation import (
    INCIDENT_FROM_COMMAND_RULES,
    RESOLVE_RULES,
    TRIGGER_RULES,
    RuleSet,
    validate,
)

app = typer.Typer(
    no_args_is_help=True,
    help="Run a command and resolve or trigger a PagerDuty incident from its outcome.",
)
pagerduty_app = typer.Typer(no_args_is_help=True, help="PagerDuty integration.")
incident_app = typer.Typer(no_args_is_help=True, help="Send incident events.")

app.add_typer(pagerduty_app, name="pagerduty")
app.add_typer(doctor.app, name="doctor")
pagerduty_app.add_typer(incident_app, name="incident")

_console = Console(stderr=True)


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug logging."),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file path (defaults to the user config dir).",
        dir_okay=False,
    ),
) -> None:
    logging_config = LoggingConfig(debug=debug)
    logging_config.configure()
    ctx.obj = CliState(logging=logging_config, config_path=config)


@contextmanager
def error_boundary() -> Iterator[None]:
    """Report fatal errors and exit with `EXIT_FAILURE`."""

    try:
        yield
    except PagerRelayError as exc:
        _console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=EXIT_FAILURE) from exc


def _resolve(
    state: CliState,
    keys: tuple[str, ...],
    rules: RuleSet,
    flags: dict[str, Any],
) -> OptionSet:
    settings = state.settings
    file_values = load_config_section(state.effective_config_path, settings.config_section)
    options = resolve_options(keys, file_values=file_values, flags=flags)
    validate(options, rules)
    return options


def _dispatcher(state: CliState, client: PagerDutyClient) -> IncidentDispatcher:
    return IncidentDispatcher(client, logger=state.logging.get_logger("dispatcher"))


def _pagerduty_client(state: CliState, options: OptionSet) -> PagerDutyClient:
    return PagerDutyClient(
        options["subdomain"],
        state.settings,
        logger=state.logging.get_logger("pagerduty"),
    )


_CLIENT_OPT = typer.Option(None, "--client", help="Client name (defaults to the hostname).")
_SERVICE_KEY_OPT = typer.Option(None, "--service-key", help="Service/API key of the integration.")
_SUBDOMAIN_OPT = typer.Option(None, "--subdomain", help="Account subdomain.")
_INCIDENT_KEY_OPT = typer.Option(None, "--incident-key", help="Incident key (deduplication id).")
_DETAILS_OPT = typer.Option(None, "--details", help="Incident details as a JSON object.")
_CLIENT_URL_OPT = typer.Option(None, "--client-url", help="URL linked from the incident.")


@incident_app.command(
    name="from-command",
    context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True},
)
def from_command(
    ctx: typer.Context,
    command: list[str] = typer.Argument(..., help="Command to run and its arguments."),
    client: str | None = _CLIENT_OPT,
    service_key: str | None = _SERVICE_KEY_OPT,
    subdomain: str | None = _SUBDOMAIN_OPT,
    incident_key: str | None = _INCIDENT_KEY_OPT,
    details: str | None = _DETAILS_OPT,
    client_url: str | None = _CLIENT_URL_OPT,
) -> None:
    """Run COMMAND; resolve the incident on success, trigger it on failure."""

    state = get_state(ctx)
    flags = {
        "client": client,
        "service_key": service_key,
        "subdomain": subdomain,
        "incident_key": incident_key,
        "details": details,
        "client_url": client_url,
    }
    with error_boundary():
        options = _resolve(state, INCIDENT_OPTION_KEYS, INCIDENT_FROM_COMMAND_RULES, flags)
        result = run_command(command)
        with _pagerduty_client(state, options) as api:
            code = _dispatcher(state, api).dispatch(result, options)
    raise typer.Exit(code=code)


@incident_app.command()
def trigger(
    ctx: typer.Context,
    description: str | None = typer.Option(None, "--description", help="Incident summary."),
    client: str | None = _CLIENT_OPT,
    service_key: str | None = _SERVICE_KEY_OPT,
    subdomain: str | None = _SUBDOMAIN_OPT,
    incident_key: str | None = _INCIDENT_KEY_OPT,
    details: str | None = _DETAILS_OPT,
    client_url: str | None = _CLIENT_URL_OPT,
) -> None:
    """Trigger an incident."""

    state = get_state(ctx)
    flags = {
        "description": description,
        "client": client,
        "service_key": service_key,
        "subdomain": subdomain,
        "incident_key": incident_key,
        "details": details,
        "client_url": client_url,
    }
    with error_boundary():
        options = _resolve(state, TRIGGER_OPTION_KEYS, TRIGGER_RULES, flags)
        with _pagerduty_client(state, options) as api:
            code = _dispatcher(state, api).trigger(options)
    raise typer.Exit(code=code)


@incident_app.command()
def resolve(
    ctx: typer.Context,
    service_key: str | None = _SERVICE_KEY_OPT,
    subdomain: str | None = _SUBDOMAIN_OPT,
    incident_key: str | None = _INCIDENT_KEY_OPT,
) -> None:
    """Resolve an incident."""

    state = get_state(ctx)
    flags = {
        "service_key": service_key,
        "subdomain": subdomain,
        "incident_key": incident_key,
    }
    with error_boundary():
        options = _resolve(state, RESOLVE_OPTION_KEYS, RESOLVE_RULES, flags)
        with _pagerduty_client(state, options) as api:
            code = _dispatcher(state, api).resolve(options)
    raise typer.Exit(code=code)


def run() -> None:
    app(prog_name="pager-relay")
