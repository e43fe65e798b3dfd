"""Global CLI state shared by every sub-command."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import typer

from core.config import AppSettings
from core.logging_config import LoggingConfig


@dataclass
class CliState:
    """Global options, set once by the root callback."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_path: Path | None = None
    settings: AppSettings = field(default_factory=AppSettings)

    @property
    def effective_config_path(self) -> Path:
        return self.config_path or self.settings.config_path


def get_state(ctx: typer.Context) -> CliState:
    """State set by the root callback, or a default one (sub-app invoked alone)."""

    state = ctx.find_object(CliState)
    if state is None:
        state = CliState()
        state.logging.configure()
        ctx.obj = state
    return state
