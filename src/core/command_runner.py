"""Run the target command and capture its outcome.

A non-zero exit is an expected outcome and is reported in the result. Only a
failure to launch the process at all raises `ExecutionError`.
"""

from __future__ import annotations

import subprocess
from typing import Sequence

from core.domain.models import CommandResult
from core.errors import ExecutionError


def _none_if_empty(text: str | None) -> str | None:
    return text if text else None


def run_command(argv: Sequence[str]) -> CommandResult:
    """Execute `argv` (resolved through PATH) and wait for it to exit."""

    if not argv:
        raise ExecutionError("No command given")

    try:
        completed = subprocess.run(
            list(argv),
            capture_output=True,
            check=False,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
    except OSError as exc:
        raise ExecutionError(f"Could not run {argv[0]!r}: {exc}") from exc

    return CommandResult(
        stdout=_none_if_empty(completed.stdout),
        stderr=_none_if_empty(completed.stderr),
        exit_success=completed.returncode == 0,
        exit_code=completed.returncode,
    )
