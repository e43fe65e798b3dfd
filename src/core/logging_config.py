"""Logging configuration.

The level is decided once, at process start, from the `--debug` flag. The
resulting `LoggingConfig` is handed to whatever needs a logger instead of
components toggling a process-wide level themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "pager_relay"


@dataclass(frozen=True)
class LoggingConfig:
    debug: bool = False

    @property
    def level(self) -> int:
        return logging.DEBUG if self.debug else logging.INFO

    def configure(self, console: Console | None = None) -> logging.Logger:
        """Install a Rich handler on the tool's logger namespace."""

        logger = logging.getLogger(ROOT_LOGGER)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=self.debug,
            show_path=self.debug,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(self.level)
        return logger

    def get_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(f"{ROOT_LOGGER}.{name}")
