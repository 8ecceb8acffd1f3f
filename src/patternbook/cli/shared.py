# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, catalog resolution)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from ..catalog import CatalogBuildError, CatalogDocumentError, PatternCatalog, default_catalog, load_catalog
from ..config import RenderSettings
from ..logging import fail as core_fail
from ..logging import get_console
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI presentation settings."""

    console: Console
    err_console: Console
    use_emoji: bool
    use_color: bool
    debug_enabled: bool = False

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message honouring emoji preferences."""

        core_info(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message honouring emoji preferences."""

        core_ok(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str, *, newline: bool = True) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message, nl=newline)

    def debug(self, message: str) -> None:
        """Emit a debug message on stderr when debug logging is enabled."""

        if self.debug_enabled:
            self.err_console.print(Text.assemble(("[debug] ", "bold cyan"), (message, "dim")))


def build_cli_logger(settings: RenderSettings, *, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a console matching ``settings``.

    Args:
        settings: Presentation settings resolved for this invocation.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger bound to shared stdout and stderr Rich consoles.
    """

    return CLILogger(
        console=get_console(color=settings.color, emoji=settings.emoji),
        err_console=get_console(color=settings.color, emoji=settings.emoji, stderr=True),
        use_emoji=settings.emoji,
        use_color=settings.color,
        debug_enabled=debug,
    )


@dataclass(slots=True)
class CLIState:
    """Per-invocation state stored on the Typer context."""

    settings: RenderSettings
    logger: CLILogger


def get_state(ctx: typer.Context) -> CLIState:
    """Return the :class:`CLIState` attached by the application callback.

    Raises:
        CLIError: If the command was invoked without the application callback.
    """

    state = ctx.find_object(CLIState)
    if state is None:
        raise CLIError("CLI state is unavailable; invoke commands through the patternbook app")
    return state


def resolve_catalog(state: CLIState, catalog_path: Path | None) -> PatternCatalog:
    """Return the built-in catalog or the one described by ``catalog_path``.

    Every validation error is reported before exiting when the document is invalid.

    Args:
        state: Invocation state providing the logger.
        catalog_path: Optional definition document supplied by the user.

    Returns:
        PatternCatalog: Catalog the command should operate on.

    Raises:
        typer.Exit: With status 1 when the document cannot be loaded or built.
    """

    if catalog_path is None:
        return default_catalog()
    state.logger.debug(f"loading catalog path={catalog_path}")
    try:
        return load_catalog(catalog_path)
    except FileNotFoundError as exc:
        state.logger.fail(f"Catalog file not found: {catalog_path}")
        raise typer.Exit(code=1) from exc
    except CatalogDocumentError as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    except CatalogBuildError as exc:
        report_build_errors(state.logger, exc, source=catalog_path)
        raise typer.Exit(code=1) from exc


def report_build_errors(logger: CLILogger, error: CatalogBuildError, *, source: Path) -> None:
    """Log every validation error carried by ``error``."""

    for item in error.errors:
        logger.fail(f"{source}: {item}")
    count = len(error.errors)
    logger.fail(f"{source}: {count} validation error{'s' if count != 1 else ''}")


__all__ = [
    "CLIError",
    "CLILogger",
    "CLIState",
    "build_cli_logger",
    "get_state",
    "report_build_errors",
    "resolve_catalog",
]
