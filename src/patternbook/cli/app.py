# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from typing import Annotated

import typer

from ..config import ConfigError, RenderSettings
from ..logging import configure_logging, fail
from .commands import register_commands
from .shared import CLIState, build_cli_logger
from .typer_ext import create_typer

app = create_typer(
    help="Browse, validate and render a catalog of classic design patterns.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")] = False,
    no_emoji: Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in status messages.")] = False,
    debug: Annotated[bool, typer.Option("--debug", help="Emit debug diagnostics.")] = False,
) -> None:
    """Resolve presentation settings shared by every command."""

    try:
        settings = RenderSettings.from_env(include_format=False)
    except ConfigError as exc:
        fail(str(exc), use_emoji=not no_emoji, use_color=not no_color)
        raise typer.Exit(code=2) from exc
    settings = settings.with_overrides(
        color=False if no_color else None,
        emoji=False if no_emoji else None,
    )
    configure_logging(debug=debug)
    ctx.obj = CLIState(settings=settings, logger=build_cli_logger(settings, debug=debug))


register_commands(app)

__all__ = ["app", "main"]
