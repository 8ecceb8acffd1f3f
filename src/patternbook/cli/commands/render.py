# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command rendering the whole catalog as text, Markdown or JSON."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...config import ConfigError, output_format_from_env
from ...render import render
from ..shared import get_state, resolve_catalog
from ..typer_ext import SortedTyper
from .catalog import CatalogOption


def render_catalog(
    ctx: typer.Context,
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output format: text, markdown or json. Defaults to $PATTERNBOOK_FORMAT or text.",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the rendering to this file instead of stdout."),
    ] = None,
    catalog_path: CatalogOption = None,
) -> None:
    """Render the catalog in the selected format."""

    state = get_state(ctx)
    if output_format is None:
        try:
            settings = state.settings.with_overrides(output_format=output_format_from_env())
        except ConfigError as exc:
            state.logger.fail(str(exc))
            raise typer.Exit(code=2) from exc
    else:
        try:
            settings = state.settings.with_overrides(output_format=output_format)
        except ConfigError as exc:
            raise typer.BadParameter(str(exc), param_hint="--format") from exc
    catalog = resolve_catalog(state, catalog_path)
    state.logger.debug(f"rendering format={settings.output_format.value} entries={len(catalog)}")
    rendered = render(catalog, settings.output_format)
    if output is None:
        state.logger.echo(rendered, newline=False)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    state.logger.ok(f"Wrote {len(catalog)} patterns to {output}")


def register(app: SortedTyper) -> None:
    """Register the render command with ``app``."""

    app.command(name="render")(render_catalog)


__all__ = ["register", "render_catalog"]
