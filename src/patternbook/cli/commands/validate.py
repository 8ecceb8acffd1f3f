# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command validating a definition document."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...catalog import CatalogBuildError, CatalogDocumentError, DefinitionLoader, PatternCatalog
from ..shared import get_state, report_build_errors
from ..typer_ext import SortedTyper


def validate_catalog(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="JSON definition document to validate.")],
) -> None:
    """Validate every definition in PATH and report all problems at once."""

    state = get_state(ctx)
    loader = DefinitionLoader()
    try:
        definitions = loader.load_definitions(path)
    except FileNotFoundError as exc:
        state.logger.fail(f"Catalog file not found: {path}")
        raise typer.Exit(code=1) from exc
    except CatalogDocumentError as exc:
        state.logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    try:
        catalog = PatternCatalog.build(definitions)
    except CatalogBuildError as exc:
        report_build_errors(state.logger, exc, source=path)
        raise typer.Exit(code=1) from exc

    state.logger.debug(f"checksum={catalog.checksum}")
    state.logger.ok(f"{path}: {len(catalog)} patterns valid")


def register(app: SortedTyper) -> None:
    """Register the validate command with ``app``."""

    app.command(name="validate")(validate_catalog)


__all__ = ["register", "validate_catalog"]
