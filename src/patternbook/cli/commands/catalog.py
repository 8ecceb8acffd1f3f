# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Catalog browsing commands: ``list``, ``show`` and ``search``."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...catalog import PatternCatalog, PatternEntry, UnknownCategoryError
from ...catalog.model_catalog import coerce_category
from ...catalog.types import Category
from ...render import build_catalog_table, build_entry_panel, matches_text, search
from ..shared import get_state, resolve_catalog
from ..typer_ext import SortedTyper

CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", help="JSON definition document to use instead of the built-in catalog."),
]
CategoryOption = Annotated[
    str | None,
    typer.Option("--category", "-c", help="Restrict results to one category."),
]


def _category_or_error(raw: str | None) -> Category | None:
    if raw is None:
        return None
    try:
        return coerce_category(raw)
    except UnknownCategoryError as exc:
        raise typer.BadParameter(str(exc), param_hint="--category") from exc


def _scope(catalog: PatternCatalog, category: Category | None) -> tuple[PatternEntry, ...]:
    return catalog.all() if category is None else catalog.by_category(category)


def list_patterns(ctx: typer.Context, category: CategoryOption = None, catalog_path: CatalogOption = None) -> None:
    """List catalogued patterns, grouped by category."""

    state = get_state(ctx)
    selected = _category_or_error(category)
    catalog = resolve_catalog(state, catalog_path)
    entries = _scope(catalog, selected)
    if not entries:
        state.logger.warn("No patterns catalogued for this selection")
        return
    state.logger.console.print(build_catalog_table(entries))


def show_pattern(
    ctx: typer.Context,
    category: Annotated[str, typer.Argument(help="Pattern category, e.g. Creational.")],
    name: Annotated[str, typer.Argument(help="Pattern name, e.g. Singleton.")],
    catalog_path: CatalogOption = None,
) -> None:
    """Show one pattern with its description, snippet and expected output."""

    state = get_state(ctx)
    catalog = resolve_catalog(state, catalog_path)
    entry = catalog.find(category, name)
    if entry is None:
        state.logger.fail(f"Pattern '{name}' not found in category '{category}'")
        raise typer.Exit(code=1)
    state.logger.console.print(build_entry_panel(entry))


def search_patterns(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Case-insensitive text matched against names and descriptions.")],
    category: CategoryOption = None,
    catalog_path: CatalogOption = None,
) -> None:
    """Search pattern names and descriptions."""

    state = get_state(ctx)
    selected = _category_or_error(category)
    catalog = resolve_catalog(state, catalog_path)
    text_match = matches_text(query)
    results = search(
        catalog,
        lambda entry: (selected is None or entry.category is selected) and text_match(entry),
    )
    if not results:
        state.logger.warn(f"No patterns match '{query}'")
        return
    state.logger.console.print(build_catalog_table(results, title=f"Patterns matching '{query}'"))
    noun = "pattern" if len(results) == 1 else "patterns"
    state.logger.info(f"{len(results)} {noun} matched")


def register(app: SortedTyper) -> None:
    """Register the catalog browsing commands with ``app``."""

    app.command(name="list")(list_patterns)
    app.command(name="show")(show_pattern)
    app.command(name="search")(search_patterns)


__all__ = ["list_patterns", "register", "search_patterns", "show_pattern"]
