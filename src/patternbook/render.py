# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Read-only query and rendering helpers over a built pattern catalog."""

from __future__ import annotations

import json
import re
from collections.abc import Callable
from typing import Final

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from .catalog.model_catalog import PatternCatalog
from .catalog.model_entry import PatternEntry
from .catalog.types import JSONValue
from .config import RenderFormat

EntryPredicate = Callable[[PatternEntry], bool]

DEFAULT_TITLE: Final[str] = "Design Patterns"
DEFAULT_SNIPPET_LANGUAGE: Final[str] = "python"
_INDENT: Final[str] = "  "
_BACKTICK_RUN: Final[re.Pattern[str]] = re.compile(r"`+")


def search(catalog: PatternCatalog, predicate: EntryPredicate) -> tuple[PatternEntry, ...]:
    """Return entries matching ``predicate`` in catalog order.

    Args:
        catalog: Catalog to search.
        predicate: Callable returning ``True`` for entries to keep.

    Returns:
        tuple[PatternEntry, ...]: Matching entries; empty when nothing matches.
    """

    return tuple(entry for entry in catalog if predicate(entry))


def matches_text(query: str) -> EntryPredicate:
    """Return a predicate matching ``query`` against entry names and descriptions.

    Matching is a case-insensitive substring test. An empty query matches every entry.
    """

    needle = query.strip().casefold()

    def _predicate(entry: PatternEntry) -> bool:
        return needle in entry.name.casefold() or needle in entry.description.casefold()

    return _predicate


def render_text(catalog: PatternCatalog) -> str:
    """Return a human-readable dump of ``catalog`` grouped by category.

    Each entry lists its name, description and expected output lines.
    """

    lines: list[str] = []
    for category in catalog.categories():
        if lines:
            lines.append("")
        lines.append(category.value)
        lines.append("=" * len(category.value))
        for entry in catalog.by_category(category):
            lines.append("")
            lines.append(entry.name)
            lines.append(f"{_INDENT}{entry.description}")
            if entry.expected_output:
                lines.append(f"{_INDENT}Output:")
                lines.extend(f"{_INDENT * 2}{line}" for line in entry.expected_output)
            else:
                lines.append(f"{_INDENT}Output: (none)")
    return "\n".join(lines) + "\n" if lines else ""


def render_markdown(
    catalog: PatternCatalog,
    *,
    title: str = DEFAULT_TITLE,
    snippet_language: str = DEFAULT_SNIPPET_LANGUAGE,
) -> str:
    """Return a README-style Markdown document describing ``catalog``.

    Args:
        catalog: Catalog to render.
        title: Top-level heading of the document.
        snippet_language: Info string attached to snippet code fences.

    Returns:
        str: Markdown text with one section per non-empty category.
    """

    blocks: list[str] = [f"# {title}"]
    for category in catalog.categories():
        blocks.append(f"## {category.value}")
        for entry in catalog.by_category(category):
            blocks.append(f"### {entry.name}")
            blocks.append(entry.description)
            blocks.append(_fenced(entry.snippet, snippet_language))
            if entry.expected_output:
                output = _fenced("\n".join(entry.expected_output), "text")
                blocks.append(f"Output:\n\n{output}")
    return "\n\n".join(blocks) + "\n"


def _fenced(body: str, info: str) -> str:
    """Return ``body`` in a code fence longer than any backtick run it contains."""

    longest = max((len(run) for run in _BACKTICK_RUN.findall(body)), default=0)
    fence = "`" * max(3, longest + 1)
    return f"{fence}{info}\n{body}\n{fence}"


def catalog_payload(catalog: PatternCatalog) -> list[dict[str, JSONValue]]:
    """Return the grouped JSON payload for ``catalog``."""

    return [
        {
            "category": category.value,
            "entries": [entry.to_dict(include_category=False) for entry in catalog.by_category(category)],
        }
        for category in catalog.categories()
    ]


def render_json(catalog: PatternCatalog) -> str:
    """Return a deterministic JSON document preserving catalog order.

    The document is an array of ``{"category", "entries"}`` groups in fixed
    category order; each entry carries ``name``, ``description``, ``snippet``
    and ``expectedOutput``.
    """

    return json.dumps(catalog_payload(catalog), indent=2, ensure_ascii=False) + "\n"


_RENDERERS: Final[dict[RenderFormat, Callable[[PatternCatalog], str]]] = {
    RenderFormat.TEXT: render_text,
    RenderFormat.MARKDOWN: render_markdown,
    RenderFormat.JSON: render_json,
}


def render(catalog: PatternCatalog, output_format: RenderFormat) -> str:
    """Render ``catalog`` in ``output_format``."""

    return _RENDERERS[output_format](catalog)


def build_catalog_table(entries: tuple[PatternEntry, ...], *, title: str = "Patterns") -> Table:
    """Return a rich table listing ``entries``.

    Args:
        entries: Entries to list, typically ``catalog.all()`` or a search result.
        title: Table title.

    Returns:
        Table: Rich table instance ready for rendering.
    """

    table = Table(title=title, box=box.SIMPLE, expand=True)
    table.add_column("Category", style="bold")
    table.add_column("Name", style="bold cyan")
    table.add_column("Description", overflow="fold")
    table.add_column("Output", justify="right")
    for entry in entries:
        table.add_row(
            entry.category.value,
            entry.name,
            entry.description,
            str(len(entry.expected_output)) if entry.expected_output else "-",
        )
    return table


def build_entry_panel(entry: PatternEntry, *, snippet_language: str = DEFAULT_SNIPPET_LANGUAGE) -> Panel:
    """Return a rich panel showing one entry with its highlighted snippet."""

    parts: list[Text | Syntax] = [
        Text(entry.description),
        Text(""),
        Syntax(entry.snippet, snippet_language, line_numbers=False),
    ]
    if entry.expected_output:
        parts.append(Text(""))
        parts.append(Text("Output:", style="bold"))
        parts.extend(Text(f"{_INDENT}{line}") for line in entry.expected_output)
    return Panel(
        Group(*parts),
        title=f"{entry.category.value} / {entry.name}",
        border_style="cyan",
    )


__all__ = [
    "EntryPredicate",
    "build_catalog_table",
    "build_entry_panel",
    "catalog_payload",
    "matches_text",
    "render",
    "render_json",
    "render_markdown",
    "render_text",
    "search",
]
