# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for catalog queries and text/Markdown/JSON rendering."""

from __future__ import annotations

import json
from io import StringIO

from rich.console import Console

from patternbook.catalog import PatternCatalog, load_definitions_from_json
from patternbook.config import RenderFormat
from patternbook.render import (
    build_catalog_table,
    build_entry_panel,
    matches_text,
    render,
    render_json,
    render_markdown,
    render_text,
    search,
)


def _plain_console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, force_terminal=False, color_system=None, emoji=False, width=200), buffer


def test_render_text_groups_entries(builtin_catalog: PatternCatalog) -> None:
    output = render_text(builtin_catalog)

    assert output.startswith("Creational\n==========\n")
    assert output.index("Creational") < output.index("Structural") < output.index("Behavioral")
    assert "Singleton\n  Ensure a class has only one instance" in output
    assert "  Output:\n    True\n" in output
    assert "Prototype\n  Create new objects by copying" in output
    assert "Output: (none)" in output
    assert output == render_text(builtin_catalog)


def test_render_text_of_empty_catalog() -> None:
    assert render_text(PatternCatalog.build([])) == ""


def test_render_markdown_sections(builtin_catalog: PatternCatalog) -> None:
    output = render_markdown(builtin_catalog)

    assert output.startswith("# Design Patterns\n")
    assert output.count("\n## ") == 3
    assert output.count("\n### ") == len(builtin_catalog)
    assert "### Singleton\n\nEnsure a class" in output
    assert "```python\nclass Config:" in output
    assert "Output:\n\n```text\nTrue\n```" in output


def test_render_markdown_omits_output_block_when_empty(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition(name="Prototype", expectedOutput=[])])

    output = render_markdown(catalog, title="Creational only", snippet_language="js")

    assert output.startswith("# Creational only\n")
    assert output.count("\n## ") == 1
    assert "```js\n" in output
    assert "Output:" not in output


def test_render_markdown_fence_outgrows_backticks_in_snippet(make_definition) -> None:
    snippet = 'doc = """\n```python\nprint(1)\n```\n"""'
    catalog = PatternCatalog.build([make_definition(snippet=snippet, expectedOutput=["``inline``"])])

    output = render_markdown(catalog)

    assert f"````python\n{snippet}\n````" in output
    assert "```text\n``inline``\n```" in output


def test_render_json_schema(builtin_catalog: PatternCatalog) -> None:
    payload = json.loads(render_json(builtin_catalog))

    assert [group["category"] for group in payload] == ["Creational", "Structural", "Behavioral"]
    first = payload[0]["entries"][0]
    assert list(first) == ["name", "description", "snippet", "expectedOutput"]
    assert first["name"] == "Singleton"
    assert first["expectedOutput"] == ["True"]
    assert [entry["name"] for entry in payload[2]["entries"]] == [
        "Observer",
        "Strategy",
        "Command",
        "Iterator",
        "State",
    ]


def test_render_json_omits_empty_categories(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition(category="Structural", name="Adapter")])

    payload = json.loads(render_json(catalog))

    assert [group["category"] for group in payload] == ["Structural"]
    assert render_json(PatternCatalog.build([])) == "[]\n"


def test_render_json_round_trip(builtin_catalog: PatternCatalog) -> None:
    rebuilt = PatternCatalog.build(load_definitions_from_json(render_json(builtin_catalog)))

    assert rebuilt == builtin_catalog
    assert rebuilt.checksum == builtin_catalog.checksum
    assert set(rebuilt.all()) == set(builtin_catalog.all())


def test_render_dispatches_on_format(builtin_catalog: PatternCatalog) -> None:
    assert render(builtin_catalog, RenderFormat.TEXT) == render_text(builtin_catalog)
    assert render(builtin_catalog, RenderFormat.MARKDOWN) == render_markdown(builtin_catalog)
    assert render(builtin_catalog, RenderFormat.JSON) == render_json(builtin_catalog)


def test_search_without_matches_is_empty(builtin_catalog: PatternCatalog) -> None:
    assert search(builtin_catalog, lambda entry: False) == ()
    assert search(builtin_catalog, matches_text("no such pattern")) == ()


def test_search_preserves_catalog_order(builtin_catalog: PatternCatalog) -> None:
    results = search(builtin_catalog, lambda entry: len(entry.expected_output) > 1)

    assert list(results) == [entry for entry in builtin_catalog.all() if len(entry.expected_output) > 1]


def test_matches_text_is_case_insensitive(builtin_catalog: PatternCatalog) -> None:
    names = [entry.name for entry in search(builtin_catalog, matches_text("OBSERVER"))]
    assert names == ["Observer"]

    by_description = search(builtin_catalog, matches_text("interface"))
    assert "Adapter" in {entry.name for entry in by_description}
    assert "Facade" in {entry.name for entry in by_description}


def test_build_catalog_table(builtin_catalog: PatternCatalog) -> None:
    console, buffer = _plain_console()

    table = build_catalog_table(builtin_catalog.by_category("Behavioral"))
    console.print(table)

    assert table.row_count == 5
    output = buffer.getvalue()
    assert "Observer" in output
    assert "Singleton" not in output


def test_build_entry_panel(builtin_catalog: PatternCatalog) -> None:
    console, buffer = _plain_console()

    console.print(build_entry_panel(builtin_catalog.get("Behavioral", "Iterator")))

    output = buffer.getvalue()
    assert "Behavioral / Iterator" in output
    assert "class Countdown:" in output
    assert "Output:" in output
