# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable record describing a single catalogued design pattern."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Category, EntryKey, JSONValue


@dataclass(frozen=True, slots=True)
class PatternEntry:
    """Validated catalog entry for one named design pattern.

    Attributes:
        category: Category grouping the pattern.
        name: Pattern name, unique within ``category``.
        description: One-line summary of the pattern's intent.
        snippet: Example source text. Stored verbatim and never executed.
        expected_output: Console lines the snippet prints, possibly empty.
    """

    category: Category
    name: str
    description: str
    snippet: str
    expected_output: tuple[str, ...] = ()

    @property
    def key(self) -> EntryKey:
        """Return the ``(category, name)`` pair identifying the entry."""

        return (self.category, self.name)

    def to_dict(self, *, include_category: bool = True) -> dict[str, JSONValue]:
        """Return a JSON-friendly mapping using the document field names.

        Args:
            include_category: Whether to emit the ``category`` key. Grouped
                documents carry the category on the enclosing group instead.

        Returns:
            dict[str, JSONValue]: Mapping suitable for ``json.dumps``.
        """

        payload: dict[str, JSONValue] = {}
        if include_category:
            payload["category"] = self.category.value
        payload["name"] = self.name
        payload["description"] = self.description
        payload["snippet"] = self.snippet
        payload["expectedOutput"] = list(self.expected_output)
        return payload


__all__ = ["PatternEntry"]
