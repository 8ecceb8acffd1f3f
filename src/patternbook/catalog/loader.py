# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""High-level loader that turns definition documents into catalogs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .io import load_document, parse_document
from .model_catalog import PatternCatalog
from .schema import SchemaRepository, default_schema_repository
from .types import JSONValue
from .utils import expect_array, expect_mapping

LOGGER = logging.getLogger(__name__)

GROUP_ENTRIES_KEY = "entries"
PATTERNS_KEY = "patterns"


@dataclass(slots=True)
class DefinitionLoader:
    """Loader that validates definition documents and flattens them into candidates."""

    schema_root: Path | None = None
    _schemas: SchemaRepository = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Resolve the schema repository after dataclass setup."""

        if self.schema_root is None:
            self._schemas = default_schema_repository()
        else:
            self._schemas = SchemaRepository.load(schema_root=self.schema_root)
        self.schema_root = self._schemas.schema_root

    def definitions_from_document(
        self,
        document: JSONValue,
        *,
        context: str = "<document>",
    ) -> tuple[Mapping[str, object], ...]:
        """Flatten ``document`` into candidate definitions in document order.

        Accepts a flat array of entries, the category-grouped array emitted by
        the JSON renderer, or an object wrapping either under ``patterns``.
        Entries inside a group inherit the group's category unless they carry
        their own.

        Args:
            document: Parsed definition document.
            context: Human-readable document origin used in error messages.

        Returns:
            tuple[Mapping[str, object], ...]: Candidate definitions.

        Raises:
            CatalogDocumentError: If the document does not match the catalog schema.
        """

        self._schemas.validate_document(document, context=context)
        if isinstance(document, Mapping):
            document = document[PATTERNS_KEY]
        items = expect_array(document, key=PATTERNS_KEY, context=context)

        definitions: list[Mapping[str, object]] = []
        for position, item in enumerate(items):
            mapping = expect_mapping(item, key=f"[{position}]", context=context)
            if GROUP_ENTRIES_KEY not in mapping:
                definitions.append(mapping)
                continue
            group_category = mapping.get("category")
            entries = expect_array(mapping[GROUP_ENTRIES_KEY], key=GROUP_ENTRIES_KEY, context=context)
            for entry_position, entry in enumerate(entries):
                entry_mapping = expect_mapping(
                    entry,
                    key=f"[{position}].{GROUP_ENTRIES_KEY}[{entry_position}]",
                    context=context,
                )
                definitions.append({"category": group_category, **entry_mapping})
        LOGGER.debug("%s: loaded %d definitions", context, len(definitions))
        return tuple(definitions)

    def load_definitions(self, path: Path) -> tuple[Mapping[str, object], ...]:
        """Load candidate definitions from the JSON document at ``path``.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            CatalogDocumentError: If the document cannot be parsed or fails the schema.
        """

        return self.definitions_from_document(load_document(path), context=str(path))

    def load_definitions_from_json(self, text: str) -> tuple[Mapping[str, object], ...]:
        """Load candidate definitions from JSON source ``text``."""

        return self.definitions_from_document(parse_document(text), context="<string>")

    def load_catalog(self, path: Path) -> PatternCatalog:
        """Load and build the catalog described by the document at ``path``.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            CatalogDocumentError: If the document cannot be parsed or fails the schema.
            CatalogBuildError: If any definition fails validation.
        """

        return PatternCatalog.build(self.load_definitions(path))


def load_definitions(path: Path) -> tuple[Mapping[str, object], ...]:
    """Load candidate definitions from ``path`` using the bundled schema."""

    return DefinitionLoader().load_definitions(path)


def load_definitions_from_json(text: str) -> tuple[Mapping[str, object], ...]:
    """Load candidate definitions from JSON ``text`` using the bundled schema."""

    return DefinitionLoader().load_definitions_from_json(text)


def load_catalog(path: Path) -> PatternCatalog:
    """Load and build the catalog described by the document at ``path``."""

    return DefinitionLoader().load_catalog(path)


__all__ = [
    "DefinitionLoader",
    "load_catalog",
    "load_definitions",
    "load_definitions_from_json",
]
