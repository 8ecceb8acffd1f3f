# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating definition documents."""

from __future__ import annotations

import importlib
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Final, Protocol, cast, runtime_checkable

from .errors import CatalogDocumentError
from .io import load_schema
from .types import JSONValue

DEFAULT_SCHEMA_ROOT: Final[Path] = Path(__file__).resolve().parent / "schemas"
CATALOG_SCHEMA_FILENAME: Final[str] = "pattern_catalog.schema.json"


class SchemaValidationError(Protocol):
    """Represent schema validation errors surfaced by jsonschema."""

    @property
    def message(self) -> str:
        """Return the descriptive validation error message."""

    @property
    def absolute_path(self) -> Sequence[str | int]:
        """Return the path to the offending value within the instance."""


@runtime_checkable
class SchemaValidator(Protocol):
    """Protocol describing the minimal interface exposed by jsonschema validators."""

    def iter_errors(self, instance: JSONValue) -> Iterable[SchemaValidationError]:
        """Iterate over validation errors for ``instance``.

        Args:
            instance: JSON payload to validate against the schema.

        Returns:
            Iterable[SchemaValidationError]: Iterator yielding validation errors.
        """


SchemaValidatorFactory = Callable[[JSONValue], SchemaValidator]


jsonschema_module = importlib.import_module("jsonschema")
Draft202012Validator = cast(SchemaValidatorFactory, jsonschema_module.Draft202012Validator)


@dataclass(slots=True)
class SchemaRepository:
    """Hold the JSON schema validator used for definition documents."""

    schema_root: Path
    catalog_validator: SchemaValidator

    @classmethod
    def load(cls, *, schema_root: Path | None = None) -> SchemaRepository:
        """Load the definition document schema from disk.

        Args:
            schema_root: Optional override for the schema directory.

        Returns:
            SchemaRepository: Repository configured with the catalog validator.
        """
        resolved_root = schema_root or DEFAULT_SCHEMA_ROOT
        catalog_schema = load_schema(resolved_root / CATALOG_SCHEMA_FILENAME)
        return cls(
            schema_root=resolved_root,
            catalog_validator=Draft202012Validator(catalog_schema),
        )

    def validate_document(self, document: JSONValue, *, context: str) -> None:
        """Validate ``document`` and report every schema violation at once.

        Args:
            document: Parsed definition document.
            context: Human-readable document origin used in error messages.

        Raises:
            CatalogDocumentError: When the document does not match the schema.
        """

        problems = sorted(
            (_format_location(error.absolute_path), error.message)
            for error in self.catalog_validator.iter_errors(document)
        )
        if problems:
            details = "; ".join(f"{location}: {message}" for location, message in problems)
            raise CatalogDocumentError(f"{context}: document does not match the catalog schema ({details})")


@lru_cache(maxsize=1)
def default_schema_repository() -> SchemaRepository:
    """Return the cached repository for the bundled schema."""

    return SchemaRepository.load()


def _format_location(path: Sequence[str | int]) -> str:
    """Return a JSON-pointer-like rendering of ``path``."""

    return "/" + "/".join(str(part) for part in path)


__all__ = ["CATALOG_SCHEMA_FILENAME", "DEFAULT_SCHEMA_ROOT", "SchemaRepository", "default_schema_repository"]
