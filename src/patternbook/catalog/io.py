# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading definition documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import cast

from .errors import CatalogDocumentError
from .types import JSONValue


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogDocumentError: If the schema cannot be parsed or is not a JSON object.
    """
    payload = load_document(path)
    if not isinstance(payload, Mapping):
        raise CatalogDocumentError(f"{path}: expected a JSON object")
    return payload


def load_document(path: Path) -> JSONValue:
    """Load a JSON document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        CatalogDocumentError: If the document cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(path)
    return parse_document(path.read_text(encoding="utf-8"), context=str(path))


def parse_document(text: str, *, context: str = "<string>") -> JSONValue:
    """Parse ``text`` as a JSON document.

    Args:
        text: JSON source text.
        context: Human-readable origin used in error messages.

    Returns:
        JSONValue: Parsed JSON value.

    Raises:
        CatalogDocumentError: If ``text`` is not valid JSON.
    """
    try:
        return cast(JSONValue, json.loads(text))
    except json.JSONDecodeError as exc:
        raise CatalogDocumentError(f"{context}: failed to parse JSON ({exc.msg} at line {exc.lineno})") from exc


__all__ = ["load_document", "load_schema", "parse_document"]
