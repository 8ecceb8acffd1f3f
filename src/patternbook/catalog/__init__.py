# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Public export surface for the pattern catalog."""

from __future__ import annotations

from typing import Final

from .builtin import BUILTIN_DEFINITIONS, default_catalog
from .errors import (
    CatalogBuildError,
    CatalogDocumentError,
    DuplicateNameError,
    EntryNotFoundError,
    InvalidFieldError,
    MissingFieldError,
    PatternValidationError,
    UnknownCategoryError,
)
from .loader import DefinitionLoader, load_catalog, load_definitions, load_definitions_from_json
from .model_catalog import PatternCatalog
from .model_entry import PatternEntry
from .types import CATEGORY_ORDER, Category
from .validator import validate

__all__: Final[tuple[str, ...]] = (
    "BUILTIN_DEFINITIONS",
    "CATEGORY_ORDER",
    "CatalogBuildError",
    "CatalogDocumentError",
    "Category",
    "DefinitionLoader",
    "DuplicateNameError",
    "EntryNotFoundError",
    "InvalidFieldError",
    "MissingFieldError",
    "PatternCatalog",
    "PatternEntry",
    "PatternValidationError",
    "UnknownCategoryError",
    "default_catalog",
    "load_catalog",
    "load_definitions",
    "load_definitions_from_json",
    "validate",
)
