# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Validated, queryable catalog of classic object-oriented design patterns."""

from __future__ import annotations

from .catalog import (
    CATEGORY_ORDER,
    CatalogBuildError,
    CatalogDocumentError,
    Category,
    DuplicateNameError,
    EntryNotFoundError,
    InvalidFieldError,
    MissingFieldError,
    PatternCatalog,
    PatternEntry,
    PatternValidationError,
    UnknownCategoryError,
    default_catalog,
    load_catalog,
    load_definitions,
    load_definitions_from_json,
    validate,
)
from .config import ConfigError, RenderFormat, RenderSettings
from .render import matches_text, render, render_json, render_markdown, render_text, search

__version__ = "0.1.0"

__all__ = [
    "CATEGORY_ORDER",
    "CatalogBuildError",
    "CatalogDocumentError",
    "Category",
    "ConfigError",
    "DuplicateNameError",
    "EntryNotFoundError",
    "InvalidFieldError",
    "MissingFieldError",
    "PatternCatalog",
    "PatternEntry",
    "PatternValidationError",
    "RenderFormat",
    "RenderSettings",
    "UnknownCategoryError",
    "__version__",
    "default_catalog",
    "load_catalog",
    "load_definitions",
    "load_definitions_from_json",
    "matches_text",
    "render",
    "render_json",
    "render_markdown",
    "render_text",
    "search",
    "validate",
]
