# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by pattern catalog operations."""

from __future__ import annotations

from collections.abc import Sequence

from .types import Category


class PatternValidationError(ValueError):
    """Base class for errors rejecting a single candidate definition."""

    def __init__(
        self,
        message: str,
        *,
        index: int | None = None,
        category: str | None = None,
        name: str | None = None,
    ) -> None:
        """Create the error with structured context.

        Args:
            message: Human-readable description of the failure.
            index: Position of the candidate within the input sequence.
            category: Category label of the candidate when known.
            name: Pattern name of the candidate when known.
        """

        self.index = index
        self.category = category
        self.name = name
        super().__init__(self._with_location(message))

    def _with_location(self, message: str) -> str:
        """Return ``message`` prefixed with the candidate position and key."""

        parts: list[str] = []
        if self.index is not None:
            parts.append(f"definition #{self.index}")
        if self.category and self.name:
            parts.append(f"{self.category}/{self.name}")
        elif self.name:
            parts.append(self.name)
        if not parts:
            return message
        return f"{' '.join(parts)}: {message}"


class MissingFieldError(PatternValidationError):
    """Raised when a required field is absent or blank."""

    def __init__(
        self,
        field: str,
        *,
        index: int | None = None,
        category: str | None = None,
        name: str | None = None,
    ) -> None:
        self.field = field
        super().__init__(f"missing required field '{field}'", index=index, category=category, name=name)


class InvalidFieldError(PatternValidationError):
    """Raised when a field carries a value of the wrong JSON type."""

    def __init__(
        self,
        field: str,
        expected: str,
        *,
        index: int | None = None,
        category: str | None = None,
        name: str | None = None,
    ) -> None:
        self.field = field
        self.expected = expected
        super().__init__(
            f"expected '{field}' to be {expected}",
            index=index,
            category=category,
            name=name,
        )


class UnknownCategoryError(PatternValidationError):
    """Raised when a category label is not one of the recognised values."""

    def __init__(self, category: str, *, index: int | None = None, name: str | None = None) -> None:
        allowed = ", ".join(member.value for member in Category)
        super().__init__(
            f"unknown category '{category}' (expected one of: {allowed})",
            index=index,
            category=category,
            name=name,
        )


class DuplicateNameError(PatternValidationError):
    """Raised when a ``(category, name)`` pair is already present in the catalog."""

    def __init__(self, category: Category, name: str, *, index: int | None = None) -> None:
        self.key: tuple[Category, str] = (category, name)
        super().__init__(
            f"duplicate pattern name '{name}' in category '{category.value}'",
            index=index,
            category=category.value,
            name=name,
        )


class CatalogBuildError(ValueError):
    """Raised when one or more definitions fail validation during a build."""

    def __init__(self, errors: Sequence[PatternValidationError]) -> None:
        """Create the aggregate error.

        Args:
            errors: Every validation error found, in input order.
        """

        self.errors: tuple[PatternValidationError, ...] = tuple(errors)
        count = len(self.errors)
        noun = "error" if count == 1 else "errors"
        summary = "; ".join(str(error) for error in self.errors)
        super().__init__(f"catalog build failed with {count} validation {noun}: {summary}")


class EntryNotFoundError(KeyError):
    """Raised when a strict lookup targets a pattern absent from the catalog."""

    def __init__(self, category: Category | str, name: str) -> None:
        self.category = category.value if isinstance(category, Category) else category
        self.name = name
        super().__init__(f"{self.category}/{name}")


class CatalogDocumentError(RuntimeError):
    """Raised when a definition document cannot be parsed or fails schema validation."""


__all__ = (
    "CatalogBuildError",
    "CatalogDocumentError",
    "DuplicateNameError",
    "EntryNotFoundError",
    "InvalidFieldError",
    "MissingFieldError",
    "PatternValidationError",
    "UnknownCategoryError",
)
