# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases, constants, and the category enumeration."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Final, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

CATALOG_SCHEMA_VERSION: Final[str] = "1.0.0"


class Category(str, Enum):
    """Top-level grouping of design patterns."""

    CREATIONAL = "Creational"
    STRUCTURAL = "Structural"
    BEHAVIORAL = "Behavioral"

    @classmethod
    def from_raw(cls, raw: str) -> Category | None:
        """Return the category matching ``raw`` ignoring case and padding.

        Args:
            raw: Category label supplied by a definition or CLI argument.

        Returns:
            Category | None: Matching member, or ``None`` when unrecognised.
        """

        token = raw.strip().lower()
        for member in cls:
            if member.value.lower() == token:
                return member
        return None


CATEGORY_ORDER: Final[tuple[Category, ...]] = (
    Category.CREATIONAL,
    Category.STRUCTURAL,
    Category.BEHAVIORAL,
)

EntryKey: TypeAlias = tuple[Category, str]

__all__ = [
    "CATALOG_SCHEMA_VERSION",
    "CATEGORY_ORDER",
    "Category",
    "EntryKey",
    "JSONPrimitive",
    "JSONValue",
]
