# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural validation admitting candidate definitions into a catalog."""

from __future__ import annotations

from collections.abc import Container, Mapping
from typing import Final, cast

from .errors import DuplicateNameError, InvalidFieldError, MissingFieldError, UnknownCategoryError
from .model_entry import PatternEntry
from .types import Category, EntryKey
from .utils import is_blank, optional_string, string_lines

REQUIRED_FIELDS: Final[tuple[str, ...]] = ("category", "name", "description", "snippet")
OUTPUT_KEYS: Final[tuple[str, ...]] = ("expectedOutput", "expected_output")


def validate(
    candidate: Mapping[str, object],
    *,
    seen: Container[EntryKey] = frozenset(),
    index: int | None = None,
) -> PatternEntry:
    """Validate ``candidate`` and return the immutable entry it describes.

    Args:
        candidate: Unvalidated definition mapping.
        seen: Keys already admitted to the target catalog.
        index: Position of ``candidate`` within its input sequence, used in errors.

    Returns:
        PatternEntry: Entry constructed from ``candidate``.

    Raises:
        InvalidFieldError: If ``candidate`` is not a mapping or a field has the wrong type.
        MissingFieldError: If a required field is absent or blank.
        UnknownCategoryError: If the category label is not recognised.
        DuplicateNameError: If the ``(category, name)`` pair is already in ``seen``.
    """

    if not isinstance(candidate, Mapping):
        raise InvalidFieldError("<root>", "an object", index=index)

    raw_name = optional_string(candidate.get("name"), key="name", index=index)
    name = raw_name.strip() if raw_name is not None else None
    values: dict[str, str | None] = {"name": name}
    for field in ("category", "description", "snippet"):
        values[field] = optional_string(candidate.get(field), key=field, index=index, name=name)

    raw_category = values["category"]
    for field in REQUIRED_FIELDS:
        if is_blank(values[field]):
            raise MissingFieldError(
                field,
                index=index,
                category=None if is_blank(raw_category) else raw_category,
                name=None if is_blank(name) else name,
            )

    label = cast(str, raw_category).strip()
    pattern_name = cast(str, name)
    category = Category.from_raw(label)
    if category is None:
        raise UnknownCategoryError(label, index=index, name=pattern_name)

    if (category, pattern_name) in seen:
        raise DuplicateNameError(category, pattern_name, index=index)

    output_key = next((key for key in OUTPUT_KEYS if key in candidate), OUTPUT_KEYS[0])
    expected_output = string_lines(candidate.get(output_key), key=output_key, index=index, name=pattern_name)

    description = cast(str, values["description"])
    snippet = cast(str, values["snippet"])
    return PatternEntry(
        category=category,
        name=pattern_name,
        description=description.strip(),
        snippet=snippet,
        expected_output=expected_output,
    )


__all__ = ["OUTPUT_KEYS", "REQUIRED_FIELDS", "validate"]
