# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Utility helpers for validating and normalising candidate definition fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import CatalogDocumentError, InvalidFieldError


def optional_string(
    value: object,
    *,
    key: str,
    index: int | None = None,
    name: str | None = None,
) -> str | None:
    """Return ``value`` as an optional string with validation.

    Args:
        value: Raw value extracted from the candidate mapping.
        key: Field name used in error messages.
        index: Position of the candidate within its input sequence.
        name: Pattern name used to locate the candidate in error messages.

    Returns:
        str | None: ``value`` when it is a string, otherwise ``None`` when absent.

    Raises:
        InvalidFieldError: If ``value`` is present but not a string.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise InvalidFieldError(key, "a string", index=index, name=name)
    return value


def is_blank(value: str | None) -> bool:
    """Return ``True`` when ``value`` is absent or contains only whitespace."""

    return value is None or not value.strip()


def string_lines(
    value: object,
    *,
    key: str,
    index: int | None = None,
    name: str | None = None,
) -> tuple[str, ...]:
    """Return ``value`` as a tuple of output lines.

    A single string is split on line boundaries; ``None`` yields an empty tuple.

    Args:
        value: Raw value extracted from the candidate mapping.
        key: Field name used in error messages.
        index: Position of the candidate within its input sequence.
        name: Pattern name used to locate the candidate in error messages.

    Returns:
        tuple[str, ...]: Output lines in their original order.

    Raises:
        InvalidFieldError: If ``value`` is not a string or a sequence of strings.
    """
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(value.splitlines())
    if not isinstance(value, Sequence) or isinstance(value, (bytes, bytearray)):
        raise InvalidFieldError(key, "an array of strings", index=index, name=name)
    result: list[str] = []
    for position, item in enumerate(value):
        if not isinstance(item, str):
            raise InvalidFieldError(f"{key}[{position}]", "a string", index=index, name=name)
        result.append(item)
    return tuple(result)


def expect_mapping(value: object, *, key: str, context: str) -> Mapping[str, object]:
    """Return ``value`` as a mapping or raise a document error.

    Args:
        value: Raw JSON value extracted from a definition document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the document location.

    Returns:
        Mapping[str, object]: Mapping derived from ``value``.

    Raises:
        CatalogDocumentError: If ``value`` is not a mapping.
    """
    if not isinstance(value, Mapping):
        raise CatalogDocumentError(f"{context}: expected '{key}' to be an object")
    return value


def expect_array(value: object, *, key: str, context: str) -> Sequence[object]:
    """Return ``value`` as a JSON array or raise a document error.

    Args:
        value: Raw JSON value extracted from a definition document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the document location.

    Returns:
        Sequence[object]: Sequence derived from ``value``.

    Raises:
        CatalogDocumentError: If ``value`` is not an array.
    """
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogDocumentError(f"{context}: expected '{key}' to be an array")
    return value


__all__ = [
    "expect_array",
    "expect_mapping",
    "is_blank",
    "optional_string",
    "string_lines",
]
