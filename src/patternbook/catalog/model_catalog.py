# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Immutable catalog aggregate built from validated pattern entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from .checksum import compute_catalog_checksum
from .errors import (
    CatalogBuildError,
    DuplicateNameError,
    EntryNotFoundError,
    PatternValidationError,
    UnknownCategoryError,
)
from .model_entry import PatternEntry
from .types import CATEGORY_ORDER, Category, EntryKey
from .validator import validate

LOGGER = logging.getLogger(__name__)


def coerce_category(category: Category | str) -> Category:
    """Return ``category`` as a :class:`Category` member.

    Args:
        category: Category member or its label.

    Returns:
        Category: Resolved category member.

    Raises:
        UnknownCategoryError: If ``category`` is a label that matches no member.
    """

    if isinstance(category, Category):
        return category
    resolved = Category.from_raw(category)
    if resolved is None:
        raise UnknownCategoryError(category)
    return resolved


@dataclass(frozen=True, slots=True)
class PatternCatalog:
    """Validated, read-only collection of pattern entries grouped by category."""

    _entries: tuple[PatternEntry, ...]
    _groups: Mapping[Category, tuple[PatternEntry, ...]] = field(init=False, repr=False, compare=False)
    _index: Mapping[EntryKey, PatternEntry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Group entries by category and index them by key."""

        buckets: dict[Category, list[PatternEntry]] = {category: [] for category in CATEGORY_ORDER}
        index: dict[EntryKey, PatternEntry] = {}
        for entry in self._entries:
            if entry.key in index:
                raise CatalogBuildError([DuplicateNameError(entry.category, entry.name)])
            index[entry.key] = entry
            buckets[entry.category].append(entry)
        groups = {category: tuple(bucket) for category, bucket in buckets.items()}
        ordered = tuple(entry for category in CATEGORY_ORDER for entry in groups[category])
        object.__setattr__(self, "_entries", ordered)
        object.__setattr__(self, "_groups", MappingProxyType(groups))
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def build(cls, definitions: Iterable[Mapping[str, object]]) -> PatternCatalog:
        """Validate ``definitions`` and return the catalog they describe.

        Every definition is validated in a single pass so that all problems are
        reported together. Only the first occurrence of a ``(category, name)``
        pair is admitted; later occurrences are reported as duplicates.

        Args:
            definitions: Candidate definition mappings in input order.

        Returns:
            PatternCatalog: Catalog containing one entry per definition.

        Raises:
            CatalogBuildError: If any definition fails validation. ``errors``
                lists every failure in input order.
        """

        admitted: list[PatternEntry] = []
        seen: set[EntryKey] = set()
        errors: list[PatternValidationError] = []
        for index, candidate in enumerate(definitions):
            try:
                entry = validate(candidate, seen=seen, index=index)
            except PatternValidationError as exc:
                errors.append(exc)
                continue
            seen.add(entry.key)
            admitted.append(entry)
        if errors:
            LOGGER.debug("catalog build rejected %d of %d definitions", len(errors), len(admitted) + len(errors))
            raise CatalogBuildError(errors)
        LOGGER.debug("catalog built with %d entries", len(admitted))
        return cls(tuple(admitted))

    def by_category(self, category: Category | str) -> tuple[PatternEntry, ...]:
        """Return entries in ``category`` in insertion order.

        Args:
            category: Category member or label to filter by.

        Returns:
            tuple[PatternEntry, ...]: Entries for ``category``; empty when it has none.

        Raises:
            UnknownCategoryError: If ``category`` is an unrecognised label.
        """

        return self._groups[coerce_category(category)]

    def find(self, category: Category | str, name: str) -> PatternEntry | None:
        """Return the entry keyed by ``(category, name)`` or ``None`` when absent.

        ``name`` is stripped the same way the validator strips it on admission.
        """

        resolved = category if isinstance(category, Category) else Category.from_raw(category)
        if resolved is None:
            return None
        return self._index.get((resolved, name.strip()))

    def get(self, category: Category | str, name: str) -> PatternEntry:
        """Return the entry keyed by ``(category, name)``.

        Raises:
            EntryNotFoundError: If no such entry exists.
        """

        entry = self.find(category, name)
        if entry is None:
            raise EntryNotFoundError(category, name)
        return entry

    def all(self) -> tuple[PatternEntry, ...]:
        """Return every entry grouped in fixed category order."""

        return self._entries

    def categories(self) -> tuple[Category, ...]:
        """Return the categories holding at least one entry, in fixed order."""

        return tuple(category for category in CATEGORY_ORDER if self._groups[category])

    @property
    def checksum(self) -> str:
        """Return a deterministic digest of the catalog contents."""

        return compute_catalog_checksum(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, Sequence) or isinstance(key, str) or len(key) != 2:
            return False
        category, name = key
        if not isinstance(category, (Category, str)) or not isinstance(name, str):
            return False
        return self.find(category, name) is not None


__all__ = ["PatternCatalog", "coerce_category"]
