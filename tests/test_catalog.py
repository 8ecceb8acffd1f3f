# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for building and querying pattern catalogs."""

from __future__ import annotations

import dataclasses

import pytest

from patternbook.catalog import (
    CatalogBuildError,
    Category,
    DuplicateNameError,
    EntryNotFoundError,
    MissingFieldError,
    PatternCatalog,
    UnknownCategoryError,
)


def test_build_groups_by_category_preserving_insertion_order(make_definition) -> None:
    definitions = [
        make_definition(category="Behavioral", name="Observer"),
        make_definition(category="Creational", name="Builder"),
        make_definition(category="Behavioral", name="Strategy"),
        make_definition(category="Structural", name="Adapter"),
        make_definition(category="Creational", name="Singleton"),
    ]

    catalog = PatternCatalog.build(definitions)

    assert [entry.name for entry in catalog.all()] == ["Builder", "Singleton", "Adapter", "Observer", "Strategy"]
    assert [entry.name for entry in catalog.by_category(Category.BEHAVIORAL)] == ["Observer", "Strategy"]
    assert catalog.categories() == (Category.CREATIONAL, Category.STRUCTURAL, Category.BEHAVIORAL)
    assert len(catalog) == 5
    assert list(catalog) == list(catalog.all())


def test_duplicate_singleton_reports_one_error(make_definition) -> None:
    definitions = [
        make_definition(expectedOutput=["true"]),
        make_definition(description="different", expectedOutput=[]),
    ]

    with pytest.raises(CatalogBuildError) as excinfo:
        PatternCatalog.build(definitions)

    errors = excinfo.value.errors
    assert len(errors) == 1
    assert isinstance(errors[0], DuplicateNameError)
    assert errors[0].key == (Category.CREATIONAL, "Singleton")
    assert errors[0].index == 1


def test_build_reports_every_error_in_input_order(make_definition) -> None:
    definitions = [
        make_definition(name=""),
        make_definition(name="Builder"),
        make_definition(name="Mystery", category="Elemental"),
        make_definition(name="Builder", description="again"),
        make_definition(name="Prototype"),
    ]

    with pytest.raises(CatalogBuildError) as excinfo:
        PatternCatalog.build(definitions)

    errors = excinfo.value.errors
    assert [type(error) for error in errors] == [MissingFieldError, UnknownCategoryError, DuplicateNameError]
    assert [error.index for error in errors] == [0, 2, 3]
    assert "3 validation errors" in str(excinfo.value)


def test_build_accepts_empty_definitions() -> None:
    catalog = PatternCatalog.build([])

    assert catalog.all() == ()
    assert catalog.categories() == ()
    assert catalog.by_category("Creational") == ()


def test_by_category_empty_and_string_labels(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition()])

    assert catalog.by_category("Structural") == ()
    assert catalog.by_category("creational") == catalog.by_category(Category.CREATIONAL)
    with pytest.raises(UnknownCategoryError):
        catalog.by_category("Elemental")


def test_find_returns_the_built_entry(make_definition) -> None:
    definitions = [make_definition(name=name) for name in ("Singleton", "Builder", "Prototype")]
    catalog = PatternCatalog.build(definitions)

    for entry in catalog.all():
        assert catalog.find(entry.category, entry.name) is entry
    assert catalog.find("Creational", "Builder") is catalog.all()[1]


def test_find_accepts_padded_names(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition(name="  Singleton ")])
    entry = catalog.all()[0]

    assert entry.name == "Singleton"
    assert catalog.find("Creational", "  Singleton ") is entry
    assert catalog.get(Category.CREATIONAL, "Singleton ") is entry
    assert (Category.CREATIONAL, " Singleton") in catalog


def test_find_absent_returns_none(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition()])

    assert catalog.find(Category.STRUCTURAL, "Singleton") is None
    assert catalog.find("Creational", "Builder") is None
    assert catalog.find("Elemental", "Singleton") is None


def test_get_raises_entry_not_found(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition()])

    assert catalog.get("Creational", "Singleton").name == "Singleton"
    with pytest.raises(EntryNotFoundError) as excinfo:
        catalog.get(Category.BEHAVIORAL, "Visitor")
    assert isinstance(excinfo.value, KeyError)
    assert excinfo.value.category == "Behavioral"
    assert excinfo.value.name == "Visitor"


def test_contains_checks_keys(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition()])

    assert (Category.CREATIONAL, "Singleton") in catalog
    assert ("Creational", "Singleton") in catalog
    assert ("Behavioral", "Singleton") not in catalog
    assert "Singleton" not in catalog


def test_catalog_is_immutable(make_definition) -> None:
    catalog = PatternCatalog.build([make_definition()])

    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog._entries = ()  # type: ignore[misc]
    with pytest.raises(TypeError):
        catalog._groups[Category.CREATIONAL] = ()  # type: ignore[index]


def test_direct_construction_rejects_duplicates(make_definition) -> None:
    entry = PatternCatalog.build([make_definition()]).all()[0]

    with pytest.raises(CatalogBuildError):
        PatternCatalog((entry, entry))


def test_checksum_is_stable_and_content_sensitive(make_definition) -> None:
    first = PatternCatalog.build([make_definition(), make_definition(name="Builder")])
    second = PatternCatalog.build([make_definition(), make_definition(name="Builder")])
    changed = PatternCatalog.build([make_definition(), make_definition(name="Builder", description="changed")])

    assert first == second
    assert first.checksum == second.checksum
    assert len(first.checksum) == 64
    assert first.checksum != changed.checksum
