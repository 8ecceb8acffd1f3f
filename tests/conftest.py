# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from patternbook.catalog import PatternCatalog, default_catalog

DefinitionFactory = Callable[..., dict[str, object]]


@pytest.fixture
def make_definition() -> DefinitionFactory:
    """Return a factory producing valid candidate definitions with overrides."""

    def _factory(**overrides: object) -> dict[str, object]:
        definition: dict[str, object] = {
            "category": "Creational",
            "name": "Singleton",
            "description": "Ensure a class has only one instance.",
            "snippet": "print(Config() is Config())",
            "expectedOutput": ["True"],
        }
        definition.update(overrides)
        return definition

    return _factory


@pytest.fixture
def builtin_catalog() -> PatternCatalog:
    """Return the catalog built from the built-in definitions."""

    return default_catalog()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, object], Path]:
    """Return a helper serialising a payload into ``tmp_path``."""

    def _write(filename: str, payload: object) -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _clear_patternbook_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables from leaking into tests."""

    for name in ("PATTERNBOOK_FORMAT", "PATTERNBOOK_NO_COLOR", "PATTERNBOOK_NO_EMOJI"):
        monkeypatch.delenv(name, raising=False)
