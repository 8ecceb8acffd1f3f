# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for render settings resolution."""

from __future__ import annotations

import pytest

from patternbook.config import ConfigError, RenderFormat, RenderSettings, output_format_from_env


def test_defaults() -> None:
    settings = RenderSettings.from_env({})

    assert settings == RenderSettings()
    assert settings.output_format is RenderFormat.TEXT
    assert settings.color is True
    assert settings.emoji is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("json", RenderFormat.JSON), ("Markdown", RenderFormat.MARKDOWN), ("md", RenderFormat.MARKDOWN)],
)
def test_format_from_env(raw: str, expected: RenderFormat) -> None:
    settings = RenderSettings.from_env({"PATTERNBOOK_FORMAT": raw})

    assert settings.output_format is expected


def test_unknown_format_is_rejected() -> None:
    with pytest.raises(ConfigError) as excinfo:
        RenderSettings.from_env({"PATTERNBOOK_FORMAT": "yaml"})

    assert "text, markdown, json" in str(excinfo.value)


def test_format_can_be_left_unchecked() -> None:
    env = {"PATTERNBOOK_FORMAT": "yaml", "PATTERNBOOK_NO_EMOJI": "1"}

    settings = RenderSettings.from_env(env, include_format=False)

    assert settings.output_format is RenderFormat.TEXT
    assert settings.emoji is False


def test_output_format_from_env() -> None:
    assert output_format_from_env({}) is None
    assert output_format_from_env({"PATTERNBOOK_FORMAT": "MD"}) is RenderFormat.MARKDOWN
    with pytest.raises(ConfigError):
        output_format_from_env({"PATTERNBOOK_FORMAT": "yaml"})


def test_boolean_flags_from_env() -> None:
    settings = RenderSettings.from_env({"PATTERNBOOK_NO_COLOR": "yes", "PATTERNBOOK_NO_EMOJI": "0"})

    assert settings.color is False
    assert settings.emoji is True


def test_invalid_boolean_literal() -> None:
    with pytest.raises(ConfigError):
        RenderSettings.from_env({"PATTERNBOOK_NO_COLOR": "maybe"})


def test_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATTERNBOOK_FORMAT", "json")

    assert RenderSettings.from_env().output_format is RenderFormat.JSON


def test_with_overrides_ignores_none() -> None:
    base = RenderSettings(output_format=RenderFormat.MARKDOWN)

    updated = base.with_overrides(output_format=None, color=False)

    assert updated.output_format is RenderFormat.MARKDOWN
    assert updated.color is False
    assert base.color is True


def test_with_overrides_parses_format_names() -> None:
    assert RenderSettings().with_overrides(output_format="JSON").output_format is RenderFormat.JSON
    with pytest.raises(ConfigError):
        RenderSettings().with_overrides(output_format="html")
    with pytest.raises(ConfigError):
        RenderSettings().with_overrides(theme="dark")
