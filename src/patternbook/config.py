# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render settings resolved from the environment and CLI flags."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict

FORMAT_ENV_VAR: Final[str] = "PATTERNBOOK_FORMAT"
NO_COLOR_ENV_VAR: Final[str] = "PATTERNBOOK_NO_COLOR"
NO_EMOJI_ENV_VAR: Final[str] = "PATTERNBOOK_NO_EMOJI"

TRUTHY_LITERALS: Final[set[str]] = {"1", "true", "yes", "on"}
FALSY_LITERALS: Final[set[str]] = {"0", "false", "no", "off", ""}


class ConfigError(ValueError):
    """Raised when configuration input is invalid."""


class RenderFormat(str, Enum):
    """Enumerate the output formats supported by the renderer."""

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"

    @classmethod
    def from_raw(cls, raw: str) -> RenderFormat:
        """Return the format matching ``raw``.

        Args:
            raw: Format name supplied by a user, case-insensitive.

        Returns:
            RenderFormat: Matching enum member.

        Raises:
            ConfigError: If ``raw`` names no supported format.
        """

        token = raw.strip().lower()
        if token == "md":
            return cls.MARKDOWN
        try:
            return cls(token)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ConfigError(f"Unsupported render format {raw!r} (expected one of: {allowed})") from exc


def coerce_bool_literal(value: str, *, key: str) -> bool:
    """Return the boolean represented by ``value``.

    Args:
        value: Raw string containing a boolean literal.
        key: Setting name used in error messages.

    Returns:
        bool: ``True`` for truthy literals, ``False`` for falsy literals.

    Raises:
        ConfigError: If ``value`` does not match a known boolean literal.
    """

    normalized = value.strip().lower()
    if normalized in TRUTHY_LITERALS:
        return True
    if normalized in FALSY_LITERALS:
        return False
    raise ConfigError(f"{key}: unsupported boolean literal {value!r}")


def output_format_from_env(env: Mapping[str, str] | None = None) -> RenderFormat | None:
    """Return the format named by ``PATTERNBOOK_FORMAT`` or ``None`` when unset.

    Raises:
        ConfigError: If the variable names an unsupported format.
    """

    source = os.environ if env is None else env
    raw_format = source.get(FORMAT_ENV_VAR)
    return RenderFormat.from_raw(raw_format) if raw_format else None


class RenderSettings(BaseModel):
    """Presentation preferences shared by the CLI commands."""

    model_config = ConfigDict(frozen=True)

    output_format: RenderFormat = RenderFormat.TEXT
    color: bool = True
    emoji: bool = True

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, *, include_format: bool = True) -> RenderSettings:
        """Return settings populated from ``PATTERNBOOK_*`` environment variables.

        Args:
            env: Environment mapping; defaults to :data:`os.environ`.
            include_format: Read ``PATTERNBOOK_FORMAT`` as well; commands that never
                render leave it unchecked.

        Returns:
            RenderSettings: Settings with environment overrides applied.

        Raises:
            ConfigError: If a variable holds an unsupported value.
        """

        source = os.environ if env is None else env
        values: dict[str, object] = {}
        if include_format and (output_format := output_format_from_env(source)) is not None:
            values["output_format"] = output_format
        if (raw_no_color := source.get(NO_COLOR_ENV_VAR)) is not None:
            values["color"] = not coerce_bool_literal(raw_no_color, key=NO_COLOR_ENV_VAR)
        if (raw_no_emoji := source.get(NO_EMOJI_ENV_VAR)) is not None:
            values["emoji"] = not coerce_bool_literal(raw_no_emoji, key=NO_EMOJI_ENV_VAR)
        return cls.model_validate(values)

    def with_overrides(self, **overrides: object) -> RenderSettings:
        """Return a copy with explicit overrides applied; ``None`` values are ignored."""

        updates = {key: value for key, value in overrides.items() if value is not None}
        unknown = set(updates) - set(type(self).model_fields)
        if unknown:
            raise ConfigError(f"Unknown render settings: {', '.join(sorted(unknown))}")
        raw_format = updates.get("output_format")
        if isinstance(raw_format, str) and not isinstance(raw_format, RenderFormat):
            updates["output_format"] = RenderFormat.from_raw(raw_format)
        return self.model_copy(update=updates)


__all__ = [
    "FORMAT_ENV_VAR",
    "NO_COLOR_ENV_VAR",
    "NO_EMOJI_ENV_VAR",
    "ConfigError",
    "RenderFormat",
    "RenderSettings",
    "coerce_bool_literal",
    "output_format_from_env",
]
