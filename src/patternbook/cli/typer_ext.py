# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer helpers that list command options alphabetically in help output."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, TypeVar

import typer
from click.core import Context, Parameter
from typer.core import TyperCommand

ARGUMENT_PARAM_TYPE: Final[str] = "argument"

CommandCallback = TypeVar("CommandCallback", bound=Callable[..., Any])


def option_sort_key(param: Parameter) -> str:
    """Return the long option name (without dashes) used to order ``param``.

    Options without a long spelling fall back to their first declaration and
    then to the parameter name.
    """

    declared = [*getattr(param, "opts", ()), *getattr(param, "secondary_opts", ())]
    long_form = next((name for name in declared if name.startswith("--")), None)
    label = long_form or (declared[0] if declared else param.name or "")
    return label.lstrip("-").casefold()


class SortedTyperCommand(TyperCommand):
    """Typer command whose options appear in alphabetical order.

    Positional arguments keep their declared order so parsing is unaffected;
    both the plain and the rich help renderers read this ordering.
    """

    def get_params(self, ctx: Context) -> list[Parameter]:
        params = super().get_params(ctx)
        arguments = [param for param in params if param.param_type_name == ARGUMENT_PARAM_TYPE]
        options = [param for param in params if param.param_type_name != ARGUMENT_PARAM_TYPE]
        return arguments + sorted(options, key=option_sort_key)


class SortedTyper(typer.Typer):
    """Typer application registering commands as :class:`SortedTyperCommand`."""

    def command(
        self,
        name: str | None = None,
        *,
        cls: type[TyperCommand] | None = None,
        **kwargs: Any,
    ) -> Callable[[CommandCallback], CommandCallback]:
        """Return a decorator that registers a command with sorted option help."""

        return super().command(name, cls=cls or SortedTyperCommand, **kwargs)


def create_typer(**kwargs: Any) -> SortedTyper:
    """Return a :class:`SortedTyper` configured with ``kwargs``."""

    return SortedTyper(**kwargs)


__all__ = ["SortedTyper", "SortedTyperCommand", "create_typer", "option_sort_key"]
