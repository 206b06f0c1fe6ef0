# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Fluent helpers for declaring typed options."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Generic, TypeVar

from .location import WriteBackTarget
from .model_option import LocatedOption, TypedOption
from .types import OptionKind

if TYPE_CHECKING:
    from typing import Self

T = TypeVar("T")


class OptionBuilder(Generic[T]):
    """Accumulate option metadata through chained calls."""

    def __init__(self, option: TypedOption[T]) -> None:
        self._option = option

    @property
    def name(self) -> str:
        """Return the name of the option being declared."""

        return self._option.name

    def help(self, text: str) -> Self:
        """Set the help text shown for the option."""

        self._option.help = text
        return self

    def short_name(self, short_name: str) -> Self:
        """Set the single-character alias of the option."""

        self._option.short_name = short_name
        return self

    def default_value(self, value: T) -> Self:
        """Set the fallback value used when none is supplied."""

        self._option.set_default_value(value)
        return self

    def keep(self, keep: bool = True) -> Self:
        """Mark the option as kept with saved state."""

        self._option.keep = keep
        return self

    def necessary(self, necessary: bool = True) -> Self:
        """Mark the option as required to enable its group."""

        self._option.necessary = necessary
        return self

    def allow_override(self, allow_override: bool = True) -> Self:
        """Allow later values to override an earlier one."""

        self._option.allow_override = allow_override
        return self

    def hidden(self, hidden: bool = True) -> Self:
        """Hide the option from generated help."""

        self._option.hidden_from_help = hidden
        return self

    def one_of(self, choices: Iterable[T]) -> Self:
        """Restrict the option to ``choices``."""

        self._option.set_one_of(choices)
        return self

    def build(self) -> TypedOption[T]:
        """Return the configured option."""

        return self._option


def make_option(
    name: str,
    kind: OptionKind,
    location: WriteBackTarget[T] | None = None,
) -> OptionBuilder[T]:
    """Start declaring an option named ``name`` holding ``kind`` values.

    Args:
        name: Option name, unique within the registry.
        kind: Value kind of the option.
        location: Optional storage receiving the value parsed for the option.

    Returns:
        OptionBuilder[T]: Builder wrapping a :class:`LocatedOption` when a
        location is provided, otherwise a :class:`TypedOption`.
    """

    option: TypedOption[T]
    if location is None:
        option = TypedOption(name, kind)
    else:
        option = LocatedOption(name, kind, location)
    return OptionBuilder(option)


__all__ = [
    "OptionBuilder",
    "make_option",
]
