# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Visitor dispatch recovering the concrete option type from a base handle."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final

from pydantic import BaseModel, ConfigDict, Field

from .types import OptionKind

if TYPE_CHECKING:
    from .model_option import BaseOption, TypedOption


class OptionVisitor:
    """Receive typed options, one operation per supported value kind.

    Every operation is a no-op by default so subclasses override only the
    kinds they care about.
    """

    def visit_uint32(self, option: TypedOption[int]) -> None:
        """Receive an option holding unsigned 32-bit integer values."""

        del option

    def visit_uint64(self, option: TypedOption[int]) -> None:
        """Receive an option holding unsigned 64-bit integer values."""

        del option

    def visit_int32(self, option: TypedOption[int]) -> None:
        """Receive an option holding signed 32-bit integer values."""

        del option

    def visit_int64(self, option: TypedOption[int]) -> None:
        """Receive an option holding signed 64-bit integer values."""

        del option

    def visit_float(self, option: TypedOption[float]) -> None:
        """Receive an option holding floating-point values."""

        del option

    def visit_bool(self, option: TypedOption[bool]) -> None:
        """Receive an option holding boolean values."""

        del option

    def visit_string(self, option: TypedOption[str]) -> None:
        """Receive an option holding string values."""

        del option

    def visit_string_list(self, option: TypedOption[list[str]]) -> None:
        """Receive an option holding string list values."""

        del option


def dispatch(option: BaseOption, visitor: OptionVisitor) -> None:
    """Hand ``option`` to the visitor operation matching its value kind."""

    option.accept(visitor)


class OptionSummary(BaseModel):
    """Documentation record describing a declared option."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: OptionKind
    help: str = ""
    short_name: str = ""
    necessary: bool = False
    keep: bool = False
    hidden: bool = False
    default: str | None = None
    choices: tuple[str, ...] = Field(default_factory=tuple)


class OptionSummaryVisitor(OptionVisitor):
    """Collect an :class:`OptionSummary` for every visited option."""

    def __init__(self) -> None:
        self.summaries: list[OptionSummary] = []

    def visit_uint32(self, option: TypedOption[int]) -> None:
        self._record(option)

    def visit_uint64(self, option: TypedOption[int]) -> None:
        self._record(option)

    def visit_int32(self, option: TypedOption[int]) -> None:
        self._record(option)

    def visit_int64(self, option: TypedOption[int]) -> None:
        self._record(option)

    def visit_float(self, option: TypedOption[float]) -> None:
        self._record(option)

    def visit_bool(self, option: TypedOption[bool]) -> None:
        self._record(option)

    def visit_string(self, option: TypedOption[str]) -> None:
        self._record(option)

    def visit_string_list(self, option: TypedOption[list[str]]) -> None:
        self._record(option)

    def _record(self, option: TypedOption[Any]) -> None:
        default = _format(option.default_value()) if option.default_value_supplied() else None
        choices = tuple(sorted(_format(choice) for choice in option.one_of()))
        self.summaries.append(
            OptionSummary(
                name=option.name,
                kind=option.type_tag,
                help=option.help,
                short_name=option.short_name,
                necessary=option.necessary,
                keep=option.keep,
                hidden=option.hidden_from_help,
                default=default,
                choices=choices,
            ),
        )


def _format(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return " ".join(str(item) for item in value)
    return str(value)


__all__: Final[tuple[str, ...]] = (
    "OptionSummary",
    "OptionSummaryVisitor",
    "OptionVisitor",
    "dispatch",
)
