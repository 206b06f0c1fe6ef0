# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Named groups of options registered together."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Final

from .builder import OptionBuilder
from .model_option import BaseOption, TypedOption

if TYPE_CHECKING:
    from typing import Self


class OptionGroupDefinition:
    """Ordered collection of option handles sharing a help heading."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.options: list[BaseOption] = []

    def add(self, option: BaseOption | OptionBuilder[Any]) -> Self:
        """Append ``option`` to the group.

        Args:
            option: Option handle, or a builder whose option is appended.

        Returns:
            Self: The group, for chained declarations.
        """

        if isinstance(option, OptionBuilder):
            option = option.build()
        self.options.append(option)
        return self

    def __iter__(self) -> Iterator[BaseOption]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def necessary_options(self) -> tuple[BaseOption, ...]:
        """Return the options flagged as necessary, in declaration order."""

        return tuple(option for option in self.options if option.necessary)

    def contains_necessary_options(self) -> bool:
        return any(option.necessary for option in self.options)

    def check_one_of(self) -> tuple[str, ...]:
        """Return the choice violations recorded by the group's options."""

        return tuple(
            option.one_of_error
            for option in self.options
            if isinstance(option, TypedOption) and option.one_of_error
        )


__all__: Final[tuple[str, ...]] = ("OptionGroupDefinition",)
