# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Contract implemented by registries that consume option groups."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence, Set
from typing import Final

from .errors import OptionGroupError
from .model_group import OptionGroupDefinition


class OptionsRegistry(ABC):
    """Consume option groups and answer which options were supplied.

    Concrete registries parse real input; documentation helpers implement the
    same contract without consuming any tokens.
    """

    def add_and_parse(self, group: OptionGroupDefinition) -> None:
        """Register ``group`` and populate its options from the registry input."""

        self.internal_add_and_parse(group)

    def add_parse_and_check_necessary(self, group: OptionGroupDefinition) -> bool:
        """Register ``group`` and report whether all its necessary options were supplied.

        Args:
            group: Group declaring at least one necessary option.

        Returns:
            bool: ``True`` when every necessary option of ``group`` was supplied.

        Raises:
            OptionGroupError: If ``group`` declares no necessary option.
        """

        if not group.contains_necessary_options():
            raise OptionGroupError(f"group '{group.name}' must declare at least one necessary option")
        self.internal_add_and_parse(group)
        return all(self.was_supplied(option.name) for option in group.necessary_options())

    @abstractmethod
    def internal_add_and_parse(self, group: OptionGroupDefinition) -> None:
        """Register ``group`` with the registry."""

    @abstractmethod
    def was_supplied(self, name: str) -> bool:
        """Return whether the option ``name`` received a value from the input."""

    @abstractmethod
    def get_supplied_options(self) -> Set[str]:
        """Return the names of every option supplied in the input."""

    @abstractmethod
    def check_unregistered(self, logger: logging.Logger) -> None:
        """Report input names that no registered option claimed."""

    @abstractmethod
    def insert(self, key: str, value: str) -> None:
        """Add a raw ``key``/``value`` pair ahead of parsing."""

    @abstractmethod
    def replace(self, key: str, value: str) -> None:
        """Replace the raw value stored for ``key`` ahead of parsing."""

    @abstractmethod
    def get_positional_tokens(self) -> Sequence[str]:
        """Return the input tokens not attached to any flag."""


__all__: Final[tuple[str, ...]] = ("OptionsRegistry",)
