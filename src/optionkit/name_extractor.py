# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Registry stand-in that harvests option names for documentation."""

from __future__ import annotations

import logging
from collections.abc import Sequence, Set
from typing import Final

from .config import NameExtractorSettings
from .errors import OptionGroupError
from .interfaces import OptionsRegistry
from .model_group import OptionGroupDefinition
from .visitor import OptionSummary, OptionSummaryVisitor

LOGGER = logging.getLogger(__name__)


class OptionsNameExtractor(OptionsRegistry):
    """Record the names a registry would generate without parsing any input.

    Nothing is ever marked as supplied; the extractor only accumulates the
    option names, group names and per-group generated names it is shown.
    """

    def __init__(self, settings: NameExtractorSettings | None = None) -> None:
        self.settings = settings or NameExtractorSettings()
        self.generated_name = ""
        self.generated_names: set[str] = set()
        self.added_group_names: set[str] = set()
        self.summaries: dict[str, OptionSummary] = {}
        self._supplied: frozenset[str] = frozenset()

    def internal_add_and_parse(self, group: OptionGroupDefinition) -> None:
        """Record the names declared by ``group``.

        Args:
            group: Option group reported by the caller.

        Raises:
            OptionGroupError: In strict mode, when ``group`` has no necessary
                option or its name was already registered.
        """

        if self.settings.strict:
            if not group.contains_necessary_options():
                raise OptionGroupError(f"group '{group.name}' must declare at least one necessary option")
            if group.name in self.added_group_names:
                raise OptionGroupError(f"repeated option group name: {group.name}")
        self.added_group_names.add(group.name)

        self.generated_name = self.settings.name_separator.join(
            option.name for option in group.necessary_options()
        )
        visitor = OptionSummaryVisitor()
        for option in group.options:
            self.generated_names.add(option.name)
            option.accept(visitor)
        for summary in visitor.summaries:
            self.summaries.setdefault(summary.name, summary)
        LOGGER.debug(
            "extracted %d option name(s) from group %r (generated name %r)",
            len(group.options),
            group.name,
            self.generated_name,
        )

    def was_supplied(self, name: str) -> bool:
        del name
        return False

    def get_supplied_options(self) -> Set[str]:
        return self._supplied

    def check_unregistered(self, logger: logging.Logger) -> None:
        del logger

    def insert(self, key: str, value: str) -> None:
        del key, value

    def replace(self, key: str, value: str) -> None:
        del key, value

    def get_positional_tokens(self) -> Sequence[str]:
        return ()


__all__: Final[tuple[str, ...]] = ("OptionsNameExtractor",)
