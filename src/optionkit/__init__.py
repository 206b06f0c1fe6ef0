# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Typed, type-erased option descriptors for command-line and config registries."""

from __future__ import annotations

from typing import Final

from .builder import OptionBuilder, make_option
from .config import NameExtractorSettings
from .errors import (
    MissingDefaultError,
    MissingValueError,
    OptionError,
    OptionGroupError,
    OptionTypeError,
)
from .interfaces import OptionsRegistry
from .location import AttributeLocation, ItemLocation, Location, WriteBackTarget
from .model_group import OptionGroupDefinition
from .model_option import BaseOption, LocatedOption, TypedOption
from .name_extractor import OptionsNameExtractor
from .types import OptionKind, OptionValue
from .visitor import OptionSummary, OptionSummaryVisitor, OptionVisitor, dispatch

__all__: Final[tuple[str, ...]] = (
    "AttributeLocation",
    "BaseOption",
    "ItemLocation",
    "LocatedOption",
    "Location",
    "MissingDefaultError",
    "MissingValueError",
    "NameExtractorSettings",
    "OptionBuilder",
    "OptionError",
    "OptionGroupDefinition",
    "OptionGroupError",
    "OptionKind",
    "OptionSummary",
    "OptionSummaryVisitor",
    "OptionTypeError",
    "OptionValue",
    "OptionVisitor",
    "OptionsNameExtractor",
    "OptionsRegistry",
    "TypedOption",
    "WriteBackTarget",
    "dispatch",
    "make_option",
)
