# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models for option registry helpers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NameExtractorSettings(BaseModel):
    """Behavioural switches for :class:`~optionkit.name_extractor.OptionsNameExtractor`."""

    model_config = ConfigDict(validate_assignment=True)

    strict: bool = Field(
        default=False,
        description="Reject groups without a necessary option and repeated group names",
    )
    name_separator: str = Field(
        default="_",
        min_length=1,
        description="Separator joining necessary option names into the generated name",
    )


__all__ = ["NameExtractorSettings"]
