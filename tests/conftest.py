# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from optionkit import OptionKind

SAMPLE_VALUES: dict[OptionKind, object] = {
    OptionKind.UINT32: 7,
    OptionKind.UINT64: 2**40,
    OptionKind.INT32: -5,
    OptionKind.INT64: -(2**40),
    OptionKind.FLOAT: 0.5,
    OptionKind.BOOL: True,
    OptionKind.STRING: "abc",
    OptionKind.STRING_LIST: ["a", "b"],
}

ALTERNATE_VALUES: dict[OptionKind, object] = {
    OptionKind.UINT32: 8,
    OptionKind.UINT64: 3,
    OptionKind.INT32: 12,
    OptionKind.INT64: 0,
    OptionKind.FLOAT: 1.25,
    OptionKind.BOOL: False,
    OptionKind.STRING: "xyz",
    OptionKind.STRING_LIST: ["c"],
}


@pytest.fixture(params=list(OptionKind), ids=lambda kind: kind.name.lower())
def kind(request: pytest.FixtureRequest) -> OptionKind:
    """Yield every supported option kind."""
    return request.param


@pytest.fixture
def sample_value(kind: OptionKind) -> object:
    """Return a representative value for ``kind``."""
    return SAMPLE_VALUES[kind]


@pytest.fixture
def alternate_value(kind: OptionKind) -> object:
    """Return a second value for ``kind`` distinct from ``sample_value``."""
    return ALTERNATE_VALUES[kind]
