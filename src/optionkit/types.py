# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Value kinds and shared type aliases for typed options."""

from __future__ import annotations

from enum import Enum
from typing import Final, TypeAlias


class OptionKind(str, Enum):
    """Enumerate the closed set of value types an option may carry."""

    UINT32 = "uint32"
    UINT64 = "uint64"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    BOOL = "bool"
    STRING = "string"
    STRING_LIST = "list[str]"


OptionValue: TypeAlias = int | float | bool | str | list[str]

INTEGER_BOUNDS: Final[dict[OptionKind, tuple[int, int]]] = {
    OptionKind.UINT32: (0, 2**32 - 1),
    OptionKind.UINT64: (0, 2**64 - 1),
    OptionKind.INT32: (-(2**31), 2**31 - 1),
    OptionKind.INT64: (-(2**63), 2**63 - 1),
}

__all__ = [
    "INTEGER_BOUNDS",
    "OptionKind",
    "OptionValue",
]
