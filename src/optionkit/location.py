# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Write-back targets used by located options.

A target is a non-owning reference to storage that lives outside the option.
Located options only write into it during the initial add-and-parse pass, so
the storage only has to stay valid for that pass.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class WriteBackTarget(Protocol[T_contra]):
    """Define storage that receives the first parsed value of an option."""

    def store(self, value: T_contra) -> None:
        """Persist ``value`` into the external storage.

        Args:
            value: Value assigned to the option during the initial parse.
        """


@dataclass(slots=True)
class Location(Generic[T]):
    """Caller-owned cell receiving a located option's value."""

    value: T | None = None

    def store(self, value: T) -> None:
        """Replace the cell contents with ``value``."""

        self.value = value


@dataclass(slots=True, frozen=True)
class AttributeLocation:
    """Write-back target that assigns an attribute on an external object."""

    target: object
    attribute: str

    def store(self, value: object) -> None:
        """Assign ``value`` to ``target.attribute``."""

        setattr(self.target, self.attribute, value)


@dataclass(slots=True, frozen=True)
class ItemLocation:
    """Write-back target that assigns a key in an external mapping."""

    mapping: MutableMapping[str, object]
    key: str

    def store(self, value: object) -> None:
        """Assign ``value`` to ``mapping[key]``."""

        self.mapping[self.key] = value


__all__ = [
    "AttributeLocation",
    "ItemLocation",
    "Location",
    "WriteBackTarget",
]
