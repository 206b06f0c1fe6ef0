# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Custom exceptions raised by option descriptors and registries."""

from __future__ import annotations

from typing import Final


class OptionError(RuntimeError):
    """Base class for failures raised while declaring or reading options."""


class _OptionAccessError(OptionError):
    """Raised when a typed accessor is read before it was populated."""

    kind: str = ""

    def __init__(self, option_name: str, message: str) -> None:
        """Create the access error for ``option_name``.

        Args:
            option_name: Name of the option whose accessor failed.
            message: Human-readable explanation of the failure.
        """

        super().__init__(f"{self.kind}: option '{option_name}' {message}")
        self.option_name = option_name


class MissingValueError(_OptionAccessError):
    """Raised when ``value()`` is read before any value was assigned."""

    kind = "missing value"

    def __init__(self, option_name: str) -> None:
        super().__init__(
            option_name,
            "does not contain a value. Use value_supplied() to check if a value exists.",
        )


class MissingDefaultError(_OptionAccessError):
    """Raised when ``default_value()`` is read before a default was set."""

    kind = "missing default"

    def __init__(self, option_name: str) -> None:
        super().__init__(
            option_name,
            "does not contain a default value. Use default_value_supplied() to check if a default exists.",
        )


class OptionTypeError(OptionError, TypeError):
    """Raised when a value does not fit the value kind of an option."""


class OptionGroupError(OptionError):
    """Raised when an option group violates registry invariants."""


__all__: Final[tuple[str, ...]] = (
    "MissingDefaultError",
    "MissingValueError",
    "OptionError",
    "OptionGroupError",
    "OptionTypeError",
)
