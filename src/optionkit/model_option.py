# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Type-erased option descriptors and their typed specialisations."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, Final, Generic, TypeVar, assert_never, cast, overload

from .errors import MissingDefaultError, MissingValueError, OptionError, OptionTypeError
from .location import WriteBackTarget
from .types import INTEGER_BOUNDS, OptionKind

if TYPE_CHECKING:
    from typing import Self

    from .visitor import OptionVisitor

T = TypeVar("T")

_UNSET: Final = object()


class BaseOption(ABC):
    """Homogeneous handle shared by every option regardless of value kind.

    The handle exposes identity and display metadata only. Callers that need
    the concrete value type recover it through :meth:`accept`.
    """

    def __init__(self, name: str, kind: OptionKind) -> None:
        """Create the option handle.

        Args:
            name: Stable option identifier, unique within a registry.
            kind: Value kind compiled into the concrete option.

        Raises:
            OptionError: If ``name`` is empty.
        """

        if not isinstance(name, str) or not name:
            raise OptionError("option name must be a non-empty string")
        self._name = name
        self._kind = OptionKind(kind)
        self.help = ""
        self.short_name = ""
        self.keep = False
        self.necessary = False
        self.allow_override = False
        self.hidden_from_help = False
        self.one_of_error = ""

    @property
    def name(self) -> str:
        """Return the immutable option name."""

        return self._name

    @property
    def type_tag(self) -> OptionKind:
        """Return the value kind identifying the concrete option type."""

        return self._kind

    @abstractmethod
    def accept(self, visitor: OptionVisitor) -> None:
        """Invoke the one visitor operation matching this option's value kind.

        Args:
            visitor: Visitor receiving the concrete option.
        """

    def _metadata_key(self) -> tuple[object, ...]:
        return (
            self._name,
            self._kind,
            self.help,
            self.short_name,
            self.keep,
            self.necessary,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseOption):
            return NotImplemented
        return self._metadata_key() == other._metadata_key()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, kind={self._kind.value!r})"


class TypedOption(BaseOption, Generic[T]):
    """Option carrying a concrete value kind, default, and allowed choices."""

    def __init__(self, name: str, kind: OptionKind) -> None:
        super().__init__(name, kind)
        self._value: T | None = None
        self._default_value: T | None = None
        self._one_of: frozenset[object] = frozenset()

    def set_default_value(self, value: T) -> None:
        """Store ``value`` as the option default, replacing any previous one.

        Raises:
            OptionTypeError: If ``value`` does not fit the option kind.
        """

        self._default_value = self._coerce(value)

    def default_value_supplied(self) -> bool:
        """Return ``True`` when a default value has been set."""

        return self._default_value is not None

    def default_value(self) -> T:
        """Return the stored default value.

        Returns:
            T: Default value recorded by :meth:`set_default_value`.

        Raises:
            MissingDefaultError: If no default was ever set.
        """

        if self._default_value is None:
            raise MissingDefaultError(self._name)
        return _copy_value(self._default_value)

    def value_supplied(self) -> bool:
        """Return ``True`` when a value has been explicitly assigned."""

        return self._value is not None

    @overload
    def value(self) -> T: ...

    @overload
    def value(self, new_value: T, /, from_initial_parse: bool = False) -> Self: ...

    def value(self, new_value: object = _UNSET, /, from_initial_parse: bool | None = None) -> object:
        """Read the stored value, or assign ``new_value`` when one is given.

        Args:
            new_value: Value to assign. Omit it to read the current value.
            from_initial_parse: ``True`` only when called from the registry's
                initial add-and-parse pass.

        Returns:
            object: The stored value when reading, otherwise the option itself.

        Raises:
            MissingValueError: If reading before any value was assigned.
            OptionError: If ``from_initial_parse`` is given without a value.
            OptionTypeError: If ``new_value`` does not fit the option kind.
        """

        if new_value is _UNSET:
            if from_initial_parse is not None:
                raise OptionError(f"option '{self._name}': from_initial_parse requires a value to assign")
            if self._value is None:
                raise MissingValueError(self._name)
            return _copy_value(self._value)
        return self.set_value(cast(T, new_value), from_initial_parse=bool(from_initial_parse))

    def set_value(self, value: T, *, from_initial_parse: bool = False) -> Self:
        """Assign ``value`` and record a choice violation when applicable.

        The value is stored even when it falls outside :meth:`one_of`; the
        violation is only reported through ``one_of_error``.

        Args:
            value: New option value.
            from_initial_parse: ``True`` only when called from the registry's
                initial add-and-parse pass.

        Returns:
            Self: The option, for chained configuration.

        Raises:
            OptionTypeError: If ``value`` does not fit the option kind.
        """

        coerced = self._coerce(value)
        self._value = coerced
        self._on_value_set(_copy_value(coerced), from_initial_parse)
        if self._one_of and not self.is_valid_choice(coerced):
            self.one_of_error = self.choice_error(coerced)
        return self

    def set_one_of(self, choices: Iterable[T]) -> None:
        """Replace the allowed choices; an empty iterable removes the constraint.

        A value stored before the call is not re-validated.
        """

        self._one_of = frozenset(_choice_key(self._coerce(choice)) for choice in choices)

    def one_of(self) -> frozenset[object]:
        """Return the allowed choices; ``STRING_LIST`` choices are tuples.

        Use :meth:`is_valid_choice` to test a value read from :meth:`value`.
        """

        return self._one_of

    def is_valid_choice(self, value: T) -> bool:
        """Return ``True`` when ``value`` satisfies the allowed choices.

        An empty choice set accepts every value. List values are compared
        against the tuple form stored by :meth:`set_one_of`, and a NaN value
        matches a NaN choice.

        Raises:
            OptionTypeError: If ``value`` does not fit the option kind.
        """

        if not self._one_of:
            return True
        key = _choice_key(self._coerce(value))
        if key in self._one_of:
            return True
        return _is_nan(key) and any(_is_nan(choice) for choice in self._one_of)

    def choice_error(self, value: T) -> str:
        """Return the message describing ``value`` as an invalid choice."""

        choices = ", ".join(_render(choice) for choice in sorted(cast("Iterable[Any]", self._one_of)))
        return (
            f"Error: '{_render(value)}' is not a valid choice for option --{self._name}. "
            f"Please select from {{{choices}}}"
        )

    def accept(self, visitor: OptionVisitor) -> None:
        match self._kind:
            case OptionKind.UINT32:
                visitor.visit_uint32(cast("TypedOption[int]", self))
            case OptionKind.UINT64:
                visitor.visit_uint64(cast("TypedOption[int]", self))
            case OptionKind.INT32:
                visitor.visit_int32(cast("TypedOption[int]", self))
            case OptionKind.INT64:
                visitor.visit_int64(cast("TypedOption[int]", self))
            case OptionKind.FLOAT:
                visitor.visit_float(cast("TypedOption[float]", self))
            case OptionKind.BOOL:
                visitor.visit_bool(cast("TypedOption[bool]", self))
            case OptionKind.STRING:
                visitor.visit_string(cast("TypedOption[str]", self))
            case OptionKind.STRING_LIST:
                visitor.visit_string_list(cast("TypedOption[list[str]]", self))
            case _:
                assert_never(self._kind)

    def _on_value_set(self, value: T, from_initial_parse: bool) -> None:
        """Hook invoked after every assignment. No-op by default."""

        del value, from_initial_parse

    def _coerce(self, value: object) -> T:
        return cast(T, coerce_value(self._kind, value, option_name=self._name))

    def _metadata_key(self) -> tuple[object, ...]:
        default = _choice_key(self._default_value) if self._default_value is not None else None
        return (*super()._metadata_key(), default)


class LocatedOption(TypedOption[T]):
    """Typed option that writes its first parsed value into external storage.

    Only assignments made with ``from_initial_parse=True`` reach the target;
    later programmatic assignments leave it untouched.
    """

    def __init__(self, name: str, kind: OptionKind, location: WriteBackTarget[T] | None) -> None:
        super().__init__(name, kind)
        self._location = location

    @property
    def location(self) -> WriteBackTarget[T] | None:
        """Return the non-owning write-back target."""

        return self._location

    def _on_value_set(self, value: T, from_initial_parse: bool) -> None:
        if self._location is not None and from_initial_parse:
            self._location.store(value)


def coerce_value(kind: OptionKind, value: object, *, option_name: str) -> object:
    """Return ``value`` normalised for ``kind`` or raise a type error.

    Args:
        kind: Value kind of the receiving option.
        value: Candidate value supplied by the caller.
        option_name: Option name used in error messages.

    Returns:
        object: The value as stored by an option of ``kind``.

    Raises:
        OptionTypeError: If ``value`` cannot be stored by an option of ``kind``.
    """

    match kind:
        case OptionKind.UINT32 | OptionKind.UINT64 | OptionKind.INT32 | OptionKind.INT64:
            if isinstance(value, bool) or not isinstance(value, int):
                raise OptionTypeError(_type_message(option_name, kind, value))
            low, high = INTEGER_BOUNDS[kind]
            if not low <= value <= high:
                raise OptionTypeError(f"option '{option_name}': {value} is out of range for {kind.value}")
            return value
        case OptionKind.FLOAT:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise OptionTypeError(_type_message(option_name, kind, value))
            try:
                return float(value)
            except OverflowError as exc:
                raise OptionTypeError(f"option '{option_name}': {value} is out of range for {kind.value}") from exc
        case OptionKind.BOOL:
            if not isinstance(value, bool):
                raise OptionTypeError(_type_message(option_name, kind, value))
            return value
        case OptionKind.STRING:
            if not isinstance(value, str):
                raise OptionTypeError(_type_message(option_name, kind, value))
            return value
        case OptionKind.STRING_LIST:
            if (
                not isinstance(value, Sequence)
                or isinstance(value, (str, bytes, bytearray))
                or not all(isinstance(item, str) for item in value)
            ):
                raise OptionTypeError(_type_message(option_name, kind, value))
            return list(value)
        case _:
            assert_never(kind)


def _type_message(option_name: str, kind: OptionKind, value: object) -> str:
    return f"option '{option_name}' expects a {kind.value} value, got {type(value).__name__}"


def _copy_value(value: T) -> T:
    if isinstance(value, list):
        return cast(T, list(value))
    return value


def _is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def _choice_key(value: object) -> object:
    if isinstance(value, list):
        return tuple(value)
    return value


def _render(value: object) -> str:
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(str(item) for item in value) + "]"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


__all__ = [
    "BaseOption",
    "LocatedOption",
    "TypedOption",
    "coerce_value",
]
