# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for recovering concrete option types through visitor dispatch."""

from __future__ import annotations

from typing import Any

import pytest

from optionkit import (
    BaseOption,
    ItemLocation,
    LocatedOption,
    Location,
    OptionBuilder,
    OptionKind,
    OptionSummaryVisitor,
    OptionVisitor,
    TypedOption,
    dispatch,
)

_VISIT_METHODS: dict[OptionKind, str] = {
    OptionKind.UINT32: "visit_uint32",
    OptionKind.UINT64: "visit_uint64",
    OptionKind.INT32: "visit_int32",
    OptionKind.INT64: "visit_int64",
    OptionKind.FLOAT: "visit_float",
    OptionKind.BOOL: "visit_bool",
    OptionKind.STRING: "visit_string",
    OptionKind.STRING_LIST: "visit_string_list",
}


class _RecordingVisitor(OptionVisitor):
    """Visitor recording every operation invoked on it."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, BaseOption]] = []

    def visit_uint32(self, option: TypedOption[int]) -> None:
        self.calls.append(("visit_uint32", option))

    def visit_uint64(self, option: TypedOption[int]) -> None:
        self.calls.append(("visit_uint64", option))

    def visit_int32(self, option: TypedOption[int]) -> None:
        self.calls.append(("visit_int32", option))

    def visit_int64(self, option: TypedOption[int]) -> None:
        self.calls.append(("visit_int64", option))

    def visit_float(self, option: TypedOption[float]) -> None:
        self.calls.append(("visit_float", option))

    def visit_bool(self, option: TypedOption[bool]) -> None:
        self.calls.append(("visit_bool", option))

    def visit_string(self, option: TypedOption[str]) -> None:
        self.calls.append(("visit_string", option))

    def visit_string_list(self, option: TypedOption[list[str]]) -> None:
        self.calls.append(("visit_string_list", option))


def test_visit_methods_cover_every_kind() -> None:
    assert set(_VISIT_METHODS) == set(OptionKind)
    for method in _VISIT_METHODS.values():
        assert callable(getattr(OptionVisitor, method))


def test_dispatch_invokes_only_matching_operation(kind: OptionKind) -> None:
    """Each option reaches exactly the visitor operation of its kind."""
    option: BaseOption = TypedOption("visited", kind)
    visitor = _RecordingVisitor()

    option.accept(visitor)

    assert visitor.calls == [(_VISIT_METHODS[kind], option)]


def test_single_override_visitor(kind: OptionKind) -> None:
    """A visitor overriding one operation relies on no-op defaults for the rest."""
    hits: list[TypedOption[Any]] = []
    visitor_cls = type(
        "SingleKindVisitor",
        (OptionVisitor,),
        {_VISIT_METHODS[kind]: lambda self, option: hits.append(option)},
    )
    handles: list[BaseOption] = [TypedOption(f"opt-{other.value}", other) for other in OptionKind]

    for handle in handles:
        dispatch(handle, visitor_cls())

    assert [hit.type_tag for hit in hits] == [kind]


def test_located_options_dispatch_like_typed_options() -> None:
    visitor = _RecordingVisitor()
    option = LocatedOption("passes", OptionKind.UINT64, Location())

    dispatch(option, visitor)

    assert visitor.calls == [("visit_uint64", option)]


def test_string_special_casing_without_casts() -> None:
    """A consumer can special-case string options from heterogeneous handles."""

    class _StringDefaults(OptionVisitor):
        def __init__(self) -> None:
            self.defaults: dict[str, str] = {}

        def visit_string(self, option: TypedOption[str]) -> None:
            if option.default_value_supplied():
                self.defaults[option.name] = option.default_value()

    data: TypedOption[str] = TypedOption("data", OptionKind.STRING)
    data.set_default_value("train.txt")
    passes: TypedOption[int] = TypedOption("passes", OptionKind.UINT32)
    passes.set_default_value(1)
    collector = _StringDefaults()

    for handle in (data, passes):
        handle.accept(collector)

    assert collector.defaults == {"data": "train.txt"}


@pytest.mark.parametrize(
    ("kind", "default", "choices", "expected_default", "expected_choices"),
    [
        (OptionKind.BOOL, True, (), "true", ()),
        (OptionKind.INT32, 32, (64, 16), "32", ("16", "64")),
        (OptionKind.STRING_LIST, ["a", "b"], (), "a b", ()),
    ],
)
def test_summary_visitor_describes_options(
    kind: OptionKind,
    default: object,
    choices: tuple[object, ...],
    expected_default: str,
    expected_choices: tuple[str, ...],
) -> None:
    option: TypedOption[Any] = TypedOption("described", kind)
    option.help = "A described option"
    option.necessary = True
    option.set_default_value(default)
    option.set_one_of(choices)
    visitor = OptionSummaryVisitor()

    option.accept(visitor)

    [summary] = visitor.summaries
    assert summary.name == "described"
    assert summary.kind is kind
    assert summary.help == "A described option"
    assert summary.necessary
    assert summary.default == expected_default
    assert summary.choices == expected_choices


def test_summary_without_default() -> None:
    visitor = OptionSummaryVisitor()
    TypedOption("plain", OptionKind.FLOAT).accept(visitor)

    assert visitor.summaries[0].default is None


def test_builder_and_visitor_operations_are_documented() -> None:
    for method in _VISIT_METHODS.values():
        assert getattr(OptionVisitor, method).__doc__
    for method in ("help", "short_name", "default_value", "keep", "necessary", "allow_override", "hidden", "one_of"):
        assert getattr(OptionBuilder, method).__doc__
    assert ItemLocation.store.__doc__
