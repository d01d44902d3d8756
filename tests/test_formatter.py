"""Tests for cell value formatting and truncation."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple

from pi.table.arena import ScratchArena
from pi.table.formatter import (
    ValueKind,
    classify,
    fit_to_width,
    format_cell,
    format_value,
)
from pi.table.unicode import visible_width

from .helpers import Status, Task


class Priority(str, enum.Enum):
    LOW = "low"
    HIGH = "high"


@dataclass
class Point:
    x: int
    y: int


class Pair(NamedTuple):
    left: str
    right: str


class TestClassify:
    def test_kinds(self) -> None:
        assert classify("x") is ValueKind.TEXT
        assert classify(["a", "b"]) is ValueKind.TEXT_LIST
        assert classify(("a",)) is ValueKind.TEXT_LIST
        assert classify(Status.OPEN) is ValueKind.ENUM
        assert classify(None) is ValueKind.OPTIONAL
        assert classify(3) is ValueKind.OTHER
        assert classify([1, 2]) is ValueKind.OTHER

    def test_str_enum_is_an_enum(self) -> None:
        assert classify(Priority.HIGH) is ValueKind.ENUM

    def test_named_tuple_of_strings_is_not_a_list(self) -> None:
        assert classify(Pair("a", "b")) is ValueKind.OTHER


class TestFormatWithoutArena:
    """Only text that already exists is shown."""

    def test_string_passes_through(self) -> None:
        assert format_value("hello") == "hello"

    def test_enum_shows_name(self) -> None:
        assert format_value(Status.DONE) == "DONE"
        assert format_value(Priority.LOW) == "LOW"

    def test_none_shows_dash(self) -> None:
        assert format_value(None) == "-"

    def test_string_list_is_unsupported(self) -> None:
        assert format_value(["a", "b"]) == "[unsupported (list)]"

    def test_other_is_unsupported(self) -> None:
        assert format_value(42) == "[unsupported (int)]"
        assert format_value(Point(1, 2)) == "[unsupported (Point)]"


class TestFormatWithArena:
    """Values are rendered into new text owned by the arena."""

    def test_string_list_joined(self, arena: ScratchArena) -> None:
        assert format_value(["a", "b", "c"], arena) == "a, b, c"

    def test_empty_string_list(self, arena: ScratchArena) -> None:
        assert format_value([], arena) == ""

    def test_numbers(self, arena: ScratchArena) -> None:
        assert format_value(42, arena) == "42"
        assert format_value(1.5, arena) == "1.5"
        assert format_value(True, arena) == "True"

    def test_structure_uses_repr(self, arena: ScratchArena) -> None:
        assert format_value(Point(1, 2), arena) == "Point(x=1, y=2)"

    def test_built_text_is_held_by_arena(self, arena: ScratchArena) -> None:
        format_value(["a"], arena)
        format_value(7, arena)
        assert len(arena) == 2

    def test_existing_text_is_not_copied(self, arena: ScratchArena) -> None:
        format_value("plain", arena)
        format_value(Status.OPEN, arena)
        format_value(None, arena)
        assert len(arena) == 0


class TestOptional:
    """``None`` is absent; a present value formats like the value itself."""

    def test_present_value_matches_direct_formatting(self, arena: ScratchArena) -> None:
        owned = Task(id="t1", title="x", owner="ann")
        assert format_value(owned.owner, arena) == format_value("ann", arena) == "ann"
        assert format_value(owned.owner) == "ann"

    def test_present_non_text_follows_arena_rule(self, arena: ScratchArena) -> None:
        values: list[int | None] = [5, None]
        assert [format_value(v, arena) for v in values] == ["5", "-"]
        assert [format_value(v) for v in values] == ["[unsupported (int)]", "-"]

    def test_absent_in_both_modes(self, arena: ScratchArena) -> None:
        assert format_value(None) == "-"
        assert format_value(None, arena) == "-"


class TestTruncation:
    """Text wider than the column is shortened."""

    def test_fitting_text_unchanged(self, arena: ScratchArena) -> None:
        assert fit_to_width("abc", 3, arena) == "abc"

    def test_ellipsis_with_arena(self, arena: ScratchArena) -> None:
        assert fit_to_width("abcdefghij", 8, arena) == "abcd..."

    def test_hard_cut_without_arena(self) -> None:
        text = fit_to_width("abcdefghij", 8)
        assert text == "abcdefgh"
        assert "..." not in text

    def test_wide_text_with_arena(self, arena: ScratchArena) -> None:
        text = fit_to_width("世界世界世界", 8, arena)
        assert text == "世界..."
        assert visible_width(text) == 7

    def test_wide_text_without_arena(self) -> None:
        text = fit_to_width("世界世界世界", 7)
        assert text == "世界世"
        assert visible_width(text) == 6

    def test_narrow_column_with_arena(self, arena: ScratchArena) -> None:
        assert fit_to_width("abcdef", 3, arena) == "..."

    def test_format_cell_combines_both_steps(self, arena: ScratchArena) -> None:
        assert format_cell(["alpha", "beta", "gamma"], 10, arena) == "alpha,..."
        assert format_cell(["alpha", "beta"], 10) == "[unsupport"
