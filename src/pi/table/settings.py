"""Table configuration loaded from plain data (e.g. a JSON settings file).

All models accept snake_case names or their camelCase aliases.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pi.table.state import (
    AllColumns,
    ByIndex,
    ColumnIndexes,
    CustomHeaders,
    FieldNames,
    HeaderNames,
    TableState,
    TableTheme,
)
from pi.table.style import Color
from pi.table.widths import (
    DynamicFill,
    DynamicHeaderLength,
    StaticAll,
    StaticIndividual,
    WidthPolicy,
)

# "#rrggbb", [r, g, b], or a 256-color palette index
ColorValue = str | list[int] | int


def parse_color(value: ColorValue) -> Color:
    if isinstance(value, bool):
        raise ValueError(f"Invalid color: {value!r}")
    if isinstance(value, int):
        if not 0 <= value <= 255:
            raise ValueError(f"Palette index out of range: {value}")
        return Color.from_index(value)
    if isinstance(value, str):
        return Color.from_hex(value)
    if len(value) != 3 or any(not 0 <= c <= 255 for c in value):
        raise ValueError(f"Invalid RGB color: {value!r}")
    return Color.from_rgb(*value)


class ThemeSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    active_bg: ColorValue | None = Field(default=None, alias="activeBg")
    selected_bg: ColorValue | None = Field(default=None, alias="selectedBg")
    hdr_bg_1: ColorValue | None = Field(default=None, alias="hdrBg1")
    hdr_bg_2: ColorValue | None = Field(default=None, alias="hdrBg2")
    row_bg_1: ColorValue | None = Field(default=None, alias="rowBg1")
    row_bg_2: ColorValue | None = Field(default=None, alias="rowBg2")

    @field_validator("*")
    @classmethod
    def _check_color(cls, value: ColorValue | None) -> ColorValue | None:
        if value is not None:
            parse_color(value)
        return value

    def apply(self, theme: TableTheme) -> TableTheme:
        """Overwrite the colors that are set on *theme* and return it."""
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is not None:
                setattr(theme, name, parse_color(value))
        return theme


WidthKind = Literal["dynamic_fill", "dynamic_header_len", "static_all", "static_individual"]


class WidthSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: WidthKind = "dynamic_fill"
    padding: int = Field(default=0, ge=0)
    width: int | None = Field(default=None, ge=0)
    widths: list[int] | None = None

    @model_validator(mode="after")
    def _check_kind(self) -> WidthSettings:
        if self.kind == "static_all" and self.width is None:
            raise ValueError("static_all requires 'width'")
        if self.kind == "static_individual":
            if self.widths is None:
                raise ValueError("static_individual requires 'widths'")
            if any(w < 0 for w in self.widths):
                raise ValueError("widths must not be negative")
        return self

    def to_policy(self) -> WidthPolicy:
        if self.kind == "dynamic_header_len":
            return DynamicHeaderLength(self.padding)
        if self.kind == "static_all":
            return StaticAll(self.width or 0)
        if self.kind == "static_individual":
            return StaticIndividual(self.widths or [])
        return DynamicFill()


class TableSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    col_width: WidthSettings = Field(default_factory=WidthSettings, alias="colWidth")
    # None derives headers from field names.
    header_names: list[str] | None = Field(default=None, alias="headerNames")
    # None shows every field.
    columns: list[int] | None = None
    max_columns: int = Field(default=100, ge=1, alias="maxColumns")
    y_offset: int = Field(default=0, ge=0, alias="yOffset")
    theme: ThemeSettings = Field(default_factory=ThemeSettings)

    def header_policy(self) -> HeaderNames:
        if self.header_names is None:
            return FieldNames()
        return CustomHeaders(self.header_names)

    def column_policy(self) -> ColumnIndexes:
        if self.columns is None:
            return AllColumns()
        return ByIndex(sorted(set(self.columns)))

    def apply(self, state: TableState) -> TableState:
        """Copy the configured layout and colors onto *state* and return it.

        Scroll position, selection and callbacks are left untouched.
        """
        state.col_width = self.col_width.to_policy()
        state.header_names = self.header_policy()
        state.col_indexes = self.column_policy()
        state.max_columns = self.max_columns
        state.y_off = self.y_offset
        self.theme.apply(state.theme)
        return state

    def to_state(self, **overrides: Any) -> TableState:
        """Build a fresh ``TableState``; *overrides* set any other field."""
        return self.apply(TableState(**overrides))


def load_table_settings(path: str | Path) -> TableSettings:
    """Read ``TableSettings`` from a JSON file."""
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return TableSettings.model_validate(data)
