"""Table state, theme, and header/column selection policies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Sequence, Union

from pi.table.style import Color
from pi.table.widths import DynamicFill, WidthPolicy

if TYPE_CHECKING:
    from pi.table.surface import Window


ActiveContentFn = Callable[["Window", Any], int]
"""Draws extra detail below the active row and returns the lines it used."""


# ---------------------------------------------------------------------------
# Header names / column selection
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldNames:
    """Use record field names as headers."""


@dataclass(frozen=True)
class CustomHeaders:
    """Use these header strings verbatim."""

    names: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))


HeaderNames = Union[FieldNames, CustomHeaders]


@dataclass(frozen=True)
class AllColumns:
    """Show every field."""


@dataclass(frozen=True)
class ByIndex:
    """Show only the fields at these positions, in field order."""

    indexes: Sequence[int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "indexes", tuple(self.indexes))

    def __contains__(self, index: int) -> bool:
        return index in self.indexes


ColumnIndexes = Union[AllColumns, ByIndex]


# ---------------------------------------------------------------------------
# Theme
# ---------------------------------------------------------------------------


@dataclass
class TableTheme:
    """Background colors used by the table."""

    # Active row and the active column's header.
    active_bg: Color = field(default_factory=lambda: Color.from_rgb(64, 96, 160))
    # Rows listed in ``TableState.selected_rows``.
    selected_bg: Color = field(default_factory=lambda: Color.from_rgb(72, 48, 96))
    hdr_bg_1: Color = field(default_factory=lambda: Color.from_rgb(64, 64, 64))
    hdr_bg_2: Color = field(default_factory=lambda: Color.from_rgb(8, 8, 24))
    row_bg_1: Color = field(default_factory=lambda: Color.from_rgb(32, 32, 32))
    row_bg_2: Color = field(default_factory=lambda: Color.from_rgb(8, 8, 8))


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------


@dataclass
class TableState:
    """Mutable state of one table, kept by the caller across draws.

    ``row``/``col`` is the focused cell and ``start`` the first visible
    row. ``active_y_off`` is written by each draw with the number of lines
    the active-content callback used, and read by the next draw to make
    room for them.
    """

    row: int = 0
    col: int = 0
    start: int = 0
    selected_rows: set[int] | None = None

    active: bool = False
    active_content_fn: ActiveContentFn | None = None
    active_ctx: Any = None
    active_y_off: int = 0

    theme: TableTheme = field(default_factory=TableTheme)
    # Vertical offset of the table inside the parent window.
    y_off: int = 0

    col_width: WidthPolicy = field(default_factory=DynamicFill)
    header_names: HeaderNames = field(default_factory=FieldNames)
    col_indexes: ColumnIndexes = field(default_factory=AllColumns)
    max_columns: int = 100

    def is_selected(self, index: int) -> bool:
        return self.selected_rows is not None and index in self.selected_rows

    def toggle_selected(self, index: int) -> None:
        if self.selected_rows is None:
            self.selected_rows = set()
        if index in self.selected_rows:
            self.selected_rows.discard(index)
        else:
            self.selected_rows.add(index)
