"""Table drawing.

``draw_table`` performs one complete render pass of a dataset into a window:
header row, visible rows, and the optional active-row expansion. ``Table``
wraps it as a pi-tui style component that renders to a list of lines.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from pi.table.arena import ScratchArena, scratch_arena
from pi.table.formatter import fit_to_width, format_cell
from pi.table.headers import clamp_active_column, resolve_headers, selected_fields
from pi.table.records import RecordAdapter
from pi.table.source import resolve_adapter, resolve_rows
from pi.table.state import TableState
from pi.table.style import Color, Segment, Style
from pi.table.surface import Screen, Window, center
from pi.table.unicode import visible_width
from pi.table.viewport import Viewport, compute_viewport
from pi.table.widths import column_width

logger = logging.getLogger(__name__)


def _header_bg(state: TableState, idx: int) -> Color:
    if state.active and idx == state.col:
        return state.theme.active_bg
    return state.theme.hdr_bg_1 if idx % 2 == 0 else state.theme.hdr_bg_2


def _row_bg(state: TableState, index: int, position: int) -> Color:
    """Active row, then selected rows, then alternating stripes."""
    if state.active and index == state.row:
        return state.theme.active_bg
    if state.is_selected(index):
        return state.theme.selected_bg
    return state.theme.row_bg_1 if position % 2 == 0 else state.theme.row_bg_2


def _draw_header(
    table_win: Window,
    headers: Sequence[str],
    state: TableState,
    arena: ScratchArena | None,
) -> None:
    col_start = 0
    for idx, text in enumerate(headers):
        width = column_width(idx, headers, state.col_width, table_win.width)
        bg = _header_bg(state, idx)
        hdr_win = table_win.child(col_start, 0, width, 1)
        col_start += width

        hdr_win.fill(Style(bg=bg))
        label_win = center(hdr_win, min(max(width - 1, 0), visible_width(text) + 1), 1)
        style = Style(
            bg=bg,
            bold=True,
            ul_style="single" if idx == state.col else "dotted",
        )
        label_win.print([Segment(fit_to_width(text, width, arena), style)], wrap="word")


def draw_table(
    win: Window,
    data: Any,
    state: TableState,
    arena: ScratchArena | None = None,
    adapter: RecordAdapter | None = None,
) -> Viewport:
    """Draw *data* into *win* according to *state*.

    *data* is a sequence of records or a ``ColumnarData``. *arena* should be
    scoped to this call and reset by the caller afterwards; without one,
    non-text values are shown as markers and long text is hard-cut.

    Updates ``state`` (scroll position, clamped row/column, expansion height)
    and returns the range of rows drawn. Errors propagate unchanged; whatever
    was drawn before the error stays on the surface.
    """
    rows = resolve_rows(data, arena)
    adapter = resolve_adapter(data, rows, adapter)
    headers = resolve_headers(adapter, state.header_names, state.col_indexes, state.max_columns)
    fields = selected_fields(adapter.field_names(), state.col_indexes) if adapter else []

    table_win = win.child(0, state.y_off, win.width, win.height)

    clamp_active_column(state, len(headers))
    _draw_header(table_win, headers, state, arena)

    viewport = compute_viewport(state, len(rows), table_win.height)
    for position, index in enumerate(viewport):
        record = rows[index]
        bg = _row_bg(state, index, position)
        row_y = 1 + position + state.active_y_off
        row_win = table_win.child(0, row_y, table_win.width, 1)

        if index == state.row and state.active_content_fn is not None:
            content_win = table_win.child(0, row_y + 1, table_win.width)
            extra = state.active_content_fn(content_win, state.active_ctx)
            logger.debug("Active row %d expanded by %d lines", index, extra)
            state.active_y_off = max(0, extra)

        col_start = 0
        cell_style = Style(bg=bg)
        for col, name in enumerate(fields):
            width = column_width(col, headers, state.col_width, table_win.width)
            cell_win = row_win.child(col_start, 0, width, 1)
            col_start += width

            text = format_cell(adapter.field_value(record, name), width, arena)
            cell_win.fill(cell_style)
            cell_win.print([Segment(text, cell_style)], wrap="word")

    return viewport


class Table:
    """A table component rendering a dataset into ``height`` terminal lines.

    With ``allocate`` (the default) each render runs inside a fresh scratch
    arena, so non-text values are formatted and long cells get an ellipsis.
    """

    def __init__(
        self,
        data: Any,
        state: TableState | None = None,
        height: int = 10,
        allocate: bool = True,
        adapter: RecordAdapter | None = None,
    ) -> None:
        self.state = state if state is not None else TableState()
        self._data = data
        self._height = height
        self._allocate = allocate
        self._adapter = adapter
        self.last_viewport: Viewport | None = None

    def set_data(self, data: Any, adapter: RecordAdapter | None = None) -> None:
        self._data = data
        self._adapter = adapter

    def set_height(self, height: int) -> None:
        self._height = height

    def invalidate(self) -> None:
        pass

    def render(self, width: int) -> list[str]:
        screen = Screen(width, self._height)
        if self._allocate:
            with scratch_arena() as arena:
                self.last_viewport = draw_table(
                    screen.window(), self._data, self.state, arena, self._adapter
                )
        else:
            self.last_viewport = draw_table(
                screen.window(), self._data, self.state, None, self._adapter
            )
        return screen.render()
