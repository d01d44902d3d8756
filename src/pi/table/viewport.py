"""Scrolling: which rows are visible in the current draw.

The state lives on ``TableState`` as ``(start, row, active_y_off)``. The
active row may be expanded by a callback that draws extra lines below it;
how many lines is only known after the callback has run mid-draw, so each
draw reserves room for the height reported by the *previous* draw. A change
in expansion height therefore settles one frame later.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from pi.table.state import TableState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """The half-open range ``[start, end)`` of dataset rows to draw."""

    start: int
    end: int

    def __len__(self) -> int:
        return max(0, self.end - self.start)

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.end))

    def __contains__(self, index: int) -> bool:
        return self.start <= index < self.end


def _window_end(start: int, max_items: int, row: int, extra: int, total: int) -> int:
    end = start + max_items
    if row + extra >= max(end - 1, 0):
        end = max(end - extra, 0)
    return min(end, total)


def compute_viewport(state: TableState, total: int, surface_height: int) -> Viewport:
    """Update ``state.start``/``state.row`` and return the rows to draw.

    Leaves ``state.active_y_off`` at 0; the draw writes the new expansion
    height once the callback has run.
    """
    if state.active_content_fn is None:
        state.active_y_off = 0

    if total == 0:
        state.start = 0
        state.active_y_off = 0
        return Viewport(0, 0)

    capacity = max(surface_height - 1, 0)
    max_items = min(capacity, total)
    # An expansion taller than the window cannot be shown with its row;
    # reserve at most all but one line for it.
    extra = min(state.active_y_off, max(max_items - 1, 0))

    end = _window_end(state.start, max_items, state.row, extra, total)

    previous = state.start
    if state.row <= 0:
        state.row = 0
        state.start = 0
    else:
        # The dataset may have shrunk since the last draw.
        state.row = min(state.row, total - 1)
        if state.row < state.start:
            state.start = state.row
        elif state.row >= end:
            state.start += state.row - end + 1

    if state.start != previous:
        logger.debug("Scrolled table from row %d to row %d", previous, state.start)

    end = _window_end(state.start, max_items, state.row, extra, total)
    state.active_y_off = 0
    return Viewport(state.start, end)
