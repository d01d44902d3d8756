"""Tests for the scroll controller."""

from __future__ import annotations

import pytest

from pi.table.state import TableState
from pi.table.viewport import Viewport, compute_viewport


def _expand(_win: object, _ctx: object) -> int:
    return 0


class TestScrolling:
    """Keep the active row inside the window."""

    def test_first_row_shows_top(self) -> None:
        state = TableState(row=0, start=3)
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.start == 0
        assert viewport == Viewport(0, 5)

    def test_jump_to_last_row(self) -> None:
        state = TableState()
        compute_viewport(state, total=10, surface_height=6)
        state.row = 9
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.start == 5
        assert state.row == 9
        assert (viewport.start, viewport.end) == (5, 10)

    def test_row_past_end_is_clamped(self) -> None:
        state = TableState(row=42)
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.row == 9
        assert 9 in viewport
        assert viewport.end == 10

    def test_scroll_forward_one_row(self) -> None:
        state = TableState(row=5, start=0)
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.start == 1
        assert list(viewport) == [1, 2, 3, 4, 5]

    def test_scroll_backward_to_active_row(self) -> None:
        state = TableState(row=2, start=5)
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.start == 2
        assert list(viewport) == [2, 3, 4, 5, 6]

    def test_row_inside_window_keeps_start(self) -> None:
        state = TableState(row=6, start=4)
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.start == 4
        assert viewport == Viewport(4, 9)

    def test_short_dataset_shows_everything(self) -> None:
        state = TableState(row=2)
        viewport = compute_viewport(state, total=3, surface_height=20)
        assert viewport == Viewport(0, 3)

    def test_empty_dataset(self) -> None:
        state = TableState(row=4, start=2)
        viewport = compute_viewport(state, total=0, surface_height=6)
        assert len(viewport) == 0
        assert state.start == 0

    def test_dataset_shrank_below_window(self) -> None:
        state = TableState(row=9, start=8)
        viewport = compute_viewport(state, total=3, surface_height=6)
        assert state.row == 2
        assert state.start <= state.row
        assert state.row in viewport

    def test_dataset_shrank_below_row_before_window(self) -> None:
        state = TableState(row=6, start=8)
        viewport = compute_viewport(state, total=3, surface_height=6)
        assert state.row == 2
        assert state.start == 2
        assert viewport == Viewport(2, 3)

    def test_idempotent_without_changes(self) -> None:
        state = TableState(row=7, start=0)
        first = compute_viewport(state, total=20, surface_height=6)
        second = compute_viewport(state, total=20, surface_height=6)
        assert first == second


class TestActiveRowExpansion:
    """Room reserved for the lines drawn below the active row."""

    def test_previous_expansion_shrinks_window(self) -> None:
        state = TableState(row=4, start=0, active_content_fn=_expand, active_y_off=2)
        viewport = compute_viewport(state, total=10, surface_height=6)
        # Phase 1 end 5 - 2 = 3, so the window scrolls until row 4 fits.
        assert state.start == 2
        assert viewport == Viewport(2, 5)

    def test_expansion_resets_after_compute(self) -> None:
        state = TableState(row=4, active_content_fn=_expand, active_y_off=2)
        compute_viewport(state, total=10, surface_height=6)
        assert state.active_y_off == 0

    def test_expansion_ignored_without_callback(self) -> None:
        state = TableState(row=4, start=0, active_y_off=2)
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.start == 0
        assert viewport == Viewport(0, 5)

    def test_steady_state_with_constant_expansion(self) -> None:
        state = TableState(row=4, start=0, active_content_fn=_expand, active_y_off=2)
        first = compute_viewport(state, total=10, surface_height=6)
        state.active_y_off = 2
        second = compute_viewport(state, total=10, surface_height=6)
        assert first == second

    def test_expansion_taller_than_window(self) -> None:
        state = TableState(row=3, start=0, active_content_fn=_expand, active_y_off=50)
        viewport = compute_viewport(state, total=10, surface_height=6)
        assert state.start <= state.row
        assert state.row in viewport


class TestInvariants:
    @pytest.mark.parametrize("height", [2, 3, 6, 11])
    @pytest.mark.parametrize("total", [1, 2, 5, 10, 17])
    def test_active_row_always_visible(self, height: int, total: int) -> None:
        capacity = height - 1
        for start in range(0, total + 2):
            for row in range(0, total + 2):
                for extra in range(0, capacity + 2):
                    state = TableState(
                        row=row,
                        start=start,
                        active_content_fn=_expand,
                        active_y_off=extra,
                    )
                    viewport = compute_viewport(state, total, height)
                    assert state.start <= state.row < viewport.end
                    assert viewport.end <= total
                    assert 1 <= len(viewport) <= capacity
