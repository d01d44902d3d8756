"""Header resolution and column selection."""

from __future__ import annotations

from typing import Sequence

from pi.table.records import RecordAdapter
from pi.table.state import AllColumns, ColumnIndexes, CustomHeaders, HeaderNames, TableState


def selected_fields(field_names: Sequence[str], col_indexes: ColumnIndexes) -> list[str]:
    """Return the fields shown as columns, in field order."""
    if isinstance(col_indexes, AllColumns):
        return list(field_names)
    return [name for idx, name in enumerate(field_names) if idx in col_indexes]


def resolve_headers(
    adapter: RecordAdapter | None,
    header_names: HeaderNames,
    col_indexes: ColumnIndexes,
    max_columns: int = 100,
) -> list[str]:
    """Return the header strings for one draw.

    Custom headers are used verbatim; derived headers are the selected field
    names. More than *max_columns* headers is a caller error.
    """
    if isinstance(header_names, CustomHeaders):
        headers = list(header_names.names)
    elif adapter is None:
        headers = []
    else:
        headers = selected_fields(adapter.field_names(), col_indexes)
    if len(headers) > max_columns:
        raise ValueError(f"Table has {len(headers)} columns; the limit is {max_columns}")
    return headers


def clamp_active_column(state: TableState, header_count: int) -> None:
    """Keep ``state.col`` within ``[0, header_count)``."""
    if header_count == 0:
        state.col = 0
    elif state.col > header_count - 1:
        state.col = header_count - 1
    elif state.col < 0:
        state.col = 0
