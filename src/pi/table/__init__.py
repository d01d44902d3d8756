"""pi-table: stateful, scrollable table widget for character-cell terminals."""

# Scratch arena
from pi.table.arena import ScratchArena, scratch_arena

# Errors
from pi.table.errors import (
    CallbackFailure,
    IndexOutOfRangeError,
    TableError,
    UnsupportedSourceError,
)

# Cell formatting
from pi.table.formatter import ValueKind, classify, fit_to_width, format_cell, format_value

# Headers
from pi.table.headers import clamp_active_column, resolve_headers, selected_fields

# Records and data sources
from pi.table.records import (
    AttributeAdapter,
    DataclassAdapter,
    MappingAdapter,
    ModelAdapter,
    NamedTupleAdapter,
    RecordAdapter,
    adapter_for,
)
from pi.table.source import ColumnarData, resolve_adapter, resolve_rows

# Configuration
from pi.table.settings import TableSettings, ThemeSettings, WidthSettings, load_table_settings

# State
from pi.table.state import (
    ActiveContentFn,
    AllColumns,
    ByIndex,
    CustomHeaders,
    FieldNames,
    TableState,
    TableTheme,
)

# Styling and drawing surface
from pi.table.style import Color, Segment, Style
from pi.table.surface import Cell, PrintResult, Screen, Window, center

# Drawing
from pi.table.table import Table, draw_table

# Unicode measurement
from pi.table.unicode import iterate_graphemes, take_columns, visible_width

# Scrolling
from pi.table.viewport import Viewport, compute_viewport

# Width policies
from pi.table.widths import (
    DynamicFill,
    DynamicHeaderLength,
    StaticAll,
    StaticIndividual,
    WidthPolicy,
    column_width,
)

__all__ = [
    # Arena
    "ScratchArena",
    "scratch_arena",
    # Errors
    "CallbackFailure",
    "IndexOutOfRangeError",
    "TableError",
    "UnsupportedSourceError",
    # Formatting
    "ValueKind",
    "classify",
    "fit_to_width",
    "format_cell",
    "format_value",
    # Headers
    "clamp_active_column",
    "resolve_headers",
    "selected_fields",
    # Records
    "AttributeAdapter",
    "DataclassAdapter",
    "MappingAdapter",
    "ModelAdapter",
    "NamedTupleAdapter",
    "RecordAdapter",
    "adapter_for",
    # Data sources
    "ColumnarData",
    "resolve_adapter",
    "resolve_rows",
    # Settings
    "TableSettings",
    "ThemeSettings",
    "WidthSettings",
    "load_table_settings",
    # State
    "ActiveContentFn",
    "AllColumns",
    "ByIndex",
    "CustomHeaders",
    "FieldNames",
    "TableState",
    "TableTheme",
    # Style / surface
    "Cell",
    "Color",
    "PrintResult",
    "Screen",
    "Segment",
    "Style",
    "Window",
    "center",
    # Drawing
    "Table",
    "draw_table",
    # Unicode
    "iterate_graphemes",
    "take_columns",
    "visible_width",
    # Viewport
    "Viewport",
    "compute_viewport",
    # Widths
    "DynamicFill",
    "DynamicHeaderLength",
    "StaticAll",
    "StaticIndividual",
    "WidthPolicy",
    "column_width",
]
