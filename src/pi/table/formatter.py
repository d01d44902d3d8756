"""Turning field values into cell text.

Strings and enum names never need new text and always display. Values that
must be rendered into a new string (lists of strings, numbers, arbitrary
objects) are only rendered when a scratch arena is available; otherwise the
cell shows an ``[unsupported (<type>)]`` marker.
"""

from __future__ import annotations

import enum
from numbers import Number
from typing import Any

from pi.table.arena import ScratchArena
from pi.table.unicode import take_columns, visible_width

ELLIPSIS = "..."
MISSING = "-"


class ValueKind(enum.Enum):
    TEXT = "text"
    TEXT_LIST = "text_list"
    ENUM = "enum"
    OPTIONAL = "optional"
    OTHER = "other"


def classify(value: Any) -> ValueKind:
    """Return the kind of *value*; ``None`` is an absent optional."""
    if value is None:
        return ValueKind.OPTIONAL
    if isinstance(value, enum.Enum):
        return ValueKind.ENUM
    if isinstance(value, str):
        return ValueKind.TEXT
    if (
        isinstance(value, (list, tuple))
        and not hasattr(type(value), "_fields")
        and all(isinstance(item, str) for item in value)
    ):
        return ValueKind.TEXT_LIST
    return ValueKind.OTHER


def unsupported_marker(value: Any) -> str:
    return f"[unsupported ({type(value).__name__})]"


def format_value(value: Any, arena: ScratchArena | None = None) -> str:
    """Return the display text for one field value."""
    kind = classify(value)
    if kind is ValueKind.OPTIONAL:
        return MISSING
    if kind is ValueKind.TEXT:
        return value
    if kind is ValueKind.ENUM:
        return value.name
    if arena is None:
        return unsupported_marker(value)
    if kind is ValueKind.TEXT_LIST:
        return arena.keep(", ".join(value))
    if isinstance(value, Number):
        return arena.keep(str(value))
    return arena.keep(repr(value))


def fit_to_width(text: str, width: int, arena: ScratchArena | None = None) -> str:
    """Shorten *text* to *width* terminal columns.

    With an arena the text is cut to ``width - 4`` columns and ``...`` is
    appended, leaving one blank column before the next cell. Without one it
    is hard-cut at *width*.
    """
    if visible_width(text) <= width:
        return text
    if arena is None:
        return take_columns(text, width)
    return arena.keep(take_columns(text, max(width - 4, 0)) + ELLIPSIS)


def format_cell(value: Any, width: int, arena: ScratchArena | None = None) -> str:
    """Format *value* and fit it into a cell *width* columns wide."""
    return fit_to_width(format_value(value, arena), width, arena)
