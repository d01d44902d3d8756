"""Errors raised while drawing a table.

Every error is terminal to the draw that raised it. Nothing is retried
internally; the caller decides whether to draw again next frame.
"""

from __future__ import annotations


class TableError(RuntimeError):
    """Base class for table drawing errors."""


class UnsupportedSourceError(TableError):
    """The dataset shape is not recognized or cannot be materialized."""


class IndexOutOfRangeError(TableError, IndexError):
    """A width policy has fewer entries than there are columns."""

    def __init__(self, column: int, available: int) -> None:
        super().__init__(
            f"No width configured for column {column} "
            f"(only {available} available)"
        )
        self.column = column
        self.available = available


class CallbackFailure(TableError):
    """Convenience base for errors raised by active-content callbacks.

    Callbacks may raise any exception; it reaches the caller of the draw
    unchanged.
    """
