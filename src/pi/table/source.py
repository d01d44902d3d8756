"""Dataset normalization.

A table accepts either an indexable sequence of records, used as-is, or a
``ColumnarData`` holding one sequence per field. The columnar form has to be
rebuilt into records before it can be drawn row by row, which needs a
scratch arena to own the copy for the duration of the draw.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from pydantic import BaseModel

from pi.table.arena import ScratchArena
from pi.table.errors import UnsupportedSourceError
from pi.table.records import (
    AttributeAdapter,
    MappingAdapter,
    RecordAdapter,
    adapter_for,
)

logger = logging.getLogger(__name__)


class ColumnarData:
    """Records stored as parallel arrays, one sequence per field.

    ``factory`` rebuilds a record from keyword arguments; it defaults to
    ``dict``.
    """

    def __init__(
        self,
        columns: Mapping[str, Sequence[Any]],
        factory: Callable[..., Any] | None = None,
    ) -> None:
        lengths = {name: len(values) for name, values in columns.items()}
        if len(set(lengths.values())) > 1:
            raise UnsupportedSourceError(f"Columns have different lengths: {lengths}")
        self._columns = dict(columns)
        self._length = next(iter(lengths.values()), 0)
        self._factory = factory

    @classmethod
    def from_records(
        cls,
        records: Sequence[Any],
        adapter: RecordAdapter | None = None,
        factory: Callable[..., Any] | None = None,
    ) -> ColumnarData:
        """Split *records* into one column per field.

        When *factory* is omitted and the records are dataclasses, pydantic
        models or named tuples, their type is used to rebuild them.
        """
        if not records:
            return cls({}, factory)
        sample = records[0]
        if adapter is None:
            adapter = adapter_for(sample)
        if factory is None and (
            dataclasses.is_dataclass(sample)
            or isinstance(sample, BaseModel)
            or hasattr(type(sample), "_fields")
        ):
            factory = type(sample)
        columns = {
            name: [adapter.field_value(record, name) for record in records]
            for name in adapter.field_names()
        }
        return cls(columns, factory)

    def __len__(self) -> int:
        return self._length

    def field_names(self) -> list[str]:
        return list(self._columns)

    def column(self, name: str) -> Sequence[Any]:
        return self._columns[name]

    def get(self, index: int) -> Any:
        """Rebuild the record at *index*."""
        values = {name: column[index] for name, column in self._columns.items()}
        if self._factory is None:
            return values
        return self._factory(**values)

    def adapter(self) -> RecordAdapter:
        """Adapter for the records ``get`` returns."""
        if self._factory is None:
            return MappingAdapter(self.field_names())
        return AttributeAdapter(self.field_names())


def resolve_rows(data: Any, arena: ScratchArena | None) -> Sequence[Any]:
    """Return *data* as an indexable sequence of records.

    Raises ``UnsupportedSourceError`` for unrecognized shapes and for
    ``ColumnarData`` without an arena.
    """
    if isinstance(data, ColumnarData):
        if arena is None:
            raise UnsupportedSourceError("Columnar data requires a scratch arena")
        logger.debug("Materializing %d columnar rows", len(data))
        return arena.keep([data.get(i) for i in range(len(data))])
    if isinstance(data, (str, bytes, bytearray)):
        raise UnsupportedSourceError(f"Unsupported table data: {type(data).__name__}")
    if isinstance(data, Sequence):
        return data
    raise UnsupportedSourceError(f"Unsupported table data: {type(data).__name__}")


def resolve_adapter(
    data: Any,
    rows: Sequence[Any],
    adapter: RecordAdapter | None = None,
) -> RecordAdapter | None:
    """Pick the adapter for *rows*: explicit, columnar, or inferred.

    Returns ``None`` for an empty sequence with nothing to infer from.
    """
    if adapter is not None:
        return adapter
    if isinstance(data, ColumnarData):
        return data.adapter()
    if not rows:
        return None
    return adapter_for(rows[0])
