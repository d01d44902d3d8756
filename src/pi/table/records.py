"""Record field access.

The table reads records through a small capability contract, the
``RecordAdapter`` protocol: an ordered list of field names and a way to read
one field from one record. Adapters for dataclasses, pydantic models, named
tuples and mappings are inferred from a sample record; anything else needs
an explicit adapter.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Protocol, Sequence

from pydantic import BaseModel

from pi.table.errors import UnsupportedSourceError


class RecordAdapter(Protocol):
    """Reads named fields from records of one shape."""

    def field_names(self) -> Sequence[str]:
        """Field names in declaration order."""
        ...

    def field_value(self, record: Any, name: str) -> Any:
        """Return the value of field *name* of *record*."""
        ...


class AttributeAdapter:
    """Reads a fixed list of attributes from arbitrary objects."""

    def __init__(self, names: Sequence[str]) -> None:
        self._names = list(names)

    def field_names(self) -> Sequence[str]:
        return self._names

    def field_value(self, record: Any, name: str) -> Any:
        return getattr(record, name)


class DataclassAdapter(AttributeAdapter):
    def __init__(self, record_type: type) -> None:
        super().__init__([f.name for f in dataclasses.fields(record_type)])


class ModelAdapter(AttributeAdapter):
    def __init__(self, model_type: type[BaseModel]) -> None:
        super().__init__(list(model_type.model_fields))


class NamedTupleAdapter(AttributeAdapter):
    def __init__(self, tuple_type: type) -> None:
        super().__init__(list(tuple_type._fields))  # type: ignore[attr-defined]


class MappingAdapter:
    """Reads keys from mapping records; missing keys read as ``None``."""

    def __init__(self, names: Sequence[str]) -> None:
        self._names = list(names)

    def field_names(self) -> Sequence[str]:
        return self._names

    def field_value(self, record: Any, name: str) -> Any:
        return record.get(name)


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def adapter_for(sample: Any) -> RecordAdapter:
    """Infer an adapter from one record.

    Raises ``UnsupportedSourceError`` when the record shape carries no field
    names of its own.
    """
    if dataclasses.is_dataclass(sample) and not isinstance(sample, type):
        return DataclassAdapter(type(sample))
    if isinstance(sample, BaseModel):
        return ModelAdapter(type(sample))
    if _is_named_tuple(sample):
        return NamedTupleAdapter(type(sample))
    if isinstance(sample, Mapping):
        return MappingAdapter(list(sample.keys()))
    raise UnsupportedSourceError(
        f"Cannot derive fields from {type(sample).__name__} records; "
        "pass an explicit adapter"
    )
