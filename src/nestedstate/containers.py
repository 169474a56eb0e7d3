"""Container-kind dispatch shared by the reader and the updater.

Three kinds of container are understood: sequences (list, tuple), mappings
(any ``Mapping``) and records (pydantic models and dataclass instances).
Everything else is a leaf.
"""
from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from .paths import PathKey, is_index


class Kind(str, Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "record"


class _Absent:
    """Marker for a value that is not present at a path."""

    _instance: Optional["_Absent"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT = _Absent()


def kind_of(value: Any) -> Optional[Kind]:
    if isinstance(value, (list, tuple)):
        return Kind.SEQUENCE
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, BaseModel):
        return Kind.RECORD
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return Kind.RECORD
    return None


def record_fields(record: Any) -> tuple:
    if isinstance(record, BaseModel):
        return tuple(type(record).model_fields)
    return tuple(f.name for f in dataclasses.fields(record))


def settable_fields(record: Any) -> tuple:
    """Fields a copy can be given a new value for.

    Dataclass fields declared with ``init=False`` cannot be passed to
    ``dataclasses.replace``.
    """
    if isinstance(record, BaseModel):
        return record_fields(record)
    return tuple(f.name for f in dataclasses.fields(record) if f.init)


def lookup(value: Any, key: PathKey) -> Any:
    """Index ``value`` by ``key`` the way its kind allows, or return ABSENT."""
    kind = kind_of(value)
    if kind is Kind.MAPPING:
        try:
            return value[key] if key in value else ABSENT
        except TypeError:  # unhashable key
            return ABSENT
    if kind is Kind.SEQUENCE:
        if is_index(key) and 0 <= key < len(value):
            return value[key]
        return ABSENT
    if kind is Kind.RECORD:
        if isinstance(key, str) and key in record_fields(value):
            return getattr(value, key)
        return ABSENT
    return ABSENT


def replace_sequence_item(seq: Any, index: int, new_value: Any) -> Any:
    if isinstance(seq, list):
        result = list(seq)
        result[index] = new_value
        return result
    if hasattr(seq, "_replace") and hasattr(seq, "_fields"):
        # namedtuple
        return seq._replace(**{seq._fields[index]: new_value})
    items = seq[:index] + (new_value,) + seq[index + 1:]
    return items if type(seq) is tuple else type(seq)(items)


def replace_mapping_item(mapping: Any, key: PathKey, new_value: Any) -> Any:
    if isinstance(mapping, dict):
        result = copy.copy(mapping)
    else:
        result = dict(mapping)
    result[key] = new_value
    return result


def replace_record_field(record: Any, name: str, new_value: Any) -> Any:
    if isinstance(record, BaseModel):
        return record.model_copy(update={name: new_value})
    return dataclasses.replace(record, **{name: new_value})


__all__ = [
    "ABSENT",
    "Kind",
    "kind_of",
    "lookup",
    "record_fields",
    "settable_fields",
    "replace_sequence_item",
    "replace_mapping_item",
    "replace_record_field",
]
