"""Conversion between domain dataclasses and JSON-compatible primitives.

Used by the persistence layer (JSON columns, in-memory snapshots) and by
exports. ``build_dataclass`` tolerates missing keys so stored documents
written by older versions load with current defaults.
"""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Mapping, TypeVar, get_args, get_origin
from uuid import UUID

from profilehub.domain.shared.dotted_path import (
    coerce_value,
    field_types,
    unwrap_optional,
)

T = TypeVar("T")


def to_primitive(value: Any) -> Any:
    """Recursively convert dataclasses, enums, UUIDs and dates."""
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_primitive(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Mapping):
        return {str(k): to_primitive(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [to_primitive(v) for v in value]
    return value


def build_dataclass(cls: type[T], data: Mapping[str, Any] | None) -> T:
    """Build ``cls`` from a mapping, coercing nested values by annotation."""
    if data is None:
        return cls()
    kwargs = {
        name: _build_value(annotation, data[name], name)
        for name, annotation in field_types(cls).items()
        if name in data
    }
    return cls(**kwargs)


def _build_value(annotation: Any, raw: Any, path: str) -> Any:
    if raw is None:
        return None
    inner, _ = unwrap_optional(annotation)
    if isinstance(inner, type) and is_dataclass(inner) and isinstance(raw, Mapping):
        return build_dataclass(inner, raw)
    origin = get_origin(inner)
    if origin in (list, tuple) and isinstance(raw, (list, tuple)):
        args = get_args(inner)
        item_type = args[0] if args else Any
        items = [_build_value(item_type, item, path) for item in raw]
        return tuple(items) if origin is tuple else items
    return coerce_value(raw, annotation, path)
