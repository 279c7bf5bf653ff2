"""Typed dotted-path resolution over nested dataclasses.

Paths such as ``notifications.email.enabled`` are split on ``.`` and walked
against the declared dataclass fields, so only paths that exist in the
known shape can be read or written. Leaf values are coerced to the field's
annotated type (enums from their string values, ISO strings to dates) and
rejected when they do not fit.

Plain ``dict`` fields are open maps: any key below them is accepted.
"""

from __future__ import annotations

import types
import typing
from dataclasses import fields, is_dataclass, replace
from datetime import date, datetime
from enum import Enum
from functools import lru_cache
from typing import Any, Iterator, Mapping, Union, get_args, get_origin
from uuid import UUID

from profilehub.domain.shared.exceptions import PathNotFoundError, ValidationError

_MISSING = object()


def split_path(path: str) -> tuple[str, ...]:
    """Split a dotted path, rejecting empty segments."""
    parts = tuple(path.split(".")) if path else ()
    if not parts or any(not part for part in parts):
        msg = f"Invalid path: {path!r}"
        raise ValidationError(msg, details={"path": path})
    return parts


@lru_cache(maxsize=None)
def field_types(cls: type) -> dict[str, Any]:
    """Return the resolved annotation of every init field of a dataclass."""
    hints = typing.get_type_hints(cls)
    return {f.name: hints[f.name] for f in fields(cls) if f.init}


def unwrap_optional(annotation: Any) -> tuple[Any, bool]:
    """Return ``(inner_type, is_optional)`` for ``X | None`` annotations."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = get_args(annotation)
        inner = [a for a in args if a is not type(None)]
        optional = len(inner) < len(args)
        if len(inner) == 1:
            return inner[0], optional
        return annotation, optional
    return annotation, False


def is_group(annotation: Any) -> bool:
    inner, _ = unwrap_optional(annotation)
    return isinstance(inner, type) and is_dataclass(inner)


def get_path(obj: Any, path: str, default: Any = None) -> Any:
    """Read the value at ``path``, returning ``default`` when absent."""
    current = obj
    for part in split_path(path):
        if current is None:
            return default
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        elif is_dataclass(current):
            current = getattr(current, part, _MISSING)
        else:
            return default
        if current is _MISSING:
            return default
    return current


def resolve_path(obj: Any, path: str) -> Any:
    """Read the value at ``path``.

    Keys missing below a ``dict`` field read as None.

    Raises
    ------
    PathNotFoundError
        If a segment is not a declared field
    """
    current = obj
    for part in split_path(path):
        if isinstance(current, Mapping):
            current = current.get(part)
            if current is None:
                return None
            continue
        if not is_dataclass(current) or part not in field_types(type(current)):
            raise PathNotFoundError(path, part)
        current = getattr(current, part)
    return current


def replace_path(obj: Any, path: str, value: Any) -> Any:
    """Return a copy of ``obj`` with the leaf at ``path`` set to ``value``.

    Only leaf fields may be written; groups (nested dataclasses) are
    rejected so that every write is addressable in the change history.

    Raises
    ------
    PathNotFoundError
        If a segment is not a declared field
    ValidationError
        If the path names a group or the value does not fit the field type
    """
    return _replace(obj, split_path(path), value, path)


def _replace(obj: Any, parts: tuple[str, ...], value: Any, path: str) -> Any:
    name = parts[0]

    if isinstance(obj, Mapping):
        updated = dict(obj)
        if len(parts) == 1:
            updated[name] = value
        else:
            updated[name] = _replace(obj.get(name) or {}, parts[1:], value, path)
        return updated

    if not is_dataclass(obj):
        raise PathNotFoundError(path, name)

    hints = field_types(type(obj))
    if name not in hints:
        raise PathNotFoundError(path, name)

    annotation = hints[name]
    if len(parts) == 1:
        if is_group(annotation):
            msg = f"'{path}' is a group, not a single value"
            raise ValidationError(msg, details={"path": path})
        new_value = coerce_value(value, annotation, path)
    else:
        current = getattr(obj, name)
        if current is None and is_group(annotation):
            current = unwrap_optional(annotation)[0]()
        new_value = _replace(current, parts[1:], value, path)

    return replace(obj, **{name: new_value})


def iter_leaf_changes(
    cls: type,
    changes: Mapping[str, Any],
    prefix: str = "",
) -> Iterator[tuple[str, Any]]:
    """Expand a nested partial update into ``(dotted.path, value)`` pairs.

    Nested mappings are only descended into for group fields; a mapping
    given for a ``dict`` field is treated as the leaf value.

    Raises
    ------
    PathNotFoundError
        If a key is not a declared field of ``cls``
    """
    hints = field_types(cls)
    for key, value in changes.items():
        path = f"{prefix}{key}"
        if key not in hints:
            raise PathNotFoundError(path, key)
        annotation = hints[key]
        if is_group(annotation) and isinstance(value, Mapping):
            group_cls = unwrap_optional(annotation)[0]
            yield from iter_leaf_changes(group_cls, value, f"{path}.")
        else:
            yield path, value


def coerce_value(value: Any, annotation: Any, path: str = "") -> Any:  # noqa: PLR0911, PLR0912
    """Coerce ``value`` to ``annotation`` or raise ValidationError."""
    inner, optional = unwrap_optional(annotation)

    if value is None:
        if optional or inner is Any:
            return None
        msg = f"'{path}' cannot be empty"
        raise ValidationError(msg, details={"path": path})

    if inner is Any:
        return value

    if isinstance(inner, type) and issubclass(inner, Enum):
        raw = value.value if isinstance(value, Enum) else value
        try:
            return inner(raw)
        except ValueError:
            allowed = ", ".join(str(m.value) for m in inner)
            msg = f"'{path}' must be one of: {allowed} (got {raw!r})"
            raise ValidationError(msg, details={"path": path}) from None

    if inner is bool:
        if isinstance(value, bool):
            return value
        return _type_error(path, "a boolean", value)

    if inner is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return _type_error(path, "an integer", value)

    if inner is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return _type_error(path, "a number", value)

    if inner is str:
        if isinstance(value, str):
            return value
        return _type_error(path, "a string", value)

    if inner is datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, str):
            return _parse_iso(datetime.fromisoformat, value, path)
        return _type_error(path, "a datetime", value)

    if inner is date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str):
            return _parse_iso(_parse_date, value, path)
        return _type_error(path, "a date", value)

    if inner is UUID:
        if isinstance(value, UUID):
            return value
        if isinstance(value, str):
            return _parse_iso(UUID, value, path)
        return _type_error(path, "a UUID", value)

    origin = get_origin(inner)
    if origin is dict or inner is dict:
        if isinstance(value, Mapping):
            return dict(value)
        return _type_error(path, "an object", value)
    if origin in (list, tuple) or inner in (list, tuple):
        if isinstance(value, (list, tuple)):
            return tuple(value) if (origin or inner) is tuple else list(value)
        return _type_error(path, "a list", value)

    return value


def _parse_date(value: str) -> date:
    if "T" in value:
        return datetime.fromisoformat(value).date()
    return date.fromisoformat(value)


def _parse_iso(parser: Any, value: str, path: str) -> Any:
    try:
        return parser(value)
    except ValueError:
        msg = f"'{path}' has an invalid format: {value!r}"
        raise ValidationError(msg, details={"path": path}) from None


def _type_error(path: str, expected: str, value: Any) -> Any:
    msg = f"'{path}' must be {expected}, got {type(value).__name__}"
    raise ValidationError(msg, details={"path": path})


def flatten(data: Any, prefix: str = "") -> list[tuple[str, Any]]:
    """Flatten nested mappings and lists into ``(dotted.key, value)`` pairs.

    List items are addressed by index (``files.0.filename``). Empty
    containers produce no rows.
    """
    rows: list[tuple[str, Any]] = []
    if isinstance(data, Mapping):
        for key, value in data.items():
            rows.extend(flatten(value, f"{prefix}{key}."))
    elif isinstance(data, (list, tuple)):
        for index, value in enumerate(data):
            rows.extend(flatten(value, f"{prefix}{index}."))
    else:
        rows.append((prefix.rstrip("."), data))
    return rows
