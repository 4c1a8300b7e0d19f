"""
Bidirectional mapping between UI records and storage records.

A UI record is a plain ``dict`` with camelCase keys and the stable key
``Id``; nested objects are addressed with dotted paths such as
``stats.totalFarms``.  A storage record uses the hosted store's column
names (snake_case with a ``_c`` suffix) plus ``Id`` and the provider's
``Name`` display column.

Each entity declares its columns as a tuple of :class:`Field`
objects.  The mapper is pure and never raises: values that do not
coerce fall back to the field's ``on_invalid`` value and validation is
left to the caller.
"""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

LIST_DELIMITER = ","

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_MISSING = object()

KINDS = {"str", "int", "float", "bool", "list", "relation"}


@dataclass(frozen=True)
class Field:
    """One declared column of an entity.

    ``default`` is a UI-side value (or a zero-argument callable
    producing one) used when the value is absent.  ``mirror`` names an
    extra storage column that receives the same value on write and is
    read as a fallback when ``storage`` is empty.
    """

    ui: str
    storage: str
    kind: str = "str"
    default: Any = None
    mirror: Optional[str] = None
    on_invalid: Any = None

    def __post_init__(self) -> None:
        if self.kind not in KINDS:
            raise ValueError(f"Unknown field kind {self.kind!r} for {self.ui}")

    def default_value(self) -> Any:
        if callable(self.default):
            return self.default()
        return copy.copy(self.default)


# ----------------------------------------------------------------------
# Coercion helpers
# ----------------------------------------------------------------------
def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def parse_int(value: Any, on_invalid: Any = None) -> Optional[int]:
    """Parse an integer the way ``parseInt`` does: leading digits win.

    ``None`` and blank strings are absent values and return ``None``.
    """
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        return on_invalid
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return on_invalid
        return int(value)
    match = _INT_PREFIX.match(str(value))
    if not match:
        return on_invalid
    return int(match.group(1))


def parse_float(value: Any, on_invalid: Any = None) -> Optional[float]:
    """Parse a float the way ``parseFloat`` does: the longest numeric prefix."""
    if _is_blank(value):
        return None
    if isinstance(value, bool):
        return on_invalid
    if isinstance(value, (int, float)):
        return float(value)
    match = _FLOAT_PREFIX.match(str(value))
    if not match:
        return on_invalid
    return float(match.group(1))


def unwrap_relation(value: Any) -> Any:
    """Return the bare id of a relation given as ``{"Id": n, ...}`` or ``n``."""
    if isinstance(value, dict):
        return value.get("Id")
    return value


def split_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [item.strip() for item in str(value).split(LIST_DELIMITER) if item.strip()]


def join_list(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return LIST_DELIMITER.join(str(item) for item in value)


# ----------------------------------------------------------------------
# Dotted path helpers for nested UI objects
# ----------------------------------------------------------------------
def get_path(record: Dict[str, Any], path: str, default: Any = _MISSING) -> Any:
    current: Any = record
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def set_path(record: Dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    current = record
    for part in parts[:-1]:
        current = current.setdefault(part, {})
    current[parts[-1]] = value


# ----------------------------------------------------------------------
# Transforms
# ----------------------------------------------------------------------
def _to_storage_value(field: Field, value: Any) -> Any:
    if field.kind == "int":
        return parse_int(value, field.on_invalid)
    if field.kind == "float":
        return parse_float(value, field.on_invalid)
    if field.kind == "relation":
        return parse_int(unwrap_relation(value), field.on_invalid)
    if field.kind == "bool":
        return None if value is None else bool(value)
    if field.kind == "list":
        return join_list(value)
    return value


def _from_storage_value(field: Field, value: Any) -> Any:
    if field.kind == "relation":
        return unwrap_relation(value)
    if field.kind == "list":
        return split_list(value)
    if field.kind == "bool":
        return bool(value)
    return value


def to_storage(
    ui_record: Dict[str, Any],
    fields: Sequence[Field],
    *,
    fill_defaults: bool = True,
) -> Dict[str, Any]:
    """Convert a UI record into its storage shape.

    With ``fill_defaults`` every declared field is emitted and absent
    values take the field default (or ``None``).  Without it only the
    fields present in ``ui_record`` are emitted.  ``Id`` is never
    written; backends carry it separately.
    """
    storage: Dict[str, Any] = {}
    for field in fields:
        value = get_path(ui_record, field.ui)
        if value is _MISSING:
            if not fill_defaults:
                continue
            value = None
        if value is None and fill_defaults:
            value = field.default_value()
        converted = _to_storage_value(field, value)
        storage[field.storage] = converted
        if field.mirror:
            storage[field.mirror] = converted
    return storage


def from_storage(storage_record: Dict[str, Any], fields: Sequence[Field]) -> Dict[str, Any]:
    """Convert a storage record back into its UI shape."""
    ui: Dict[str, Any] = {}
    if "Id" in storage_record:
        ui["Id"] = storage_record["Id"]
    for field in fields:
        value = storage_record.get(field.storage)
        if _is_blank(value) and field.mirror:
            value = storage_record.get(field.mirror, value)
        if value is None:
            value = field.default_value()
            if field.kind == "list" and value is None:
                value = []
        else:
            value = _from_storage_value(field, value)
        set_path(ui, field.ui, value)
    return ui


def project(fields: Iterable[Field]) -> List[str]:
    """Return the storage field selector for ``fields`` (mirrors first)."""
    names: List[str] = []
    for field in fields:
        for name in (field.mirror, field.storage):
            if name and name not in names:
                names.append(name)
    return names


