"""Snapshot and field-change value objects.

A snapshot is the full state of an employee's fields at one instant.
Snapshots are immutable and compared by content only; values are held in
the canonical JSON-compatible form produced by canonical_value().
"""

from __future__ import annotations

import copy
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any

from app.shared.utils.datetime import isoformat_utc


class _Missing:
    """Sentinel for a field absent from a snapshot (differs from any present value)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def canonical_number(value: int | float | Decimal) -> int | float:
    """Return int for integral numbers, float otherwise (50000.00 -> 50000)."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        if not value.is_finite():
            return float(value)
        return int(value) if value == value.to_integral_value() else float(value)
    if value != value or value in (float("inf"), float("-inf")):
        return value
    return int(value) if float(value).is_integer() else float(value)


def canonical_value(value: Any) -> Any:
    """Convert a value to its canonical JSON-compatible representation.

    Enums become their values, datetimes ISO-8601 UTC strings, dates ISO
    dates, numbers int-or-float. Mappings and sequences are converted
    recursively; anything else is returned unchanged.
    """
    if value is None or value is MISSING or isinstance(value, (str, bool)):
        return value
    if isinstance(value, Enum):
        return canonical_value(value.value)
    if isinstance(value, (int, float, Decimal)):
        return canonical_number(value)
    if isinstance(value, datetime):
        return isoformat_utc(value)
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): canonical_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [canonical_value(v) for v in value]
    return value


class Snapshot(Mapping[str, Any]):
    """Immutable, field-named mapping of an employee's state.

    Construction deep-copies the input so later mutation of the source
    cannot leak in; to_dict() hands out a fresh copy for serialization.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any] | None = None) -> None:
        self._data: Mapping[str, Any] = MappingProxyType(copy.deepcopy(dict(data or {})))

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Snapshot({dict(self._data)!r})"

    def value_of(self, field: str) -> Any:
        """Return the field's value, or MISSING when the field is absent."""
        return self._data.get(field, MISSING)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable deep copy (for JSON columns and responses)."""
        return copy.deepcopy(dict(self._data))


def _wire(value: Any) -> Any:
    """MISSING is reported as null outside the domain."""
    return None if value is MISSING else value


@dataclass(frozen=True)
class FieldChange:
    """One tracked field's before/after values within a single UPDATE."""

    field: str
    old_value: Any
    new_value: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "old_value": _wire(self.old_value),
            "new_value": _wire(self.new_value),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FieldChange:
        return cls(
            field=data["field"],
            old_value=data.get("old_value"),
            new_value=data.get("new_value"),
        )


@dataclass(frozen=True)
class FieldDifference:
    """One tracked field's values in two compared versions (version1 vs version2)."""

    field: str
    version1_value: Any
    version2_value: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "field": self.field,
            "version1_value": _wire(self.version1_value),
            "version2_value": _wire(self.version2_value),
        }
