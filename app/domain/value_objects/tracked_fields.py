"""Tracked-field schema shared by the differ, history recorder, and version comparator.

The list is fixed per deployment and versioned: bump TRACKED_FIELDS_VERSION
whenever a field is added, removed, or its normalizer changes.

Each tracked field has an explicit normalizer that maps semantically equal
representations of one logical value to a single canonical form (trimmed
strings, lowercased emails, int-or-float numbers, ISO dates) before values
are compared.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from app.domain.value_objects.snapshot import (
    MISSING,
    Snapshot,
    canonical_number,
    canonical_value,
)
from app.shared.utils.datetime import ensure_utc

TRACKED_FIELDS_VERSION = 1

Normalizer = Callable[[Any], Any]


def normalize_text(value: Any) -> Any:
    """Strip surrounding whitespace from strings."""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, str):
        return value.strip()
    return canonical_value(value)


def normalize_email(value: Any) -> Any:
    """Emails compare case-insensitively."""
    value = normalize_text(value)
    return value.lower() if isinstance(value, str) else value


def normalize_number(value: Any) -> Any:
    """Numbers (and numeric strings) become int when integral, else float."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return canonical_number(value)
    if isinstance(value, str):
        try:
            return canonical_number(Decimal(value.strip()))
        except InvalidOperation:
            return value
    return canonical_value(value)


def normalize_date(value: Any) -> Any:
    """Dates, datetimes, and ISO strings become 'YYYY-MM-DD'."""
    if isinstance(value, datetime):
        return ensure_utc(value).date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text[:10]).isoformat()
        except ValueError:
            return text
    return canonical_value(value)


@dataclass(frozen=True)
class TrackedField:
    """A field eligible for diffing, with its canonicalization rule."""

    name: str
    normalize: Normalizer


TRACKED_FIELDS: tuple[TrackedField, ...] = (
    TrackedField("full_name", normalize_text),
    TrackedField("email", normalize_email),
    TrackedField("phone_number", normalize_text),
    TrackedField("department", normalize_text),
    TrackedField("designation", normalize_text),
    TrackedField("salary", normalize_number),
    TrackedField("employment_status", normalize_text),
    TrackedField("date_of_joining", normalize_date),
)

TRACKED_FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in TRACKED_FIELDS)

_NORMALIZERS: dict[str, Normalizer] = {f.name: f.normalize for f in TRACKED_FIELDS}


def normalizer_for(field: str) -> Normalizer:
    """Return the field's normalizer; untracked fields use canonical_value."""
    return _NORMALIZERS.get(field, canonical_value)


def normalize_field(field: str, value: Any) -> Any:
    """Normalize one field value. MISSING passes through untouched."""
    if value is MISSING:
        return MISSING
    return normalizer_for(field)(value)


def build_snapshot(state: Mapping[str, Any]) -> Snapshot:
    """Build a canonical Snapshot from a raw state mapping.

    Tracked fields go through their normalizers; every other field is
    converted with canonical_value.
    """
    return Snapshot({key: normalize_field(key, value) for key, value in state.items()})
