"""Domain value objects and shared value types."""

from app.domain.value_objects.provenance import Provenance
from app.domain.value_objects.snapshot import (
    MISSING,
    FieldChange,
    FieldDifference,
    Snapshot,
    canonical_value,
)
from app.domain.value_objects.tracked_fields import (
    TRACKED_FIELD_NAMES,
    TRACKED_FIELDS,
    TRACKED_FIELDS_VERSION,
    TrackedField,
    build_snapshot,
    normalize_field,
)

__all__ = [
    "MISSING",
    "FieldChange",
    "FieldDifference",
    "Provenance",
    "Snapshot",
    "TRACKED_FIELDS",
    "TRACKED_FIELD_NAMES",
    "TRACKED_FIELDS_VERSION",
    "TrackedField",
    "build_snapshot",
    "canonical_value",
    "normalize_field",
]
