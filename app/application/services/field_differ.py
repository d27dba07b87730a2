"""Field differ: pure comparison of two snapshots over the tracked fields.

diff() yields the FieldChange list stored on UPDATE history records;
compare_snapshots() yields the FieldDifference list returned by the version
comparator. Both normalize each side with the field's normalizer and use
deep_equal(), so a record's own changes are always consistent with a
comparison of the surrounding snapshots.
"""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from app.domain.value_objects.snapshot import MISSING, FieldChange, FieldDifference
from app.domain.value_objects.tracked_fields import normalize_field


def _order_free(value: Any) -> Any:
    """Sort nested sequences so list order does not affect equality."""
    if isinstance(value, Mapping):
        return {str(k): _order_free(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return sorted((_order_free(v) for v in value), key=_dump)
    return value


def _dump(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=str)


def deep_equal(a: Any, b: Any) -> bool:
    """Structural equality: order-insensitive for nested structures, exact for scalars.

    Scalars are compared by their JSON form, so 1 and 1.0, or True and 1,
    are different values. MISSING equals only MISSING.
    """
    if a is MISSING or b is MISSING:
        return a is b
    return _dump(_order_free(a)) == _dump(_order_free(b))


def _value(snapshot: Mapping[str, Any] | None, field: str) -> Any:
    if snapshot is None:
        return MISSING
    return normalize_field(field, snapshot.get(field, MISSING))


def _changed_fields(
    tracked: Sequence[str],
    first: Mapping[str, Any],
    second: Mapping[str, Any],
) -> Iterator[tuple[str, Any, Any]]:
    for field in tracked:
        a = _value(first, field)
        b = _value(second, field)
        if not deep_equal(a, b):
            yield field, a, b


def diff(
    tracked: Sequence[str],
    before: Mapping[str, Any] | None,
    after: Mapping[str, Any],
) -> list[FieldChange]:
    """Return the tracked fields whose value differs between before and after.

    Fields are reported in the order of tracked. When before is None
    (creation) the result is empty: the after snapshot is the record of
    state, not a delta.
    """
    if before is None:
        return []
    return [
        FieldChange(field=field, old_value=old, new_value=new)
        for field, old, new in _changed_fields(tracked, before, after)
    ]


def compare_snapshots(
    tracked: Sequence[str],
    version1: Mapping[str, Any],
    version2: Mapping[str, Any],
) -> list[FieldDifference]:
    """Return per-field differences between two full snapshots, in tracked order."""
    return [
        FieldDifference(field=field, version1_value=v1, version2_value=v2)
        for field, v1, v2 in _changed_fields(tracked, version1, version2)
    ]
