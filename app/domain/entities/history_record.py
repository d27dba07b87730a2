"""History record domain entity.

One immutable audit entry per employee mutation: the operation kind, the
field-level delta (UPDATE only), the full post-operation snapshot, and
provenance. Records are append-only; the entity is frozen and has no
mutators.
"""

from dataclasses import dataclass
from datetime import datetime

from app.domain.enums import HistoryOperation
from app.domain.exceptions import ValidationException
from app.domain.value_objects.snapshot import FieldChange, Snapshot
from app.domain.value_objects.tracked_fields import TRACKED_FIELDS_VERSION


@dataclass(frozen=True)
class HistoryRecord:
    """Immutable audit entry for one employee mutation.

    Validation runs on construction: changes may only be non-empty for
    UPDATE operations.
    """

    id: str
    employee_ref: str
    employee_display_id: str
    operation: HistoryOperation
    changes: tuple[FieldChange, ...]
    snapshot: Snapshot
    changed_by: str
    change_reason: str
    created_at: datetime
    tracked_fields_version: int = TRACKED_FIELDS_VERSION

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate record invariants. Raises ValidationException if invalid."""
        if not self.id:
            raise ValidationException("History record ID is required", field="id")
        if not self.employee_ref:
            raise ValidationException(
                "History record must reference an employee", field="employee_ref"
            )
        if self.changes and self.operation != HistoryOperation.UPDATE:
            raise ValidationException(
                f"{self.operation.value} history records cannot carry field changes",
                field="changes",
            )

    def belongs_to(self, employee_ref: str) -> bool:
        """Return whether this record describes the given employee."""
        return self.employee_ref == employee_ref

    def is_noop_update(self) -> bool:
        """Return True for an UPDATE that changed no tracked field."""
        return self.operation == HistoryOperation.UPDATE and not self.changes
