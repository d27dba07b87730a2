"""DTOs for history use cases: append input and query results."""

from dataclasses import dataclass

from app.application.dtos.employee import EmployeeResult
from app.domain.entities.history_record import HistoryRecord
from app.domain.enums import HistoryOperation
from app.domain.value_objects.snapshot import FieldChange, FieldDifference, Snapshot
from app.domain.value_objects.tracked_fields import TRACKED_FIELDS_VERSION


@dataclass(frozen=True)
class HistoryRecordCreate:
    """Input for appending one history record. id and created_at are assigned on append."""

    employee_ref: str
    employee_display_id: str
    operation: HistoryOperation
    changes: tuple[FieldChange, ...]
    snapshot: Snapshot
    changed_by: str
    change_reason: str
    tracked_fields_version: int = TRACKED_FIELDS_VERSION


@dataclass(frozen=True)
class HistoryPage:
    """One page of an employee's history, newest first."""

    employee: EmployeeResult
    records: list[HistoryRecord]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.limit) if self.limit else 0


@dataclass(frozen=True)
class VersionComparison:
    """Two versions of one employee and their tracked-field differences."""

    version1: HistoryRecord
    version2: HistoryRecord
    differences: list[FieldDifference]


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of reconciling an employee's history with its current state."""

    employee_id: str
    repaired: bool
    record: HistoryRecord | None = None
