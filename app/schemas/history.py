"""Employee history API schemas.

Snapshot keys and change field names are the tracked field names
(snake_case) as stored; only the envelope keys are camelCase.
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from app.application.dtos.history import HistoryPage, ReconcileResult, VersionComparison
from app.domain.entities.history_record import HistoryRecord
from app.schemas.base import CamelModel, PaginationResponse


class FieldChangeResponse(CamelModel):
    """One field's before/after values in an UPDATE."""

    field: str
    old_value: Any = None
    new_value: Any = None


class HistoryEntryResponse(CamelModel):
    """History list item (no snapshot)."""

    id: str
    operation: str
    changes: list[FieldChangeResponse] = Field(default_factory=list)
    timestamp: datetime
    changed_by: str
    change_reason: str

    @classmethod
    def from_record(cls, record: HistoryRecord) -> "HistoryEntryResponse":
        return cls(
            id=record.id,
            operation=record.operation.value,
            changes=[FieldChangeResponse(**c.to_dict()) for c in record.changes],
            timestamp=record.created_at,
            changed_by=record.changed_by,
            change_reason=record.change_reason,
        )


class HistoryRecordResponse(HistoryEntryResponse):
    """Full history record including the post-operation snapshot."""

    employee_ref: str
    employee_display_id: str
    snapshot: dict[str, Any]
    tracked_fields_version: int

    @classmethod
    def from_record(cls, record: HistoryRecord) -> "HistoryRecordResponse":
        entry = HistoryEntryResponse.from_record(record)
        return cls(
            **entry.model_dump(),
            employee_ref=record.employee_ref,
            employee_display_id=record.employee_display_id,
            snapshot=record.snapshot.to_dict(),
            tracked_fields_version=record.tracked_fields_version,
        )


class HistoryEmployeeSummary(CamelModel):
    id: str
    employee_id: str
    full_name: str


class HistoryListResponse(CamelModel):
    """GET /employees/{id}/history."""

    employee: HistoryEmployeeSummary
    history: list[HistoryEntryResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: HistoryPage) -> "HistoryListResponse":
        return cls(
            employee=HistoryEmployeeSummary(
                id=page.employee.id,
                employee_id=page.employee.employee_id,
                full_name=page.employee.full_name,
            ),
            history=[HistoryEntryResponse.from_record(r) for r in page.records],
            pagination=PaginationResponse(
                page=page.page,
                limit=page.limit,
                total=page.total,
                total_pages=page.total_pages,
            ),
        )


class VersionResponse(CamelModel):
    id: str
    timestamp: datetime
    snapshot: dict[str, Any]

    @classmethod
    def from_record(cls, record: HistoryRecord) -> "VersionResponse":
        return cls(
            id=record.id,
            timestamp=record.created_at,
            snapshot=record.snapshot.to_dict(),
        )


class FieldDifferenceResponse(CamelModel):
    field: str
    version1_value: Any = None
    version2_value: Any = None


class VersionComparisonResponse(CamelModel):
    """GET /employees/{id}/history/compare."""

    version1: VersionResponse
    version2: VersionResponse
    differences: list[FieldDifferenceResponse]

    @classmethod
    def from_comparison(cls, comparison: VersionComparison) -> "VersionComparisonResponse":
        return cls(
            version1=VersionResponse.from_record(comparison.version1),
            version2=VersionResponse.from_record(comparison.version2),
            differences=[
                FieldDifferenceResponse(**d.to_dict()) for d in comparison.differences
            ],
        )


class ReconcileResponse(CamelModel):
    """POST /employees/{id}/history/reconcile."""

    employee_id: str
    repaired: bool
    record: HistoryRecordResponse | None = None

    @classmethod
    def from_result(cls, result: ReconcileResult) -> "ReconcileResponse":
        return cls(
            employee_id=result.employee_id,
            repaired=result.repaired,
            record=HistoryRecordResponse.from_record(result.record) if result.record else None,
        )
