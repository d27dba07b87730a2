"""Employee history repository. Append-only; implements IEmployeeHistoryRepository."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.history import HistoryRecordCreate
from app.domain.entities.history_record import HistoryRecord
from app.domain.enums import HistoryOperation
from app.domain.value_objects.snapshot import FieldChange, Snapshot
from app.infrastructure.persistence.models.employee_history import EmployeeHistory
from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.generators import generate_cuid


def _orm_to_record(row: EmployeeHistory) -> HistoryRecord:
    """Map ORM row to the domain entity."""
    return HistoryRecord(
        id=row.id,
        employee_ref=row.employee_ref,
        employee_display_id=row.employee_display_id,
        operation=HistoryOperation(row.operation),
        changes=tuple(FieldChange.from_dict(c) for c in row.changes or []),
        snapshot=Snapshot(row.snapshot or {}),
        changed_by=row.changed_by,
        change_reason=row.change_reason,
        created_at=ensure_utc(row.created_at),
        tracked_fields_version=row.tracked_fields_version,
    )


class EmployeeHistoryRepository:
    """Append-only history repository. No update/delete."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def _newest_first(self):
        return (EmployeeHistory.created_at.desc(), EmployeeHistory.id.desc())

    async def append(self, entry: HistoryRecordCreate) -> HistoryRecord:
        """Append and commit one record; return it. Rolls back and re-raises on failure."""
        row = EmployeeHistory(
            id=generate_cuid(),
            employee_ref=entry.employee_ref,
            employee_display_id=entry.employee_display_id,
            operation=entry.operation.value,
            changes=[c.to_dict() for c in entry.changes],
            snapshot=entry.snapshot.to_dict(),
            changed_by=entry.changed_by,
            change_reason=entry.change_reason,
            tracked_fields_version=entry.tracked_fields_version,
            created_at=utc_now(),
        )
        try:
            self.db.add(row)
            await self.db.flush()
            await self.db.commit()
        except SQLAlchemyError:
            await self.db.rollback()
            raise
        return _orm_to_record(row)

    async def get_by_id(self, history_id: str) -> HistoryRecord | None:
        result = await self.db.execute(
            select(EmployeeHistory).where(EmployeeHistory.id == history_id)
        )
        row = result.scalar_one_or_none()
        return _orm_to_record(row) if row else None

    async def list_by_employee(
        self, employee_ref: str, page: int, page_size: int
    ) -> tuple[list[HistoryRecord], int]:
        """Return one page (newest first, id breaks timestamp ties) and the total count."""
        result = await self.db.execute(
            select(EmployeeHistory)
            .where(EmployeeHistory.employee_ref == employee_ref)
            .order_by(*self._newest_first())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        total = await self.db.execute(
            select(func.count(EmployeeHistory.id)).where(
                EmployeeHistory.employee_ref == employee_ref
            )
        )
        return [_orm_to_record(r) for r in result.scalars().all()], total.scalar() or 0

    async def get_two_for_employee(
        self, employee_ref: str, history_id1: str, history_id2: str
    ) -> tuple[HistoryRecord, HistoryRecord] | None:
        """Return both records when both belong to employee_ref; never a partial pair."""
        result = await self.db.execute(
            select(EmployeeHistory).where(
                EmployeeHistory.employee_ref == employee_ref,
                EmployeeHistory.id.in_({history_id1, history_id2}),
            )
        )
        by_id = {row.id: _orm_to_record(row) for row in result.scalars().all()}
        if history_id1 not in by_id or history_id2 not in by_id:
            return None
        return by_id[history_id1], by_id[history_id2]

    async def get_latest_for_employee(self, employee_ref: str) -> HistoryRecord | None:
        result = await self.db.execute(
            select(EmployeeHistory)
            .where(EmployeeHistory.employee_ref == employee_ref)
            .order_by(*self._newest_first())
            .limit(1)
        )
        row = result.scalar_one_or_none()
        return _orm_to_record(row) if row else None
