"""Employee operations: create, get, list, update, soft delete, stats.

Every mutation is a two-phase write: the employee store commits first,
then HistoryRecorder appends the audit record with the pre- and
post-mutation snapshots.
"""

from __future__ import annotations

from app.application.dtos.employee import (
    EmployeeCreate,
    EmployeeListQuery,
    EmployeeResult,
    EmployeeStats,
    EmployeeUpdate,
)
from app.application.interfaces.repositories import IEmployeeRepository
from app.application.services.history_recorder import HistoryRecorder
from app.domain.enums import HistoryOperation
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.domain.value_objects.provenance import Provenance

SORTABLE_FIELDS = frozenset(
    {"created_at", "full_name", "salary", "date_of_joining", "department", "employee_id"}
)
MAX_PAGE_SIZE = 100


class EmployeeService:
    """CRUD over employees with an audit record per mutation."""

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        history_recorder: HistoryRecorder,
    ) -> None:
        self.employee_repo = employee_repo
        self.history_recorder = history_recorder

    async def create_employee(
        self, data: EmployeeCreate, provenance: Provenance
    ) -> EmployeeResult:
        """Create an employee and record CREATE (empty changes, full snapshot)."""
        created = await self.employee_repo.create_employee(data)
        await self.history_recorder.record(
            employee_ref=created.id,
            operation=HistoryOperation.CREATE,
            before=None,
            after=created.to_snapshot(),
            provenance=provenance,
        )
        return created

    async def get_employee(self, employee_id: str) -> EmployeeResult:
        """Return an active employee; raise ResourceNotFoundException otherwise."""
        employee = await self.employee_repo.get_active_by_id(employee_id)
        if employee is None:
            raise ResourceNotFoundException("employee", employee_id)
        return employee

    async def list_employees(
        self, query: EmployeeListQuery
    ) -> tuple[list[EmployeeResult], int]:
        """Return one page of active employees and the total match count."""
        if query.page < 1:
            raise ValidationException("page must be >= 1", field="page")
        if not 1 <= query.limit <= MAX_PAGE_SIZE:
            raise ValidationException(
                f"limit must be between 1 and {MAX_PAGE_SIZE}", field="limit"
            )
        if query.sort_by not in SORTABLE_FIELDS:
            raise ValidationException(
                f"sort_by must be one of {sorted(SORTABLE_FIELDS)}", field="sort_by"
            )
        if query.sort_order not in ("asc", "desc"):
            raise ValidationException("sort_order must be 'asc' or 'desc'", field="sort_order")
        return await self.employee_repo.list_active(query)

    async def update_employee(
        self,
        employee_id: str,
        data: EmployeeUpdate,
        provenance: Provenance,
    ) -> EmployeeResult:
        """Apply a partial update and record UPDATE with the field-level delta.

        An update that changes nothing still records UPDATE with empty changes.
        """
        current = await self.get_employee(employee_id)
        before = current.to_snapshot()
        updated = await self.employee_repo.save_changes(employee_id, data.provided())
        if updated is None:
            raise ResourceNotFoundException("employee", employee_id)
        await self.history_recorder.record(
            employee_ref=updated.id,
            operation=HistoryOperation.UPDATE,
            before=before,
            after=updated.to_snapshot(),
            provenance=provenance,
        )
        return updated

    async def delete_employee(self, employee_id: str, provenance: Provenance) -> None:
        """Soft-delete an employee and record DELETE with the deleted-state snapshot."""
        current = await self.get_employee(employee_id)
        before = current.to_snapshot()
        deleted = await self.employee_repo.soft_delete(employee_id)
        if deleted is None:
            raise ResourceNotFoundException("employee", employee_id)
        await self.history_recorder.record(
            employee_ref=deleted.id,
            operation=HistoryOperation.DELETE,
            before=before,
            after=deleted.to_snapshot(),
            provenance=provenance,
        )

    async def get_stats(self) -> EmployeeStats:
        """Return overview counts and per-department head count / average salary."""
        return await self.employee_repo.get_stats()
