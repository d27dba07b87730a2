"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or domain types only; no infrastructure imports.

Read methods return None for absent rows; use cases decide whether absence
is an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.application.dtos.employee import (
        EmployeeCreate,
        EmployeeListQuery,
        EmployeeResult,
        EmployeeStats,
    )
    from app.application.dtos.history import HistoryRecordCreate
    from app.domain.entities.history_record import HistoryRecord


class IEmployeeRepository(Protocol):
    """Protocol for the employee (current state) store."""

    async def create_employee(self, data: EmployeeCreate) -> EmployeeResult:
        """Create and commit an employee; assigns id and display id."""

    async def get_active_by_id(self, employee_id: str) -> EmployeeResult | None:
        """Return the employee if it exists and is not soft-deleted."""

    async def get_by_id_including_deleted(self, employee_id: str) -> EmployeeResult | None:
        """Return the employee whether or not it is soft-deleted."""

    async def save_changes(
        self, employee_id: str, changes: dict[str, Any]
    ) -> EmployeeResult | None:
        """Apply field changes to an active employee and commit; None if not found."""

    async def soft_delete(self, employee_id: str) -> EmployeeResult | None:
        """Flag an active employee deleted (status Inactive) and commit; None if not found."""

    async def list_active(
        self, query: EmployeeListQuery
    ) -> tuple[list[EmployeeResult], int]:
        """Return one page of active employees and the total match count."""

    async def get_stats(self) -> EmployeeStats:
        """Return active/inactive/deleted counts and per-department stats."""


class IEmployeeHistoryRepository(Protocol):
    """Protocol for the append-only history store."""

    async def append(self, entry: HistoryRecordCreate) -> HistoryRecord:
        """Persist and commit one history record; assigns id and created_at."""

    async def get_by_id(self, history_id: str) -> HistoryRecord | None:
        """Return one history record by id."""

    async def list_by_employee(
        self, employee_ref: str, page: int, page_size: int
    ) -> tuple[list[HistoryRecord], int]:
        """Return one page of records (newest first) and the total count."""

    async def get_two_for_employee(
        self, employee_ref: str, history_id1: str, history_id2: str
    ) -> tuple[HistoryRecord, HistoryRecord] | None:
        """Return both records if both exist and belong to employee_ref; else None."""

    async def get_latest_for_employee(self, employee_ref: str) -> HistoryRecord | None:
        """Return the most recent record for the employee."""
