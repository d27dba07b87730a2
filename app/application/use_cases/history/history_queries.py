"""History queries: paginated history per employee and single-record detail.

Read-only. Soft-deleted employees keep their history, so employee existence
is checked without the active filter.
"""

from __future__ import annotations

from app.application.dtos.history import HistoryPage
from app.application.interfaces.repositories import (
    IEmployeeHistoryRepository,
    IEmployeeRepository,
)
from app.domain.entities.history_record import HistoryRecord
from app.domain.exceptions import ResourceNotFoundException, ValidationException

DEFAULT_HISTORY_PAGE_SIZE = 20
MAX_HISTORY_PAGE_SIZE = 100


class HistoryQueryService:
    """List an employee's history and fetch individual records."""

    def __init__(
        self,
        history_repo: IEmployeeHistoryRepository,
        employee_repo: IEmployeeRepository,
        max_page_size: int = MAX_HISTORY_PAGE_SIZE,
    ) -> None:
        self.history_repo = history_repo
        self.employee_repo = employee_repo
        self.max_page_size = max_page_size

    async def list_history(
        self,
        employee_id: str,
        page: int = 1,
        limit: int = DEFAULT_HISTORY_PAGE_SIZE,
    ) -> HistoryPage:
        """Return one page of the employee's history, newest first.

        A page past the end yields no records with the correct total.

        Raises:
            ValidationException: page < 1 or limit outside 1..max_page_size.
            ResourceNotFoundException: employee never existed.
        """
        if page < 1:
            raise ValidationException("page must be >= 1", field="page")
        if not 1 <= limit <= self.max_page_size:
            raise ValidationException(
                f"limit must be between 1 and {self.max_page_size}", field="limit"
            )
        employee = await self.employee_repo.get_by_id_including_deleted(employee_id)
        if employee is None:
            raise ResourceNotFoundException("employee", employee_id)
        records, total = await self.history_repo.list_by_employee(employee_id, page, limit)
        return HistoryPage(
            employee=employee,
            records=records,
            page=page,
            limit=limit,
            total=total,
        )

    async def get_history_record(self, history_id: str) -> HistoryRecord:
        """Return one history record; raise ResourceNotFoundException if absent."""
        record = await self.history_repo.get_by_id(history_id)
        if record is None:
            raise ResourceNotFoundException("history", history_id)
        return record
