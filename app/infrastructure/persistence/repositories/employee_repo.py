"""Employee repository (subject store). Returns application DTOs.

Each mutating method commits before returning: the employee write is the
first phase of a two-phase write and must be durable before the history
record is appended.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.dtos.employee import (
    DepartmentStats,
    EmployeeCreate,
    EmployeeListQuery,
    EmployeeResult,
    EmployeeStats,
)
from app.domain.enums import EmploymentStatus
from app.domain.exceptions import DuplicateEmployeeException, ValidationException
from app.domain.value_objects.snapshot import canonical_number
from app.infrastructure.persistence.models.employee import Employee
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.telemetry.logging import get_logger
from app.shared.utils.datetime import ensure_utc, utc_now
from app.shared.utils.generators import generate_employee_display_id

_logger = get_logger(__name__)

UPDATABLE_FIELDS = frozenset(
    {
        "full_name",
        "email",
        "phone_number",
        "department",
        "designation",
        "salary",
        "employment_status",
        "date_of_joining",
    }
)


def _employee_to_result(e: Employee) -> EmployeeResult:
    """Map ORM Employee to application EmployeeResult."""
    return EmployeeResult(
        id=e.id,
        employee_id=e.employee_id,
        full_name=e.full_name,
        email=e.email,
        phone_number=e.phone_number,
        department=e.department,
        designation=e.designation,
        salary=canonical_number(e.salary),
        employment_status=e.employment_status,
        date_of_joining=e.date_of_joining,
        is_deleted=e.is_deleted,
        deleted_at=ensure_utc(e.deleted_at),
        created_at=ensure_utc(e.created_at),
        updated_at=ensure_utc(e.updated_at),
    )


def _column_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _duplicate_field(exc: IntegrityError) -> str | None:
    """Best-effort mapping of a unique-constraint violation to the clashing field."""
    message = str(exc.orig) if exc.orig is not None else str(exc)
    if "email" in message:
        return "email"
    if "phone_number" in message:
        return "phone_number"
    return None


class EmployeeRepository(BaseRepository[Employee]):
    """Employee repository: create, find, save, soft delete, list, stats."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Employee)

    async def _on_after_create(self, obj: Employee) -> None:
        _logger.info("Employee created: id=%s employee_id=%s", obj.id, obj.employee_id)

    async def _on_after_update(self, obj: Employee) -> None:
        _logger.debug("Employee saved: id=%s deleted=%s", obj.id, obj.is_deleted)

    async def _commit_or_duplicate(self) -> None:
        try:
            await self.commit()
        except IntegrityError as exc:
            raise DuplicateEmployeeException(_duplicate_field(exc)) from exc

    async def _get_active_entity(self, employee_id: str) -> Employee | None:
        result = await self.db.execute(
            select(Employee).where(
                Employee.id == employee_id,
                Employee.is_deleted.is_(False),
            )
        )
        return result.scalar_one_or_none()

    async def create_employee(self, data: EmployeeCreate) -> EmployeeResult:
        """Create and commit an employee; raise DuplicateEmployeeException on clash."""
        employee = Employee(
            employee_id=generate_employee_display_id(),
            full_name=data.full_name,
            email=data.email,
            phone_number=data.phone_number,
            department=_column_value(data.department),
            designation=data.designation,
            salary=data.salary,
            employment_status=_column_value(data.employment_status),
            date_of_joining=data.date_of_joining,
            is_deleted=False,
        )
        try:
            created = await self.create(employee)
        except IntegrityError as exc:
            await self.db.rollback()
            raise DuplicateEmployeeException(_duplicate_field(exc)) from exc
        await self._commit_or_duplicate()
        return _employee_to_result(created)

    async def get_active_by_id(self, employee_id: str) -> EmployeeResult | None:
        entity = await self._get_active_entity(employee_id)
        return _employee_to_result(entity) if entity else None

    async def get_by_id_including_deleted(self, employee_id: str) -> EmployeeResult | None:
        entity = await self.get_by_id(employee_id)
        return _employee_to_result(entity) if entity else None

    async def save_changes(
        self, employee_id: str, changes: dict[str, Any]
    ) -> EmployeeResult | None:
        """Apply changes to an active employee and commit; None if not found."""
        unknown = set(changes) - UPDATABLE_FIELDS
        if unknown:
            raise ValidationException(
                f"Fields cannot be updated: {sorted(unknown)}", field=sorted(unknown)[0]
            )
        entity = await self._get_active_entity(employee_id)
        if entity is None:
            return None
        for name, value in changes.items():
            setattr(entity, name, _column_value(value))
        try:
            updated = await self.update(entity)
        except IntegrityError as exc:
            await self.db.rollback()
            raise DuplicateEmployeeException(_duplicate_field(exc)) from exc
        await self._commit_or_duplicate()
        return _employee_to_result(updated)

    async def soft_delete(self, employee_id: str) -> EmployeeResult | None:
        """Flag deleted, stamp deleted_at, set status Inactive, commit."""
        entity = await self._get_active_entity(employee_id)
        if entity is None:
            return None
        entity.is_deleted = True
        entity.deleted_at = utc_now()
        entity.employment_status = EmploymentStatus.INACTIVE.value
        updated = await self.update(entity)
        await self.commit()
        return _employee_to_result(updated)

    async def list_active(
        self, query: EmployeeListQuery
    ) -> tuple[list[EmployeeResult], int]:
        """Return one page of active employees matching search/filters, and the total."""
        conditions = [Employee.is_deleted.is_(False)]
        if query.search:
            term = query.search.strip()
            conditions.append(
                or_(
                    Employee.full_name.icontains(term, autoescape=True),
                    Employee.email.icontains(term, autoescape=True),
                    Employee.employee_id.icontains(term, autoescape=True),
                    Employee.designation.icontains(term, autoescape=True),
                )
            )
        if query.department:
            conditions.append(Employee.department == query.department)
        if query.employment_status:
            conditions.append(Employee.employment_status == query.employment_status)

        sort_column = getattr(Employee, query.sort_by)
        order = sort_column.asc() if query.sort_order == "asc" else sort_column.desc()
        result = await self.db.execute(
            select(Employee)
            .where(*conditions)
            .order_by(order, Employee.id)
            .offset((query.page - 1) * query.limit)
            .limit(query.limit)
        )
        total = await self.db.execute(
            select(func.count(Employee.id)).where(*conditions)
        )
        return (
            [_employee_to_result(e) for e in result.scalars().all()],
            total.scalar() or 0,
        )

    async def get_stats(self) -> EmployeeStats:
        active = Employee.is_deleted.is_(False)
        counts = await self.db.execute(
            select(
                func.count(Employee.id).filter(
                    active,
                    Employee.employment_status == EmploymentStatus.ACTIVE.value,
                ),
                func.count(Employee.id).filter(
                    active,
                    Employee.employment_status == EmploymentStatus.INACTIVE.value,
                ),
                func.count(Employee.id).filter(Employee.is_deleted.is_(True)),
            )
        )
        total_active, total_inactive, total_deleted = counts.one()
        head_count = func.count(Employee.id)
        departments = await self.db.execute(
            select(Employee.department, head_count, func.avg(Employee.salary))
            .where(active)
            .group_by(Employee.department)
            .order_by(head_count.desc(), Employee.department)
        )
        return EmployeeStats(
            total_active=total_active or 0,
            total_inactive=total_inactive or 0,
            total_deleted=total_deleted or 0,
            department_stats=[
                DepartmentStats(
                    department=department,
                    count=count,
                    avg_salary=float(avg) if avg is not None else None,
                )
                for department, count, avg in departments.all()
            ],
        )

    async def list_ids(self, after_id: str | None = None, limit: int = 500) -> list[str]:
        """Keyset-paginated ids of all employees, soft-deleted included."""
        stmt = select(Employee.id).order_by(Employee.id).limit(limit)
        if after_id is not None:
            stmt = stmt.where(Employee.id > after_id)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
