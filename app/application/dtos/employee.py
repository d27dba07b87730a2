"""DTOs for employee use cases (no dependency on ORM)."""

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any

from app.domain.enums import Department, EmploymentStatus
from app.domain.value_objects.snapshot import Snapshot
from app.domain.value_objects.tracked_fields import build_snapshot


@dataclass(frozen=True)
class EmployeeCreate:
    """Input for creating an employee (already validated at the HTTP boundary)."""

    full_name: str
    email: str
    phone_number: str
    department: Department
    designation: str
    salary: float
    date_of_joining: date
    employment_status: EmploymentStatus = EmploymentStatus.ACTIVE


@dataclass(frozen=True)
class EmployeeUpdate:
    """Partial update: None means 'leave unchanged'."""

    full_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    department: Department | None = None
    designation: str | None = None
    salary: float | None = None
    employment_status: EmploymentStatus | None = None
    date_of_joining: date | None = None

    def provided(self) -> dict[str, Any]:
        """Return only the fields the caller set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class EmployeeResult:
    """Employee read-model (current state from the subject store)."""

    id: str
    employee_id: str
    full_name: str
    email: str
    phone_number: str
    department: str
    designation: str
    salary: float
    employment_status: str
    date_of_joining: date
    is_deleted: bool
    deleted_at: datetime | None
    created_at: datetime
    updated_at: datetime

    def to_snapshot(self) -> Snapshot:
        """Return the canonical snapshot of this state (history payload)."""
        return build_snapshot(
            {
                "id": self.id,
                "employee_id": self.employee_id,
                "full_name": self.full_name,
                "email": self.email,
                "phone_number": self.phone_number,
                "department": self.department,
                "designation": self.designation,
                "salary": self.salary,
                "employment_status": self.employment_status,
                "date_of_joining": self.date_of_joining,
                "is_deleted": self.is_deleted,
                "deleted_at": self.deleted_at,
            }
        )


@dataclass(frozen=True)
class EmployeeListQuery:
    """Filters, sort, and pagination for listing active employees."""

    page: int = 1
    limit: int = 10
    search: str | None = None
    department: str | None = None
    employment_status: str | None = None
    sort_by: str = "created_at"
    sort_order: str = "desc"


@dataclass(frozen=True)
class DepartmentStats:
    """Head count and average salary for one department."""

    department: str
    count: int
    avg_salary: float | None


@dataclass(frozen=True)
class EmployeeStats:
    """Overview counts (GET /employees/stats/overview)."""

    total_active: int
    total_inactive: int
    total_deleted: int
    department_stats: list[DepartmentStats] = field(default_factory=list)

    @property
    def total_employees(self) -> int:
        return self.total_active + self.total_inactive
