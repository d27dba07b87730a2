"""Employee API schemas."""

from datetime import date, datetime

from pydantic import ConfigDict, EmailStr, Field, field_validator

from app.application.dtos.employee import EmployeeCreate, EmployeeUpdate
from app.domain.enums import Department, EmploymentStatus
from app.schemas.base import CamelModel, PaginationResponse

PHONE_PATTERN = r"^[+]?[(]?[0-9]{3}[)]?[-\s.]?[0-9]{3}[-\s.]?[0-9]{4,6}$"


class EmployeeCreateRequest(CamelModel):
    """Request body for creating an employee."""

    full_name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    phone_number: str = Field(..., pattern=PHONE_PATTERN)
    department: Department
    designation: str = Field(..., min_length=1, max_length=100)
    salary: float = Field(..., ge=0)
    employment_status: EmploymentStatus = EmploymentStatus.ACTIVE
    date_of_joining: date

    @field_validator("email")
    @classmethod
    def _lowercase_email(cls, v: str) -> str:
        return v.lower()

    def to_dto(self) -> EmployeeCreate:
        return EmployeeCreate(
            full_name=self.full_name,
            email=self.email,
            phone_number=self.phone_number,
            department=self.department,
            designation=self.designation,
            salary=self.salary,
            employment_status=self.employment_status,
            date_of_joining=self.date_of_joining,
        )


class EmployeeUpdateRequest(CamelModel):
    """Request body for updating an employee (partial; omitted fields are unchanged)."""

    full_name: str | None = Field(default=None, min_length=2, max_length=100)
    email: EmailStr | None = None
    phone_number: str | None = Field(default=None, pattern=PHONE_PATTERN)
    department: Department | None = None
    designation: str | None = Field(default=None, min_length=1, max_length=100)
    salary: float | None = Field(default=None, ge=0)
    employment_status: EmploymentStatus | None = None
    date_of_joining: date | None = None

    @field_validator("email")
    @classmethod
    def _lowercase_email(cls, v: str | None) -> str | None:
        return v.lower() if v else v

    def to_dto(self) -> EmployeeUpdate:
        return EmployeeUpdate(**self.model_dump(exclude_none=True))


class EmployeeResponse(CamelModel):
    """Employee current state."""

    model_config = ConfigDict(from_attributes=True)

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
    is_deleted: bool = False
    deleted_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class EmployeeListResponse(CamelModel):
    """One page of active employees."""

    data: list[EmployeeResponse]
    pagination: PaginationResponse


class DepartmentStatsResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    department: str
    count: int
    avg_salary: float | None = None


class EmployeeStatsResponse(CamelModel):
    """Overview counts for GET /employees/stats/overview."""

    model_config = ConfigDict(from_attributes=True)

    total_active: int
    total_inactive: int
    total_deleted: int
    total_employees: int
    department_stats: list[DepartmentStatsResponse] = Field(default_factory=list)
