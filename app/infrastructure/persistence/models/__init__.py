"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.employee import Employee
from app.infrastructure.persistence.models.employee_history import EmployeeHistory
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
)

__all__ = [
    "Employee",
    "EmployeeHistory",
    "CuidMixin",
    "SoftDeleteMixin",
    "TimestampMixin",
]
