"""Application DTOs (no ORM dependency)."""

from app.application.dtos.employee import (
    DepartmentStats,
    EmployeeCreate,
    EmployeeListQuery,
    EmployeeResult,
    EmployeeStats,
    EmployeeUpdate,
)
from app.application.dtos.history import (
    HistoryPage,
    HistoryRecordCreate,
    ReconcileResult,
    VersionComparison,
)

__all__ = [
    "DepartmentStats",
    "EmployeeCreate",
    "EmployeeListQuery",
    "EmployeeResult",
    "EmployeeStats",
    "EmployeeUpdate",
    "HistoryPage",
    "HistoryRecordCreate",
    "ReconcileResult",
    "VersionComparison",
]
