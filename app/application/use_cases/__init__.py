"""Application use cases: one entry point per workflow."""

from app.application.use_cases.employees import EmployeeService
from app.application.use_cases.history import (
    HistoryQueryService,
    HistoryReconciler,
    VersionComparator,
)

__all__ = [
    "EmployeeService",
    "HistoryQueryService",
    "HistoryReconciler",
    "VersionComparator",
]
