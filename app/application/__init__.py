"""Application layer: interfaces, services, use cases.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.interfaces import (
    IEmployeeHistoryRepository,
    IEmployeeRepository,
)
from app.application.services import HistoryRecorder
from app.application.use_cases import (
    EmployeeService,
    HistoryQueryService,
    HistoryReconciler,
    VersionComparator,
)

__all__ = [
    "EmployeeService",
    "HistoryQueryService",
    "HistoryReconciler",
    "HistoryRecorder",
    "IEmployeeHistoryRepository",
    "IEmployeeRepository",
    "VersionComparator",
]
