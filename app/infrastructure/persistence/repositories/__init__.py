"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.employee_history_repo import (
    EmployeeHistoryRepository,
)
from app.infrastructure.persistence.repositories.employee_repo import EmployeeRepository

__all__ = [
    "BaseRepository",
    "EmployeeHistoryRepository",
    "EmployeeRepository",
]
