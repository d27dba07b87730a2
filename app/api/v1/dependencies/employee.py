"""Employee service and history recorder dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import (
    IEmployeeHistoryRepository,
    IEmployeeRepository,
)
from app.application.services.history_recorder import HistoryRecorder
from app.application.use_cases.employees import EmployeeService

from .db import get_employee_repo, get_history_repo


async def get_history_recorder(
    history_repo: Annotated[IEmployeeHistoryRepository, Depends(get_history_repo)],
) -> HistoryRecorder:
    return HistoryRecorder(history_repo)


async def get_employee_service(
    employee_repo: Annotated[IEmployeeRepository, Depends(get_employee_repo)],
    history_recorder: Annotated[HistoryRecorder, Depends(get_history_recorder)],
) -> EmployeeService:
    """Employee CRUD; every mutation is followed by its history append."""
    return EmployeeService(employee_repo, history_recorder)
