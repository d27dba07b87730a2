"""History query, comparison, and reconciliation dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from app.application.interfaces.repositories import (
    IEmployeeHistoryRepository,
    IEmployeeRepository,
)
from app.application.services.history_recorder import HistoryRecorder
from app.application.use_cases.history import (
    HistoryQueryService,
    HistoryReconciler,
    VersionComparator,
)
from app.core.config import get_settings

from .db import get_employee_repo, get_history_repo
from .employee import get_history_recorder


async def get_history_query_service(
    history_repo: Annotated[IEmployeeHistoryRepository, Depends(get_history_repo)],
    employee_repo: Annotated[IEmployeeRepository, Depends(get_employee_repo)],
) -> HistoryQueryService:
    return HistoryQueryService(
        history_repo,
        employee_repo,
        max_page_size=get_settings().history_page_size_max,
    )


async def get_version_comparator(
    history_repo: Annotated[IEmployeeHistoryRepository, Depends(get_history_repo)],
) -> VersionComparator:
    return VersionComparator(history_repo)


async def get_history_reconciler(
    employee_repo: Annotated[IEmployeeRepository, Depends(get_employee_repo)],
    history_repo: Annotated[IEmployeeHistoryRepository, Depends(get_history_repo)],
    history_recorder: Annotated[HistoryRecorder, Depends(get_history_recorder)],
) -> HistoryReconciler:
    """Reconciler shares the request session with the recorder it appends through."""
    return HistoryReconciler(employee_repo, history_repo, history_recorder)
