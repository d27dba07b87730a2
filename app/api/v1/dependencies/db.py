"""Repository dependencies (composition root).

Both repositories in one request share the session from get_db; each
repository commits its own phase of a mutation.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import (
    EmployeeHistoryRepository,
    EmployeeRepository,
)


async def get_employee_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeRepository:
    return EmployeeRepository(db)


async def get_history_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> EmployeeHistoryRepository:
    return EmployeeHistoryRepository(db)
