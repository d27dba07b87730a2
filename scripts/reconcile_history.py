"""Reconcile employee history with current employee state.

Appends the record missing after an INCONSISTENT_WRITE failure (employee
saved, history append failed). Employees whose trail is already current
are left untouched, so the script is safe to re-run.

Usage:
    python -m scripts.reconcile_history [employee_id ...]
If no employee ids are given, every employee (including soft-deleted) is checked.
Requires Postgres (DATABASE_URL).
"""

import asyncio
import sys

import app.infrastructure.persistence.database as database
from app.application.services.history_recorder import HistoryRecorder
from app.application.use_cases.history import HistoryReconciler
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.provenance import Provenance
from app.infrastructure.persistence.repositories import (
    EmployeeHistoryRepository,
    EmployeeRepository,
)
from app.shared.telemetry.logging import setup_logging

BATCH_SIZE = 500


async def _all_employee_ids() -> list[str]:
    ids: list[str] = []
    async with database.AsyncSessionLocal() as session:
        repo = EmployeeRepository(session)
        after_id: str | None = None
        while True:
            batch = await repo.list_ids(after_id=after_id, limit=BATCH_SIZE)
            if not batch:
                break
            ids.extend(batch)
            after_id = batch[-1]
    return ids


async def main() -> None:
    """Reconcile the given employees, or all of them."""
    setup_logging()
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        print("DATABASE_URL not configured", file=sys.stderr)
        sys.exit(1)

    employee_ids = sys.argv[1:] or await _all_employee_ids()
    provenance = Provenance(changed_by="reconcile-script")
    repaired = 0

    for employee_id in employee_ids:
        async with database.AsyncSessionLocal() as session:
            history_repo = EmployeeHistoryRepository(session)
            reconciler = HistoryReconciler(
                EmployeeRepository(session),
                history_repo,
                HistoryRecorder(history_repo),
            )
            try:
                result = await reconciler.reconcile(employee_id, provenance)
            except ResourceNotFoundException:
                print(f"Employee {employee_id}: not found", file=sys.stderr)
                continue
        if result.repaired and result.record is not None:
            repaired += 1
            print(f"Employee {employee_id}: appended {result.record.operation.value}")

    print(f"Done. Checked {len(employee_ids)} employee(s), repaired {repaired}")


if __name__ == "__main__":
    asyncio.run(main())
