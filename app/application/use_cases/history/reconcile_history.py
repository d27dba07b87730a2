"""History reconciliation: repair the audit trail after an inconsistent write.

Compares the employee's current state with the latest history snapshot and
appends the missing record, if any. Run after an InconsistentWriteException
or from an operator script; running it on a consistent trail is a no-op.
"""

from __future__ import annotations

from app.application.dtos.history import ReconcileResult
from app.application.interfaces.repositories import (
    IEmployeeHistoryRepository,
    IEmployeeRepository,
)
from app.application.services.field_differ import diff
from app.application.services.history_recorder import HistoryRecorder
from app.domain.enums import HistoryOperation
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.provenance import Provenance
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

RECONCILE_REASON = "History reconciled with current employee state"


class HistoryReconciler:
    """Append the record missing between the latest history entry and current state."""

    def __init__(
        self,
        employee_repo: IEmployeeRepository,
        history_repo: IEmployeeHistoryRepository,
        history_recorder: HistoryRecorder,
    ) -> None:
        self.employee_repo = employee_repo
        self.history_repo = history_repo
        self.history_recorder = history_recorder

    async def reconcile(self, employee_id: str, provenance: Provenance) -> ReconcileResult:
        """Reconcile one employee. Returns repaired=False when the trail is current.

        Not serialized: two reconciles of one employee running at once can both
        read the same stale latest record and both append. This is the same
        last-write-wins gap as concurrent employee updates; running reconcile
        again afterwards finds the trail current.
        """
        employee = await self.employee_repo.get_by_id_including_deleted(employee_id)
        if employee is None:
            raise ResourceNotFoundException("employee", employee_id)
        current = employee.to_snapshot()
        latest = await self.history_repo.get_latest_for_employee(employee_id)

        operation: HistoryOperation | None
        if latest is None:
            operation = HistoryOperation.CREATE
        elif employee.is_deleted and latest.operation != HistoryOperation.DELETE:
            operation = HistoryOperation.DELETE
        elif diff(self.history_recorder.tracked_fields, latest.snapshot, current):
            operation = HistoryOperation.UPDATE
        else:
            operation = None

        if operation is None:
            return ReconcileResult(employee_id=employee_id, repaired=False)

        logger.warning(
            "Reconciling history: employee_id=%s appending %s",
            employee_id,
            operation.value,
        )
        record = await self.history_recorder.record(
            employee_ref=employee_id,
            operation=operation,
            before=latest.snapshot if latest is not None else None,
            after=current,
            provenance=Provenance(
                changed_by=provenance.changed_by,
                change_reason=provenance.reason_or(RECONCILE_REASON),
            ),
        )
        return ReconcileResult(employee_id=employee_id, repaired=True, record=record)
