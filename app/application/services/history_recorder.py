"""History recorder: turns one committed employee mutation into one history record.

Second phase of the two-phase write. The employee store has already
committed when record() is called, so a failure here leaves the employee
state ahead of its audit trail. That failure is logged for operators and
raised as InconsistentWriteException; it is never swallowed and never
retried here. HistoryReconciler repairs the gap.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from app.application.dtos.history import HistoryRecordCreate
from app.application.interfaces.repositories import IEmployeeHistoryRepository
from app.application.services.field_differ import diff
from app.domain.entities.history_record import HistoryRecord
from app.domain.enums import HistoryOperation
from app.domain.exceptions import InconsistentWriteException
from app.domain.value_objects.provenance import Provenance
from app.domain.value_objects.snapshot import Snapshot
from app.domain.value_objects.tracked_fields import (
    TRACKED_FIELD_NAMES,
    TRACKED_FIELDS_VERSION,
)
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DEFAULT_REASONS: dict[HistoryOperation, str] = {
    HistoryOperation.CREATE: "Employee record created",
    HistoryOperation.UPDATE: "Employee record updated",
    HistoryOperation.DELETE: "Employee record deleted",
}


class HistoryRecorder:
    """Compute the delta for an operation and append it to the history store."""

    def __init__(
        self,
        history_repo: IEmployeeHistoryRepository,
        tracked_fields: Sequence[str] = TRACKED_FIELD_NAMES,
    ) -> None:
        self.history_repo = history_repo
        self.tracked_fields = tuple(tracked_fields)

    def build_entry(
        self,
        employee_ref: str,
        operation: HistoryOperation,
        before: Snapshot | None,
        after: Snapshot,
        provenance: Provenance,
    ) -> HistoryRecordCreate:
        """Return the record to append; changes are computed for UPDATE only."""
        changes = (
            tuple(diff(self.tracked_fields, before, after))
            if operation == HistoryOperation.UPDATE
            else ()
        )
        return HistoryRecordCreate(
            employee_ref=employee_ref,
            employee_display_id=str(after.get("employee_id") or ""),
            operation=operation,
            changes=changes,
            snapshot=after,
            changed_by=provenance.changed_by,
            change_reason=provenance.reason_or(DEFAULT_REASONS[operation]),
            tracked_fields_version=TRACKED_FIELDS_VERSION,
        )

    async def record(
        self,
        employee_ref: str,
        operation: HistoryOperation,
        before: Snapshot | None,
        after: Snapshot,
        provenance: Provenance,
    ) -> HistoryRecord:
        """Append one history record for a mutation that has already committed.

        The append runs as its own task, shielded from caller cancellation.
        If the caller is cancelled mid-append, record() still waits for the
        append to finish (so the request session outlives it), logs a failed
        append at ERROR, and then re-raises the cancellation.

        Raises:
            InconsistentWriteException: If the history store rejects the append.
        """
        entry = self.build_entry(employee_ref, operation, before, after, provenance)
        append_task = asyncio.ensure_future(self.history_repo.append(entry))
        try:
            record = await asyncio.shield(append_task)
        except asyncio.CancelledError:
            await self._settle_after_cancel(append_task, employee_ref, operation)
            raise
        except Exception as exc:
            logger.error(
                "History write failed after employee write committed: employee_id=%s operation=%s error=%s",
                employee_ref,
                operation.value,
                exc,
                exc_info=True,
            )
            raise InconsistentWriteException(
                employee_id=employee_ref,
                operation=operation.value,
                reason=type(exc).__name__,
            ) from exc
        logger.info(
            "History recorded: employee_id=%s operation=%s history_id=%s changes=%d",
            employee_ref,
            operation.value,
            record.id,
            len(record.changes),
        )
        return record

    async def _settle_after_cancel(
        self,
        append_task: asyncio.Future[HistoryRecord],
        employee_ref: str,
        operation: HistoryOperation,
    ) -> None:
        """Wait out an append whose caller was cancelled and log how it ended."""
        while not append_task.done():
            try:
                await asyncio.shield(append_task)
            except asyncio.CancelledError:
                continue
            except Exception:
                break
        if append_task.cancelled():
            logger.error(
                "History write cancelled after employee write committed: employee_id=%s operation=%s",
                employee_ref,
                operation.value,
            )
            return
        exc = append_task.exception()
        if exc is not None:
            logger.error(
                "History write failed after employee write committed (request cancelled): employee_id=%s operation=%s error=%s",
                employee_ref,
                operation.value,
                exc,
                exc_info=exc,
            )
            return
        logger.info(
            "History recorded after request cancelled: employee_id=%s operation=%s history_id=%s",
            employee_ref,
            operation.value,
            append_task.result().id,
        )
