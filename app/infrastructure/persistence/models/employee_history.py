"""Employee history ORM model. Append-only audit trail of employee mutations."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    CheckConstraint,
    Connection,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    event,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, Mapper, mapped_column

from app.infrastructure.persistence.database import Base
from app.shared.utils.datetime import utc_now
from app.shared.utils.generators import generate_cuid


class EmployeeHistory(Base):
    """One history record per employee mutation. No update/delete.

    created_at is assigned in Python at append time (not transaction start)
    so records appended in one transaction still order correctly.
    """

    __tablename__ = "employee_history"

    id: Mapped[str] = mapped_column(String(24), primary_key=True, default=generate_cuid)
    employee_ref: Mapped[str] = mapped_column(
        String(24),
        ForeignKey("employee.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    employee_display_id: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    operation: Mapped[str] = mapped_column(String(16), nullable=False)
    changes: Mapped[list[dict[str, Any]]] = mapped_column(JSONB, nullable=False, default=list)
    snapshot: Mapped[dict[str, Any]] = mapped_column(JSONB, nullable=False)
    changed_by: Mapped[str] = mapped_column(String(255), nullable=False)
    change_reason: Mapped[str] = mapped_column(Text, nullable=False, default="")
    # Version of the tracked-field list that produced changes and snapshot.
    tracked_fields_version: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    __table_args__ = (
        CheckConstraint(
            "operation IN ('CREATE', 'UPDATE', 'DELETE')",
            name="ck_employee_history_operation",
        ),
    )


# Serves list-by-employee (newest first) and latest-record lookups.
Index(
    "ix_employee_history_employee_created",
    EmployeeHistory.employee_ref,
    EmployeeHistory.created_at.desc(),
)


@event.listens_for(EmployeeHistory, "before_update")
def _prevent_history_updates(
    _mapper: Mapper[Any], _connection: Connection, _target: EmployeeHistory
) -> None:
    """History records are append-only; updates are forbidden."""
    raise ValueError(
        "Employee history records are immutable and cannot be updated."
    )


@event.listens_for(EmployeeHistory, "before_delete")
def _prevent_history_deletes(
    _mapper: Mapper[Any], _connection: Connection, _target: EmployeeHistory
) -> None:
    """History records survive employee soft delete and cannot be removed."""
    raise ValueError(
        "Employee history records cannot be deleted."
    )
