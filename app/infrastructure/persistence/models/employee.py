"""Employee ORM model. Current-state row per employee (the subject store)."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.enums import EmploymentStatus
from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import (
    CuidMixin,
    SoftDeleteMixin,
    TimestampMixin,
)


class Employee(CuidMixin, TimestampMixin, SoftDeleteMixin, Base):
    """Employee entity. Table: employee. Soft-deleted rows stay for history."""

    __tablename__ = "employee"

    employee_id: Mapped[str] = mapped_column(String(32), nullable=False, unique=True, index=True)
    full_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    phone_number: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    department: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    designation: Mapped[str] = mapped_column(String(100), nullable=False)
    salary: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False)
    employment_status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=EmploymentStatus.ACTIVE.value
    )
    date_of_joining: Mapped[date] = mapped_column(Date, nullable=False)

    __table_args__ = (
        Index("ix_employee_active_created", "is_deleted", "created_at"),
    )
