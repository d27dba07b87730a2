"""initial_schema_employee_history

Revision ID: 3f2a9c1d7b10
Revises:
Create Date: 2026-10-16 09:12:40.118302

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create employee and employee_history tables."""
    op.create_table(
        "employee",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("employee_id", sa.String(length=32), nullable=False),
        sa.Column("full_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone_number", sa.String(length=32), nullable=False),
        sa.Column("department", sa.String(length=64), nullable=False),
        sa.Column("designation", sa.String(length=100), nullable=False),
        sa.Column("salary", sa.Numeric(precision=14, scale=2), nullable=False),
        sa.Column("employment_status", sa.String(length=16), nullable=False),
        sa.Column("date_of_joining", sa.Date(), nullable=False),
        sa.Column(
            "is_deleted", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="employee_email_key"),
        sa.UniqueConstraint("phone_number", name="employee_phone_number_key"),
    )
    op.create_index("ix_employee_employee_id", "employee", ["employee_id"], unique=True)
    op.create_index("ix_employee_department", "employee", ["department"])
    op.create_index("ix_employee_is_deleted", "employee", ["is_deleted"])
    op.create_index("ix_employee_active_created", "employee", ["is_deleted", "created_at"])

    op.create_table(
        "employee_history",
        sa.Column("id", sa.String(length=24), nullable=False),
        sa.Column("employee_ref", sa.String(length=24), nullable=False),
        sa.Column("employee_display_id", sa.String(length=32), nullable=False),
        sa.Column("operation", sa.String(length=16), nullable=False),
        sa.Column("changes", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("snapshot", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("changed_by", sa.String(length=255), nullable=False),
        sa.Column("change_reason", sa.Text(), nullable=False),
        sa.Column("tracked_fields_version", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["employee_ref"], ["employee.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "operation IN ('CREATE', 'UPDATE', 'DELETE')",
            name="ck_employee_history_operation",
        ),
    )
    op.create_index(
        "ix_employee_history_employee_ref", "employee_history", ["employee_ref"]
    )
    op.create_index(
        "ix_employee_history_employee_display_id",
        "employee_history",
        ["employee_display_id"],
    )
    op.create_index(
        "ix_employee_history_employee_created",
        "employee_history",
        ["employee_ref", sa.text("created_at DESC")],
    )

    # Append-only at the database level as well as in the ORM.
    op.execute(
        """
        CREATE OR REPLACE FUNCTION employee_history_append_only()
        RETURNS trigger AS $$
        BEGIN
            RAISE EXCEPTION 'employee_history is append-only';
        END;
        $$ LANGUAGE plpgsql;
        """
    )
    op.execute(
        """
        CREATE TRIGGER employee_history_no_update_delete
        BEFORE UPDATE OR DELETE ON employee_history
        FOR EACH ROW EXECUTE FUNCTION employee_history_append_only();
        """
    )


def downgrade() -> None:
    """Drop employee_history and employee tables."""
    op.execute("DROP TRIGGER IF EXISTS employee_history_no_update_delete ON employee_history")
    op.execute("DROP FUNCTION IF EXISTS employee_history_append_only()")
    op.drop_index("ix_employee_history_employee_created", table_name="employee_history")
    op.drop_index("ix_employee_history_employee_display_id", table_name="employee_history")
    op.drop_index("ix_employee_history_employee_ref", table_name="employee_history")
    op.drop_table("employee_history")
    op.drop_index("ix_employee_active_created", table_name="employee")
    op.drop_index("ix_employee_is_deleted", table_name="employee")
    op.drop_index("ix_employee_department", table_name="employee")
    op.drop_index("ix_employee_employee_id", table_name="employee")
    op.drop_table("employee")
