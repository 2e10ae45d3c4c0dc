"""Create department and employee tables

Revision ID: 3c1f9a7d2b40
Revises:
Create Date: 2026-10-18 09:12:44.118203

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3c1f9a7d2b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    """Create both tables and the per-company department number constraint."""
    op.create_table(
        "department",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company", sa.String(length=100), nullable=False),
        sa.Column("dept_name", sa.String(length=200), nullable=False),
        sa.Column("dept_no", sa.String(length=20), nullable=False),
        sa.Column("location", sa.String(length=200), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("company", "dept_no", name="uq_department_company_dept_no"),
    )
    op.create_index("ix_department_company", "department", ["company"])

    op.create_table(
        "employee",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("company", sa.String(length=100), nullable=False),
        sa.Column("emp_name", sa.String(length=50), nullable=False),
        sa.Column("emp_no", sa.String(length=20), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=False),
        sa.Column("job", sa.String(length=100), nullable=True),
        sa.Column("salary", sa.Numeric(precision=12, scale=2), nullable=True),
        sa.Column("dept_id", sa.Integer(), nullable=True),
        sa.Column("mng_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_employee_company", "employee", ["company"])
    op.create_index("ix_employee_dept_id", "employee", ["dept_id"])


def downgrade():
    """Drop the tables created in upgrade()."""
    op.drop_index("ix_employee_dept_id", table_name="employee")
    op.drop_index("ix_employee_company", table_name="employee")
    op.drop_table("employee")
    op.drop_index("ix_department_company", table_name="department")
    op.drop_table("department")
