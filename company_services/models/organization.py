"""
Company structure models — departments and the employees within them.

``Department.dept_no`` is the business identifier and is unique per
company.  Employee foreign keys (``dept_id``, ``mng_id``) are plain
integers: ``mng_id`` uses ``0`` for "no manager", and neither is checked
for existence by the database.
"""

from company_services.extensions import db


class Department(db.Model):
    """
    Organizational unit owned by a single company (the tenant).

    ``id`` is assigned by the database and never changes.  The
    ``(company, dept_no)`` unique constraint backs up the service-level
    uniqueness check, which is a read-then-write pair.
    """

    __tablename__ = "department"
    __table_args__ = (
        db.UniqueConstraint("company", "dept_no", name="uq_department_company_dept_no"),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    company = db.Column(db.String(100), nullable=False, index=True)
    dept_name = db.Column(db.String(200), nullable=False)
    dept_no = db.Column(db.String(20), nullable=False)
    location = db.Column(db.String(200), nullable=True)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.current_timestamp()
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.current_timestamp()
    )

    def __repr__(self) -> str:
        return f"<Department {self.dept_no}: {self.dept_name}>"


class Employee(db.Model):
    """
    Individual employee record.

    ``company`` is stamped from the configured tenant on insert and is
    not part of the wire representation.
    """

    __tablename__ = "employee"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    company = db.Column(db.String(100), nullable=False, index=True)
    emp_name = db.Column(db.String(50), nullable=False)
    emp_no = db.Column(db.String(20), nullable=True)
    hire_date = db.Column(db.Date, nullable=False)
    job = db.Column(db.String(100), nullable=True)
    salary = db.Column(db.Numeric(12, 2), nullable=True)
    dept_id = db.Column(db.Integer, nullable=True, index=True)
    mng_id = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.current_timestamp()
    )
    updated_at = db.Column(
        db.DateTime, nullable=False, server_default=db.func.current_timestamp()
    )

    def __repr__(self) -> str:
        return f"<Employee {self.emp_no}: {self.emp_name}>"
