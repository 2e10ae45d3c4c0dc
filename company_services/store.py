"""
Company store — the only module that talks to the database.

Services receive a ``CompanyStore`` at construction and call these
primitives; they never touch ``db.session`` themselves.  Every write
commits immediately.  On failure the session is rolled back and the
exception re-raised for the calling service to convert.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from company_services.errors import DuplicateDepartmentNumberError
from company_services.extensions import db
from company_services.models.organization import Department, Employee

logger = logging.getLogger(__name__)


class CompanyStore:
    """CRUD primitives for departments and employees."""

    def __init__(self, database=db):
        self.db = database

    # -- Department queries ------------------------------------------------

    def get_all_departments(self, company: str) -> list[Department]:
        """Return every department owned by ``company``, ordered by id."""
        return (
            Department.query.filter_by(company=company)
            .order_by(Department.id)
            .all()
        )

    def get_department(self, company: str, dept_id: int) -> Department | None:
        """Return a department by id within ``company``, or None."""
        return Department.query.filter_by(company=company, id=dept_id).first()

    def get_department_by_no(self, company: str, dept_no: str) -> Department | None:
        """Return the department holding ``dept_no`` in ``company``, or None."""
        return Department.query.filter_by(company=company, dept_no=dept_no).first()

    # -- Department writes -------------------------------------------------

    def insert_department(self, dept: Department) -> Department:
        """
        Persist a new department and return it with its generated id.

        Raises:
            DuplicateDepartmentNumberError: If the unique constraint on
                ``(company, dept_no)`` rejects the row.
        """
        self.db.session.add(dept)
        self._commit_department(dept.company, dept.dept_no)
        logger.debug("Inserted department row id=%s", dept.id)
        return dept

    def update_department(self, candidate: Department) -> Department | None:
        """
        Replace the editable fields of an existing department.

        The row is located by ``(candidate.company, candidate.id)``, so a
        candidate naming another company never matches.

        Returns:
            The updated Department, or None if no row matched.
        """
        if candidate.id is None:
            return None
        dept = self.get_department(candidate.company, candidate.id)
        if dept is None:
            return None

        dept.dept_name = candidate.dept_name
        dept.dept_no = candidate.dept_no
        dept.location = candidate.location
        dept.updated_at = datetime.now(timezone.utc)

        self._commit_department(dept.company, dept.dept_no)
        return dept

    def delete_department(self, company: str, dept_id: int) -> int:
        """Delete a department and return the number of rows removed."""
        deleted = Department.query.filter_by(company=company, id=dept_id).delete(
            synchronize_session=False
        )
        self._commit()
        return deleted

    # -- Employee queries --------------------------------------------------

    def get_all_employees(self, company: str) -> list[Employee]:
        """Return every employee stamped with ``company``, ordered by id."""
        return (
            Employee.query.filter_by(company=company)
            .order_by(Employee.id)
            .all()
        )

    def get_employee(self, emp_id: int) -> Employee | None:
        """Return an employee by primary key, or None if not found."""
        return self.db.session.get(Employee, emp_id)

    # -- Employee writes ---------------------------------------------------

    def insert_employee(self, emp: Employee) -> Employee:
        """Persist a new employee and return it with its generated id."""
        self.db.session.add(emp)
        self._commit()
        logger.debug("Inserted employee row id=%s", emp.id)
        return emp

    def update_employee(self, candidate: Employee) -> Employee | None:
        """
        Replace the editable fields of an existing employee.

        ``hire_date`` is only replaced when the candidate carries one.

        Returns:
            The updated Employee, or None if no row matched.
        """
        if candidate.id is None:
            return None
        emp = self.get_employee(candidate.id)
        if emp is None:
            return None

        emp.emp_name = candidate.emp_name
        emp.emp_no = candidate.emp_no
        if candidate.hire_date is not None:
            emp.hire_date = candidate.hire_date
        emp.job = candidate.job
        emp.salary = candidate.salary
        emp.dept_id = candidate.dept_id
        emp.mng_id = candidate.mng_id or 0
        emp.updated_at = datetime.now(timezone.utc)

        self._commit()
        return emp

    # -- Transaction helpers -----------------------------------------------

    def _commit(self) -> None:
        """Commit the session, rolling back before re-raising on failure."""
        try:
            self.db.session.commit()
        except SQLAlchemyError:
            self.db.session.rollback()
            raise

    def _commit_department(self, company: str, dept_no: str) -> None:
        """
        Commit a department write, translating a ``(company, dept_no)``
        collision into ``DuplicateDepartmentNumberError``.
        """
        try:
            self.db.session.commit()
        except IntegrityError as exc:
            self.db.session.rollback()
            if self.get_department_by_no(company, dept_no) is not None:
                raise DuplicateDepartmentNumberError(company, dept_no) from exc
            raise
        except SQLAlchemyError:
            self.db.session.rollback()
            raise
