"""
Employee service — list, fetch, hire and update employees.

Hiring applies the rules in a fixed order and stops at the first one
that fails:

  1. ``hire_date`` parses as ``yyyy-MM-dd``.
  2. ``hire_date`` is not after today.
  3. A non-zero ``mng_id`` resolves to an existing employee.
  4. ``hire_date`` is a weekday.
  5. ``emp_name`` is present and at most 50 characters.

Looking up a single employee that does not exist is *not* an error:
it answers 200 with an explanatory message, unlike departments.
"""

import logging
from datetime import date
from decimal import Decimal
from http import HTTPStatus
from typing import Callable

from company_services.errors import PayloadError, ServiceError, ValidationError
from company_services.models.organization import Employee
from company_services.results import ServiceResult
from company_services.serializers import CompanySerializer
from company_services.services.common import rejected, server_error
from company_services.store import CompanyStore
from company_services.validators import (
    check_business_day,
    check_not_future,
    check_tenant,
    parse_hire_date,
    validate_employee_id,
    validate_employee_name,
    validate_hire_date,
)

logger = logging.getLogger(__name__)


class EmployeeService:
    """
    Business rules for employees.

    Args:
        store:        Persistence primitives.
        serializer:   Converts entities to and from the wire format.
        company_name: The configured tenant; stamped on new employees.
        today:        Clock used for the "not in the future" rule.
    """

    def __init__(
        self,
        store: CompanyStore,
        serializer: CompanySerializer,
        company_name: str,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.serializer = serializer
        self.company_name = company_name
        self.today = today

    # -- Reads -------------------------------------------------------------

    def list_employees(self, company: str | None) -> ServiceResult:
        """Return all employees; unknown company or none found is a 200 message."""
        empty_message = f"No employees found for the company name provided: {company}."
        if not check_tenant(self.company_name, company):
            logger.info("Employee list requested for unknown company %r", company)
            return ServiceResult.empty(empty_message)

        try:
            employees = self.store.get_all_employees(company)
            if not employees:
                return ServiceResult.empty(empty_message)
            return ServiceResult.ok(self.serializer.employees_to_list(employees))
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(logger, f"Failed to connect to the database: {exc}.")

    def get_employee(self, emp_id: int) -> ServiceResult:
        """Return one employee, or a 200 "no employee found" message."""
        try:
            employee = self.store.get_employee(emp_id)
            if employee is None:
                return ServiceResult.empty(f"No employee found with ID: {emp_id}.")
            return ServiceResult.ok(self.serializer.employee_to_dict(employee))
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(
                logger, f"Failed to retrieve the employee data. Reason: {exc}"
            )

    # -- Writes ------------------------------------------------------------

    def insert_employee(
        self,
        emp_name: str | None,
        emp_no: str | None,
        hire_date_string: str | None,
        job: str | None,
        salary: Decimal | None,
        dept_id: int | None,
        mng_id: int | None,
    ) -> ServiceResult:
        """
        Hire a new employee.

        Returns:
            201 with the serialized employee on success; 400 for any
            broken rule; 500 if the store fails.
        """
        mng_id = mng_id or 0
        try:
            hire_date = parse_hire_date(hire_date_string)
            check_not_future(hire_date, self.today())

            if mng_id != 0 and not self._manager_exists(mng_id):
                raise ValidationError("Invalid manager ID: No matching manager found.")

            check_business_day(hire_date)
            validate_employee_name(emp_name)

            new_employee = Employee(
                company=self.company_name,
                emp_name=emp_name,
                emp_no=emp_no,
                hire_date=hire_date,
                job=job,
                salary=salary,
                dept_id=dept_id,
                mng_id=mng_id,
            )
            employee = self.store.insert_employee(new_employee)
            if employee is None:
                logger.error("Store returned no row for employee %s", emp_no)
                return ServiceResult.error(
                    HTTPStatus.INTERNAL_SERVER_ERROR, "Employee could not be created."
                )

            logger.info(
                "Hired employee %s (%s) id=%d on %s",
                employee.emp_no,
                employee.emp_name,
                employee.id,
                hire_date.isoformat(),
            )
            return ServiceResult.created(self.serializer.employee_to_dict(employee))
        except ServiceError as exc:
            return rejected(logger, exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(logger, f"An unexpected error occurred: {exc}")

    def update_employee(self, payload: str | bytes | None) -> ServiceResult:
        """
        Replace an employee from a JSON payload.

        Checks, in order: payload present, JSON valid, ``id > 0``,
        ``empName`` present and short enough, then the same hire-date and
        manager rules as hiring.  A payload without ``hireDate`` keeps the
        stored date.  An id with no row is 404.
        """
        if payload is None or not payload.strip():
            return rejected(
                logger,
                ValidationError("The employee JSON payload cannot be empty or null."),
            )

        try:
            try:
                candidate = self.serializer.load_employee(payload)
            except PayloadError as exc:
                raise PayloadError(f"The JSON format is invalid: {exc.message}.") from exc

            validate_employee_id(candidate.id)
            validate_employee_name(candidate.emp_name)
            if candidate.hire_date is not None:
                validate_hire_date(candidate.hire_date, self.today())
            if candidate.mng_id and not self._manager_exists(candidate.mng_id):
                raise ValidationError("Invalid manager ID: No matching manager found.")

            employee = self.store.update_employee(candidate)
            if employee is None:
                return ServiceResult.error(
                    HTTPStatus.NOT_FOUND, "Employee not found or could not be updated."
                )

            logger.info("Updated employee id=%d", employee.id)
            return ServiceResult.ok(self.serializer.employee_to_dict(employee))
        except ServiceError as exc:
            return rejected(logger, exc)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            return server_error(logger, f"Employee update failed: {exc}")

    # -- Helpers -----------------------------------------------------------

    def _manager_exists(self, mng_id: int) -> bool:
        """
        Resolve a manager through ``get_employee``.

        ``get_employee`` answers 200 even when nobody matches, so the body
        shape decides: only a real employee record counts.
        """
        result = self.get_employee(mng_id)
        return result.is_success and not result.is_empty
