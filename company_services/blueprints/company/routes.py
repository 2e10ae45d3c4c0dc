"""
Routes for the company blueprint — departments and employees.

Routes only bind parameters and render the ``ServiceResult`` the
service returns.  Integer parameters that are missing or not numeric
are bound as ``0``.
"""

import logging
from decimal import Decimal, InvalidOperation
from http import HTTPStatus

from flask import jsonify, request

from company_services.blueprints.company import bp
from company_services.results import ServiceResult
from company_services.services import get_department_service, get_employee_service

logger = logging.getLogger(__name__)


def _render(result: ServiceResult):
    """Turn a service result into a Flask JSON response."""
    return jsonify(result.body), int(result.status)


def _form_decimal(name: str) -> Decimal | None:
    """
    Read an optional numeric form field.

    Raises:
        ValueError: If the field is present but not a finite number.
    """
    raw = request.form.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError(
            f"Invalid {name} value: '{raw}'. Expected a number."
        ) from exc
    if not value.is_finite():
        raise ValueError(f"Invalid {name} value: '{raw}'. Expected a number.")
    return value


# =========================================================================
# Departments
# =========================================================================


@bp.route("/departments", methods=["GET"])
def get_departments():
    """List every department for ``?company=``."""
    company = request.args.get("company")
    return _render(get_department_service().list_departments(company))


@bp.route("/department", methods=["GET"])
def get_department():
    """Fetch one department by ``?company=&dept_id=``."""
    company = request.args.get("company")
    dept_id = request.args.get("dept_id", 0, type=int)
    return _render(get_department_service().get_department(company, dept_id))


@bp.route("/department", methods=["POST"])
def add_department():
    """Create a department from form fields."""
    result = get_department_service().insert_department(
        request.form.get("company"),
        request.form.get("dept_name"),
        request.form.get("dept_no"),
        request.form.get("location"),
    )
    return _render(result)


@bp.route("/department", methods=["PUT"])
def update_department():
    """Replace a department from a JSON body."""
    payload = request.get_data(as_text=True)
    return _render(get_department_service().update_department(payload))


@bp.route("/department", methods=["DELETE"])
def delete_department():
    """Delete a department by ``?company=&dept_id=``."""
    company = request.args.get("company")
    dept_id = request.args.get("dept_id", 0, type=int)
    return _render(get_department_service().delete_department(company, dept_id))


# =========================================================================
# Employees
# =========================================================================


@bp.route("/employees", methods=["GET"])
def get_employees():
    """List every employee for ``?company=``."""
    company = request.args.get("company")
    return _render(get_employee_service().list_employees(company))


@bp.route("/employee", methods=["GET"])
def get_employee():
    """Fetch one employee by ``?emp_id=``."""
    emp_id = request.args.get("emp_id", 0, type=int)
    return _render(get_employee_service().get_employee(emp_id))


@bp.route("/employee", methods=["POST"])
def insert_employee():
    """Hire an employee from form fields."""
    try:
        salary = _form_decimal("salary")
    except ValueError as exc:
        logger.info("Rejected employee form: %s", exc)
        return _render(ServiceResult.error(HTTPStatus.BAD_REQUEST, str(exc)))

    result = get_employee_service().insert_employee(
        request.form.get("emp_name"),
        request.form.get("emp_no"),
        request.form.get("hire_date"),
        request.form.get("job"),
        salary,
        request.form.get("dept_id", 0, type=int),
        request.form.get("mng_id", 0, type=int),
    )
    return _render(result)


@bp.route("/employee", methods=["PUT"])
def update_employee():
    """Replace an employee from a JSON body."""
    payload = request.get_data(as_text=True)
    return _render(get_employee_service().update_employee(payload))
