"""
Entity validators — pure checks run before anything is persisted.

Each function either returns normally (or returns the parsed value) or
raises ``ValidationError`` with the message the caller will see.  None
of them touch the database.
"""

import re
from datetime import date, datetime

from company_services.errors import ValidationError

# Hire dates arrive as ``yyyy-MM-dd`` form values.
HIRE_DATE_FORMAT = "%Y-%m-%d"
_HIRE_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")

EMP_NAME_MAX_LENGTH = 50

# ``date.weekday()`` values for Saturday and Sunday.
_WEEKEND = (5, 6)


def check_tenant(expected: str, given: str | None) -> bool:
    """Return True when ``given`` is exactly the configured tenant name."""
    return given is not None and given == expected


def parse_hire_date(value: str | None) -> date:
    """
    Parse a hire date in strict ``yyyy-MM-dd`` form.

    Rejects anything that is not exactly four-two-two digits or is not a
    real calendar date (``2023-02-30``).

    Raises:
        ValidationError: If the value cannot be parsed.
    """
    if value is None or not _HIRE_DATE_PATTERN.match(value.strip()):
        raise ValidationError(
            "Invalid date format for hire date. Expected format: 'yyyy-MM-dd'."
        )
    try:
        return datetime.strptime(value.strip(), HIRE_DATE_FORMAT).date()
    except ValueError as exc:
        raise ValidationError(
            "Invalid date format for hire date. Expected format: 'yyyy-MM-dd'."
        ) from exc


def check_not_future(hire_date: date, today: date) -> None:
    """Reject hire dates after ``today``."""
    if hire_date > today:
        raise ValidationError("Hire date cannot be in the future.")


def check_business_day(hire_date: date) -> None:
    """Reject hire dates that fall on a Saturday or Sunday."""
    if hire_date.weekday() in _WEEKEND:
        raise ValidationError("Hire date cannot be on a Saturday or Sunday.")


def validate_hire_date(hire_date: date, today: date) -> None:
    """Run both hire-date business rules: not in the future, on a weekday."""
    check_not_future(hire_date, today)
    check_business_day(hire_date)


def validate_employee_name(name: str | None) -> None:
    """
    Require a non-blank employee name of at most 50 characters.

    "Missing" and "too long" produce different messages.
    """
    if name is None or not name.strip():
        raise ValidationError("The employee name is required and cannot be blank.")
    if len(name) > EMP_NAME_MAX_LENGTH:
        raise ValidationError(
            f"The employee name cannot exceed {EMP_NAME_MAX_LENGTH} characters."
        )


def validate_employee_id(emp_id: int | None) -> None:
    """Require a positive employee id on update."""
    if emp_id is None or emp_id <= 0:
        raise ValidationError("The ID value provided is invalid.")


def validate_department(dept_name: str | None, dept_no: str | None) -> None:
    """Require a department name and a department number."""
    if dept_name is None or not dept_name.strip():
        raise ValidationError("The department name is required and cannot be blank.")
    if dept_no is None or not dept_no.strip():
        raise ValidationError("The department number is required and cannot be blank.")
