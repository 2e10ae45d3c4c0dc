"""
JSON serialization for departments and employees.

The wire format uses camelCase keys.  Dates go out as
``yyyy-MM-dd HH:mm:ss``; incoming payloads may use that form or plain
``yyyy-MM-dd``.  Store-generated timestamps (``created_at``,
``updated_at``) and the employee's internal ``company`` column never
appear on the wire.
"""

import json
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

from company_services.errors import PayloadError
from company_services.models.organization import Department, Employee

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y-%m-%d"


class CompanySerializer:
    """Converts entities to wire dicts and JSON payloads to candidates."""

    # -- Entity -> wire ----------------------------------------------------

    def department_to_dict(self, dept: Department) -> dict[str, Any]:
        return {
            "id": dept.id,
            "company": dept.company,
            "deptName": dept.dept_name,
            "deptNo": dept.dept_no,
            "location": dept.location,
        }

    def employee_to_dict(self, emp: Employee) -> dict[str, Any]:
        return {
            "id": emp.id,
            "empName": emp.emp_name,
            "empNo": emp.emp_no,
            "hireDate": self._format_date(emp.hire_date),
            "job": emp.job,
            "salary": float(emp.salary) if emp.salary is not None else None,
            "deptId": emp.dept_id,
            "mngId": emp.mng_id,
        }

    def departments_to_list(self, depts) -> list[dict[str, Any]]:
        return [self.department_to_dict(d) for d in depts]

    def employees_to_list(self, emps) -> list[dict[str, Any]]:
        return [self.employee_to_dict(e) for e in emps]

    # -- Wire -> candidate -------------------------------------------------

    def load_department(self, payload: str | bytes | None) -> Department:
        """
        Build a transient ``Department`` from a JSON object.

        Raises:
            PayloadError: If the payload is not a JSON object or a field
                          has the wrong type.
        """
        data = self._load_object(payload)
        return Department(
            id=self._int_field(data, "id"),
            company=self._str_field(data, "company"),
            dept_name=self._str_field(data, "deptName"),
            dept_no=self._str_field(data, "deptNo"),
            location=self._str_field(data, "location"),
        )

    def load_employee(self, payload: str | bytes | None) -> Employee:
        """
        Build a transient ``Employee`` from a JSON object.

        A missing ``mngId`` means "no manager" (``0``).

        Raises:
            PayloadError: If the payload is not a JSON object or a field
                          has the wrong type.
        """
        data = self._load_object(payload)
        return Employee(
            id=self._int_field(data, "id"),
            emp_name=self._str_field(data, "empName"),
            emp_no=self._str_field(data, "empNo"),
            hire_date=self._date_field(data, "hireDate"),
            job=self._str_field(data, "job"),
            salary=self._decimal_field(data, "salary"),
            dept_id=self._int_field(data, "deptId"),
            mng_id=self._int_field(data, "mngId") or 0,
        )

    # -- Helpers -----------------------------------------------------------

    @staticmethod
    def _format_date(value: date | None) -> str | None:
        if value is None:
            return None
        if not isinstance(value, datetime):
            value = datetime(value.year, value.month, value.day)
        return value.strftime(TIMESTAMP_FORMAT)

    @staticmethod
    def _load_object(payload: str | bytes | None) -> dict[str, Any]:
        if payload is None:
            raise PayloadError("request body is empty")
        try:
            data = json.loads(payload)
        except (TypeError, ValueError, RecursionError) as exc:
            raise PayloadError(str(exc)) from exc
        if not isinstance(data, dict):
            raise PayloadError(
                f"expected a JSON object but found {type(data).__name__}"
            )
        return data

    @staticmethod
    def _int_field(data: dict[str, Any], key: str) -> int | None:
        value = data.get(key)
        if value is None:
            return None
        # ``True`` is an int in Python but never a valid id.
        if isinstance(value, bool):
            raise PayloadError(f"field '{key}' must be an integer")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError as exc:
                raise PayloadError(f"field '{key}' must be an integer") from exc
        raise PayloadError(f"field '{key}' must be an integer")

    @staticmethod
    def _str_field(data: dict[str, Any], key: str) -> str | None:
        value = data.get(key)
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise PayloadError(f"field '{key}' must be a string")

    @staticmethod
    def _decimal_field(data: dict[str, Any], key: str) -> Decimal | None:
        value = data.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise PayloadError(f"field '{key}' must be a number")
        try:
            result = Decimal(str(value))
        except InvalidOperation as exc:
            raise PayloadError(f"field '{key}' must be a number") from exc
        if not result.is_finite():
            raise PayloadError(f"field '{key}' must be a number")
        return result

    @staticmethod
    def _date_field(data: dict[str, Any], key: str) -> date | None:
        value = data.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise PayloadError(f"field '{key}' must be a date string")
        for fmt in (TIMESTAMP_FORMAT, DATE_FORMAT):
            try:
                return datetime.strptime(value.strip(), fmt).date()
            except ValueError:
                continue
        raise PayloadError(
            f"field '{key}' must use 'yyyy-MM-dd HH:mm:ss' or 'yyyy-MM-dd'"
        )
