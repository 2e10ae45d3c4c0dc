"""
Tests for the pure entity validators.

No database or application context is needed here.
"""

from datetime import date

import pytest

from company_services.errors import ValidationError
from company_services.validators import (
    check_business_day,
    check_not_future,
    check_tenant,
    parse_hire_date,
    validate_department,
    validate_employee_id,
    validate_employee_name,
    validate_hire_date,
)


class TestCheckTenant:
    """Exact string equality against the configured tenant."""

    def test_exact_match(self):
        assert check_tenant("acme", "acme") is True

    def test_case_differs(self):
        """Comparison is case-sensitive."""
        assert check_tenant("acme", "ACME") is False

    def test_missing_company(self):
        assert check_tenant("acme", None) is False

    def test_surrounding_whitespace_is_not_stripped(self):
        assert check_tenant("acme", " acme") is False


class TestParseHireDate:
    """Strict yyyy-MM-dd parsing."""

    def test_valid_date(self):
        assert parse_hire_date("2024-06-03") == date(2024, 6, 3)

    @pytest.mark.parametrize(
        "value",
        ["2024/06/03", "06-03-2024", "2024-6-3", "2024-06-03 10:00:00", "", "soon", None],
    )
    def test_wrong_shape_rejected(self, value):
        with pytest.raises(ValidationError, match="yyyy-MM-dd"):
            parse_hire_date(value)

    def test_impossible_calendar_date_rejected(self):
        """February 30th matches the pattern but is not a real date."""
        with pytest.raises(ValidationError, match="yyyy-MM-dd"):
            parse_hire_date("2023-02-30")


class TestHireDateRules:
    """Future and weekend checks."""

    def test_today_is_allowed(self):
        check_not_future(date(2024, 6, 12), today=date(2024, 6, 12))

    def test_tomorrow_rejected(self):
        with pytest.raises(ValidationError, match="future"):
            check_not_future(date(2024, 6, 13), today=date(2024, 6, 12))

    def test_saturday_rejected(self):
        # 2024-06-01 is a Saturday.
        with pytest.raises(ValidationError, match="Saturday or Sunday"):
            check_business_day(date(2024, 6, 1))

    def test_sunday_rejected(self):
        with pytest.raises(ValidationError, match="Saturday or Sunday"):
            check_business_day(date(2024, 6, 2))

    def test_friday_allowed(self):
        check_business_day(date(2024, 5, 31))

    def test_combined_rule_checks_future_first(self):
        """A future Saturday is reported as a future date."""
        with pytest.raises(ValidationError, match="future"):
            validate_hire_date(date(2024, 6, 15), today=date(2024, 6, 12))


class TestEmployeeFields:
    """Name and id checks used on update."""

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_missing_name(self, name):
        with pytest.raises(ValidationError, match="required"):
            validate_employee_name(name)

    def test_name_of_fifty_characters_allowed(self):
        validate_employee_name("x" * 50)

    def test_name_over_fifty_characters(self):
        with pytest.raises(ValidationError, match="cannot exceed 50"):
            validate_employee_name("x" * 51)

    @pytest.mark.parametrize("emp_id", [None, 0, -4])
    def test_non_positive_id(self, emp_id):
        with pytest.raises(ValidationError, match="ID value"):
            validate_employee_id(emp_id)


class TestDepartmentFields:
    """Department name and number are both required."""

    def test_valid(self):
        validate_department("Research", "RD-1")

    def test_blank_name(self):
        with pytest.raises(ValidationError, match="department name"):
            validate_department(" ", "RD-1")

    def test_missing_number(self):
        with pytest.raises(ValidationError, match="department number"):
            validate_department("Research", None)
