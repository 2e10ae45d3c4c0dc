"""
HTTP-level tests for the /CompanyServices API.

These go through Flask's test client, so they cover parameter binding
and JSON rendering as well as the service rules.
"""

import json
from datetime import date, timedelta

import pytest

BASE = "/CompanyServices"
COMPANY = "acme"


def _last_weekday():
    """Most recent weekday strictly before today."""
    day = date.today() - timedelta(days=1)
    while day.weekday() >= 5:
        day -= timedelta(days=1)
    return day


def _last_saturday():
    day = date.today() - timedelta(days=1)
    while day.weekday() != 5:
        day -= timedelta(days=1)
    return day


@pytest.fixture()
def department(client):
    """A department created through the API."""
    response = client.post(
        f"{BASE}/department",
        data={
            "company": COMPANY,
            "dept_name": "Research",
            "dept_no": "RD-1",
            "location": "HQ",
        },
    )
    assert response.status_code == 201
    return response.get_json()["success"]


def _employee_form(**overrides):
    form = {
        "emp_name": "Ada Lovelace",
        "emp_no": "E-1",
        "hire_date": _last_weekday().isoformat(),
        "job": "Engineer",
        "salary": "5000.50",
        "dept_id": "1",
        "mng_id": "0",
    }
    form.update(overrides)
    return form


class TestDepartmentRoutes:
    """GET/POST/PUT/DELETE on /department and GET /departments."""

    def test_list_empty_is_200_with_error_body(self, client):
        response = client.get(f"{BASE}/departments", query_string={"company": COMPANY})

        assert response.status_code == 200
        assert "error" in response.get_json()

    def test_list_returns_array(self, client, department):
        response = client.get(f"{BASE}/departments", query_string={"company": COMPANY})

        assert response.status_code == 200
        assert response.get_json() == [department]

    def test_insert_body_shape(self, department):
        assert set(department) == {"id", "company", "deptName", "deptNo", "location"}
        assert department["deptNo"] == "RD-1"

    def test_insert_duplicate_number(self, client, department):
        response = client.post(
            f"{BASE}/department",
            data={"company": COMPANY, "dept_name": "Copy", "dept_no": "RD-1"},
        )

        assert response.status_code == 400
        assert "already in use" in response.get_json()["error"]

    def test_get_by_id(self, client, department):
        response = client.get(
            f"{BASE}/department",
            query_string={"company": COMPANY, "dept_id": department["id"]},
        )

        assert response.status_code == 200
        assert response.get_json() == department

    def test_get_wrong_company(self, client, department):
        response = client.get(
            f"{BASE}/department",
            query_string={"company": "globex", "dept_id": department["id"]},
        )

        assert response.status_code == 400

    def test_get_non_numeric_id_binds_as_zero(self, client):
        response = client.get(
            f"{BASE}/department", query_string={"company": COMPANY, "dept_id": "abc"}
        )

        assert response.status_code == 404
        assert "Department ID 0" in response.get_json()["error"]

    def test_put_updates(self, client, department):
        response = client.put(
            f"{BASE}/department",
            data=json.dumps({**department, "location": "Annex"}),
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.get_json()["location"] == "Annex"

    def test_put_conflict(self, client, department):
        other = client.post(
            f"{BASE}/department",
            data={"company": COMPANY, "dept_name": "Sales", "dept_no": "SA-1"},
        ).get_json()["success"]

        response = client.put(
            f"{BASE}/department",
            data=json.dumps({**other, "deptNo": department["deptNo"]}),
            content_type="application/json",
        )

        assert response.status_code == 409

    def test_put_bad_json(self, client):
        response = client.put(
            f"{BASE}/department", data="{oops", content_type="application/json"
        )

        assert response.status_code == 400
        assert "invalid JSON format" in response.get_json()["error"]

    def test_delete_twice(self, client, department):
        params = {"company": COMPANY, "dept_id": department["id"]}

        first = client.delete(f"{BASE}/department", query_string=params)
        second = client.delete(f"{BASE}/department", query_string=params)

        assert first.status_code == 200
        assert "success" in first.get_json()
        assert second.status_code == 404


class TestEmployeeRoutes:
    """GET /employees, GET/POST/PUT /employee."""

    def test_insert_and_fetch(self, client):
        created = client.post(f"{BASE}/employee", data=_employee_form())
        assert created.status_code == 201
        body = created.get_json()

        fetched = client.get(f"{BASE}/employee", query_string={"emp_id": body["id"]})

        assert fetched.status_code == 200
        assert fetched.get_json() == body
        assert body["hireDate"] == f"{_last_weekday().isoformat()} 00:00:00"

    def test_missing_employee_is_200(self, client):
        response = client.get(f"{BASE}/employee", query_string={"emp_id": 31337})

        assert response.status_code == 200
        assert response.get_json() == {"error": "No employee found with ID: 31337."}

    def test_tomorrow_rejected(self, client):
        tomorrow = (date.today() + timedelta(days=1)).isoformat()

        response = client.post(f"{BASE}/employee", data=_employee_form(hire_date=tomorrow))

        assert response.status_code == 400

    def test_weekend_rejected(self, client):
        response = client.post(
            f"{BASE}/employee",
            data=_employee_form(hire_date=_last_saturday().isoformat()),
        )

        assert response.status_code == 400
        assert "Saturday or Sunday" in response.get_json()["error"]

    def test_bad_manager_rejected(self, client):
        response = client.post(f"{BASE}/employee", data=_employee_form(mng_id="4040"))

        assert response.status_code == 400
        assert "manager" in response.get_json()["error"]

    def test_non_numeric_salary_rejected(self, client):
        response = client.post(f"{BASE}/employee", data=_employee_form(salary="lots"))

        assert response.status_code == 400
        assert "salary" in response.get_json()["error"]

    def test_list_employees(self, client):
        client.post(f"{BASE}/employee", data=_employee_form())

        response = client.get(f"{BASE}/employees", query_string={"company": COMPANY})

        assert response.status_code == 200
        assert len(response.get_json()) == 1

    def test_list_unknown_company(self, client):
        client.post(f"{BASE}/employee", data=_employee_form())

        response = client.get(f"{BASE}/employees", query_string={"company": "globex"})

        assert response.status_code == 200
        assert "error" in response.get_json()

    def test_put_updates(self, client):
        body = client.post(f"{BASE}/employee", data=_employee_form()).get_json()

        response = client.put(
            f"{BASE}/employee",
            data=json.dumps({**body, "job": "Lead"}),
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.get_json()["job"] == "Lead"

    def test_put_empty_body(self, client):
        response = client.put(f"{BASE}/employee", data="", content_type="application/json")

        assert response.status_code == 400
