"""
Pytest configuration and shared fixtures.

Provides a test application, test client, and the two services that
all test modules can use.  The ``testing`` configuration points at an
in-memory SQLite database whose tables are created fresh for every
test, so no test sees another's rows.
"""

from datetime import date
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from company_services import create_app
from company_services.extensions import db as _db
from company_services.serializers import CompanySerializer
from company_services.services import (
    DepartmentService,
    EmployeeService,
    get_department_service,
)
from company_services.store import CompanyStore

# Tenant name set by TestingConfig.
COMPANY = "acme"

# A Wednesday; service tests pin "today" here.
FIXED_TODAY = date(2024, 6, 12)


@pytest.fixture()
def app():
    """
    Create a Flask application configured for testing.

    Tables are created inside an application context that stays pushed
    for the whole test and dropped afterwards.
    """
    app = create_app("testing")

    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db_session(app):  # pylint: disable=redefined-outer-name,unused-argument
    """Provide the SQLAlchemy session bound to the test database."""
    return _db.session


@pytest.fixture()
def client(app):  # pylint: disable=redefined-outer-name
    """
    Provide a Flask test client for making HTTP requests.

    Usage in tests::

        def test_health(client):
            response = client.get("/health")
            assert response.status_code == 200
    """
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture()
def store(app):  # pylint: disable=redefined-outer-name,unused-argument
    """A store bound to the test database."""
    return CompanyStore(_db)


@pytest.fixture()
def department_service(app):  # pylint: disable=redefined-outer-name,unused-argument
    """The department service built by the application factory."""
    return get_department_service()


@pytest.fixture()
def employee_service(store):  # pylint: disable=redefined-outer-name
    """An employee service whose clock is pinned to ``FIXED_TODAY``."""
    return EmployeeService(
        store, CompanySerializer(), COMPANY, today=lambda: FIXED_TODAY
    )


@pytest.fixture()
def broken_store():
    """A store whose every call fails as if the database were down."""
    failure = OperationalError("SELECT 1", {}, Exception("connection refused"))
    mock_store = MagicMock(spec=CompanyStore)
    for name in (
        "get_all_departments",
        "get_department",
        "get_department_by_no",
        "insert_department",
        "update_department",
        "delete_department",
        "get_all_employees",
        "get_employee",
        "insert_employee",
        "update_employee",
    ):
        getattr(mock_store, name).side_effect = failure
    return mock_store


@pytest.fixture()
def broken_department_service(broken_store):  # pylint: disable=redefined-outer-name
    """A department service wired to ``broken_store``."""
    return DepartmentService(broken_store, CompanySerializer(), COMPANY)


@pytest.fixture()
def broken_employee_service(broken_store):  # pylint: disable=redefined-outer-name
    """An employee service wired to ``broken_store``."""
    return EmployeeService(
        broken_store, CompanySerializer(), COMPANY, today=lambda: FIXED_TODAY
    )
