"""
Service layer package.

Each service module encapsulates the business rules for one entity.
Services are the only layer that uses the store; routes never access
the database directly.  Every public service method returns a
``ServiceResult`` and never raises.

Services are built once by the application factory and looked up by
routes through ``current_app.extensions``::

    from company_services.services import get_department_service
"""

from flask import current_app

from company_services.services.department_service import DepartmentService
from company_services.services.employee_service import EmployeeService

EXTENSION_KEY = "company_services"


def get_department_service() -> DepartmentService:
    """Return the department service bound to the current app."""
    return current_app.extensions[EXTENSION_KEY]["departments"]


def get_employee_service() -> EmployeeService:
    """Return the employee service bound to the current app."""
    return current_app.extensions[EXTENSION_KEY]["employees"]
