"""
Company blueprint — the JSON API for departments and employees.

Mounted under ``/CompanyServices`` by the application factory.
"""

from flask import Blueprint

bp = Blueprint("company", __name__)

from company_services.blueprints.company import routes  # noqa: E402, F401
