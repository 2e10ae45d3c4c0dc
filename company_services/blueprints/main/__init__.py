"""
Main blueprint — health check.
"""

from flask import Blueprint

bp = Blueprint("main", __name__)

from company_services.blueprints.main import routes  # noqa: E402, F401
