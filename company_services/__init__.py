"""
Application factory for the company departments and employees API.

Usage::

    from company_services import create_app
    app = create_app()           # Uses FLASK_ENV to pick config.
    app = create_app("testing")  # Explicit config for tests.
"""

import logging
import os

from flask import Flask, jsonify

from .config import config_by_name
from .extensions import db, migrate


def create_app(config_name: str | None = None) -> Flask:
    """
    Create and configure the Flask application.

    Args:
        config_name: One of 'development', 'testing', or 'production'.
                     Defaults to the FLASK_ENV environment variable,
                     falling back to 'development'.

    Returns:
        A fully configured Flask application instance.
    """
    # Resolve the configuration class.
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")
    config_class = config_by_name.get(config_name)
    if config_class is None:
        raise ValueError(
            f"Unknown config '{config_name}'. "
            f"Valid options: {list(config_by_name.keys())}"
        )

    app = Flask(__name__)
    app.config.from_object(config_class)
    app.json.sort_keys = False

    # Refuse to run production on development defaults.
    if config_name == "production":
        config_class.validate_production_settings(app.config)

    # -- Configure logging -------------------------------------------------
    _configure_logging(app)

    # -- Initialize extensions ---------------------------------------------
    _register_extensions(app)

    # -- Build services ----------------------------------------------------
    _register_services(app)

    # -- Register blueprints -----------------------------------------------
    _register_blueprints(app)

    # -- Register error handlers -------------------------------------------
    _register_error_handlers(app)

    # -- Register custom CLI commands --------------------------------------
    _register_cli_commands(app)

    return app


def _register_extensions(app: Flask) -> None:
    """Bind all Flask extensions to the application instance."""
    db.init_app(app)
    migrate.init_app(app, db)

    # Imported so the models are registered on ``db.metadata``.
    from . import models  # noqa: F401  pylint: disable=import-outside-toplevel


def _register_services(app: Flask) -> None:
    """
    Build the department and employee services once per application.

    The tenant name is read from config here and handed to each
    service; it is read-only from this point on.
    """
    # pylint: disable=import-outside-toplevel
    from .serializers import CompanySerializer
    from .services import EXTENSION_KEY, DepartmentService, EmployeeService
    from .store import CompanyStore

    store = CompanyStore(db)
    serializer = CompanySerializer()
    company_name = app.config["COMPANY_NAME"]

    app.extensions[EXTENSION_KEY] = {
        "departments": DepartmentService(store, serializer, company_name),
        "employees": EmployeeService(store, serializer, company_name),
    }
    app.logger.info("Services configured for company '%s'", company_name)


def _register_blueprints(app: Flask) -> None:
    """
    Import and register each blueprint with its URL prefix.

    Blueprints are imported inside this function to avoid circular
    imports.
    """
    # pylint: disable=import-outside-toplevel

    # Main blueprint — health check at /health.
    from .blueprints.main import bp as main_bp

    app.register_blueprint(main_bp)

    # Company API — departments and employees.
    from .blueprints.company import bp as company_bp

    app.register_blueprint(company_bp, url_prefix="/CompanyServices")


def _register_error_handlers(app: Flask) -> None:
    """Return JSON error bodies for errors raised outside the services."""

    @app.errorhandler(404)
    def not_found(error):  # pylint: disable=unused-argument
        """Handle 404 Not Found errors."""
        return jsonify({"error": "The requested resource does not exist."}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):  # pylint: disable=unused-argument
        """Handle 405 Method Not Allowed errors."""
        return jsonify({"error": "Method not allowed for this resource."}), 405

    @app.errorhandler(500)
    def internal_error(error):  # pylint: disable=unused-argument
        """Handle 500 Internal Server Error."""
        db.session.rollback()
        return jsonify({"error": "An internal server error occurred."}), 500


def _register_cli_commands(app: Flask) -> None:
    """Register custom Flask CLI commands (e.g., flask db-check)."""
    from .cli import register_commands  # pylint: disable=import-outside-toplevel

    register_commands(app)


def _configure_logging(app: Flask) -> None:
    """
    Set up application logging from ``LOG_LEVEL``.

    SQLAlchemy's engine logger is kept at WARNING in debug mode so SQL
    echo only appears when ``SQLALCHEMY_ECHO`` asks for it.
    """
    log_level = app.config.get("LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(getattr(logging, log_level, logging.INFO))

    # Quiet down noisy libraries in development.
    if app.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
