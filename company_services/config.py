"""
Application configuration classes.

Each class represents a deployment environment. The factory function
``create_app`` in ``company_services/__init__.py`` selects the
appropriate config based on the FLASK_ENV environment variable.

The tenant name (``COMPANY_NAME``) is read once here and handed to each
service when the application is created.  Nothing reads it again after
startup.
"""

import logging
import os

# Module-level logger for startup warnings emitted by config classes.
_logger = logging.getLogger(__name__)

# Default SQLite file used by local development.  Production refuses it.
_DEFAULT_DATABASE_URL = "sqlite:///company_services.db"


class BaseConfig:
    """
    Shared configuration values inherited by all environments.

    Connection strings and the tenant name are loaded from environment
    variables so they never appear in source control.
    """

    # -- Tenant ------------------------------------------------------------
    # Every mutation is rejected unless the caller names this company.
    COMPANY_NAME: str = os.environ.get("COMPANY_NAME", "acme")

    # -- SQLAlchemy --------------------------------------------------------
    SQLALCHEMY_DATABASE_URI: str = os.environ.get(
        "DATABASE_URL", _DEFAULT_DATABASE_URL
    )
    SQLALCHEMY_TRACK_MODIFICATIONS: bool = False

    # Echo SQL statements to the log for debugging (override per env).
    SQLALCHEMY_ECHO: bool = False

    # -- Logging -----------------------------------------------------------
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    @classmethod
    def validate_production_settings(cls, app_config: dict) -> None:
        """
        Verify that production is not running on development defaults.

        Args:
            app_config: The ``app.config`` dict after loading the
                        config class.

        Raises:
            RuntimeError: If the tenant name is empty or the database
                          URI is still the development SQLite file.
        """
        errors: list[str] = []

        if not app_config.get("COMPANY_NAME"):
            errors.append("COMPANY_NAME must be set to the tenant name.")

        if app_config.get("SQLALCHEMY_DATABASE_URI") == _DEFAULT_DATABASE_URL:
            errors.append(
                "DATABASE_URL still points at the development SQLite file."
            )

        if errors:
            combined = "\n  - ".join(errors)
            raise RuntimeError(f"Production configuration errors:\n  - {combined}")

        if app_config.get("LOG_LEVEL", "").upper() == "DEBUG":
            _logger.warning(
                "LOG_LEVEL=DEBUG is not recommended in production. "
                "Consider INFO or WARNING."
            )


class DevelopmentConfig(BaseConfig):
    """Development environment: verbose logging, SQL echo optional."""

    DEBUG: bool = True
    SQLALCHEMY_ECHO: bool = os.environ.get("SQLALCHEMY_ECHO", "false").lower() == "true"


class TestingConfig(BaseConfig):
    """Testing environment: in-memory SQLite, fixed tenant name."""

    TESTING: bool = True
    COMPANY_NAME: str = "acme"

    SQLALCHEMY_DATABASE_URI: str = os.environ.get("TEST_DATABASE_URL", "sqlite://")
    LOG_LEVEL: str = "DEBUG"


class ProductionConfig(BaseConfig):
    """
    Production environment: strict settings, no debug output.

    The application factory calls ``validate_production_settings()`` at
    startup and will refuse to launch on development defaults.
    """

    DEBUG: bool = False
    SQLALCHEMY_ECHO: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "WARNING")


# Lookup dict used by the application factory.
config_by_name: dict[str, type[BaseConfig]] = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
}
