"""
Routes for the main blueprint — health check.
"""

from sqlalchemy import text

from company_services.blueprints.main import bp
from company_services.extensions import db


@bp.route("/health")
def health_check():
    """
    Health check endpoint for monitoring and load balancers.

    Returns 200 if the app is running and can reach the database.
    """
    try:
        db.session.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "connected"}, 200
    except Exception as exc:  # pylint: disable=broad-except
        db.session.rollback()
        return {"status": "unhealthy", "database": str(exc)}, 503
