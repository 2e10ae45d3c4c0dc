"""
Database connectivity and schema verification tests.

These confirm that the test database is reachable and that the model
metadata creates both application tables.
"""

from sqlalchemy import inspect

from company_services.extensions import db


class TestDatabaseConnectivity:
    """Verify that the app can talk to the database."""

    def test_basic_connection(self, app):
        """Execute a simple SELECT 1 query."""
        result = db.session.execute(db.text("SELECT 1 AS connected"))
        row = result.fetchone()
        assert row is not None
        assert row[0] == 1


class TestSchemaExists:
    """Verify the tables and the department number constraint."""

    def test_application_tables_exist(self, app):
        tables = set(inspect(db.engine).get_table_names())
        assert {"department", "employee"} <= tables

    def test_department_number_unique_per_company(self, app):
        constraints = inspect(db.engine).get_unique_constraints("department")
        columns = [sorted(c["column_names"]) for c in constraints]
        assert ["company", "dept_no"] in columns
