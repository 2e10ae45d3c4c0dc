"""
Custom Flask CLI commands.

These commands are registered with the app via ``register_commands()``
in the application factory. Run them with ``flask <command_name>``.

Usage::

    flask db-check      # Verify database connectivity and tables
    flask seed-demo     # Insert a demo department and employee
"""

from datetime import date, timedelta
from decimal import Decimal

import click
from flask import current_app
from flask.cli import with_appcontext

from company_services.extensions import db
from company_services.models.organization import Department, Employee
from company_services.services import get_department_service, get_employee_service


@click.command("db-check")
@with_appcontext
def db_check_command():
    """
    Verify database connectivity and confirm the tables exist.

    Runs a trivial query, then counts the rows in each application
    table.  Useful for confirming DATABASE_URL is correct and that
    ``flask db upgrade`` has been run.
    """
    click.echo("=" * 60)
    click.echo("  Company Services — Database Connectivity Check")
    click.echo("=" * 60)

    click.echo(f"\n  Connection string: {db.engine.url.render_as_string(hide_password=True)}")
    click.echo(f"  Configured company: {current_app.config['COMPANY_NAME']}\n")

    # -- Step 1: Basic connectivity ----------------------------------------
    click.echo("[1/2] Testing connection...")
    try:
        row = db.session.execute(db.text("SELECT 1 AS connected")).fetchone()
        if row and row[0] == 1:
            click.secho("      ✓ Connected successfully.", fg="green")
        else:
            click.secho("      ✗ Unexpected result from test query.", fg="red")
            return
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Connection failed: {exc}", fg="red")
        click.echo("\n  Troubleshooting tips:")
        click.echo("    - Is the database server running?")
        click.echo("    - Does your .env DATABASE_URL match your server config?")
        return

    # -- Step 2: Table row counts ------------------------------------------
    click.echo("[2/2] Checking tables...\n")
    try:
        for model in (Department, Employee):
            count = db.session.execute(
                db.select(db.func.count()).select_from(model)
            ).scalar()
            click.echo(f"      {model.__tablename__:>12}  — {count} row(s)")
    except Exception as exc:  # pylint: disable=broad-exception-caught
        click.secho(f"      ✗ Table check failed: {exc}", fg="red")
        click.echo("        Have you run `flask db upgrade`?")
        return

    click.echo("\n" + "=" * 60)
    click.secho("  All checks passed. Database is ready.", fg="green", bold=True)
    click.echo("=" * 60)


@click.command("seed-demo")
@with_appcontext
def seed_demo_command():
    """
    Insert a demo department and employee for the configured company.

    Goes through the services, so every business rule applies; running
    it twice reports the duplicate department number.
    """
    company = current_app.config["COMPANY_NAME"]

    result = get_department_service().insert_department(
        company, "Research", "RD-001", "Building 1"
    )
    click.echo(f"Department: {int(result.status)} {result.body}")
    if not result.is_success:
        return

    dept_id = result.body["success"]["id"]

    # Most recent weekday on or before yesterday.
    hire_date = date.today() - timedelta(days=1)
    while hire_date.weekday() >= 5:
        hire_date -= timedelta(days=1)

    result = get_employee_service().insert_employee(
        "Demo Employee",
        "E-001",
        hire_date.isoformat(),
        "Analyst",
        Decimal("50000.00"),
        dept_id,
        0,
    )
    click.echo(f"Employee: {int(result.status)} {result.body}")


def register_commands(app):
    """Register all custom CLI commands with the Flask application."""
    app.cli.add_command(db_check_command)
    app.cli.add_command(seed_demo_command)
