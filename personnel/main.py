from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path
from typing import List, NoReturn, Optional

import pydantic
import typer

from personnel.config import get_settings
from personnel.domain.models import Employee, EmploymentType
from personnel.errors import PersonnelError
from personnel.infrastructure.channels import RecordingChannel
from personnel.orchestrator import build_management_service
from personnel.reporter import print_employees, print_payroll
from personnel.reports.service import default_generators
from personnel.roster import load_roster
from personnel.utils.logging import configure_logging

app = typer.Typer(help="Personnel toolkit CLI.")


def sample_employees() -> List[Employee]:
    """Employees hired by the `demo` command."""
    return [
        Employee(
            id="EMP001",
            name="John Doe",
            email="john.doe@company.com",
            department="Engineering",
            base_salary=Decimal("75000"),
            performance_rating=4,
        ),
        Employee(
            id="EMP002",
            name="Jane Smith",
            email="jane.smith@company.com",
            department="Marketing",
            base_salary=Decimal("65000"),
            performance_rating=5,
        ),
        Employee(
            id="EMP003",
            name="Lee Park",
            email="lee.park@company.com",
            department="Engineering",
            base_salary=Decimal("32000"),
            performance_rating=3,
            employment_type=EmploymentType.INTERN,
        ),
    ]


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} log_level={settings.log_level} | "
        f"db={settings.db_backend} ({settings.db_user}@{settings.db_host}:{settings.db_port}/{settings.db_name}) | "
        f"smtp={settings.smtp_host}:{settings.smtp_port} | "
        f"default_report={settings.report_default_format}"
    )


@app.command()
def formats() -> None:
    """
    List the built-in report formats.
    """
    for generator in default_generators():
        typer.echo(f"{generator.format_name.upper():<6} {generator.description}")


@app.command()
def demo(
    report_format: str = typer.Option("CSV", "--format", "-f", help="Report format (CSV, HTML, JSON, XML)."),
    department: Optional[str] = typer.Option(None, "--department", "-d", help="Only report this department."),
) -> None:
    """
    Hire sample employees, run payroll for each and print a report.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    channel = RecordingChannel()
    service = build_management_service(settings=settings, channel=channel)

    try:
        for employee in sample_employees():
            service.hire_employee(employee)
        results = [service.process_payroll(employee.id) for employee in service.repository.find_all()]
        report_text = service.generate_employee_report(report_format, department)
    except PersonnelError as exc:
        _fail(exc)

    print_employees(service.repository.find_all())
    print_payroll(results)
    for employee in service.repository.find_all():
        typer.echo(f"Benefits {employee.id}: {service.calculate_benefits(employee.id):,.2f}")
    typer.echo(f"Emails sent: {len(channel.sent_messages)}")
    typer.echo(report_text)


@app.command()
def report(
    roster: Path = typer.Option(..., "--roster", "-r", exists=True, dir_okay=False, help="CSV roster file."),
    report_format: Optional[str] = typer.Option(
        None, "--format", "-f", help="Report format (default from settings)."
    ),
    department: Optional[str] = typer.Option(None, "--department", "-d", help="Only report this department."),
) -> None:
    """
    Load a roster and print it in the requested format.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)
    service = build_management_service(settings=settings, channel=RecordingChannel())

    try:
        for employee in load_roster(roster):
            service.repository.save(employee)
        text = service.generate_employee_report(report_format or settings.report_default_format, department)
    except (PersonnelError, pydantic.ValidationError) as exc:
        _fail(exc)

    typer.echo(text)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
