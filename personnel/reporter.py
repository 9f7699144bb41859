from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from personnel.domain.models import Employee, EmployeeStatus, PayrollResult

_STATUS_STYLES = {
    EmployeeStatus.ACTIVE: "green",
    EmployeeStatus.ON_LEAVE: "yellow",
    EmployeeStatus.INACTIVE: "dim",
    EmployeeStatus.TERMINATED: "red",
}


def _money(amount: Decimal) -> str:
    return f"{amount:,.2f}"


def print_employees(employees: Sequence[Employee], console: Optional[Console] = None) -> None:
    """
    Render the roster as a rich table, in repository order.
    """
    console = console or Console()

    if not employees:
        console.print("[yellow]No employees to display.[/yellow]")
        return

    table = Table(title="Employees", box=box.ROUNDED)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Department", style="magenta")
    table.add_column("Type", style="blue")
    table.add_column("Base Salary", justify="right", style="green")
    table.add_column("Rating", justify="right")
    table.add_column("Status")

    for employee in employees:
        style = _STATUS_STYLES.get(employee.status, "")
        table.add_row(
            employee.id,
            employee.name,
            employee.department,
            employee.employment_type.value,
            _money(employee.base_salary),
            str(employee.performance_rating),
            f"[{style}]{employee.status.value}[/{style}]" if style else employee.status.value,
        )

    console.print(table)


def print_payroll(results: Iterable[PayrollResult], console: Optional[Console] = None) -> None:
    """
    Render payroll results sorted by net salary (descending) with a totals row.
    """
    console = console or Console()
    results = sorted(results, key=lambda r: r.net_salary, reverse=True)

    if not results:
        console.print("[yellow]No payroll results to display.[/yellow]")
        return

    table = Table(
        title="Payroll Results",
        box=box.ROUNDED,
        caption="Sorted by Net Salary (descending)",
        show_footer=True,
    )
    table.add_column("Employee", style="cyan", no_wrap=True, footer="Total")
    table.add_column(
        "Gross", justify="right", style="green", footer=_money(sum((r.gross_salary for r in results), Decimal("0")))
    )
    table.add_column("Tax", justify="right", style="red", footer=_money(sum((r.tax for r in results), Decimal("0"))))
    table.add_column(
        "Net", justify="right", style="bold green", footer=_money(sum((r.net_salary for r in results), Decimal("0")))
    )
    table.add_column("Calculated At", style="dim")

    for result in results:
        table.add_row(
            result.employee_id,
            _money(result.gross_salary),
            _money(result.tax),
            _money(result.net_salary),
            result.calculated_at.strftime("%Y-%m-%d %H:%M:%S"),
        )

    console.print(table)


__all__ = ["print_employees", "print_payroll"]
