"""
Report generator interfaces for the personnel toolkit.

Concrete generators (CSV, HTML, JSON, XML) implement the ReportGenerator
protocol. `format_name` is the registry key only; `ReportService` folds it to
uppercase on registration and on lookup.
"""

from __future__ import annotations

import abc
from typing import Dict, Iterable, Protocol, runtime_checkable

from personnel.domain.models import Employee

REPORT_COLUMNS = ("ID", "Name", "Department", "Salary", "Status")


@runtime_checkable
class ReportGenerator(Protocol):
    """
    Common interface all report generators must implement.

    Attributes
    ----------
    format_name : str
        Registry key, e.g. "CSV".
    description : str
        A human-friendly summary of the output.
    """

    format_name: str
    description: str

    def render(self, employees: Iterable[Employee]) -> str:
        """
        Render `employees` in input order, one entry per employee.

        Parameters
        ----------
        employees : iterable of Employee
            Consumed exactly once.

        Returns
        -------
        str
            The full report text.
        """
        ...


class AbstractReportGenerator(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `format_name` and `description` and implement `render`.
    """

    format_name: str
    description: str

    @abc.abstractmethod
    def render(self, employees: Iterable[Employee]) -> str:  # pragma: no cover - interface only
        """Render the report text."""
        raise NotImplementedError


def report_row(employee: Employee) -> Dict[str, str]:
    """Column values shared by every built-in generator."""
    return {
        "id": employee.id,
        "name": employee.name,
        "department": employee.department,
        "salary": str(employee.base_salary),
        "status": employee.status.value,
    }


__all__ = [
    "REPORT_COLUMNS",
    "ReportGenerator",
    "AbstractReportGenerator",
    "report_row",
]
