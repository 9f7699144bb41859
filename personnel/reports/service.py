"""
Report registry and generation.

Usage:
    from personnel.reports import ReportService

    reports = ReportService(repository)
    print(reports.generate_report("csv", department="Engineering"))

Generators are keyed by `format_name.upper()`; lookups fold the requested
format the same way. Registering a generator never touches existing entries
except one with the same key, which it replaces.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Optional

from personnel.domain.models import Employee
from personnel.errors import EmployeeValidationError
from personnel.reports.abstract import ReportGenerator
from personnel.reports.csv_report import CSVReportGenerator
from personnel.reports.html_report import HTMLReportGenerator
from personnel.reports.json_report import JSONReportGenerator
from personnel.reports.xml_report import XMLReportGenerator
from personnel.repository import EmployeeRepository
from personnel.utils.logging import get_logger

log = get_logger(__name__)


def _generator_factories() -> Dict[str, Callable[[], ReportGenerator]]:
    """Registry of built-in generators."""
    return {
        "CSV": lambda: CSVReportGenerator(),
        "HTML": lambda: HTMLReportGenerator(),
        "JSON": lambda: JSONReportGenerator(),
        "XML": lambda: XMLReportGenerator(),
    }


def default_generators() -> List[ReportGenerator]:
    return [factory() for factory in _generator_factories().values()]


class ReportService:
    def __init__(
        self,
        repository: EmployeeRepository,
        generators: Optional[Iterable[ReportGenerator]] = None,
    ) -> None:
        self._repository = repository
        self._generators: Dict[str, ReportGenerator] = {}
        for generator in default_generators() if generators is None else generators:
            self.register_generator(generator)

    def register_generator(self, generator: ReportGenerator) -> None:
        key = generator.format_name.upper()
        self._generators[key] = generator
        log.debug("Report generator registered", extra={"format": key})

    def supported_report_types(self) -> List[str]:
        return sorted(self._generators)

    def get_generator(self, report_type: str) -> ReportGenerator:
        if report_type is None:
            raise EmployeeValidationError("Report type cannot be null")
        generator = self._generators.get(report_type.upper())
        if generator is None:
            raise EmployeeValidationError(
                f"Unsupported report type '{report_type}'. "
                f"Available: {', '.join(self.supported_report_types())}",
                report_type,
            )
        return generator

    def generate_report(self, report_type: str, department: Optional[str] = None) -> str:
        """
        Render employees with the generator registered for `report_type`.

        Parameters
        ----------
        report_type : str
            Format name, matched case-insensitively.
        department : str | None
            Exact department to include. None or blank includes everyone.

        Raises
        ------
        EmployeeValidationError
            If no generator is registered for `report_type`.
        """
        generator = self.get_generator(report_type)
        employees = self._select_employees(department)
        log.info(
            f"Generating {generator.format_name} report",
            extra={"format": generator.format_name, "department": department, "rows": len(employees)},
        )
        return generator.render(employees)

    def _select_employees(self, department: Optional[str]) -> List[Employee]:
        if department is None or not department.strip():
            return self._repository.find_all()
        return self._repository.find_by_department(department)


__all__ = ["ReportService", "default_generators"]
