"""
Markup-table report: one HTML table row per employee.
"""

from __future__ import annotations

import html
from typing import Iterable, List

from personnel.domain.models import Employee
from personnel.reports.abstract import REPORT_COLUMNS, AbstractReportGenerator, report_row


class HTMLReportGenerator(AbstractReportGenerator):
    format_name: str = "HTML"
    description: str = "Standalone HTML page with a bordered table."

    def __init__(self, title: str = "Employee Report") -> None:
        self.title = title

    def render(self, employees: Iterable[Employee]) -> str:
        header = "".join(f"<th>{column}</th>" for column in REPORT_COLUMNS)
        lines: List[str] = [
            "<html><body>",
            f"<h1>{html.escape(self.title)}</h1>",
            "<table border='1'>",
            f"<tr>{header}</tr>",
        ]
        for employee in employees:
            cells = "".join(f"<td>{html.escape(value)}</td>" for value in report_row(employee).values())
            lines.append(f"<tr>{cells}</tr>")
        lines.append("</table>")
        lines.append("</body></html>")
        return "\n".join(lines)


__all__ = ["HTMLReportGenerator"]
