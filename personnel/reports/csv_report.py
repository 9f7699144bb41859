"""
Delimited-text report: a header line followed by one row per employee.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable

from personnel.domain.models import Employee
from personnel.reports.abstract import REPORT_COLUMNS, AbstractReportGenerator, report_row


class CSVReportGenerator(AbstractReportGenerator):
    format_name: str = "CSV"
    description: str = "Comma-separated values with a header row."

    def render(self, employees: Iterable[Employee]) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(REPORT_COLUMNS)
        for employee in employees:
            writer.writerow(report_row(employee).values())
        return buffer.getvalue()


__all__ = ["CSVReportGenerator"]
