"""
Structured-object report: `{"employees": [...]}` with one object per employee.

Salaries are emitted as strings so Decimal values survive unchanged.
"""

from __future__ import annotations

import json
from typing import Iterable

from personnel.domain.models import Employee
from personnel.reports.abstract import AbstractReportGenerator, report_row


class JSONReportGenerator(AbstractReportGenerator):
    format_name: str = "JSON"
    description: str = "Indented JSON document with an `employees` array."

    def render(self, employees: Iterable[Employee]) -> str:
        payload = {"employees": [report_row(employee) for employee in employees]}
        return json.dumps(payload, indent=2)


__all__ = ["JSONReportGenerator"]
