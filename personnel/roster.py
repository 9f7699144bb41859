"""
CSV roster loading for the CLI.

The roster header matches `ROSTER_FIELDS`; `performance_rating`, `status` and
`employment_type` may be left empty to take the Employee defaults.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, Dict, List

from personnel.domain.models import Employee
from personnel.errors import EmployeeValidationError

ROSTER_FIELDS = [
    "id",
    "name",
    "email",
    "department",
    "base_salary",
    "performance_rating",
    "status",
    "employment_type",
]
_REQUIRED_FIELDS = ROSTER_FIELDS[:5]


def _row_to_employee(row: Dict[str, str], line_number: int) -> Employee:
    missing = [name for name in _REQUIRED_FIELDS if name not in row]
    if missing:
        raise EmployeeValidationError(
            f"Roster line {line_number} is missing columns: {', '.join(missing)}", row
        )
    values: Dict[str, Any] = {name: row[name] for name in _REQUIRED_FIELDS}
    for optional in ROSTER_FIELDS[5:]:
        raw = (row.get(optional) or "").strip()
        if raw:
            values[optional] = raw if optional == "performance_rating" else raw.upper()
    return Employee(**values)


def load_roster(path: Path | str) -> List[Employee]:
    """
    Read employees from a CSV roster, in file order.

    Raises
    ------
    EmployeeValidationError
        If a row is missing a required column or fails Employee validation.
    pydantic.ValidationError
        If a value cannot be coerced to its field type, e.g. a non-numeric salary.
    """
    employees: List[Employee] = []
    with Path(path).open("r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        # Line 1 is the header.
        for line_number, row in enumerate(reader, start=2):
            employees.append(_row_to_employee(row, line_number))
    return employees


__all__ = ["ROSTER_FIELDS", "load_roster"]
