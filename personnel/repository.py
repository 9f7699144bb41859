"""
In-memory employee store.

`EmployeeRepository` keeps employees keyed by id (insertion ordered, last write
wins) and forwards a description of each write to its persistence collaborator.
The forward is fire-and-forget: the in-memory map is already updated when the
collaborator runs, and a collaborator failure propagates without undoing it.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from personnel.domain.models import Employee
from personnel.errors import EmployeeValidationError
from personnel.infrastructure.database import DatabaseConnection
from personnel.utils.logging import get_logger

log = get_logger(__name__)

INSERT_STATEMENT = "INSERT INTO employees (id, name, email, department, base_salary, status) VALUES (?, ?, ?, ?, ?, ?)"
DELETE_STATEMENT = "DELETE FROM employees WHERE id = ?"


class EmployeeRepository:
    def __init__(self, database: DatabaseConnection) -> None:
        self._database = database
        self._employees: Dict[str, Employee] = {}

    def save(self, employee: Employee) -> None:
        if employee is None:
            raise EmployeeValidationError("Employee cannot be null")
        self._employees[employee.id] = employee
        self._database.execute(INSERT_STATEMENT, employee)
        log.debug("Employee saved", extra={"employee_id": employee.id})

    def find_by_id(self, employee_id: str) -> Optional[Employee]:
        _require_id(employee_id)
        return self._employees.get(employee_id)

    def find_by_department(self, department: str) -> List[Employee]:
        if department is None or not department.strip():
            raise EmployeeValidationError("Department cannot be null or empty", department)
        return [employee for employee in self._employees.values() if employee.department == department]

    def find_all(self) -> List[Employee]:
        return list(self._employees.values())

    def delete(self, employee_id: str) -> None:
        """
        Remove an employee. Deleting an unknown id is a no-op.
        """
        _require_id(employee_id)
        if self._employees.pop(employee_id, None) is None:
            log.debug("Delete skipped, employee absent", extra={"employee_id": employee_id})
            return
        self._database.execute(DELETE_STATEMENT, employee_id)
        log.debug("Employee deleted", extra={"employee_id": employee_id})

    def __len__(self) -> int:
        return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._employees


def _require_id(employee_id: str) -> None:
    if employee_id is None or not employee_id.strip():
        raise EmployeeValidationError("Employee ID cannot be null or empty", employee_id)


__all__ = ["EmployeeRepository", "INSERT_STATEMENT", "DELETE_STATEMENT"]
