"""
Domain package for the personnel toolkit.

Exports the employee record, its enums and the payroll snapshot. Keep this
package focused on data definitions and validation concerns.
"""

from personnel.domain.models import Employee, EmployeeStatus, EmploymentType, PayrollResult

__all__ = [
    "Employee",
    "EmployeeStatus",
    "EmploymentType",
    "PayrollResult",
]
