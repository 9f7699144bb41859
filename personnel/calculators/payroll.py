"""
Payroll calculation: tiered bonus, cliff-edge tax, immutable result.

Tax is not progressive. The bracket selected by the gross salary applies to the
entire gross amount, so crossing a threshold can lower the net salary.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from personnel.domain.models import Employee, PayrollResult
from personnel.errors import EmployeeValidationError, PreconditionError
from personnel.policies import PayrollPolicy

ZERO = Decimal("0")


class PayrollCalculator:
    """
    Computes gross, tax and net salary for active employees.
    """

    def __init__(self, policy: Optional[PayrollPolicy] = None) -> None:
        self._policy = policy or PayrollPolicy()

    def calculate_payroll(self, employee: Employee) -> PayrollResult:
        """
        Calculate one payroll run for `employee`.

        Raises
        ------
        EmployeeValidationError
            If `employee` is None.
        PreconditionError
            If the employee is not ACTIVE.
        """
        _require_active(employee)

        gross_salary = self.calculate_gross_salary(employee)
        tax = self.calculate_tax(gross_salary)
        net_salary = gross_salary - tax

        return PayrollResult(
            employee_id=employee.id,
            gross_salary=gross_salary,
            tax=tax,
            net_salary=net_salary,
        )

    def calculate_gross_salary(self, employee: Employee) -> Decimal:
        return employee.base_salary + self.calculate_bonus(employee)

    def calculate_bonus(self, employee: Employee) -> Decimal:
        return employee.base_salary * self.bonus_rate(employee.performance_rating)

    def bonus_rate(self, performance_rating: int) -> Decimal:
        for min_rating, rate in self._policy.bonus_tiers:
            if performance_rating >= min_rating:
                return rate
        return ZERO

    def calculate_tax(self, gross_salary: Decimal) -> Decimal:
        return gross_salary * self.tax_rate(gross_salary)

    def tax_rate(self, gross_salary: Decimal) -> Decimal:
        for threshold, rate in self._policy.tax_brackets:
            if gross_salary > threshold:
                return rate
        return self._policy.base_tax_rate


def _require_active(employee: Employee) -> None:
    if employee is None:
        raise EmployeeValidationError("Employee cannot be null")
    if not employee.is_active:
        raise PreconditionError(
            f"Cannot calculate payroll for employee {employee.id} with status {employee.status.value}",
            employee.status,
        )


__all__ = ["PayrollCalculator"]
