"""
Employee notifications rendered from templates and sent through a channel.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from personnel.domain.models import Employee, PayrollResult
from personnel.errors import EmployeeNotFoundError, EmployeeValidationError
from personnel.infrastructure.channels import NotificationChannel
from personnel.policies import MessageTemplates
from personnel.repository import EmployeeRepository
from personnel.utils.logging import get_logger

log = get_logger(__name__)

CENTS = Decimal("0.01")


class EmployeeNotifier:
    """
    Sends welcome and payroll emails.

    One synchronous `channel.send` per message; channel errors are not caught.
    """

    def __init__(
        self,
        channel: NotificationChannel,
        repository: EmployeeRepository,
        templates: Optional[MessageTemplates] = None,
    ) -> None:
        self._channel = channel
        self._repository = repository
        self._templates = templates or MessageTemplates()

    def send_welcome_email(self, employee_id: str) -> None:
        employee = self._get_employee(employee_id)
        body = self._templates.welcome_body.format(
            name=employee.name,
            department=employee.department,
        )
        self._send(employee, self._templates.welcome_subject, body)

    def send_payroll_notification(self, payroll_result: PayrollResult) -> None:
        if payroll_result is None:
            raise EmployeeValidationError("Payroll result cannot be null")
        employee = self._get_employee(payroll_result.employee_id)
        body = self._templates.payroll_body.format(
            name=employee.name,
            gross=_money(payroll_result.gross_salary),
            tax=_money(payroll_result.tax),
            net=_money(payroll_result.net_salary),
        )
        self._send(employee, self._templates.payroll_subject, body)

    def _get_employee(self, employee_id: str) -> Employee:
        employee = self._repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def _send(self, employee: Employee, subject: str, body: str) -> None:
        self._channel.send(employee.email, subject, body)
        log.info(
            f"Notification sent: {subject}",
            extra={"employee_id": employee.id, "to": employee.email},
        )


def _money(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


__all__ = ["EmployeeNotifier"]
