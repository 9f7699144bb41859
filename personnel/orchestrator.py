"""
Use-case façade composing the repository, calculators, notifier and reports.

Usage (example from CLI):
    from personnel.orchestrator import build_management_service

    service = build_management_service()
    service.hire_employee(employee)
    result = service.process_payroll(employee.id)
    print(service.generate_employee_report("CSV"))

Every use case is a fixed sequence of collaborator calls. A failing step stops
the sequence and its error reaches the caller unchanged; earlier steps are not
rolled back. Each use case writes one line to the `personnel.audit` logger.
"""

from __future__ import annotations

import contextlib
from decimal import Decimal
from typing import Generator, List, Optional

from personnel.calculators.benefits import BenefitsService
from personnel.calculators.payroll import PayrollCalculator
from personnel.config import Settings, get_settings
from personnel.domain.models import Employee, EmployeeStatus, PayrollResult
from personnel.errors import EmployeeNotFoundError, PersonnelError, PreconditionError
from personnel.infrastructure.channels import LoggingSmtpChannel, NotificationChannel
from personnel.infrastructure.database import DatabaseConnection, get_database_connection
from personnel.notifier import EmployeeNotifier
from personnel.policies import BenefitRates, MessageTemplates, PayrollPolicy
from personnel.reports.service import ReportService
from personnel.repository import EmployeeRepository
from personnel.utils.logging import get_audit_logger, get_logger

log = get_logger(__name__)
audit = get_audit_logger()


@contextlib.contextmanager
def _audited(action: str, employee_id: Optional[str] = None) -> Generator[None, None, None]:
    """Write one audit line for `action`; failures are logged and re-raised."""
    try:
        yield
    except Exception as exc:
        error = exc.to_dict() if isinstance(exc, PersonnelError) else {"message": str(exc)}
        audit.warning(
            f"[{action} FAILED] {employee_id or '-'}",
            extra={"action": action, "employee_id": employee_id, "error": error},
        )
        raise
    audit.info(f"[{action}] {employee_id or '-'}", extra={"action": action, "employee_id": employee_id})


class ManagementService:
    def __init__(
        self,
        repository: EmployeeRepository,
        payroll_calculator: PayrollCalculator,
        notifier: EmployeeNotifier,
        report_service: ReportService,
        benefits_service: Optional[BenefitsService] = None,
    ) -> None:
        self._repository = repository
        self._payroll_calculator = payroll_calculator
        self._notifier = notifier
        self._report_service = report_service
        self._benefits_service = benefits_service or BenefitsService()

    @property
    def repository(self) -> EmployeeRepository:
        return self._repository

    @property
    def report_service(self) -> ReportService:
        return self._report_service

    def hire_employee(self, employee: Employee) -> None:
        with _audited("HIRE", getattr(employee, "id", None)):
            self._repository.save(employee)
            self._notifier.send_welcome_email(employee.id)

    def process_payroll(self, employee_id: str) -> PayrollResult:
        with _audited("PAYROLL", employee_id):
            employee = self._require_employee(employee_id)
            payroll_result = self._payroll_calculator.calculate_payroll(employee)
            self._notifier.send_payroll_notification(payroll_result)
        log.info(
            f"Payroll processed for {employee_id}",
            extra={"employee_id": employee_id, "net_salary": str(payroll_result.net_salary)},
        )
        return payroll_result

    def terminate_employee(self, employee_id: str) -> None:
        """
        Mark an employee TERMINATED. Allowed from any current status.
        """
        with _audited("TERMINATE", employee_id):
            employee = self._require_employee(employee_id)
            employee.status = EmployeeStatus.TERMINATED
            self._repository.save(employee)

    def remove_employee(self, employee_id: str) -> None:
        """
        Delete an employee record. ACTIVE employees must be terminated (or
        otherwise deactivated) first; unknown ids are ignored.
        """
        with _audited("REMOVE", employee_id):
            employee = self._repository.find_by_id(employee_id)
            if employee is not None and employee.is_active:
                raise PreconditionError(
                    f"Cannot remove active employee {employee_id}; terminate first",
                    employee.status,
                )
            self._repository.delete(employee_id)

    def generate_employee_report(self, report_type: str, department: Optional[str] = None) -> str:
        with _audited("REPORT"):
            return self._report_service.generate_report(report_type, department)

    def calculate_benefits(self, employee_id: str) -> Decimal:
        with _audited("BENEFITS", employee_id):
            employee = self._require_employee(employee_id)
            return self._benefits_service.calculate_benefits(employee)

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        return self._repository.find_by_id(employee_id)

    def find_employees_by_department(self, department: str) -> List[Employee]:
        return self._repository.find_by_department(department)

    def _require_employee(self, employee_id: str) -> Employee:
        employee = self._repository.find_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee


def build_management_service(
    settings: Optional[Settings] = None,
    channel: Optional[NotificationChannel] = None,
    database: Optional[DatabaseConnection] = None,
    payroll_policy: Optional[PayrollPolicy] = None,
    benefit_rates: Optional[BenefitRates] = None,
    templates: Optional[MessageTemplates] = None,
) -> ManagementService:
    """
    Wire the default object graph.

    Parameters
    ----------
    settings : Settings | None
        Source for the database backend and SMTP channel. Defaults to `get_settings()`.
    channel : NotificationChannel | None
        Overrides the SMTP logging channel (tests pass a RecordingChannel).
    database : DatabaseConnection | None
        Overrides the backend selected by `settings.db_backend`.
    payroll_policy, benefit_rates, templates
        Rate and template tables; package defaults when omitted.
    """
    settings = settings or get_settings()
    repository = EmployeeRepository(database or get_database_connection(settings))
    notifier = EmployeeNotifier(
        channel or LoggingSmtpChannel.from_settings(settings),
        repository,
        templates,
    )
    return ManagementService(
        repository=repository,
        payroll_calculator=PayrollCalculator(payroll_policy),
        notifier=notifier,
        report_service=ReportService(repository),
        benefits_service=BenefitsService(benefit_rates),
    )


__all__ = ["ManagementService", "build_management_service"]
