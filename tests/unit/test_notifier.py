from __future__ import annotations

from decimal import Decimal

import pytest

from personnel.domain.models import PayrollResult
from personnel.errors import EmployeeNotFoundError, ErrorKind
from personnel.notifier import EmployeeNotifier
from personnel.policies import MessageTemplates


def _payroll(employee_id: str = "EMP001") -> PayrollResult:
    return PayrollResult(
        employee_id=employee_id,
        gross_salary=Decimal("82500.00"),
        tax=Decimal("16500.0000"),
        net_salary=Decimal("66000.005"),
    )


def test_welcome_email_renders_name_and_department(notifier, repository, channel, make_employee):
    repository.save(make_employee())

    notifier.send_welcome_email("EMP001")

    [message] = channel.sent_messages
    assert message.to == "john.doe@company.com"
    assert message.subject == "Welcome to the Company!"
    assert message.body.startswith("Dear John Doe,")
    assert "join the Engineering department" in message.body


def test_payroll_notification_rounds_amounts_half_up(notifier, repository, channel, make_employee):
    repository.save(make_employee())

    notifier.send_payroll_notification(_payroll())

    [message] = channel.sent_messages
    assert message.subject == "Your Payroll is Ready"
    assert "Gross Salary: $82500.00" in message.body
    assert "Tax: $16500.00" in message.body
    assert "Net Salary: $66000.01" in message.body


def test_missing_employee_is_not_found(notifier, channel):
    with pytest.raises(EmployeeNotFoundError) as excinfo:
        notifier.send_welcome_email("EMP404")
    with pytest.raises(EmployeeNotFoundError):
        notifier.send_payroll_notification(_payroll("EMP404"))

    assert excinfo.value.kind is ErrorKind.NOT_FOUND
    assert excinfo.value.value == "EMP404"
    assert channel.sent_messages == []


def test_channel_failure_propagates_without_retry(repository, make_employee):
    class _FlakyChannel:
        def __init__(self) -> None:
            self.attempts = 0

        def send(self, to: str, subject: str, body: str) -> None:
            self.attempts += 1
            raise ConnectionError("relay refused")

    channel = _FlakyChannel()
    repository.save(make_employee())

    with pytest.raises(ConnectionError, match="relay refused"):
        EmployeeNotifier(channel, repository).send_welcome_email("EMP001")
    assert channel.attempts == 1


def test_templates_are_swappable(repository, channel, make_employee):
    templates = MessageTemplates(welcome_subject="Hi", welcome_body="Hello {name} ({department})")
    repository.save(make_employee())

    EmployeeNotifier(channel, repository, templates).send_welcome_email("EMP001")

    [message] = channel.sent_messages
    assert (message.subject, message.body) == ("Hi", "Hello John Doe (Engineering)")


def test_recording_channel_clear(channel):
    channel.send("a@b.c", "subject", "body")
    channel.clear()

    assert channel.sent_messages == []
