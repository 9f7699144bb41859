"""
Pytest configuration for the personnel toolkit.

Provides fixtures for:
- Settings isolated from the developer's environment and .env file
- In-memory persistence and recording notification collaborators
- An employee factory and a fully wired management service
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from personnel.calculators.payroll import PayrollCalculator
from personnel.config import Settings
from personnel.domain.models import Employee
from personnel.infrastructure.channels import RecordingChannel
from personnel.infrastructure.database import InMemoryDatabaseConnection
from personnel.notifier import EmployeeNotifier
from personnel.orchestrator import ManagementService, build_management_service
from personnel.reports.service import ReportService
from personnel.repository import EmployeeRepository


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Settings fixture that ignores any local .env file.
    """
    return Settings(_env_file=None, log_level="DEBUG", db_backend="memory")


@pytest.fixture
def database() -> InMemoryDatabaseConnection:
    return InMemoryDatabaseConnection()


@pytest.fixture
def channel() -> RecordingChannel:
    return RecordingChannel()


@pytest.fixture
def repository(database: InMemoryDatabaseConnection) -> EmployeeRepository:
    return EmployeeRepository(database)


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """
    Factory for valid employees; keyword arguments override the defaults.
    """

    def _make(**overrides: Any) -> Employee:
        fields: dict[str, Any] = {
            "id": "EMP001",
            "name": "John Doe",
            "email": "john.doe@company.com",
            "department": "Engineering",
            "base_salary": Decimal("75000"),
        }
        fields.update(overrides)
        return Employee(**fields)

    return _make


@pytest.fixture
def notifier(channel: RecordingChannel, repository: EmployeeRepository) -> EmployeeNotifier:
    return EmployeeNotifier(channel, repository)


@pytest.fixture
def report_service(repository: EmployeeRepository) -> ReportService:
    return ReportService(repository)


@pytest.fixture
def service(
    repository: EmployeeRepository,
    notifier: EmployeeNotifier,
    report_service: ReportService,
) -> ManagementService:
    """
    Management service assembled from the per-test collaborators above.
    """
    return ManagementService(
        repository=repository,
        payroll_calculator=PayrollCalculator(),
        notifier=notifier,
        report_service=report_service,
    )


@pytest.fixture
def wired_service(
    test_settings: Settings,
    channel: RecordingChannel,
    database: InMemoryDatabaseConnection,
) -> ManagementService:
    """
    Management service built by the production factory.
    """
    return build_management_service(settings=test_settings, channel=channel, database=database)
