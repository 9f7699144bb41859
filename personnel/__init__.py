"""
Personnel toolkit - an in-memory employee domain model with pluggable collaborators.

This package models a small HR workflow wired through dependency injection:

- Employee records with validated, partly immutable attributes
- An in-memory repository that forwards writes to a persistence collaborator
- Payroll (tiered bonus, bracketed tax) and per-type benefits calculators
- Templated notifications sent through a channel abstraction
- Interchangeable CSV/HTML/JSON/XML report generators behind a registry
- A management service composing all of the above into use cases

Collaborators are interfaces with independent implementations, so each can be
replaced without touching the others.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from personnel.calculators import BenefitsService, PayrollCalculator
from personnel.config import Settings, get_settings
from personnel.domain import Employee, EmployeeStatus, EmploymentType, PayrollResult
from personnel.errors import (
    EmployeeNotFoundError,
    EmployeeValidationError,
    ErrorKind,
    PersonnelError,
    PreconditionError,
)
from personnel.notifier import EmployeeNotifier
from personnel.orchestrator import ManagementService, build_management_service
from personnel.policies import BenefitRates, MessageTemplates, PayrollPolicy
from personnel.reports import ReportGenerator, ReportService
from personnel.repository import EmployeeRepository
from personnel.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    "PayrollPolicy",
    "BenefitRates",
    "MessageTemplates",
    # Domain
    "Employee",
    "EmployeeStatus",
    "EmploymentType",
    "PayrollResult",
    # Errors
    "ErrorKind",
    "PersonnelError",
    "EmployeeValidationError",
    "EmployeeNotFoundError",
    "PreconditionError",
    # Collaborators
    "EmployeeRepository",
    "PayrollCalculator",
    "BenefitsService",
    "EmployeeNotifier",
    "ReportGenerator",
    "ReportService",
    # Orchestration
    "ManagementService",
    "build_management_service",
    # Logging
    "configure_logging",
    "get_logger",
]
