"""
Error taxonomy for the personnel toolkit.

Every failure the package reports on purpose is a PersonnelError tagged with one
of three kinds:

- VALIDATION: malformed or missing input to a constructor, mutator or lookup
- NOT_FOUND: an employee that was required to exist is missing
- PRECONDITION: the employee is in a state that forbids the operation

Errors carry a human-readable message plus the offending value (when there is
one) so callers and log handlers can report them without string parsing.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Error categories used to route failures."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    PRECONDITION = "precondition"


class PersonnelError(Exception):
    """
    Base class for all domain errors raised by the package.

    Not a ValueError subclass, so pydantic validators re-raise it unwrapped.
    """

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str, value: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.value = value

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for structured logging."""
        payload: Dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.value is not None:
            payload["value"] = repr(self.value)
        return payload

    def __str__(self) -> str:
        return self.message


class EmployeeValidationError(PersonnelError):
    kind = ErrorKind.VALIDATION


class EmployeeNotFoundError(PersonnelError):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, employee_id: str) -> None:
        super().__init__(f"Employee not found: {employee_id}", value=employee_id)


class PreconditionError(PersonnelError):
    kind = ErrorKind.PRECONDITION


__all__ = [
    "ErrorKind",
    "PersonnelError",
    "EmployeeValidationError",
    "EmployeeNotFoundError",
    "PreconditionError",
]
