from __future__ import annotations

import pytest

from personnel.errors import (
    EmployeeNotFoundError,
    EmployeeValidationError,
    ErrorKind,
    PersonnelError,
    PreconditionError,
)


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (EmployeeValidationError("bad input", 42), ErrorKind.VALIDATION),
        (EmployeeNotFoundError("EMP404"), ErrorKind.NOT_FOUND),
        (PreconditionError("not active"), ErrorKind.PRECONDITION),
    ],
)
def test_errors_are_tagged_by_kind(error, kind):
    assert isinstance(error, PersonnelError)
    assert error.kind is kind
    assert error.to_dict()["kind"] == kind.value


def test_errors_are_not_value_errors():
    assert not issubclass(PersonnelError, ValueError)


def test_not_found_carries_the_missing_id():
    error = EmployeeNotFoundError("EMP404")

    assert str(error) == "Employee not found: EMP404"
    assert error.value == "EMP404"


def test_value_is_omitted_from_dict_when_absent():
    assert PreconditionError("not active").to_dict() == {"kind": "precondition", "message": "not active"}
