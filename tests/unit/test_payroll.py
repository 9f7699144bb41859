from __future__ import annotations

from decimal import Decimal

import pytest

from personnel.calculators.payroll import PayrollCalculator
from personnel.domain.models import EmployeeStatus
from personnel.errors import EmployeeValidationError, ErrorKind, PreconditionError
from personnel.policies import PayrollPolicy

# Rating 5, base 100000: bonus 15%, gross crosses the 100000 threshold -> 30% tax
TOP_BASE = Decimal("100000")
TOP_GROSS = Decimal("115000")
TOP_TAX = Decimal("34500")
TOP_NET = Decimal("80500")


@pytest.fixture
def calculator() -> PayrollCalculator:
    return PayrollCalculator()


def test_top_rated_payroll_matches_worked_example(calculator, make_employee):
    employee = make_employee(base_salary=TOP_BASE, performance_rating=5)

    result = calculator.calculate_payroll(employee)

    assert calculator.calculate_bonus(employee) == Decimal("15000")
    assert result.employee_id == employee.id
    assert result.gross_salary == TOP_GROSS
    assert result.tax == TOP_TAX
    assert result.net_salary == TOP_NET


@pytest.mark.parametrize(
    ("rating", "expected_rate"),
    [(5, "0.15"), (4, "0.10"), (3, "0.05"), (2, "0"), (0, "0")],
)
def test_bonus_rate_tiers(calculator, rating, expected_rate):
    assert calculator.bonus_rate(rating) == Decimal(expected_rate)


@pytest.mark.parametrize(
    ("gross", "expected_tax"),
    [
        ("50000", "5000"),  # at the threshold: still the base rate
        ("50001", "10000.20"),  # just above: whole amount at 20%
        ("100000", "20000"),
        ("100001", "30000.30"),
        ("0", "0"),
    ],
)
def test_tax_is_cliff_edge_not_progressive(calculator, gross, expected_tax):
    assert calculator.calculate_tax(Decimal(gross)) == Decimal(expected_tax)


def test_crossing_a_bracket_can_lower_net_pay(calculator, make_employee):
    below = calculator.calculate_payroll(make_employee(base_salary=Decimal("50000")))
    above = calculator.calculate_payroll(make_employee(base_salary=Decimal("50001")))

    assert above.gross_salary > below.gross_salary
    assert above.net_salary < below.net_salary


@pytest.mark.parametrize(
    "status",
    [EmployeeStatus.INACTIVE, EmployeeStatus.TERMINATED, EmployeeStatus.ON_LEAVE],
)
@pytest.mark.parametrize("base", ["0", "42000", "250000"])
def test_non_active_employee_is_a_precondition_failure(calculator, make_employee, status, base):
    employee = make_employee(base_salary=Decimal(base), performance_rating=5, status=status)

    with pytest.raises(PreconditionError) as excinfo:
        calculator.calculate_payroll(employee)

    assert excinfo.value.kind is ErrorKind.PRECONDITION
    assert excinfo.value.value is status


def test_none_employee_is_a_validation_failure(calculator):
    with pytest.raises(EmployeeValidationError):
        calculator.calculate_payroll(None)


def test_custom_policy_replaces_default_rates(make_employee):
    policy = PayrollPolicy(
        bonus_tiers=((1, Decimal("0.50")),),
        tax_brackets=(),
        base_tax_rate=Decimal("0"),
    )
    calculator = PayrollCalculator(policy)

    result = calculator.calculate_payroll(make_employee(base_salary=Decimal("1000"), performance_rating=1))

    assert result.gross_salary == Decimal("1500")
    assert result.tax == Decimal("0")
    assert result.net_salary == Decimal("1500")


def test_policy_orders_tiers_from_highest(make_employee):
    policy = PayrollPolicy(
        bonus_tiers=((3, Decimal("0.01")), (5, Decimal("0.03")), (4, Decimal("0.02"))),
    )

    assert [rating for rating, _ in policy.bonus_tiers] == [5, 4, 3]
    assert PayrollCalculator(policy).bonus_rate(5) == Decimal("0.03")
