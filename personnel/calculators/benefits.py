"""
Benefits strategies, one per employment type, plus the service that dispatches
to them.

Adding a new employment rule is a `register` call; the service itself never
inspects the type tag beyond a dictionary lookup.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, Dict, List, Optional

from personnel.calculators.abstract import AbstractBenefitsStrategy, BenefitsStrategy
from personnel.domain.models import Employee, EmploymentType
from personnel.errors import EmployeeValidationError
from personnel.policies import BenefitRates
from personnel.utils.logging import get_logger

log = get_logger(__name__)

ZERO = Decimal("0")


class RateBenefitsStrategy(AbstractBenefitsStrategy):
    """Benefits as a fixed fraction of base salary."""

    def __init__(self, rate: Decimal) -> None:
        self.rate = rate

    def calculate(self, base_salary: Decimal) -> Decimal:
        return base_salary * self.rate


class FullTimeBenefits(RateBenefitsStrategy):
    employment_type = EmploymentType.FULL_TIME
    description = "Full benefits package for full-time staff."


class PartTimeBenefits(RateBenefitsStrategy):
    employment_type = EmploymentType.PART_TIME
    description = "Reduced benefits for part-time staff."


class ContractBenefits(RateBenefitsStrategy):
    employment_type = EmploymentType.CONTRACT
    description = "Contractors; no benefits at the default rate."


class InternBenefits(RateBenefitsStrategy):
    employment_type = EmploymentType.INTERN
    description = "Stipend-level benefits for interns."


def _benefit_factories(rates: BenefitRates) -> Dict[EmploymentType, Callable[[], BenefitsStrategy]]:
    """Registry of built-in strategies."""
    return {
        EmploymentType.FULL_TIME: lambda: FullTimeBenefits(rates.full_time),
        EmploymentType.PART_TIME: lambda: PartTimeBenefits(rates.part_time),
        EmploymentType.CONTRACT: lambda: ContractBenefits(rates.contract),
        EmploymentType.INTERN: lambda: InternBenefits(rates.intern),
    }


class BenefitsService:
    def __init__(self, rates: Optional[BenefitRates] = None) -> None:
        self._rates = rates or BenefitRates()
        self._strategies: Dict[EmploymentType, BenefitsStrategy] = {
            employment_type: factory()
            for employment_type, factory in _benefit_factories(self._rates).items()
        }

    def register(self, strategy: BenefitsStrategy) -> None:
        """Add or replace the strategy for `strategy.employment_type`."""
        self._strategies[strategy.employment_type] = strategy
        log.debug(
            "Benefits strategy registered",
            extra={"employment_type": strategy.employment_type.value},
        )

    def unregister(self, employment_type: EmploymentType) -> None:
        """Drop the strategy for `employment_type`; its employees then accrue no benefits."""
        if self._strategies.pop(employment_type, None) is not None:
            log.debug("Benefits strategy unregistered", extra={"employment_type": employment_type.value})

    def strategy_for(self, employment_type: EmploymentType) -> Optional[BenefitsStrategy]:
        return self._strategies.get(employment_type)

    def registered_types(self) -> List[EmploymentType]:
        return list(self._strategies)

    def calculate_benefits(self, employee: Employee) -> Decimal:
        if employee is None:
            raise EmployeeValidationError("Employee cannot be null")
        strategy = self.strategy_for(employee.employment_type)
        if strategy is None:
            return ZERO
        return strategy.calculate(employee.base_salary)


__all__ = [
    "RateBenefitsStrategy",
    "FullTimeBenefits",
    "PartTimeBenefits",
    "ContractBenefits",
    "InternBenefits",
    "BenefitsService",
]
