"""
Abstract benefits-strategy interfaces for the personnel toolkit.

Each employment type gets its own strategy object; `BenefitsService` looks the
strategy up by the employee's type tag instead of branching on it. Concrete
strategies implement the BenefitsStrategy protocol (or subclass the ABC helper).
"""

from __future__ import annotations

import abc
from decimal import Decimal
from typing import Protocol, runtime_checkable

from personnel.domain.models import EmploymentType


@runtime_checkable
class BenefitsStrategy(Protocol):
    """
    Common interface all benefits strategies must implement.

    Attributes
    ----------
    employment_type : EmploymentType
        The type tag this strategy is registered under.
    description : str
        A human-friendly summary of the rule.
    """

    employment_type: EmploymentType
    description: str

    def calculate(self, base_salary: Decimal) -> Decimal:
        """
        Compute the benefits amount for a base salary.

        Parameters
        ----------
        base_salary : Decimal
            The employee's base salary.

        Returns
        -------
        Decimal
            The benefits amount.
        """
        ...


class AbstractBenefitsStrategy(abc.ABC):
    """
    Optional ABC helper for class-based implementations.

    Subclasses should set `employment_type` and `description` and implement `calculate`.
    """

    employment_type: EmploymentType
    description: str

    @abc.abstractmethod
    def calculate(self, base_salary: Decimal) -> Decimal:  # pragma: no cover - interface only
        """Return the benefits amount for `base_salary`."""
        raise NotImplementedError


__all__ = [
    "BenefitsStrategy",
    "AbstractBenefitsStrategy",
]
