"""
Immutable rate and template tables.

Calculators and the notifier receive these at construction instead of reading
module-level constants, so tests can swap rates without patching.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Dict, Tuple

from pydantic import BaseModel, Field, field_validator

from personnel.domain.models import EmploymentType


class PayrollPolicy(BaseModel):
    """
    Bonus tiers and tax brackets.

    `bonus_tiers` pairs are (minimum rating, rate of base salary), checked from the
    highest rating down. `tax_brackets` pairs are (threshold, rate); the first
    threshold the gross salary strictly exceeds sets the rate for the whole gross
    amount. Gross amounts under every threshold pay `base_tax_rate`.
    """

    bonus_tiers: Tuple[Tuple[int, Decimal], ...] = Field(
        default=(
            (5, Decimal("0.15")),
            (4, Decimal("0.10")),
            (3, Decimal("0.05")),
        )
    )
    tax_brackets: Tuple[Tuple[Decimal, Decimal], ...] = Field(
        default=(
            (Decimal("100000"), Decimal("0.30")),
            (Decimal("50000"), Decimal("0.20")),
        )
    )
    base_tax_rate: Decimal = Field(Decimal("0.10"))

    model_config = {"frozen": True}

    @field_validator("bonus_tiers")
    @classmethod
    def _sort_bonus_tiers(cls, tiers: Tuple[Tuple[int, Decimal], ...]) -> Tuple[Tuple[int, Decimal], ...]:
        return tuple(sorted(tiers, key=lambda tier: tier[0], reverse=True))

    @field_validator("tax_brackets")
    @classmethod
    def _sort_tax_brackets(
        cls, brackets: Tuple[Tuple[Decimal, Decimal], ...]
    ) -> Tuple[Tuple[Decimal, Decimal], ...]:
        return tuple(sorted(brackets, key=lambda bracket: bracket[0], reverse=True))


class BenefitRates(BaseModel):
    """Benefit rate (fraction of base salary) per employment type."""

    full_time: Decimal = Decimal("0.20")
    part_time: Decimal = Decimal("0.10")
    contract: Decimal = Decimal("0")
    intern: Decimal = Decimal("0.05")

    model_config = {"frozen": True}

    def for_type(self, employment_type: EmploymentType) -> Decimal:
        return getattr(self, employment_type.value.lower())

    def as_mapping(self) -> Dict[EmploymentType, Decimal]:
        return {employment_type: self.for_type(employment_type) for employment_type in EmploymentType}


class MessageTemplates(BaseModel):
    """
    Subject and body templates for employee notifications.

    Bodies use `str.format` placeholders: `{name}` and `{department}` for the
    welcome message; `{name}`, `{gross}`, `{tax}` and `{net}` for the payroll notice.
    """

    welcome_subject: str = "Welcome to the Company!"
    welcome_body: str = (
        "Dear {name},\n\n"
        "Welcome to our company! We're excited to have you join the {department} department.\n\n"
        "Best regards,\nHR Team"
    )
    payroll_subject: str = "Your Payroll is Ready"
    payroll_body: str = (
        "Dear {name},\n\n"
        "Your payroll for this period:\n"
        "Gross Salary: ${gross}\n"
        "Tax: ${tax}\n"
        "Net Salary: ${net}\n\n"
        "Best regards,\nPayroll Team"
    )

    model_config = {"frozen": True}


__all__ = ["PayrollPolicy", "BenefitRates", "MessageTemplates"]
