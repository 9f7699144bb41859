"""
Calculators package for the personnel toolkit.

Re-exports the payroll calculator, the benefits service and its per-type
strategies so downstream code can import from `personnel.calculators` directly.
"""

from personnel.calculators.abstract import AbstractBenefitsStrategy, BenefitsStrategy
from personnel.calculators.benefits import (
    BenefitsService,
    ContractBenefits,
    FullTimeBenefits,
    InternBenefits,
    PartTimeBenefits,
    RateBenefitsStrategy,
)
from personnel.calculators.payroll import PayrollCalculator

__all__ = [
    # Abstracts
    "AbstractBenefitsStrategy",
    "BenefitsStrategy",
    # Payroll
    "PayrollCalculator",
    # Benefits
    "BenefitsService",
    "RateBenefitsStrategy",
    "FullTimeBenefits",
    "PartTimeBenefits",
    "ContractBenefits",
    "InternBenefits",
]
