"""
Domain models for the personnel toolkit.

`Employee` is the tracked record. Identity fields are frozen after construction
while salary, rating and status stay mutable and are re-validated on every
assignment. `PayrollResult` is an immutable snapshot created once per payroll
calculation.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from personnel.errors import EmployeeValidationError

MIN_PERFORMANCE_RATING = 0
MAX_PERFORMANCE_RATING = 5
GOOD_PERFORMANCE_RATING = 3


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    TERMINATED = "TERMINATED"
    ON_LEAVE = "ON_LEAVE"


class EmploymentType(str, Enum):
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"
    INTERN = "INTERN"


class Employee(BaseModel):
    """
    A single employee tracked by the repository.
    """

    id: str = Field(..., frozen=True, description="Unique, immutable employee id.")
    name: str = Field(..., frozen=True, description="Full name.")
    email: str = Field(..., frozen=True, description="Contact address; must contain '@'.")
    department: str = Field(..., frozen=True, description="Department (the reporting category).")
    base_salary: Decimal = Field(..., description="Annual base salary, never negative.")
    performance_rating: int = Field(MIN_PERFORMANCE_RATING, description="Rating in [0, 5].")
    status: EmployeeStatus = Field(EmployeeStatus.ACTIVE)
    employment_type: EmploymentType = Field(EmploymentType.FULL_TIME)
    hire_date: datetime = Field(default_factory=datetime.now)

    model_config = {"validate_assignment": True}

    @field_validator("id", "name", "department", mode="before")
    @classmethod
    def _require_text(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or not str(value).strip():
            label = "ID" if info.field_name == "id" else info.field_name
            raise EmployeeValidationError(f"Employee {label} cannot be null or empty", value)
        return value

    @field_validator("email", mode="before")
    @classmethod
    def _require_email(cls, value: Any) -> Any:
        if value is None or "@" not in str(value):
            raise EmployeeValidationError("Valid email is required", value)
        return value

    @field_validator("base_salary", mode="before")
    @classmethod
    def _require_salary(cls, value: Any) -> Any:
        if value is None:
            raise EmployeeValidationError("Base salary must be non-negative", value)
        return value

    @field_validator("base_salary")
    @classmethod
    def _non_negative_salary(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise EmployeeValidationError("Base salary must be non-negative", value)
        return value

    @field_validator("performance_rating")
    @classmethod
    def _rating_in_range(cls, value: int) -> int:
        if not MIN_PERFORMANCE_RATING <= value <= MAX_PERFORMANCE_RATING:
            raise EmployeeValidationError(
                f"Performance rating must be between {MIN_PERFORMANCE_RATING} "
                f"and {MAX_PERFORMANCE_RATING}",
                value,
            )
        return value

    @property
    def is_active(self) -> bool:
        return self.status is EmployeeStatus.ACTIVE

    @property
    def has_good_performance(self) -> bool:
        return self.performance_rating >= GOOD_PERFORMANCE_RATING

    @property
    def years_of_service(self) -> int:
        return datetime.now().year - self.hire_date.year

    def is_eligible_for_promotion(self, min_years: int = 2) -> bool:
        return self.years_of_service >= min_years and self.has_good_performance


class PayrollResult(BaseModel):
    """
    Immutable outcome of one payroll calculation.
    """

    employee_id: str
    gross_salary: Decimal
    tax: Decimal
    net_salary: Decimal
    calculated_at: datetime = Field(default_factory=datetime.now)

    model_config = {"frozen": True}


__all__ = [
    "Employee",
    "EmployeeStatus",
    "EmploymentType",
    "PayrollResult",
    "MIN_PERFORMANCE_RATING",
    "MAX_PERFORMANCE_RATING",
    "GOOD_PERFORMANCE_RATING",
]
