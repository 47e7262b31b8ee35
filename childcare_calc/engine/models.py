"""Pydantic input models for childcare scenarios.

This module defines validated records supplied by callers:
- Child: One child in care, with schedule, provider rate and priority flag
- ParentScenario: A household where one parent enters or expands paid work

Validation happens here, on the caller's side, when a record is built: field
constraints reject negative incomes, hours, days and rates. The engine
functions take plain numbers and never validate them, so an out-of-range
figure passed directly (a negative income, say) flows through the arithmetic
instead of raising. Records are frozen so a calculation cannot modify the
caller's data.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AgeCategory(str, Enum):
    """Age category selecting the hourly rate cap."""

    UNDER_SCHOOL = "under-school"
    SCHOOL_AGE = "school-age"


class FamilyType(str, Enum):
    """Household shape used for the subsidy income test."""

    TWO_PARENT = "two-parent"
    SINGLE_PARENT = "single-parent"


class Child(BaseModel):
    """One child in care.

    The eldest child in care is non-priority; the second and every later child
    is a priority child and receives the higher subsidy schedule. Callers are
    responsible for the flags; the engines handle any combination.
    """

    model_config = ConfigDict(frozen=True)

    age: AgeCategory = Field(
        default=AgeCategory.UNDER_SCHOOL, description="Age category for the rate cap"
    )
    hours_per_day: float = Field(ge=0, description="Hours of care per day")
    days_per_week: float = Field(ge=0, le=7, description="Days of care per week")
    hourly_rate: float = Field(ge=0, description="Hourly rate charged by the provider")
    is_priority: bool = Field(
        default=False, description="Second or later child (higher subsidy rate)"
    )

    @property
    def hours_per_fortnight(self) -> float:
        """Scheduled care hours in one fortnight."""
        return self.hours_per_day * self.days_per_week * 2

    @property
    def days_per_fortnight(self) -> float:
        """Scheduled care days in one fortnight."""
        return self.days_per_week * 2


class ParentScenario(BaseModel):
    """A household in which one parent enters or expands paid work.

    ``returning_parent_income`` is the income being evaluated. For two-parent
    families the other parent's income is added for the subsidy income test
    but their tax is reported separately.
    """

    model_config = ConfigDict(frozen=True)

    returning_parent_income: float = Field(
        ge=0, description="Annual gross income of the parent returning to work"
    )
    other_parent_income: float = Field(
        default=0, ge=0, description="Annual gross income of the other parent"
    )
    children: tuple[Child, ...] = Field(default=(), description="Children in care")
    activity_hours_per_fortnight: float = Field(
        ge=0, description="Activity test hours per fortnight"
    )
    returning_parent_hours_per_fortnight: float | None = Field(
        default=None,
        ge=0,
        description="Hours actually worked per fortnight, if different from activity hours",
    )
    family_type: FamilyType = Field(
        default=FamilyType.TWO_PARENT, description="Two-parent or single-parent household"
    )

    @property
    def household_income(self) -> float:
        """Income assessed for the subsidy percent."""
        if self.family_type is FamilyType.SINGLE_PARENT:
            return self.returning_parent_income
        return self.returning_parent_income + self.other_parent_income

    @property
    def hours_for_rate(self) -> float:
        """Fortnightly hours used for the effective hourly rate."""
        if self.returning_parent_hours_per_fortnight is not None:
            return self.returning_parent_hours_per_fortnight
        return self.activity_hours_per_fortnight
