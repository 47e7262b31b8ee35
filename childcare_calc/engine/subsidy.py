"""Child Care Subsidy percent, subsidised hours and per-child subsidy.

Both subsidy schedules (standard and priority) are driven by one piecewise
bracket evaluator over the ``SubsidySchedule`` data tables. Percent steps use
floor division, so the percent changes in whole steps and an income exactly on
a step boundary already receives the lower percent.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from childcare_calc.engine.models import AgeCategory, Child
from childcare_calc.policy.year_config import (
    PolicyYearConfig,
    SubsidySchedule,
    resolve_config,
)


@dataclass
class ChildSubsidy:
    """Subsidy terms for one child.

    Attributes:
        subsidy_percent: Percent of the capped rate paid as subsidy.
        hourly_rate_cap: Cap applied for the child's age category.
        subsidised_hours_ceiling: Maximum subsidised hours per fortnight.
        subsidy_per_hour: Subsidy paid per subsidised hour.
    """

    subsidy_percent: float
    hourly_rate_cap: float
    subsidised_hours_ceiling: float
    subsidy_per_hour: float


def evaluate_bracket_schedule(income: float, schedule: SubsidySchedule) -> float:
    """Evaluate a piecewise subsidy schedule at an income.

    Args:
        income: Household income for the subsidy test.
        schedule: Schedule tables to evaluate.

    Returns:
        Subsidy percent in [0, 100].
    """
    if income >= schedule.terminal_threshold:
        return _clamp_percent(schedule.terminal_percent)

    percent = schedule.max_percent
    for segment in reversed(schedule.segments):
        if income > segment.threshold_start:
            steps = math.floor((income - segment.threshold_start) / segment.step_size)
            percent = max(
                segment.floor_percent,
                segment.baseline_percent - steps * segment.step_percent,
            )
            break

    return _clamp_percent(percent)


def _clamp_percent(percent: float) -> float:
    return min(100.0, max(0.0, percent))


def calculate_subsidy_percent(
    income: float, is_priority: bool, config: PolicyYearConfig | None = None
) -> float:
    """Calculate the subsidy percent for a household income.

    Args:
        income: Household income for the subsidy test.
        is_priority: Whether the child is a second or later child.
        config: Policy year, or None for the default year.

    Returns:
        Subsidy percent. Priority children never fall below the priority
        schedule's terminal percent (50% in 2025-26).

    Example:
        >>> calculate_subsidy_percent(150_000, True)
        93.0
    """
    config = resolve_config(config)
    schedule = config.priority_subsidy if is_priority else config.standard_subsidy
    return evaluate_bracket_schedule(income, schedule)


def calculate_subsidised_hours_ceiling(
    activity_hours_per_fortnight: float, config: PolicyYearConfig | None = None
) -> float:
    """Select the subsidised hours ceiling from fortnightly activity hours.

    Below the activity cutoff every family gets the guaranteed minimum; at or
    above it, the maximum. There is no interpolation between the two.
    """
    activity_test = resolve_config(config).activity_test
    if activity_hours_per_fortnight >= activity_test.max_hours_activity_threshold:
        return activity_test.max_subsidised_hours
    return activity_test.min_subsidised_hours


def get_hourly_rate_cap(age: AgeCategory, config: PolicyYearConfig | None = None) -> float:
    """Return the hourly rate cap for an age category."""
    rate_caps = resolve_config(config).rate_caps
    if age is AgeCategory.SCHOOL_AGE:
        return rate_caps.school_age
    return rate_caps.under_school_age


def subsidy_terms(
    child: Child,
    income: float,
    subsidised_hours_ceiling: float,
    config: PolicyYearConfig,
) -> ChildSubsidy:
    """Build subsidy terms for a child with an already-known hours ceiling."""
    subsidy_percent = calculate_subsidy_percent(income, child.is_priority, config)
    hourly_rate_cap = get_hourly_rate_cap(child.age, config)

    # Provider charges above the cap are never subsidised.
    rate_for_subsidy = min(child.hourly_rate, hourly_rate_cap)
    subsidy_per_hour = rate_for_subsidy * (subsidy_percent / 100)

    return ChildSubsidy(
        subsidy_percent=subsidy_percent,
        hourly_rate_cap=hourly_rate_cap,
        subsidised_hours_ceiling=subsidised_hours_ceiling,
        subsidy_per_hour=subsidy_per_hour,
    )


def calculate_child_subsidy(
    child: Child,
    income: float,
    activity_hours_per_fortnight: float,
    config: PolicyYearConfig | None = None,
) -> ChildSubsidy:
    """Calculate subsidy terms for one child.

    Args:
        child: The child in care.
        income: Household income for the subsidy test.
        activity_hours_per_fortnight: Activity test hours.
        config: Policy year, or None for the default year.

    Returns:
        ChildSubsidy with percent, rate cap, hours ceiling and subsidy per hour.
    """
    config = resolve_config(config)
    ceiling = calculate_subsidised_hours_ceiling(activity_hours_per_fortnight, config)
    return subsidy_terms(child, income, ceiling, config)
