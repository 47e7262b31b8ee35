"""Fortnightly childcare cost, subsidy and out-of-pocket aggregation.

Two entry points share one per-child formula:
- calculate_total_costs: ceiling chosen by the activity test
- calculate_total_costs_with_work_days: ceiling supplied by the caller,
  used when subsidised hours track the days actually worked

The provider's full rate is billed for every scheduled hour; the rate cap only
limits the subsidy.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from childcare_calc.engine.models import Child
from childcare_calc.engine.subsidy import (
    calculate_subsidised_hours_ceiling,
    subsidy_terms,
)
from childcare_calc.policy.year_config import PolicyYearConfig, resolve_config


# =============================================================================
# Data Structures
# =============================================================================


@dataclass
class ChildCostDetail:
    """Fortnightly cost breakdown for one child.

    Attributes:
        subsidy_percent: Percent of the capped rate paid as subsidy.
        hourly_rate_cap: Cap applied for the child's age category.
        subsidised_hours_ceiling: Maximum subsidised hours per fortnight.
        subsidy_per_hour: Subsidy paid per subsidised hour.
        hours_per_fortnight: Scheduled care hours.
        subsidised_hours: Scheduled hours that attract subsidy.
        unsubsidised_hours: Scheduled hours above the ceiling.
        total_cost: Provider bill at the full hourly rate.
        subsidy_amount: Subsidy paid.
        out_of_pocket: Total cost less subsidy.
        hours_per_day: Child's hours per day.
        days_per_week: Child's days per week used for this calculation.
        is_priority: Whether the higher schedule applied.
    """

    subsidy_percent: float
    hourly_rate_cap: float
    subsidised_hours_ceiling: float
    subsidy_per_hour: float
    hours_per_fortnight: float
    subsidised_hours: float
    unsubsidised_hours: float
    total_cost: float
    subsidy_amount: float
    out_of_pocket: float
    hours_per_day: float
    days_per_week: float
    is_priority: bool


@dataclass
class AggregateCostResult:
    """Fortnightly totals across all children.

    Attributes:
        child_details: Per-child breakdowns in input order.
        total_cost: Sum of provider bills.
        total_subsidy: Sum of subsidy paid.
        total_out_of_pocket: Total cost less total subsidy.
        childcare_per_day: Out-of-pocket per scheduled child-day (0 when no
            days are scheduled).
    """

    child_details: list[ChildCostDetail] = field(default_factory=list)
    total_cost: float = 0.0
    total_subsidy: float = 0.0
    total_out_of_pocket: float = 0.0
    childcare_per_day: float = 0.0


# =============================================================================
# Cost Calculation
# =============================================================================


def _child_cost(
    child: Child,
    income: float,
    subsidised_hours_ceiling: float,
    config: PolicyYearConfig,
) -> ChildCostDetail:
    terms = subsidy_terms(child, income, subsidised_hours_ceiling, config)

    hours_per_fortnight = child.hours_per_fortnight
    subsidised_hours = min(hours_per_fortnight, subsidised_hours_ceiling)
    unsubsidised_hours = max(0.0, hours_per_fortnight - subsidised_hours)

    subsidy_amount = subsidised_hours * terms.subsidy_per_hour
    total_cost = hours_per_fortnight * child.hourly_rate

    return ChildCostDetail(
        subsidy_percent=terms.subsidy_percent,
        hourly_rate_cap=terms.hourly_rate_cap,
        subsidised_hours_ceiling=subsidised_hours_ceiling,
        subsidy_per_hour=terms.subsidy_per_hour,
        hours_per_fortnight=hours_per_fortnight,
        subsidised_hours=subsidised_hours,
        unsubsidised_hours=unsubsidised_hours,
        total_cost=total_cost,
        subsidy_amount=subsidy_amount,
        out_of_pocket=total_cost - subsidy_amount,
        hours_per_day=child.hours_per_day,
        days_per_week=child.days_per_week,
        is_priority=child.is_priority,
    )


def _aggregate(
    children: Sequence[Child],
    income: float,
    subsidised_hours_ceiling: float,
    config: PolicyYearConfig,
) -> AggregateCostResult:
    child_details = [
        _child_cost(child, income, subsidised_hours_ceiling, config)
        for child in children
    ]

    total_cost = sum(detail.total_cost for detail in child_details)
    total_subsidy = sum(detail.subsidy_amount for detail in child_details)
    total_out_of_pocket = total_cost - total_subsidy

    total_days_per_fortnight = sum(child.days_per_fortnight for child in children)
    if total_days_per_fortnight > 0:
        childcare_per_day = total_out_of_pocket / total_days_per_fortnight
    else:
        childcare_per_day = 0.0

    return AggregateCostResult(
        child_details=child_details,
        total_cost=total_cost,
        total_subsidy=total_subsidy,
        total_out_of_pocket=total_out_of_pocket,
        childcare_per_day=childcare_per_day,
    )


def calculate_total_costs(
    children: Sequence[Child],
    income: float,
    activity_hours_per_fortnight: float,
    config: PolicyYearConfig | None = None,
) -> AggregateCostResult:
    """Calculate fortnightly childcare costs using the activity test.

    Args:
        children: Children in care.
        income: Household income for the subsidy test.
        activity_hours_per_fortnight: Activity test hours.
        config: Policy year, or None for the default year.

    Returns:
        AggregateCostResult with per-child details and totals.

    Example:
        >>> child = Child(hours_per_day=8, days_per_week=5, hourly_rate=15)
        >>> round(calculate_total_costs([child], 285_279, 80).childcare_per_day, 2)
        61.48
    """
    config = resolve_config(config)
    ceiling = calculate_subsidised_hours_ceiling(activity_hours_per_fortnight, config)
    return _aggregate(children, income, ceiling, config)


def calculate_total_costs_with_work_days(
    children: Sequence[Child],
    income: float,
    subsidised_hours_ceiling: float,
    config: PolicyYearConfig | None = None,
    *,
    days_per_week: float | None = None,
) -> AggregateCostResult:
    """Calculate fortnightly childcare costs with a caller-supplied ceiling.

    Args:
        children: Children in care.
        income: Household income for the subsidy test.
        subsidised_hours_ceiling: Subsidised hours per fortnight, typically
            derived from days worked.
        config: Policy year, or None for the default year.
        days_per_week: Overrides every child's days of care. The override is
            applied to copies; the caller's records are unchanged.

    Returns:
        AggregateCostResult with per-child details and totals.
    """
    config = resolve_config(config)
    if days_per_week is not None:
        children = [
            child.model_copy(update={"days_per_week": days_per_week})
            for child in children
        ]
    return _aggregate(children, income, subsidised_hours_ceiling, config)
