"""Financial breakdown for a parent entering or expanding paid work.

Combines the tax engine and cost aggregator into one annual picture:
after-tax income of the returning parent, annual childcare out-of-pocket,
net income after childcare, effective hourly rate and the share of gross
income lost to tax and childcare.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from childcare_calc.engine.costs import calculate_total_costs
from childcare_calc.engine.models import FamilyType, ParentScenario
from childcare_calc.engine.tax import calculate_after_tax_income
from childcare_calc.policy.year_config import PolicyYearConfig, resolve_config


@dataclass
class AnnualChildCost:
    """Annualized cost breakdown for one child.

    Attributes:
        subsidy_percent: Percent of the capped rate paid as subsidy.
        subsidy_amount: Annual subsidy.
        total_cost: Annual provider bill.
        out_of_pocket: Annual cost less subsidy.
        is_priority: Whether the higher schedule applied.
        subsidised_hours: Subsidised hours per fortnight.
        unsubsidised_hours: Unsubsidised hours per fortnight.
        hours_per_day: Child's hours per day.
        days_per_week: Child's days per week.
    """

    subsidy_percent: float
    subsidy_amount: float
    total_cost: float
    out_of_pocket: float
    is_priority: bool
    subsidised_hours: float
    unsubsidised_hours: float
    hours_per_day: float
    days_per_week: float


@dataclass
class ChildcareCosts:
    """Annual childcare totals for a scenario.

    Attributes:
        total_cost: Annual provider bills across all children.
        total_subsidy: Annual subsidy across all children.
        out_of_pocket: Annual out-of-pocket across all children.
        out_of_pocket_per_day: Out-of-pocket per scheduled child-day.
        child_details: Per-child annual breakdowns.
    """

    total_cost: float
    total_subsidy: float
    out_of_pocket: float
    out_of_pocket_per_day: float
    child_details: list[AnnualChildCost] = field(default_factory=list)


@dataclass
class FinancialBreakdown:
    """Annual financial result of a return-to-work scenario.

    Attributes:
        gross_income: Returning parent's gross income.
        after_tax_income: Returning parent's income after tax and levy.
        other_parent_after_tax: Other parent's income after tax and levy,
            reported separately (0 for single-parent households).
        household_income: Income assessed for the subsidy percent.
        childcare: Annual childcare costs.
        net_income_after_childcare: After-tax income less annual out-of-pocket.
        effective_hourly_rate: Net income per hour actually worked.
        percentage_of_income_lost: Share of gross income lost to tax and
            childcare, in percent.
    """

    gross_income: float
    after_tax_income: float
    other_parent_after_tax: float
    household_income: float
    childcare: ChildcareCosts
    net_income_after_childcare: float
    effective_hourly_rate: float
    percentage_of_income_lost: float


def evaluate_scenario(
    scenario: ParentScenario, config: PolicyYearConfig | None = None
) -> FinancialBreakdown:
    """Evaluate a return-to-work scenario.

    Args:
        scenario: Household incomes, hours and children.
        config: Policy year, or None for the default year.

    Returns:
        FinancialBreakdown with annual figures. Divisions by zero hours, zero
        income or zero care days yield 0 rather than NaN/inf.
    """
    config = resolve_config(config)
    fortnights = config.work.fortnights_per_year

    costs = calculate_total_costs(
        scenario.children,
        scenario.household_income,
        scenario.activity_hours_per_fortnight,
        config,
    )

    after_tax_income = calculate_after_tax_income(scenario.returning_parent_income, config)
    if scenario.family_type is FamilyType.SINGLE_PARENT:
        other_parent_after_tax = 0.0
    else:
        other_parent_after_tax = calculate_after_tax_income(
            scenario.other_parent_income, config
        )

    out_of_pocket_annual = costs.total_out_of_pocket * fortnights
    net_income = after_tax_income - out_of_pocket_annual

    annual_hours = scenario.hours_for_rate * fortnights
    effective_hourly_rate = net_income / annual_hours if annual_hours > 0 else 0.0

    gross_income = scenario.returning_parent_income
    if gross_income > 0:
        percentage_lost = (gross_income - net_income) / gross_income * 100
    else:
        percentage_lost = 0.0

    child_details = [
        AnnualChildCost(
            subsidy_percent=detail.subsidy_percent,
            subsidy_amount=detail.subsidy_amount * fortnights,
            total_cost=detail.total_cost * fortnights,
            out_of_pocket=detail.out_of_pocket * fortnights,
            is_priority=detail.is_priority,
            subsidised_hours=detail.subsidised_hours,
            unsubsidised_hours=detail.unsubsidised_hours,
            hours_per_day=detail.hours_per_day,
            days_per_week=detail.days_per_week,
        )
        for detail in costs.child_details
    ]

    return FinancialBreakdown(
        gross_income=gross_income,
        after_tax_income=after_tax_income,
        other_parent_after_tax=other_parent_after_tax,
        household_income=scenario.household_income,
        childcare=ChildcareCosts(
            total_cost=costs.total_cost * fortnights,
            total_subsidy=costs.total_subsidy * fortnights,
            out_of_pocket=out_of_pocket_annual,
            out_of_pocket_per_day=costs.childcare_per_day,
            child_details=child_details,
        ),
        net_income_after_childcare=net_income,
        effective_hourly_rate=effective_hourly_rate,
        percentage_of_income_lost=percentage_lost,
    )
