"""Compare both parents working part-time against both working full-time.

When each parent drops to fewer days, each covers care on the days they do
not work, so fewer paid childcare days are needed. Family members (for
example grandparents) can cover further days for free. This module weighs
the income each parent gives up against the childcare saved, and reports
what one extra day of paid work would be worth per hour for each parent.

Full-time is 5 days of 7.6 hours (38 hours per week).
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from childcare_calc.core.logging import get_logger
from childcare_calc.engine.costs import calculate_total_costs
from childcare_calc.engine.models import Child
from childcare_calc.engine.tax import calculate_after_tax_income, calculate_income_tax
from childcare_calc.policy.year_config import PolicyYearConfig, resolve_config

logger = get_logger(__name__)


# =============================================================================
# Data Structures
# =============================================================================


class SharedCareParams(BaseModel):
    """Inputs for a shared-care comparison."""

    model_config = ConfigDict(frozen=True)

    first_parent_income: float = Field(ge=0, description="First parent's current annual income")
    first_parent_hours_per_week: float = Field(ge=0, description="Hours behind that income")
    second_parent_income: float = Field(ge=0, description="Second parent's current annual income")
    second_parent_hours_per_week: float = Field(ge=0, description="Hours behind that income")
    first_parent_days: float = Field(ge=0, le=5, description="Days per week the first parent works")
    second_parent_days: float = Field(ge=0, le=5, description="Days per week the second parent works")
    family_care_days: float = Field(
        default=0, ge=0, le=5, description="Days per week covered by family for free"
    )
    children: tuple[Child, ...] = Field(default=(), description="Children in care")


@dataclass
class CareArrangement:
    """Annual household result for one work arrangement.

    Attributes:
        combined_income: Sum of both parents' gross incomes.
        combined_after_tax: Sum of both parents' after-tax incomes.
        tax: Combined tax and levy.
        childcare_days: Paid childcare days per week.
        activity_hours_per_fortnight: Activity test hours used.
        childcare_out_of_pocket: Annual childcare out-of-pocket.
        net_income: Combined after-tax income less childcare.
        family_support_benefit: Net income gained from family care days.
    """

    combined_income: float
    combined_after_tax: float
    tax: float
    childcare_days: float
    activity_hours_per_fortnight: float
    childcare_out_of_pocket: float
    net_income: float
    family_support_benefit: float


@dataclass
class ParentShare:
    """One parent's side of the part-time arrangement.

    Attributes:
        fte_income: Income scaled to full-time hours.
        pro_rata_income: Income for the days worked.
        days_worked: Days worked per week.
        days_covering: Days per week this parent covers care.
        lost_income_gross: Full-time less pro-rata income.
        tax_saved: Full-time tax less part-time tax (income tax only).
        lost_income_after_tax: Full-time less part-time after-tax income.
        childcare_saved: Share of childcare savings, by days covered.
        net_cost: After-tax income lost less childcare saved.
        hours_not_in_paid_work: Annual hours not worked versus full-time.
        extra_day_net_benefit: Annual net gain from working one more day.
        extra_day_hourly_rate: That gain per hour of the extra day.
    """

    fte_income: float
    pro_rata_income: float
    days_worked: float
    days_covering: float
    lost_income_gross: float
    tax_saved: float
    lost_income_after_tax: float
    childcare_saved: float
    net_cost: float
    hours_not_in_paid_work: float
    extra_day_net_benefit: float
    extra_day_hourly_rate: float


@dataclass
class SharedCareComparison:
    """Part-time versus full-time comparison.

    Attributes:
        full_time: Both parents working full-time.
        part_time: Both parents working the requested days.
        first_parent: First parent's share of the part-time arrangement.
        second_parent: Second parent's share of the part-time arrangement.
        total_childcare_savings: Annual childcare saved versus full-time.
        family_support_saved_childcare: Annual childcare saved by family days.
        childcare_cost_per_day_annual: Annual cost of one covered day.
        combined_extra_day_hourly_rate: Net gain per hour if both parents
            returned to full-time.
        both_full_time: Whether both parents already work 5 days.
    """

    full_time: CareArrangement
    part_time: CareArrangement
    first_parent: ParentShare
    second_parent: ParentShare
    total_childcare_savings: float
    family_support_saved_childcare: float
    childcare_cost_per_day_annual: float
    combined_extra_day_hourly_rate: float
    both_full_time: bool


# =============================================================================
# Helpers
# =============================================================================


def full_time_equivalent_income(
    income: float, hours_per_week: float, config: PolicyYearConfig | None = None
) -> float:
    """Scale an income to full-time hours (unchanged when hours are 0)."""
    work = resolve_config(config).work
    if hours_per_week > 0:
        return income / hours_per_week * work.full_time_hours_per_week
    return income


def suggested_days_worked(
    hours_per_week: float, config: PolicyYearConfig | None = None
) -> int:
    """Suggest a starting number of days for a parent's current hours.

    A full-time parent is suggested 4 days so the comparison shows a sharing
    arrangement by default.
    """
    work = resolve_config(config).work
    days = round(hours_per_week / work.hours_per_work_day)
    if days == work.full_time_days_per_week:
        return days - 1
    return days


def _annual_out_of_pocket(
    children: tuple[Child, ...],
    days_per_week: float,
    income: float,
    activity_hours: float,
    config: PolicyYearConfig,
) -> float:
    scheduled = [child.model_copy(update={"days_per_week": days_per_week}) for child in children]
    costs = calculate_total_costs(scheduled, income, activity_hours, config)
    return costs.total_out_of_pocket * config.work.fortnights_per_year


def _parent_share(
    fte_income: float,
    pro_rata_income: float,
    days_worked: float,
    days_covering: float,
    childcare_saved: float,
    childcare_cost_per_day_annual: float,
    config: PolicyYearConfig,
) -> ParentShare:
    work = config.work
    hours_per_extra_day_annual = work.hours_per_work_day * work.weeks_per_year

    lost_after_tax = calculate_after_tax_income(fte_income, config) - calculate_after_tax_income(
        pro_rata_income, config
    )
    days_to_add = work.full_time_days_per_week - days_worked

    if days_to_add > 0:
        hours_not_in_paid_work = days_to_add * hours_per_extra_day_annual
        extra_income_per_day = lost_after_tax / days_to_add
        extra_day_net_benefit = extra_income_per_day - childcare_cost_per_day_annual
        extra_day_hourly_rate = extra_day_net_benefit / hours_per_extra_day_annual
    else:
        hours_not_in_paid_work = 0.0
        extra_day_net_benefit = 0.0
        extra_day_hourly_rate = 0.0

    return ParentShare(
        fte_income=fte_income,
        pro_rata_income=pro_rata_income,
        days_worked=days_worked,
        days_covering=days_covering,
        lost_income_gross=fte_income - pro_rata_income,
        tax_saved=calculate_income_tax(fte_income, config)
        - calculate_income_tax(pro_rata_income, config),
        lost_income_after_tax=lost_after_tax,
        childcare_saved=childcare_saved,
        net_cost=lost_after_tax - childcare_saved,
        hours_not_in_paid_work=hours_not_in_paid_work,
        extra_day_net_benefit=extra_day_net_benefit,
        extra_day_hourly_rate=extra_day_hourly_rate,
    )


# =============================================================================
# Comparison
# =============================================================================


def compare_shared_care(
    params: SharedCareParams, config: PolicyYearConfig | None = None
) -> SharedCareComparison:
    """Compare a shared part-time arrangement with both parents full-time.

    Args:
        params: Incomes, hours, days worked and family care days.
        config: Policy year, or None for the default year.

    Returns:
        SharedCareComparison with both arrangements and each parent's share.
    """
    config = resolve_config(config)
    work = config.work
    full_days = work.full_time_days_per_week
    fortnight_weeks = 2

    first_fte = full_time_equivalent_income(
        params.first_parent_income, params.first_parent_hours_per_week, config
    )
    second_fte = full_time_equivalent_income(
        params.second_parent_income, params.second_parent_hours_per_week, config
    )
    first_pro_rata = first_fte * params.first_parent_days / full_days
    second_pro_rata = second_fte * params.second_parent_days / full_days

    # Days each parent is home to cover care.
    first_covering = max(0.0, full_days - params.first_parent_days)
    second_covering = max(0.0, full_days - params.second_parent_days)
    parents_covering = min(first_covering + second_covering, full_days)
    total_covered = min(parents_covering + params.family_care_days, full_days)
    childcare_days = max(0.0, full_days - total_covered)

    # Activity test follows the parent working fewer hours.
    part_time_activity = (
        min(params.first_parent_days, params.second_parent_days)
        * work.hours_per_work_day
        * fortnight_weeks
    )
    full_time_activity = work.full_time_hours_per_week * fortnight_weeks

    # Part-time arrangement
    part_time_income = first_pro_rata + second_pro_rata
    part_time_after_tax = calculate_after_tax_income(
        first_pro_rata, config
    ) + calculate_after_tax_income(second_pro_rata, config)
    part_time_childcare = _annual_out_of_pocket(
        params.children, childcare_days, part_time_income, part_time_activity, config
    )
    part_time_childcare_no_family = _annual_out_of_pocket(
        params.children,
        min(childcare_days + params.family_care_days, full_days),
        part_time_income,
        part_time_activity,
        config,
    )
    part_time_net = part_time_after_tax - part_time_childcare

    # Full-time arrangement, with the same family care days
    full_time_income = first_fte + second_fte
    full_time_after_tax = calculate_after_tax_income(
        first_fte, config
    ) + calculate_after_tax_income(second_fte, config)
    full_time_childcare = _annual_out_of_pocket(
        params.children,
        max(0.0, full_days - params.family_care_days),
        full_time_income,
        full_time_activity,
        config,
    )
    full_time_childcare_no_family = _annual_out_of_pocket(
        params.children, full_days, full_time_income, full_time_activity, config
    )
    full_time_net = full_time_after_tax - full_time_childcare

    total_childcare_savings = full_time_childcare - part_time_childcare
    total_parent_days_covering = first_covering + second_covering
    if total_parent_days_covering > 0:
        first_saved = first_covering / total_parent_days_covering * total_childcare_savings
        second_saved = second_covering / total_parent_days_covering * total_childcare_savings
        cost_per_day_annual = total_childcare_savings / total_parent_days_covering
    else:
        first_saved = 0.0
        second_saved = 0.0
        cost_per_day_annual = 0.0

    first_share = _parent_share(
        first_fte,
        first_pro_rata,
        params.first_parent_days,
        first_covering,
        first_saved,
        cost_per_day_annual,
        config,
    )
    second_share = _parent_share(
        second_fte,
        second_pro_rata,
        params.second_parent_days,
        second_covering,
        second_saved,
        cost_per_day_annual,
        config,
    )

    total_additional_hours = first_share.hours_not_in_paid_work + second_share.hours_not_in_paid_work
    if total_additional_hours > 0:
        combined_rate = (
            first_share.extra_day_net_benefit + second_share.extra_day_net_benefit
        ) / total_additional_hours
    else:
        combined_rate = 0.0

    logger.debug(
        "Compared shared care arrangements",
        childcare_days=childcare_days,
        part_time_net=part_time_net,
        full_time_net=full_time_net,
    )

    return SharedCareComparison(
        full_time=CareArrangement(
            combined_income=full_time_income,
            combined_after_tax=full_time_after_tax,
            tax=full_time_income - full_time_after_tax,
            childcare_days=max(0.0, full_days - params.family_care_days),
            activity_hours_per_fortnight=full_time_activity,
            childcare_out_of_pocket=full_time_childcare,
            net_income=full_time_net,
            family_support_benefit=full_time_childcare_no_family - full_time_childcare,
        ),
        part_time=CareArrangement(
            combined_income=part_time_income,
            combined_after_tax=part_time_after_tax,
            tax=part_time_income - part_time_after_tax,
            childcare_days=childcare_days,
            activity_hours_per_fortnight=part_time_activity,
            childcare_out_of_pocket=part_time_childcare,
            net_income=part_time_net,
            family_support_benefit=part_time_childcare_no_family - part_time_childcare,
        ),
        first_parent=first_share,
        second_parent=second_share,
        total_childcare_savings=total_childcare_savings,
        family_support_saved_childcare=part_time_childcare_no_family - part_time_childcare,
        childcare_cost_per_day_annual=cost_per_day_annual,
        combined_extra_day_hourly_rate=combined_rate,
        both_full_time=(
            params.first_parent_days == full_days and params.second_parent_days == full_days
        ),
    )
