"""Sweep income or hours worked and evaluate the household at each step.

Income curves vary the returning parent's gross income with everything else
fixed. Hours curves vary hours worked per week: gross income is pro-rated
from a full-time income, work days follow from hours (7.6 hours per day,
rounded to one decimal) and set the childcare days needed, and the
subsidised hours ceiling follows the days worked rather than a fixed
activity figure.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from childcare_calc.core.config import settings
from childcare_calc.core.logging import get_logger, sweep_ctx
from childcare_calc.curves.samples import HoursSample, IncomeSample
from childcare_calc.engine.costs import (
    calculate_total_costs,
    calculate_total_costs_with_work_days,
)
from childcare_calc.engine.models import Child, FamilyType
from childcare_calc.engine.tax import calculate_after_tax_income
from childcare_calc.policy.year_config import PolicyYearConfig, resolve_config

logger = get_logger(__name__)

HOURS_STEP = 0.5


# =============================================================================
# Sweep Parameters
# =============================================================================

# Sweep parameters are validated when built, like the scenario records. The
# sweeps trust them and do not re-check any number.


class IncomeSweepParams(BaseModel):
    """Fixed household parameters for an income sweep."""

    model_config = ConfigDict(frozen=True)

    other_parent_income: float = Field(default=0, ge=0, description="Other parent's income")
    children: tuple[Child, ...] = Field(default=(), description="Children in care")
    activity_hours_per_fortnight: float = Field(ge=0, description="Activity test hours")
    family_type: FamilyType = Field(default=FamilyType.TWO_PARENT)


class HoursSweepParams(BaseModel):
    """Fixed household parameters for an hours-worked sweep."""

    model_config = ConfigDict(frozen=True)

    full_time_income: float = Field(ge=0, description="Income at full-time hours")
    full_time_hours_per_week: float = Field(ge=0, description="Hours behind the full-time income")
    other_parent_income: float = Field(default=0, ge=0, description="Other parent's income")
    children: tuple[Child, ...] = Field(default=(), description="Children in care")
    family_type: FamilyType = Field(default=FamilyType.TWO_PARENT)


# =============================================================================
# Conversions
# =============================================================================


def days_per_week_from_hours(
    hours_per_week: float, config: PolicyYearConfig | None = None
) -> float:
    """Convert weekly hours to work days, rounded to one decimal place."""
    work = resolve_config(config).work
    return round(hours_per_week / work.hours_per_work_day, 1)


def work_days_subsidised_hours_ceiling(
    days_per_week: float, config: PolicyYearConfig | None = None
) -> float:
    """Subsidised hours per fortnight earned by the days worked.

    Each day worked per week earns a fixed number of subsidised hours per
    fortnight, clamped between the activity test minimum and maximum.
    """
    config = resolve_config(config)
    activity_test = config.activity_test
    earned = days_per_week * config.work.subsidised_hours_per_work_day
    return min(
        max(earned, activity_test.min_subsidised_hours),
        activity_test.max_subsidised_hours,
    )


def minimum_wage_after_tax(
    hours_per_week: float, config: PolicyYearConfig | None = None
) -> float:
    """After-tax annual income at the minimum wage for weekly hours."""
    config = resolve_config(config)
    work = config.work
    gross = work.minimum_wage_per_hour * hours_per_week * work.weeks_per_year
    return calculate_after_tax_income(gross, config)


def minimum_wage_after_tax_for_fortnight(
    hours_per_fortnight: float | None = None, config: PolicyYearConfig | None = None
) -> float:
    """After-tax annual income at the minimum wage for fortnightly hours.

    Args:
        hours_per_fortnight: Hours worked per fortnight; full-time when None.
        config: Policy year, or None for the default year.
    """
    config = resolve_config(config)
    work = config.work
    if hours_per_fortnight is None:
        hours_per_fortnight = work.full_time_hours_per_week * 2
    gross = work.minimum_wage_per_hour * hours_per_fortnight * work.fortnights_per_year
    return calculate_after_tax_income(gross, config)


def _income_grid(min_income: float, max_income: float, step: float) -> list[float]:
    if max_income < min_income:
        return []
    count = math.floor((max_income - min_income) / step)
    grid = [min_income + index * step for index in range(count + 1)]
    if not math.isclose(grid[-1], max_income, rel_tol=1e-12, abs_tol=1e-9):
        grid.append(max_income)
    else:
        grid[-1] = max_income
    return grid


# =============================================================================
# Sweeps
# =============================================================================


def sample_by_income(
    params: IncomeSweepParams,
    min_income: float | None = None,
    max_income: float | None = None,
    step: float | None = None,
    config: PolicyYearConfig | None = None,
) -> list[IncomeSample]:
    """Sample net income across a range of returning-parent incomes.

    Both endpoints are always included, even when ``max_income`` is not a
    whole number of steps from ``min_income``.

    Args:
        params: Fixed household parameters.
        min_income: First income sampled (settings default when None).
        max_income: Last income sampled (settings default when None).
        step: Income increment (settings default when None).
        config: Policy year, or None for the default year.

    Returns:
        Samples in ascending income order.

    Raises:
        ValueError: If ``step`` is not positive.
    """
    config = resolve_config(config)
    min_income = settings.income_sweep_min if min_income is None else min_income
    max_income = settings.income_sweep_max if max_income is None else max_income
    step = settings.income_sweep_step if step is None else step
    if step <= 0:
        raise ValueError(f"Income step must be greater than 0, got {step}")

    fortnights = config.work.fortnights_per_year
    samples: list[IncomeSample] = []

    token = sweep_ctx.set("income")
    try:
        for gross_income in _income_grid(min_income, max_income, step):
            if params.family_type is FamilyType.SINGLE_PARENT:
                income_for_subsidy = gross_income
            else:
                income_for_subsidy = params.other_parent_income + gross_income

            costs = calculate_total_costs(
                params.children,
                income_for_subsidy,
                params.activity_hours_per_fortnight,
                config,
            )
            after_tax = calculate_after_tax_income(gross_income, config)
            childcare_cost = costs.total_out_of_pocket * fortnights

            samples.append(
                IncomeSample(
                    gross_income=gross_income,
                    net_income=after_tax - childcare_cost,
                    after_tax=after_tax,
                    childcare_cost=childcare_cost,
                )
            )

        logger.debug(
            "Sampled income curve",
            points=len(samples),
            min_income=min_income,
            max_income=max_income,
            step=step,
        )
    finally:
        sweep_ctx.reset(token)

    return samples


def sample_by_hours(
    params: HoursSweepParams,
    max_hours: float | None = None,
    config: PolicyYearConfig | None = None,
) -> list[HoursSample]:
    """Sample net income across hours worked per week.

    Hours run from 0 in half-hour steps up to ``max_hours`` rounded up to the
    next half hour (settings default when None or not positive).

    Args:
        params: Fixed household parameters.
        max_hours: Highest weekly hours sampled.
        config: Policy year, or None for the default year.

    Returns:
        Samples in ascending hours order.
    """
    config = resolve_config(config)
    work = config.work
    fortnights = work.fortnights_per_year

    if max_hours is not None and max_hours > 0:
        max_hours_for_graph = math.ceil(max_hours / HOURS_STEP) * HOURS_STEP
    else:
        max_hours_for_graph = settings.hours_sweep_max

    if params.full_time_hours_per_week > 0:
        hourly_rate = params.full_time_income / (
            params.full_time_hours_per_week * work.weeks_per_year
        )
    else:
        hourly_rate = 0.0

    step_count = round(max_hours_for_graph / HOURS_STEP)
    samples: list[HoursSample] = []

    token = sweep_ctx.set("hours")
    try:
        for index in range(step_count + 1):
            hours_per_week = index * HOURS_STEP
            gross_income = hourly_rate * hours_per_week * work.weeks_per_year
            days_per_week = days_per_week_from_hours(hours_per_week, config)

            if params.family_type is FamilyType.SINGLE_PARENT:
                income_for_subsidy = gross_income
            else:
                income_for_subsidy = params.other_parent_income + gross_income

            costs = calculate_total_costs_with_work_days(
                params.children,
                income_for_subsidy,
                work_days_subsidised_hours_ceiling(days_per_week, config),
                config,
                days_per_week=days_per_week,
            )
            after_tax = calculate_after_tax_income(gross_income, config)
            childcare_cost = costs.total_out_of_pocket * fortnights

            samples.append(
                HoursSample(
                    hours_per_week=hours_per_week,
                    days_per_week=days_per_week,
                    gross_income=gross_income,
                    net_income=after_tax - childcare_cost,
                    after_tax=after_tax,
                    childcare_cost=childcare_cost,
                )
            )

        logger.debug(
            "Sampled hours curve",
            points=len(samples),
            max_hours=max_hours_for_graph,
            hourly_rate=hourly_rate,
        )
    finally:
        sweep_ctx.reset(token)

    return samples
