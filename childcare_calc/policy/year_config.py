"""Financial year-specific tax and Child Care Subsidy parameters.

This module centralizes the policy values that change from year to year
(tax brackets, offsets, levy thresholds, subsidy income tiers, hourly rate
caps and activity test hours) so they are never hardcoded in the engines.
Engines accept a ``PolicyYearConfig`` explicitly, which lets tests and callers
evaluate alternate years without touching module state.

Example:
    >>> from childcare_calc.policy.year_config import get_policy_config
    >>> config = get_policy_config(2025)
    >>> print(f"Tax-free threshold: {config.tax.tax_free_threshold}")
    Tax-free threshold: 18200.0
"""

from __future__ import annotations

from dataclasses import dataclass

from childcare_calc.core.config import settings


@dataclass(frozen=True)
class TaxSchedule:
    """Progressive income tax brackets.

    Attributes:
        brackets: Ordered (lower_bound, rate) pairs with strictly increasing
            lower bounds. Income below the first lower bound is tax free; each
            bracket ends where the next one starts and the last is unbounded.
    """

    brackets: tuple[tuple[float, float], ...]

    @property
    def tax_free_threshold(self) -> float:
        """Income up to which no tax is payable."""
        return self.brackets[0][0] if self.brackets else 0.0


@dataclass(frozen=True)
class OffsetSchedule:
    """Low income tax offset (LITO) that decays as income rises.

    Attributes:
        max_offset: Full offset available up to ``full_offset_limit``.
        full_offset_limit: Income at which the first decay starts.
        first_decay_rate: Reduction per dollar between the full offset limit
            and ``second_decay_start``.
        second_decay_start: Income at which the second decay starts.
        second_decay_base: Offset amount at ``second_decay_start``.
        second_decay_rate: Reduction per dollar from ``second_decay_start``
            up to ``cutoff``.
        cutoff: Income above which no offset applies.
    """

    max_offset: float
    full_offset_limit: float
    first_decay_rate: float
    second_decay_start: float
    second_decay_base: float
    second_decay_rate: float
    cutoff: float


@dataclass(frozen=True)
class LevySchedule:
    """Medicare levy with low-income shade-in.

    Attributes:
        rate: Full levy rate applied to all income above ``shade_in_end``.
        threshold: Income at or below which no levy is payable.
        shade_in_end: Upper bound of the shade-in band.
        shade_in_rate: Rate applied to income over ``threshold`` inside the
            shade-in band.
    """

    rate: float
    threshold: float
    shade_in_end: float
    shade_in_rate: float


@dataclass(frozen=True)
class BracketSegment:
    """One declining segment of a subsidy percent schedule.

    Above ``threshold_start`` the percent drops by ``step_percent`` for every
    full ``step_size`` dollars, never below ``floor_percent``.
    """

    threshold_start: float
    baseline_percent: float
    step_size: float
    step_percent: float
    floor_percent: float


@dataclass(frozen=True)
class SubsidySchedule:
    """Piecewise subsidy percent schedule for one household role.

    Attributes:
        name: Schedule label ("standard" or "priority").
        max_percent: Percent paid at or below the first segment start.
        segments: Declining segments in ascending ``threshold_start`` order.
        terminal_threshold: Income at or above which ``terminal_percent``
            applies regardless of the segments.
        terminal_percent: Percent paid from ``terminal_threshold`` upward.
    """

    name: str
    max_percent: float
    segments: tuple[BracketSegment, ...]
    terminal_threshold: float
    terminal_percent: float


@dataclass(frozen=True)
class RateCaps:
    """Hourly rate caps used as the basis for subsidy.

    Attributes:
        under_school_age: Cap for children below school age.
        school_age: Cap for school-age children.
    """

    under_school_age: float
    school_age: float


@dataclass(frozen=True)
class ActivityTest:
    """Subsidised hours ceilings selected by fortnightly activity hours.

    Attributes:
        min_subsidised_hours: Guaranteed hours per fortnight for every family.
        max_subsidised_hours: Hours per fortnight once the cutoff is met.
        max_hours_activity_threshold: Activity hours per fortnight at or above
            which the maximum applies.
    """

    min_subsidised_hours: float
    max_subsidised_hours: float
    max_hours_activity_threshold: float


@dataclass(frozen=True)
class WorkAssumptions:
    """Conversions between hours, days, fortnights and years.

    Attributes:
        fortnights_per_year: Annualization factor for fortnightly amounts.
        weeks_per_year: Annualization factor for weekly amounts.
        hours_per_work_day: Standard hours in one work day.
        full_time_hours_per_week: Standard full-time hours per week.
        full_time_days_per_week: Standard full-time days per week.
        subsidised_hours_per_work_day: Subsidised care hours per fortnight
            earned for each day worked per week.
        minimum_wage_per_hour: National minimum wage.
    """

    fortnights_per_year: int = 26
    weeks_per_year: int = 52
    hours_per_work_day: float = 7.6
    full_time_hours_per_week: float = 38.0
    full_time_days_per_week: float = 5.0
    subsidised_hours_per_work_day: float = 22.0
    minimum_wage_per_hour: float = 24.95


@dataclass(frozen=True)
class PolicyYearConfig:
    """All policy parameters for one financial year.

    This dataclass is frozen to prevent accidental modification. Build an
    alternate year with ``dataclasses.replace``.

    Attributes:
        policy_year: Starting calendar year of the financial year
            (2025 means 2025-26).
        tax: Income tax brackets.
        offset: Low income tax offset.
        levy: Medicare levy.
        standard_subsidy: Schedule for the eldest child in care.
        priority_subsidy: Higher schedule for second and later children.
        rate_caps: Hourly rate caps by age category.
        activity_test: Subsidised hours ceilings.
        work: Hours/days/year conversions and minimum wage.
    """

    policy_year: int
    tax: TaxSchedule
    offset: OffsetSchedule
    levy: LevySchedule
    standard_subsidy: SubsidySchedule
    priority_subsidy: SubsidySchedule
    rate_caps: RateCaps
    activity_test: ActivityTest
    work: WorkAssumptions = WorkAssumptions()

    @property
    def label(self) -> str:
        """Financial year label, e.g. "2025-26"."""
        return f"{self.policy_year}-{(self.policy_year + 1) % 100:02d}"


# 2025-26 Configuration - ATO stage 3 rates, Services Australia CCS tiers,
# rate caps from 7 July 2025 and the 3 Day Guarantee activity test.
POLICY_YEAR_2025 = PolicyYearConfig(
    policy_year=2025,
    tax=TaxSchedule(
        brackets=(
            (18_200.0, 0.16),
            (45_000.0, 0.30),
            (135_000.0, 0.37),
            (190_000.0, 0.45),
        ),
    ),
    offset=OffsetSchedule(
        max_offset=700.0,
        full_offset_limit=37_000.0,
        first_decay_rate=0.05,
        second_decay_start=45_000.0,
        second_decay_base=325.0,
        second_decay_rate=0.015,
        cutoff=66_667.0,
    ),
    levy=LevySchedule(
        rate=0.02,
        threshold=27_222.0,
        shade_in_end=34_027.0,
        shade_in_rate=0.10,
    ),
    standard_subsidy=SubsidySchedule(
        name="standard",
        max_percent=90.0,
        segments=(
            BracketSegment(
                threshold_start=85_279.0,
                baseline_percent=90.0,
                step_size=5_000.0,
                step_percent=1.0,
                floor_percent=0.0,
            ),
        ),
        terminal_threshold=535_279.0,
        terminal_percent=0.0,
    ),
    priority_subsidy=SubsidySchedule(
        name="priority",
        max_percent=95.0,
        segments=(
            BracketSegment(
                threshold_start=143_273.0,
                baseline_percent=95.0,
                step_size=3_000.0,
                step_percent=1.0,
                floor_percent=80.0,
            ),
            BracketSegment(
                threshold_start=267_563.0,
                baseline_percent=80.0,
                step_size=3_000.0,
                step_percent=1.0,
                floor_percent=50.0,
            ),
        ),
        terminal_threshold=357_563.0,
        terminal_percent=50.0,
    ),
    rate_caps=RateCaps(
        under_school_age=14.63,
        school_age=12.81,
    ),
    activity_test=ActivityTest(
        min_subsidised_hours=72.0,
        max_subsidised_hours=100.0,
        max_hours_activity_threshold=48.0,
    ),
)

# Registry of available policy year configurations
POLICY_YEAR_CONFIGS: dict[int, PolicyYearConfig] = {
    2025: POLICY_YEAR_2025,
}


def get_policy_config(year: int) -> PolicyYearConfig:
    """Get configuration for a specific financial year.

    Args:
        year: Starting year of the financial year (e.g., 2025 for 2025-26).

    Returns:
        PolicyYearConfig for the specified year.

    Raises:
        ValueError: If no configuration exists for the requested year.

    Example:
        >>> config = get_policy_config(2025)
        >>> config.rate_caps.under_school_age
        14.63
    """
    if year not in POLICY_YEAR_CONFIGS:
        available = sorted(POLICY_YEAR_CONFIGS.keys())
        raise ValueError(
            f"No policy configuration for year {year}. Available years: {available}"
        )
    return POLICY_YEAR_CONFIGS[year]


def resolve_config(config: PolicyYearConfig | None = None) -> PolicyYearConfig:
    """Return ``config`` or the configured default policy year.

    Args:
        config: Explicit configuration, or None for the settings default.

    Returns:
        The configuration engines should evaluate against.
    """
    if config is not None:
        return config
    return get_policy_config(settings.policy_year)
