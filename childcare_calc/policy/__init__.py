"""Policy parameters (tax and Child Care Subsidy) by financial year."""

from childcare_calc.policy.year_config import (
    POLICY_YEAR_2025,
    POLICY_YEAR_CONFIGS,
    ActivityTest,
    BracketSegment,
    LevySchedule,
    OffsetSchedule,
    PolicyYearConfig,
    RateCaps,
    SubsidySchedule,
    TaxSchedule,
    WorkAssumptions,
    get_policy_config,
    resolve_config,
)

__all__ = [
    "ActivityTest",
    "BracketSegment",
    "LevySchedule",
    "OffsetSchedule",
    "PolicyYearConfig",
    "POLICY_YEAR_2025",
    "POLICY_YEAR_CONFIGS",
    "RateCaps",
    "SubsidySchedule",
    "TaxSchedule",
    "WorkAssumptions",
    "get_policy_config",
    "resolve_config",
]
