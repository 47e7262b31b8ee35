"""Tax, Child Care Subsidy and scenario calculation engines.

Tax (tax.py):
- calculate_income_tax: Marginal brackets less the low income tax offset
- calculate_low_income_offset: Offset decaying through two rates
- calculate_medicare_levy: Levy with low-income shade-in
- calculate_after_tax_income: Canonical levy-inclusive take-home income

Subsidy (subsidy.py):
- evaluate_bracket_schedule: Generic piecewise subsidy schedule evaluator
- calculate_subsidy_percent: Standard or priority percent for an income
- calculate_subsidised_hours_ceiling: Activity test hours ceiling
- calculate_child_subsidy: Percent, cap, ceiling and subsidy per hour

Costs (costs.py):
- calculate_total_costs: Fortnightly cost aggregation via the activity test
- calculate_total_costs_with_work_days: Same formula with a supplied ceiling

Scenarios:
- evaluate_scenario: Annual breakdown for a parent returning to work
- compare_shared_care: Part-time sharing versus both parents full-time
"""

from childcare_calc.engine.costs import (
    AggregateCostResult,
    ChildCostDetail,
    calculate_total_costs,
    calculate_total_costs_with_work_days,
)
from childcare_calc.engine.models import AgeCategory, Child, FamilyType, ParentScenario
from childcare_calc.engine.scenario import (
    AnnualChildCost,
    ChildcareCosts,
    FinancialBreakdown,
    evaluate_scenario,
)
from childcare_calc.engine.sharing import (
    CareArrangement,
    ParentShare,
    SharedCareComparison,
    SharedCareParams,
    compare_shared_care,
    full_time_equivalent_income,
    suggested_days_worked,
)
from childcare_calc.engine.subsidy import (
    ChildSubsidy,
    calculate_child_subsidy,
    calculate_subsidised_hours_ceiling,
    calculate_subsidy_percent,
    evaluate_bracket_schedule,
    get_hourly_rate_cap,
)
from childcare_calc.engine.tax import (
    calculate_after_tax_income,
    calculate_income_tax,
    calculate_low_income_offset,
    calculate_medicare_levy,
)

__all__ = [
    # Models
    "AgeCategory",
    "Child",
    "FamilyType",
    "ParentScenario",
    "SharedCareParams",
    # Tax
    "calculate_after_tax_income",
    "calculate_income_tax",
    "calculate_low_income_offset",
    "calculate_medicare_levy",
    # Subsidy
    "ChildSubsidy",
    "calculate_child_subsidy",
    "calculate_subsidised_hours_ceiling",
    "calculate_subsidy_percent",
    "evaluate_bracket_schedule",
    "get_hourly_rate_cap",
    # Costs
    "AggregateCostResult",
    "ChildCostDetail",
    "calculate_total_costs",
    "calculate_total_costs_with_work_days",
    # Scenarios
    "AnnualChildCost",
    "CareArrangement",
    "ChildcareCosts",
    "FinancialBreakdown",
    "ParentShare",
    "SharedCareComparison",
    "compare_shared_care",
    "evaluate_scenario",
    "full_time_equivalent_income",
    "suggested_days_worked",
]
