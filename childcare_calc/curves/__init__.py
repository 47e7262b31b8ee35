"""Curve sampling and analysis.

Sampler (sampler.py):
- sample_by_income: Net income across returning-parent incomes
- sample_by_hours: Net income across hours worked per week
- minimum_wage_after_tax: Reference curve for the hours graph

Analysis (analysis.py):
- find_break_even: Where net income crosses zero
- find_intersection: Where net income meets a reference level or curve
- find_extremum: Highest net income sample
- find_point_at: Interpolated sample at an arbitrary x
"""

from childcare_calc.curves.analysis import (
    find_break_even,
    find_break_even_hours,
    find_extremum,
    find_intersection,
    find_minimum_wage_intersection,
    find_point_at,
)
from childcare_calc.curves.sampler import (
    HoursSweepParams,
    IncomeSweepParams,
    days_per_week_from_hours,
    minimum_wage_after_tax,
    minimum_wage_after_tax_for_fortnight,
    sample_by_hours,
    sample_by_income,
    work_days_subsidised_hours_ceiling,
)
from childcare_calc.curves.samples import CurvePoint, HoursSample, IncomeSample, Sample

__all__ = [
    # Samples
    "CurvePoint",
    "HoursSample",
    "IncomeSample",
    "Sample",
    # Sampler
    "HoursSweepParams",
    "IncomeSweepParams",
    "days_per_week_from_hours",
    "minimum_wage_after_tax",
    "minimum_wage_after_tax_for_fortnight",
    "sample_by_hours",
    "sample_by_income",
    "work_days_subsidised_hours_ceiling",
    # Analysis
    "find_break_even",
    "find_break_even_hours",
    "find_extremum",
    "find_intersection",
    "find_minimum_wage_intersection",
    "find_point_at",
]
