"""Summary points extracted from sampled curves.

Every function here works only on the sample sequence (ascending in its
independent variable) and never re-evaluates the household. Crossings are
found between adjacent samples and located by linear interpolation. Work
days on an interpolated hours sample are recomputed from its hours, as the
sampler does, rather than blended.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import fields, replace
from typing import TypeVar

from childcare_calc.curves.sampler import days_per_week_from_hours
from childcare_calc.curves.samples import CurvePoint, HoursSample, Sample
from childcare_calc.policy.year_config import PolicyYearConfig

SampleT = TypeVar("SampleT", bound=Sample)

Reference = float | Callable[[float], float]

MIN_BREAK_EVEN_HOURS = 0.5
MIN_INTERSECTION_HOURS = 0.1
MAX_INTERSECTION_HOURS = 50.0
MIN_DENOMINATOR = 0.001


def _interpolate(current: SampleT, following: SampleT, ratio: float) -> SampleT:
    """Blend two adjacent samples field by field."""
    values = {
        field.name: getattr(current, field.name)
        + (getattr(following, field.name) - getattr(current, field.name)) * ratio
        for field in fields(current)
    }
    return replace(current, **values)


def _with_work_days(point: SampleT, config: PolicyYearConfig | None) -> SampleT:
    if isinstance(point, HoursSample):
        return replace(
            point, days_per_week=days_per_week_from_hours(point.hours_per_week, config)
        )
    return point


def _reference_at(reference: Reference, x: float) -> float:
    if callable(reference):
        return reference(x)
    return float(reference)


# =============================================================================
# Crossings
# =============================================================================


def find_break_even(samples: Sequence[Sample]) -> CurvePoint | None:
    """Find where net income crosses zero.

    Both directions are detected. The crossing is placed at
    ``|current| / (|current| + |next|)`` of the way between the pair.

    Args:
        samples: Curve samples in ascending x order.

    Returns:
        The first crossing with net income 0, or None if the curve never
        changes sign.
    """
    for current, following in zip(samples, samples[1:]):
        rising = current.net_income <= 0 and following.net_income > 0
        falling = current.net_income >= 0 and following.net_income < 0
        if not (rising or falling):
            continue

        ratio = abs(current.net_income) / (
            abs(current.net_income) + abs(following.net_income)
        )
        return CurvePoint(
            x=current.x + (following.x - current.x) * ratio,
            net_income=0.0,
        )

    return None


def find_intersection(
    samples: Sequence[Sample], reference: Reference
) -> CurvePoint | None:
    """Find where net income meets a reference level or curve.

    A reference entirely below the curve degrades to the lowest-net sample,
    and one entirely above to the highest-net sample. When no adjacent pair
    brackets the reference the closest sample is returned.

    Args:
        samples: Curve samples in ascending x order.
        reference: Constant level, or a function of x (e.g. minimum wage
            after tax for the same income or hours).

    Returns:
        The crossing point, or None for an empty sequence.
    """
    if not samples:
        return None

    differences = [
        sample.net_income - _reference_at(reference, sample.x) for sample in samples
    ]

    if all(difference > 0 for difference in differences):
        lowest = min(samples, key=lambda sample: sample.net_income)
        return CurvePoint(x=lowest.x, net_income=lowest.net_income)
    if all(difference < 0 for difference in differences):
        highest = max(samples, key=lambda sample: sample.net_income)
        return CurvePoint(x=highest.x, net_income=highest.net_income)

    for index in range(len(samples) - 1):
        current, following = samples[index], samples[index + 1]
        d_current, d_following = differences[index], differences[index + 1]

        if d_current == 0:
            return CurvePoint(x=current.x, net_income=current.net_income)
        if (d_current < 0) != (d_following < 0) and d_following != 0:
            t = d_current / (d_current - d_following)
            return CurvePoint(
                x=current.x + (following.x - current.x) * t,
                net_income=current.net_income
                + (following.net_income - current.net_income) * t,
            )

    closest_index = min(range(len(samples)), key=lambda i: abs(differences[i]))
    closest = samples[closest_index]
    return CurvePoint(x=closest.x, net_income=closest.net_income)


# =============================================================================
# Lookups
# =============================================================================


def find_extremum(samples: Sequence[SampleT]) -> SampleT | None:
    """Return the sample with the highest net income (first wins on ties)."""
    if not samples:
        return None
    best = samples[0]
    for sample in samples[1:]:
        if sample.net_income > best.net_income:
            best = sample
    return best


def find_point_at(
    samples: Sequence[SampleT],
    target_x: float,
    config: PolicyYearConfig | None = None,
) -> SampleT | None:
    """Sample the curve at an arbitrary x.

    Args:
        samples: Curve samples in ascending x order.
        target_x: Independent variable value to look up.
        config: Policy year used to turn hours into work days. Defaults to
            the configured year.

    Returns:
        The sample at ``target_x`` if one exists, otherwise the money
        fields linearly interpolated between the bracketing pair (work days
        on hours samples follow from ``target_x``). None when the sequence
        is empty or ``target_x`` lies outside the sampled range.
    """
    for sample in samples:
        if sample.x == target_x:
            return sample

    for current, following in zip(samples, samples[1:]):
        if current.x < target_x < following.x:
            ratio = (target_x - current.x) / (following.x - current.x)
            point = _interpolate(current, following, ratio)
            point = replace(point, **{current.x_field: target_x})
            return _with_work_days(point, config)

    return None


# =============================================================================
# Hours Curve
# =============================================================================


def find_break_even_hours(
    samples: Sequence[HoursSample], config: PolicyYearConfig | None = None
) -> HoursSample | None:
    """Find the hours at which working starts to pay.

    Only the first negative-to-positive crossing counts. A crossing below
    half an hour per week is not reported. Work days are recomputed from
    the crossing hours under ``config``.

    Returns:
        The interpolated sample with net income 0, or None.
    """
    for current, following in zip(samples, samples[1:]):
        if not (current.net_income <= 0 and following.net_income > 0):
            continue

        ratio = abs(current.net_income) / (
            abs(current.net_income) + abs(following.net_income)
        )
        point = _interpolate(current, following, ratio)
        if point.hours_per_week < MIN_BREAK_EVEN_HOURS:
            return None
        return _with_work_days(replace(point, net_income=0.0), config)

    return None


def find_minimum_wage_intersection(
    samples: Sequence[HoursSample], reference_fn: Callable[[float], float]
) -> CurvePoint | None:
    """Find where net income crosses the minimum wage after-tax curve.

    The origin sample is skipped since both curves start at zero. Crossings
    with a near-flat relative slope or outside (0.1, 50] hours are ignored.

    Args:
        samples: Hours curve samples in ascending hours order.
        reference_fn: After-tax minimum wage income for weekly hours.
    """
    for index in range(1, len(samples) - 1):
        current, following = samples[index], samples[index + 1]
        current_reference = reference_fn(current.hours_per_week)
        following_reference = reference_fn(following.hours_per_week)

        current_above = current.net_income > current_reference
        following_above = following.net_income > following_reference
        if current_above == following_above:
            continue

        net_change = following.net_income - current.net_income
        denominator = net_change - (following_reference - current_reference)
        if abs(denominator) <= MIN_DENOMINATOR:
            continue

        t = (current_reference - current.net_income) / denominator
        hours = current.hours_per_week + t * (
            following.hours_per_week - current.hours_per_week
        )
        if MIN_INTERSECTION_HOURS < hours <= MAX_INTERSECTION_HOURS:
            return CurvePoint(x=hours, net_income=current.net_income + t * net_change)

    return None
