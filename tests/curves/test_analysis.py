"""Tests for break-even, intersection, extremum and point lookup on curves."""

import pytest

from childcare_calc.curves.analysis import (
    find_break_even,
    find_break_even_hours,
    find_extremum,
    find_intersection,
    find_minimum_wage_intersection,
    find_point_at,
)
from childcare_calc.curves.sampler import IncomeSweepParams, sample_by_income
from childcare_calc.curves.samples import CurvePoint, HoursSample, IncomeSample
from childcare_calc.engine.models import Child


def _income_curve(points: list[tuple[float, float]]) -> list[IncomeSample]:
    return [
        IncomeSample(gross_income=x, net_income=net, after_tax=net, childcare_cost=0)
        for x, net in points
    ]


def _hours_curve(points: list[tuple[float, float]]) -> list[HoursSample]:
    return [
        HoursSample(
            hours_per_week=hours,
            days_per_week=round(hours / 7.6, 1),
            gross_income=hours * 2_000,
            net_income=net,
            after_tax=hours * 1_600,
            childcare_cost=hours * 1_600 - net,
        )
        for hours, net in points
    ]


# =============================================================================
# Break-Even
# =============================================================================


class TestFindBreakEven:
    """Tests for the zero crossing of net income."""

    def test_negative_to_positive(self) -> None:
        """Crossing is interpolated by distance from zero."""
        samples = _income_curve(
            [(50_000, -10_000), (60_000, -5_000), (70_000, 5_000), (80_000, 15_000)]
        )

        point = find_break_even(samples)

        assert point is not None
        assert 60_000 < point.x < 70_000
        assert point.x == pytest.approx(65_000)
        assert point.net_income == 0

    def test_positive_to_negative(self) -> None:
        """Falling crossings are found too."""
        samples = _income_curve([(0, 100), (10, -300)])

        point = find_break_even(samples)

        assert point == CurvePoint(x=pytest.approx(2.5), net_income=0)

    def test_first_crossing_wins(self) -> None:
        """Only the first sign change is reported."""
        samples = _income_curve([(0, -1), (10, 1), (20, -1)])

        assert find_break_even(samples).x == pytest.approx(5)

    @pytest.mark.parametrize(
        "points",
        [
            [(0, 10), (10, 20), (20, 30)],
            [(0, -10), (10, -20)],
            [(0, 0), (10, 0)],
            [(0, 5)],
            [],
        ],
    )
    def test_no_crossing(self, points: list[tuple[float, float]]) -> None:
        """Same-signed, flat-zero, single and empty curves have no break-even."""
        assert find_break_even(_income_curve(points)) is None


# =============================================================================
# Intersection
# =============================================================================


class TestFindIntersection:
    """Tests for crossing a reference level or curve."""

    @pytest.fixture
    def rising(self) -> list[IncomeSample]:
        """Net income rising from 1,000 to 3,000."""
        return _income_curve([(0, 1_000), (10, 2_000), (20, 3_000)])

    def test_constant_reference(self, rising: list[IncomeSample]) -> None:
        """A constant reference inside the range is interpolated."""
        point = find_intersection(rising, 2_500)

        assert point.x == pytest.approx(15)
        assert point.net_income == pytest.approx(2_500)

    def test_callable_reference(self, rising: list[IncomeSample]) -> None:
        """A reference function is evaluated at each sample's x."""
        point = find_intersection(rising, lambda x: 200 * x + 500)

        assert point.x == pytest.approx(5)
        assert point.net_income == pytest.approx(1_500)

    def test_reference_below_all_samples(self, rising: list[IncomeSample]) -> None:
        """An unreachable low reference degrades to the lowest sample."""
        assert find_intersection(rising, 500) == CurvePoint(x=0, net_income=1_000)

    def test_reference_above_all_samples(self, rising: list[IncomeSample]) -> None:
        """An unreachable high reference degrades to the highest sample."""
        assert find_intersection(rising, 5_000) == CurvePoint(x=20, net_income=3_000)

    def test_exact_hit(self, rising: list[IncomeSample]) -> None:
        """A reference equal to a sample returns that sample."""
        assert find_intersection(rising, 2_000) == CurvePoint(x=10, net_income=2_000)

    def test_empty(self) -> None:
        """No samples, no intersection."""
        assert find_intersection([], 0) is None


# =============================================================================
# Extremum and Point Lookup
# =============================================================================


class TestFindExtremum:
    """Tests for the maximum net income sample."""

    def test_maximum(self) -> None:
        """The highest net income sample is returned whole."""
        samples = _income_curve([(0, 1), (10, 7), (20, 3)])

        assert find_extremum(samples) is samples[1]

    def test_first_wins_on_tie(self) -> None:
        """Ties resolve to the earliest sample."""
        samples = _income_curve([(0, 5), (10, 5)])

        assert find_extremum(samples) is samples[0]

    def test_empty(self) -> None:
        """Only an empty curve has no extremum."""
        assert find_extremum([]) is None


class TestFindPointAt:
    """Tests for interpolated lookup."""

    def test_exact_sample(self) -> None:
        """A target on a sample returns that sample."""
        samples = _hours_curve([(10, 100), (11, 300)])

        assert find_point_at(samples, 11) is samples[1]

    def test_single_sample_exact(self) -> None:
        """A one-sample curve still answers its own x."""
        samples = _hours_curve([(10, 100)])

        assert find_point_at(samples, 10) is samples[0]

    def test_interpolates_every_field(self) -> None:
        """All money fields are interpolated, not just net income."""
        samples = _hours_curve([(10, 100), (11, 300)])

        point = find_point_at(samples, 10.5)

        assert isinstance(point, HoursSample)
        assert point.hours_per_week == 10.5
        assert point.net_income == pytest.approx(200)
        assert point.gross_income == pytest.approx(21_000)
        assert point.after_tax == pytest.approx(16_800)
        assert point.days_per_week == 1.4

    @pytest.mark.parametrize(("target", "days"), [(10.25, 1.3), (10.75, 1.4)])
    def test_work_days_follow_hours(self, target: float, days: float) -> None:
        """Work days are recomputed from the looked-up hours, not blended."""
        samples = _hours_curve([(10, 100), (11, 300)])

        assert find_point_at(samples, target).days_per_week == days

    def test_income_curve(self) -> None:
        """Income samples are interpolated on gross income."""
        samples = _income_curve([(0, -1_000), (10_000, 1_000)])

        point = find_point_at(samples, 2_500)

        assert point.gross_income == 2_500
        assert point.net_income == pytest.approx(-500)

    @pytest.mark.parametrize("target", [-1, 12])
    def test_outside_range(self, target: float) -> None:
        """Targets outside the sampled range give None."""
        samples = _hours_curve([(0, 0), (10, 100)])

        assert find_point_at(samples, target) is None

    def test_empty(self) -> None:
        """Empty curves give None."""
        assert find_point_at([], 5) is None


# =============================================================================
# Hours Curve
# =============================================================================


class TestFindBreakEvenHours:
    """Tests for the hours at which work starts to pay."""

    def test_interpolated_sample(self) -> None:
        """The crossing is returned as a full sample with zero net income."""
        samples = _hours_curve([(0, -100), (1, -50), (2, 50)])

        point = find_break_even_hours(samples)

        assert point.hours_per_week == pytest.approx(1.5)
        assert point.gross_income == pytest.approx(3_000)
        assert point.net_income == 0
        assert point.days_per_week == 0.2

    def test_ignores_falling_crossing(self) -> None:
        """Only a negative-to-positive crossing counts."""
        samples = _hours_curve([(0, 100), (1, -100), (2, -50)])

        assert find_break_even_hours(samples) is None

    def test_ignores_crossing_near_zero_hours(self) -> None:
        """A crossing under half an hour is not meaningful."""
        samples = _hours_curve([(0, -10), (1, 90)])

        assert find_break_even_hours(samples) is None


class TestFindMinimumWageIntersection:
    """Tests for the crossing with the minimum wage curve."""

    def test_crossing(self) -> None:
        """Curve-versus-curve crossing is interpolated."""
        samples = _hours_curve([(0, 0), (1, 50), (2, 150), (3, 350), (4, 500)])

        point = find_minimum_wage_intersection(samples, lambda hours: 100 * hours)

        assert point.x == pytest.approx(2.5)
        assert point.net_income == pytest.approx(250)

    def test_skips_origin(self) -> None:
        """A crossing between the first two samples is not reported."""
        samples = _hours_curve([(0, 10), (1, 50), (2, 150)])

        assert find_minimum_wage_intersection(samples, lambda hours: 100 * hours) is None

    def test_out_of_range_ignored(self) -> None:
        """Crossings beyond 50 hours are ignored."""
        samples = _hours_curve([(0, 0), (60, 5_000), (70, 6_000), (80, 9_000)])

        assert find_minimum_wage_intersection(samples, lambda hours: 100 * hours) is None

    def test_parallel_curves(self) -> None:
        """No crossing when the curves never swap order."""
        samples = _hours_curve([(0, 0), (1, 150), (2, 250)])

        assert find_minimum_wage_intersection(samples, lambda hours: 100 * hours) is None

    def test_empty(self) -> None:
        """Empty curves give None."""
        assert find_minimum_wage_intersection([], lambda hours: hours) is None


# =============================================================================
# Sampled Curves
# =============================================================================


class TestAnalysisOnSampledCurves:
    """Tests combining the sampler with the analysis functions."""

    def test_income_break_even_consistent_with_lookup(self, full_time_child: Child) -> None:
        """Net income looked up at the break-even income is zero."""
        params = IncomeSweepParams(children=(full_time_child,), activity_hours_per_fortnight=80)
        samples = sample_by_income(params, 0, 100_000, 5_000)

        point = find_break_even(samples)

        assert point is not None
        assert 0 < point.x < 100_000
        assert find_point_at(samples, point.x).net_income == pytest.approx(0, abs=1e-6)

    def test_extremum_is_last_sample_when_rising(self, full_time_child: Child) -> None:
        """Net income peaks at the top of a steadily rising curve."""
        params = IncomeSweepParams(children=(full_time_child,), activity_hours_per_fortnight=80)
        samples = sample_by_income(params, 0, 100_000, 5_000)

        assert find_extremum(samples) is samples[-1]
