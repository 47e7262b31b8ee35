"""Tests for fortnightly cost aggregation."""

import pytest

from childcare_calc.engine.costs import (
    calculate_total_costs,
    calculate_total_costs_with_work_days,
)
from childcare_calc.engine.models import AgeCategory, Child


class TestCalculateTotalCosts:
    """Tests for cost aggregation via the activity test."""

    def test_single_child_per_day(self, full_time_child: Child) -> None:
        """8h x 5d at $15 with 50% subsidy costs about 61.48 per day."""
        result = calculate_total_costs([full_time_child], 285_279, 80)

        assert result.childcare_per_day == pytest.approx(61.48)
        assert result.total_cost == pytest.approx(1_200)
        assert result.total_subsidy == pytest.approx(585.2)
        assert result.total_out_of_pocket == pytest.approx(614.8)

    def test_hours_above_ceiling_unsubsidised(self) -> None:
        """Scheduled hours over the ceiling are billed without subsidy."""
        child = Child(hours_per_day=10, days_per_week=5, hourly_rate=14)

        result = calculate_total_costs([child], 50_000, 24)
        detail = result.child_details[0]

        assert detail.hours_per_fortnight == 100
        assert detail.subsidised_hours == 72
        assert detail.unsubsidised_hours == 28
        assert detail.subsidy_amount == pytest.approx(72 * 14 * 0.9)
        assert detail.total_cost == pytest.approx(1_400)

    def test_full_rate_billed_above_cap(self) -> None:
        """The cap limits subsidy only; the family pays the full rate."""
        child = Child(hours_per_day=5, days_per_week=2, hourly_rate=25)

        result = calculate_total_costs([child], 50_000, 80)
        detail = result.child_details[0]

        assert detail.total_cost == pytest.approx(20 * 25)
        assert detail.subsidy_amount == pytest.approx(20 * 14.63 * 0.9)
        assert detail.out_of_pocket == pytest.approx(500 - 20 * 14.63 * 0.9)

    def test_two_children_summed(self, full_time_child: Child, priority_child: Child) -> None:
        """Totals are plain sums and per-day divides by all child-days."""
        result = calculate_total_costs([full_time_child, priority_child], 170_000, 80)

        standard, priority = result.child_details
        assert standard.subsidy_percent == 74
        assert priority.subsidy_percent == 87
        assert result.total_cost == pytest.approx(2_400)
        assert result.total_subsidy == pytest.approx(
            standard.subsidy_amount + priority.subsidy_amount
        )
        assert result.childcare_per_day == pytest.approx(result.total_out_of_pocket / 20)

    def test_no_children(self) -> None:
        """An empty household costs nothing and per-day is 0."""
        result = calculate_total_costs([], 100_000, 80)

        assert result.child_details == []
        assert result.total_cost == 0
        assert result.childcare_per_day == 0

    def test_zero_days_per_day_is_zero(self) -> None:
        """No scheduled days gives 0 per day, not a division error."""
        child = Child(hours_per_day=8, days_per_week=0, hourly_rate=15)

        result = calculate_total_costs([child], 100_000, 80)

        assert result.total_out_of_pocket == 0
        assert result.childcare_per_day == 0

    def test_school_age_cap(self) -> None:
        """School-age children use the lower cap."""
        child = Child(
            age=AgeCategory.SCHOOL_AGE, hours_per_day=3, days_per_week=5, hourly_rate=15
        )

        result = calculate_total_costs([child], 50_000, 80)

        assert result.child_details[0].subsidy_per_hour == pytest.approx(12.81 * 0.9)


class TestCalculateTotalCostsWithWorkDays:
    """Tests for cost aggregation with a supplied hours ceiling."""

    def test_matches_activity_variant(self, full_time_child: Child) -> None:
        """Same ceiling gives the same result as the activity-test variant."""
        by_activity = calculate_total_costs([full_time_child], 120_000, 80)
        by_ceiling = calculate_total_costs_with_work_days([full_time_child], 120_000, 100)

        assert by_ceiling == by_activity

    def test_supplied_ceiling_used(self, full_time_child: Child) -> None:
        """The ceiling bypasses the activity test."""
        result = calculate_total_costs_with_work_days([full_time_child], 50_000, 66)

        assert result.child_details[0].subsidised_hours == 66
        assert result.child_details[0].unsubsidised_hours == 14

    def test_days_override_does_not_mutate_input(self, full_time_child: Child) -> None:
        """Overridden days apply to copies only."""
        children = [full_time_child]

        result = calculate_total_costs_with_work_days(
            children, 50_000, 72, days_per_week=3
        )

        assert result.child_details[0].days_per_week == 3
        assert result.child_details[0].hours_per_fortnight == 48
        assert children[0] is full_time_child
        assert full_time_child.days_per_week == 5
