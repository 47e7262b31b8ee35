"""Tests for income tax, low income tax offset and Medicare levy."""

import pytest

from childcare_calc.engine.tax import (
    calculate_after_tax_income,
    calculate_income_tax,
    calculate_low_income_offset,
    calculate_medicare_levy,
)


# =============================================================================
# Income Tax
# =============================================================================


class TestCalculateIncomeTax:
    """Tests for marginal bracket tax less the offset."""

    def test_zero_income(self) -> None:
        """No income means no tax."""
        assert calculate_income_tax(0) == 0

    def test_at_tax_free_threshold(self) -> None:
        """Income exactly at the tax-free threshold pays nothing."""
        assert calculate_income_tax(18_200) == 0

    def test_offset_absorbs_small_tax(self) -> None:
        """Tax just above the threshold is wiped out by the offset."""
        # (20,000 - 18,200) x 16% = 288, less the full 700 offset.
        assert calculate_income_tax(20_000) == 0

    def test_first_bracket_with_full_offset(self) -> None:
        """30,000 pays 16% on 11,800 less the 700 offset."""
        assert calculate_income_tax(30_000) == pytest.approx(1_188)

    def test_second_bracket(self) -> None:
        """80,000 reaches the 30% bracket with no offset left."""
        assert calculate_income_tax(80_000) == pytest.approx(14_788)

    def test_top_bracket(self) -> None:
        """Every bracket contributes only its own slice."""
        expected = (
            (45_000 - 18_200) * 0.16
            + (135_000 - 45_000) * 0.30
            + (190_000 - 135_000) * 0.37
            + (250_000 - 190_000) * 0.45
        )
        assert calculate_income_tax(250_000) == pytest.approx(expected)

    def test_tax_never_negative(self) -> None:
        """The offset cannot turn tax into a refund."""
        for income in (18_201, 19_000, 21_000, 22_500):
            assert calculate_income_tax(income) >= 0


class TestLowIncomeOffset:
    """Tests for the decaying low income tax offset."""

    def test_full_offset(self) -> None:
        """Full offset up to the first limit."""
        assert calculate_low_income_offset(30_000) == 700
        assert calculate_low_income_offset(37_000) == 700

    def test_first_decay(self) -> None:
        """Offset falls 5 cents per dollar above the first limit."""
        assert calculate_low_income_offset(40_000) == pytest.approx(550)

    def test_second_decay(self) -> None:
        """Offset falls 1.5 cents per dollar from the second base."""
        assert calculate_low_income_offset(50_000) == pytest.approx(250)

    def test_above_cutoff(self) -> None:
        """No offset above the cutoff."""
        assert calculate_low_income_offset(70_000) == 0


# =============================================================================
# Medicare Levy
# =============================================================================


class TestMedicareLevy:
    """Tests for the Medicare levy shade-in."""

    def test_below_threshold(self) -> None:
        """No levy at or below the low-income threshold."""
        assert calculate_medicare_levy(18_000) == 0
        assert calculate_medicare_levy(27_222) == 0

    def test_shade_in_band(self) -> None:
        """Inside the band the levy is 10% of income over the threshold."""
        assert calculate_medicare_levy(30_000) == pytest.approx(277.8)

    def test_full_levy(self) -> None:
        """Above the band the full 2% applies to all income."""
        assert calculate_medicare_levy(80_000) == pytest.approx(1_600)

    def test_shade_in_meets_full_levy(self) -> None:
        """The shade-in never exceeds the full levy."""
        income = 34_000
        assert calculate_medicare_levy(income) <= income * 0.02


# =============================================================================
# After-Tax Income
# =============================================================================


class TestAfterTaxIncome:
    """Tests for take-home income."""

    def test_below_threshold_keeps_everything(self) -> None:
        """Income below the tax-free threshold is unchanged."""
        assert calculate_after_tax_income(18_000) == 18_000

    def test_80k(self) -> None:
        """80,000 takes home about 63,612 after tax and levy."""
        assert calculate_after_tax_income(80_000) == pytest.approx(63_612, abs=1)

    def test_minimum_wage_full_time(self) -> None:
        """Full-time minimum wage income takes home about 42,997."""
        assert calculate_after_tax_income(49_301) == pytest.approx(42_997, abs=1)

    def test_without_levy(self) -> None:
        """Levy-free variant only subtracts income tax."""
        assert calculate_after_tax_income(80_000, include_levy=False) == pytest.approx(
            65_212
        )

    def test_levy_inclusive_is_default(self) -> None:
        """The canonical form includes the levy."""
        assert calculate_after_tax_income(80_000) < calculate_after_tax_income(
            80_000, include_levy=False
        )

    def test_explicit_config(self, policy) -> None:
        """Passing the default year explicitly gives identical results."""
        assert calculate_after_tax_income(120_000, policy) == calculate_after_tax_income(
            120_000
        )
