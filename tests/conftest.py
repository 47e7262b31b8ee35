"""Pytest configuration and shared fixtures for tests."""

import pytest

from childcare_calc.engine.models import AgeCategory, Child
from childcare_calc.policy import POLICY_YEAR_2025, PolicyYearConfig


@pytest.fixture
def policy() -> PolicyYearConfig:
    """2025-26 policy configuration.

    Returns:
        The built-in 2025-26 PolicyYearConfig.
    """
    return POLICY_YEAR_2025


@pytest.fixture
def full_time_child() -> Child:
    """Eldest child in care 8 hours a day, 5 days a week at $15/hour.

    Returns:
        Non-priority under-school-age Child.
    """
    return Child(
        age=AgeCategory.UNDER_SCHOOL,
        hours_per_day=8,
        days_per_week=5,
        hourly_rate=15,
        is_priority=False,
    )


@pytest.fixture
def priority_child() -> Child:
    """Second child in care with the same schedule and rate.

    Returns:
        Priority under-school-age Child.
    """
    return Child(
        age=AgeCategory.UNDER_SCHOOL,
        hours_per_day=8,
        days_per_week=5,
        hourly_rate=15,
        is_priority=True,
    )
