"""Income tax, low income tax offset and Medicare levy.

Pure functions over a ``PolicyYearConfig``. No rounding is applied here;
callers round for display only.
"""

from __future__ import annotations

from childcare_calc.policy.year_config import PolicyYearConfig, resolve_config


def calculate_low_income_offset(
    income: float, config: PolicyYearConfig | None = None
) -> float:
    """Calculate the low income tax offset for an annual income.

    The offset is flat up to the first limit, then decays linearly at one
    rate, then at a second rate from a lower base, and is zero above the
    cutoff.

    Args:
        income: Annual taxable income.
        config: Policy year, or None for the default year.

    Returns:
        Offset amount (never negative inside the schedule).
    """
    offset = resolve_config(config).offset

    if income <= offset.full_offset_limit:
        return offset.max_offset
    if income <= offset.second_decay_start:
        return offset.max_offset - offset.first_decay_rate * (
            income - offset.full_offset_limit
        )
    if income <= offset.cutoff:
        return offset.second_decay_base - offset.second_decay_rate * (
            income - offset.second_decay_start
        )
    return 0.0


def calculate_income_tax(income: float, config: PolicyYearConfig | None = None) -> float:
    """Calculate income tax payable using marginal brackets.

    Each bracket taxes only the slice of income between its lower bound and
    the next bracket's lower bound. The low income tax offset is subtracted
    afterwards and the result is floored at zero.

    Args:
        income: Annual taxable income (non-negative).
        config: Policy year, or None for the default year.

    Returns:
        Tax payable after the offset.

    Example:
        >>> round(calculate_income_tax(30_000), 2)
        1188.0
    """
    config = resolve_config(config)
    brackets = config.tax.brackets

    if income <= config.tax.tax_free_threshold:
        return 0.0

    gross_tax = 0.0
    for index, (lower_bound, rate) in enumerate(brackets):
        if income <= lower_bound:
            break
        if index + 1 < len(brackets):
            upper_bound = brackets[index + 1][0]
        else:
            upper_bound = float("inf")
        gross_tax += (min(income, upper_bound) - lower_bound) * rate

    offset = calculate_low_income_offset(income, config)
    return max(0.0, gross_tax - offset)


def calculate_medicare_levy(income: float, config: PolicyYearConfig | None = None) -> float:
    """Calculate the Medicare levy with the low-income shade-in.

    Args:
        income: Annual taxable income.
        config: Policy year, or None for the default year.

    Returns:
        Levy payable: zero at or below the threshold, the shade-in amount
        inside the band, the full rate above it.
    """
    levy = resolve_config(config).levy

    if income <= levy.threshold:
        return 0.0

    full_levy = income * levy.rate
    if income >= levy.shade_in_end:
        return full_levy
    return min(full_levy, (income - levy.threshold) * levy.shade_in_rate)


def calculate_after_tax_income(
    income: float,
    config: PolicyYearConfig | None = None,
    *,
    include_levy: bool = True,
) -> float:
    """Calculate take-home income after tax (and the Medicare levy).

    The levy-inclusive form is the canonical one used by every scenario and
    curve in this package.

    Args:
        income: Annual gross income.
        config: Policy year, or None for the default year.
        include_levy: Subtract the Medicare levy as well as income tax.

    Returns:
        Income remaining after tax.
    """
    config = resolve_config(config)
    after_tax = income - calculate_income_tax(income, config)
    if include_levy:
        after_tax -= calculate_medicare_levy(income, config)
    return after_tax
