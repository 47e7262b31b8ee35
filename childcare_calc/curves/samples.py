"""Sample records produced by curve sweeps and consumed by curve analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Protocol


class Sample(Protocol):
    """Shape shared by every curve sample."""

    x_field: ClassVar[str]

    @property
    def x(self) -> float: ...

    @property
    def net_income(self) -> float: ...


@dataclass(frozen=True)
class IncomeSample:
    """One point on an income curve (annual amounts).

    Attributes:
        gross_income: Returning parent's gross income (independent variable).
        net_income: After-tax income less annual childcare out-of-pocket.
        after_tax: After-tax income.
        childcare_cost: Annual childcare out-of-pocket.
    """

    gross_income: float
    net_income: float
    after_tax: float
    childcare_cost: float

    x_field: ClassVar[str] = "gross_income"

    @property
    def x(self) -> float:
        return self.gross_income


@dataclass(frozen=True)
class HoursSample:
    """One point on an hours-worked curve (annual amounts).

    Attributes:
        hours_per_week: Hours worked per week (independent variable).
        days_per_week: Work days (and childcare days) per week.
        gross_income: Pro-rated gross income.
        net_income: After-tax income less annual childcare out-of-pocket.
        after_tax: After-tax income.
        childcare_cost: Annual childcare out-of-pocket.
    """

    hours_per_week: float
    days_per_week: float
    gross_income: float
    net_income: float
    after_tax: float
    childcare_cost: float

    x_field: ClassVar[str] = "hours_per_week"

    @property
    def x(self) -> float:
        return self.hours_per_week


@dataclass(frozen=True)
class CurvePoint:
    """Summary point extracted from a curve.

    Attributes:
        x: Independent variable (income or hours per week).
        net_income: Net income at ``x``.
    """

    x: float
    net_income: float
