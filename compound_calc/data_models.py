"""Data models for the compound interest calculator.

This module defines dataclasses representing the entities used by the
calculator: the normalized calculation inputs, one row of the year-by-year
breakdown, the aggregate summary and the overall result. All of them are
frozen so that a result cannot be modified once the engine has returned it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .utils import normalize_period_unit, normalize_rate_unit

PERIOD_UNITS = ("years", "months")
RATE_UNITS = ("annual", "monthly")


@dataclass(frozen=True)
class CalculationInput:
    """Normalized inputs for one calculation.

    Attributes
    ----------
    initial_principal: float
        Lump sum deposited at time 0.
    monthly_deposit: float
        Amount added at the start of every month from the second month on.
    period: int
        Length of the investment, interpreted per ``period_unit``.
    period_unit: str
        ``"years"`` or ``"months"``; any other value counts as months.
    rate: float
        Interest rate in percent, interpreted per ``rate_unit``.
    rate_unit: str
        ``"annual"`` or ``"monthly"``; any other value counts as monthly.
        A monthly rate is scaled by 12.
    """

    initial_principal: float
    monthly_deposit: float
    period: int
    period_unit: str = "years"
    rate: float = 0.0
    rate_unit: str = "annual"

    def __post_init__(self) -> None:
        object.__setattr__(self, "period_unit", normalize_period_unit(self.period_unit))
        object.__setattr__(self, "rate_unit", normalize_rate_unit(self.rate_unit))


@dataclass(frozen=True)
class YearRow:
    """One year of the accrual breakdown.

    ``principal`` is the balance at the start of the year plus the deposits
    made during the year, ``interest`` is what accrued within the year and
    ``final_amount`` is the running balance at year end.
    """

    year: int
    principal: float
    interest: float
    final_amount: float


@dataclass(frozen=True)
class Summary:
    final_amount: float
    total_principal: float
    total_interest: float


@dataclass(frozen=True)
class CalculationResult:
    """Summary plus the ordered year rows produced by the engine."""

    summary: Summary
    breakdown: Tuple[YearRow, ...]
