"""Core calculation engine for the compound interest calculator.

This module implements the year-by-year accrual of a lump sum plus recurring
monthly deposits. Deposits start in the second month of the first year and
then occur every month. Interest on the balance carried into a year is
prorated by the number of months in that year; interest on the deposits made
during a year is approximated with simple interest using the triangular sum
``k * (k + 1) / 2`` of deposit-months.

Results are returned as an immutable ``CalculationResult``.
"""

from __future__ import annotations

import logging
import math
from typing import List

from .data_models import CalculationInput, CalculationResult, Summary, YearRow
from .utils import (
    RawValue,
    normalize_period_unit,
    normalize_rate_unit,
    parse_float,
    parse_int,
)

logger = logging.getLogger(__name__)

FIRST_YEAR_DEPOSIT_MONTHS = 11  # no deposit in month 1, the opening balance is a lump sum
REGULAR_YEAR_DEPOSIT_MONTHS = 12
# longest period the CLI and web form accept (100 years)
MAX_TOTAL_MONTHS = 1200


def total_months_for(period: int, period_unit: str) -> int:
    """Return the number of months covered by ``period`` in ``period_unit``."""
    return period * 12 if normalize_period_unit(period_unit) == "years" else period


def total_years_for(total_months: int) -> int:
    return math.ceil(total_months / 12)


def annual_rate_for(rate: float, rate_unit: str) -> float:
    """Convert a percentage rate into an annual rate expressed as a fraction.

    A monthly rate is annualized by multiplying by 12, so ``rate=12`` with
    ``rate_unit="monthly"`` equals ``rate=144`` with ``rate_unit="annual"``.
    """
    if normalize_rate_unit(rate_unit) == "annual":
        return rate / 100
    return (rate / 100) * 12


def compute(
    initial_principal: RawValue,
    monthly_deposit: RawValue,
    period: RawValue,
    period_unit: str = "years",
    rate: RawValue = 0,
    rate_unit: str = "annual",
) -> CalculationResult:
    """Compute the accrual breakdown and summary from raw inputs.

    Numeric arguments may be numbers, numeric strings or ``None``; anything
    that cannot be read as a number is treated as 0. ``period`` is truncated
    to an integer. A non-positive period produces an empty breakdown whose
    summary equals the initial principal. Unit selectors never fail either:
    any period unit other than ``"years"`` counts as months and any rate unit
    other than ``"annual"`` counts as monthly.
    """
    config = CalculationInput(
        initial_principal=parse_float(initial_principal),
        monthly_deposit=parse_float(monthly_deposit),
        period=parse_int(period),
        period_unit=period_unit,
        rate=parse_float(rate),
        rate_unit=rate_unit,
    )
    return compute_result(config)


def compute_result(config: CalculationInput) -> CalculationResult:
    """Compute the accrual breakdown and summary for normalized inputs.

    Parameters
    ----------
    config: CalculationInput
        The calculation inputs.

    Returns
    -------
    CalculationResult
        ``breakdown`` holds one ``YearRow`` per elapsed year (a trailing
        partial year included) and ``summary`` the final amount, the total
        principal actually contributed and the interest earned on top of it.
    """
    p0 = config.initial_principal
    deposit = config.monthly_deposit
    total_months = total_months_for(config.period, config.period_unit)
    total_years = total_years_for(total_months)
    annual_rate = annual_rate_for(config.rate, config.rate_unit)
    monthly_rate = annual_rate / 12

    breakdown: List[YearRow] = []
    current_amount = p0
    total_deposits_made = 0

    for year in range(1, total_years + 1):
        principal_at_year_start = current_amount

        months_in_year = total_months % 12 if year * 12 > total_months else 12
        # exact multiple of 12: the year was already counted in full
        if months_in_year == 0 and total_months > 0:
            continue

        deposits_this_year = 0.0
        interest_on_deposits = 0.0

        if year == 1:
            months_to_deposit = min(months_in_year - 1, FIRST_YEAR_DEPOSIT_MONTHS)
            if months_to_deposit > 0:
                deposits_this_year = deposit * months_to_deposit
                interest_months_sum = (months_to_deposit * (months_to_deposit + 1)) / 2
                interest_on_deposits = deposit * monthly_rate * interest_months_sum
                total_deposits_made += months_to_deposit
        else:
            months_to_deposit = min(months_in_year, REGULAR_YEAR_DEPOSIT_MONTHS)
            deposits_this_year = deposit * months_to_deposit
            interest_months_sum = (months_in_year * (months_in_year + 1)) / 2
            interest_on_deposits = deposit * monthly_rate * interest_months_sum
            total_deposits_made += months_to_deposit

        interest_on_principal = principal_at_year_start * annual_rate * (months_in_year / 12)
        interest_this_year = interest_on_principal + interest_on_deposits

        current_amount += deposits_this_year + interest_this_year

        breakdown.append(
            YearRow(
                year=year,
                principal=principal_at_year_start + deposits_this_year,
                interest=interest_this_year,
                final_amount=current_amount,
            )
        )

    total_principal = p0 + deposit * total_deposits_made
    summary = Summary(
        final_amount=current_amount,
        total_principal=total_principal,
        total_interest=current_amount - total_principal,
    )

    logger.debug(
        "Computed %d year rows over %d months (annual rate %.6f, %d deposits)",
        len(breakdown),
        total_months,
        annual_rate,
        total_deposits_made,
    )
    return CalculationResult(summary=summary, breakdown=tuple(breakdown))
