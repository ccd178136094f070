from __future__ import annotations

import dataclasses
from math import isclose

import pytest

from compound_calc.data_models import CalculationInput
from compound_calc.engine import (
    annual_rate_for,
    compute,
    compute_result,
    total_months_for,
    total_years_for,
)


def test_one_year_scenario_matches_hand_calculation():
    """
    10M lump sum, 1M deposited in months 2-12, 12% annual:
    1.2M interest on the lump sum plus 1M * 1% * 66 on the deposits.
    """
    result = compute(10_000_000, 1_000_000, 1, "years", 12, "annual")

    assert len(result.breakdown) == 1
    row = result.breakdown[0]
    assert row.year == 1
    assert isclose(row.principal, 21_000_000)
    assert isclose(row.interest, 1_860_000)
    assert isclose(row.final_amount, 22_860_000)

    assert isclose(result.summary.total_principal, 21_000_000)
    assert isclose(result.summary.total_interest, 1_860_000)
    assert isclose(result.summary.final_amount, 22_860_000)


def test_twenty_four_months_gives_two_full_years():
    result = compute(10_000_000, 1_000_000, 24, "months", 12, "annual")

    assert [row.year for row in result.breakdown] == [1, 2]
    second = result.breakdown[1]
    # full 12 deposits and 12 months of interest on the carried balance
    assert isclose(second.principal, 22_860_000 + 12_000_000)
    assert isclose(second.interest, 22_860_000 * 0.12 + 780_000)
    assert isclose(second.final_amount, 38_383_200)
    assert isclose(result.summary.total_principal, 33_000_000)


def test_partial_final_year_is_prorated():
    result = compute(10_000_000, 1_000_000, 18, "months", 12, "annual")

    assert len(result.breakdown) == 2
    last = result.breakdown[-1]
    assert isclose(last.interest, 22_860_000 * 0.12 * 0.5 + 210_000)
    assert isclose(last.final_amount, 30_441_600)
    assert isclose(result.summary.total_principal, 10_000_000 + 17 * 1_000_000)


def test_single_month_has_no_deposit():
    result = compute(10_000_000, 1_000_000, 1, "months", 12, "annual")

    assert len(result.breakdown) == 1
    assert isclose(result.breakdown[0].principal, 10_000_000)
    assert isclose(result.breakdown[0].interest, 100_000)
    assert isclose(result.summary.total_principal, 10_000_000)


@pytest.mark.parametrize("period,unit", [(0, "years"), (0, "months"), (-3, "years"), (None, "months")])
def test_zero_period_returns_initial_principal(period, unit):
    result = compute(5_000, 100, period, unit, 7, "annual")

    assert result.breakdown == ()
    assert result.summary.final_amount == 5_000
    assert result.summary.total_principal == 5_000
    assert result.summary.total_interest == 0


def test_zero_deposit_reduces_to_annual_compounding():
    result = compute(1_000_000, 0, 10, "years", 5, "annual")

    expected = 1_000_000 * (1.05 ** 10)
    assert isclose(result.summary.final_amount, expected, rel_tol=1e-9)
    assert isclose(result.summary.total_principal, 1_000_000)


@pytest.mark.parametrize(
    "args",
    [
        (10_000_000, 1_000_000, 40, "years", 12, "annual"),
        (0, 250_000, 37, "months", 1.5, "monthly"),
        (123_456.78, 9_999.99, 7, "years", 3.3, "annual"),
        (1_000, 0, 30, "months", 0, "annual"),
    ],
)
def test_sum_invariant_and_monotonic_rows(args):
    result = compute(*args)
    summary = result.summary

    assert isclose(
        summary.total_principal + summary.total_interest,
        summary.final_amount,
        rel_tol=1e-12,
        abs_tol=1e-6,
    )
    amounts = [row.final_amount for row in result.breakdown]
    assert amounts == sorted(amounts)
    if result.breakdown:
        assert summary.final_amount == result.breakdown[-1].final_amount


def test_first_year_deposits_capped_at_eleven():
    result = compute(0, 100, 1, "years", 0, "annual")

    assert isclose(result.breakdown[0].principal, 1_100)
    assert isclose(result.summary.total_principal, 1_100)


def test_deposit_months_never_exceed_total_months_minus_one():
    for months in range(1, 40):
        result = compute(0, 1, months, "months", 0, "annual")
        assert result.summary.total_principal == months - 1


def test_rate_unit_equivalence():
    assert isclose(annual_rate_for(12, "monthly"), 1.44)
    assert isclose(annual_rate_for(144, "annual"), 1.44)

    monthly = compute(1_000, 10, 3, "years", 12, "monthly")
    annual = compute(1_000, 10, 3, "years", 144, "annual")
    assert isclose(monthly.summary.final_amount, annual.summary.final_amount)


def test_invalid_numeric_input_is_treated_as_zero():
    result = compute("abc", None, "2", "years", "", "annual")

    assert len(result.breakdown) == 2
    assert result.summary.final_amount == 0
    assert result.summary.total_interest == 0


def test_string_inputs_are_parsed_leniently():
    from_text = compute("10,000,000", "1000000", "1.9", "years", "12%", "annual")
    from_numbers = compute(10_000_000, 1_000_000, 1, "years", 12, "annual")

    assert from_text == from_numbers


def test_unit_selectors_never_fail():
    as_months = compute(1_000, 10, 24, "months", 12, "monthly")

    # anything other than years counts as months, anything other than annual as monthly
    assert compute(1_000, 10, 24, "weeks", 12, "daily") == as_months
    assert compute(1_000, 10, 24, None, 12, None) == as_months


def test_unit_selectors_ignore_case_and_whitespace():
    expected = compute(1_000, 10, 2, "years", 12, "annual")

    assert compute(1_000, 10, 2, "Years", 12, " ANNUAL ") == expected


def test_total_months_for_units():
    assert total_months_for(3, "years") == 36
    assert total_months_for(3, "months") == 3
    assert total_months_for(3, "fortnights") == 3


def test_result_is_immutable():
    result = compute_result(CalculationInput(1_000, 10, 2, "years", 5, "annual"))

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.summary.final_amount = 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.breakdown[0].interest = 0
    assert isinstance(result.breakdown, tuple)


def test_total_years_rounds_partial_years_up():
    assert total_years_for(25) == 3
    assert total_years_for(24) == 2
    assert total_years_for(0) == 0


def test_calculation_input_normalizes_units():
    config = CalculationInput(0, 0, 25, "Years", 1, "weekly")

    assert config.period_unit == "years"
    assert config.rate_unit == "monthly"
    assert isclose(annual_rate_for(config.rate, config.rate_unit), 0.12)
