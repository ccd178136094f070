"""Output helpers for the compound interest calculator.

This module formats won amounts the way the calculator displays them (whole
won, thousands grouped with commas, optional ``₩`` symbol) and renders the
summary and year-by-year breakdown as plain tabular text.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from .data_models import CalculationResult, YearRow

CURRENCY_SYMBOL = "₩"
HIGHLIGHT_EVERY = 5
BREAKDOWN_HEADERS = ["Year", "Principal (₩)", "Interest (₩)", "Final amount (₩)"]


def round_half_up(value: float) -> int:
    """Round to the nearest whole number, halves rounding toward +infinity."""
    return int(math.floor(value + 0.5))


def format_currency(value: float, with_symbol: bool = False) -> str:
    """Return ``value`` as whole won with grouped thousands, e.g. ``₩1,234``."""
    formatted = f"{round_half_up(value):,}"
    return f"{CURRENCY_SYMBOL}{formatted}" if with_symbol else formatted


def format_interest(value: float) -> str:
    """Breakdown cells show the yearly interest as a gain."""
    return f"+{format_currency(value)}"


def is_highlighted(row: YearRow) -> bool:
    return row.year % HIGHLIGHT_EVERY == 0


def summary_lines(result: CalculationResult) -> Sequence[tuple]:
    """Label/value pairs for the three summary figures, in display order."""
    summary = result.summary
    return (
        ("Total interest", format_currency(summary.total_interest, True)),
        ("Total invested", format_currency(summary.total_principal, True)),
        ("Final amount", format_currency(summary.final_amount, True)),
    )


def breakdown_cells(row: YearRow) -> list:
    return [
        str(row.year),
        format_currency(row.principal),
        format_interest(row.interest),
        format_currency(row.final_amount),
    ]


def print_summary(result: CalculationResult) -> None:
    """Print the summary figures in a human-readable format."""
    print("Summary")
    print("-" * 72)
    for label, value in summary_lines(result):
        print(f"{label:15s}: {value}")
    print("-" * 72)


def print_breakdown(breakdown: Iterable[YearRow], max_rows: Optional[int] = None) -> None:
    """Print the year-by-year breakdown as a simple table.

    Parameters
    ----------
    breakdown: Iterable[YearRow]
        The rows to print.
    max_rows: Optional[int]
        When given, only the first ``max_rows`` rows are printed.

    Every fifth year is marked with ``*``.
    """
    print("\t".join(BREAKDOWN_HEADERS))
    for index, row in enumerate(breakdown):
        if max_rows is not None and index >= max_rows:
            break
        cells = breakdown_cells(row)
        if is_highlighted(row):
            cells[0] = f"{cells[0]}*"
        print("\t".join(cells))
