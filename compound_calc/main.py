"""Command-line interface for the compound interest calculator.

This module uses the ``click`` library to implement a multi-command interface.
Users can print the year-by-year breakdown or just the summary. Results can be
printed to the terminal or exported to JSON/CSV files, or to a PNG image of
the result table.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

import click

from .data_models import PERIOD_UNITS, RATE_UNITS, CalculationResult, YearRow
from .engine import MAX_TOTAL_MONTHS, compute, total_months_for
from .formatter import print_breakdown, print_summary
from .image_export import render_result_png
from .utils import parse_amount, parse_int

MAX_PRINTED_ROWS = 120


def summary_to_dict(result: CalculationResult) -> Dict[str, float]:
    return {
        "final_amount": result.summary.final_amount,
        "total_principal": result.summary.total_principal,
        "total_interest": result.summary.total_interest,
    }


def breakdown_to_dicts(breakdown: Iterable[YearRow]) -> list[Dict[str, Any]]:
    return [
        {
            "year": row.year,
            "principal": row.principal,
            "interest": row.interest,
            "final_amount": row.final_amount,
        }
        for row in breakdown
    ]


def export_to_json(path: Path, result: CalculationResult) -> None:
    """Export summary and breakdown to a JSON file."""
    data = {"summary": summary_to_dict(result), "breakdown": breakdown_to_dicts(result.breakdown)}
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, result: CalculationResult) -> None:
    """Export the breakdown to a CSV file."""
    header = ["Year", "Principal", "Interest", "Final_Amount"]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for row in result.breakdown:
            writer.writerow([row.year, row.principal, row.interest, row.final_amount])


def export_to_png(path: Path, result: CalculationResult) -> None:
    """Export the summary and breakdown table as a PNG image."""
    path.write_bytes(render_result_png(result))


def calculate_from_options(
    principal: str,
    deposit: str,
    period: str,
    period_unit: str,
    rate: str,
    rate_unit: str,
) -> CalculationResult:
    if total_months_for(parse_int(period), period_unit) > MAX_TOTAL_MONTHS:
        raise click.BadParameter(f"Period must be at most {MAX_TOTAL_MONTHS} months", param_hint="--period")
    # amounts accept k/m shorthand; anything unreadable counts as 0
    return compute(
        parse_amount(principal),
        parse_amount(deposit),
        period,
        period_unit.lower(),
        rate,
        rate_unit.lower(),
    )


def calculation_options(func):
    """Attach the shared calculation options to a command."""
    options = [
        click.option("--principal", "-p", "principal", default="10000000", show_default=True, help="Starting lump sum (accepts k/m suffixes)"),
        click.option("--deposit", "-d", "deposit", default="1000000", show_default=True, help="Monthly deposit, added from the second month"),
        click.option("--period", "-n", "period", default="40", show_default=True, help="Investment period"),
        click.option("--period-unit", "period_unit", type=click.Choice(PERIOD_UNITS, case_sensitive=False), default="years", show_default=True, help="Unit of --period"),
        click.option("--rate", "-r", "rate", default="12", show_default=True, help="Interest rate (percent)"),
        click.option("--rate-unit", "rate_unit", type=click.Choice(RATE_UNITS, case_sensitive=False), default="annual", show_default=True, help="Whether --rate is annual or monthly"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
def cli() -> None:
    """A command-line compound interest calculator with monthly deposits."""


@cli.command()
@calculation_options
@click.option("--output", "output", type=str, help="Output file path (.json, .csv or .png)")
def breakdown(
    principal: str,
    deposit: str,
    period: str,
    period_unit: str,
    rate: str,
    rate_unit: str,
    output: Optional[str],
) -> None:
    """Compute and print the year-by-year breakdown."""
    result = calculate_from_options(principal, deposit, period, period_unit, rate, rate_unit)
    if output:
        path = Path(output)
        suffix = path.suffix.lower()
        if suffix == ".json":
            export_to_json(path, result)
        elif suffix == ".csv":
            export_to_csv(path, result)
        elif suffix == ".png":
            export_to_png(path, result)
        else:
            raise click.BadParameter("Unsupported output format; use .json, .csv or .png")
        click.echo(f"Breakdown exported to {path}")
    else:
        print_summary(result)
        rows = result.breakdown
        if len(rows) > MAX_PRINTED_ROWS:
            click.echo(f"Breakdown has {len(rows)} rows; showing first {MAX_PRINTED_ROWS} rows.")
            print_breakdown(rows, max_rows=MAX_PRINTED_ROWS)
        else:
            print_breakdown(rows)


@cli.command()
@calculation_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(
    principal: str,
    deposit: str,
    period: str,
    period_unit: str,
    rate: str,
    rate_unit: str,
    output: Optional[str],
) -> None:
    """Compute and print only the summary figures."""
    result = calculate_from_options(principal, deposit, period, period_unit, rate, rate_unit)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension")
        with path.open("w", encoding="utf-8") as f:
            json.dump({"summary": summary_to_dict(result)}, f, indent=2)
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(result)


if __name__ == "__main__":
    cli()
