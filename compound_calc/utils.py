"""Utility functions for the compound interest calculator.

This module turns raw user input into numbers. Form fields and command line
options arrive as text; anything that cannot be read as a number becomes 0
instead of raising, so the engine always receives a usable value.
"""

from __future__ import annotations

import math
import re
from typing import Iterable, Optional, Union

RawValue = Union[str, int, float, None]

# Leading decimal literal, optionally signed, with an optional exponent.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def parse_float(value: RawValue) -> float:
    """Parse ``value`` into a float, returning 0 when it is not numeric.

    Numbers pass through unchanged (NaN becomes 0). Strings are stripped,
    thousands separators are removed and the longest leading numeric prefix
    is used, so ``"12.5%"`` reads as 12.5 and ``"abc"`` reads as 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
        return 0.0 if math.isnan(number) else number
    cleaned = str(value).strip().replace(",", "")
    match = _NUMBER_PREFIX.match(cleaned)
    if not match:
        return 0.0
    try:
        return float(match.group(0))
    except (ValueError, OverflowError):
        return 0.0


def parse_int(value: RawValue) -> int:
    """Parse ``value`` into an int, truncating toward zero.

    Strings are read up to the first non-digit, so ``"12.9"`` is 12 and
    ``"1e3"`` is 1. Infinite numbers cannot be represented and read as 0.
    """
    if isinstance(value, str):
        match = _INT_PREFIX.match(value.strip().replace(",", ""))
        return int(match.group(0)) if match else 0
    number = parse_float(value)
    if math.isinf(number):
        return 0
    return int(number)


def parse_amount(value: RawValue) -> float:
    """Parse a money amount with optional ``k``/``m`` suffixes.

    Accepts plain numbers ("500000") and shorthand such as "500k" (500 000)
    or "10m" (10 000 000). Unparseable text yields 0.
    """
    if not isinstance(value, str):
        return parse_float(value)
    text = value.strip().lower().replace(",", "")
    factor = 1.0
    if text.endswith("k"):
        factor = 1_000.0
        text = text[:-1]
    elif text.endswith("m"):
        factor = 1_000_000.0
        text = text[:-1]
    return parse_float(text) * factor


def normalize_choice(value: Optional[str], choices: Iterable[str], default: str) -> str:
    """Return ``value`` lower-cased if it is one of ``choices``, else ``default``."""
    if value is None:
        return default
    candidate = str(value).strip().lower()
    return candidate if candidate in tuple(choices) else default


def normalize_period_unit(value: Optional[str]) -> str:
    """Anything other than ``"years"`` counts as months."""
    return "years" if str(value or "").strip().lower() == "years" else "months"


def normalize_rate_unit(value: Optional[str]) -> str:
    """Anything other than ``"annual"`` counts as a monthly rate."""
    return "annual" if str(value or "").strip().lower() == "annual" else "monthly"
