#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

Stored amounts use integer cents to avoid floating-point errors.

Currency Systems:
- Internal storage uses cents: 100 cents = $1.00
- Display uses dollar strings: "$12.34"
- Search uses digit-only renderings: 12.33 -> "1233", 50.00 -> "50"
"""

import math
from decimal import Decimal
from typing import Union

# Fractional digits kept when rendering an amount for search
SEARCH_FRACTION_DIGITS = 6


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Args:
        cents: Amount in cents

    Returns:
        Formatted dollar string

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse dollar string to cents using integer arithmetic only.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in cents

    Raises:
        ValueError: If the string is not a dollar amount

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$12.34") -> 1234
        parse_dollars_to_cents("-$1,234.56") -> -123456
        parse_dollars_to_cents("12") -> 1200
        parse_dollars_to_cents("12.5") -> 1250
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        return 0

    is_negative = clean.startswith("-")
    if is_negative:
        clean = clean[1:]

    if "." in clean:
        whole, _, fraction = clean.partition(".")
        dollars = int(whole) if whole else 0
        # Pad to 2 digits, truncate beyond 2
        cents = int(fraction.ljust(2, "0")[:2])
        total = dollars * 100 + cents
    else:
        total = int(clean) * 100

    return -total if is_negative else total


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    if cents < 0:
        return f"-${cents_to_dollars_str(-cents)}"
    return f"${cents_to_dollars_str(cents)}"


def amount_digits(value: Union[int, float, Decimal]) -> str:
    """
    Render an amount as the digits a shopper would type when searching for it.

    The absolute value is formatted without grouping separators and with at
    most six fractional digits, insignificant trailing zeros are dropped, and
    everything that is not a digit is stripped.

    Args:
        value: Amount in dollars

    Returns:
        Digit-only string, empty for non-finite values

    Examples:
        amount_digits(12.33) -> "1233"
        amount_digits(-50.0) -> "50"
        amount_digits(0.5) -> "05"
    """
    if isinstance(value, float) and not math.isfinite(value):
        return ""
    if isinstance(value, Decimal) and not value.is_finite():
        return ""

    rendered = f"{abs(value):.{SEARCH_FRACTION_DIGITS}f}"
    if "." in rendered:
        rendered = rendered.rstrip("0").rstrip(".")

    return "".join(ch for ch in rendered if ch.isdigit())
