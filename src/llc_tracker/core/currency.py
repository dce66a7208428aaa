#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Currency handling for the Family LLC Tracker.
All monetary arithmetic uses Decimal to avoid floating-point errors.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Floats coming from JSON are converted through str() before Decimal
- Rounding happens only for display, never for comparisons
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

CENT = Decimal("0.01")

AmountLike = Union[str, int, float, Decimal]


def parse_dollars(dollars_str: str) -> Decimal:
    """
    Parse dollar string to Decimal.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in dollars

    Raises:
        ValueError: If the string is not a number

    Examples:
        parse_dollars("12.34") -> Decimal("12.34")
        parse_dollars("$1,234.56") -> Decimal("1234.56")
        parse_dollars("") -> Decimal("0")
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        return Decimal("0")

    try:
        amount = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid dollar amount: {dollars_str!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid dollar amount: {dollars_str!r}")
    return amount


def to_decimal(value: AmountLike) -> Decimal:
    """
    Convert any supported amount representation to Decimal.

    Args:
        value: Dollar amount as string, int, float or Decimal

    Returns:
        Amount in dollars

    Raises:
        ValueError: If the value cannot be interpreted as an amount
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid dollar amount: {value!r}")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # str() gives the shortest repr, so 2000.1 stays 2000.1
        return Decimal(str(value))
    return parse_dollars(str(value))


def safe_parse_dollars(value: AmountLike | None) -> Decimal:
    """
    Safely convert a currency value to Decimal.

    Handles various input formats and edge cases gracefully.

    Args:
        value: Currency value like '$12.34', '12.34', 12.34 or None

    Returns:
        Decimal amount, 0 for invalid input

    Examples:
        safe_parse_dollars('$45.99') -> Decimal('45.99')
        safe_parse_dollars('n/a') -> Decimal('0')
        safe_parse_dollars(None) -> Decimal('0')
    """
    if value is None:
        return Decimal("0")
    try:
        result = to_decimal(value)
    except (ValueError, TypeError):
        return Decimal("0")
    if not result.is_finite():
        return Decimal("0")
    return result


def format_dollars(amount: Decimal) -> str:
    """
    Format a Decimal amount as a dollar string with thousands separators.

    Args:
        amount: Amount in dollars

    Returns:
        Formatted string like "$1,234.56" or "$-45.99"
    """
    rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    if rounded == 0:
        rounded = abs(rounded)
    if rounded < 0:
        return f"$-{-rounded:,.2f}"
    return f"${rounded:,.2f}"
