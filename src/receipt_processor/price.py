"""Conversion between decimal price text and integer minor units (pence / cents)"""
from typing import Optional


# Longest digit string int() converts on current interpreters
MAX_DIGITS = 4300


def parse_digits(text: str) -> Optional[int]:
    """Parse a non-empty run of ASCII digits, None for anything else."""
    if not (text.isascii() and text.isdigit()) or len(text) > MAX_DIGITS:
        return None
    try:
        return int(text)
    except ValueError:
        return None


def parse_price(text: str) -> Optional[int]:
    """
    Parse a price written in units.cents format and return the total in minor units.

    The integer part may be empty (".69" is 69). When a "." is present it must be
    followed by one or two digits, a single digit meaning tenths (".3" is 30).

    Args:
        text: The price token, e.g. "1.50", ".3" or "420"

    Returns:
        The amount in minor units, or None if the text is not a valid price.
    """
    parts = text.split(".")
    if len(parts) > 2:
        return None

    units_str = parts[0]
    if not units_str:
        units = 0
    else:
        units = parse_digits(units_str)
        if units is None:
            return None

    if len(parts) == 1:
        # There was no "." character
        if not units_str:
            return None
        cents = 0
    else:
        cents_str = parts[1]
        cents = parse_digits(cents_str) if len(cents_str) <= 2 else None
        if cents is None:
            return None
        if len(cents_str) == 1:
            cents *= 10

    return units * 100 + cents


def format_price(amount: int) -> str:
    """Format minor units for display, e.g. 150 -> "1.50"."""
    sign = "-" if amount < 0 else ""
    units, cents = divmod(abs(amount), 100)
    return f"{sign}{units}.{cents:02d}"
