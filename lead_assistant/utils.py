"""Shared utilities used across the lead-capture assistant."""

import re
from typing import Union


def normalize_phone(value: str) -> str:
    """Normalize a phone number by stripping everything except digits and a leading +.

    Examples:
        >>> normalize_phone("050 123 4567")
        '0501234567'
        >>> normalize_phone("+971 (50) 123-4567")
        '+971501234567'
    """
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"[^\d]", "", value[1:])
    return re.sub(r"[^\d]", "", value)


def format_price(price: Union[int, float], currency_symbol: str = "$") -> str:
    """Render a listing price with thousands separators and no decimals.

    Examples:
        >>> format_price(1200000)
        '$1,200,000'
        >>> format_price(850000.0, "AED ")
        'AED 850,000'
    """
    return f"{currency_symbol}{price:,.0f}"
