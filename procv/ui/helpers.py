"""UI helper functions for Streamlit.

Common formatting utilities. Amounts are rounded to the minor currency
unit here, at display time only.
"""

from __future__ import annotations

from procv.core.financial import convert_currency, round_money
from procv.core.settings import get_settings


def format_euro(value: float | None, decimals: int = 0) -> str:
    """Format a number as Euro currency.

    Args:
        value: Amount to format
        decimals: Number of decimal places

    Returns:
        Formatted string like "€1,234,567"
    """
    if value is None:
        return "—"
    if decimals == 0:
        return f"€{int(round(value)):,}"
    return f"€{round_money(value):,.{decimals}f}"


def format_cve(value_eur: float | None, rate: float | None = None) -> str:
    """Format a Euro amount converted to Cape Verde escudos.

    Args:
        value_eur: Amount in €
        rate: CVE per EUR, defaults to the configured rate

    Returns:
        Formatted string like "12,345 CVE"
    """
    if value_eur is None:
        return "—"
    if rate is None:
        rate = get_settings().eur_to_cve_rate
    return f"{int(round(convert_currency(value_eur, rate))):,} CVE"


def format_pct(value: float | None, decimals: int = 1) -> str:
    """Format a number as percentage."""
    if value is None:
        return "—"
    return f"{value:.{decimals}f}%"


def format_listing_price(price: float, listing_type: str) -> str:
    """Sale prices as-is, rents per month."""
    if listing_type == "rent":
        return f"{format_euro(price)}/month"
    return format_euro(price)
