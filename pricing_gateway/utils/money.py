"""Fixed-point money helpers"""

from decimal import Decimal, ROUND_HALF_UP

from pricing_gateway.config import settings

ONE = Decimal("1")
TENTH = Decimal("0.1")


def round_cents(value: Decimal) -> int:
    """Round a fractional cent amount to whole cents, half-up"""
    return int(value.quantize(ONE, rounding=ROUND_HALF_UP))


def round_ratio(value: Decimal) -> Decimal:
    """Round a percentage to one decimal place, half-up"""
    return value.quantize(TENTH, rounding=ROUND_HALF_UP)


def format_currency(cents: int, symbol: str | None = None) -> str:
    """
    Format cents for display with thousands separators.

    Example:
        104615 → "$1,046.15"
        -2500  → "-$25.00"
    """
    symbol = settings.currency_symbol if symbol is None else symbol
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), 100)
    return f"{sign}{symbol}{dollars:,}.{remainder:02d}"
