"""
Price and currency formatting for display.

Rounding follows JavaScript's Number.prototype.toFixed: the exact binary
value of the float is rounded half away from zero.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

from ..instruments.symbols import normalize_symbol
from ..instruments.table import lookup_config

DEFAULT_PRICE_DECIMALS = 5

# Wide enough for any finite double at the decimals used here
_FIXED_CONTEXT = Context(prec=400)


def to_fixed(value: float, decimals: int) -> str:
    """
    Render a float with a fixed number of decimals.

    Args:
        value: Number to render
        decimals: Digits after the decimal point

    Returns:
        Fixed-point string; "NaN", "Infinity" or "-Infinity" for non-finite input
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        # toFixed drops the sign of negative zero
        value = 0.0

    quantum = Decimal(1).scaleb(-decimals)
    return f"{Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FIXED_CONTEXT):f}"


def format_price(symbol: str, price: float, default_decimals: int = DEFAULT_PRICE_DECIMALS) -> str:
    """
    Format a price to the instrument's pip precision.

    Args:
        symbol: Instrument symbol
        price: Price to format
        default_decimals: Decimals used for symbols missing from the table

    Returns:
        Formatted price string
    """
    config = lookup_config(normalize_symbol(symbol))

    if config is None:
        return to_fixed(price, default_decimals)

    return to_fixed(price, config.pip_position)


def format_currency(value: float) -> str:
    """Format a USD amount as "$1,234.56" or "-$1,234.56"."""
    if not math.isfinite(value):
        return f"${to_fixed(value, 2)}"

    rounded = Decimal(to_fixed(abs(value), 2))
    sign = "-" if value < 0 and rounded != 0 else ""
    return f"{sign}${rounded:,.2f}"


def format_signed_pl(value: float) -> str:
    """Trade-card P/L text: "+$12.50" for wins (including zero), "-$3.00" for losses."""
    magnitude = to_fixed(abs(value), 2)
    if value >= 0:
        return f"+${magnitude}"
    return f"-${magnitude}"
