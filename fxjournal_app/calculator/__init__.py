"""
Profit/loss and pip calculator.

Pure functions over parsed numeric inputs. Nothing here holds state,
performs I/O or raises for bad numbers.
"""

from .formatting import format_currency, format_price, format_signed_pl, to_fixed
from .pip_value import compute_pip_value, pips_from_pl
from .pnl import compute_pl, is_open_exit, price_difference
from ..instruments.classifier import describe

__all__ = [
    "compute_pl",
    "compute_pip_value",
    "describe",
    "format_price",
    "format_currency",
    "format_signed_pl",
    "to_fixed",
    "pips_from_pl",
    "is_open_exit",
    "price_difference",
]
