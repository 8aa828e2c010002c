"""
Profit/loss calculation for a single trade.

The formula depends on the instrument kind: metals multiply by their
contract size, yen pairs go through a price-dependent pip value, indices
and crypto CFDs are priced per point, and everything else is a standard
100,000-unit forex lot.
"""

import math
from typing import Optional

from ..instruments.classifier import InstrumentKind, classify, is_jpy_pair
from ..instruments.symbols import normalize_symbol
from ..instruments.table import (
    GOLD_CONTRACT_SIZE,
    SILVER_CONTRACT_SIZE,
    STANDARD_CONTRACT_SIZE,
    get_config,
)

JPY_PIP_SIZE = 0.01


def is_open_exit(exit_price: Optional[float]) -> bool:
    """
    True when the exit price marks a trade that has not been closed.

    None, zero and NaN all count as "no exit yet".
    """
    return not exit_price or math.isnan(exit_price)


def price_difference(entry_price: float, exit_price: float, direction: str) -> float:
    """
    Signed price movement in the trade's favour.

    Any direction other than "BUY" is treated as a sell.
    """
    if direction == "BUY":
        return exit_price - entry_price
    return entry_price - exit_price


def _jpy_pip_value(entry_price: float, contract_size: float, lot_size: float) -> float:
    # A zero entry yields a signed infinity rather than an exception
    if entry_price == 0:
        per_unit = math.copysign(math.inf, entry_price)
    else:
        per_unit = JPY_PIP_SIZE / entry_price
    return per_unit * contract_size * lot_size


def compute_pl(
    symbol: str,
    lot_size: float,
    entry_price: float,
    exit_price: Optional[float],
    direction: str,
) -> float:
    """
    Compute the USD profit or loss of a trade.

    Args:
        symbol: Instrument symbol, any case or separators
        lot_size: Position size in lots
        entry_price: Open price
        exit_price: Close price; None, 0 or NaN means the trade is still open
        direction: "BUY" or "SELL" (anything else is treated as SELL)

    Returns:
        Signed P/L, positive for profit. 0.0 for open trades. Malformed
        numeric inputs propagate as NaN.
    """
    if is_open_exit(exit_price):
        return 0.0

    normalized = normalize_symbol(symbol)
    contract_size = get_config(normalized).contract_size
    price_diff = price_difference(entry_price, exit_price, direction)
    kind = classify(normalized)

    if kind is InstrumentKind.GOLD:
        return price_diff * lot_size * GOLD_CONTRACT_SIZE
    if kind is InstrumentKind.SILVER:
        return price_diff * lot_size * SILVER_CONTRACT_SIZE
    if is_jpy_pair(normalized):
        pip_value = _jpy_pip_value(entry_price, contract_size, lot_size)
        return price_diff * pip_value * 100
    if kind in (InstrumentKind.INDEX, InstrumentKind.CRYPTO):
        return price_diff * lot_size
    return price_diff * lot_size * STANDARD_CONTRACT_SIZE
