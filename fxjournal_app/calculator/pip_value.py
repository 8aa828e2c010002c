"""Dollar value of a one-pip move, independent of any specific trade."""

from ..instruments.classifier import InstrumentKind, classify, is_jpy_pair
from ..instruments.symbols import normalize_symbol
from ..instruments.table import GOLD_CONTRACT_SIZE, SILVER_CONTRACT_SIZE, get_config

STANDARD_PIP_SIZE = 0.0001


def compute_pip_value(symbol: str, lot_size: float) -> float:
    """
    Compute the USD value of one pip at the given lot size.

    Unlike compute_pl, indices and crypto are not special-cased here; they
    use the standard 0.0001 pip on their contract size.

    Args:
        symbol: Instrument symbol
        lot_size: Position size in lots

    Returns:
        Pip value in USD
    """
    normalized = normalize_symbol(symbol)
    config = get_config(normalized)
    kind = classify(normalized)

    if kind is InstrumentKind.GOLD:
        return GOLD_CONTRACT_SIZE * lot_size
    if kind is InstrumentKind.SILVER:
        return SILVER_CONTRACT_SIZE * lot_size
    if is_jpy_pair(normalized):
        return (config.contract_size * lot_size) / 100
    return (config.contract_size * lot_size) * STANDARD_PIP_SIZE


def pips_from_pl(profit_loss: float, pip_value: float) -> float:
    """Convert a P/L amount back into pips; 0 when the pip value is 0."""
    if pip_value == 0:
        return 0.0
    return profit_loss / pip_value
