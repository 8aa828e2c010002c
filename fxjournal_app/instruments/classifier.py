"""
Instrument classification and descriptive pair info.

One classifier drives both the P/L formula selection and the pair
description shown next to the trade form.
"""

from dataclasses import dataclass
from enum import Enum

from .symbols import normalize_symbol
from .table import DEFAULT_INSTRUMENT_CONFIG, INDEX_SYMBOLS, lookup_config


class InstrumentKind(Enum):
    """Top-level instrument category; the value is the display label."""
    GOLD = "Gold"
    SILVER = "Silver"
    INDEX = "Index"
    CRYPTO = "Crypto"
    FOREX_PAIR = "Forex Pair"


@dataclass(frozen=True)
class PairInfo:
    """Description of a symbol for display alongside the trade form."""
    name: str
    type: str
    contract_size: float
    pip_position: int


def classify(normalized_symbol: str) -> InstrumentKind:
    """
    Classify a normalized symbol. First matching rule wins.

    Args:
        normalized_symbol: Output of normalize_symbol

    Returns:
        Instrument kind; anything unmatched is a forex pair
    """
    if normalized_symbol.startswith("XAU"):
        return InstrumentKind.GOLD
    if normalized_symbol.startswith("XAG"):
        return InstrumentKind.SILVER
    if normalized_symbol in INDEX_SYMBOLS:
        return InstrumentKind.INDEX
    if "BTC" in normalized_symbol or "ETH" in normalized_symbol:
        return InstrumentKind.CRYPTO
    return InstrumentKind.FOREX_PAIR


def is_jpy_pair(normalized_symbol: str) -> bool:
    """True for yen-quoted symbols, which price pips at 0.01."""
    return "JPY" in normalized_symbol


def describe(symbol: str) -> PairInfo:
    """
    Describe a symbol for the UI.

    Unlisted symbols are reported under the name they were given, as a
    standard forex pair with default sizing.

    Args:
        symbol: Raw symbol

    Returns:
        PairInfo with name, type label, contract size and pip position
    """
    normalized = normalize_symbol(symbol)
    config = lookup_config(normalized)

    if config is None:
        return PairInfo(
            name=symbol,
            type=InstrumentKind.FOREX_PAIR.value,
            contract_size=DEFAULT_INSTRUMENT_CONFIG.contract_size,
            pip_position=DEFAULT_INSTRUMENT_CONFIG.pip_position,
        )

    return PairInfo(
        name=normalized,
        type=classify(normalized).value,
        contract_size=config.contract_size,
        pip_position=config.pip_position,
    )
