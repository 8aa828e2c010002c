"""
Static instrument configuration table.

Maps normalized symbols to their pip convention and contract size. The table
is built once at import time and exposed read-only.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

STANDARD_CONTRACT_SIZE = 100000.0
GOLD_CONTRACT_SIZE = 100.0
SILVER_CONTRACT_SIZE = 5000.0

INDEX_SYMBOLS = frozenset({"US30", "NAS100", "SPX500", "GER40"})


@dataclass(frozen=True)
class InstrumentConfig:
    """Pip convention and lot size for one instrument."""
    pip_position: int       # Decimal places defining one pip
    contract_size: float    # Units per standard lot


DEFAULT_INSTRUMENT_CONFIG = InstrumentConfig(pip_position=4, contract_size=STANDARD_CONTRACT_SIZE)

_FOREX = InstrumentConfig(pip_position=4, contract_size=STANDARD_CONTRACT_SIZE)
_FOREX_JPY = InstrumentConfig(pip_position=2, contract_size=STANDARD_CONTRACT_SIZE)

INSTRUMENT_CONFIGS = MappingProxyType({
    # Major pairs
    "EURUSD": _FOREX,
    "GBPUSD": _FOREX,
    "USDJPY": _FOREX_JPY,
    "USDCHF": _FOREX,
    "AUDUSD": _FOREX,
    "NZDUSD": _FOREX,
    "USDCAD": _FOREX,

    # Cross pairs
    "EURGBP": _FOREX,
    "EURJPY": _FOREX_JPY,
    "GBPJPY": _FOREX_JPY,
    "EURCHF": _FOREX,
    "AUDJPY": _FOREX_JPY,
    "CADJPY": _FOREX_JPY,

    # Metals
    "XAUUSD": InstrumentConfig(pip_position=2, contract_size=GOLD_CONTRACT_SIZE),
    "XAGUSD": InstrumentConfig(pip_position=3, contract_size=SILVER_CONTRACT_SIZE),

    # Indices
    "US30": InstrumentConfig(pip_position=0, contract_size=1.0),
    "NAS100": InstrumentConfig(pip_position=1, contract_size=1.0),
    "SPX500": InstrumentConfig(pip_position=1, contract_size=1.0),
    "GER40": InstrumentConfig(pip_position=1, contract_size=1.0),

    # Crypto CFDs
    "BTCUSD": InstrumentConfig(pip_position=2, contract_size=1.0),
    "ETHUSD": InstrumentConfig(pip_position=2, contract_size=1.0),
})


def lookup_config(normalized_symbol: str) -> Optional[InstrumentConfig]:
    """Return the configured entry for a normalized symbol, None if unlisted."""
    return INSTRUMENT_CONFIGS.get(normalized_symbol)


def get_config(normalized_symbol: str) -> InstrumentConfig:
    """Return the configured entry, falling back to standard forex."""
    return INSTRUMENT_CONFIGS.get(normalized_symbol, DEFAULT_INSTRUMENT_CONFIG)
