"""
Instrument reference data.

Symbol normalization, the static contract table, classification and the
selectable pair catalog.
"""

from .catalog import FOREX_PAIRS, PairOption, pairs_by_category, search_pairs
from .classifier import InstrumentKind, PairInfo, classify, describe, is_jpy_pair
from .symbols import normalize_symbol
from .table import (
    DEFAULT_INSTRUMENT_CONFIG,
    INSTRUMENT_CONFIGS,
    InstrumentConfig,
    get_config,
    lookup_config,
)

__all__ = [
    "FOREX_PAIRS",
    "PairOption",
    "pairs_by_category",
    "search_pairs",
    "InstrumentKind",
    "PairInfo",
    "classify",
    "describe",
    "is_jpy_pair",
    "normalize_symbol",
    "DEFAULT_INSTRUMENT_CONFIG",
    "INSTRUMENT_CONFIGS",
    "InstrumentConfig",
    "get_config",
    "lookup_config",
]
