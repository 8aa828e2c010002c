"""Default configuration parameters for the trading journal."""

from dataclasses import dataclass


@dataclass(frozen=True)
class JournalParams:
    """Journal behaviour defaults."""
    default_starting_balance: float = 10000.0   # Used when a new strategy has no balance
    default_sort: str = "date-desc"             # date-desc, date-asc, pl-desc, pl-asc
    default_filter: str = "ALL"                 # ALL, BUY, SELL
    default_date_range: str = "all"             # all, today, week, month, year


@dataclass(frozen=True)
class StorageParams:
    """Journal store parameters."""
    db_path: str = "journal.db"
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class DisplayParams:
    """Presentation parameters."""
    unknown_price_decimals: int = 5
    currency: str = "USD"


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    journal: JournalParams
    storage: StorageParams
    display: DisplayParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        journal=JournalParams(),
        storage=StorageParams(),
        display=DisplayParams(),
        logging=LoggingParams(),
    )


# Accepted values for the trade list controls
SORT_OPTIONS = ("date-desc", "date-asc", "pl-desc", "pl-asc")
FILTER_OPTIONS = ("ALL", "BUY", "SELL")
DATE_RANGE_OPTIONS = ("all", "today", "week", "month", "year")
