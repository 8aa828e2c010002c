"""
Error classification system for the trading journal.

Structured exception hierarchy separating recoverable input problems,
recoverable journal lookups, and unrecoverable storage failures. The
calculator core raises none of these.
"""

from .data_quality import (
    DataQualityError,
    MissingDataError,
    MalformedDataError,
)
from .journal import (
    JournalError,
    StrategyNotFoundError,
    TradeNotFoundError,
    NoActiveStrategyError,
)
from .system_failures import (
    SystemFailureError,
    PersistenceError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingDataError",
    "MalformedDataError",
    # Journal Errors
    "JournalError",
    "StrategyNotFoundError",
    "TradeNotFoundError",
    "NoActiveStrategyError",
    # System Failures
    "SystemFailureError",
    "PersistenceError",
]
