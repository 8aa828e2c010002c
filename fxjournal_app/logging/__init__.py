"""
Logging configuration and utilities for the trading journal.
"""
from .config import (
    build_processors,
    configure_from_params,
    configure_logging,
    get_journal_logger,
    get_logger,
    log_trade_event,
)

__all__ = [
    "build_processors",
    "configure_from_params",
    "configure_logging",
    "get_logger",
    "get_journal_logger",
    "log_trade_event",
]
