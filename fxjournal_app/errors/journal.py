"""
Journal operation errors.

Raised by the journal service when an operation refers to a strategy or
trade that does not exist. All of them are recoverable.
"""

from typing import Any, Optional


class JournalError(Exception):
    """Base class for failed journal operations."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class StrategyNotFoundError(JournalError):
    """Referenced strategy id is unknown."""

    def __init__(self, message: str, strategy_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.strategy_id = strategy_id


class TradeNotFoundError(JournalError):
    """Referenced trade id is not in the current strategy."""

    def __init__(self, message: str, trade_id: Optional[str] = None,
                 strategy_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.trade_id = trade_id
        self.strategy_id = strategy_id


class NoActiveStrategyError(JournalError):
    """Trade operation attempted before any strategy was created or selected."""
