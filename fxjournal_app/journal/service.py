"""
Journal service coordinator.

Owns the strategies map and the current strategy selection, applies trade
mutations through the form parser, and saves every change to the store.
"""

import uuid
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from ..calculator.formatting import format_price
from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import Strategy, Trade
from ..data.parsers import parse_number, parse_trade_form
from ..errors import (
    MissingDataError,
    NoActiveStrategyError,
    StrategyNotFoundError,
    TradeNotFoundError,
)
from ..logging.config import get_journal_logger, log_trade_event
from ..persistence.journal_store import JournalStore
from ..utils.time import date_range_window, utc_now_iso
from .calendar import MonthCalendar, build_month
from .statistics import JournalStats, account_balance, compute_stats

logger = get_journal_logger(__name__)

_SORT_KEYS = {
    "date-desc": (lambda trade: trade.trade_date, True),
    "date-asc": (lambda trade: trade.trade_date, False),
    "pl-desc": (lambda trade: trade.profit_loss, True),
    "pl-asc": (lambda trade: trade.profit_loss, False),
}


def filter_trades(
    trades: list[Trade],
    filter_type: str = "ALL",
    search: str = "",
    date_range: str = "all",
    today: Optional[date] = None,
) -> list[Trade]:
    """
    Apply the trade list filters.

    Args:
        trades: Trades to filter
        filter_type: "ALL", "BUY" or "SELL"
        search: Case-insensitive text matched against symbol and notes
        date_range: "all", "today", "week", "month" or "year"
        today: Reference day for the date range

    Returns:
        Matching trades in their original order
    """
    needle = search.lower()
    window = date_range_window(date_range, today)

    result = []
    for trade in trades:
        if filter_type != "ALL" and trade.direction.value != filter_type:
            continue
        if needle not in trade.symbol.lower() and needle not in trade.notes.lower():
            continue
        if window is not None and not window[0] <= trade.trade_date <= window[1]:
            continue
        result.append(trade)
    return result


def sort_trades(trades: list[Trade], sort_by: str = "date-desc") -> list[Trade]:
    """Sort trades; unknown sort keys fall back to newest first."""
    key, reverse = _SORT_KEYS.get(sort_by, _SORT_KEYS["date-desc"])
    return sorted(trades, key=key, reverse=reverse)


class TradeJournal:
    """
    Trading journal for one local user.

    Manages strategies and the trades of the currently selected strategy:
    Form fields → Trade (priced) → Strategy → Store
    """

    def __init__(self, store: JournalStore, config: Optional[DefaultConfig] = None) -> None:
        """Load strategies from the store and restore the last selection."""
        self.config = config or get_default_config()
        self.store = store
        self.logger = logger

        self.strategies: dict[str, Strategy] = store.load_strategies(
            default_balance=self.config.journal.default_starting_balance
        )

        last_strategy = store.get_current_strategy()
        if last_strategy in self.strategies:
            self.current_strategy_id: Optional[str] = last_strategy
        else:
            self.current_strategy_id = next(iter(self.strategies), None)

        self.logger.info(
            "Journal loaded",
            strategies=len(self.strategies),
            current_strategy=self.current_strategy_id,
        )

    @classmethod
    def open(cls, config: Optional[DefaultConfig] = None) -> "TradeJournal":
        """Open the journal at the configured database path."""
        config = config or get_default_config()
        store = JournalStore(config.storage.db_path, timeout=config.storage.timeout_seconds)
        return cls(store, config)

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------

    @property
    def current_strategy(self) -> Optional[Strategy]:
        """Selected strategy, None when no strategy exists."""
        if self.current_strategy_id is None:
            return None
        return self.strategies.get(self.current_strategy_id)

    def list_strategies(self) -> list[Strategy]:
        """All strategies in creation order."""
        return list(self.strategies.values())

    def create_strategy(self, name: str, starting_balance: Any = None) -> Strategy:
        """
        Create a strategy and make it current.

        Args:
            name: Display name; surrounding whitespace is stripped
            starting_balance: Balance as typed; blank, zero or unparsable
                values use the configured default

        Raises:
            MissingDataError: If the name is blank
        """
        name = (name or "").strip()
        if not name:
            raise MissingDataError("Strategy name is required", field_name="name")

        balance = parse_number(starting_balance) or self.config.journal.default_starting_balance

        strategy = Strategy(
            id=uuid.uuid4().hex,
            name=name,
            starting_balance=balance,
            created_at=utc_now_iso(),
        )
        self.strategies[strategy.id] = strategy
        self.current_strategy_id = strategy.id
        self._persist()

        self.logger.info("Strategy created", strategy_id=strategy.id, name=name, balance=balance)
        return strategy

    def switch_strategy(self, strategy_id: str) -> Strategy:
        """Select another strategy."""
        strategy = self._get_strategy(strategy_id)
        self.current_strategy_id = strategy_id
        self.store.set_current_strategy(strategy_id)
        self.logger.info("Strategy switched", strategy_id=strategy_id)
        return strategy

    def delete_strategy(self, strategy_id: str) -> None:
        """
        Delete a strategy and all its trades.

        When the current strategy is deleted the first remaining one becomes
        current, or none if nothing is left.
        """
        self._get_strategy(strategy_id)
        del self.strategies[strategy_id]

        if self.current_strategy_id == strategy_id:
            self.current_strategy_id = next(iter(self.strategies), None)

        self._persist()
        self.logger.info(
            "Strategy deleted",
            strategy_id=strategy_id,
            current_strategy=self.current_strategy_id,
        )

    # ------------------------------------------------------------------
    # Trades
    # ------------------------------------------------------------------

    def add_trade(self, form: Mapping[str, Any], today: Optional[date] = None) -> Trade:
        """Parse the form into a trade and prepend it to the current strategy."""
        strategy = self._require_current()
        trade = parse_trade_form(form, today=today)

        self._replace_trades(strategy, [trade, *strategy.trades])
        log_trade_event(
            self.logger, "added", strategy.id, trade.id,
            {"symbol": trade.symbol, "profit_loss": trade.profit_loss},
        )
        return trade

    def update_trade(self, trade_id: str, form: Mapping[str, Any]) -> Trade:
        """Re-parse an edited trade, keeping its id, creation time and position."""
        strategy = self._require_current()
        existing = self.get_trade(trade_id)

        trade = parse_trade_form(form, trade_id=existing.id, created_at=existing.created_at)

        self._replace_trades(
            strategy,
            [trade if item.id == trade_id else item for item in strategy.trades],
        )
        log_trade_event(
            self.logger, "updated", strategy.id, trade.id,
            {"symbol": trade.symbol, "profit_loss": trade.profit_loss},
        )
        return trade

    def delete_trade(self, trade_id: str) -> Trade:
        """Remove a trade from the current strategy and return it."""
        strategy = self._require_current()
        trade = self.get_trade(trade_id)

        self._replace_trades(strategy, [item for item in strategy.trades if item.id != trade_id])
        log_trade_event(self.logger, "deleted", strategy.id, trade_id)
        return trade

    def get_trade(self, trade_id: str) -> Trade:
        """Look up a trade in the current strategy."""
        strategy = self._require_current()
        trade = strategy.find_trade(trade_id)
        if trade is None:
            raise TradeNotFoundError(
                f"Trade {trade_id} not found", trade_id=trade_id, strategy_id=strategy.id
            )
        return trade

    def list_trades(
        self,
        filter_type: Optional[str] = None,
        search: str = "",
        sort_by: Optional[str] = None,
        date_range: Optional[str] = None,
        today: Optional[date] = None,
    ) -> list[Trade]:
        """
        Trades of the current strategy for the trade list.

        Unset controls take the configured defaults. Returns an empty list
        when no strategy exists.
        """
        strategy = self.current_strategy
        if strategy is None:
            return []

        defaults = self.config.journal
        filtered = filter_trades(
            list(strategy.trades),
            filter_type=filter_type or defaults.default_filter,
            search=search,
            date_range=date_range or defaults.default_date_range,
            today=today,
        )
        return sort_trades(filtered, sort_by or defaults.default_sort)

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def stats(self, reference_month: Optional[date] = None) -> JournalStats:
        """Statistics of the current strategy."""
        strategy = self.current_strategy
        if strategy is None:
            return JournalStats()
        return compute_stats(strategy.trades, reference_month)

    def balance(self) -> float:
        """Current account balance of the selected strategy."""
        strategy = self.current_strategy
        if strategy is None:
            return self.config.journal.default_starting_balance
        return account_balance(strategy.starting_balance, self.stats())

    def month_calendar(self, year: int, month: int, today: Optional[date] = None) -> MonthCalendar:
        """Calendar heat-map of the current strategy for one month."""
        strategy = self.current_strategy
        trades = strategy.trades if strategy is not None else ()
        return build_month(trades, year, month, today=today)

    def display_price(self, symbol: str, price: float) -> str:
        """Price at the symbol's precision, or the configured default for unknown symbols."""
        return format_price(symbol, price, default_decimals=self.config.display.unknown_price_decimals)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _get_strategy(self, strategy_id: str) -> Strategy:
        strategy = self.strategies.get(strategy_id)
        if strategy is None:
            raise StrategyNotFoundError(
                f"Strategy {strategy_id} not found", strategy_id=strategy_id
            )
        return strategy

    def _require_current(self) -> Strategy:
        strategy = self.current_strategy
        if strategy is None:
            raise NoActiveStrategyError("Create or select a strategy first")
        return strategy

    def _replace_trades(self, strategy: Strategy, trades: list[Trade]) -> None:
        self.strategies[strategy.id] = strategy.with_trades(trades)
        self._persist()

    def _persist(self) -> None:
        self.store.save_strategies(self.strategies)
        if self.current_strategy_id is not None:
            self.store.set_current_strategy(self.current_strategy_id)
