"""Tests for the journal service"""

import pytest
from datetime import date
from unittest.mock import Mock

from fxjournal_app.config.defaults import DefaultConfig, DisplayParams, JournalParams, get_default_config
from fxjournal_app.errors import (
    MissingDataError,
    NoActiveStrategyError,
    StrategyNotFoundError,
    TradeNotFoundError,
)
from fxjournal_app.journal.service import TradeJournal, filter_trades, sort_trades
from fxjournal_app.journal.statistics import JournalStats


class TestStrategies:
    """Strategy management"""

    def test_empty_journal(self, journal):
        assert journal.current_strategy is None
        assert journal.list_strategies() == []
        assert journal.list_trades() == []
        assert journal.stats() == JournalStats()
        assert journal.balance() == 10000.0

    def test_create_strategy_becomes_current(self, journal):
        strategy = journal.create_strategy("  Scalping ", "5000")
        assert strategy.name == "Scalping"
        assert strategy.starting_balance == 5000.0
        assert journal.current_strategy == strategy

    @pytest.mark.parametrize("raw", [None, "", "0", "abc"])
    def test_create_strategy_default_balance(self, journal, raw):
        assert journal.create_strategy("Swing", raw).starting_balance == 10000.0

    def test_create_strategy_requires_name(self, journal):
        with pytest.raises(MissingDataError):
            journal.create_strategy("   ")

    def test_switch_strategy(self, journal):
        first = journal.create_strategy("First")
        journal.create_strategy("Second")
        assert journal.switch_strategy(first.id) == first
        assert journal.current_strategy_id == first.id

    def test_switch_unknown_strategy(self, journal):
        with pytest.raises(StrategyNotFoundError) as exc_info:
            journal.switch_strategy("missing")
        assert exc_info.value.strategy_id == "missing"

    def test_delete_current_strategy_selects_first_remaining(self, journal):
        first = journal.create_strategy("First")
        second = journal.create_strategy("Second")
        journal.delete_strategy(second.id)
        assert journal.current_strategy_id == first.id

    def test_delete_last_strategy(self, journal, journal_store):
        only = journal.create_strategy("Only")
        journal.delete_strategy(only.id)
        assert journal.current_strategy is None
        assert journal_store.get_current_strategy() is None

    def test_delete_unknown_strategy(self, journal):
        with pytest.raises(StrategyNotFoundError):
            journal.delete_strategy("missing")


class TestTrades:
    """Trade mutations on the current strategy"""

    def test_add_trade_requires_strategy(self, journal, sample_trade_form):
        with pytest.raises(NoActiveStrategyError):
            journal.add_trade(sample_trade_form)

    def test_add_trade_prepends(self, journal, sample_trade_form):
        journal.create_strategy("Main")
        first = journal.add_trade(sample_trade_form)
        second = journal.add_trade({**sample_trade_form, "symbol": "GBPUSD"})

        assert [trade.id for trade in journal.current_strategy.trades] == [second.id, first.id]

    def test_trades_belong_to_their_strategy(self, journal, sample_trade_form):
        first = journal.create_strategy("First")
        journal.add_trade(sample_trade_form)
        journal.create_strategy("Second")

        assert journal.list_trades() == []
        journal.switch_strategy(first.id)
        assert len(journal.list_trades()) == 1

    def test_update_trade_keeps_identity_and_position(self, journal, sample_trade_form):
        journal.create_strategy("Main")
        original = journal.add_trade(sample_trade_form)
        journal.add_trade(sample_trade_form)

        updated = journal.update_trade(original.id, {**sample_trade_form, "exitPrice": "1.0950"})

        assert updated.id == original.id
        assert updated.created_at == original.created_at
        assert updated.profit_loss == pytest.approx(-500.0)
        assert journal.current_strategy.trades[1] == updated

    def test_delete_trade(self, journal, sample_trade_form):
        journal.create_strategy("Main")
        trade = journal.add_trade(sample_trade_form)
        assert journal.delete_trade(trade.id) == trade
        assert journal.current_strategy.trades == ()

    def test_unknown_trade(self, journal):
        strategy = journal.create_strategy("Main")
        with pytest.raises(TradeNotFoundError) as exc_info:
            journal.get_trade("missing")
        assert exc_info.value.strategy_id == strategy.id

    def test_invalid_form_leaves_journal_unchanged(self, journal, sample_trade_form):
        journal.create_strategy("Main")
        with pytest.raises(MissingDataError):
            journal.add_trade({**sample_trade_form, "symbol": ""})
        assert journal.current_strategy.trades == ()

    def test_stats_and_balance(self, journal, sample_trade_form):
        journal.create_strategy("Main", "2000")
        journal.add_trade(sample_trade_form)
        journal.add_trade({**sample_trade_form, "date": "", "isNoTrade": True}, today=date(2024, 3, 16))

        stats = journal.stats(reference_month=date(2024, 3, 1))
        assert stats.total_trades == 1
        assert stats.net_pl == pytest.approx(500.0)
        assert journal.balance() == pytest.approx(2500.0)

    def test_month_calendar(self, journal, sample_trade_form):
        journal.create_strategy("Main")
        journal.add_trade(sample_trade_form)
        calendar = journal.month_calendar(2024, 3, today=date(2024, 3, 1))
        assert calendar.days[14].pl == pytest.approx(500.0)

    def test_mutations_are_logged(self, journal, sample_trade_form):
        journal.logger = Mock()
        journal.create_strategy("Main")
        journal.add_trade(sample_trade_form)

        journal.logger.info.assert_any_call(
            "Strategy created",
            strategy_id=journal.current_strategy_id,
            name="Main",
            balance=10000.0,
        )
        journal.logger.bind.assert_called_once()
        assert journal.logger.bind.call_args.kwargs["action"] == "added"


class TestTradeList:
    """Filtering and sorting of the trade list"""

    @pytest.fixture
    def trades(self, make_trade):
        from fxjournal_app.data.models import TradeDirection
        return [
            make_trade(10.0, date(2024, 3, 10), symbol="EURUSD", notes="breakout"),
            make_trade(-30.0, date(2024, 3, 12), symbol="USDJPY", direction=TradeDirection.SELL),
            make_trade(55.0, date(2024, 1, 5), symbol="XAUUSD", notes="Gold news spike"),
        ]

    def test_filter_direction(self, trades):
        assert [t.symbol for t in filter_trades(trades, "SELL")] == ["USDJPY"]
        assert len(filter_trades(trades, "ALL")) == 3

    def test_search_matches_symbol_and_notes(self, trades):
        assert [t.symbol for t in filter_trades(trades, search="jpy")] == ["USDJPY"]
        assert [t.symbol for t in filter_trades(trades, search="NEWS")] == ["XAUUSD"]

    def test_date_range(self, trades):
        result = filter_trades(trades, date_range="month", today=date(2024, 3, 20))
        assert [t.symbol for t in result] == ["EURUSD", "USDJPY"]
        assert filter_trades(trades, date_range="today", today=date(2024, 3, 12))[0].symbol == "USDJPY"

    @pytest.mark.parametrize("sort_by,expected", [
        ("date-desc", ["USDJPY", "EURUSD", "XAUUSD"]),
        ("date-asc", ["XAUUSD", "EURUSD", "USDJPY"]),
        ("pl-desc", ["XAUUSD", "EURUSD", "USDJPY"]),
        ("pl-asc", ["USDJPY", "EURUSD", "XAUUSD"]),
        ("bogus", ["USDJPY", "EURUSD", "XAUUSD"]),
    ])
    def test_sort(self, trades, sort_by, expected):
        assert [t.symbol for t in sort_trades(trades, sort_by)] == expected

    def test_list_trades_uses_configured_defaults(self, journal_store, sample_trade_form):
        config = DefaultConfig(
            journal=JournalParams(default_sort="pl-asc"),
            storage=get_default_config().storage,
            display=get_default_config().display,
            logging=get_default_config().logging,
        )
        journal = TradeJournal(journal_store, config)
        journal.create_strategy("Main")
        journal.add_trade(sample_trade_form)
        journal.add_trade({**sample_trade_form, "exitPrice": "1.0900"})

        assert [t.profit_loss for t in journal.list_trades()] == pytest.approx([-1000.0, 500.0])


class TestDisplayPrice:
    """Price formatting with the configured fallback precision"""

    def test_known_symbol(self, journal):
        assert journal.display_price("EURUSD", 1.1) == "1.1000"

    def test_unknown_symbol_uses_config(self, journal_store):
        defaults = get_default_config()
        config = DefaultConfig(
            journal=defaults.journal,
            storage=defaults.storage,
            display=DisplayParams(unknown_price_decimals=2),
            logging=defaults.logging,
        )
        assert TradeJournal(journal_store, config).display_price("FOOBAR", 1.23456) == "1.23"
