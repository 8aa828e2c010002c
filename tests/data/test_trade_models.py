"""Tests for trade and strategy records"""

import dataclasses
import pytest
from datetime import date

from fxjournal_app.data.models import (
    NO_TRADE_SYMBOL,
    Strategy,
    Trade,
    TradeDirection,
    coerce_float,
)


class TestTrade:
    """Trade record behaviour"""

    def test_trade_is_immutable(self, make_trade):
        trade = make_trade(profit_loss=10.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            trade.profit_loss = 20.0

    def test_pips(self, make_trade):
        assert make_trade(profit_loss=50.0).pips == pytest.approx(5.0)

    def test_win_includes_break_even(self, make_trade):
        assert make_trade(profit_loss=0.0).is_win
        assert not make_trade(profit_loss=-0.01).is_win

    def test_no_trade_excluded_from_stats(self, make_trade):
        assert make_trade(is_no_trade=True).counts_in_stats is False
        assert make_trade(symbol=NO_TRADE_SYMBOL).counts_in_stats is False
        assert make_trade().counts_in_stats is True

    def test_is_open(self, make_trade):
        trade = dataclasses.replace(make_trade(), exit_price=0.0)
        assert trade.is_open
        assert not make_trade().is_open

    def test_direction_label(self):
        assert TradeDirection.BUY.label == "LONG"
        assert TradeDirection.SELL.label == "SHORT"
        assert TradeDirection.BUY == "BUY"

    def test_to_dict_uses_record_keys(self, make_trade):
        data = make_trade(profit_loss=12.5, notes="note").to_dict()
        assert data["date"] == "2024-03-15"
        assert data["type"] == "BUY"
        assert data["quantity"] == 1.0
        assert data["entryPrice"] == 1.1
        assert data["exitPrice"] == 1.2
        assert data["profitLoss"] == 12.5
        assert data["pipValue"] == 10.0
        assert data["isNoTrade"] is False
        assert data["notes"] == "note"

    def test_round_trip(self, make_trade):
        trade = make_trade(profit_loss=-42.0, direction=TradeDirection.SELL)
        assert Trade.from_dict(trade.to_dict()) == trade

    def test_from_dict_recomputes_missing_pip_value(self):
        trade = Trade.from_dict({
            "id": "1700000000000",
            "date": "2024-03-15",
            "symbol": "USDJPY",
            "type": "SELL",
            "quantity": 1,
            "entryPrice": 150.0,
            "exitPrice": 149.0,
            "notes": "",
            "profitLoss": "666.67",
            "createdAt": "2024-03-15T10:00:00.000Z",
        })
        assert trade.pip_value == pytest.approx(1000.0)
        assert trade.profit_loss == pytest.approx(666.67)
        assert trade.direction is TradeDirection.SELL
        assert trade.trade_date == date(2024, 3, 15)

    def test_from_dict_no_trade_record(self):
        trade = Trade.from_dict({
            "id": "1", "date": "2024-03-16", "symbol": "NO-TRADE", "type": "BUY",
            "quantity": 0, "entryPrice": 0, "exitPrice": 0, "notes": "No setup",
        })
        assert trade.is_no_trade
        assert trade.pip_value == 0.0


class TestCoerceFloat:
    """Lenient number reading for stored records"""

    def test_values(self):
        assert coerce_float("12.5") == 12.5
        assert coerce_float(None) == 0.0
        assert coerce_float("") == 0.0
        assert coerce_float("abc") == 0.0
        assert coerce_float(float("nan"), 7.0) == 7.0
        assert coerce_float(None, 10000.0) == 10000.0


class TestStrategy:
    """Strategy record behaviour"""

    def test_with_trades_returns_copy(self, make_trade):
        strategy = Strategy(id="s1", name="Breakouts", starting_balance=5000.0)
        updated = strategy.with_trades([make_trade()])
        assert strategy.trades == ()
        assert len(updated.trades) == 1

    def test_find_trade(self, make_trade):
        trade = make_trade()
        strategy = Strategy(id="s1", name="Breakouts", starting_balance=5000.0, trades=(trade,))
        assert strategy.find_trade(trade.id) == trade
        assert strategy.find_trade("missing") is None

    def test_round_trip(self, make_trade):
        strategy = Strategy(
            id="s1", name="Breakouts", starting_balance=5000.0,
            trades=(make_trade(profit_loss=1.0), make_trade(profit_loss=-2.0)),
            created_at="2024-01-01T00:00:00+00:00",
        )
        assert Strategy.from_dict(strategy.to_dict()) == strategy

    def test_from_dict_default_balance(self):
        strategy = Strategy.from_dict({"id": "s1", "name": "X", "trades": []})
        assert strategy.starting_balance == 10000.0
