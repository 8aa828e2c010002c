"""End-to-end journal tests across store reopen"""

import json
import sqlite3
import pytest
from datetime import date

from fxjournal_app.config.loader import ConfigLoader
from fxjournal_app.journal.service import TradeJournal
from fxjournal_app.persistence.journal_store import JournalStore, STRATEGIES_KEY


class TestJournalRoundTrip:
    """Journal state survives closing and reopening the store"""

    def test_reopen_restores_strategies_and_selection(self, tmp_path, sample_trade_form):
        db_path = str(tmp_path / "journal.db")

        journal = TradeJournal(JournalStore(db_path))
        first = journal.create_strategy("Scalping", "5000")
        journal.add_trade(sample_trade_form)
        second = journal.create_strategy("Swing")
        journal.add_trade({**sample_trade_form, "symbol": "XAUUSD", "quantity": "0.1",
                           "entryPrice": "1900", "exitPrice": "1910"})
        journal.switch_strategy(first.id)

        reopened = TradeJournal(JournalStore(db_path))

        assert [s.name for s in reopened.list_strategies()] == ["Scalping", "Swing"]
        assert reopened.current_strategy_id == first.id
        assert reopened.balance() == pytest.approx(5500.0)

        reopened.switch_strategy(second.id)
        gold = reopened.list_trades()[0]
        assert gold.profit_loss == pytest.approx(100.0)
        assert gold.pip_value == pytest.approx(10.0)

    def test_stored_layout(self, tmp_path, sample_trade_form):
        db_path = str(tmp_path / "journal.db")
        journal = TradeJournal(JournalStore(db_path))
        strategy = journal.create_strategy("Main")
        trade = journal.add_trade(sample_trade_form)

        conn = sqlite3.connect(db_path)
        raw = conn.execute(
            "SELECT value FROM journal_kv WHERE key = ?", (STRATEGIES_KEY,)
        ).fetchone()[0]
        conn.close()

        record = json.loads(raw)[strategy.id]
        assert record["name"] == "Main"
        assert record["startingBalance"] == 10000.0
        assert record["trades"][0]["id"] == trade.id
        assert record["trades"][0]["profitLoss"] == pytest.approx(500.0)
        assert record["trades"][0]["type"] == "BUY"

    def test_unknown_stored_selection_falls_back_to_first(self, tmp_path):
        store = JournalStore(str(tmp_path / "journal.db"))
        journal = TradeJournal(store)
        first = journal.create_strategy("First")
        journal.create_strategy("Second")
        store.set_current_strategy("gone")

        assert TradeJournal(store).current_strategy_id == first.id

    def test_open_with_loaded_config(self, tmp_path, sample_trade_form):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "settings.yaml").write_text(
            "journal:\n"
            "  default_starting_balance: 2500\n"
            "storage:\n"
            f"  db_path: {tmp_path / 'configured.db'}\n"
        )
        config = ConfigLoader.create(config_dir).load()

        journal = TradeJournal.open(config)
        journal.create_strategy("Main")
        journal.add_trade(sample_trade_form)

        assert (tmp_path / "configured.db").exists()
        assert journal.balance() == pytest.approx(3000.0)
        assert journal.list_trades(date_range="year", today=date(2024, 6, 1))[0].symbol == "EURUSD"
