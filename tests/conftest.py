"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date
from typing import Any, Dict

from fxjournal_app.data.models import Trade, TradeDirection
from fxjournal_app.journal.service import TradeJournal
from fxjournal_app.persistence.journal_store import JournalStore


@pytest.fixture
def sample_trade_form() -> Dict[str, Any]:
    """Sample trade form submission for testing."""
    return {
        "date": "2024-03-15",
        "symbol": "EURUSD",
        "type": "BUY",
        "quantity": "1.0",
        "entryPrice": "1.1000",
        "exitPrice": "1.1050",
        "notes": "London open breakout",
        "screenshot": None,
        "riskRewardRatio": "1:2",
        "isNoTrade": False,
    }


@pytest.fixture
def journal_store(tmp_path) -> JournalStore:
    """Journal store backed by a temporary database file."""
    return JournalStore(str(tmp_path / "test_journal.db"))


@pytest.fixture
def journal(journal_store) -> TradeJournal:
    """Empty journal on a temporary store."""
    return TradeJournal(journal_store)


@pytest.fixture
def make_trade():
    """Factory for trades with a given date and P/L."""
    counter = {"n": 0}

    def _make(profit_loss: float = 0.0, trade_date: date = date(2024, 3, 15),
              symbol: str = "EURUSD", direction: TradeDirection = TradeDirection.BUY,
              notes: str = "", is_no_trade: bool = False) -> Trade:
        counter["n"] += 1
        return Trade(
            id=f"t{counter['n']}",
            trade_date=trade_date,
            symbol=symbol,
            direction=direction,
            lot_size=1.0,
            entry_price=1.1,
            exit_price=1.2,
            profit_loss=profit_loss,
            pip_value=10.0,
            notes=notes,
            is_no_trade=is_no_trade,
            created_at=f"2024-01-01T00:00:{counter['n']:02d}+00:00",
        )

    return _make
