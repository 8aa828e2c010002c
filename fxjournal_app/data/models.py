"""
Canonical data models for journal records.

Trades and strategies are immutable; edits produce new instances. The
serialized form uses the camelCase keys of the stored JSON records.
"""

import math
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from typing import Any, Optional

from ..calculator.pip_value import compute_pip_value, pips_from_pl
from ..calculator.pnl import is_open_exit
from ..utils.time import format_trade_date, parse_trade_date

NO_TRADE_SYMBOL = "NO-TRADE"


class TradeDirection(str, Enum):
    """Trade side as submitted by the form."""
    BUY = "BUY"
    SELL = "SELL"

    @property
    def label(self) -> str:
        return "LONG" if self is TradeDirection.BUY else "SHORT"


def coerce_float(value: Any, default: float = 0.0) -> float:
    """Read a stored number leniently; missing, blank or NaN values give the default."""
    if value is None or value == "":
        return default
    try:
        result = float(value)
    except (TypeError, ValueError):
        return default
    return default if math.isnan(result) else result


@dataclass(frozen=True)
class Trade:
    """One journal entry, including "no trade" days."""
    id: str
    trade_date: date
    symbol: str
    direction: TradeDirection
    lot_size: float
    entry_price: float
    exit_price: float           # 0.0 while the trade is open
    profit_loss: float          # Cached at create/edit time
    pip_value: float            # Cached at create/edit time
    notes: str = ""
    risk_reward_ratio: str = ""
    screenshot: Optional[str] = None
    is_no_trade: bool = False
    created_at: str = ""

    @property
    def is_open(self) -> bool:
        """True while no exit price has been recorded."""
        return not self.is_no_trade and is_open_exit(self.exit_price)

    @property
    def counts_in_stats(self) -> bool:
        """No-trade entries are shown in lists but excluded from statistics."""
        return not self.is_no_trade and self.symbol != NO_TRADE_SYMBOL

    @property
    def is_win(self) -> bool:
        """Card colouring rule: break-even counts as a win."""
        return self.profit_loss >= 0

    @property
    def pips(self) -> float:
        """P/L expressed in pips."""
        return pips_from_pl(self.profit_loss, self.pip_value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON record layout."""
        return {
            "id": self.id,
            "date": format_trade_date(self.trade_date),
            "symbol": self.symbol,
            "type": self.direction.value,
            "quantity": self.lot_size,
            "entryPrice": self.entry_price,
            "exitPrice": self.exit_price,
            "notes": self.notes,
            "screenshot": self.screenshot,
            "riskRewardRatio": self.risk_reward_ratio,
            "isNoTrade": self.is_no_trade,
            "profitLoss": self.profit_loss,
            "pipValue": self.pip_value,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Trade":
        """
        Rebuild a trade from a stored record.

        Older records may lack pipValue; it is recomputed from the symbol and
        lot size in that case.
        """
        symbol = str(data.get("symbol", ""))
        lot_size = coerce_float(data.get("quantity"))
        is_no_trade = bool(data.get("isNoTrade", False)) or symbol == NO_TRADE_SYMBOL

        if "pipValue" in data:
            pip_value = coerce_float(data.get("pipValue"))
        elif is_no_trade:
            pip_value = 0.0
        else:
            pip_value = compute_pip_value(symbol, lot_size)

        direction = str(data.get("type", "BUY")).upper()

        return cls(
            id=str(data["id"]),
            trade_date=parse_trade_date(data["date"]),
            symbol=symbol,
            direction=TradeDirection.BUY if direction == "BUY" else TradeDirection.SELL,
            lot_size=lot_size,
            entry_price=coerce_float(data.get("entryPrice")),
            exit_price=coerce_float(data.get("exitPrice")),
            profit_loss=coerce_float(data.get("profitLoss")),
            pip_value=pip_value,
            notes=data.get("notes") or "",
            risk_reward_ratio=data.get("riskRewardRatio") or "",
            screenshot=data.get("screenshot"),
            is_no_trade=is_no_trade,
            created_at=data.get("createdAt") or "",
        )


@dataclass(frozen=True)
class Strategy:
    """A named bucket of trades with its own starting balance."""
    id: str
    name: str
    starting_balance: float
    trades: tuple[Trade, ...] = field(default_factory=tuple)
    created_at: str = ""

    def with_trades(self, trades: list[Trade]) -> "Strategy":
        """Copy of this strategy holding the given trades."""
        return replace(self, trades=tuple(trades))

    def find_trade(self, trade_id: str) -> Optional[Trade]:
        """Trade with the given id, None if absent."""
        for trade in self.trades:
            if trade.id == trade_id:
                return trade
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the stored JSON record layout."""
        return {
            "id": self.id,
            "name": self.name,
            "startingBalance": self.starting_balance,
            "trades": [trade.to_dict() for trade in self.trades],
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], default_balance: float = 10000.0) -> "Strategy":
        """Rebuild a strategy and its trades from a stored record."""
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            starting_balance=coerce_float(data.get("startingBalance"), default_balance),
            trades=tuple(Trade.from_dict(item) for item in data.get("trades") or []),
            created_at=data.get("createdAt") or "",
        )
