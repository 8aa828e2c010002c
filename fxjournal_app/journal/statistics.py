"""
Dashboard statistics over a strategy's trades.

No-trade entries are excluded. Streaks are counted in chronological order,
and break-even trades neither extend nor break a streak.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from ..data.models import Trade
from ..utils.time import same_month, today_local


class StreakKind(str, Enum):
    WIN = "win"
    LOSS = "loss"
    NONE = "none"


@dataclass(frozen=True)
class Streak:
    """Run of consecutive winning or losing trades ending at the latest trade."""
    kind: StreakKind = StreakKind.NONE
    count: int = 0


@dataclass(frozen=True)
class JournalStats:
    """Aggregate figures shown on the dashboard and trade list."""
    net_pl: float = 0.0
    total_profit: float = 0.0
    total_loss: float = 0.0
    profit_factor: float = 0.0
    current_streak: Streak = Streak()
    monthly_profit: float = 0.0
    monthly_days: int = 0
    win_rate: float = 0.0           # Percentage, 0-100
    expectancy: float = 0.0         # Average P/L per trade
    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0

    def has_trades(self) -> bool:
        """True when at least one real trade was counted."""
        return self.total_trades > 0


def chronological(trades: Iterable[Trade]) -> list[Trade]:
    """Trades ordered by trade date, then creation time."""
    return sorted(trades, key=lambda trade: (trade.trade_date, trade.created_at))


def current_streak(trades: Iterable[Trade]) -> Streak:
    """
    Streak at the end of a chronological sequence of trades.

    Args:
        trades: Trades in chronological order

    Returns:
        Kind and length of the final run
    """
    kind = StreakKind.NONE
    count = 0

    for trade in trades:
        if trade.profit_loss > 0:
            outcome = StreakKind.WIN
        elif trade.profit_loss < 0:
            outcome = StreakKind.LOSS
        else:
            continue

        if outcome is kind:
            count += 1
        else:
            kind = outcome
            count = 1

    return Streak(kind=kind, count=count)


def compute_stats(trades: Iterable[Trade], reference_month: Optional[date] = None) -> JournalStats:
    """
    Compute dashboard statistics.

    Args:
        trades: Trades of one strategy, in any order
        reference_month: Any day in the month used for the monthly figures;
            defaults to today

    Returns:
        JournalStats; all zeros when there are no real trades
    """
    actual = chronological(trade for trade in trades if trade.counts_in_stats)
    if not actual:
        return JournalStats()

    if reference_month is None:
        reference_month = today_local()

    wins = [trade.profit_loss for trade in actual if trade.profit_loss > 0]
    losses = [-trade.profit_loss for trade in actual if trade.profit_loss < 0]

    net_pl = sum(trade.profit_loss for trade in actual)
    total_profit = sum(wins)
    total_loss = sum(losses)

    monthly = [trade for trade in actual if same_month(trade.trade_date, reference_month)]

    return JournalStats(
        net_pl=net_pl,
        total_profit=total_profit,
        total_loss=total_loss,
        profit_factor=total_profit if total_loss == 0 else total_profit / total_loss,
        current_streak=current_streak(actual),
        monthly_profit=sum(trade.profit_loss for trade in monthly),
        monthly_days=len({trade.trade_date for trade in monthly}),
        win_rate=len(wins) / len(actual) * 100,
        expectancy=net_pl / len(actual),
        total_trades=len(actual),
        winning_trades=len(wins),
        losing_trades=len(losses),
    )


def account_balance(starting_balance: float, stats: JournalStats) -> float:
    """Starting balance plus realised net P/L."""
    return starting_balance + stats.net_pl
