#!/usr/bin/env python3
"""
Basic Usage Example - FX Trading Journal

This script walks through a short journaling session on a throwaway
database. It shows how to:
- Create strategies with their own starting balance
- Log closed trades, an open trade and a no-trade day
- Filter and sort the trade list
- Read the dashboard statistics and the month calendar

Run: python examples/basic_usage.py
"""

import tempfile
from datetime import date
from pathlib import Path

# Configure logging before the journal modules create their loggers
from fxjournal_app.config.loader import ConfigLoader
from fxjournal_app.logging import configure_from_params
LOGGING = ConfigLoader.create().load().logging
configure_from_params(LOGGING)

from fxjournal_app.calculator import format_currency, format_signed_pl
from fxjournal_app.data.parsers import live_preview
from fxjournal_app.instruments import search_pairs
from fxjournal_app.journal.service import TradeJournal

SAMPLE_TRADES = [
    {"date": "2024-03-04", "symbol": "EURUSD", "type": "BUY", "quantity": "1.0",
     "entryPrice": "1.0850", "exitPrice": "1.0900", "notes": "London breakout",
     "riskRewardRatio": "1:2"},
    {"date": "2024-03-05", "symbol": "USDJPY", "type": "SELL", "quantity": "0.5",
     "entryPrice": "150.20", "exitPrice": "150.50", "notes": "Faded BoJ headline"},
    {"date": "2024-03-06", "symbol": "XAUUSD", "type": "BUY", "quantity": "0.2",
     "entryPrice": "2120.50", "exitPrice": "2135.00", "notes": "Gold trend day"},
    {"date": "2024-03-07", "symbol": "US30", "type": "SELL", "quantity": "2",
     "entryPrice": "38900", "exitPrice": "38750"},
    {"date": "2024-03-08", "symbol": "GBPUSD", "type": "BUY", "quantity": "1",
     "entryPrice": "1.2790", "exitPrice": "", "notes": "Still running"},
    {"date": "2024-03-11", "isNoTrade": True, "notes": "CPI tomorrow, stayed flat"},
]


def print_trade(journal: TradeJournal, trade) -> None:
    """Print one trade line the way the trade list shows it."""
    if trade.is_no_trade:
        print(f"   {trade.trade_date}  NO TRADE  {trade.notes}")
        return
    exit_price = "open" if trade.is_open else journal.display_price(trade.symbol, trade.exit_price)
    print(f"   {trade.trade_date}  {trade.symbol:<7} {trade.direction.label:<5} "
          f"{journal.display_price(trade.symbol, trade.entry_price)} -> {exit_price:<10} "
          f"{format_signed_pl(trade.profit_loss):>10}  ({trade.pips:.1f} pips)")


def main() -> None:
    """Run the demo session."""
    print("🚀 FX Trading Journal Demo")
    print("=" * 50)

    workdir = Path(tempfile.mkdtemp(prefix="fxjournal-demo-"))
    config = ConfigLoader.create().load({"storage": {"db_path": str(workdir / "demo.db")}})

    journal = TradeJournal.open(config)
    print(f"1. Opened journal at {config.storage.db_path}")
    print()

    print("2. Looking up pairs...")
    for option in search_pairs("jpy"):
        print(f"   {option.value:<7} {option.description}")
    info, running_pl = live_preview(SAMPLE_TRADES[0])
    print(f"   Preview: {info.name} ({info.type}) -> {format_signed_pl(running_pl)}")
    print()

    print("3. Creating strategies...")
    breakout = journal.create_strategy("Breakouts", "25000")
    journal.create_strategy("Mean Reversion")
    journal.switch_strategy(breakout.id)
    for strategy in journal.list_strategies():
        print(f"   {strategy.name}: starting balance {format_currency(strategy.starting_balance)}")
    print()

    print("4. Logging trades on 'Breakouts'...")
    for form in SAMPLE_TRADES:
        journal.add_trade(form)
    for trade in journal.list_trades():
        print_trade(journal, trade)
    print()

    print("5. Winning trades only, best first...")
    winners = [t for t in journal.list_trades(sort_by="pl-desc") if t.counts_in_stats and t.profit_loss > 0]
    for trade in winners:
        print_trade(journal, trade)
    print()

    print("6. Dashboard statistics (March 2024)...")
    stats = journal.stats(reference_month=date(2024, 3, 1))
    print(f"   Net P/L:        {format_signed_pl(stats.net_pl)}")
    print(f"   Account:        {format_currency(journal.balance())}")
    print(f"   Profit factor:  {stats.profit_factor:.2f}")
    print(f"   Win rate:       {stats.win_rate:.1f}%")
    print(f"   Expectancy:     {format_signed_pl(stats.expectancy)}")
    print(f"   Streak:         {stats.current_streak.count} {stats.current_streak.kind.value}")
    print(f"   Monthly profit: {format_signed_pl(stats.monthly_profit)} over {stats.monthly_days} days")
    print()

    print("7. Calendar...")
    calendar = journal.month_calendar(2024, 3, today=date(2024, 3, 15))
    print(f"   {calendar.title}")
    print("   " + " ".join(f"{name:>9}" for name in ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")))
    for week in calendar.weeks():
        cells = []
        for cell in week:
            if cell is None:
                cells.append(" " * 9)
            elif cell.has_trades:
                cells.append(f"{cell.day.day:>2}{cell.pl:>+7.0f}")
            else:
                cells.append(f"{cell.day.day:>9}")
        print("   " + " ".join(cells))
    print()

    print("✅ Demo completed successfully!")
    print(f"   Journal database left at {workdir}")


if __name__ == "__main__":
    main()
