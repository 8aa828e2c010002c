"""Month calendar with per-day P/L, laid out Sunday-first."""

from calendar import monthrange
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..data.models import Trade
from ..utils.time import today_local

WEEKDAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class CalendarDay:
    """One day cell of the month grid."""
    day: date
    trades: tuple[Trade, ...]
    pl: float
    is_today: bool = False

    @property
    def has_trades(self) -> bool:
        return bool(self.trades)

    @property
    def tone(self) -> str:
        """"positive", "negative" or "" for the heat-map colour."""
        if self.pl > 0:
            return "positive"
        if self.pl < 0:
            return "negative"
        return ""

    @property
    def trade_count_label(self) -> str:
        count = len(self.trades)
        return f"{count} trade{'s' if count > 1 else ''}"


@dataclass(frozen=True)
class MonthCalendar:
    """A month of day cells preceded by blank cells up to the first weekday."""
    year: int
    month: int
    leading_blanks: int
    days: tuple[CalendarDay, ...]

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    @property
    def total_pl(self) -> float:
        return sum(cell.pl for cell in self.days)

    def weeks(self) -> list[list[Optional[CalendarDay]]]:
        """Grid rows of seven cells; None marks a blank cell."""
        cells: list[Optional[CalendarDay]] = [None] * self.leading_blanks + list(self.days)
        cells += [None] * (-len(cells) % 7)
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move a (year, month) pair by delta months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def build_month(
    trades: Iterable[Trade],
    year: int,
    month: int,
    today: Optional[date] = None,
) -> MonthCalendar:
    """
    Build the calendar for one month.

    Every entry dated in the month is placed on its day, no-trade entries
    included; each day's P/L is the sum of its trades.

    Args:
        trades: Trades of one strategy
        year: Calendar year
        month: Calendar month, 1-12
        today: Day to flag as today, defaults to the current date

    Returns:
        MonthCalendar for the requested month
    """
    if today is None:
        today = today_local()

    first_weekday, days_in_month = monthrange(year, month)

    by_day: dict[date, list[Trade]] = {}
    for trade in trades:
        if trade.trade_date.year == year and trade.trade_date.month == month:
            by_day.setdefault(trade.trade_date, []).append(trade)

    days = []
    for number in range(1, days_in_month + 1):
        current = date(year, month, number)
        day_trades = tuple(by_day.get(current, ()))
        days.append(CalendarDay(
            day=current,
            trades=day_trades,
            pl=sum(trade.profit_loss for trade in day_trades),
            is_today=current == today,
        ))

    return MonthCalendar(
        year=year,
        month=month,
        # monthrange counts Monday as 0; the grid starts on Sunday
        leading_blanks=(first_weekday + 1) % 7,
        days=tuple(days),
    )
